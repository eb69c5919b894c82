"""Forward-only cursor over a streaming XML document.

Element names are matched on their local name, so ``soap:Envelope`` and
``{http://schemas.xmlsoap.org/soap/envelope/}Envelope`` are both ``Envelope``.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from skane_departures.domain.exceptions import ParseError

_Event = tuple[str, ET.Element]

CHUNK_SIZE = 8192


def local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


class XmlCursor:
    """Pull cursor positioned inside the most recently entered element.

    The next event is always either the start of a child element or the end
    of the current element.
    """

    def __init__(self, text: str, chunk_size: int = CHUNK_SIZE) -> None:
        self._parser = ET.XMLPullParser(events=("start", "end"))
        self._events = self._read_events(text, chunk_size)
        self._peeked: _Event | None = None
        self._exhausted = False
        self._path: list[str] = []

    def _read_events(self, text: str, chunk_size: int) -> Iterator[_Event]:
        try:
            for offset in range(0, len(text), chunk_size):
                self._parser.feed(text[offset : offset + chunk_size])
                yield from self._parser.read_events()
            self._parser.close()
            yield from self._parser.read_events()
        except ET.ParseError as e:
            raise ParseError(f"Malformed XML: {e}") from e

    @property
    def path(self) -> tuple[str, ...]:
        """Local names of the entered elements, outermost first."""
        return tuple(self._path)

    @property
    def current(self) -> str | None:
        return self._path[-1] if self._path else None

    def _peek(self) -> _Event | None:
        if self._peeked is None and not self._exhausted:
            self._peeked = next(self._events, None)
            self._exhausted = self._peeked is None
        return self._peeked

    def _next(self) -> _Event:
        event = self._peek()
        if event is None:
            raise ParseError(f"Unexpected end of document inside {self._describe()}")
        self._peeked = None
        return event

    def peek_name(self) -> str | None:
        """Local name of the next child element, or None if the current element ends."""
        event = self._peek()
        if event is None or event[0] != "start":
            return None
        return local_name(event[1].tag)

    def _describe(self) -> str:
        return "/".join(self._path) or "document"

    def _skip_rest(self) -> None:
        """Consume events up to and including the end of the element just started."""
        depth = 0
        while True:
            kind, _element = self._next()
            if kind == "start":
                depth += 1
            elif depth == 0:
                return
            else:
                depth -= 1

    def enter(self, name: str | None = None) -> str:
        """Descend into the next child element.

        Args:
            name: Required local name, or None to accept any element.

        Returns:
            Local name of the entered element.

        Raises:
            ParseError: If the next event is not the start of a matching element.
        """
        found = self.peek_name()
        if found is None or (name is not None and found != name):
            expected = f"<{name}>" if name else "an element"
            got = f"<{found}>" if found else "end of element"
            raise ParseError(f"Expected {expected} in {self._describe()}, got {got}")
        self._next()
        self._path.append(found)
        return found

    def opt_enter(self, name: str) -> bool:
        """Descend into the next child element only if it is named ``name``."""
        if self.peek_name() != name:
            return False
        self._next()
        self._path.append(name)
        return True

    def skip_exit(self, name: str | None = None) -> None:
        """Skip what is left of the current element and leave it."""
        if not self._path:
            raise ParseError("Cannot exit: no element entered")
        if name is not None and self._path[-1] != name:
            raise ParseError(f"Expected to exit <{name}>, but inside <{self._path[-1]}>")
        self._skip_rest()
        self._path.pop()

    def skip_to(self, name: str) -> bool:
        """Skip sibling elements until one named ``name`` is next.

        Returns:
            True if positioned before ``name``; False if the current element
            ended first (the end is not consumed).
        """
        while True:
            found = self.peek_name()
            if found is None:
                if self._peek() is None:
                    raise ParseError(f"Unexpected end of document inside {self._describe()}")
                return False
            if found == name:
                return True
            self._next()
            self._skip_rest()

    def value_tag(self, name: str) -> str:
        """Read the text of the next child element, which must be ``name``.

        Returns:
            Stripped text content; empty string for an empty element.
        """
        found = self.peek_name()
        if found != name:
            got = f"<{found}>" if found else "end of element"
            raise ParseError(f"Expected <{name}> in {self._describe()}, got {got}")
        _kind, element = self._next()
        self._skip_rest()
        return (element.text or "").strip()

    def opt_value_tag(self, name: str, default: str | None = None) -> str | None:
        """Read the next child element's text if it is named ``name``."""
        if self.peek_name() != name:
            return default
        return self.value_tag(name)
