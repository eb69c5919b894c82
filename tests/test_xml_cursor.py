"""Tests for the streaming XML cursor."""

import pytest

from skane_departures.adapters.skanetrafiken_api.xml_cursor import XmlCursor, local_name
from skane_departures.domain.exceptions import ParseError

DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<ns:Root xmlns:ns="urn:test" xmlns="urn:default">
  <Header>
    <Code>0</Code>
    <Empty />
  </Header>
  <Items>
    <Item><Id>1</Id><Name> Malmö C </Name><Extra><Deep>x</Deep></Extra></Item>
    <Item><Id>2</Id><Name>Lund C</Name></Item>
  </Items>
  <Trailer>end</Trailer>
</ns:Root>
"""


def test_local_name_strips_namespace() -> None:
    """Given an ElementTree tag with namespace, when stripping, then the local name remains."""
    assert local_name("{urn:test}Root") == "Root"
    assert local_name("Root") == "Root"


class TestEnter:
    """Tests for entering elements."""

    def test_enter_matches_local_name_regardless_of_prefix(self) -> None:
        """Given a prefixed root, when entering by local name, then it succeeds."""
        cursor = XmlCursor(DOCUMENT)

        assert cursor.enter("Root") == "Root"
        assert cursor.path == ("Root",)

    def test_enter_without_name_accepts_any_element(self) -> None:
        """Given no name, when entering, then the next element is entered."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter()

        assert cursor.enter() == "Header"
        assert cursor.current == "Header"

    def test_enter_wrong_name_raises_parse_error(self) -> None:
        """Given a different next element, when entering by name, then ParseError is raised."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")

        with pytest.raises(ParseError, match="Expected <Items>"):
            cursor.enter("Items")

    def test_opt_enter_returns_false_without_consuming(self) -> None:
        """Given a different next element, when optionally entering, then nothing is consumed."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")

        assert cursor.opt_enter("Items") is False
        assert cursor.enter("Header") == "Header"


class TestValues:
    """Tests for reading leaf values."""

    def test_value_tag_returns_stripped_text(self) -> None:
        """Given a leaf element, when reading it, then its stripped text is returned."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")
        cursor.enter("Header")

        assert cursor.value_tag("Code") == "0"

    def test_value_tag_of_empty_element_is_empty_string(self) -> None:
        """Given an empty element, when reading it, then an empty string is returned."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")
        cursor.enter("Header")
        cursor.value_tag("Code")

        assert cursor.value_tag("Empty") == ""

    def test_value_tag_missing_raises_parse_error(self) -> None:
        """Given a missing required leaf, when reading it, then ParseError is raised."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")
        cursor.enter("Header")

        with pytest.raises(ParseError, match="Expected <Message>"):
            cursor.value_tag("Message")

    def test_opt_value_tag_returns_default_when_absent(self) -> None:
        """Given a missing optional leaf, when reading it, then the default is returned."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")
        cursor.enter("Header")

        assert cursor.opt_value_tag("Message", "none") == "none"
        assert cursor.value_tag("Code") == "0"

    def test_value_tag_skips_nested_children(self) -> None:
        """Given an element with children, when reading it as a leaf, then they are skipped."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")
        cursor.skip_to("Items")
        cursor.enter("Items")
        cursor.enter("Item")
        cursor.value_tag("Id")
        cursor.value_tag("Name")

        assert cursor.value_tag("Extra") == ""
        assert cursor.peek_name() is None


class TestSkipping:
    """Tests for skipping and exiting."""

    def test_repeated_children_with_skip_exit(self) -> None:
        """Given repeated elements, when looping with opt_enter/skip_exit, then all are read."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")
        cursor.skip_to("Items")
        cursor.enter("Items")

        names = []
        while cursor.opt_enter("Item"):
            cursor.value_tag("Id")
            names.append(cursor.value_tag("Name"))
            cursor.skip_exit("Item")

        assert names == ["Malmö C", "Lund C"]
        cursor.skip_exit("Items")
        assert cursor.value_tag("Trailer") == "end"

    def test_skip_to_returns_false_at_end_of_parent(self) -> None:
        """Given a name that is not a sibling, when skipping to it, then False is returned."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")
        cursor.enter("Header")

        assert cursor.skip_to("Nope") is False
        cursor.skip_exit("Header")
        assert cursor.peek_name() == "Items"

    def test_skip_exit_with_wrong_name_raises(self) -> None:
        """Given a mismatching name, when exiting, then ParseError is raised."""
        cursor = XmlCursor(DOCUMENT)
        cursor.enter("Root")
        cursor.enter("Header")

        with pytest.raises(ParseError, match="Expected to exit <Items>"):
            cursor.skip_exit("Items")

    def test_small_chunks_give_same_result(self) -> None:
        """Given a tiny feed chunk size, when reading, then values are unchanged."""
        cursor = XmlCursor(DOCUMENT, chunk_size=7)
        cursor.enter("Root")
        cursor.skip_to("Items")
        cursor.enter("Items")
        cursor.enter("Item")
        cursor.value_tag("Id")

        assert cursor.value_tag("Name") == "Malmö C"


class TestMalformedInput:
    """Tests for broken documents."""

    def test_unclosed_document_raises_parse_error(self) -> None:
        """Given a truncated document, when walking past the cut, then ParseError is raised."""
        cursor = XmlCursor("<Root><Header><Code>0</Code>")
        cursor.enter("Root")
        cursor.enter("Header")
        cursor.value_tag("Code")

        with pytest.raises(ParseError):
            cursor.skip_exit("Header")

    def test_mismatched_tags_raise_parse_error(self) -> None:
        """Given mismatched tags, when reading, then ParseError is raised."""
        cursor = XmlCursor("<Root><A></B></Root>")
        cursor.enter("Root")

        with pytest.raises(ParseError):
            cursor.value_tag("A")
