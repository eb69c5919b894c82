"""HTTP transport port."""

from collections.abc import Mapping
from typing import Protocol


class HttpTransport(Protocol):
    """Port for performing a blocking HTTP GET."""

    def get_text(self, url: str, params: Mapping[str, str] | None = None) -> str:
        """Return the decoded response body or raise TransportError."""
        ...
