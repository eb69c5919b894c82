"""Domain exceptions raised by network providers."""


class TransitError(Exception):
    """Base exception for all provider failures."""


class ParseError(TransitError):
    """Raised when a response is malformed or structurally unexpected."""


class RemoteFaultError(TransitError):
    """Raised when the remote feed reports a non-zero status code."""

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message or None
        if self.message:
            super().__init__(f"Error {code}: {self.message}")
        else:
            super().__init__(f"Error {code}")


class TransportError(TransitError):
    """Raised when the HTTP round trip itself fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnknownNetworkError(TransitError):
    """Raised when no provider is registered for a network."""
