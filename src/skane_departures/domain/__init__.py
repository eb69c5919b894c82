"""Domain layer - models, ports and exceptions."""

from skane_departures.domain.exceptions import (
    ParseError,
    RemoteFaultError,
    TransitError,
    TransportError,
    UnknownNetworkError,
)
from skane_departures.domain.models import (
    Departure,
    Line,
    Location,
    LocationType,
    Point,
    Product,
)
from skane_departures.domain.ports import HttpTransport, NetworkProvider

__all__ = [
    "Departure",
    "HttpTransport",
    "Line",
    "Location",
    "LocationType",
    "NetworkProvider",
    "ParseError",
    "Point",
    "Product",
    "RemoteFaultError",
    "TransitError",
    "TransportError",
    "UnknownNetworkError",
]
