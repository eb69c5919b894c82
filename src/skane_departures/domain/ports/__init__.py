"""Ports (interfaces) for the ports-and-adapters architecture."""

from skane_departures.domain.ports.http_transport import HttpTransport
from skane_departures.domain.ports.network_provider import NetworkProvider

__all__ = [
    "HttpTransport",
    "NetworkProvider",
]
