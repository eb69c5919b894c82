"""Network identifiers and provider capabilities."""

from enum import Enum


class NetworkId(Enum):
    """Regional networks a provider can be registered for."""

    SKANETRAFIKEN = "skanetrafiken"


class Capability(Enum):
    """Operations a provider may support."""

    SUGGEST_LOCATIONS = "suggest_locations"
    NEARBY_LOCATIONS = "nearby_locations"
    DEPARTURES = "departures"
    TRIPS = "trips"
