"""Domain models for transit queries."""

from skane_departures.domain.models.departure import Departure, Position
from skane_departures.domain.models.line import Line, Product
from skane_departures.domain.models.location import Location, LocationType
from skane_departures.domain.models.network import Capability, NetworkId
from skane_departures.domain.models.point import Point
from skane_departures.domain.models.result_header import ResultHeader
from skane_departures.domain.models.results import (
    NearbyLocationsResult,
    NearbyLocationsStatus,
    QueryDeparturesResult,
    QueryDeparturesStatus,
    QueryTripsResult,
    QueryTripsStatus,
    SuggestedLocation,
    SuggestLocationsResult,
    SuggestLocationsStatus,
)
from skane_departures.domain.models.station_departures import StationDepartures

__all__ = [
    "Capability",
    "Departure",
    "Line",
    "Location",
    "LocationType",
    "NearbyLocationsResult",
    "NearbyLocationsStatus",
    "NetworkId",
    "Point",
    "Position",
    "Product",
    "QueryDeparturesResult",
    "QueryDeparturesStatus",
    "QueryTripsResult",
    "QueryTripsStatus",
    "ResultHeader",
    "StationDepartures",
    "SuggestedLocation",
    "SuggestLocationsResult",
    "SuggestLocationsStatus",
]
