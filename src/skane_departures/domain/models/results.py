"""Result envelopes returned by network providers."""

from dataclasses import dataclass, field
from enum import Enum

from skane_departures.domain.models.location import Location
from skane_departures.domain.models.result_header import ResultHeader
from skane_departures.domain.models.station_departures import StationDepartures


class NearbyLocationsStatus(Enum):
    OK = "ok"
    INVALID_ID = "invalid_id"
    SERVICE_DOWN = "service_down"


class SuggestLocationsStatus(Enum):
    OK = "ok"
    SERVICE_DOWN = "service_down"


class QueryDeparturesStatus(Enum):
    OK = "ok"
    INVALID_STATION = "invalid_station"
    SERVICE_DOWN = "service_down"


class QueryTripsStatus(Enum):
    OK = "ok"
    NO_TRIPS = "no_trips"
    UNSUPPORTED = "unsupported"
    SERVICE_DOWN = "service_down"


@dataclass(frozen=True)
class NearbyLocationsResult:
    """Locations near a coordinate, in feed order."""

    header: ResultHeader
    status: NearbyLocationsStatus
    locations: tuple[Location, ...] = ()


@dataclass(frozen=True, order=True)
class SuggestedLocation:
    """A location candidate with its rank; higher priority ranks first."""

    priority: int
    location: Location = field(compare=False)


@dataclass(frozen=True)
class SuggestLocationsResult:
    """Ranked candidates for a free-text query."""

    header: ResultHeader
    status: SuggestLocationsStatus
    suggested_locations: tuple[SuggestedLocation, ...] = ()

    @property
    def locations(self) -> list[Location]:
        """Candidate locations, highest ranked first."""
        ranked = sorted(self.suggested_locations, reverse=True)
        return [suggestion.location for suggestion in ranked]


@dataclass(frozen=True)
class QueryDeparturesResult:
    """Departures for a station.

    On success ``station_departures`` holds exactly one grouping.
    """

    header: ResultHeader
    status: QueryDeparturesStatus
    station_departures: tuple[StationDepartures, ...] = ()

    def find_station_departures(self, station_id: str) -> StationDepartures | None:
        """Return the grouping for a station id, if present."""
        for group in self.station_departures:
            if group.location.id == station_id:
                return group
        return None


@dataclass(frozen=True)
class QueryTripsResult:
    """Result of a trip query."""

    header: ResultHeader
    status: QueryTripsStatus
