"""Network provider port."""

from collections.abc import Collection
from datetime import datetime
from typing import Any, Protocol

from skane_departures.domain.models import (
    Capability,
    Location,
    LocationType,
    NearbyLocationsResult,
    NetworkId,
    QueryDeparturesResult,
    QueryTripsResult,
    SuggestLocationsResult,
)


class NetworkProvider(Protocol):
    """Port implemented once per regional backend."""

    network: NetworkId

    def has_capability(self, capability: Capability) -> bool:
        """Tell whether the backend supports an operation."""
        ...

    def query_nearby_locations(
        self,
        types: Collection[LocationType],
        location: Location,
        max_distance: int = 0,
        max_locations: int = 0,
    ) -> NearbyLocationsResult:
        """Find locations of the given types near a location."""
        ...

    def suggest_locations(self, constraint: str) -> SuggestLocationsResult:
        """Suggest ranked locations matching free text."""
        ...

    def query_departures(
        self,
        station_id: str,
        time: datetime | None = None,
        max_departures: int = 0,
    ) -> QueryDeparturesResult:
        """Get departures for a station."""
        ...

    def query_trips(
        self,
        origin: Location,
        destination: Location,
        time: datetime | None = None,
        via: Location | None = None,
        **options: Any,
    ) -> QueryTripsResult:
        """Plan trips between two locations."""
        ...

    def query_more_trips(self, context: Any, later: bool) -> QueryTripsResult:
        """Page through a previous trip query."""
        ...
