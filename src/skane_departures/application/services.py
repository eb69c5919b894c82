"""Application services (use cases) for transit queries."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from skane_departures.domain.models import (
    Location,
    LocationType,
    Point,
    QueryDeparturesStatus,
    StationDepartures,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from skane_departures.domain.ports import NetworkProvider


class TransitQueryService:
    """Service answering station and departure questions for one network."""

    def __init__(self, provider: "NetworkProvider") -> None:
        """Initialize with a network provider."""
        self._provider = provider

    def suggest_stations(self, query: str, limit: int = 10) -> list[Location]:
        """Stations matching free text, best match first."""
        result = self._provider.suggest_locations(query)
        stations = [loc for loc in result.locations if loc.type is LocationType.STATION]
        logger.debug(f"{len(stations)} of {len(result.locations)} suggestions are stations")
        return stations[:limit] if limit > 0 else stations

    def nearest_stations(
        self, latitude: float, longitude: float, max_distance: int = 0, limit: int = 10
    ) -> list[Location]:
        """Stations near a WGS84 position, nearest first as reported by the feed."""
        location = Location.coord_from(Point.from_degrees(latitude, longitude))
        result = self._provider.query_nearby_locations(
            {LocationType.STATION}, location, max_distance=max_distance, max_locations=limit
        )
        return list(result.locations)

    def departures(
        self, station_id: str, time: datetime | None = None, limit: int = 20
    ) -> StationDepartures:
        """Departures for a station.

        Raises:
            LookupError: If the network does not know the station.
        """
        result = self._provider.query_departures(station_id, time=time, max_departures=limit)
        if result.status is QueryDeparturesStatus.INVALID_STATION:
            raise LookupError(f"Unknown station: {station_id}")
        group = result.find_station_departures(station_id)
        if group is None:
            return StationDepartures(Location(type=LocationType.STATION, id=station_id), ())
        return group
