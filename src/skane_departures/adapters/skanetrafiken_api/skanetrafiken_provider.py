"""Skånetrafiken network provider using the Open API v2.2 SOAP/XML feed."""

import logging
import sys
from collections.abc import Collection
from datetime import datetime
from typing import Any

import pytz

from skane_departures.adapters.skanetrafiken_api.constants import (
    NEAREST_STATION,
    QUERY_PAGE,
    SKANETRAFIKEN_BASE_URL,
    SKANETRAFIKEN_TIMEZONE,
    STATION_RESULTS,
    UNKNOWN_STATION_CODE,
)
from skane_departures.adapters.skanetrafiken_api.departure_parser import parse_departure
from skane_departures.adapters.skanetrafiken_api.location_parser import parse_location
from skane_departures.adapters.skanetrafiken_api.rt90 import point_to_grid
from skane_departures.adapters.skanetrafiken_api.soap_envelope import open_response
from skane_departures.adapters.skanetrafiken_api.xml_cursor import XmlCursor
from skane_departures.domain.exceptions import ParseError, RemoteFaultError
from skane_departures.domain.models import (
    Capability,
    Departure,
    Location,
    LocationType,
    NearbyLocationsResult,
    NearbyLocationsStatus,
    NetworkId,
    QueryDeparturesResult,
    QueryDeparturesStatus,
    QueryTripsResult,
    QueryTripsStatus,
    ResultHeader,
    StationDepartures,
    SuggestedLocation,
    SuggestLocationsResult,
    SuggestLocationsStatus,
)
from skane_departures.domain.ports.http_transport import HttpTransport
from skane_departures.domain.ports.network_provider import NetworkProvider

logger = logging.getLogger(__name__)

SUPPORTED_CAPABILITIES = frozenset(
    {Capability.SUGGEST_LOCATIONS, Capability.NEARBY_LOCATIONS, Capability.DEPARTURES}
)


def _enter_payload(cursor: XmlCursor, name: str) -> None:
    """Move past sibling elements into the payload element ``name``."""
    if not cursor.skip_to(name):
        raise ParseError(f"Missing <{name}> in response")
    cursor.enter(name)


def _limit(max_results: int) -> int:
    """Translate a 0-means-unlimited cap."""
    return max_results if max_results > 0 else sys.maxsize


class SkanetrafikenProvider(NetworkProvider):
    """Adapter for the Skånetrafiken Open API.

    Every query is one blocking GET. Coordinates are exchanged with the feed
    on the RT90 grid and with callers in WGS84.
    """

    network = NetworkId.SKANETRAFIKEN

    def __init__(
        self,
        transport: HttpTransport,
        base_url: str = SKANETRAFIKEN_BASE_URL,
        timezone: str = SKANETRAFIKEN_TIMEZONE,
    ) -> None:
        """Initialize with a transport.

        Args:
            transport: HTTP transport used for every request.
            base_url: API base URL, ending with a slash.
            timezone: Civil timezone of the feed's departure times.
        """
        self._transport = transport
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timezone = pytz.timezone(timezone)

    def _url(self, operation: str) -> str:
        return f"{self._base_url}{operation}"

    def _header(self) -> ResultHeader:
        return ResultHeader(network=self.network.value, server_product=self.network.name)

    def has_capability(self, capability: Capability) -> bool:
        """Tell whether the feed supports an operation; trips are not supported."""
        return capability in SUPPORTED_CAPABILITIES

    def query_nearby_locations(
        self,
        types: Collection[LocationType],
        location: Location,
        max_distance: int = 0,
        max_locations: int = 0,
    ) -> NearbyLocationsResult:
        """Find stations near a coordinate.

        The feed only answers coordinate lookups for stations; any other
        request gives an empty OK result without a network call.

        Args:
            types: Requested location types.
            location: A COORD location.
            max_distance: Search radius in meters, 0 for the feed default.
            max_locations: Maximum number of stations, 0 for unlimited.
        """
        if location.type is not LocationType.COORD or location.coord is None:
            logger.debug(f"Nearby lookup for {location.type.name} location is not supported")
            return NearbyLocationsResult(self._header(), NearbyLocationsStatus.OK)
        if LocationType.STATION not in types and LocationType.ANY not in types:
            logger.debug("Nearby lookup without station types is not supported")
            return NearbyLocationsResult(self._header(), NearbyLocationsStatus.OK)

        x, y = point_to_grid(location.coord).to_wire()
        params = {"x": str(x), "y": str(y)}
        if max_distance > 0:
            params["radius"] = str(max_distance)

        body = self._transport.get_text(self._url(NEAREST_STATION), params)
        cursor = open_response(body)
        _enter_payload(cursor, "NearestStopAreas")

        locations: list[Location] = []
        limit = _limit(max_locations)
        while len(locations) < limit and cursor.opt_enter("NearestStopArea"):
            locations.append(parse_location(cursor, LocationType.STATION))
            cursor.skip_exit("NearestStopArea")

        return NearbyLocationsResult(
            self._header(), NearbyLocationsStatus.OK, locations=tuple(locations)
        )

    def suggest_locations(self, constraint: str) -> SuggestLocationsResult:
        """Suggest locations for free text.

        The query is sent as both the "from" and "to" search terms; the
        "from" candidates are used. The first candidate gets the highest
        priority.
        """
        params = {"inpPointFr": constraint, "inpPointTo": constraint}

        body = self._transport.get_text(self._url(QUERY_PAGE), params)
        cursor = open_response(body)
        _enter_payload(cursor, "StartPoints")

        suggestions: list[SuggestedLocation] = []
        priority = sys.maxsize
        while cursor.opt_enter("Point"):
            location = parse_location(cursor, LocationType.ANY)
            cursor.skip_exit("Point")
            suggestions.append(SuggestedLocation(priority=priority, location=location))
            priority -= 1

        return SuggestLocationsResult(
            self._header(), SuggestLocationsStatus.OK, suggested_locations=tuple(suggestions)
        )

    def _departure_params(self, station_id: str, time: datetime | None) -> dict[str, str]:
        params = {"selPointFrKey": station_id}
        if time is not None:
            if time.tzinfo is not None:
                time = time.astimezone(self._timezone)
            params["inpDate"] = time.strftime("%Y-%m-%d")
            params["inpTime"] = time.strftime("%H:%M:%S")
        return params

    def query_departures(
        self,
        station_id: str,
        time: datetime | None = None,
        max_departures: int = 0,
    ) -> QueryDeparturesResult:
        """Get departures for a station.

        Args:
            station_id: Station id (e.g. "80000" for Malmö C).
            time: Requested time; None asks the feed for "now". Naive values
                are taken as feed local time.
            max_departures: Maximum number of departures, 0 for unlimited.

        Returns:
            Result with exactly one StationDepartures on success, or status
            INVALID_STATION if the feed does not know the station.

        Raises:
            RemoteFaultError: For any other remote fault.
        """
        params = self._departure_params(station_id, time)
        body = self._transport.get_text(self._url(STATION_RESULTS), params)

        try:
            cursor = open_response(body)
        except RemoteFaultError as e:
            if e.code == UNKNOWN_STATION_CODE:
                logger.info(f"Unknown station {station_id}: {e}")
                return QueryDeparturesResult(self._header(), QueryDeparturesStatus.INVALID_STATION)
            raise

        _enter_payload(cursor, "Lines")

        departures: list[Departure] = []
        limit = _limit(max_departures)
        while len(departures) < limit and cursor.opt_enter("Line"):
            departures.append(parse_departure(cursor, self.network.value, self._timezone))
            cursor.skip_exit("Line")

        station = Location(type=LocationType.STATION, id=station_id)
        return QueryDeparturesResult(
            self._header(),
            QueryDeparturesStatus.OK,
            station_departures=(StationDepartures(station, tuple(departures)),),
        )

    def query_trips(
        self,
        origin: Location,
        destination: Location,
        time: datetime | None = None,
        via: Location | None = None,
        **options: Any,
    ) -> QueryTripsResult:
        """Trip planning is not offered by this provider."""
        _ = time, via, options  # Unused - the feed has no trip search
        logger.debug(f"Trip query from {origin} to {destination} is not supported")
        return QueryTripsResult(self._header(), QueryTripsStatus.UNSUPPORTED)

    def query_more_trips(self, context: Any, later: bool) -> QueryTripsResult:
        """Trip planning is not offered by this provider."""
        _ = context, later
        return QueryTripsResult(self._header(), QueryTripsStatus.UNSUPPORTED)
