"""Parser for location elements (Point, NearestStopArea)."""

import logging

from skane_departures.adapters.skanetrafiken_api.constants import LOCATION_TYPES
from skane_departures.adapters.skanetrafiken_api.rt90 import GridPoint, grid_to_point
from skane_departures.adapters.skanetrafiken_api.xml_cursor import XmlCursor
from skane_departures.domain.models.location import Location, LocationType
from skane_departures.domain.models.point import Point

logger = logging.getLogger(__name__)


def location_type(value: str | None, default: LocationType) -> LocationType:
    """Map the feed's Type tag to a location type."""
    if not value:
        return default
    return LOCATION_TYPES.get(value, default)


def _parse_grid_value(value: str | None, tag: str) -> int:
    """Parse a grid component, degrading to 0 on absent or dirty data."""
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        logger.debug(f"Ignoring unparsable {tag} coordinate: {value!r}")
        return 0


def grid_coord(x: int, y: int) -> Point | None:
    """Convert feed X (northing) and Y (easting) to a point; (0, 0) means unknown."""
    if x == 0 and y == 0:
        return None
    return grid_to_point(GridPoint(northing=float(x), easting=float(y)))


def parse_location(cursor: XmlCursor, default_type: LocationType) -> Location:
    """Parse the children of an entered location element.

    Args:
        cursor: Cursor inside a Point or NearestStopArea element.
        default_type: Type used when the feed does not state one.

    Returns:
        Location; the id is kept only for stations.
    """
    location_id = cursor.value_tag("Id")
    name = cursor.value_tag("Name")
    loc_type = location_type(cursor.opt_value_tag("Type"), default_type)
    x = _parse_grid_value(cursor.opt_value_tag("X"), "X")
    y = _parse_grid_value(cursor.opt_value_tag("Y"), "Y")

    return Location(
        type=loc_type,
        id=(location_id or None) if loc_type is LocationType.STATION else None,
        coord=grid_coord(x, y),
        name=name or None,
    )
