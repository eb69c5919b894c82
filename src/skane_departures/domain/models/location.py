"""Location domain model."""

from dataclasses import dataclass
from enum import Enum

from skane_departures.domain.models.point import Point


class LocationType(Enum):
    """Kind of place a location refers to."""

    STATION = "station"
    ADDRESS = "address"
    POI = "poi"
    ANY = "any"
    COORD = "coord"


@dataclass(frozen=True)
class Location:
    """A station, address, point of interest or bare coordinate.

    Only stations carry an identifier, and coordinate locations always carry
    a coordinate.
    """

    type: LocationType
    id: str | None = None
    coord: Point | None = None
    place: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.id is not None and self.type is not LocationType.STATION:
            raise ValueError(
                f"Only stations may carry an id, got {self.type.name} with '{self.id}'"
            )
        if self.type is LocationType.COORD and self.coord is None:
            raise ValueError("Coordinate locations require a coordinate")

    @classmethod
    def coord_from(cls, point: Point) -> "Location":
        """Create a bare coordinate location."""
        return cls(type=LocationType.COORD, coord=point)

    @property
    def has_coord(self) -> bool:
        return self.coord is not None

    def __str__(self) -> str:
        parts = [p for p in (self.place, self.name) if p]
        if parts:
            return ", ".join(parts)
        if self.id:
            return self.id
        if self.coord:
            return f"{self.coord.latitude:.6f},{self.coord.longitude:.6f}"
        return self.type.name
