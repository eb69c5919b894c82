"""Geographic point domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """WGS84 position stored as integer micro-degrees."""

    lat_e6: int
    lon_e6: int

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> "Point":
        """Create a point from decimal degrees."""
        return cls(lat_e6=round(latitude * 1e6), lon_e6=round(longitude * 1e6))

    @property
    def latitude(self) -> float:
        return self.lat_e6 / 1e6

    @property
    def longitude(self) -> float:
        return self.lon_e6 / 1e6
