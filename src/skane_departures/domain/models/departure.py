"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from skane_departures.domain.models.line import Line
from skane_departures.domain.models.location import Location


@dataclass(frozen=True)
class Position:
    """Platform or stop point marker (e.g. "A", "3b")."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Position name must not be empty")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Departure:
    """Represents a single departure from a station."""

    planned_time: datetime
    line: Line
    destination: Location | None
    predicted_time: datetime | None = None
    position: Position | None = None
    message: str | None = None

    @property
    def time(self) -> datetime:
        """Best known departure time."""
        return self.predicted_time or self.planned_time

    @property
    def delay(self) -> timedelta | None:
        if self.predicted_time is None:
            return None
        return self.predicted_time - self.planned_time
