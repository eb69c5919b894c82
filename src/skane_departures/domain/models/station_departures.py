"""Departures grouped by the station they leave from."""

from dataclasses import dataclass

from skane_departures.domain.models.departure import Departure
from skane_departures.domain.models.location import Location


@dataclass(frozen=True)
class StationDepartures:
    """Feed-ordered departures for one station."""

    location: Location
    departures: tuple[Departure, ...]
