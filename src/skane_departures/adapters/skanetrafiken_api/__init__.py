"""Skånetrafiken Open API adapters."""

from skane_departures.adapters.skanetrafiken_api.skanetrafiken_provider import (
    SkanetrafikenProvider,
)

__all__ = ["SkanetrafikenProvider"]
