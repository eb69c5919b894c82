"""Application layer - use cases."""

from skane_departures.application.services import TransitQueryService

__all__ = ["TransitQueryService"]
