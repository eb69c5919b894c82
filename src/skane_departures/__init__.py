"""Query client for the Skånetrafiken Open API (v2.2)."""

__version__ = "0.1.0"
