"""Rate limiter for outgoing API requests.

Provides per-API rate limiting to be nice to external APIs.
Uses a simple time-based approach with minimum delay between requests.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Rate limiter for outgoing API requests.

    Ensures a minimum delay between requests to a specific API.
    Thread-safe using threading.Lock.
    """

    # Class-level registry of rate limiters by API name
    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, api_name: str, min_delay_seconds: float = 1.0) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._last_request_time: float | None = None
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls, api_name: str, min_delay_seconds: float = 1.0) -> ApiRateLimiter:
        """Get or create a rate limiter instance for an API.

        This ensures all calls to the same API share the same rate limiter.

        Args:
            api_name: Name of the API.
            min_delay_seconds: Minimum delay between requests in seconds.

        Returns:
            Shared ApiRateLimiter instance for the API.
        """
        with cls._registry_lock:
            if api_name not in cls._instances:
                cls._instances[api_name] = cls(api_name, min_delay_seconds)
                logger.info(
                    f"Created rate limiter for {api_name} with {min_delay_seconds}s minimum delay"
                )
            return cls._instances[api_name]

    def acquire(self) -> None:
        """Acquire permission to make a request.

        Blocks until enough time has passed since the last request.
        """
        with self._lock:
            if self._last_request_time is not None:
                elapsed = time.monotonic() - self._last_request_time
                wait_time = self.min_delay_seconds - elapsed
                if wait_time > 0:
                    logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                    time.sleep(wait_time)

            self._last_request_time = time.monotonic()

    def __enter__(self) -> ApiRateLimiter:
        """Context manager entry - acquire rate limit."""
        self.acquire()
        return self

    def __exit__(self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object) -> None:
        """Context manager exit - nothing to do."""
