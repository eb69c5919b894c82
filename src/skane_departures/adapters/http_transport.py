"""Blocking HTTP transport built on requests."""

import logging
import time
from collections.abc import Mapping

import requests

from skane_departures.adapters.api_rate_limiter import ApiRateLimiter
from skane_departures.adapters.api_request_logger import log_api_request, log_api_response
from skane_departures.adapters.config.app_config import AppConfig
from skane_departures.domain.exceptions import TransportError
from skane_departures.domain.ports.http_transport import HttpTransport

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "text/xml, application/xml",
}


class RequestsHttpTransport(HttpTransport):
    """HTTP transport performing one GET per call on a shared requests session."""

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        user_agent: str | None = None,
        session: requests.Session | None = None,
        rate_limiter: ApiRateLimiter | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout_seconds: Connect and read timeout per request.
            user_agent: Optional User-Agent header.
            session: Optional requests session, created if not given.
            rate_limiter: Optional limiter enforcing a delay between requests.
        """
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._headers = dict(DEFAULT_HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent
        self._rate_limiter = rate_limiter

    @classmethod
    def from_config(
        cls, config: AppConfig, api_name: str = "skanetrafiken"
    ) -> "RequestsHttpTransport":
        """Create a transport from application configuration."""
        rate_limiter = None
        if config.min_delay_seconds_between_calls > 0:
            rate_limiter = ApiRateLimiter.get_instance(
                api_name, config.min_delay_seconds_between_calls
            )
        return cls(
            timeout_seconds=config.http_timeout_seconds,
            user_agent=config.http_user_agent,
            rate_limiter=rate_limiter,
        )

    def _log_error_response(self, response: requests.Response, url: str) -> None:
        """Log error response details."""
        error_body = response.text[:500] if response.text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        server = response.headers.get("Server", "unknown")
        logger.error(
            f"API returned status {response.status_code} for {url}: "
            f"{error_body} (Content-Type: {content_type}, Server: {server})"
        )

    def get_text(self, url: str, params: Mapping[str, str] | None = None) -> str:
        """Perform a GET and return the decoded body.

        Args:
            url: Request URL.
            params: Query parameters, encoded by requests.

        Returns:
            Response body as text.

        Raises:
            TransportError: On connection problems, timeouts or non-2xx status.
        """
        if self._rate_limiter is not None:
            self._rate_limiter.acquire()

        log_api_request("GET", url, params=params, headers=self._headers)

        started = time.monotonic()
        try:
            response = self._session.get(
                url, params=params, headers=self._headers, timeout=self._timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if not response.ok:
            self._log_error_response(response, url)
            raise TransportError(
                f"GET {url} returned status {response.status_code}",
                status_code=response.status_code,
            )

        # requests falls back to ISO-8859-1 for text/xml without a charset
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        body = response.text
        log_api_response(url, response.status_code, time.monotonic() - started, body)
        return body

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()
