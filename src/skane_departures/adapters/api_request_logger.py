"""Request and response tracing for the feed, enabled with SKD_LOG_REQUESTS=true."""

import json
import logging
import os
from collections.abc import Mapping
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
BODY_EXCERPT_CHARS = 300


def should_log_requests() -> bool:
    """Check if request logging is enabled via SKD_LOG_REQUESTS environment variable."""
    return os.getenv("SKD_LOG_REQUESTS", "").lower() == "true"


def build_request_url(url: str, params: Mapping[str, str] | None) -> str:
    """Build the URL as sent, with parameters in sorted order."""
    if not params:
        return url
    query = urlencode(sorted(params.items()), safe="/:")
    return f"{url}&{query}" if "?" in url else f"{url}?{query}"


def _redact(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()
    }


def _excerpt(body: str) -> str:
    """First characters of a body on one line, for SOAP envelopes and error pages."""
    flat = " ".join(body.split())
    if len(flat) <= BODY_EXCERPT_CHARS:
        return flat
    return f"{flat[:BODY_EXCERPT_CHARS]}... ({len(body)} chars)"


def log_api_request(
    method: str,
    url: str,
    params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> None:
    """Log an outgoing request if SKD_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters.
        headers: Request headers, sensitive ones are redacted.
    """
    if not should_log_requests():
        return

    lines = [f"{method} {build_request_url(url, params)}"]
    if headers:
        lines.append(f"Headers: {json.dumps(_redact(headers), ensure_ascii=False)}")
    logger.info("API Request:\n" + "\n".join(lines))


def log_api_response(url: str, status_code: int, elapsed_seconds: float, body: str) -> None:
    """Log a received response if SKD_LOG_REQUESTS is enabled.

    Args:
        url: Request URL.
        status_code: HTTP status code.
        elapsed_seconds: Round trip time.
        body: Decoded response body; only an excerpt is logged.
    """
    if not should_log_requests():
        return

    logger.info(
        f"API Response: {status_code} from {url} in {elapsed_seconds * 1000:.0f} ms\n"
        f"Body: {_excerpt(body)}"
    )
