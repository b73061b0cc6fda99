"""CORS policy for browser callers of the relay."""

from gemini_relay.config import NO_ORIGIN
from gemini_relay.logger import get_logger

logger = get_logger(__name__)

BASE_HEADERS = {
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "86400",  # cache preflight for a day
}


def cors_headers(origin, allowed_origins, extra=None):
    """
    Build the CORS header set for one response.

    ``origin`` is the request's Origin header (None or "" when absent). The
    allowed origin is reflected as-is, never wildcarded. When the origin is
    not allowed the Allow-Origin header is left out and the browser drops
    the response; the status code is not changed here.
    """
    headers = dict(BASE_HEADERS)
    if extra:
        headers.update(extra)

    if origin and origin in allowed_origins:
        headers["Access-Control-Allow-Origin"] = origin
    elif not origin and NO_ORIGIN in allowed_origins:
        headers["Access-Control-Allow-Origin"] = NO_ORIGIN
    else:
        logger.warning("Origin %s not in allowed origins list", origin or "<none>")

    return headers
