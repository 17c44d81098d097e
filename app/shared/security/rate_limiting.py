"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Protects against denial-of-service and resource abuse.
"""

from http import HTTPStatus

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.shared.envelope import Envelope

DEFAULT_RATE_LIMIT = "60/minute"
RATE_LIMIT_MESSAGE = "Rate limit exceeded"


def build_limiter(default_limit: str = DEFAULT_RATE_LIMIT) -> Limiter:
    """Create a limiter keyed by client address.

    Args:
        default_limit: Limit applied to every route, e.g. ``"60/minute"``.
    """
    return Limiter(key_func=get_remote_address, default_limits=[default_limit])


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a failed envelope.

    SlowAPIMiddleware calls this directly, so it must stay synchronous.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 envelope response naming the limit that was hit.
    """
    envelope = Envelope.failed_response(
        RATE_LIMIT_MESSAGE, HTTPStatus.TOO_MANY_REQUESTS, data=str(exc.detail)
    )
    return envelope.to_response()
