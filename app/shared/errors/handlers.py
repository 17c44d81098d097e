"""
Centralized error handlers for FastAPI.

Maps every failure that escapes a route to a response envelope.
No failure reaches the client unmapped.

- ApplicationError: failed envelope at the error's own status.
- HTTP errors raised by routing (404, 405, ...): failed envelope at that status.
- Request validation errors: failed envelope at 422.
- Anything else: logged with its traceback, then mapped to a generic 500
  envelope carrying the raw message as ``data``. A failure caused by a
  name-resolution error is mapped to a 404 envelope sent at 400.
"""

import logging
import socket
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from app.domain.users.errors import ApplicationError
from app.shared.envelope import Envelope

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = (
    "We are unable to process your request at this time, please try again later."
)
VALIDATION_ERROR_MESSAGE = "Request validation failed"


def is_name_resolution_failure(exc: BaseException) -> bool:
    """Return True when the direct cause of ``exc`` is a DNS lookup failure."""
    if exc.__cause__ is not None or exc.__suppress_context__:
        cause = exc.__cause__
    else:
        cause = exc.__context__
    return isinstance(cause, socket.gaierror)


def map_application_error(exc: ApplicationError) -> tuple[Envelope, int]:
    """Build the failed envelope and transport status for an expected failure."""
    envelope = Envelope.failed_response(exc.message, exc.status_code)
    return envelope, exc.status_code


def map_unhandled_error(
    exc: BaseException, align_network_status: bool = False
) -> tuple[Envelope, int]:
    """Build the failed envelope and transport status for an unexpected failure.

    Args:
        exc: The failure that escaped the route.
        align_network_status: Send name-resolution failures at 404
            instead of 400.
    """
    if is_name_resolution_failure(exc):
        envelope = Envelope.failed_response(str(exc), HTTPStatus.NOT_FOUND)
        if align_network_status:
            return envelope, HTTPStatus.NOT_FOUND
        return envelope, HTTPStatus.BAD_REQUEST

    envelope = Envelope.failed_response(
        GENERIC_ERROR_MESSAGE, HTTPStatus.INTERNAL_SERVER_ERROR, data=str(exc)
    )
    return envelope, HTTPStatus.INTERNAL_SERVER_ERROR


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Catch-all for failures no exception handler claimed.

    Runs inside the exception handlers' reach, so only unexpected
    errors arrive here. Each one is logged once before mapping.
    """

    def __init__(self, app: ASGIApp, align_network_status: bool = False) -> None:
        super().__init__(app)
        self._align_network_status = align_network_status

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Pass the request through and map any escaping failure."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled error on %s %s: %s", request.method, request.url.path, exc
            )
            envelope, status_code = map_unhandled_error(
                exc, self._align_network_status
            )
            return envelope.to_response(status_code)


def register_error_handlers(app: FastAPI, align_network_status: bool = False) -> None:
    """Register the error boundary on the FastAPI application.

    Must be called before outer middleware (security headers) is added,
    so mapped error responses still pass through it.

    Args:
        app: The FastAPI application instance.
        align_network_status: See ``map_unhandled_error``.
    """

    @app.exception_handler(ApplicationError)
    async def handle_application_error(
        _request: Request, exc: ApplicationError
    ) -> JSONResponse:
        """Handle expected failures raised by use cases."""
        logger.warning("Application error (%d): %s", exc.status_code, exc.message)
        envelope, status_code = map_application_error(exc)
        return envelope.to_response(status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors such as unknown paths or wrong methods."""
        logger.warning("HTTP error (%d): %s", exc.status_code, exc.detail)
        envelope = Envelope.failed_response(str(exc.detail), exc.status_code)
        return envelope.to_response(headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed requests rejected by FastAPI."""
        messages = [error["msg"] for error in exc.errors()]
        logger.warning("Request validation failed: %s", messages)
        envelope = Envelope.failed_response(
            VALIDATION_ERROR_MESSAGE, HTTPStatus.UNPROCESSABLE_ENTITY, data=messages
        )
        return envelope.to_response()

    app.add_middleware(
        ErrorBoundaryMiddleware, align_network_status=align_network_status
    )
