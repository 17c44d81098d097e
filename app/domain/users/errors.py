"""
Domain errors for the users bounded context.

Errors raised here signal expected, handled failures.
They are mapped to response envelopes at the interface layer.
No framework imports allowed.
"""

from http import HTTPStatus
from typing import Any


class ApplicationError(Exception):
    """Expected request-level failure raised by business logic.

    Carries everything the error boundary needs to build a failed
    envelope without further context.

    Attributes:
        message: Human-readable summary.
        status_code: Status the response should carry. Standard codes become
            ``HTTPStatus`` members; any other integer is kept as is.
        errors: Individual error strings. Defaults to ``[message]``.
        data: Optional diagnostic payload.
    """

    def __init__(
        self,
        message: str,
        status_code: HTTPStatus | int = HTTPStatus.BAD_REQUEST,
        errors: list[str] | None = None,
        data: Any = None,
    ) -> None:
        self.message = message
        try:
            self.status_code: HTTPStatus | int = HTTPStatus(status_code)
        except ValueError:
            self.status_code = int(status_code)
        self.errors = list(errors) if errors is not None else [message]
        self.data = data
        super().__init__(self.message)
