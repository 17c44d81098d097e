"""
Standard response envelope.

Every endpoint answers with the same body shape:

    {"statusCode": 200, "message": "...", "success": true, "data": ...}

The payload type is a generic parameter so each route declares its own
``Envelope[...]`` as response model.
"""

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Standard response wrapper.

    When ``success`` is not given it is derived from ``status_code``
    (true only for 200). The factory methods always set it explicitly.

    Attributes:
        status_code: Status the response is meant to carry.
        message: Human-readable summary.
        success: Whether the request succeeded.
        data: Optional payload. Its shape is the caller's concern.
    """

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(default=HTTPStatus.OK, alias="statusCode")
    message: str = ""
    success: bool = True
    data: T | None = None

    def __init__(
        self, status_code: int = HTTPStatus.OK, message: str = "", **data: Any
    ) -> None:
        """Allow ``Envelope(404, "Not found")`` alongside keyword construction."""
        status_code = data.pop("statusCode", status_code)
        super().__init__(status_code=status_code, message=message, **data)

    @model_validator(mode="before")
    @classmethod
    def _derive_success(cls, values: Any) -> Any:
        if isinstance(values, dict) and "success" not in values:
            code = values.get("status_code", values.get("statusCode", HTTPStatus.OK))
            return {**values, "success": code == HTTPStatus.OK}
        return values

    @classmethod
    def successful_response(
        cls,
        message: str,
        data: T | None = None,
        status_code: int = HTTPStatus.OK,
    ) -> "Envelope[T]":
        """Build an envelope flagged as successful."""
        return cls(
            status_code=int(status_code), message=message, success=True, data=data
        )

    @classmethod
    def failed_response(
        cls,
        message: str,
        status_code: int = HTTPStatus.BAD_REQUEST,
        data: T | None = None,
    ) -> "Envelope[T]":
        """Build an envelope flagged as failed.

        ``success`` is False even if ``status_code`` is 200.
        """
        return cls(
            status_code=int(status_code), message=message, success=False, data=data
        )

    def to_response(
        self,
        status_code: int | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> JSONResponse:
        """Render the envelope as a JSON response.

        Args:
            status_code: Transport status. Defaults to the envelope's own.
            headers: Extra response headers.
        """
        return JSONResponse(
            status_code=int(status_code if status_code is not None else self.status_code),
            content=self.model_dump(mode="json", by_alias=True),
            headers=headers,
        )
