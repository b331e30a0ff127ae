# app/outcomes.py - Normalized results of a product lookup

import json
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from .models import ErrorEnvelope, UpstreamResponse

DEFAULT_FETCH_ERROR = "Failed to fetch product data"


def _as_message(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


class LookupSuccess(BaseModel):
    kind: Literal["success"] = "success"
    body: Any = None

    def status_code(self) -> int:
        return 200

    def envelope(self) -> Any:
        return self.body


class ValidationFailure(BaseModel):
    kind: Literal["validation_error"] = "validation_error"
    message: str = "Product ID is required"

    def status_code(self) -> int:
        return 400

    def envelope(self) -> dict:
        return ErrorEnvelope(error=self.message).model_dump(exclude_none=True)


class TransportFailure(BaseModel):
    kind: Literal["transport_error"] = "transport_error"
    message: str = DEFAULT_FETCH_ERROR
    status: Optional[int] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "TransportFailure":
        status = getattr(exc, "status", None)
        return cls(
            message=str(exc) or DEFAULT_FETCH_ERROR,
            status=status if isinstance(status, int) and status > 0 else None,
        )

    def status_code(self) -> int:
        return self.status or 500

    def envelope(self) -> dict:
        return ErrorEnvelope(error=self.message, type="fetch_error").model_dump(exclude_none=True)


class UpstreamHttpFailure(BaseModel):
    kind: Literal["upstream_http_error"] = "upstream_http_error"
    message: str
    status: int
    details: Any = None

    def status_code(self) -> int:
        return self.status

    def envelope(self) -> dict:
        return {"error": self.message, "status": self.status, "details": self.details}


class UpstreamLogicalFailure(BaseModel):
    kind: Literal["upstream_logical_error"] = "upstream_logical_error"
    message: str
    details: Any = None

    def status_code(self) -> int:
        # Business failures are always reported in the client range, whatever upstream said
        return 400

    def envelope(self) -> dict:
        return {"error": self.message, "details": self.details}


LookupOutcome = Annotated[
    Union[
        LookupSuccess,
        ValidationFailure,
        TransportFailure,
        UpstreamHttpFailure,
        UpstreamLogicalFailure,
    ],
    Field(discriminator="kind"),
]


def _body_field(body: Any, name: str) -> Any:
    if isinstance(body, dict):
        return body.get(name)
    return None


def _is_set(value: Any) -> bool:
    """None, False, "" and 0 are unset; anything else, empty containers included, is set"""
    if value is None or isinstance(value, bool):
        return value is True
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def classify(response: UpstreamResponse) -> LookupOutcome:
    """
    Map one upstream response onto exactly one outcome.

    Non-2xx responses are checked before the embedded `error` field, so a
    4xx/5xx body carrying `error` is an HTTP failure, not a logical one.
    """
    body = response.body

    if not response.ok:
        message = f"API request failed: {response.status} {response.reason}".rstrip()
        for name in ("error", "message"):
            value = _body_field(body, name)
            if _is_set(value):
                message = value
                break
        return UpstreamHttpFailure(
            message=_as_message(message),
            status=response.status,
            details=body,
        )

    error = _body_field(body, "error")
    if _is_set(error):
        return UpstreamLogicalFailure(message=_as_message(error), details=body)

    return LookupSuccess(body=body)
