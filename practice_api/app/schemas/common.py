"""
Response envelope shared by every route.

Every response body, successful or not, has the shape
``{"success": bool, "data"?: ..., "error"?: str}``.  Absent keys are
left out of the JSON rather than serialised as ``null``.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = Field(..., examples=[True])
    data: Optional[T] = None
    error: Optional[str] = Field(None, examples=["name: must not be empty"])


class StatusRead(BaseModel):
    """Liveness payload returned by ``GET /api/status``."""

    success: bool = True
    message: str = Field("Server is running!", examples=["Server is running!"])
    timestamp: str = Field(..., examples=["2024-01-01T12:00:00.000Z"])


def utc_timestamp() -> str:
    """ISO‑8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def error_body(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def describe_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Turn pydantic error dicts into a single client‑facing message.

    Only the first error is reported.  The ``body`` prefix FastAPI adds
    to request locations is dropped so messages read ``email: ...``.
    """
    for err in errors:
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        if err.get("type") == "missing":
            return f"{field or 'body'} is required"
        if err.get("type") in ("json_invalid", "model_attributes_type", "dict_type", "model_type"):
            return "Request body must be a JSON object"
        msg = err.get("msg", "is invalid")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        return f"{field}: {msg}" if field else msg
    return "Invalid request payload"
