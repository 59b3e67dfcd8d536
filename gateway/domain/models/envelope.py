from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, Iterable, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Structured classification of a failed envelope."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    CONFIGURATION = "configuration"
    UNEXPECTED = "unexpected"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Envelope(BaseModel, Generic[T]):
    """
    Uniform success/failure wrapper for every provider result.

    Exactly one of ``data`` and ``error`` is present: ``success`` is true iff
    ``data`` is set. ``error_kind`` and ``omitted`` travel with the envelope
    inside the process but are never serialized to the caller.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    timestamp: str = Field(default_factory=utc_timestamp)
    error_kind: Optional[ErrorKind] = Field(default=None, exclude=True)
    omitted: Tuple[str, ...] = Field(default=(), exclude=True)

    @model_validator(mode="after")
    def check_exclusive_payload(self) -> "Envelope":
        if self.success:
            if self.data is None or self.error is not None:
                raise ValueError("successful envelope requires data and no error")
        elif self.error is None or self.data is not None:
            raise ValueError("failed envelope requires an error and no data")
        return self

    @classmethod
    def ok(cls, data: Any, omitted: Iterable[str] = ()) -> "Envelope":
        return cls(success=True, data=data, omitted=tuple(omitted))

    @classmethod
    def fail(cls, error: str, kind: ErrorKind = ErrorKind.UNEXPECTED) -> "Envelope":
        return cls(success=False, error=error, error_kind=kind)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready body holding only the keys that are present."""
        body: Dict[str, Any] = {"success": self.success}
        if self.success:
            body["data"] = self.model_dump(mode="json", by_alias=True, include={"data"})["data"]
        else:
            body["error"] = self.error
        body["timestamp"] = self.timestamp
        return body
