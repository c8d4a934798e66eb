from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

INVALID_ARGUMENT = "invalid_argument"
TRANSPORT = "transport"
HTTP_STATUS = "http_status"
PARSE = "parse"


@dataclass(frozen=True)
class FetchError:
    kind: str
    message: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Either a success payload or a structured error, never both."""

    value: Optional[T] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: str, message: str) -> "FetchResult[T]":
        return cls(error=FetchError(kind=kind, message=message))
