from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .enums import ErrorKind
from .exceptions import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    ok = True


@dataclass(frozen=True)
class Failure:
    """Structured error returned instead of raising across a service boundary."""

    kind: ErrorKind
    status_code: int
    message: str
    ok = False

    @property
    def retriable(self) -> bool:
        # Everything except storage faults is permanent for the given input.
        return self.kind == ErrorKind.PROCESSING_FAILED

    @classmethod
    def from_error(cls, error: DomainError) -> "Failure":
        return cls(kind=error.kind, status_code=error.status_code, message=str(error))

    @classmethod
    def processing_failed(cls, message: str) -> "Failure":
        return cls(kind=ErrorKind.PROCESSING_FAILED, status_code=500, message=message)

    def to_dict(self) -> dict:
        return {"success": False, "error": self.kind.value, "message": self.message}


Result = Union[Success[T], Failure]
