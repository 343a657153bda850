"""
Service Result Types

Service operations return a Result instead of raising or writing responses,
the HTTP layer decides which status code each error kind gets.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Why an operation was refused"""
    VALIDATION = "validation"  # Missing or mistyped input
    CONFLICT = "conflict"  # Duplicate username, or user still owns notes
    NOT_FOUND = "not_found"  # No such user (or no users at all)
    WRITE = "write"  # Storage accepted the call but produced no record


@dataclass(frozen=True)
class Result:
    """Outcome of a service operation"""
    data: Any = None  # Success payload (records, confirmation text)
    message: Optional[str] = None  # Human-readable outcome
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any = None, message: Optional[str] = None) -> "Result":
        return cls(data=data, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Result":
        return cls(error=error, message=message)

    def __repr__(self):
        if self.ok:
            return f"Result(ok, message={self.message!r})"
        return f"Result({self.error.value}, message={self.message!r})"
