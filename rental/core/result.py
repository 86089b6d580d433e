"""
Structured operation results.

The repository never raises to its caller. Every operation returns an
OperationResult carrying either a value or an error kind with a message.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from rental.core.constants import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of one repository operation.

    Attributes:
        value: Operation payload when successful
        error_kind: Failure category, None on success
        message: Human-readable failure cause

    Example:
        result = repository.add_user("Ada", "Lovelace", "ada@example.com", "555-0100")
        user_id = result.unwrap_or(FAILED_USER_ID)
    """

    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error_kind: ErrorKind, message: str) -> "OperationResult[T]":
        return cls(error_kind=error_kind, message=message)

    def unwrap_or(self, default: T) -> T:
        """Return the value on success, otherwise default."""
        return self.value if self.ok else default

    def __repr__(self) -> str:
        if self.ok:
            return f"<OperationResult(ok, value={self.value!r})>"
        return f"<OperationResult({self.error_kind.value}, message={self.message!r})>"
