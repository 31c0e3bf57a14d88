"""
Result values returned by storage operations.

Expected failures (duplicate id, missing id, full backend) are reported as
StorageResult values carrying a StorageErrorKind instead of being raised, so the
caller decides what to do with each kind. unwrap() turns a failed result into the
matching StorageError for callers that prefer exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StorageErrorKind(Enum):
    """Which storage invariant an operation would have violated."""

    DUPLICATE_ID = "duplicate_id"
    NOT_FOUND = "not_found"
    CAPACITY_EXCEEDED = "capacity_exceeded"


class StorageError(Exception):
    """
    Exception form of a failed storage operation.

    Attributes:
        kind: StorageErrorKind of the failure
        uuid: Resume identifier the operation addressed
        message: Error description
    """

    kind: StorageErrorKind

    def __init__(self, message: str, uuid: Optional[str] = None):
        self.message = message
        self.uuid = uuid
        super().__init__(message)


class DuplicateIdError(StorageError):
    kind = StorageErrorKind.DUPLICATE_ID


class NotFoundError(StorageError):
    kind = StorageErrorKind.NOT_FOUND


class CapacityExceededError(StorageError):
    kind = StorageErrorKind.CAPACITY_EXCEEDED


ERROR_CLASSES = {
    StorageErrorKind.DUPLICATE_ID: DuplicateIdError,
    StorageErrorKind.NOT_FOUND: NotFoundError,
    StorageErrorKind.CAPACITY_EXCEEDED: CapacityExceededError,
}


@dataclass
class StorageResult(Generic[T]):
    """Outcome of save/load/update/delete."""

    success: bool
    uuid: Optional[str] = None
    value: Optional[T] = None
    error: Optional[StorageErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, uuid: str, value: Optional[T] = None) -> "StorageResult[T]":
        return cls(success=True, uuid=uuid, value=value)

    @classmethod
    def fail(cls, kind: StorageErrorKind, uuid: str, message: str) -> "StorageResult[T]":
        return cls(success=False, uuid=uuid, error=kind, message=message)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> Optional[T]:
        """
        Return the carried value, or raise the StorageError matching the failure kind.

        Raises:
            DuplicateIdError, NotFoundError, CapacityExceededError
        """
        if self.success:
            return self.value
        raise ERROR_CLASSES[self.error](self.message, uuid=self.uuid)
