"""
Fixed-capacity resume backend over a dense, preallocated slot list.

Lookups and deletes are linear scans. Deleting moves the last live entry into
the freed slot, so internal order is not insertion order; only get_all_sorted()
has a guaranteed order.
"""

from typing import Iterable, List, Optional

from dossier.contexts.modeling.resume_data_structure import Resume
from dossier.contexts.storage.contract import ResumeStorage

DEFAULT_CAPACITY = 100


class ArrayStorage(ResumeStorage):
    """Bounded backend: holds at most `capacity` resumes."""

    name = "ArrayStorage"

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: List[Optional[Resume]] = [None] * capacity
        self._size = 0

    def _find(self, uuid: str) -> Optional[int]:
        for index in range(self._size):
            if self._slots[index].uuid == uuid:
                return index
        return None

    def _fetch(self, key: int) -> Resume:
        return self._slots[key]

    def _capacity_error(self) -> Optional[str]:
        if self._size >= self.capacity:
            return f"Storage is full ({self.capacity} resumes)"
        return None

    def _insert(self, resume: Resume) -> None:
        self._slots[self._size] = resume
        self._size += 1

    def _replace(self, key: int, resume: Resume) -> None:
        self._slots[key] = resume

    def _remove(self, key: int) -> None:
        last = self._size - 1
        self._slots[key] = self._slots[last]
        self._slots[last] = None
        self._size = last

    def _values(self) -> Iterable[Resume]:
        return self._slots[: self._size]

    def _clear(self) -> None:
        for index in range(self._size):
            self._slots[index] = None
        self._size = 0

    def _count(self) -> int:
        return self._size
