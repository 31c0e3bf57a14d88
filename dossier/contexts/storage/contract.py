"""
Storage contract shared by every resume backend.

ResumeStorage implements the public operations (save, load, update, delete,
clear, size, get_all_sorted) once, on top of a small set of primitive hooks
that each backend provides. Backends differ only in how they find, insert,
replace and remove entries, and in whether they have a capacity ceiling.

Backends do no locking. Callers sharing one instance across threads must
serialize access themselves (e.g. one threading.Lock per instance).
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from dossier.contexts.modeling.resume_data_structure import Resume
from dossier.contexts.storage.logger import log_cleared, log_operation
from dossier.contexts.storage.results import StorageErrorKind, StorageResult


class ResumeStorage(ABC):
    """
    Abstract base for resume backends, keyed by Resume.uuid.

    Per resume, the allowed transitions are:
        Absent --save--> Stored --update--> Stored --delete--> Absent
    save on a Stored id and update/delete on an Absent id are failures.

    Stored and returned resumes are deep copies; callers never hold a reference
    into the backend's internal collection.

    Subclasses must implement:
    - _find(uuid): locate an entry, returning a backend-specific key or None
    - _fetch(key), _insert(resume), _replace(key, resume), _remove(key)
    - _values(), _clear(), _count()
    and may override _capacity_error() to bound the number of stored resumes.
    """

    name: str = "ResumeStorage"

    # =========================================================================
    # PRIMITIVE HOOKS
    # =========================================================================

    @abstractmethod
    def _find(self, uuid: str) -> Optional[Any]:
        """Return the key where uuid is stored, or None."""
        pass

    @abstractmethod
    def _fetch(self, key: Any) -> Resume:
        pass

    @abstractmethod
    def _insert(self, resume: Resume) -> None:
        pass

    @abstractmethod
    def _replace(self, key: Any, resume: Resume) -> None:
        pass

    @abstractmethod
    def _remove(self, key: Any) -> None:
        pass

    @abstractmethod
    def _values(self) -> Iterable[Resume]:
        pass

    @abstractmethod
    def _clear(self) -> None:
        pass

    @abstractmethod
    def _count(self) -> int:
        pass

    def _capacity_error(self) -> Optional[str]:
        """Return a message if no further resume can be inserted, else None."""
        return None

    # =========================================================================
    # PUBLIC OPERATIONS
    # =========================================================================

    def save(self, resume: Resume) -> StorageResult[Resume]:
        """
        Insert a resume that is not stored yet.

        Returns:
            Successful result, or a failure of kind DUPLICATE_ID (uuid already
            stored) or CAPACITY_EXCEEDED (bounded backend is full)
        """
        if self._find(resume.uuid) is not None:
            result = StorageResult.fail(
                StorageErrorKind.DUPLICATE_ID,
                resume.uuid,
                f"Resume {resume.uuid} already exists",
            )
        else:
            capacity_message = self._capacity_error()
            if capacity_message is not None:
                result = StorageResult.fail(
                    StorageErrorKind.CAPACITY_EXCEEDED, resume.uuid, capacity_message
                )
            else:
                self._insert(copy.deepcopy(resume))
                result = StorageResult.ok(resume.uuid)

        log_operation(self.name, "save", result)
        return result

    def load(self, uuid: str) -> StorageResult[Resume]:
        """
        Retrieve a copy of the resume stored under uuid.

        Returns:
            Result whose value is the resume, or a NOT_FOUND failure
        """
        key = self._find(uuid)
        if key is None:
            result = self._not_found(uuid)
        else:
            result = StorageResult.ok(uuid, copy.deepcopy(self._fetch(key)))

        log_operation(self.name, "load", result)
        return result

    def update(self, resume: Resume) -> StorageResult[Resume]:
        """
        Replace the stored resume with the same uuid wholesale. Never inserts.

        Returns:
            Successful result, or a NOT_FOUND failure
        """
        key = self._find(resume.uuid)
        if key is None:
            result = self._not_found(resume.uuid)
        else:
            self._replace(key, copy.deepcopy(resume))
            result = StorageResult.ok(resume.uuid)

        log_operation(self.name, "update", result)
        return result

    def delete(self, uuid: str) -> StorageResult[Resume]:
        """
        Remove the resume stored under uuid.

        Returns:
            Successful result, or a NOT_FOUND failure
        """
        key = self._find(uuid)
        if key is None:
            result = self._not_found(uuid)
        else:
            self._remove(key)
            result = StorageResult.ok(uuid)

        log_operation(self.name, "delete", result)
        return result

    def clear(self) -> None:
        """Remove every stored resume."""
        removed = self._count()
        self._clear()
        log_cleared(self.name, removed)

    def size(self) -> int:
        return self._count()

    def get_all_sorted(self) -> List[Resume]:
        """
        Snapshot of all stored resumes ordered by full name, then uuid.

        The list and its resumes are copies; later changes to the backend are
        only visible by calling this again.
        """
        return sorted(copy.deepcopy(list(self._values())))

    def exists(self, uuid: str) -> bool:
        return self._find(uuid) is not None

    def __len__(self) -> int:
        return self._count()

    def __contains__(self, uuid: str) -> bool:
        return self.exists(uuid)

    def _not_found(self, uuid: str) -> StorageResult[Resume]:
        return StorageResult.fail(StorageErrorKind.NOT_FOUND, uuid, f"Resume {uuid} not found")
