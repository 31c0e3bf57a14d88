"""Unbounded resume backend keyed by uuid."""

from typing import Dict, Iterable, Optional

from dossier.contexts.modeling.resume_data_structure import Resume
from dossier.contexts.storage.contract import ResumeStorage


class MapStorage(ResumeStorage):
    """Dict-backed backend with no capacity ceiling. Same failure semantics as ArrayStorage."""

    name = "MapStorage"

    def __init__(self):
        self._resumes: Dict[str, Resume] = {}

    def _find(self, uuid: str) -> Optional[str]:
        return uuid if uuid in self._resumes else None

    def _fetch(self, key: str) -> Resume:
        return self._resumes[key]

    def _insert(self, resume: Resume) -> None:
        self._resumes[resume.uuid] = resume

    def _replace(self, key: str, resume: Resume) -> None:
        self._resumes[key] = resume

    def _remove(self, key: str) -> None:
        del self._resumes[key]

    def _values(self) -> Iterable[Resume]:
        return list(self._resumes.values())

    def _clear(self) -> None:
        self._resumes.clear()

    def _count(self) -> int:
        return len(self._resumes)
