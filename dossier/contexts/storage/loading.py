"""
Bulk loading of serialized resumes into a backend.

Reads a YAML or JSON file (JSON is parsed as YAML by OmegaConf) holding either a
list of resume mappings or a mapping with a `resumes` list, rebuilds each resume,
and saves it. Entries that fail are collected in the LoadReport instead of
aborting the whole load.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from omegaconf import OmegaConf

from dossier.contexts.modeling.exceptions import (
    InvalidResumeDataError,
    NameValidationError,
    PeriodError,
    SectionTypeMismatchError,
)
from dossier.contexts.modeling.serialization import resume_from_dict
from dossier.contexts.storage.contract import ResumeStorage
from dossier.contexts.storage.logger import _log_info, _log_warning


@dataclass
class LoadReport:
    """Outcome of populate_storage()."""

    saved: List[str] = field(default_factory=list)
    rejected: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.rejected


def read_resume_records(path: Path) -> List[Dict[str, Any]]:
    """
    Read resume mappings from a YAML/JSON file.

    Raises:
        FileNotFoundError: If path does not exist
        InvalidResumeDataError: If the file is neither a list nor a mapping with `resumes`
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if isinstance(data, dict) and "resumes" in data:
        data = data["resumes"]
    if not isinstance(data, list):
        raise InvalidResumeDataError(f"Expected a list of resumes in {path}")
    return data


def populate_storage(storage: ResumeStorage, records: List[Dict[str, Any]]) -> LoadReport:
    """
    Rebuild and save each record, collecting failures.

    Args:
        storage: Backend to save into
        records: Resume mappings (see modeling.serialization)

    Returns:
        LoadReport listing saved uuids and (index, reason) pairs for rejected records
    """
    report = LoadReport()
    for index, record in enumerate(records):
        try:
            resume = resume_from_dict(record)
        except (
            NameValidationError,
            InvalidResumeDataError,
            PeriodError,
            SectionTypeMismatchError,
        ) as e:
            report.rejected.append((index, str(e)))
            _log_warning(f"Record {index} rejected: {e}")
            continue

        result = storage.save(resume)
        if result.success:
            report.saved.append(resume.uuid)
        else:
            report.rejected.append((index, result.message))

    _log_info(f"Loaded {len(report.saved)} resume(s), rejected {len(report.rejected)}")
    return report
