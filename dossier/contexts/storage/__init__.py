"""
Storage Context

Responsibilities:
- Defines the storage contract (ResumeStorage) keyed by resume uuid
- Provides the bounded ArrayStorage and unbounded MapStorage backends
- Builds the configured backend from a StoreConfig

Owns: Uniqueness of ids, capacity limits, sorted snapshots
Never: Validates resume fields (the modeling context does that on construction)
"""

from dossier.contexts.storage.array_storage import DEFAULT_CAPACITY, ArrayStorage
from dossier.contexts.storage.config import StoreConfig, get_storage
from dossier.contexts.storage.contract import ResumeStorage
from dossier.contexts.storage.loading import LoadReport, populate_storage, read_resume_records
from dossier.contexts.storage.map_storage import MapStorage
from dossier.contexts.storage.results import (
    CapacityExceededError,
    DuplicateIdError,
    NotFoundError,
    StorageError,
    StorageErrorKind,
    StorageResult,
)
from dossier.contexts.storage.search import filter_resumes, search_resumes

__all__ = [
    # Contract and backends
    "ResumeStorage",
    "ArrayStorage",
    "MapStorage",
    "DEFAULT_CAPACITY",
    # Configuration
    "StoreConfig",
    "get_storage",
    # Results and errors
    "StorageResult",
    "StorageErrorKind",
    "StorageError",
    "DuplicateIdError",
    "NotFoundError",
    "CapacityExceededError",
    # Bulk loading
    "LoadReport",
    "read_resume_records",
    "populate_storage",
    # Search
    "search_resumes",
    "filter_resumes",
]
