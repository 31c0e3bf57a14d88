"""
Storage configuration and backend factory.

A StoreConfig is built once at process start (from the environment or a YAML
file) and passed to get_storage(), which returns a fresh backend instance.
Nothing here is cached at module level.

Environment variables (read through python-dotenv):
    DOSSIER_STORAGE_BACKEND   "array" (default) or "map"
    DOSSIER_STORAGE_CAPACITY  capacity of the array backend (default 100)
    DOSSIER_LOG_DIR           optional directory for store.log

YAML layout:
    storage:
      backend: array
      capacity: 100
      log_dir: outs/logs/store
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from dossier.contexts.storage.array_storage import DEFAULT_CAPACITY, ArrayStorage
from dossier.contexts.storage.contract import ResumeStorage
from dossier.contexts.storage.logger import setup_storage_logger
from dossier.contexts.storage.map_storage import MapStorage

BACKENDS = ("array", "map")


@dataclass(frozen=True)
class StoreConfig:
    """
    Which backend to build and how.

    Attributes:
        backend: "array" (bounded) or "map" (unbounded)
        capacity: Maximum resumes held by the array backend (ignored for "map")
        log_dir: Where get_storage() writes store.log; None keeps loguru's defaults
    """

    backend: str = "array"
    capacity: int = DEFAULT_CAPACITY
    log_dir: Optional[Path] = None

    def __post_init__(self):
        backend = str(self.backend).strip().lower()
        if backend not in BACKENDS:
            raise ValueError(f"Unknown storage backend: {self.backend}. Use 'array' or 'map'")
        object.__setattr__(self, "backend", backend)

        capacity = int(self.capacity)
        if capacity <= 0:
            raise ValueError(f"Storage capacity must be positive, got {self.capacity}")
        object.__setattr__(self, "capacity", capacity)

        if self.log_dir is not None:
            object.__setattr__(self, "log_dir", Path(self.log_dir))

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Build a config from DOSSIER_* environment variables (and .env, if present)."""
        load_dotenv()
        log_dir = os.getenv("DOSSIER_LOG_DIR")
        return cls(
            backend=os.getenv("DOSSIER_STORAGE_BACKEND", "array"),
            capacity=os.getenv("DOSSIER_STORAGE_CAPACITY", DEFAULT_CAPACITY),
            log_dir=Path(log_dir) if log_dir else None,
        )

    @classmethod
    def from_yaml(cls, config_path: Path) -> "StoreConfig":
        """
        Build a config from the `storage` mapping of a YAML file.

        Missing keys fall back to the dataclass defaults.

        Raises:
            FileNotFoundError: If config_path does not exist
            ValueError: If the file has no `storage` mapping or values are invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
        if not isinstance(data, dict) or not isinstance(data.get("storage"), dict):
            raise ValueError(f"Config must contain a 'storage' mapping: {config_path}")

        storage = data["storage"]
        return cls(
            backend=storage.get("backend", "array"),
            capacity=storage.get("capacity", DEFAULT_CAPACITY),
            log_dir=storage.get("log_dir"),
        )


def get_storage(config: StoreConfig = None) -> ResumeStorage:
    """
    Build the backend a config selects.

    Args:
        config: Storage configuration (default: StoreConfig.from_env())

    Returns:
        A new, empty ResumeStorage
    """
    if config is None:
        config = StoreConfig.from_env()

    if config.log_dir is not None:
        setup_storage_logger(
            config.log_dir,
            backend=config.backend,
            capacity=config.capacity if config.backend == "array" else None,
        )

    if config.backend == "array":
        return ArrayStorage(capacity=config.capacity)
    return MapStorage()
