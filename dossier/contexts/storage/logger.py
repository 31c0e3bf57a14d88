"""
Storage context logger.

Provides logging interface for storage context with automatic [store] prefix.
All storage modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from dossier.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[store]"


def setup_storage_logger(log_dir: Path, backend: str, capacity: int = None) -> Path:
    """
    Setup logger for storage context.

    Configures loguru with provenance tracking and storage-specific context.

    Args:
        log_dir: Directory for this session
        backend: Backend name for provenance ("array" or "map")
        capacity: Capacity of the bounded backend, if any

    Returns:
        Path to log file

    Example:
        from dossier.contexts.storage.logger import setup_storage_logger, _log_info

        log_file = setup_storage_logger(log_dir, backend="array", capacity=100)
        _log_info("Loading resumes...")
    """
    provenance = {"Backend": backend}
    if capacity is not None:
        provenance["Capacity"] = capacity
    return _setup_logger(context_name="store", log_dir=log_dir, extra_provenance=provenance)


# Wrapper functions with automatic [store] prefix


def _log_info(message: str) -> None:
    """Log info message with [store] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [store] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [store] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [store] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [store] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level storage-specific logging helpers


def log_operation(backend: str, operation: str, result) -> None:
    """
    Log the outcome of a keyed storage operation.

    Args:
        backend: Backend name (e.g., "ArrayStorage")
        operation: Operation name ("save", "load", "update", "delete")
        result: StorageResult returned by the operation
    """
    if result.success:
        _log_debug(f"{backend}.{operation}({result.uuid}) ok")
    else:
        _log_warning(f"{backend}.{operation}({result.uuid}) rejected: {result.error.value}")


def log_cleared(backend: str, removed: int) -> None:
    """Log a clear() call."""
    _log_debug(f"{backend}.clear() removed {removed} resume(s)")
