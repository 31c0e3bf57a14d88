"""
Modeling context logger.

Provides logging interface for modeling context with automatic [model] prefix.
All modeling modules should import from this module, not from loguru directly.

The modeling context never configures sinks itself; whichever entry point called
setup_logger (e.g. get_storage with a log_dir) decides where these messages go.
"""

from loguru import logger

CONTEXT_PREFIX = "[model]"


def _log_debug(message: str) -> None:
    """Log debug message with [model] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level modeling-specific logging helpers


def log_name_rejected(kind: str, message: str) -> None:
    """Log a rejected full name."""
    _log_debug(f"Rejected full name ({kind}): {message}")


def log_contact_ignored(contact_type: str) -> None:
    """Log a contact whose value was blank and therefore not written."""
    _log_debug(f"Ignored blank value for contact {contact_type}")


def log_section_replaced(uuid: str, section_type: str) -> None:
    """Log a section that replaced an existing one of the same type."""
    _log_debug(f"Resume {uuid}: replaced section {section_type}")
