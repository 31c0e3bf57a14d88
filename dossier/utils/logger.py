"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.

Environment variables (read through python-dotenv):
    DOSSIER_CONSOLE_LOG_LEVEL  minimum level echoed to stdout (default INFO)
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from dossier import __version__

load_dotenv()

DEFAULT_CONSOLE_LEVEL = "INFO"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Rejected storage operations are logged at WARNING, so they stand out on the console
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def console_level() -> str:
    """Console log level from DOSSIER_CONSOLE_LOG_LEVEL, validated against loguru's levels."""
    level = os.getenv("DOSSIER_CONSOLE_LOG_LEVEL", DEFAULT_CONSOLE_LEVEL).strip().upper()
    try:
        logger.level(level)
    except ValueError:
        raise ValueError(f"Unknown log level in DOSSIER_CONSOLE_LOG_LEVEL: {level}") from None
    return level


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Configure loguru for a context with provenance tracking.

    Replaces every existing sink with a DEBUG file sink at <log_dir>/<context_name>.log
    and a colorized stdout sink at console_level(), then writes the provenance header.

    Args:
        context_name: Context identifier (e.g., "store")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file

    Example:
        from dossier.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="store",
            log_dir=Path("outs/logs/store_20251114_123456"),
            extra_provenance={"Backend": "array"}
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"
    stdout_level = console_level()

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=stdout_level, colorize=True)

    log_provenance({"Context": context_name, **(extra_provenance or {})})

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance to current logger.

    Logs the dossier version and standard context (script, command, working
    directory, Python version) plus any additional context provided.
    """
    logger.info("=" * 80)
    logger.info(f"dossier {__version__}")
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
