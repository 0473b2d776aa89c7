"""
Migration context logger.

Provides logging interface for the migration context with automatic [migrate] prefix.
All migration modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import List

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[migrate]"


def setup_migration_logger(log_dir: Path, target_version: str) -> Path:
    """
    Setup logger for migration context.

    Args:
        log_dir: Directory for this migration session
        target_version: Version documents are being migrated to

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="migrate",
        log_dir=log_dir,
        extra_provenance={"Target version": target_version},
    )


def _log_info(message: str) -> None:
    """Log info message with [migrate] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [migrate] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [migrate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_migration_step(from_version: str, to_version: str) -> None:
    _log_debug(f"Applying migrator {from_version} -> {to_version}")


def log_migration_result(path: List[str]) -> None:
    """Log a completed migration with the version path taken."""
    _log_info(f"Migrated document {' -> '.join(path)} ({len(path) - 1} step(s))")


def log_migration_failure(error: Exception) -> None:
    _log_error(f"Migration failed: {error}")
