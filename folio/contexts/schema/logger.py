"""
Schema context logger.

Provides logging interface for the schema context with automatic [schema] prefix.
All schema modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import List

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[schema]"


def setup_schema_logger(log_dir: Path) -> Path:
    """
    Setup logger for schema context.

    Args:
        log_dir: Directory for this session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="schema", log_dir=log_dir)


def _log_debug(message: str) -> None:
    """Log debug message with [schema] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_validation_failure(errors: List[str], verbose: bool = False) -> None:
    """Log a failed validation with a bounded number of errors."""
    _log_debug(f"DSL validation failed with {len(errors)} error(s)")
    error_limit = 10 if verbose else 3
    for i, error in enumerate(errors[:error_limit], 1):
        _log_debug(f"  Error {i}: {error}")
    if len(errors) > error_limit:
        _log_debug(f"  ... and {len(errors) - error_limit} more errors")
