"""
Rendering context logger.

Provides logging interface for the rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session

    Returns:
        Path to log file

    Example:
        from folio.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir)
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Resume store": os.getenv("FOLIO_RESUME_STORE_PATH", "data/resumes")},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


# High-level rendering helpers


def log_render_start(source: str, target: str) -> None:
    """
    Log start of a render.

    Args:
        source: What is being rendered (e.g., "resume r-1", "public slug jane-doe")
        target: Output target
    """
    _log_info(f"Rendering {source} for {target}")


def log_render_result(source: str, ast) -> None:
    _log_success(
        f"Rendered {source}: {len(ast.sections)} section(s), DSL v{ast.meta.version}"
    )


def log_render_failure(source: str, error: Exception) -> None:
    """Log a render rejected for a client-side reason (not found, forbidden, invalid)."""
    _log_warning(f"Render of {source} failed ({type(error).__name__}): {error}")


def log_store_loaded(path: Path, count: int) -> None:
    _log_info(f"Loaded {count} resume(s) from {path}")
