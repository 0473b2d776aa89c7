"""
Compiling context logger.

Provides logging interface for the compiling context with automatic [compile] prefix.
All compiling modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[compile]"


# Wrapper functions with automatic [compile] prefix


def _log_info(message: str) -> None:
    """Log info message with [compile] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [compile] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compile] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level compile helpers


def log_compile_start(version: str, target: str, num_sections: int, with_records: bool) -> None:
    source = "resume records" if with_records else "placeholders"
    _log_info(f"Compiling DSL v{version} for {target} ({num_sections} section(s), {source})")


def log_compile_result(ast) -> None:
    """
    Log a compiled AST summary.

    Args:
        ast: ResumeAst from DslCompiler.compile()
    """
    columns = ", ".join(
        f"{column.id} {column.width_percentage}%" for column in ast.page.columns
    )
    _log_success(f"Compiled {len(ast.sections)} visible section(s) for {ast.meta.target}")
    _log_debug(f"  Page: {ast.page.width_mm}x{ast.page.height_mm}mm, columns: {columns}")
    for section in ast.sections:
        _log_debug(f"  [{section.order}] {section.section_id} -> {section.column_id}")
