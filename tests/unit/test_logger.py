"""Unit tests for logger setup and the context logger entry points."""

import pytest
from loguru import logger

from folio.contexts.migration.logger import setup_migration_logger
from folio.contexts.schema.logger import setup_schema_logger
from folio.utils import logger as logger_module


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.mark.unit
def test_setup_migration_logger_writes_provenance(tmp_path):
    log_file = setup_migration_logger(tmp_path / "migrate_session", "1.0.0")
    logger.debug("[migrate] step")
    logger.remove()

    assert log_file == tmp_path / "migrate_session" / "migrate.log"
    contents = log_file.read_text()
    assert "Target version: 1.0.0" in contents
    assert "[migrate] step" in contents


@pytest.mark.unit
def test_console_output_goes_to_stderr(tmp_path, capsys):
    """Test that stdout stays free for the AST and YAML the CLI prints."""
    setup_schema_logger(tmp_path)
    logger.info("[schema] checked")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[schema] checked" in captured.err


@pytest.mark.unit
def test_console_level_is_configurable(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(logger_module, "CONSOLE_LOG_LEVEL", "WARNING")

    log_file = setup_schema_logger(tmp_path)
    logger.info("[schema] quiet")
    logger.warning("[schema] loud")
    logger.remove()

    captured = capsys.readouterr()
    assert "[schema] loud" in captured.err
    assert "[schema] quiet" not in captured.err
    assert "[schema] quiet" in log_file.read_text()
