"""
Tests for logging setup
"""
import logging

import pytest

from scoreboard.core.logging_setup import setup_logging


@pytest.fixture
def log_config(tmp_path):
    return {
        "level": "DEBUG",
        "file_path": str(tmp_path / "logs" / "scoreboard.log"),
        "console_output": False,
    }


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("Scoreboard")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logging_writes_to_file(log_config, tmp_path):
    logger = setup_logging(log_config)
    logger.debug("Match started: A v B")
    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "logs" / "scoreboard.log").read_text(encoding="utf-8")
    assert "Logging initialized (DEBUG" in content
    assert "Match started: A v B" in content
    assert logger.level == logging.DEBUG


def test_setup_logging_does_not_duplicate_handlers(log_config):
    setup_logging(log_config)
    logger = setup_logging(dict(log_config, console_output=True))

    assert len(logger.handlers) == 2


def test_clear_on_start_removes_old_log(log_config, tmp_path):
    log_file = tmp_path / "logs" / "scoreboard.log"
    log_file.parent.mkdir(parents=True)
    log_file.write_text("old run\n", encoding="utf-8")

    logger = setup_logging(dict(log_config, clear_on_start=True))
    for handler in logger.handlers:
        handler.flush()

    assert "old run" not in log_file.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(log_config):
    logger = setup_logging(dict(log_config, level="chatty"))
    assert logger.level == logging.INFO


def test_formats_come_from_config(log_config, tmp_path):
    logger = setup_logging(dict(log_config,
                                file_format="%(levelname)s|%(asctime)s|%(message)s",
                                date_format="%Y"))
    logger.warning("Match between 'A' and 'B' does not exist")

    lines = (tmp_path / "logs" / "scoreboard.log").read_text(encoding="utf-8").splitlines()
    level, year, message = lines[-1].split("|")
    assert level == "WARNING"
    assert len(year) == 4 and year.isdigit()
    assert message == "Match between 'A' and 'B' does not exist"
