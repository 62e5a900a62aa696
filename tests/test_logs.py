"""Unit tests for logging setup and best-effort error logging."""

import logging
from pathlib import Path

import pytest

from pxt.errors import SendError, log_ignored
from pxt.logs import configure_logging


@pytest.fixture(autouse=True)
def _reset_pxt_logger():
    yield
    logger = logging.getLogger("pxt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestConfigureLogging:
    def test_writes_to_file(self, tmp_path: Path):
        """
        Given a log file path in a directory that does not exist yet
        When logging is configured and a record is emitted
        Then the record is written to the file
        """
        log_file = tmp_path / "state" / "pxt.log"

        configure_logging("INFO", log_file)
        logging.getLogger("pxt.app").info("attached")

        assert "attached" in log_file.read_text()

    def test_reconfiguring_replaces_handler(self, tmp_path: Path):
        configure_logging("INFO", tmp_path / "a.log")
        logger = configure_logging("DEBUG", tmp_path / "b.log")

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_without_file_uses_null_handler(self):
        logger = configure_logging("WARNING")
        assert isinstance(logger.handlers[0], logging.NullHandler)


class TestLogIgnored:
    def test_suppresses_and_logs(self, caplog):
        """
        Given a block that raises a listed exception
        When it runs under log_ignored
        Then execution continues and the error is logged as a warning
        """
        with caplog.at_level(logging.WARNING, logger="pxt"):
            with log_ignored(SendError):
                raise SendError("event")

        assert "ignored error" in caplog.text

    def test_other_exceptions_propagate(self):
        with pytest.raises(ValueError):
            with log_ignored(SendError):
                raise ValueError("boom")
