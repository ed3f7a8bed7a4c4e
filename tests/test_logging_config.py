"""
Test suite for logging configuration

Tests JSON formatting, handler setup and structured action logging.
"""

import json
import sys
import logging

import pytest

from opnu_lab.config import get_config, reload_config
from opnu_lab.logging_config import (
    JSONFormatter, setup_logging, get_logger, log_action
)


TEST_LOGGER = "opnu_lab_test"


@pytest.fixture
def test_logger():
    logger = logging.getLogger(TEST_LOGGER)
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestJSONFormatter:
    """Test JSONFormatter output"""

    def test_basic_record(self):
        """Test required fields are present and None fields dropped"""
        record = logging.LogRecord(
            "opnu_lab.accounts", logging.INFO, __file__, 10, "hello %s", ("world",), None
        )
        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["message"] == "hello world"
        assert entry["logger"] == "opnu_lab.accounts"
        assert "timestamp" in entry
        assert "action" not in entry
        assert "extra" not in entry

    def test_structured_fields(self):
        """Test action, resource and extra are serialized"""
        record = logging.LogRecord(
            "opnu_lab", logging.DEBUG, __file__, 10, "withdraw", (), None
        )
        record.action = "withdraw"
        record.resource = "Anna"
        record.extra = {"amount": 5.0}
        entry = json.loads(JSONFormatter().format(record))

        assert entry["action"] == "withdraw"
        assert entry["resource"] == "Anna"
        assert entry["extra"] == {"amount": 5.0}

    def test_exception_info(self):
        """Test exception text is included"""
        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            "opnu_lab", logging.ERROR, __file__, 10, "failed", (), exc_info
        )
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestSetupLogging:
    """Test setup_logging"""

    def test_json_handler(self, test_logger, capsys):
        """Test JSON output goes to stderr"""
        logger = setup_logging("DEBUG", TEST_LOGGER, log_format="json")

        assert logger is test_logger
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1

        logger.info("ready")
        line = capsys.readouterr().err.strip()
        assert json.loads(line)["message"] == "ready"

    def test_text_handler(self, test_logger, capsys):
        """Test text format produces plain lines"""
        logger = setup_logging("INFO", TEST_LOGGER, log_format="text")
        logger.warning("plain")

        output = capsys.readouterr().err
        assert "WARNING" in output
        assert f"[{TEST_LOGGER}] plain" in output

    def test_repeated_setup_does_not_duplicate(self, test_logger):
        """Test calling setup twice keeps a single handler"""
        setup_logging("INFO", TEST_LOGGER)
        logger = setup_logging("INFO", TEST_LOGGER)
        assert len(logger.handlers) == 1

    def test_log_file(self, test_logger, tmp_path):
        """Test logs can be written to a file"""
        log_path = tmp_path / "lab.log"
        logger = setup_logging("INFO", TEST_LOGGER, log_file=str(log_path))
        logger.info("to file")
        for handler in logger.handlers:
            handler.flush()

        assert json.loads(log_path.read_text().strip())["message"] == "to file"

    def test_defaults_from_config(self, test_logger, monkeypatch):
        """Test level falls back to configuration"""
        monkeypatch.setenv("OPNU_LOG_LEVEL", "WARNING")
        reload_config()
        try:
            assert get_config().log_level == "WARNING"
            logger = setup_logging(logger_name=TEST_LOGGER)
            assert logger.level == logging.WARNING
        finally:
            monkeypatch.delenv("OPNU_LOG_LEVEL")
            reload_config()


class TestLogAction:
    """Test log_action"""

    def test_log_action_attaches_fields(self, caplog):
        """Test structured fields are attached to the record"""
        caplog.set_level(logging.INFO, logger=TEST_LOGGER)
        logger = get_logger(TEST_LOGGER)

        log_action(logger, "info", "deposit applied", action="deposit",
                   resource="Anna", extra={"amount": 10})

        record = caplog.records[-1]
        assert record.getMessage() == "deposit applied"
        assert record.action == "deposit"
        assert record.resource == "Anna"
        assert record.extra == {"amount": 10}

    def test_log_action_respects_level(self, caplog):
        """Test records below the logger level are dropped"""
        caplog.set_level(logging.WARNING, logger=TEST_LOGGER)
        logger = get_logger(TEST_LOGGER)

        log_action(logger, "debug", "hidden")
        assert not [r for r in caplog.records if r.getMessage() == "hidden"]
