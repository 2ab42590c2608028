"""Tests for logging configuration."""

import io
import json
import logging
from unittest.mock import patch

import pytest

from pii_idcard.core.identity import parse
from pii_idcard.logging.setup import (
    CustomJsonFormatter,
    get_logger,
    mask_number,
    setup_logging,
)


def _record(msg="test message", level=logging.INFO):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter."""

    def test_adds_service_field(self):
        """Test that service field is added to log records."""
        formatter = CustomJsonFormatter()

        log_record = {}
        formatter.add_fields(log_record, _record(), {})

        assert log_record.get("service") == "pii-idcard"

    def test_renames_levelname_to_level(self):
        """Test that levelname is renamed to level."""
        formatter = CustomJsonFormatter()

        log_record = {"levelname": "INFO"}
        formatter.add_fields(log_record, _record(), {})

        assert "levelname" not in log_record
        assert log_record.get("level") == "INFO"

    def test_format_is_json(self):
        formatter = CustomJsonFormatter(fmt="%(asctime)s %(levelname)s %(name)s %(message)s")
        record = _record("Loaded region table")
        record.entries = 3

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Loaded region table"
        assert payload["level"] == "INFO"
        assert payload["entries"] == 3
        assert "timestamp" in payload


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self, restore_root_logger):
        """Test that JSON format logging writes JSON lines to stdout."""
        stream = io.StringIO()
        with patch("sys.stdout", stream):
            setup_logging(level="INFO", json_format=True)

        get_logger("test_json").info("Test message", extra={"custom_field": "value"})

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["message"] == "Test message"
        assert payload["custom_field"] == "value"
        assert payload["service"] == "pii-idcard"

    def test_setup_text_format(self, restore_root_logger):
        """Test that text format logging works."""
        setup_logging(level="DEBUG", json_format=False)

        assert len(restore_root_logger.handlers) == 1
        formatter = restore_root_logger.handlers[0].formatter
        assert not isinstance(formatter, CustomJsonFormatter)

    def test_setup_from_environment(self, restore_root_logger, monkeypatch):
        """Test that logging reads from environment variables."""
        monkeypatch.setenv("PII_IDCARD_LOG_LEVEL", "warning")
        monkeypatch.setenv("PII_IDCARD_LOG_FORMAT", "text")

        setup_logging()

        assert restore_root_logger.level == logging.WARNING
        assert not isinstance(restore_root_logger.handlers[0].formatter, CustomJsonFormatter)

    def test_replaces_existing_handlers(self, restore_root_logger):
        setup_logging(level="INFO")
        setup_logging(level="INFO")

        assert len(restore_root_logger.handlers) == 1


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger(self):
        """Test that get_logger returns a logger instance."""
        logger = get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"


class TestMaskNumber:
    """Tests for mask_number."""

    def test_masks_birth_date(self):
        assert mask_number("511702198002221308") == "5117**********1308"

    def test_short_value(self):
        assert mask_number("A123") == "****"
        assert mask_number("12345678") == "********"

    def test_custom_visible(self):
        assert mask_number("511702198002221308", visible=6) == "511702******221308"

    def test_non_string(self):
        assert mask_number(None) == "None"
        assert mask_number(42) == "42"

    def test_parse_failures_are_masked(self, caplog):
        """Test that a rejected number never reaches the log in full."""
        with caplog.at_level(logging.DEBUG, logger="pii_idcard"):
            parse("511702198002221309")

        assert "511702198002221309" not in caplog.text
