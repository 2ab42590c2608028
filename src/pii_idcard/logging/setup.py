"""Logging configuration for PII-IDCARD.

Provides structured JSON logging. Identity numbers are personal data, so
anything logged about a number goes through mask_number first.
"""

import logging
import os
import sys
from typing import Any, Optional

from pythonjsonlogger.json import JsonFormatter


SERVICE_NAME = "pii-idcard"


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        # Rename fields for better compatibility
        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = SERVICE_NAME


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               PII_IDCARD_LOG_LEVEL or INFO.
        json_format: Whether to use JSON format. Defaults to env var
                     PII_IDCARD_LOG_FORMAT == 'json' or True.
    """
    if level is None:
        level = os.getenv("PII_IDCARD_LOG_LEVEL", "INFO").upper()
    if json_format is None:
        log_format = os.getenv("PII_IDCARD_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if json_format:
        formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def mask_number(number: object, visible: int = 4) -> str:
    """Mask an identity number for log output.

    Keeps ``visible`` characters at each end so log lines can still be
    correlated; the birth date in the middle is hidden.

    Args:
        number: Value to mask (non-strings are rendered with repr).
        visible: Number of characters kept at each end.

    Returns:
        Masked representation.

    Examples:
        >>> mask_number("511702198002221308")
        '5117**********1308'
        >>> mask_number("A123")
        '****'
    """
    if not isinstance(number, str):
        return repr(number)
    if len(number) <= visible * 2:
        return "*" * len(number)
    return number[:visible] + "*" * (len(number) - visible * 2) + number[-visible:]
