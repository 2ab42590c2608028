"""Logging configuration module for PII-IDCARD."""

from pii_idcard.logging.setup import get_logger, mask_number, setup_logging

__all__ = ["get_logger", "mask_number", "setup_logging"]
