"""
PII-IDCARD: Chinese identity card numbers

Parses, validates and generates Chinese resident identity card numbers and
validates Hong Kong, Macau and Taiwan identity card numbers.
"""

__version__ = "1.0.0"

from pii_idcard.core.checksum import compute_check_char, validate_check_char
from pii_idcard.core.errors import (
    ErrorCode,
    GenerateError,
    IdCardError,
    InvalidChecksumError,
    InvalidDateError,
    InvalidFormatError,
    InvalidLengthError,
)
from pii_idcard.core.fake import FakeIdGenerator, FakeOptions, generate, generate_random
from pii_idcard.core.identity import Identity, parse, validate
from pii_idcard.core.models import Gender, IdentityReport
from pii_idcard.core.upgrade import upgrade
from pii_idcard.core.zodiac import chinese_era, chinese_zodiac, constellation

__all__ = [
    "ErrorCode",
    "FakeIdGenerator",
    "FakeOptions",
    "Gender",
    "GenerateError",
    "IdCardError",
    "Identity",
    "IdentityReport",
    "InvalidChecksumError",
    "InvalidDateError",
    "InvalidFormatError",
    "InvalidLengthError",
    "chinese_era",
    "chinese_zodiac",
    "compute_check_char",
    "constellation",
    "generate",
    "generate_random",
    "parse",
    "upgrade",
    "validate",
    "validate_check_char",
]
