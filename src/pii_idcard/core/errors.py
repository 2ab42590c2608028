"""
Error taxonomy for identity-card processing.

Validation issues are reported as ErrorCode values on a parsed Identity;
operations that cannot produce a result raise IdCardError subclasses.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Issues that can be detected on an identity number."""

    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_DATE = "invalid_date"
    UNKNOWN_REGION = "unknown_region"

    @property
    def fatal(self) -> bool:
        """Whether the issue makes the number invalid."""
        return self is not ErrorCode.UNKNOWN_REGION


class IdCardError(ValueError):
    """Base error for identity-card operations.

    Attributes:
        code: The issue that caused the error, if any.
    """

    code: ErrorCode | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidLengthError(IdCardError):
    code = ErrorCode.INVALID_LENGTH


class InvalidFormatError(IdCardError):
    code = ErrorCode.INVALID_FORMAT


class InvalidChecksumError(IdCardError):
    code = ErrorCode.INVALID_CHECKSUM


class InvalidDateError(IdCardError):
    code = ErrorCode.INVALID_DATE


class GenerateError(IdCardError):
    """Raised when a fake number cannot be built from the given constraints."""


_ERRORS_BY_CODE: dict[ErrorCode, type[IdCardError]] = {
    ErrorCode.INVALID_LENGTH: InvalidLengthError,
    ErrorCode.INVALID_FORMAT: InvalidFormatError,
    ErrorCode.INVALID_CHECKSUM: InvalidChecksumError,
    ErrorCode.INVALID_DATE: InvalidDateError,
}


def error_for(code: ErrorCode, message: str) -> IdCardError:
    """Build the exception matching a fatal error code."""
    return _ERRORS_BY_CODE.get(code, IdCardError)(message)
