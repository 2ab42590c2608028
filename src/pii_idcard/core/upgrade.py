"""Legacy 15-digit to 18-digit identity number conversion."""

from pii_idcard.core.checksum import compute_check_char, is_ascii_digits
from pii_idcard.core.errors import InvalidFormatError, InvalidLengthError


LEGACY_LENGTH = 15
MODERN_LENGTH = 18

# Legacy numbers were only issued to people born in the 1900s
LEGACY_CENTURY = "19"


def upgrade(number: str) -> str:
    """Convert a 15-digit identity number to its 18-digit form.

    Inserts the century after the 6-digit region code and appends the
    check character of the resulting 17-digit body.

    Args:
        number: A 15-digit legacy identity number.

    Returns:
        The 18-digit identity number.

    Raises:
        InvalidLengthError: If the number is not 15 characters long.
        InvalidFormatError: If the number contains non-digit characters.

    Examples:
        >>> upgrade("310112850409522")
        '310112198504095227'
    """
    number = number.strip()
    if len(number) != LEGACY_LENGTH:
        raise InvalidLengthError(
            f"Legacy number must be {LEGACY_LENGTH} digits, got {len(number)}"
        )
    if not is_ascii_digits(number):
        raise InvalidFormatError("Legacy number must contain only digits")

    body = number[:6] + LEGACY_CENTURY + number[6:]
    return body + compute_check_char(body)
