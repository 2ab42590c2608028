"""
Check character computation for 18-digit identity numbers.

Implements ISO 7064:1983 MOD 11-2 over the 17-digit body:
RRRRRRYYYYMMDDSSS + C (6 region + 8 birthdate + 3 sequence + 1 checksum).
"""

from pii_idcard.core.errors import IdCardError, InvalidFormatError, InvalidLengthError


# 2^(17-i) mod 11 for i in 1..17
WEIGHTS = [7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2]

# Check character indexed by (weighted sum mod 11)
CHECK_CODES = "10X98765432"

BODY_LENGTH = 17


def is_ascii_digits(value: str) -> bool:
    """Return True if value is non-empty and made of 0-9 only."""
    return bool(value) and value.isascii() and value.isdigit()


def compute_check_char(body: str) -> str:
    """Compute the check character for a 17-digit body.

    Args:
        body: The first 17 digits of an identity number.

    Returns:
        One of "0"-"9" or "X".

    Raises:
        InvalidLengthError: If body is not 17 characters long.
        InvalidFormatError: If body contains anything but ASCII digits.

    Examples:
        >>> compute_check_char("51170219800222130")
        '8'
        >>> compute_check_char("21021119810503545")
        'X'
    """
    if len(body) != BODY_LENGTH:
        raise InvalidLengthError(f"Body must be {BODY_LENGTH} digits, got {len(body)}")
    if not is_ascii_digits(body):
        raise InvalidFormatError("Body must contain only digits")

    total = sum(int(digit) * weight for digit, weight in zip(body, WEIGHTS))
    return CHECK_CODES[total % 11]


def validate_check_char(body: str, candidate: str) -> bool:
    """Check a candidate check character against a 17-digit body.

    The comparison is case-insensitive, so "x" and "X" are equivalent.

    Args:
        body: The first 17 digits of an identity number.
        candidate: The 18th character to verify.

    Returns:
        True if the candidate matches, False otherwise (including malformed input).
    """
    if not isinstance(candidate, str) or len(candidate) != 1:
        return False
    try:
        return compute_check_char(body) == candidate.upper()
    except IdCardError:
        return False
