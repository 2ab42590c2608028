"""
Macau Resident Identity Card validator.

Format: a leading 1, 5 or 7, six digits and a check character, usually
written in parentheses: ``1123456(A)``. The check character algorithm is
not published, so only the format is verified.
"""

import re


PATTERN = re.compile(r"^[157][0-9]{6}[0-9A-Z]$")


def validate(number: str) -> bool:
    """Validate the format of a Macau identity card number.

    Examples:
        >>> validate("7431243(3)")
        True
        >>> validate("5215299A")
        True
        >>> validate("2000148(3)")
        False
    """
    if not isinstance(number, str):
        return False
    number = number.replace("(", "").replace(")", "").strip().upper()
    return bool(PATTERN.match(number))
