"""
Hong Kong Identity Card validator.

Format: one or two letters, 6 digits and a check character (0-9 or A),
usually written with the check character in parentheses: ``A123456(3)``.
"""

import re


PATTERN = re.compile(r"^[A-Z]{1,2}[0-9]{6}(?:\([0-9A]\)|[0-9A])$")

# A single-letter prefix is padded with a space, which counts as 36
_SPACE_VALUE = 36


def _letter_value(letter: str) -> int:
    """A=10, B=11, ... Z=35."""
    return ord(letter) - 55


def validate(number: str) -> bool:
    """Validate a Hong Kong identity card number.

    Letters must be upper case. The weighted sum of the padded prefix,
    the six digits and the check value (A = 10), with weights 9 to 1,
    must be divisible by 11.

    Examples:
        >>> validate("G123456(A)")
        True
        >>> validate("AB987654(3)")
        True
        >>> validate("G123456(a)")
        False
    """
    if not isinstance(number, str):
        return False
    number = number.strip()
    if not PATTERN.match(number):
        return False

    number = number.replace("(", "").replace(")", "")
    if len(number) == 8:
        prefix = [_SPACE_VALUE, _letter_value(number[0])]
        digits, check = number[1:7], number[7]
    else:
        prefix = [_letter_value(number[0]), _letter_value(number[1])]
        digits, check = number[2:8], number[8]

    total = prefix[0] * 9 + prefix[1] * 8
    for weight, digit in zip(range(7, 1, -1), digits):
        total += int(digit) * weight
    total += 10 if check == "A" else int(check)
    return total % 11 == 0
