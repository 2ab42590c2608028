"""
Taiwan National Identification Card validator.

Format: one letter for the place of first registration, a gender digit
(1 male, 2 female), seven digits and a check digit: ``A123456789``.
"""

import re
from typing import Optional

from pii_idcard.core.models import Gender


PATTERN = re.compile(r"^[A-Z][12][0-9]{8}$")

# Letter -> (two-digit code, place of registration)
PREFIX_LETTERS = {
    "A": (10, "台北市"),
    "B": (11, "台中市"),
    "C": (12, "基隆市"),
    "D": (13, "台南市"),
    "E": (14, "高雄市"),
    "F": (15, "新北市"),
    "G": (16, "宜兰县"),
    "H": (17, "桃园市"),
    "I": (34, "嘉义市"),
    "J": (18, "新竹县"),
    "K": (19, "苗栗县"),
    "L": (20, "台中县"),  # merged into 台中市
    "M": (21, "南投县"),
    "N": (22, "彰化县"),
    "O": (35, "新竹市"),
    "P": (23, "云林县"),
    "Q": (24, "嘉义县"),
    "R": (25, "台南县"),  # merged into 台南市
    "S": (26, "高雄县"),  # merged into 高雄市
    "T": (27, "屏东县"),
    "U": (28, "花莲县"),
    "V": (29, "台东县"),
    "W": (32, "金门县"),
    "X": (30, "澎湖县"),
    "Y": (31, "阳明山管理局"),  # abolished
    "Z": (33, "连江县"),
}


def _normalize(number: str) -> str:
    return number.strip().upper()


def validate(number: str) -> bool:
    """Validate a Taiwan identity card number.

    The letter code contributes its tens digit with weight 1 and its units
    digit with weight 9; the next eight digits are weighted 8 to 1. The
    check digit brings the total to a multiple of 10.

    Examples:
        >>> validate("A123456789")
        True
        >>> validate("Q155304680")
        False
    """
    if not isinstance(number, str):
        return False
    number = _normalize(number)
    if not PATTERN.match(number):
        return False

    code = PREFIX_LETTERS[number[0]][0]
    total = code // 10 + (code % 10) * 9
    for weight, digit in zip(range(8, 0, -1), number[1:9]):
        total += int(digit) * weight

    checksum = (10 - total % 10) % 10
    return checksum == int(number[9])


def gender(number: str) -> Optional[Gender]:
    """Return the gender of a valid number, None if invalid.

    Examples:
        >>> gender("A225376624")
        <Gender.FEMALE: 'female'>
    """
    if not validate(number):
        return None
    return Gender.MALE if _normalize(number)[1] == "1" else Gender.FEMALE


def region(number: str) -> Optional[str]:
    """Return the place of first registration of a valid number, None if invalid.

    Examples:
        >>> region("B142610160")
        '台中市'
    """
    if not validate(number):
        return None
    return PREFIX_LETTERS[_normalize(number)[0]][1]
