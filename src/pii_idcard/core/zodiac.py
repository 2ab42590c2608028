"""
Zodiac attributes derived from a birth date.

Sexagenary era (天干地支), zodiac animal (生肖) and western constellation
(星座). Years use the Gregorian year, not the lunar new year boundary.
"""

import calendar
from bisect import bisect_right
from typing import Optional


HEAVENLY_STEMS = "甲乙丙丁戊己庚辛壬癸"
EARTHLY_BRANCHES = "子丑寅卯辰巳午未申酉戌亥"
ZODIAC_ANIMALS = "鼠牛虎兔龙蛇马羊猴鸡狗猪"

# 4 AD was a 甲子 year
_CYCLE_ORIGIN = 4

# (month, day) on which each sign starts; the start day belongs to the sign
_CONSTELLATION_STARTS = [
    ((1, 20), "水瓶座"),
    ((2, 19), "双鱼座"),
    ((3, 21), "白羊座"),
    ((4, 20), "金牛座"),
    ((5, 21), "双子座"),
    ((6, 22), "巨蟹座"),
    ((7, 23), "狮子座"),
    ((8, 23), "处女座"),
    ((9, 23), "天秤座"),
    ((10, 24), "天蝎座"),
    ((11, 23), "射手座"),
    ((12, 22), "摩羯座"),
]
_START_DATES = [start for start, _ in _CONSTELLATION_STARTS]


def chinese_era(year: int) -> str:
    """Return the stem-branch name of a year.

    Examples:
        >>> chinese_era(1980)
        '庚申'
        >>> chinese_era(1984)
        '甲子'
    """
    offset = year - _CYCLE_ORIGIN
    return HEAVENLY_STEMS[offset % 10] + EARTHLY_BRANCHES[offset % 12]


def chinese_zodiac(year: int) -> str:
    """Return the zodiac animal of a year.

    Examples:
        >>> chinese_zodiac(1980)
        '猴'
    """
    return ZODIAC_ANIMALS[(year - _CYCLE_ORIGIN) % 12]


def constellation(month: int, day: int) -> Optional[str]:
    """Return the constellation for a month/day pair.

    February 29 is accepted and falls in 双鱼座 together with its neighbours.

    Args:
        month: Month (1-12).
        day: Day of month.

    Returns:
        The constellation name, or None if the pair is not a calendar date.

    Examples:
        >>> constellation(2, 22)
        '双鱼座'
        >>> constellation(12, 31)
        '摩羯座'
    """
    if not 1 <= month <= 12:
        return None
    # 2000 is a leap year, so every real month/day pair fits
    if not 1 <= day <= calendar.monthrange(2000, month)[1]:
        return None

    index = bisect_right(_START_DATES, (month, day)) - 1
    # Before 1-20 wraps around to the last sign of the previous year
    return _CONSTELLATION_STARTS[index][1]
