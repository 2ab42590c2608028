"""
身份证号生成器

生成结构合法的中国身份证号码，用于测试数据和脱敏替换。

注意：此生成的号码仅用于测试和开发，不具备任何法律效力。

特性:
- 指定或随机地区码
- 指定或随机出生日期（年份范围可配置）
- 指定或随机性别
- 正确的校验码
- 可设置随机种子以复现结果
"""

import random
from dataclasses import dataclass
from datetime import date
from typing import Optional

from pii_idcard.core.checksum import compute_check_char, is_ascii_digits
from pii_idcard.core.errors import GenerateError
from pii_idcard.core.models import Gender
from pii_idcard.core.regions import RegionTable, get_region_table
from pii_idcard.logging.setup import get_logger

logger = get_logger(__name__)


# 未指定年份范围时，出生年份取最近 100 年
DEFAULT_AGE_SPAN = 100

# 随机日期重采样上限
MAX_DATE_ATTEMPTS = 100


@dataclass
class FakeOptions:
    """随机身份证号生成选项

    各 setter 返回自身，可以链式调用。

    Example:
        >>> opts = FakeOptions().region("3301").min_year(1990).max_year(2000).gender(Gender.FEMALE)
        >>> opts.region_prefix
        '3301'
    """

    region_prefix: Optional[str] = None
    min_year_value: Optional[int] = None
    max_year_value: Optional[int] = None
    gender_value: Optional[Gender] = None

    def region(self, code: str) -> "FakeOptions":
        """设置地区码前缀（1-6位数字）"""
        self.region_prefix = code
        return self

    def min_year(self, year: int) -> "FakeOptions":
        """设置最小出生年份（min_year <= max_year <= 今年）"""
        self.min_year_value = year
        return self

    def max_year(self, year: int) -> "FakeOptions":
        """设置最大出生年份（min_year <= max_year <= 今年）"""
        self.max_year_value = year
        return self

    def gender(self, gender: Gender) -> "FakeOptions":
        """设置性别"""
        self.gender_value = gender
        return self


class FakeIdGenerator:
    """中国身份证号生成器

    Example:
        >>> gen = FakeIdGenerator(seed=42)
        >>> number = gen.generate("511702", 1980, 2, 22, Gender.FEMALE)
        >>> number[:14]
        '51170219800222'
    """

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        regions: Optional[RegionTable] = None,
    ):
        """初始化生成器

        Args:
            seed: 随机种子（None 表示不可复现）
            regions: 地区码表（默认使用全局地区表）
        """
        self.seed = seed
        self._rng = random.Random(seed)
        self._regions = regions

    @property
    def regions(self) -> RegionTable:
        return self._regions if self._regions is not None else get_region_table()

    def generate(
        self,
        region: str,
        year: int,
        month: int,
        day: int,
        gender: Optional[Gender] = None,
    ) -> str:
        """生成指定地区、出生日期和性别的身份证号

        Args:
            region: 6位地区码
            year: 出生年份
            month: 出生月份
            day: 出生日
            gender: 性别（None 表示随机）

        Returns:
            18位身份证号

        Raises:
            GenerateError: 地区码或出生日期不合法
        """
        if not isinstance(region, str) or len(region) != 6 or not is_ascii_digits(region):
            raise GenerateError("The length of region code must be 6 digits")
        if region[0] == "0":
            raise GenerateError(f"Invalid region code: {region}")
        if not isinstance(year, int) or not 1 <= year <= 9999:
            raise GenerateError(f"Birth year must have 4 digits, got {year}")

        try:
            birth = date(year, month, day)
        except (TypeError, ValueError) as e:
            raise GenerateError(f"Invalid date of birth: {e}") from e

        body = f"{region}{birth.year:04d}{birth.month:02d}{birth.day:02d}" + self._sequence(gender)
        return body + compute_check_char(body)

    def generate_random(self, opts: Optional[FakeOptions] = None) -> str:
        """按选项随机生成身份证号

        Args:
            opts: 生成选项（None 表示全部随机）

        Returns:
            18位身份证号

        Raises:
            GenerateError: 选项不合法或地区码前缀不存在
        """
        opts = opts or FakeOptions()
        today = date.today()

        if opts.region_prefix is not None:
            prefix = opts.region_prefix
            if not 1 <= len(prefix) <= 6 or not is_ascii_digits(prefix):
                raise GenerateError(f"Region prefix must be 1-6 digits, got {prefix!r}")
        else:
            prefix = ""
        region = self.regions.random_code(prefix, rng=self._rng)
        if region is None:
            raise GenerateError(f"Invalid region code: {prefix}")

        min_year, max_year = self._year_range(opts, today)
        birth = self._random_birth(min_year, max_year, today)
        return self.generate(region, birth.year, birth.month, birth.day, opts.gender_value)

    @staticmethod
    def _year_range(opts: FakeOptions, today: date) -> tuple[int, int]:
        if opts.max_year_value is not None and opts.max_year_value > today.year:
            raise GenerateError(f"Max year must be less than or equal to {today.year}")
        if opts.min_year_value is not None and opts.min_year_value > today.year:
            raise GenerateError(f"Min year must be less than or equal to {today.year}")

        max_year = opts.max_year_value if opts.max_year_value is not None else today.year
        if opts.min_year_value is not None:
            min_year = opts.min_year_value
        else:
            min_year = min(max_year, today.year - DEFAULT_AGE_SPAN)

        if max_year < min_year:
            raise GenerateError("Max year must be greater than or equal to min year")
        if min_year < 1:
            raise GenerateError(f"Min year must be positive, got {min_year}")
        return min_year, max_year

    def _random_birth(self, min_year: int, max_year: int, today: date) -> date:
        """随机生成不晚于今天的合法日期，非法日期重新采样"""
        for attempt in range(1, MAX_DATE_ATTEMPTS + 1):
            year = self._rng.randint(min_year, max_year)
            month = self._rng.randint(1, 12)
            day = self._rng.randint(1, 31)
            try:
                birth = date(year, month, day)
            except ValueError:
                logger.debug("Resampling impossible date", extra={"attempt": attempt})
                continue
            if birth <= today:
                return birth
            logger.debug("Resampling future date", extra={"attempt": attempt})

        # 范围只含今年且今天是年初时可能全部落空
        return date(max_year, 1, 1)

    def _sequence(self, gender: Optional[Gender]) -> str:
        """生成顺序码（3位，最后一位奇数为男，偶数为女）"""
        seq = self._rng.randint(0, 99)
        if gender is None:
            last = self._rng.randint(0, 9)
        elif gender == Gender.MALE:
            last = 2 * self._rng.randint(0, 4) + 1
        else:
            last = 2 * self._rng.randint(0, 4)
        return f"{seq:02d}{last}"


_default_generator = FakeIdGenerator()


def generate(
    region: str,
    year: int,
    month: int,
    day: int,
    gender: Optional[Gender] = None,
) -> str:
    """生成指定条件的身份证号，参见 FakeIdGenerator.generate"""
    return _default_generator.generate(region, year, month, day, gender)


def generate_random(opts: Optional[FakeOptions] = None) -> str:
    """按选项随机生成身份证号，参见 FakeIdGenerator.generate_random"""
    return _default_generator.generate_random(opts)
