"""
Chinese Resident Identity Card parser and validator.

Format: RRRRRRYYYYMMDDSSSC (6 region + 8 birthdate + 3 sequence + 1 checksum).
Legacy 15-digit numbers (RRRRRRYYMMDDSSS) are upgraded to 18 digits first.

Every check runs independently and records its issue, so a failed parse still
tells the caller everything that is wrong with a number.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from pii_idcard.core.checksum import is_ascii_digits, validate_check_char
from pii_idcard.core.errors import ErrorCode, error_for
from pii_idcard.core.models import Gender, IdentityReport
from pii_idcard.core.regions import get_region_table
from pii_idcard.core.upgrade import LEGACY_CENTURY, LEGACY_LENGTH, MODERN_LENGTH, upgrade
from pii_idcard.core.zodiac import chinese_era, chinese_zodiac, constellation
from pii_idcard.logging.setup import get_logger, mask_number

logger = get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    """A parsed identity number.

    Derived attributes are None unless the number is valid. Use
    ``diagnostics()`` to inspect the raw segments of an invalid number.

    Attributes:
        number: Normalized number, upgraded to 18 digits when possible.
        issues: Problems detected while parsing, in check order.
        birth: Decoded birth date, or None if it does not decode.

    Example:
        >>> identity = parse("511702198002221308")
        >>> identity.is_valid()
        True
        >>> identity.region
        '四川省达州市通川区'
        >>> identity.gender
        <Gender.FEMALE: 'female'>
    """

    number: str
    issues: tuple[ErrorCode, ...] = ()
    birth: Optional[date] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.number

    def is_valid(self) -> bool:
        """Return True if the birth date decoded and no fatal issue was found."""
        return self.birth is not None and not any(issue.fatal for issue in self.issues)

    def ensure_valid(self) -> "Identity":
        """Return self, or raise the error for the first fatal issue.

        Raises:
            InvalidLengthError, InvalidFormatError, InvalidDateError,
            InvalidChecksumError: Depending on the first issue found.
        """
        for issue in self.issues:
            if issue.fatal:
                raise error_for(issue, f"{mask_number(self.number)}: {issue.value}")
        if self.birth is None:
            raise error_for(
                ErrorCode.INVALID_DATE,
                f"{mask_number(self.number)}: {ErrorCode.INVALID_DATE.value}",
            )
        return self

    @property
    def year(self) -> Optional[int]:
        return self.birth.year if self.is_valid() else None

    @property
    def month(self) -> Optional[int]:
        return self.birth.month if self.is_valid() else None

    @property
    def day(self) -> Optional[int]:
        return self.birth.day if self.is_valid() else None

    @property
    def birth_date(self) -> Optional[str]:
        """Birth date as YYYY-MM-DD."""
        return self.birth.isoformat() if self.is_valid() else None

    @property
    def gender(self) -> Optional[Gender]:
        """Gender from the parity of the 17th digit."""
        if not self.is_valid():
            return None
        return Gender.from_digit(int(self.number[16]))

    @property
    def region_code(self) -> Optional[str]:
        return self.number[:6] if self.is_valid() else None

    @property
    def province(self) -> Optional[str]:
        """Short province name, "" if the prefix is unknown."""
        if not self.is_valid():
            return None
        return get_region_table().province(self.number)

    @property
    def region(self) -> Optional[str]:
        """Full region name, "" if the code is not in the region table."""
        if not self.is_valid():
            return None
        return get_region_table().full_name(self.number[:6])

    @property
    def chinese_era(self) -> Optional[str]:
        return chinese_era(self.birth.year) if self.is_valid() else None

    @property
    def chinese_zodiac(self) -> Optional[str]:
        return chinese_zodiac(self.birth.year) if self.is_valid() else None

    @property
    def constellation(self) -> Optional[str]:
        if not self.is_valid():
            return None
        return constellation(self.birth.month, self.birth.day)

    def age(self, on: Optional[date] = None) -> Optional[int]:
        """Return the age in full years on a given date.

        A year is only counted once the birthday has been reached. People
        born on February 29 reach their birthday on March 1 in common years.

        Args:
            on: Reference date (default: today).

        Returns:
            Age in years, or None if invalid or ``on`` is before the birth date.
        """
        if not self.is_valid():
            return None
        on = on or date.today()
        if on < self.birth:
            return None
        years = on.year - self.birth.year
        if (on.month, on.day) < (self.birth.month, self.birth.day):
            years -= 1
        return years

    def age_in_year(self, year: int) -> Optional[int]:
        """Return the age reached during a calendar year.

        The birthday is assumed to have passed, so this is ``year`` minus the
        birth year. Use ``age(on=...)`` for the age in full years on a date.

        Examples:
            >>> parse("110101200001011232").age_in_year(2020)
            20
        """
        if not self.is_valid() or year < self.birth.year:
            return None
        return year - self.birth.year

    def diagnostics(self) -> dict[str, Any]:
        """Return the raw segments of the number and the detected issues.

        Available for invalid numbers too; segments are sliced from whatever
        was supplied.
        """
        number = self.number
        if len(number) == LEGACY_LENGTH:
            birth_segment, sequence, check = LEGACY_CENTURY + number[6:12], number[12:15], ""
        else:
            birth_segment, sequence, check = number[6:14], number[14:17], number[17:18]
        return {
            "number": number,
            "length": len(number),
            "region_code": number[:6],
            "birth_segment": birth_segment,
            "sequence": sequence,
            "check_char": check,
            "issues": [issue.value for issue in self.issues],
            "is_valid": self.is_valid(),
        }

    def to_report(self) -> IdentityReport:
        """Build the attribute report for this number."""
        if not self.is_valid():
            return IdentityReport(number=self.number, is_valid=False)
        age = self.age()
        return IdentityReport(
            number=self.number,
            gender=self.gender,
            birth_date=self.birth_date,
            year=self.year,
            month=self.month,
            day=self.day,
            # Birth dates after today report age 0
            age=age if age is not None else 0,
            province=self.province,
            region=self.region,
            region_code=self.region_code,
            chinese_era=self.chinese_era,
            chinese_zodiac=self.chinese_zodiac,
            constellation=self.constellation,
            is_valid=True,
        )

    def to_dict(self) -> dict:
        return self.to_report().to_dict()

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.to_report().to_json(indent=indent)


def _decode_birth(segment: str) -> Optional[date]:
    if len(segment) != 8 or not is_ascii_digits(segment):
        return None
    try:
        return date(int(segment[:4]), int(segment[4:6]), int(segment[6:8]))
    except ValueError:
        return None


def _inspect(number: str) -> tuple[list[ErrorCode], Optional[date]]:
    """Run every applicable check on a normalized number."""
    if len(number) not in (LEGACY_LENGTH, MODERN_LENGTH):
        return [ErrorCode.INVALID_LENGTH], None

    issues = []

    if len(number) == LEGACY_LENGTH:
        # Only legacy numbers that failed to upgrade get here
        body, check = number, None
        birth_segment = LEGACY_CENTURY + number[6:12]
    else:
        body, check = number[:17], number[17]
        birth_segment = number[6:14]

    if (
        not is_ascii_digits(body)
        or body[0] == "0"
        or (check is not None and check not in "0123456789X")
    ):
        issues.append(ErrorCode.INVALID_FORMAT)

    birth = _decode_birth(birth_segment)
    if birth is None and is_ascii_digits(birth_segment):
        issues.append(ErrorCode.INVALID_DATE)

    if check is not None and is_ascii_digits(body) and not validate_check_char(body, check):
        issues.append(ErrorCode.INVALID_CHECKSUM)

    if not issues and number[:6] not in get_region_table():
        issues.append(ErrorCode.UNKNOWN_REGION)

    return issues, birth


def parse(number: str) -> Identity:
    """Parse an identity number.

    Never raises for bad input: problems are recorded on the returned
    Identity. Chain ``ensure_valid()`` to turn them into exceptions.

    Args:
        number: 15- or 18-character identity number.

    Returns:
        The parsed Identity.

    Examples:
        >>> parse("632123820927051").number
        '632123198209270518'
        >>> parse("51170280022213X").is_valid()
        False
    """
    if not isinstance(number, str):
        logger.debug("Identity number is not a string", extra={"type": type(number).__name__})
        return Identity(number="", issues=(ErrorCode.INVALID_FORMAT,))

    normalized = number.strip().upper()
    if len(normalized) == LEGACY_LENGTH and is_ascii_digits(normalized):
        normalized = upgrade(normalized)

    issues, birth = _inspect(normalized)
    identity = Identity(number=normalized, issues=tuple(issues), birth=birth)

    if not identity.is_valid():
        logger.debug(
            "Identity number failed validation",
            extra={"number": mask_number(normalized), "issues": [i.value for i in issues]},
        )
    return identity


def validate(number: str) -> bool:
    """Return True if number is a valid 15- or 18-digit identity number.

    Examples:
        >>> validate("511702800222130")
        True
        >>> validate("230127197908177456")
        True
    """
    return parse(number).is_valid()
