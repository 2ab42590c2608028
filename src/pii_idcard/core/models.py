"""
Pydantic models for identity reports.

The JSON field names are part of the public output format and use camelCase.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """Gender encoded in an identity number."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_digit(cls, digit: int) -> "Gender":
        """Odd digits are male, even digits are female."""
        return cls.MALE if digit % 2 == 1 else cls.FEMALE


class IdentityReport(BaseModel):
    """Attribute bundle of a parsed identity number.

    Invalid numbers only carry ``number`` and ``isValid``; every derived
    field is left unset and omitted from the output.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    number: str = Field(..., description="Canonical 18-digit number")
    gender: Optional[Gender] = Field(None, description="male or female")
    birth_date: Optional[str] = Field(None, alias="birthDate", description="YYYY-MM-DD")
    year: Optional[int] = Field(None, description="Birth year")
    month: Optional[int] = Field(None, description="Birth month")
    day: Optional[int] = Field(None, description="Birth day")
    age: Optional[int] = Field(None, description="Age in full years today")
    province: Optional[str] = Field(None, description="Short province name")
    region: Optional[str] = Field(None, description="Full region name")
    region_code: Optional[str] = Field(None, alias="regionCode", description="6-digit region code")
    chinese_era: Optional[str] = Field(None, alias="chineseEra", description="Stem-branch year name")
    chinese_zodiac: Optional[str] = Field(None, alias="chineseZodiac", description="Zodiac animal")
    constellation: Optional[str] = Field(None, description="Western constellation")
    is_valid: bool = Field(..., alias="isValid", description="Whether every check passed")

    def to_dict(self) -> dict:
        """Return the report as a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Return the report as a JSON string with camelCase keys."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
