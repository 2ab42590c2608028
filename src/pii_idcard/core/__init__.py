"""Core identity number logic: checksum, upgrade, parsing and generation."""

from pii_idcard.core.identity import Identity, parse, validate
from pii_idcard.core.regions import RegionTable, get_region_table, reset_region_table

__all__ = [
    "Identity",
    "RegionTable",
    "get_region_table",
    "parse",
    "reset_region_table",
    "validate",
]
