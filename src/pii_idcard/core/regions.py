"""
Administrative Region Table

Maps 6-digit region codes (GB/T 2260) to names and composes full region
names from the province, prefecture and county levels.
"""

import random
import threading
from collections.abc import Iterable
from typing import Optional

from pii_idcard.config.region_loader import (
    RegionEntry,
    load_regions_from_yaml,
    region_data_path,
)
from pii_idcard.logging.setup import get_logger

logger = get_logger(__name__)


# Short province names keyed by the first two digits of a region code
PROVINCES = {
    "11": "北京", "12": "天津", "13": "河北", "14": "山西", "15": "内蒙古",
    "21": "辽宁", "22": "吉林", "23": "黑龙江",
    "31": "上海", "32": "江苏", "33": "浙江", "34": "安徽", "35": "福建", "36": "江西", "37": "山东",
    "41": "河南", "42": "湖北", "43": "湖南", "44": "广东", "45": "广西", "46": "海南",
    "50": "重庆", "51": "四川", "52": "贵州", "53": "云南", "54": "西藏",
    "61": "陕西", "62": "甘肃", "63": "青海", "64": "宁夏", "65": "新疆",
    "71": "台湾", "81": "香港", "82": "澳门", "83": "台湾", "91": "国外",
}


class RegionTable:
    """Read-only lookup over region entries.

    Example:
        >>> table = RegionTable([
        ...     RegionEntry("510000", "四川省"),
        ...     RegionEntry("511700", "达州市"),
        ...     RegionEntry("511702", "通川区"),
        ... ])
        >>> table.full_name("511702")
        '四川省达州市通川区'
        >>> table.province("511702")
        '四川'
    """

    def __init__(self, entries: Iterable[RegionEntry]) -> None:
        self._names: dict[str, str] = {}
        for entry in entries:
            self._names[entry.code] = entry.name
        self._codes = tuple(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, code: object) -> bool:
        return code in self._names

    def __repr__(self) -> str:
        return f"RegionTable({len(self)} entries)"

    def name(self, code: str) -> str:
        """Return the name at the code's own level, or "" if unknown."""
        return self._names.get(code, "")

    def full_name(self, code: str) -> str:
        """Return the full region name for a code.

        Joins the province, prefecture and county names. Levels missing from
        the table (municipal districts, county-level cities governed directly
        by a province) are skipped. Returns "" for codes not in the table.
        """
        if code not in self._names:
            return ""

        parts = []
        for level_code in (code[:2] + "0000", code[:4] + "00", code):
            name = self._names.get(level_code)
            if name and name not in parts:
                parts.append(name)
        return "".join(parts)

    @staticmethod
    def province(code: str) -> str:
        """Return the short province name for a code, or "" if unknown."""
        return PROVINCES.get(code[:2], "")

    def entries(self) -> list[RegionEntry]:
        """Return all entries ordered by code."""
        return [RegionEntry(code, self._names[code]) for code in self._codes]

    def codes(self, prefix: str = "") -> list[str]:
        """Return codes starting with prefix, ordered."""
        return [code for code in self._codes if code.startswith(prefix)]

    def random_code(self, prefix: str = "", rng: Optional[random.Random] = None) -> Optional[str]:
        """Pick a random region code starting with prefix.

        County-level codes are preferred; if the prefix only matches
        province or prefecture entries, those are used instead.

        Args:
            prefix: Leading digits the code must start with (0-6 digits).
            rng: Random source (defaults to the module-level generator).

        Returns:
            A region code, or None if nothing matches the prefix.
        """
        rng = rng or random
        candidates = self.codes(prefix)
        if not candidates:
            return None

        counties = [code for code in candidates if not code.endswith("00")]
        return rng.choice(counties or candidates)


# Global region table (singleton-like)
_region_table: Optional[RegionTable] = None
_region_table_lock = threading.Lock()


def get_region_table() -> RegionTable:
    """Get the global region table.

    Loads from PII_IDCARD_REGION_DATA if set, otherwise from the bundled
    data file. Concurrent first calls all receive the same instance.

    Returns:
        Global RegionTable instance.
    """
    global _region_table

    if _region_table is None:
        with _region_table_lock:
            # Double-check locking pattern
            if _region_table is None:
                path = region_data_path()
                entries = load_regions_from_yaml(path)
                _region_table = RegionTable(entries)
                logger.info(
                    "Loaded region table",
                    extra={"path": str(path), "entries": len(_region_table)},
                )

    return _region_table


def reset_region_table() -> None:
    """Reset the global region table (for testing)."""
    global _region_table
    with _region_table_lock:
        _region_table = None
