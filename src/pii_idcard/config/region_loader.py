"""YAML loader for administrative region codes.

The bundled table lives in ``pii_idcard/data/regions.yaml``. An alternative
file can be supplied through the PII_IDCARD_REGION_DATA environment variable,
for example to track a newer edition of GB/T 2260.

Example YAML configuration:

    regions:
      "510000": 四川省
      "511700": 达州市
      "511702": 通川区

Codes must be quoted so YAML keeps their leading digits as text.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


DEFAULT_REGION_DATA = Path(__file__).resolve().parent.parent / "data" / "regions.yaml"

REGION_DATA_ENV = "PII_IDCARD_REGION_DATA"

_CODE_PATTERN = re.compile(r"^\d{6}$", re.ASCII)


@dataclass(frozen=True)
class RegionEntry:
    """A single administrative region.

    Attributes:
        code: 6-digit region code (省2位 + 市2位 + 县2位).
        name: Name at this administrative level, e.g. "通川区".
    """

    code: str
    name: str

    def __post_init__(self) -> None:
        """Validate entry values."""
        if not _CODE_PATTERN.match(self.code):
            raise ValueError(f"Region code must be 6 digits, got {self.code!r}")
        if not self.name:
            raise ValueError(f"Region {self.code} has an empty name")


def region_data_path() -> Path:
    """Return the region YAML path, honouring PII_IDCARD_REGION_DATA."""
    override = os.getenv(REGION_DATA_ENV)
    return Path(override) if override else DEFAULT_REGION_DATA


def load_regions_from_yaml(path: Path | str) -> list[RegionEntry]:
    """Load region entries from a YAML file.

    Args:
        path: Path to the YAML region file.

    Returns:
        List of RegionEntry objects in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the YAML structure or an entry is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Region data file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return []

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    regions = data.get("regions", {})

    if not isinstance(regions, dict):
        raise ValueError(
            f"Invalid regions structure: expected dict, got {type(regions).__name__}"
        )

    entries = []
    for code, name in regions.items():
        if not isinstance(code, str):
            raise ValueError(f"Region code {code!r} must be a quoted string")
        if not isinstance(name, str):
            raise ValueError(f"Region {code} name is not a string: {type(name).__name__}")
        entries.append(RegionEntry(code=code, name=name.strip()))

    return entries


def load_regions_from_yaml_safe(path: Path | str) -> tuple[list[RegionEntry], Optional[str]]:
    """Load region entries, returning an error message instead of raising.

    Args:
        path: Path to the YAML region file.

    Returns:
        Tuple of (entries, error_message). If successful, error_message is None.
        If failed, entries is an empty list.
    """
    try:
        return load_regions_from_yaml(path), None
    except FileNotFoundError as e:
        return [], str(e)
    except ValueError as e:
        return [], f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return [], f"YAML parsing error: {e}"
