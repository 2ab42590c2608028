"""Configuration module for PII-IDCARD."""

from pii_idcard.config.region_loader import (
    DEFAULT_REGION_DATA,
    RegionEntry,
    load_regions_from_yaml,
    load_regions_from_yaml_safe,
    region_data_path,
)

__all__ = [
    "DEFAULT_REGION_DATA",
    "RegionEntry",
    "load_regions_from_yaml",
    "load_regions_from_yaml_safe",
    "region_data_path",
]
