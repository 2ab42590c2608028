"""Pytest fixtures and configuration."""

import pytest

from pii_idcard.core.checksum import compute_check_char
from pii_idcard.core.regions import reset_region_table


@pytest.fixture
def with_check_char():
    """Return a helper that appends the check character to a 17-digit body."""
    def _build(body: str) -> str:
        return body + compute_check_char(body)
    return _build


@pytest.fixture
def valid_id_cards():
    """Valid 18-digit identity numbers with their region names."""
    return {
        "511702198002221308": "四川省达州市通川区",
        "230127197908177456": "黑龙江省哈尔滨市木兰县",
        "632123198209270518": "青海省海东地区乐都县",
        "310112198504095227": "上海市闵行区",
        "21021119810503545X": "辽宁省大连市甘井子区",
        "330421197402080974": "浙江省嘉兴市嘉善县",
        "130133197909136078": "河北省石家庄市赵县",
    }


@pytest.fixture
def legacy_id_cards():
    """Valid 15-digit identity numbers and their 18-digit forms."""
    return {
        "511702800222130": "511702198002221308",
        "632123820927051": "632123198209270518",
        "310112850409522": "310112198504095227",
    }


@pytest.fixture
def invalid_id_cards():
    """Invalid identity numbers."""
    return [
        "511702198002221309",  # Invalid checksum
        "51170280022213X",     # Non-digit in a legacy number
        "511702198002301304",  # February 30
        "011702198002221308",  # Zero province prefix
        "5117021980022213",    # Too short
        "",
    ]


@pytest.fixture
def region_yaml(tmp_path):
    """Write a small region file and return its path."""
    path = tmp_path / "regions.yaml"
    path.write_text(
        'regions:\n  "510000": 四川省\n  "511700": 达州市\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def fresh_region_table():
    """Drop the cached region table before and after the test."""
    reset_region_table()
    yield
    reset_region_table()
