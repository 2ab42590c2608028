"""Tests for the fake identity number generator."""

from datetime import date

import pytest

from pii_idcard.config.region_loader import RegionEntry
from pii_idcard.core.errors import GenerateError
from pii_idcard.core.fake import FakeIdGenerator, FakeOptions, generate, generate_random
from pii_idcard.core.identity import parse, validate
from pii_idcard.core.models import Gender
from pii_idcard.core.regions import RegionTable


class TestGenerate:
    """Tests for generating a number from explicit constraints."""

    def test_male(self):
        number = generate("654325", 2018, 2, 28, Gender.MALE)
        identity = parse(number)

        assert identity.is_valid() is True
        assert identity.gender == Gender.MALE
        assert identity.birth_date == "2018-02-28"
        assert identity.region_code == "654325"

    def test_female_on_leap_day(self):
        identity = parse(generate("310104", 2020, 2, 29, Gender.FEMALE))

        assert identity.is_valid() is True
        assert identity.gender == Gender.FEMALE
        assert identity.birth_date == "2020-02-29"

    def test_gender_parity_holds_repeatedly(self):
        gen = FakeIdGenerator(seed=3)
        for _ in range(50):
            assert int(gen.generate("511702", 1990, 5, 1, Gender.MALE)[16]) % 2 == 1
            assert int(gen.generate("511702", 1990, 5, 1, Gender.FEMALE)[16]) % 2 == 0

    def test_random_gender(self):
        assert validate(generate("511702", 1990, 5, 1)) is True

    def test_seed_reproduces_output(self):
        first = FakeIdGenerator(seed=7).generate("511702", 1980, 2, 22, Gender.FEMALE)
        second = FakeIdGenerator(seed=7).generate("511702", 1980, 2, 22, Gender.FEMALE)
        assert first == second

    def test_short_region(self):
        with pytest.raises(GenerateError, match="6 digits"):
            generate("2300", 1970, 2, 28, Gender.MALE)

    def test_non_digit_region(self):
        with pytest.raises(GenerateError):
            generate("23000A", 1970, 2, 28, Gender.MALE)

    def test_zero_region(self):
        with pytest.raises(GenerateError):
            generate("012345", 1970, 2, 28, Gender.MALE)

    def test_invalid_date(self):
        with pytest.raises(GenerateError, match="Invalid date"):
            generate("230000", 1970, 2, 29, Gender.MALE)

    def test_non_integer_year(self):
        with pytest.raises(GenerateError, match="4 digits"):
            generate("511702", "1980", 2, 22)

    def test_year_out_of_range(self):
        with pytest.raises(GenerateError, match="4 digits"):
            generate("511702", 10000, 2, 22)

    def test_generate_error_is_value_error(self):
        with pytest.raises(ValueError):
            generate("230000", 1970, 13, 1)


class TestFakeOptions:
    """Tests for the options builder."""

    def test_chaining(self):
        opts = FakeOptions().region("3301").min_year(1990).max_year(2000).gender(Gender.FEMALE)

        assert opts.region_prefix == "3301"
        assert opts.min_year_value == 1990
        assert opts.max_year_value == 2000
        assert opts.gender_value == Gender.FEMALE

    def test_defaults(self):
        opts = FakeOptions()
        assert opts.region_prefix is None
        assert opts.gender_value is None


class TestGenerateRandom:
    """Tests for random generation."""

    def test_default_options(self):
        gen = FakeIdGenerator(seed=11)
        for _ in range(20):
            identity = parse(gen.generate_random())
            assert identity.is_valid() is True
            assert date.today().year - 100 <= identity.year <= date.today().year
            assert identity.age() >= 0

    def test_module_level_function(self):
        assert validate(generate_random()) is True

    def test_constraints_are_respected(self):
        opts = FakeOptions().region("3301").min_year(1990).max_year(2000).gender(Gender.FEMALE)
        gen = FakeIdGenerator(seed=5)

        for _ in range(20):
            identity = parse(gen.generate_random(opts))
            assert identity.is_valid() is True
            assert identity.region_code.startswith("3301")
            assert 1990 <= identity.year <= 2000
            assert identity.gender == Gender.FEMALE

    def test_province_prefix_with_max_year(self):
        opts = FakeOptions().region("11").max_year(1990).gender(Gender.MALE)
        gen = FakeIdGenerator(seed=8)

        for _ in range(10):
            identity = parse(gen.generate_random(opts))
            assert identity.is_valid() is True
            assert identity.province == "北京"
            assert identity.year <= 1990
            assert identity.gender == Gender.MALE
            # County-level codes are preferred over the province entry
            assert identity.region_code != "110000"

    def test_single_year(self):
        opts = FakeOptions().min_year(1985).max_year(1985)
        identity = parse(FakeIdGenerator(seed=2).generate_random(opts))
        assert identity.year == 1985

    def test_full_region_code(self):
        opts = FakeOptions().region("511702")
        assert parse(FakeIdGenerator(seed=4).generate_random(opts)).region_code == "511702"

    def test_prefix_without_counties(self):
        """Test that a prefecture without county entries is still usable."""
        opts = FakeOptions().region("1402")
        assert parse(FakeIdGenerator(seed=4).generate_random(opts)).region_code == "140200"

    def test_custom_region_table(self):
        table = RegionTable([RegionEntry("510000", "四川省"), RegionEntry("511702", "通川区")])
        gen = FakeIdGenerator(seed=1, regions=table)
        assert gen.generate_random().startswith("511702")

    def test_unknown_region_prefix(self):
        with pytest.raises(GenerateError, match="Invalid region code"):
            generate_random(FakeOptions().region("99"))

    def test_malformed_region_prefix(self):
        with pytest.raises(GenerateError):
            generate_random(FakeOptions().region("abc"))
        with pytest.raises(GenerateError):
            generate_random(FakeOptions().region("5117021"))

    def test_max_year_in_future(self):
        with pytest.raises(GenerateError, match="Max year"):
            generate_random(FakeOptions().max_year(date.today().year + 1))

    def test_min_year_in_future(self):
        with pytest.raises(GenerateError, match="Min year"):
            generate_random(FakeOptions().min_year(date.today().year + 1))

    def test_max_year_before_min_year(self):
        with pytest.raises(GenerateError, match="greater than or equal"):
            generate_random(FakeOptions().min_year(2000).max_year(1990))

    def test_current_year_never_in_future(self):
        year = date.today().year
        gen = FakeIdGenerator(seed=13)
        for _ in range(20):
            identity = parse(gen.generate_random(FakeOptions().min_year(year)))
            assert identity.is_valid() is True
            assert date.fromisoformat(identity.birth_date) <= date.today()
