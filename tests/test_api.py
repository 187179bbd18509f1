"""Tests for the top-level API functions."""

from __future__ import annotations

import pytest

import numwords
from numwords import (
    InvalidOptionError,
    InvalidValueError,
    UnsupportedLocaleError,
    cardinal,
    currency,
    ordinal,
    to_words,
)


class TestCardinal:
    """Tests for numwords.cardinal()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "zero"),
            (1001, "one thousand and one"),
            (1100, "one thousand one hundred"),
            ("1e6", "one million"),
            (-42, "minus forty-two"),
            ("0.25", "zero point twenty-five"),
        ],
    )
    def test_english_default(self, value, expected):
        assert cardinal(value) == expected

    def test_locale(self):
        assert cardinal(2000, "pl") == "dwa tysiące"
        assert cardinal(1005, "zh-Hans") == "一千零五"

    def test_unknown_locale(self):
        with pytest.raises(UnsupportedLocaleError):
            cardinal(1, "tlh")

    def test_invalid_value(self):
        with pytest.raises(InvalidValueError):
            cardinal("twelve")


class TestOrdinal:
    @pytest.mark.parametrize(
        "value, expected",
        [(1, "first"), (21, "twenty-first"), (100, "one hundredth"), (1000, "one thousandth")],
    )
    def test_english(self, value, expected):
        assert ordinal(value) == expected

    def test_rejects_zero(self):
        with pytest.raises(InvalidValueError):
            ordinal(0)


class TestCurrency:
    @pytest.mark.parametrize(
        "value, expected",
        [("1.00", "one dollar"), ("0.50", "fifty cents"), (12.34, "twelve dollars and thirty-four cents")],
    )
    def test_english(self, value, expected):
        assert currency(value) == expected

    def test_regional_currency(self):
        assert currency("2.01", "en-GB") == "two pounds and one penny"
        assert currency(1, "en-IN") == "one rupee"


class TestToWords:
    def test_dispatch(self):
        assert to_words(3) == "three"
        assert to_words(3, kind="ordinal") == "third"
        assert to_words(3, "en", "currency") == "three dollars"

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown kind"):
            to_words(3, kind="roman")

    def test_options_pass_through(self):
        assert to_words(1500, "en-US", hundred_pairing=True) == "fifteen hundred"
        with pytest.raises(InvalidOptionError):
            to_words(1, "en", gender="feminine")


class TestPackage:
    def test_exports(self):
        for name in numwords.__all__:
            assert hasattr(numwords, name)

    def test_version(self):
        assert isinstance(numwords.__version__, str)
