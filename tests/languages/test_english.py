"""Tests for the English locales."""

from __future__ import annotations

import pytest

from numwords.exceptions import InvalidOptionError
from numwords.registry import get_language


class TestInternational:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (15, "fifteen"),
            (40, "forty"),
            (110, "one hundred and ten"),
            (1010, "one thousand and ten"),
            (1_000_000_000, "one billion"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("en").cardinal(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(2, "second"), (12, "twelfth"), (40, "fortieth"), (101, "one hundred and first")],
    )
    def test_ordinal(self, value, expected):
        assert get_language("en").ordinal(value) == expected

    def test_long_scale(self):
        assert get_language("en").cardinal(10**9, long_scale=True) == "one milliard"


class TestRegional:
    def test_us_has_no_and(self):
        en_us = get_language("en-US")
        assert en_us.cardinal(101) == "one hundred one"
        assert en_us.cardinal(101, include_conjunction=True) == "one hundred and one"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (100_000, "one lakh"),
            (10_000_000, "one crore"),
            (1_234_567, "twelve lakh thirty-four thousand five hundred and sixty-seven"),
        ],
    )
    def test_indian_grouping(self, value, expected):
        assert get_language("en-IN").cardinal(value) == expected

    def test_indian_rejects_long_scale(self):
        with pytest.raises(InvalidOptionError):
            get_language("en-IN").cardinal(5, long_scale=True)

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("en-GB", "two pounds and fifty pence"),
            ("en-ZA", "two rand and fifty cents"),
            ("en-GH", "two cedis and fifty pesewas"),
            ("en-IN", "two rupees and fifty paise"),
            ("en-PK", "two rupees and fifty paise"),
            ("en-BD", "two taka and fifty paise"),
            ("en-IE", "two euro and fifty cents"),
            ("en-NG", "two naira and fifty kobo"),
            ("en-KE", "two shillings and fifty cents"),
            ("en-MY", "two ringgit and fifty sen"),
            ("en-PH", "two pesos and fifty centavos"),
            ("en-NZ", "two dollars and fifty cents"),
        ],
    )
    def test_currency(self, code, expected):
        assert get_language(code).currency("2.50") == expected

    def test_pakistan_and_bangladesh_group_like_india(self):
        assert get_language("en-PK").cardinal(100_001) == "one lakh and one"
        assert get_language("en-BD").cardinal(10_000_000) == "one crore"
