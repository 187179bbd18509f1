"""Tests for currency and fractional-digit rendering."""

from __future__ import annotations

from dataclasses import replace

import pytest

from numwords.engine.currency import CurrencyStyle, CurrencyUnit, UnitPosition
from numwords.engine.decimal import FractionStyle, render_fraction, render_magnitude
from numwords.engine.plural import PluralForms
from numwords.languages.english import ENGLISH, TABLES
from numwords.types import CurrencyAmount, Magnitude

EN_US = next(table for table in TABLES if table.code == "en-US")


def amount(major: int, minor: int = 0, negative: bool = False) -> CurrencyAmount:
    return CurrencyAmount(negative=negative, major=major, minor=minor)


class TestCurrencyStyle:
    """Tests for CurrencyStyle.render() with dollars."""

    @pytest.mark.parametrize(
        "major, minor, expected",
        [
            (1, 0, "one dollar"),
            (0, 50, "fifty cents"),
            (0, 1, "one cent"),
            (0, 0, "zero dollars"),
            (2, 1, "two dollars and one cent"),
            (1001, 99, "one thousand and one dollars and ninety-nine cents"),
        ],
    )
    def test_render(self, major, minor, expected):
        assert ENGLISH.currency.render(ENGLISH, amount(major, minor)) == expected

    def test_negative(self):
        assert ENGLISH.currency.render(ENGLISH, amount(3, 0, negative=True)) == "minus three dollars"

    def test_without_conjunction(self):
        assert ENGLISH.currency.render(ENGLISH, amount(2, 5), False) == "two dollars five cents"

    def test_conjunction_default(self):
        style = replace(ENGLISH.currency, conjunction_default=False)
        assert style.render(ENGLISH, amount(2, 5)) == "two dollars five cents"
        assert style.render(ENGLISH, amount(2, 5), True) == "two dollars and five cents"


class TestCurrencyUnit:
    def test_unit_before_numeral(self):
        unit = CurrencyUnit(PluralForms.invariant("shilingi"), position=UnitPosition.BEFORE)
        assert unit.phrase(EN_US, 5) == "shilingi five"

    def test_fused_and_one_numeral(self):
        unit = CurrencyUnit(
            PluralForms(one="Euro", other="Euro"),
            one_numeral="ein",
            fused={2: "a pair of Euro"},
        )
        assert unit.phrase(EN_US, 1) == "ein Euro"
        assert unit.phrase(EN_US, 2) == "a pair of Euro"
        assert unit.phrase(EN_US, 3) == "three Euro"

    def test_linker(self):
        unit = CurrencyUnit(PluralForms.invariant("lei"), linker=lambda n: "de " if n >= 20 else "")
        assert unit.phrase(EN_US, 5) == "five lei"
        assert unit.phrase(EN_US, 25) == "twenty-five de lei"

    def test_style_joins_with_custom_separator(self):
        style = CurrencyStyle(
            major=CurrencyUnit(PluralForms.invariant("元"), separator=""),
            minor=CurrencyUnit(PluralForms.invariant("分"), separator=""),
            conjunction="",
        )
        assert style.render(EN_US, amount(3, 4)) == "three元four分"


class TestFractions:
    """Tests for fractional-digit rendering."""

    def test_grouped(self):
        assert render_fraction(ENGLISH, "25") == "twenty-five"
        assert render_fraction(ENGLISH, "050") == "zero fifty"
        assert render_fraction(ENGLISH, "00") == "zero zero"

    def test_digits(self):
        table = replace(EN_US, fraction_style=FractionStyle.DIGITS)
        assert render_fraction(table, "105") == "one zero five"

    def test_magnitude(self):
        assert render_magnitude(ENGLISH, Magnitude(False, 3, "14")) == "three point fourteen"
        assert render_magnitude(ENGLISH, Magnitude(False, 0, "5")) == "zero point five"
        assert render_magnitude(ENGLISH, Magnitude(True, 7)) == "seven"

    def test_word_separator(self):
        table = replace(EN_US, word_separator="_")
        assert render_magnitude(table, Magnitude(False, 1, "2")) == "one_point_two"
