"""Tests for plural rules and word forms."""

from __future__ import annotations

import pytest

from numwords.engine.plural import (
    CZECH,
    EAST_SLAVIC,
    LITHUANIAN,
    POLISH,
    PluralCategory,
    PluralForms,
    PluralRules,
    arabic,
    dual,
    get_plural_rule,
    last_digit_one,
    one_other,
    romanian,
    zero_one_other,
)
from numwords.exceptions import LocaleConfigError

ONE = PluralCategory.ONE
TWO = PluralCategory.TWO
FEW = PluralCategory.FEW
MANY = PluralCategory.MANY
OTHER = PluralCategory.OTHER
ZERO = PluralCategory.ZERO


class TestSimpleRules:
    def test_one_other(self):
        assert one_other(1) is ONE
        assert one_other(0) is OTHER
        assert one_other(21) is OTHER

    def test_zero_one_other(self):
        assert zero_one_other(0) is ONE
        assert zero_one_other(1) is ONE
        assert zero_one_other(2) is OTHER

    def test_last_digit_one(self):
        assert last_digit_one(21) is ONE
        assert last_digit_one(11) is OTHER
        assert last_digit_one(111) is OTHER
        assert last_digit_one(101) is ONE

    def test_dual(self):
        assert [dual(n) for n in (1, 2, 3)] == [ONE, TWO, OTHER]


class TestThreeFormRules:
    """Slavic and Baltic one/few/many selection."""

    @pytest.mark.parametrize(
        "n, expected",
        [(1, ONE), (2, FEW), (4, FEW), (5, MANY), (11, MANY), (12, MANY), (14, MANY),
         (21, MANY), (22, FEW), (112, MANY), (1000, MANY)],
    )
    def test_polish(self, n, expected):
        assert POLISH(n) is expected

    @pytest.mark.parametrize(
        "n, expected",
        [(1, ONE), (21, ONE), (11, MANY), (2, FEW), (13, MANY), (24, FEW), (25, MANY), (101, ONE)],
    )
    def test_east_slavic(self, n, expected):
        assert EAST_SLAVIC(n) is expected

    @pytest.mark.parametrize(
        "n, expected",
        [(1, ONE), (21, ONE), (2, FEW), (9, FEW), (10, MANY), (15, MANY), (20, MANY), (29, FEW)],
    )
    def test_lithuanian(self, n, expected):
        assert LITHUANIAN(n) is expected

    @pytest.mark.parametrize(
        "n, expected",
        [(1, ONE), (3, FEW), (5, MANY), (12, MANY), (21, MANY), (22, FEW), (34, FEW), (112, MANY)],
    )
    def test_czech(self, n, expected):
        assert CZECH(n) is expected

    def test_romanian(self):
        assert romanian(1) is ONE
        assert romanian(19) is FEW
        assert romanian(20) is OTHER
        assert romanian(101) is FEW

    def test_arabic(self):
        assert [arabic(n) for n in (0, 1, 2, 3, 10, 11, 99, 100)] == [
            ZERO, ONE, TWO, FEW, FEW, MANY, MANY, OTHER,
        ]


class TestPluralForms:
    def test_select(self):
        forms = PluralForms.three("tysiąc", "tysiące", "tysięcy", rule=POLISH)
        assert forms.select(1) == "tysiąc"
        assert forms.select(3) == "tysiące"
        assert forms.select(5) == "tysięcy"
        assert forms.select(11) == "tysięcy"

    def test_missing_category_falls_back_to_other(self):
        forms = PluralForms(one="shekel", other="shekels", rule=dual)
        assert forms.select(2) == "shekels"

    def test_missing_other_raises(self):
        forms = PluralForms(one="x", rule=one_other)
        with pytest.raises(LocaleConfigError):
            forms.select(5)

    def test_invariant(self):
        forms = PluralForms.invariant("円")
        assert {forms.select(n) for n in (0, 1, 2, 100)} == {"円"}


class TestPluralRules:
    def test_registry_lookup(self):
        rules = PluralRules()
        assert rules.get_category(5, "east_slavic") is MANY
        assert rules.get_category(2, "hebrew") is TWO
        assert get_plural_rule("polish") is POLISH

    def test_unknown_rule(self):
        with pytest.raises(LocaleConfigError, match="unknown plural rule"):
            get_plural_rule("klingon")

    def test_register(self):
        rules = PluralRules()
        rules.register("always_one", lambda n: ONE)
        assert rules.get_category(7, "always_one") is ONE
        assert "always_one" in rules.names
