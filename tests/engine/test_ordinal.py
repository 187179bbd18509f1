"""Tests for the ordinal transforms."""

from __future__ import annotations

import logging
from dataclasses import replace

import pytest

from numwords.engine.ordinal import (
    OrdinalTables,
    PrefixOrdinal,
    SuffixOrdinal,
    TerminalWordOrdinal,
)
from numwords.exceptions import LocaleConfigError
from numwords.languages.english import ENGLISH, TABLES
from numwords.languages.slavic import POLISH_TABLE

EN_US = next(table for table in TABLES if table.code == "en-US")


class TestTerminalWordOrdinal:
    """Rewriting the last word of the cardinal."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "first"),
            (2, "second"),
            (12, "twelfth"),
            (20, "twentieth"),
            (21, "twenty-first"),
            (100, "one hundredth"),
            (103, "one hundred and third"),
            (1000, "one thousandth"),
            (1_000_000, "one millionth"),
        ],
    )
    def test_english(self, value, expected):
        assert ENGLISH.ordinal.render(ENGLISH, value) == expected

    def test_numbers_take_precedence(self):
        strategy = TerminalWordOrdinal(numbers={7: "seventh heaven"}, suffix=lambda w, v: w + "th")
        assert strategy.render(EN_US, 7) == "seventh heaven"
        assert strategy.render(EN_US, 6) == "sixth"

    def test_endings(self):
        strategy = TerminalWordOrdinal(endings=(("e", "ième"),), suffix=lambda w, v: w + "ième")
        assert strategy.transform("quatre", 4) == "quatrième"
        assert strategy.transform("six", 6) == "sixième"

    def test_missing_form_raises(self):
        strategy = TerminalWordOrdinal(words={"one": "first"})
        with pytest.raises(LocaleConfigError):
            strategy.render(EN_US, 2)

    def test_prefix(self):
        strategy = TerminalWordOrdinal(words={"five": "fifth"}, prefix="the ")
        assert strategy.render(EN_US, 5) == "the fifth"


class TestComponentOrdinal:
    """Re-rendering the lowest group from ordinal tables."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "pierwszy"),
            (21, "dwudziesty pierwszy"),
            (100, "setny"),
            (105, "sto piąty"),
            (1000, "tysięczny"),
            (1_000_000, "milionowy"),
        ],
    )
    def test_polish(self, value, expected):
        assert POLISH_TABLE.ordinal.render(POLISH_TABLE, value) == expected

    def test_feminine_tables(self):
        from numwords.types import Gender

        assert POLISH_TABLE.ordinal.render(POLISH_TABLE, 2, Gender.FEMININE) == "druga"
        assert POLISH_TABLE.ordinal.render(POLISH_TABLE, 23, Gender.FEMININE) == "dwudziesta trzecia"

    def test_inflected(self):
        tables = OrdinalTables(ones=("", "primo"), teens=(), tens=(), hundreds=("", "centesimo"))
        feminine = tables.inflected((("o", "a"),))
        assert feminine.ones == ("", "prima")
        assert feminine.hundreds == ("", "centesima")

    def test_scale_suffix(self):
        tables = replace(POLISH_TABLE.ordinal.tables, scales=(), scale_suffix="owy")
        strategy = replace(POLISH_TABLE.ordinal, tables=tables, feminine=None)
        assert strategy.render(POLISH_TABLE, 1_000_000) == "milionowy"


class TestPrefixSuffixOrdinal:
    def test_prefix(self):
        strategy = PrefixOrdinal(prefix="No. ", numbers={1: "first"})
        assert strategy.render(EN_US, 1) == "first"
        assert strategy.render(EN_US, 3) == "No. three"

    def test_suffix(self):
        strategy = SuffixOrdinal(suffix=lambda cardinal, value: cardinal + "-th")
        assert strategy.render(EN_US, 40) == "forty-th"
        assert not strategy.naive

    def test_naive_suffix_logs(self, caplog):
        strategy = SuffixOrdinal(suffix=lambda cardinal, value: cardinal + "nci", naive=True)
        with caplog.at_level(logging.DEBUG, logger="numwords"):
            strategy.render(EN_US, 9)
        assert "Naive ordinal" in caplog.text
