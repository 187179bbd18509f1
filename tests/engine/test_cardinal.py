"""Tests for the cardinal pipeline."""

from __future__ import annotations

from dataclasses import replace

import pytest

from numwords.engine.cardinal import CardinalStrategy, HundredPairingCardinal, RespacedCardinal
from numwords.engine.scales import OverflowPolicy, ScaleLadder, ladder_of
from numwords.exceptions import LocaleConfigError
from numwords.languages.english import ENGLISH, TABLES

EN_US = next(table for table in TABLES if table.code == "en-US")


def render(table, value, **kwargs):
    return table.cardinal.render(table, value, **kwargs)


class TestCardinalStrategy:
    """Tests for CardinalStrategy on the English tables."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "zero"),
            (7, "seven"),
            (21, "twenty-one"),
            (101, "one hundred and one"),
            (1001, "one thousand and one"),
            (1100, "one thousand one hundred"),
            (2_000_000, "two million"),
            (1_000_001, "one million and one"),
            (1_234_567, "one million two hundred and thirty-four thousand five hundred and sixty-seven"),
        ],
    )
    def test_english(self, value, expected):
        assert render(ENGLISH, value) == expected

    def test_zero_groups_are_skipped(self):
        assert render(EN_US, 1_000_000_005) == "one billion five"

    def test_pieces_mark_scale_words(self):
        pieces = CardinalStrategy().pieces(ENGLISH, 3_000_012)
        assert [p.text for p in pieces] == ["three", "million", "twelve"]
        assert [p.is_scale for p in pieces] == [False, True, False]
        assert pieces[2].gap

    def test_missing_scale_word_raises(self):
        table = replace(ENGLISH, ladder=ScaleLadder(ladder_of(("thousand", "million"))))
        with pytest.raises(LocaleConfigError, match="level 3"):
            render(table, 10**9)

    def test_nest_counts_top_word(self):
        table = replace(
            ENGLISH,
            ladder=ScaleLadder(ladder_of(("thousand", "million")), overflow=OverflowPolicy.NEST),
        )
        assert render(table, 10**9) == "one thousand million"
        assert render(table, 10**9 + 5) == "one thousand million and five"
        assert render(table, 2 * 10**12) == "two million million"


class TestHundredPairing:
    def test_pairs_hundreds(self):
        table = replace(EN_US, cardinal=HundredPairingCardinal())
        assert render(table, 1500) == "fifteen hundred"
        assert render(table, 1999) == "nineteen hundred ninety-nine"

    def test_round_thousands_unchanged(self):
        table = replace(EN_US, cardinal=HundredPairingCardinal())
        assert render(table, 2000) == "two thousand"
        assert render(table, 2050) == "two thousand fifty"
        assert render(table, 12_500) == "twelve thousand five hundred"

    def test_conjunction(self):
        table = replace(ENGLISH, cardinal=HundredPairingCardinal(conjunction=" and "))
        assert render(table, 1501) == "fifteen hundred and one"


class TestRespaced:
    def test_joiner(self):
        table = replace(EN_US, cardinal=RespacedCardinal("-"))
        assert render(table, 2003) == "two-thousand-three"
