"""Tests for the assembler's connector rules."""

from __future__ import annotations

import pytest

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule, Piece
from numwords.exceptions import LocaleConfigError
from numwords.types import RenderedSegment


def numeral(text: str, level: int, value: int, *, has_hundred: bool = False, gap: bool = False) -> Piece:
    return Piece(RenderedSegment(text, has_hundred=has_hundred), level, value, gap=gap)


def scale(text: str, level: int, count: int) -> Piece:
    return Piece(RenderedSegment(text, is_pure_scale_word=True), level, count, starts_group=False)


class TestJoin:
    """Tests for ConnectorRule.join()."""

    def test_plain(self):
        rule = ConnectorRule()
        pieces = [numeral("two", 1, 2), scale("thousand", 1, 2), numeral("five", 0, 5)]
        assert rule.join(pieces, 2005) == "two thousand five"

    def test_empty_raises(self):
        with pytest.raises(LocaleConfigError):
            ConnectorRule().join([], 0)

    def test_final_without_hundred(self):
        rule = ConnectorRule(conjunction=" and ", policy=ConjunctionPolicy.FINAL_WITHOUT_HUNDRED)
        small = [numeral("one", 1, 1), scale("thousand", 1, 1), numeral("one", 0, 1)]
        big = [numeral("one", 1, 1), scale("thousand", 1, 1), numeral("one hundred", 0, 100, has_hundred=True)]
        assert rule.join(small, 1001) == "one thousand and one"
        assert rule.join(big, 1100) == "one thousand one hundred"

    def test_final_simple_accepts_round_hundreds(self):
        rule = ConnectorRule(conjunction=" e ", policy=ConjunctionPolicy.FINAL_SIMPLE)
        round_hundred = [numeral("mil", 1, 1), numeral("duzentos", 0, 200, has_hundred=True)]
        other = [numeral("mil", 1, 1), numeral("duzentos e um", 0, 201, has_hundred=True)]
        assert rule.join(round_hundred, 1200) == "mil e duzentos"
        assert rule.join(other, 1201) == "mil duzentos e um"

    def test_between_groups(self):
        rule = ConnectorRule(conjunction=" و", policy=ConjunctionPolicy.BETWEEN_GROUPS)
        pieces = [numeral("a", 1, 2), scale("b", 1, 2), numeral("c", 0, 3)]
        assert rule.join(pieces, 2003) == "a b وc"

    def test_zero_marker(self):
        rule = ConnectorRule(separator="", scale_separator="", zero_marker="零")
        pieces = [numeral("一", 1, 1), scale("万", 1, 1), numeral("五", 0, 5, gap=True)]
        assert rule.join(pieces, 10005) == "一万零五"

    def test_glue_overrides(self):
        rule = ConnectorRule()
        thousand = Piece(
            RenderedSegment("tausend", is_pure_scale_word=True),
            1,
            2,
            starts_group=False,
            glue_before="",
            glue_after="",
        )
        pieces = [numeral("zwei", 1, 2), thousand, numeral("drei", 0, 3)]
        assert rule.join(pieces, 2003) == "zweitausenddrei"

    def test_linker(self):
        rule = ConnectorRule(linker=lambda text: text + "ng ")
        pieces = [numeral("dalawa", 1, 2), scale("libo", 1, 2)]
        assert rule.join(pieces, 2000) == "dalawang libo"


class TestWantsConjunction:
    """Tests for ConnectorRule.wants_conjunction()."""

    def test_never(self):
        rule = ConnectorRule(conjunction=" and ")
        assert not rule.wants_conjunction(scale("thousand", 1, 1), numeral("one", 0, 1), final=True)

    def test_only_at_group_start(self):
        rule = ConnectorRule(conjunction=" and ", policy=ConjunctionPolicy.FINAL_ALWAYS)
        assert not rule.wants_conjunction(numeral("one", 1, 1), scale("thousand", 1, 1))

    def test_last_simple_any_level(self):
        rule = ConnectorRule(conjunction=" e ", policy=ConjunctionPolicy.LAST_SIMPLE)
        prev = scale("milhões", 2, 2)
        cur = numeral("cinco", 1, 5)
        assert rule.wants_conjunction(prev, cur, final=True)
        assert not rule.wants_conjunction(prev, cur, final=False)

    def test_last_simple_round_hundreds(self):
        rule = ConnectorRule(conjunction=" e ", policy=ConjunctionPolicy.LAST_SIMPLE)
        prev = scale("mil", 1, 1)
        assert rule.wants_conjunction(prev, numeral("cem", 0, 100, has_hundred=True), final=True)
        assert not rule.wants_conjunction(prev, numeral("cento e um", 0, 101, has_hundred=True), final=True)

    def test_separator_between(self):
        rule = ConnectorRule(separator="|", scale_separator="~")
        assert rule.separator_between(numeral("two", 1, 2), scale("thousand", 1, 2), 2000) == "~"
        assert rule.separator_between(scale("thousand", 1, 2), numeral("five", 0, 5), 2005) == "|"
