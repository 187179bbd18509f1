"""Tests for scale words and ladders."""

from __future__ import annotations

import pytest

from numwords.engine.plural import POLISH, PluralForms
from numwords.engine.scales import NumeralPolicy, OverflowPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.exceptions import LocaleConfigError


class TestScaleWord:
    def test_of(self):
        word = ScaleWord.of("million", "millions")
        assert word.word == "million"
        assert word.resolve(1) == "million"
        assert word.resolve(3) == "millions"

    def test_three_forms(self):
        word = ScaleWord(PluralForms.three("tysiąc", "tysiące", "tysięcy", rule=POLISH))
        assert [word.resolve(n) for n in (1, 2, 5, 22)] == ["tysiąc", "tysiące", "tysięcy", "tysiące"]

    def test_fused_takes_precedence(self):
        word = ScaleWord.of("אלף", "אלפים", fused={2: "אלפיים"})
        assert word.resolve(2) == "אלפיים"
        assert word.resolve(5) == "אלפים"

    def test_numeral_policy(self):
        keep = ScaleWord.of("thousand")
        omit = ScaleWord.of("bin", policy=NumeralPolicy.OMIT_ONE)
        assert not keep.omits_numeral(1)
        assert omit.omits_numeral(1)
        assert not omit.omits_numeral(2)


class TestLadder:
    def test_ladder_of(self):
        words = ladder_of(("thousand", "million"))
        assert [w.word for w in words] == ["thousand", "million"]

    def test_ladder_of_applies_keywords(self):
        words = ladder_of(("Million", "Milliarde"), ("Millionen", "Milliarden"), one_numeral="eine")
        assert all(w.one_numeral == "eine" for w in words)
        assert words[1].resolve(2) == "Milliarden"

    def test_ladder_of_length_mismatch(self):
        with pytest.raises(LocaleConfigError):
            ladder_of(("a", "b"), ("as",))

    def test_word_lookup(self):
        ladder = ScaleLadder(ladder_of(("thousand", "million")))
        assert ladder.top_level == 2
        assert ladder.word(2).word == "million"
        assert ladder.resolve(1, 5) == "thousand"

    def test_missing_level_raises(self):
        ladder = ScaleLadder(ladder_of(("thousand",)))
        with pytest.raises(LocaleConfigError, match="level 2"):
            ladder.word(2)
        with pytest.raises(LocaleConfigError):
            ladder.word(0)

    def test_covers(self):
        ladder = ScaleLadder(ladder_of(("thousand", "million")))
        assert ladder.covers(2)
        assert not ladder.covers(3)

    def test_covers_with_pairing(self):
        ladder = ScaleLadder(ladder_of(("mil", "millón", "billón")), pairing=True)
        assert ladder.covers(5)
        assert not ladder.covers(6)

    def test_default_overflow_raises(self):
        assert ScaleLadder(()).overflow is OverflowPolicy.RAISE
