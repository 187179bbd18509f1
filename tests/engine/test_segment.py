"""Tests for the segment word builders."""

from __future__ import annotations

import pytest

from numwords.engine.segment import PositionalBuilder, SegmentContext, TripletBuilder
from numwords.types import Gender

ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
TEENS = ("ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen", "eighteen", "nineteen")
TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


@pytest.fixture
def english():
    return TripletBuilder(ones=ONES, teens=TEENS, tens=TENS, hundred="hundred")


class TestTripletBuilder:
    """Tests for TripletBuilder."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "one"),
            (10, "ten"),
            (19, "nineteen"),
            (20, "twenty"),
            (42, "forty-two"),
            (100, "one hundred"),
            (101, "one hundred one"),
            (999, "nine hundred ninety-nine"),
        ],
    )
    def test_build(self, english, value, expected):
        assert english.build(value, SegmentContext()).phrase == expected

    def test_has_hundred_comes_from_digits(self, english):
        ctx = SegmentContext()
        assert english.build(305, ctx).has_hundred
        assert not english.build(99, ctx).has_hundred
        assert not english.build(5, ctx).is_pure_scale_word

    def test_inversion(self):
        builder = TripletBuilder(
            ones=("", "eins", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun"),
            teens=TEENS,
            tens=("", "", "zwanzig", "dreißig"),
            inversion="und",
            compound_one="ein",
        )
        assert builder.build(21, SegmentContext()).phrase == "einundzwanzig"
        assert builder.build(32, SegmentContext()).phrase == "zweiunddreißig"

    def test_gendered_ones(self):
        builder = TripletBuilder(
            ones=("", "jeden", "dwa"),
            feminine=("", "jedna", "dwie"),
            tens=(),
        )
        assert builder.build(2, SegmentContext()).phrase == "dwa"
        assert builder.build(2, SegmentContext(gender=Gender.FEMININE)).phrase == "dwie"
        assert builder.build(2, SegmentContext(gender=Gender.MASCULINE)).phrase == "dwa"

    def test_irregular_hundreds(self):
        builder = TripletBuilder(
            ones=ONES,
            teens=TEENS,
            tens=TENS,
            hundreds=("", "sto", "dwieście"),
        )
        assert builder.build(200, SegmentContext()).phrase == "dwieście"
        assert builder.build(105, SegmentContext()).phrase == "sto five"

    def test_hundred_omit_one(self):
        builder = TripletBuilder(ones=ONES, teens=TEENS, tens=TENS, hundred="cent", hundred_omit_one=True)
        assert builder.build(100, SegmentContext()).phrase == "cent"
        assert builder.build(200, SegmentContext()).phrase == "two cent"

    def test_below_hundred_table(self):
        table = tuple(f"n{i}" for i in range(100))
        builder = TripletBuilder(ones=table[:10], hundred="h", below_hundred=table)
        assert builder.build(57, SegmentContext()).phrase == "n57"
        assert builder.build(357, SegmentContext()).phrase == "n3 h n57"

    def test_default_ceiling(self, english):
        assert english.ceiling == 1000


class TestPositionalBuilder:
    """Tests for PositionalBuilder."""

    @pytest.fixture
    def chinese(self):
        return PositionalBuilder(
            digits=("零", "一", "二", "三", "四", "五", "六", "七", "八", "九"),
            omit_one_leading=frozenset({1}),
            zero="零",
        )

    @pytest.mark.parametrize(
        "value, expected",
        [(1, "一"), (10, "十"), (15, "十五"), (1005, "一千零五"), (1050, "一千零五十"), (2300, "二千三百")],
    )
    def test_leading(self, chinese, value, expected):
        assert chinese.build(value, SegmentContext()).phrase == expected

    def test_inner_ten_keeps_one(self, chinese):
        assert chinese.build(115, SegmentContext()).phrase == "一百一十五"
        assert chinese.build(10, SegmentContext(is_leading=False)).phrase == "一十"

    def test_omit_one(self):
        builder = PositionalBuilder(
            digits=("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九"),
            omit_one=frozenset({1, 2, 3}),
        )
        assert builder.build(1111, SegmentContext()).phrase == "千百十一"
        assert builder.build(2022, SegmentContext()).phrase == "二千二十二"

    def test_ceiling(self, chinese):
        assert chinese.ceiling == 10_000
        assert PositionalBuilder(digits=("",) * 10, positions=("",) * 6).ceiling == 10**6

    def test_has_hundred(self, chinese):
        assert chinese.build(1200, SegmentContext()).has_hundred
        assert not chinese.build(1005, SegmentContext()).has_hundred
