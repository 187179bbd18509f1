"""Tests for the Chinese, Japanese and Korean tables."""

from __future__ import annotations

import pytest

from numwords.registry import get_language


class TestChinese:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (10, "十"),
            (15, "十五"),
            (115, "一百一十五"),
            (1005, "一千零五"),
            (10_005, "一万零五"),
            (100_000, "十万"),
            (10**8, "一亿"),
            (10**12, "一万亿"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("zh-Hans").cardinal(value) == expected

    def test_formal(self):
        assert get_language("zh-Hans").cardinal(1005, formal=True) == "壹仟零伍"

    def test_traditional(self):
        assert get_language("zh-Hant").cardinal(10_005) == "一萬零五"

    def test_negative_and_fraction(self):
        chinese = get_language("zh-Hans")
        assert chinese.cardinal(-5) == "负五"
        assert chinese.cardinal("3.14") == "三点一四"

    def test_ordinal(self):
        assert get_language("zh-Hans").ordinal(3) == "第三"

    @pytest.mark.parametrize(
        "value, expected",
        [("1.50", "一元五角"), ("0.05", "五分"), ("2.35", "二元三角五分")],
    )
    def test_currency(self, value, expected):
        assert get_language("zh-Hans").currency(value) == expected


class TestJapanese:
    @pytest.mark.parametrize(
        "value, expected",
        [(1000, "千"), (1111, "千百十一"), (10_000, "一万"), (20_000, "二万")],
    )
    def test_cardinal(self, value, expected):
        assert get_language("ja").cardinal(value) == expected

    def test_currency(self):
        assert get_language("ja").currency(100) == "百円"


class TestKorean:
    @pytest.mark.parametrize(
        "value, expected",
        [(100, "백"), (10_000, "만"), (12_345, "만 이천삼백사십오")],
    )
    def test_cardinal(self, value, expected):
        assert get_language("ko").cardinal(value) == expected

    def test_ordinal(self):
        assert get_language("ko").ordinal(3) == "제삼"
