"""Properties every built-in locale must satisfy."""

from __future__ import annotations

import random

import pytest

from numwords.engine.segmenter import group_ceiling, reconstruct, segment
from numwords.registry import available_locales, get_language
from numwords.types import Magnitude

LOCALES = available_locales()

_rng = random.Random(1234)
SAMPLE = sorted(
    set(range(0, 130))
    | {999, 1000, 1001, 1005, 1010, 1100, 2000, 5000, 11_000, 21_000, 100_000, 100_001}
    | {10**k for k in range(3, 31)}
    | {10**k + 1 for k in range(3, 31)}
    | {_rng.randrange(10**k) for k in range(4, 31) for _ in range(3)}
    | {10**30}
)
ORDINAL_SAMPLE = [v for v in SAMPLE if 0 < v < 10**12]
CURRENCY_SAMPLE = ["0", "0.01", "0.5", "1", "1.01", "2.02", "5.55", "21.21", "1000000.99"]


@pytest.fixture(params=LOCALES)
def language(request):
    return get_language(request.param)


class TestTotality:
    """Every value up to 10**30 renders."""

    def test_cardinal(self, language):
        for value in SAMPLE:
            words = language.cardinal(value)
            assert isinstance(words, str) and words, (language.code, value)
            assert words == words.strip(), (language.code, value)

    def test_ordinal(self, language):
        if not language.capabilities.ordinal:
            pytest.skip(f"{language.code} has no ordinals")
        for value in ORDINAL_SAMPLE:
            words = language.ordinal(value)
            assert isinstance(words, str) and words, (language.code, value)

    def test_currency(self, language):
        if not language.capabilities.currency:
            pytest.skip(f"{language.code} has no currency")
        for value in CURRENCY_SAMPLE:
            assert language.currency(value), (language.code, value)

    def test_fractions(self, language):
        for value in ("0.5", "3.14", "10.05", "1.000"):
            assert language.cardinal(value), (language.code, value)


class TestZeroLaw:
    def test_zero_is_the_zero_word(self, language):
        assert language.cardinal(0) == language.table.zero

    def test_negative_zero(self, language):
        assert language.cardinal("-0") == language.table.zero
        assert language.cardinal(-0.0) == language.table.zero


class TestSignLaw:
    def test_negative_prefixes_minus_word(self, language):
        table = language.table
        for value in (1, 7, 21, 100, 1001, 123_456_789):
            expected = table.negative + table.negative_separator + language.cardinal(value)
            assert language.cardinal(-value) == expected

    def test_negative_currency(self, language):
        if not language.capabilities.currency:
            pytest.skip(f"{language.code} has no currency")
        table = language.table
        assert language.currency("-2.50") == table.negative + table.negative_separator + language.currency("2.50")


class TestDeterminism:
    def test_repeatable(self, language):
        for value in (0, 17, 1001, 10**15 + 7, 10**30):
            assert language.cardinal(value) == language.cardinal(value)

    def test_parsed_and_raw_agree(self, language):
        for value in (5, 1234, 10**21):
            assert language.render_cardinal(Magnitude.of(value)) == language.cardinal(str(value))


class TestGroupingConsistency:
    def test_groups_reconstruct_the_value(self, language):
        grouping = language.table.grouping
        for value in SAMPLE:
            groups = segment(value, grouping)
            assert reconstruct(groups, grouping) == value
            assert all(0 <= group.value < group_ceiling(grouping, group.level) for group in groups)
