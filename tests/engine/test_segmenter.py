"""Tests for the digit-group segmenter."""

from __future__ import annotations

import random

import pytest

from numwords.engine.segmenter import group_ceiling, level_weight, reconstruct, segment
from numwords.types import DigitGroup, GroupingStrategy


class TestSegment:
    """Tests for segment()."""

    def test_thousands(self):
        assert segment(1_234_567, GroupingStrategy.THOUSANDS) == (
            DigitGroup(1, 2),
            DigitGroup(234, 1),
            DigitGroup(567, 0),
        )

    def test_myriad(self):
        assert segment(123_456_789, GroupingStrategy.MYRIAD) == (
            DigitGroup(1, 2),
            DigitGroup(2345, 1),
            DigitGroup(6789, 0),
        )

    def test_indian(self):
        assert segment(12_345_678, GroupingStrategy.INDIAN) == (
            DigitGroup(1, 3),
            DigitGroup(23, 2),
            DigitGroup(45, 1),
            DigitGroup(678, 0),
        )

    def test_millions(self):
        assert segment(1_000_002_000_003, GroupingStrategy.MILLIONS) == (
            DigitGroup(1, 2),
            DigitGroup(2, 1),
            DigitGroup(3, 0),
        )

    def test_zero_groups_are_kept(self):
        assert segment(1_000_001, GroupingStrategy.THOUSANDS) == (
            DigitGroup(1, 2),
            DigitGroup(0, 1),
            DigitGroup(1, 0),
        )

    def test_zero(self):
        for strategy in GroupingStrategy:
            assert segment(0, strategy) == (DigitGroup(0, 0),)

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            segment(-1, GroupingStrategy.THOUSANDS)


class TestGroupingConsistency:
    """Groups always rebuild the number they came from."""

    @pytest.mark.parametrize("strategy", list(GroupingStrategy))
    def test_reconstruct(self, strategy):
        rng = random.Random(20240611)
        values = [0, 1, 9, 10, 99, 100, 999, 1000, 10**5, 10**7, 10**12, 10**30]
        values += [rng.randrange(10**31) for _ in range(200)]
        for value in values:
            groups = segment(value, strategy)
            assert reconstruct(groups, strategy) == value

    @pytest.mark.parametrize("strategy", list(GroupingStrategy))
    def test_groups_below_ceiling(self, strategy):
        for value in (7, 12_345, 98_765_432_101, 10**30 - 1):
            for group in segment(value, strategy):
                assert 0 <= group.value < group_ceiling(strategy, group.level)

    def test_levels_descend_to_zero(self):
        groups = segment(10**20, GroupingStrategy.THOUSANDS)
        assert [g.level for g in groups] == list(range(6, -1, -1))


class TestLevelWeight:
    """Tests for level_weight()."""

    def test_weights(self):
        assert level_weight(GroupingStrategy.THOUSANDS, 2) == 10**6
        assert level_weight(GroupingStrategy.MYRIAD, 2) == 10**8
        assert level_weight(GroupingStrategy.MILLIONS, 1) == 10**6
        assert level_weight(GroupingStrategy.INDIAN, 1) == 1000
        assert level_weight(GroupingStrategy.INDIAN, 2) == 100_000
        assert level_weight(GroupingStrategy.INDIAN, 3) == 10**7

    def test_negative_level(self):
        with pytest.raises(ValueError):
            level_weight(GroupingStrategy.THOUSANDS, -1)
