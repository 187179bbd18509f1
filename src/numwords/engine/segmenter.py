"""Digit-group segmenter.

Splits a non-negative integer into digit-groups according to a grouping
strategy. Groups are returned most-significant first and zero-valued groups
are kept: the assembler decides whether to skip them, and East Asian
renderers need to see them to place zero markers.

Example:
    >>> segment(12_345_678, GroupingStrategy.INDIAN)
    (DigitGroup(value=1, level=3), DigitGroup(value=23, level=2),
     DigitGroup(value=45, level=1), DigitGroup(value=678, level=0))
"""

from __future__ import annotations

from typing import Iterable

from numwords.types import DigitGroup, GroupingStrategy


def group_ceiling(strategy: GroupingStrategy, level: int) -> int:
    """Exclusive upper bound of a group value at ``level``."""
    if strategy is GroupingStrategy.THOUSANDS:
        return 1000
    if strategy is GroupingStrategy.MYRIAD:
        return 10_000
    if strategy is GroupingStrategy.MILLIONS:
        return 1_000_000
    if strategy is GroupingStrategy.INDIAN:
        return 1000 if level == 0 else 100
    raise ValueError(f"Unknown grouping strategy: {strategy!r}")


def level_weight(strategy: GroupingStrategy, level: int) -> int:
    """Numeric weight of one unit at ``level`` (1, 1000, 10**6, ...)."""
    if level < 0:
        raise ValueError(f"Scale level must be >= 0, got {level}")
    if strategy is GroupingStrategy.INDIAN:
        return 1 if level == 0 else 1000 * 100 ** (level - 1)
    return group_ceiling(strategy, 0) ** level


def segment(value: int, strategy: GroupingStrategy) -> tuple[DigitGroup, ...]:
    """Split ``value`` into digit-groups, most-significant first.

    Zero yields a single zero-valued units group.

    Raises:
        ValueError: If ``value`` is negative.
    """
    if value < 0:
        raise ValueError(f"Cannot segment a negative value: {value}")

    groups: list[DigitGroup] = []
    level = 0
    remaining = value
    while True:
        remaining, group_value = divmod(remaining, group_ceiling(strategy, level))
        groups.append(DigitGroup(value=group_value, level=level))
        level += 1
        if remaining == 0:
            break
    groups.reverse()
    return tuple(groups)


def reconstruct(groups: Iterable[DigitGroup], strategy: GroupingStrategy) -> int:
    """Rebuild the integer a sequence of groups was segmented from."""
    return sum(group.value * level_weight(strategy, group.level) for group in groups)
