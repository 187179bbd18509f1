"""Fractional-digit rendering.

A number with fractional digits reads
``<integer words> <separator word> <fraction words>``.

Fraction styles:
    GROUPED: each leading zero is read as the zero word, the remaining
        digits as one integer ("zero zero five" / "one hundred twenty-five").
    DIGITS: every digit is read on its own (Greek, Chinese, Japanese, Thai).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from numwords.types import Gender, Magnitude

if TYPE_CHECKING:
    from numwords.language import LocaleRuleTable


class FractionStyle(str, Enum):
    """How fractional digits are read."""

    GROUPED = "grouped"
    DIGITS = "digits"


def render_fraction(table: "LocaleRuleTable", digits: str, gender: Gender | None = None) -> str:
    """Words for the fractional digit string ``digits``."""
    cardinal = table.cardinal
    if table.fraction_style is FractionStyle.DIGITS:
        words = [cardinal.render(table, int(digit), gender) for digit in digits]
        return table.word_separator.join(words)

    stripped = digits.lstrip("0")
    words = [table.zero] * (len(digits) - len(stripped))
    if stripped:
        words.append(cardinal.render(table, int(stripped), gender))
    return table.word_separator.join(words)


def render_magnitude(table: "LocaleRuleTable", magnitude: Magnitude, gender: Gender | None = None) -> str:
    """Integer and fractional words of ``magnitude``, without its sign."""
    sep = table.word_separator
    text = table.cardinal.render(table, magnitude.integer, gender)
    if magnitude.fraction is None:
        return text
    separator = table.decimal_separator(magnitude.integer)
    return sep.join([text, separator, render_fraction(table, magnitude.fraction, gender)])
