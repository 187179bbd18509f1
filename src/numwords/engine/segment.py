"""Segment word builders.

A segment builder renders the value of one digit-group (0-999, 0-9999 or
0-999999 depending on the grouping strategy) into words. Builders are
immutable rule objects: the group value and a SegmentContext go in, a new
RenderedSegment comes out.

Builders:
    TripletBuilder: hundreds, tens and ones for 3-digit groups. Covers
        separate, hyphenated and inverted ("einundzwanzig") tens-ones
        compounds, irregular hundreds, and gendered ones.
    PositionalBuilder: digit-times-position-word renderers for myriad and
        6-digit groups (Chinese, Japanese, Korean, Thai).

Locale quirks that tables cannot express (elision, apocope, vigesimal
tens) are handled by subclassing a builder and overriding one hook.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from numwords.types import Gender, RenderedSegment


@dataclass(frozen=True)
class SegmentContext:
    """Where a segment sits in the number being rendered.

    Attributes:
        level: Scale level of the group; 0 is the units group.
        gender: Gender the numeral agrees with. None uses the builder default.
        scale_follows: A scale word directly follows this segment.
        is_final: This is the last numeral in the number.
        is_leading: This is the first numeral in the number.
    """

    level: int = 0
    gender: Gender | None = None
    scale_follows: bool = False
    is_final: bool = True
    is_leading: bool = True


class SegmentBuilder(ABC):
    """Renders one digit-group value."""

    @property
    def ceiling(self) -> int:
        """Exclusive upper bound of the values this builder accepts."""
        return 1000

    @abstractmethod
    def build(self, value: int, context: SegmentContext) -> RenderedSegment:
        """Render ``value`` (1 <= value < ceiling) into a segment.

        Args:
            value: Group value.
            context: Position and agreement of the group.

        Returns:
            A new RenderedSegment. ``has_hundred`` reflects the hundreds
            digit of ``value``.
        """
        pass


# =============================================================================
# Three-digit groups
# =============================================================================


@dataclass(frozen=True)
class TripletBuilder(SegmentBuilder):
    """Table-driven builder for values 0-999.

    Attributes:
        ones: Words for 0-9 (index 0 is unused).
        teens: Words for 10-19.
        tens: Words for the tens digit (indexes 0 and 1 are unused).
        hundred: Word for "hundred", counted by a ones word.
        hundreds: Full words for 100, 200, ... 900 (index 0 unused). Takes
            precedence over ``hundred``.
        hundred_omit_one: Write 100 as the bare hundred word.
        hundred_one: Numeral used for one hundred ("ein", "o", "se").
        hundred_glue: Separator between the count and the hundred word.
        hundred_joiner: Separator between the hundreds part and the rest.
        tens_joiner: Separator between tens and ones ("-", " ", "").
        inversion: Word placed between ones and tens in inverted compounds
            ("und", "en"). None writes tens first.
        compound_one: Form of one inside inverted compounds ("ein").
        masculine: Ones for 0-9 agreeing with a masculine noun.
        feminine: Ones for 0-9 agreeing with a feminine noun.
        neuter: Ones for 0-9 agreeing with a neuter noun.
        below_hundred: Full words for 0-99. Takes precedence over the
            ones/teens/tens tables.
    """

    ones: tuple[str, ...]
    teens: tuple[str, ...] = ()
    tens: tuple[str, ...] = ()
    hundred: str | None = None
    hundreds: tuple[str, ...] | None = None
    hundred_omit_one: bool = False
    hundred_one: str | None = None
    hundred_glue: str = " "
    hundred_joiner: str = " "
    tens_joiner: str = "-"
    inversion: str | None = None
    compound_one: str | None = None
    masculine: tuple[str, ...] | None = None
    feminine: tuple[str, ...] | None = None
    neuter: tuple[str, ...] | None = None
    below_hundred: tuple[str, ...] | None = None

    def build(self, value: int, context: SegmentContext) -> RenderedSegment:
        hundreds_digit, rest = divmod(value, 100)
        head = self.hundreds_word(hundreds_digit, context) if hundreds_digit else ""
        tail = self.below_hundred_word(rest, context) if rest else ""
        return RenderedSegment(
            phrase=self.join(head, tail, hundreds_digit, rest, context),
            has_hundred=hundreds_digit > 0,
        )

    def ones_table(self, context: SegmentContext) -> tuple[str, ...]:
        """Ones table agreeing with the context gender."""
        if context.gender is Gender.FEMININE and self.feminine is not None:
            return self.feminine
        if context.gender is Gender.MASCULINE and self.masculine is not None:
            return self.masculine
        if context.gender is Gender.NEUTER and self.neuter is not None:
            return self.neuter
        return self.ones

    def ones_word(self, digit: int, context: SegmentContext) -> str:
        return self.ones_table(context)[digit]

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        """Words for 1-99."""
        if self.below_hundred is not None:
            return self.below_hundred[value]
        if value < 10:
            return self.ones_word(value, context)
        if value < 20:
            return self.teens[value - 10]
        tens_digit, ones_digit = divmod(value, 10)
        if ones_digit == 0:
            return self.tens[tens_digit]
        if self.inversion is not None:
            one = self.ones_word(ones_digit, context)
            if ones_digit == 1 and self.compound_one is not None:
                one = self.compound_one
            return one + self.inversion + self.tens[tens_digit]
        return self.compound(tens_digit, ones_digit, context)

    def compound(self, tens_digit: int, ones_digit: int, context: SegmentContext) -> str:
        """Tens-ones compound such as "twenty-one"."""
        return self.tens[tens_digit] + self.tens_joiner + self.ones_word(ones_digit, context)

    def hundreds_word(self, digit: int, context: SegmentContext) -> str:
        """Words for 100, 200, ... 900."""
        if self.hundreds is not None:
            return self.hundreds[digit]
        if digit == 1:
            if self.hundred_omit_one:
                return self.hundred or ""
            if self.hundred_one is not None:
                return self.hundred_one + self.hundred_glue + (self.hundred or "")
        return self.ones[digit] + self.hundred_glue + (self.hundred or "")

    def join(
        self, head: str, tail: str, hundreds_digit: int, rest: int, context: SegmentContext
    ) -> str:
        """Join the hundreds part and the tens-ones part."""
        if head and tail:
            return head + self.hundred_joiner + tail
        return head or tail


# =============================================================================
# Positional groups
# =============================================================================


@dataclass(frozen=True)
class PositionalBuilder(SegmentBuilder):
    """Digit plus position-word builder.

    Renders each non-zero digit followed by its position word, most
    significant first: 三千零五 = 3 x 千, zero, 5.

    Attributes:
        digits: Words for 0-9.
        positions: Position words from units upward ("", "十", "百", "千").
        omit_one: Positions where a digit 1 is written as the bare position
            word.
        omit_one_leading: Positions where a digit 1 is dropped only when it
            is the first digit of the whole number (十五 but 一百一十五).
        zero: Marker written once for a run of inner zeros. None writes
            nothing.
        joiner: Separator between digit phrases.
    """

    digits: tuple[str, ...]
    positions: tuple[str, ...] = ("", "十", "百", "千")
    omit_one: frozenset[int] = frozenset()
    omit_one_leading: frozenset[int] = frozenset()
    zero: str | None = None
    joiner: str = ""

    @property
    def ceiling(self) -> int:
        return 10 ** len(self.positions)

    def build(self, value: int, context: SegmentContext) -> RenderedSegment:
        digits = [(value // 10**pos) % 10 for pos in range(len(self.positions))]
        words: list[str] = []
        pending_zero = False
        top = max(pos for pos, digit in enumerate(digits) if digit) if value else 0
        for pos in range(len(self.positions) - 1, -1, -1):
            digit = digits[pos]
            if digit == 0:
                if words:
                    pending_zero = True
                continue
            if pending_zero and self.zero is not None:
                words.append(self.zero)
            pending_zero = False
            words.append(self.digit_word(pos, digit, digits, pos == top and context.is_leading, context))
        return RenderedSegment(
            phrase=self.joiner.join(words),
            has_hundred=len(digits) > 2 and digits[2] > 0,
        )

    def digit_word(
        self,
        pos: int,
        digit: int,
        digits: list[int],
        leading: bool,
        context: SegmentContext,
    ) -> str:
        """Words for one non-zero digit at ``pos``."""
        if digit == 1 and pos > 0:
            if pos in self.omit_one or (leading and pos in self.omit_one_leading):
                return self.positions[pos]
        return self.digits[digit] + self.positions[pos]
