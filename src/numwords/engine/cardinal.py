"""Cardinal pipeline: segment, build, resolve scales, assemble.

CardinalStrategy turns a non-negative integer into words for one locale
rule table:

    value -> segment() -> DigitGroup* -> builder.build() + ScaleWord.resolve()
          -> Piece* -> connector.join() -> phrase

Two ladder features change how groups map onto scale words:

- Pairing (long-scale compound): groups at levels 2k and 2k+1 form one
  count of the 10**(6k) word, so 1.5 * 10**9 reads "mil quinientos millones".
- NEST overflow: past the top of the ladder the top scale word is counted
  by a full cardinal ("หนึ่งล้านล้าน", "one lakh crore").

Strategies hold no state; every call builds fresh pieces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from numwords.engine.assembler import Piece
from numwords.engine.scales import OverflowPolicy, ScaleWord
from numwords.engine.segment import SegmentContext
from numwords.engine.segmenter import group_ceiling, level_weight, segment
from numwords.exceptions import LocaleConfigError
from numwords.types import DigitGroup, Gender, RenderedSegment

if TYPE_CHECKING:
    from numwords.language import LocaleRuleTable

logger = logging.getLogger(__name__)


class CardinalStrategy:
    """Default cardinal renderer shared by every locale.

    Locales with whole-number conventions outside the pipeline (English
    hundred pairing) subclass it and override ``render``.
    """

    def render(
        self,
        table: "LocaleRuleTable",
        value: int,
        gender: Gender | None = None,
        *,
        scale_follows: bool = False,
    ) -> str:
        """Render a non-negative integer.

        Args:
            table: Locale rule table.
            value: Integer to render.
            gender: Gender of the counted noun.
            scale_follows: The number counts a scale word ("veintiún" millones).

        Raises:
            LocaleConfigError: If the rule table cannot express ``value``.
        """
        if value == 0:
            return table.zero
        pieces = self.pieces(table, value, gender, scale_follows=scale_follows)
        return table.connector.join(pieces, value)

    def pieces(
        self,
        table: "LocaleRuleTable",
        value: int,
        gender: Gender | None = None,
        *,
        scale_follows: bool = False,
        after_level: int | None = None,
    ) -> list[Piece]:
        """Rendered pieces of ``value``, most significant first.

        Args:
            after_level: Level of the group rendered right before this value,
                when it is the remainder of a nested number.
        """
        groups = segment(value, table.grouping)
        if not table.ladder.covers(groups[0].level):
            return self._nest(table, value, groups[0].level, gender, scale_follows, after_level)

        pieces: list[Piece] = []
        previous = after_level
        for count, level, word in self._entries(groups, table):
            if count == 0:
                continue
            gap = previous is not None and (
                previous - level > 1 or count < group_ceiling(table.grouping, level) // 10
            )
            if word is None:
                context = SegmentContext(
                    level=0,
                    gender=gender,
                    scale_follows=scale_follows,
                    is_final=True,
                    is_leading=not pieces and after_level is None,
                )
                pieces.append(Piece(table.builder.build(count, context), 0, count, gap=gap))
            else:
                pieces.extend(
                    self.scaled(
                        table,
                        count,
                        level,
                        word,
                        gender,
                        gap=gap,
                        leading=not pieces and after_level is None,
                    )
                )
            previous = level
        return pieces

    def scaled(
        self,
        table: "LocaleRuleTable",
        count: int,
        level: int,
        word: ScaleWord,
        gender: Gender | None,
        *,
        gap: bool = False,
        leading: bool = False,
    ) -> list[Piece]:
        """Pieces for ``count`` units of a scale word."""
        count_gender = word.gender or gender
        scale_piece = Piece(
            RenderedSegment(word.resolve(count), is_pure_scale_word=True),
            level,
            count,
            starts_group=False,
            glue_before=word.glue_before,
            glue_after=word.glue_after,
        )
        if word.omits_numeral(count) or count in word.fused:
            return [replace(scale_piece, starts_group=True, gap=gap)]

        if count == 1 and word.one_numeral is not None:
            numeral = RenderedSegment(word.one_numeral)
        elif count >= table.builder.ceiling:
            numeral = RenderedSegment(
                self.render(table, count, count_gender, scale_follows=True),
                has_hundred=(count // 100) % 10 > 0,
            )
        else:
            context = SegmentContext(
                level=level,
                gender=count_gender,
                scale_follows=True,
                is_final=False,
                is_leading=leading,
            )
            numeral = table.builder.build(count, context)

        count_piece = Piece(numeral, level, count, gap=gap)
        if table.connector.scale_first:
            return [
                replace(scale_piece, starts_group=True, gap=gap),
                replace(count_piece, starts_group=False, gap=False),
            ]
        return [count_piece, scale_piece]

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _entries(
        self, groups: tuple[DigitGroup, ...], table: "LocaleRuleTable"
    ) -> list[tuple[int, int, ScaleWord | None]]:
        """Map digit-groups to (count, level, scale word) entries."""
        ladder = table.ladder
        if not ladder.pairing:
            return [
                (group.value, group.level, ladder.word(group.level) if group.level else None)
                for group in groups
            ]

        values = {group.level: group.value for group in groups}
        entries: list[tuple[int, int, ScaleWord | None]] = []
        for k in range(groups[0].level // 2, 0, -1):
            count = values.get(2 * k + 1, 0) * 1000 + values.get(2 * k, 0)
            entries.append((count, 2 * k, ladder.words[k]))
        entries.append((values.get(1, 0), 1, ladder.words[0]))
        entries.append((values.get(0, 0), 0, None))
        return entries

    def _nest(
        self,
        table: "LocaleRuleTable",
        value: int,
        top_group_level: int,
        gender: Gender | None,
        scale_follows: bool,
        after_level: int | None,
    ) -> list[Piece]:
        ladder = table.ladder
        if ladder.overflow is not OverflowPolicy.NEST or ladder.pairing:
            raise LocaleConfigError(
                f"no scale word for digit-group level {top_group_level} "
                f"(ladder tops out at level {ladder.top_level})"
            )

        level = ladder.top_level
        quotient, rest = divmod(value, level_weight(table.grouping, level))
        logger.debug(
            "Nesting %d under scale word '%s' (quotient %d)", value, ladder.word(level).word, quotient
        )
        pieces = self.scaled(
            table,
            quotient,
            level,
            ladder.word(level),
            gender,
            leading=after_level is None,
        )
        if rest:
            pieces.extend(
                self.pieces(table, rest, gender, scale_follows=scale_follows, after_level=level)
            )
        return pieces


@dataclass(frozen=True)
class HundredPairingCardinal(CardinalStrategy):
    """Reads 1100-9999 as a count of hundreds ("fifteen hundred", "elfhonderd").

    Round thousands (2000, 3050) keep the regular reading.

    Attributes:
        glue: Joiner between the count and the hundred word.
        joiner: Joiner before the remainder.
        conjunction: Joiner before a small remainder, spacing included.
        conjunction_below: Remainders below this value take the conjunction.
    """

    glue: str = " "
    joiner: str = " "
    conjunction: str | None = None
    conjunction_below: int = 100

    def render(self, table, value, gender=None, *, scale_follows=False):
        if not (1100 <= value <= 9999 and (value // 100) % 10):
            return super().render(table, value, gender, scale_follows=scale_follows)
        high, low = divmod(value, 100)
        text = super().render(table, high, gender) + self.glue + table.builder.hundred
        if low:
            joiner = self.joiner
            if self.conjunction is not None and low < self.conjunction_below:
                joiner = self.conjunction
            text += joiner + super().render(table, low, gender, scale_follows=scale_follows)
        return text


@dataclass(frozen=True)
class RespacedCardinal(CardinalStrategy):
    """Writes every space of the cardinal as ``joiner``.

    Used for spellings that hyphenate every word (French "deux-mille-trois")
    or write the number as one word (Turkish "ikibinüç").
    """

    joiner: str = "-"

    def render(self, table, value, gender=None, *, scale_follows=False):
        text = super().render(table, value, gender, scale_follows=scale_follows)
        return text.replace(" ", self.joiner)
