"""Assembler: joins rendered pieces into the final phrase.

The cardinal pipeline produces a flat sequence of pieces, most significant
first. A piece is either a numeral (a rendered digit-group or count) or a
pure scale word. The ConnectorRule decides what goes between each adjacent
pair. It only looks at piece metadata (level, value, has_hundred,
is_pure_scale_word) and never inspects phrase text, with one exception:
linker words chosen by the sound of the preceding word (Filipino).

Connector rules:
    separator / scale_separator: plain joiners ("" for compounding locales).
    conjunction + policy: optional word before the final group or between
        groups ("and", "e", "og", "ו").
    zero_marker: written before a group that follows a positional gap
        (Chinese 零).
    linker: rewrites a numeral before a scale word (isa -> isang).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from numwords.exceptions import LocaleConfigError
from numwords.types import RenderedSegment


@dataclass(frozen=True)
class Piece:
    """One element of an assembled number.

    Attributes:
        segment: Rendered phrase and its metadata.
        level: Scale level of the group this piece belongs to.
        value: Group value (for scale words, the count governing them).
        starts_group: First piece of its group.
        gap: Zero-valued positions were skipped right before this group.
        glue_before: Separator override before this piece.
        glue_after: Separator override after this piece.
    """

    segment: RenderedSegment
    level: int
    value: int
    starts_group: bool = True
    gap: bool = False
    glue_before: str | None = None
    glue_after: str | None = None

    @property
    def text(self) -> str:
        return self.segment.phrase

    @property
    def is_scale(self) -> bool:
        return self.segment.is_pure_scale_word


class ConjunctionPolicy(str, Enum):
    """Where the locale's conjunction is inserted."""

    NEVER = "never"
    # Before the final units group when it follows a scale and has no hundred
    FINAL_WITHOUT_HUNDRED = "final_without_hundred"
    # Before the final units group when it is below 100 or a round hundred
    FINAL_SIMPLE = "final_simple"
    # Before the final units group whenever it follows a scale
    FINAL_ALWAYS = "final_always"
    # Before the last non-empty group, at any level, when it follows a scale
    # and is below 100 or a round hundred
    LAST_SIMPLE = "last_simple"
    # Between every pair of groups
    BETWEEN_GROUPS = "between_groups"


Linker = Callable[[str], str]


@dataclass(frozen=True)
class ConnectorRule:
    """Joining rules for one locale.

    Attributes:
        separator: Joiner between groups and after scale words.
        scale_separator: Joiner between a count and its scale word.
        conjunction: Complete joiner used where the policy inserts the
            conjunction, spacing included (" and ", " ו").
        policy: Where the conjunction goes.
        scale_first: Write the scale word before its count ("elfu moja").
        zero_marker: Marker written before a group that follows a gap.
        linker: Rewrites the text before a scale word, returning it with its
            trailing joiner ("isa" -> "isang ").
    """

    separator: str = " "
    scale_separator: str = " "
    conjunction: str | None = None
    policy: ConjunctionPolicy = ConjunctionPolicy.NEVER
    scale_first: bool = False
    zero_marker: str | None = None
    linker: Linker | None = None

    def join(self, pieces: Sequence[Piece], total: int) -> str:
        """Assemble ``pieces`` into one phrase.

        Args:
            pieces: Pieces of the number, most significant first.
            total: The number the pieces spell.

        Raises:
            LocaleConfigError: If there is nothing to assemble.
        """
        if not pieces:
            raise LocaleConfigError(f"no words produced for {total}")

        last_group = max(i for i, piece in enumerate(pieces) if piece.starts_group)
        out = pieces[0].text
        for i, (prev, cur) in enumerate(zip(pieces, pieces[1:]), start=1):
            text = cur.text
            if cur.gap and cur.starts_group and self.zero_marker is not None:
                text = self.zero_marker + text

            if self.linker is not None and cur.is_scale and not prev.is_scale:
                out = self.linker(out) + text
                continue

            if self.conjunction is not None and self.wants_conjunction(prev, cur, final=i == last_group):
                out += self.conjunction + text
            else:
                out += self.separator_between(prev, cur, total) + text
        return out

    def wants_conjunction(self, prev: Piece, cur: Piece, *, final: bool = False) -> bool:
        """Whether the conjunction goes between ``prev`` and ``cur``.

        Args:
            prev: Piece before the joint.
            cur: Piece after the joint.
            final: ``cur`` starts the last group of the number.
        """
        policy = self.policy
        if policy is ConjunctionPolicy.NEVER or not cur.starts_group:
            return False
        if policy is ConjunctionPolicy.BETWEEN_GROUPS:
            return True
        if policy is ConjunctionPolicy.LAST_SIMPLE:
            return final and prev.is_scale and (not cur.segment.has_hundred or cur.value % 100 == 0)
        if cur.level != 0 or prev.level == 0:
            return False
        if policy is ConjunctionPolicy.FINAL_WITHOUT_HUNDRED:
            return not cur.segment.has_hundred
        if policy is ConjunctionPolicy.FINAL_SIMPLE:
            return not cur.segment.has_hundred or cur.value % 100 == 0
        return True

    def separator_between(self, prev: Piece, cur: Piece, total: int) -> str:
        """Plain joiner between two adjacent pieces."""
        if cur.is_scale and not prev.is_scale:
            return cur.glue_before if cur.glue_before is not None else self.scale_separator
        if prev.is_scale and prev.glue_after is not None:
            return prev.glue_after
        return self.separator
