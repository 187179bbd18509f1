"""Ordinal transforms.

Every strategy reuses the cardinal pipeline and changes only the end of
the number (or wraps it in an ordinal marker):

    TerminalWordOrdinal: rewrite the last word of the cardinal
        ("twenty-one" -> "twenty-first", "einhundert" -> "einhundertste").
    ComponentOrdinal: re-render the lowest non-zero group from ordinal
        tables, or swap its scale word for an ordinal scale word
        ("dwudziesty pierwszy", "тисячний").
    PrefixOrdinal: ordinal marker before the cardinal ("第三", "ke-tiga").
    SuffixOrdinal: ordinal suffix on the whole cardinal, with an irregular
        table for small numbers (Turkish, Finnish, Norwegian, Hindi).

Suffix strategies that guess forms for numbers past their irregular table
are flagged ``naive``: the result follows a mechanical rule that has not
been checked against attested usage.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Callable, Mapping

from numwords.engine.segment import SegmentContext
from numwords.exceptions import LocaleConfigError
from numwords.types import Gender

if TYPE_CHECKING:
    from numwords.language import LocaleRuleTable

logger = logging.getLogger(__name__)

SuffixFunc = Callable[[str, int], str]


class OrdinalStrategy(ABC):
    """Base class for ordinal transforms."""

    naive: bool = False

    @abstractmethod
    def render(self, table: "LocaleRuleTable", value: int, gender: Gender | None = None) -> str:
        """Render the positive integer ``value`` as an ordinal."""
        pass


# =============================================================================
# Terminal word
# =============================================================================


@dataclass(frozen=True)
class TerminalWordOrdinal(OrdinalStrategy):
    """Rewrite the last word of the cardinal.

    Lookup order: whole-number forms, then exact last-word forms, then
    ending replacements, then the suffix function.

    Attributes:
        numbers: Complete ordinals for specific numbers.
        words: Ordinal form of a complete last word ("one" -> "first").
        endings: (ending, replacement) pairs tried in order on the last word.
        suffix: Fallback ``(word, value) -> ordinal word``.
        delimiters: Characters that separate words in the cardinal.
        prefix: Text placed before the result ("al ").
    """

    numbers: Mapping[int, str] = field(default_factory=dict)
    words: Mapping[str, str] = field(default_factory=dict)
    endings: tuple[tuple[str, str], ...] = ()
    suffix: SuffixFunc | None = None
    delimiters: str = " -"
    prefix: str = ""

    def render(self, table: "LocaleRuleTable", value: int, gender: Gender | None = None) -> str:
        if value in self.numbers:
            return self.numbers[value]
        cardinal = table.cardinal.render(table, value, gender)
        split = max(cardinal.rfind(ch) for ch in self.delimiters) if self.delimiters else -1
        head, last = cardinal[: split + 1], cardinal[split + 1 :]
        return self.prefix + head + self.transform(last, value)

    def transform(self, word: str, value: int) -> str:
        """Ordinal form of the last cardinal word."""
        if word in self.words:
            return self.words[word]
        for ending, replacement in self.endings:
            if word.endswith(ending):
                return word[: len(word) - len(ending)] + replacement
        if self.suffix is None:
            raise LocaleConfigError(f"no ordinal form for '{word}'")
        return self.suffix(word, value)


# =============================================================================
# Component ordinals
# =============================================================================


@dataclass(frozen=True)
class OrdinalTables:
    """Ordinal vocabulary for one group.

    Attributes:
        ones: Ordinals for 1-9 (index 0 unused).
        teens: Ordinals for 10-19.
        tens: Ordinals for 20, 30, ... 90 (indexes 0 and 1 unused).
        hundreds: Ordinals for 100, 200, ... 900 (index 0 unused).
        scales: Ordinal scale words, ``scales[0]`` is level 1.
        scale_suffix: Suffix deriving ordinal scale words past ``scales``
            from the singular scale word.
        ordinal_tens: Tens inside a tens-ones compound are ordinal too.
        ordinal_hundreds: Hundreds inside a compound are ordinal too.
        tens_joiner: Separator between tens and ones.
        hundred_joiner: Separator between hundreds and the rest.
    """

    ones: tuple[str, ...]
    teens: tuple[str, ...]
    tens: tuple[str, ...]
    hundreds: tuple[str, ...]
    scales: tuple[str, ...] = ()
    scale_suffix: str | None = None
    ordinal_tens: bool = False
    ordinal_hundreds: bool = False
    tens_joiner: str = " "
    hundred_joiner: str = " "

    def inflected(self, endings: tuple[tuple[str, str], ...]) -> "OrdinalTables":
        """Tables for another gender, built by rewriting word endings.

        Every space-separated word takes the first matching
        (ending, replacement) pair; words matching none stay as they are.
        """

        def inflect(words: tuple[str, ...]) -> tuple[str, ...]:
            return tuple(" ".join(_replace_ending(part, endings) for part in word.split(" ")) for word in words)

        return replace(
            self,
            ones=inflect(self.ones),
            teens=inflect(self.teens),
            tens=inflect(self.tens),
            hundreds=inflect(self.hundreds),
            scales=inflect(self.scales),
        )


def _replace_ending(word: str, endings: tuple[tuple[str, str], ...]) -> str:
    for ending, replacement in endings:
        if word.endswith(ending):
            return word[: len(word) - len(ending)] + replacement
    return word


@dataclass(frozen=True)
class ComponentOrdinal(OrdinalStrategy):
    """Ordinal built from per-component ordinal tables.

    Only the lowest non-zero group changes. When the number ends in a scale
    word that word is replaced by its ordinal form, and a count of one in
    front of it is dropped ("тисячний", "tūkstantasis").
    """

    tables: OrdinalTables
    feminine: OrdinalTables | None = None

    def render(self, table: "LocaleRuleTable", value: int, gender: Gender | None = None) -> str:
        tables = self.feminine if gender is Gender.FEMININE and self.feminine else self.tables
        pieces = table.cardinal.pieces(table, value, gender)
        last = pieces[-1]
        if last.is_scale:
            phrase = self.scale_word(table, tables, last.level)
            pieces[-1] = replace(last, segment=last.segment.with_phrase(phrase))
            if last.value == 1 and len(pieces) > 1:
                before = pieces[-2]
                if not before.is_scale and before.level == last.level and before.value == 1:
                    del pieces[-2]
                    pieces[-1] = replace(pieces[-1], starts_group=True)
        else:
            phrase = self.group_words(table, tables, last.value, gender)
            pieces[-1] = replace(last, segment=last.segment.with_phrase(phrase))
        return table.connector.join(pieces, value)

    def scale_word(self, table: "LocaleRuleTable", tables: OrdinalTables, level: int) -> str:
        """Ordinal form of the scale word at ``level``."""
        index = level - 1
        if table.ladder.pairing and level > 1:
            index = level // 2
        if index < len(tables.scales):
            return tables.scales[index]
        if tables.scale_suffix is not None:
            return table.ladder.words[index].word + tables.scale_suffix
        raise LocaleConfigError(f"no ordinal scale word for level {level}")

    def group_words(
        self,
        table: "LocaleRuleTable",
        tables: OrdinalTables,
        value: int,
        gender: Gender | None,
    ) -> str:
        """Ordinal words for a group value 1-999."""
        hundreds_digit, rest = divmod(value, 100)
        if rest == 0:
            return tables.hundreds[hundreds_digit]
        if rest < 10:
            low = tables.ones[rest]
        elif rest < 20:
            low = tables.teens[rest - 10]
        else:
            tens_digit, ones_digit = divmod(rest, 10)
            if ones_digit == 0:
                low = tables.tens[tens_digit]
            else:
                tens_word = tables.tens[tens_digit] if tables.ordinal_tens else table.builder.tens[tens_digit]
                low = tens_word + tables.tens_joiner + tables.ones[ones_digit]
        if not hundreds_digit:
            return low
        if tables.ordinal_hundreds:
            head = tables.hundreds[hundreds_digit]
        else:
            head = table.builder.hundreds_word(hundreds_digit, SegmentContext(gender=gender))
        return head + tables.hundred_joiner + low


# =============================================================================
# Prefix and suffix ordinals
# =============================================================================


@dataclass(frozen=True)
class PrefixOrdinal(OrdinalStrategy):
    """Ordinal marker placed before the cardinal.

    Attributes:
        prefix: Marker including its joiner ("第", "ke", "thứ ").
        numbers: Irregular ordinals by number ("pertama", "thứ nhất").
    """

    prefix: str
    numbers: Mapping[int, str] = field(default_factory=dict)

    def render(self, table: "LocaleRuleTable", value: int, gender: Gender | None = None) -> str:
        if value in self.numbers:
            return self.numbers[value]
        return self.prefix + table.cardinal.render(table, value, gender)


@dataclass(frozen=True)
class SuffixOrdinal(OrdinalStrategy):
    """Ordinal suffix applied to the whole cardinal.

    Attributes:
        suffix: ``(cardinal, value) -> ordinal``.
        numbers: Irregular ordinals by number.
        naive: The suffix rule is a mechanical approximation.
    """

    suffix: SuffixFunc
    numbers: Mapping[int, str] = field(default_factory=dict)
    naive: bool = False

    def render(self, table: "LocaleRuleTable", value: int, gender: Gender | None = None) -> str:
        if value in self.numbers:
            return self.numbers[value]
        cardinal = table.cardinal.render(table, value, gender)
        if self.naive:
            logger.debug(
                "Naive ordinal suffixation for %d in '%s' (unverified form)", value, table.code
            )
        return self.suffix(cardinal, value)
