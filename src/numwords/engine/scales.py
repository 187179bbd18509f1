"""Scale resolver: scale words and the ladders that order them.

A scale word names a power of the grouping base ("thousand", "lakh", "万").
Its surface form depends on the number counting it, so a ScaleWord is a
resolver ``count -> word`` built from a PluralForms table plus a policy for
the numeral "one" in front of it.

Policies:
    KEEP_ONE: always write the numeral ("one million", "un milione").
    OMIT_ONE: write the bare scale word for a count of one ("bin", "tuhat").

A ScaleLadder lists scale words by level. Short and long scales are two
different ladders, never two code paths. Ladders that stop short of the
numbers a locale must cover either raise LocaleConfigError (RAISE) or
nest: the top scale word is counted by a full cardinal (NEST).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from numwords.engine.plural import PluralForms, PluralRuleFunc, one_other
from numwords.exceptions import LocaleConfigError
from numwords.types import Gender


class NumeralPolicy(str, Enum):
    """Whether a count of one is written before the scale word."""

    KEEP_ONE = "keep_one"
    OMIT_ONE = "omit_one"


class OverflowPolicy(str, Enum):
    """What to do with a number beyond the top of the ladder."""

    RAISE = "raise"
    NEST = "nest"


@dataclass(frozen=True)
class ScaleWord:
    """A scale word and the rules for counting it.

    Attributes:
        forms: Word forms selected by the count.
        policy: Numeral policy for a count of one.
        one_numeral: Word replacing the numeral "one" before this scale word
            ("ein", "eine", "un", "o", "se").
        gender: Grammatical gender of the scale noun. Numerals counting it
            agree with this gender.
        glue_before: Separator between the count and the word. None uses the
            locale's scale separator.
        glue_after: Separator between the word and whatever follows. None
            uses the locale's group separator.
        fused: Complete phrases replacing numeral and word for specific
            counts ("אלפיים", "ألفان").
    """

    forms: PluralForms
    policy: NumeralPolicy = NumeralPolicy.KEEP_ONE
    one_numeral: str | None = None
    gender: Gender | None = None
    glue_before: str | None = None
    glue_after: str | None = None
    fused: Mapping[int, str] = field(default_factory=dict)

    @classmethod
    def of(
        cls,
        one: str,
        other: str | None = None,
        *,
        rule: PluralRuleFunc = one_other,
        **kwargs,
    ) -> "ScaleWord":
        """Build a scale word with a singular and an optional plural form."""
        return cls(forms=PluralForms(one=one, other=other or one, rule=rule), **kwargs)

    @property
    def word(self) -> str:
        """The citation (singular) form."""
        return self.forms.one

    def resolve(self, count: int) -> str:
        """Return the form governed by ``count``."""
        if count in self.fused:
            return self.fused[count]
        return self.forms.select(count)

    def omits_numeral(self, count: int) -> bool:
        """True when ``count`` is written as the bare scale word."""
        return count == 1 and self.policy is NumeralPolicy.OMIT_ONE


def ladder_of(
    words: list[str] | tuple[str, ...],
    plurals: list[str] | tuple[str, ...] | None = None,
    *,
    rule: PluralRuleFunc = one_other,
    **kwargs,
) -> tuple[ScaleWord, ...]:
    """Build scale words from parallel singular and plural lists.

    Keyword arguments are applied to every word.
    """
    if plurals is None:
        plurals = words
    if len(plurals) != len(words):
        raise LocaleConfigError(
            f"{len(words)} singular scale words but {len(plurals)} plural forms"
        )
    return tuple(
        ScaleWord.of(one, other, rule=rule, **kwargs) for one, other in zip(words, plurals)
    )


@dataclass(frozen=True)
class ScaleLadder:
    """Scale words ordered by level.

    Attributes:
        words: Scale words; ``words[0]`` is level 1.
        overflow: Policy for numbers beyond the top level.
        pairing: Long-scale compound pairing. ``words[0]`` is the thousand
            word and ``words[k]`` names 10**(6k); a count of thousands of a
            million-scale word is written with the thousand word in front
            ("mil millones", "dois mil milhões").
    """

    words: tuple[ScaleWord, ...]
    overflow: OverflowPolicy = OverflowPolicy.RAISE
    pairing: bool = False

    @property
    def top_level(self) -> int:
        """Highest level that has its own scale word."""
        return len(self.words)

    def word(self, level: int) -> ScaleWord:
        """Return the scale word at ``level``.

        Raises:
            LocaleConfigError: If the ladder has no word at ``level``.
        """
        if level < 1 or level > len(self.words):
            raise LocaleConfigError(
                f"no scale word for level {level} (ladder has {len(self.words)} levels)"
            )
        return self.words[level - 1]

    def resolve(self, level: int, count: int) -> str:
        """Return the scale word at ``level`` in the form governed by ``count``."""
        return self.word(level).resolve(count)

    def covers(self, group_level: int) -> bool:
        """True when a digit-group at ``group_level`` has a scale word."""
        if self.pairing:
            return group_level // 2 < len(self.words)
        return group_level <= len(self.words)
