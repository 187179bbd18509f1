"""Currency renderer.

An amount is split upstream into major and minor units. Each part is
rendered through the cardinal pipeline in the grammatical gender of its
unit noun, the noun form is chosen by the same plural rules as scale words,
and the two phrases are joined with the locale's conjunction.

Zero parts are omitted: only the non-zero part is written, and a zero
amount is written as zero major units ("zero dollars").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Mapping

from numwords.engine.plural import PluralForms
from numwords.types import CurrencyAmount, Gender

if TYPE_CHECKING:
    from numwords.language import LocaleRuleTable


class UnitPosition(str, Enum):
    """Position of the unit noun relative to its numeral."""

    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class CurrencyUnit:
    """A currency unit noun and how it is counted.

    Attributes:
        forms: Noun forms selected by the count.
        gender: Gender the numeral agrees with.
        position: Noun before or after the numeral.
        one_numeral: Numeral replacing "one" before the noun ("un", "ein").
        fused: Complete phrases for specific counts ("שני שקלים", "ريالان").
        attributive: Render the numeral in its pre-noun form ("veintiún").
        separator: Joiner between numeral and noun.
        linker: ``count -> text`` inserted between numeral and noun
            ("de" in Romanian "douăzeci de lei").
    """

    forms: PluralForms
    gender: Gender | None = None
    position: UnitPosition = UnitPosition.AFTER
    one_numeral: str | None = None
    fused: Mapping[int, str] = field(default_factory=dict)
    attributive: bool = False
    separator: str = " "
    linker: Callable[[int], str] | None = None

    def phrase(self, table: "LocaleRuleTable", count: int) -> str:
        """Numeral and noun for ``count`` units."""
        if count in self.fused:
            return self.fused[count]
        noun = self.forms.select(count)
        if count == 1 and self.one_numeral is not None:
            numeral = self.one_numeral
        else:
            numeral = table.cardinal.render(
                table, count, self.gender, scale_follows=self.attributive
            )
        if self.position is UnitPosition.BEFORE:
            return noun + self.separator + numeral
        link = self.linker(count) if self.linker is not None else ""
        return numeral + self.separator + link + noun


@dataclass(frozen=True)
class CurrencyStyle:
    """Major and minor units plus the joining rule.

    Attributes:
        major: Main unit (dollar, złoty, 円).
        minor: Subunit (cent, grosz, 銭).
        conjunction: Joiner used when the conjunction is included
            (" and ", " e ").
        joiner: Joiner used otherwise.
        conjunction_default: Whether the conjunction is included when the
            caller does not say.
    """

    major: CurrencyUnit
    minor: CurrencyUnit
    conjunction: str = " "
    joiner: str = " "
    conjunction_default: bool = True

    def render(
        self,
        table: "LocaleRuleTable",
        amount: CurrencyAmount,
        include_conjunction: bool | None = None,
    ) -> str:
        """Render ``amount``.

        Args:
            table: Locale rule table.
            amount: Parsed amount.
            include_conjunction: Join the parts with the conjunction. None
                uses the style default.
        """
        parts: list[str] = []
        if amount.major > 0 or amount.minor == 0:
            parts.append(self.major.phrase(table, amount.major))
        if amount.minor > 0:
            parts.append(self.minor.phrase(table, amount.minor))

        if include_conjunction is None:
            include_conjunction = self.conjunction_default
        text = (self.conjunction if include_conjunction else self.joiner).join(parts)
        if amount.negative:
            text = table.negative + table.negative_separator + text
        return text
