"""Plural rules for scale words and currency nouns.

Word forms for "thousand", "million", "złoty" or "שקל" depend on the
number that governs them. This module holds the CLDR-style category
selectors used by every locale and the PluralForms table that turns a
category into a word.

Rules are plain callables ``(n: int) -> PluralCategory`` and are pure. The
Slavic and Baltic three-form family is a single table-driven rule
(ThreeFormRule) whose digit windows vary per locale.

Usage:
    from numwords.engine.plural import POLISH, PluralForms

    thousand = PluralForms(one="tysiąc", few="tysiące", many="tysięcy", rule=POLISH)
    thousand.select(1)   # "tysiąc"
    thousand.select(3)   # "tysiące"
    thousand.select(11)  # "tysięcy"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from numwords.exceptions import LocaleConfigError


class PluralCategory(str, Enum):
    """CLDR plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


# Type for plural rule function
PluralRuleFunc = Callable[[int], PluralCategory]


# =============================================================================
# Rule families
# =============================================================================


@dataclass(frozen=True)
class ThreeFormRule:
    """Table-driven one/few/many selector for Slavic and Baltic languages.

    Attributes:
        one_exact: Only n == 1 is ONE (Polish, Czech). Otherwise every number
            whose last digit is 1 outside the teen window is ONE.
        few_digits: Inclusive last-digit window selecting FEW.
        teen_window: Inclusive last-two-digit window that always selects MANY.
    """

    one_exact: bool = False
    few_digits: tuple[int, int] = (2, 4)
    teen_window: tuple[int, int] = (11, 19)

    def __call__(self, n: int) -> PluralCategory:
        n = abs(n)
        last = n % 10
        last_two = n % 100
        in_teens = self.teen_window[0] <= last_two <= self.teen_window[1]

        if self.one_exact:
            if n == 1:
                return PluralCategory.ONE
        elif last == 1 and not in_teens:
            return PluralCategory.ONE

        if in_teens:
            return PluralCategory.MANY
        if self.few_digits[0] <= last <= self.few_digits[1]:
            return PluralCategory.FEW
        return PluralCategory.MANY


def one_other(n: int) -> PluralCategory:
    """English, German, Dutch, Italian, Spanish, Scandinavian, ..."""
    return PluralCategory.ONE if abs(n) == 1 else PluralCategory.OTHER


def zero_one_other(n: int) -> PluralCategory:
    """French: 0 and 1 are singular."""
    return PluralCategory.ONE if abs(n) in (0, 1) else PluralCategory.OTHER


def invariant(n: int) -> PluralCategory:
    """Languages without plural distinction (Chinese, Japanese, Malay, ...)."""
    return PluralCategory.OTHER


def last_digit_one(n: int) -> PluralCategory:
    """Latvian: singular iff n % 10 == 1 and n % 100 != 11."""
    n = abs(n)
    if n % 10 == 1 and n % 100 != 11:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def dual(n: int) -> PluralCategory:
    """Hebrew: distinct forms for one and two."""
    n = abs(n)
    if n == 1:
        return PluralCategory.ONE
    if n == 2:
        return PluralCategory.TWO
    return PluralCategory.OTHER


def romanian(n: int) -> PluralCategory:
    """Romanian: 1 is singular; 0 and numbers ending in 01-19 are "few".

    Everything else takes the "de" construction ("douăzeci de mii").
    """
    n = abs(n)
    if n == 1:
        return PluralCategory.ONE
    if n == 0 or 1 <= n % 100 <= 19:
        return PluralCategory.FEW
    return PluralCategory.OTHER


def arabic(n: int) -> PluralCategory:
    """Arabic: zero, one, dual, 3-10 plural, 11-99 accusative singular."""
    n = abs(n)
    n100 = n % 100
    if n == 0:
        return PluralCategory.ZERO
    if n == 1:
        return PluralCategory.ONE
    if n == 2:
        return PluralCategory.TWO
    if 3 <= n100 <= 10:
        return PluralCategory.FEW
    if 11 <= n100 <= 99:
        return PluralCategory.MANY
    return PluralCategory.OTHER


# Russian, Ukrainian, Croatian, Serbian: teens always "many"
EAST_SLAVIC = ThreeFormRule()
# Polish: only 1 itself is singular; 12-14 are "many"
POLISH = ThreeFormRule(one_exact=True, teen_window=(12, 14))
# Czech: like Polish, "dvacet dva tisíce" but "dvanáct tisíc"
CZECH = ThreeFormRule(one_exact=True, teen_window=(12, 14))
# Lithuanian: last digit 2-9 is "few"; 10-19 and last digit 0 are "many"
LITHUANIAN = ThreeFormRule(few_digits=(2, 9), teen_window=(10, 19))


# =============================================================================
# Rule registry
# =============================================================================


class PluralRules:
    """Named plural rule registry.

    Example:
        rules = PluralRules()
        rules.get_category(5, "east_slavic")  # MANY
        rules.get_category(2, "hebrew")       # TWO
    """

    def __init__(self) -> None:
        self._rules: dict[str, PluralRuleFunc] = {}
        self._register_default_rules()

    def _register_default_rules(self) -> None:
        """Register the built-in rule families."""
        self._rules["one_other"] = one_other
        self._rules["zero_one_other"] = zero_one_other
        self._rules["invariant"] = invariant
        self._rules["east_slavic"] = EAST_SLAVIC
        self._rules["polish"] = POLISH
        self._rules["czech"] = CZECH
        self._rules["lithuanian"] = LITHUANIAN
        self._rules["latvian"] = last_digit_one
        self._rules["romanian"] = romanian
        self._rules["hebrew"] = dual
        self._rules["arabic"] = arabic

    def register(self, name: str, rule: PluralRuleFunc) -> None:
        """Register a custom rule under ``name``."""
        self._rules[name] = rule

    def get_rule(self, name: str) -> PluralRuleFunc:
        """Look up a rule by name.

        Raises:
            LocaleConfigError: If no rule is registered under ``name``.
        """
        try:
            return self._rules[name]
        except KeyError:
            raise LocaleConfigError(
                f"unknown plural rule '{name}' (known: {', '.join(sorted(self._rules))})"
            ) from None

    def get_category(self, n: int, name: str) -> PluralCategory:
        """Category of ``n`` under the named rule."""
        return self.get_rule(name)(n)

    @property
    def names(self) -> list[str]:
        return sorted(self._rules)


_plural_rules = PluralRules()


def get_plural_rule(name: str) -> PluralRuleFunc:
    """Look up a built-in plural rule by name."""
    return _plural_rules.get_rule(name)


# =============================================================================
# Word forms
# =============================================================================


@dataclass(frozen=True)
class PluralForms:
    """Word forms keyed by plural category.

    Missing categories fall back to ``other``. A category that resolves to
    no word at all is a rule-table error.

    Attributes:
        one: Singular form.
        other: General plural form.
        two: Dual form.
        few: Paucal form (Slavic 2-4, Arabic 3-10).
        many: Genitive plural form.
        zero: Form used with zero.
        rule: Category selector.
    """

    one: str
    other: str | None = None
    two: str | None = None
    few: str | None = None
    many: str | None = None
    zero: str | None = None
    rule: PluralRuleFunc = one_other

    @classmethod
    def invariant(cls, word: str) -> "PluralForms":
        """A noun with one form for every number."""
        return cls(one=word, other=word, rule=invariant)

    @classmethod
    def three(cls, one: str, few: str, many: str, rule: PluralRuleFunc = EAST_SLAVIC) -> "PluralForms":
        """Slavic singular / paucal / genitive-plural triple."""
        return cls(one=one, few=few, many=many, other=many, rule=rule)

    def select(self, n: int) -> str:
        """Return the form governed by ``n``.

        Raises:
            LocaleConfigError: If neither the selected category nor ``other``
                has a word.
        """
        category = self.rule(n)
        word = getattr(self, category.value)
        if word is None:
            word = self.other
        if word is None:
            raise LocaleConfigError(
                f"no '{category.value}' form for {n} among forms of '{self.one}'"
            )
        return word
