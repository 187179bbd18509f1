"""Locale rule tables and the Language facade.

A LocaleRuleTable is the immutable description of one locale: vocabulary
(inside its segment builder, scale ladder, ordinal and currency styles)
plus the strategies that drive the engine. Tables are built once when a
language module is imported and shared read-only by every call.

Render options never mutate a table. A locale's ``variant`` hook returns a
new table for the options of one call (``dataclasses.replace``), and the
original stays untouched.

Example:
    >>> from numwords.registry import get_language
    >>> en = get_language("en")
    >>> en.cardinal(1001)
    'one thousand and one'
    >>> en.render_ordinal(21)
    'twenty-first'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Union

from numwords.engine.cardinal import CardinalStrategy
from numwords.engine.currency import CurrencyStyle
from numwords.engine.decimal import FractionStyle, render_magnitude
from numwords.engine.ordinal import OrdinalStrategy
from numwords.engine.plural import PluralForms
from numwords.engine.scales import ScaleLadder
from numwords.engine.segment import SegmentBuilder
from numwords.engine.assembler import ConnectorRule
from numwords.exceptions import InvalidOptionError, LocaleConfigError, UnsupportedOperationError
from numwords.options import RenderOptions
from numwords.parsing import NumericInput, parse_cardinal, parse_currency, parse_ordinal
from numwords.types import CurrencyAmount, GroupingStrategy, Magnitude

logger = logging.getLogger(__name__)

OptionsInput = Union[RenderOptions, Mapping[str, Any], None]
Variant = Callable[["LocaleRuleTable", RenderOptions], "LocaleRuleTable"]


# =============================================================================
# Rule table
# =============================================================================


@dataclass(frozen=True)
class LocaleRuleTable:
    """Static configuration for one locale.

    Attributes:
        code: Canonical BCP 47 tag.
        name: English display name.
        zero: Word for zero.
        negative: Word for the minus sign.
        builder: Segment word builder.
        ladder: Scale words by level.
        grouping: Digit grouping strategy.
        connector: Assembler joining rules.
        cardinal: Cardinal pipeline strategy.
        ordinal: Ordinal transform. None when the locale has no ordinals.
        currency: Currency style. None when the locale has no currency.
        decimal_word: Word between integer and fraction, or forms selected
            by the integer part.
        fraction_style: How fractional digits are read.
        word_separator: Joiner between the integer, separator and fraction.
        negative_separator: Joiner after the negative word.
        accepted_options: Option names this locale understands.
        defaults: Option values applied when the caller sets none.
        variant: Builds the table variant for one call's options.
    """

    code: str
    name: str
    zero: str
    negative: str
    builder: SegmentBuilder
    ladder: ScaleLadder
    grouping: GroupingStrategy = GroupingStrategy.THOUSANDS
    connector: ConnectorRule = field(default_factory=ConnectorRule)
    cardinal: CardinalStrategy = field(default_factory=CardinalStrategy)
    ordinal: OrdinalStrategy | None = None
    currency: CurrencyStyle | None = None
    decimal_word: str | PluralForms = "point"
    fraction_style: FractionStyle = FractionStyle.GROUPED
    word_separator: str = " "
    negative_separator: str = " "
    accepted_options: frozenset[str] = frozenset()
    defaults: RenderOptions = field(default_factory=RenderOptions)
    variant: Variant | None = None

    def decimal_separator(self, integer: int) -> str:
        """Decimal separator word for a number with integer part ``integer``."""
        if isinstance(self.decimal_word, PluralForms):
            return self.decimal_word.select(integer)
        return self.decimal_word

    @property
    def currency_options(self) -> frozenset[str]:
        """Options accepted when rendering currency.

        A currency style whose conjunction differs from its plain joiner can
        be toggled with ``include_conjunction`` even where cardinals cannot.
        """
        options = self.accepted_options
        style = self.currency
        if style is not None and style.conjunction != style.joiner:
            options = options | {"include_conjunction"}
        return options

    def with_options(self, options: RenderOptions) -> "LocaleRuleTable":
        """Table variant for ``options``."""
        table = self
        if options.negative_word is not None:
            table = replace(table, negative=options.negative_word)
        if self.variant is not None:
            table = self.variant(table, options)
        return table

    def derive(self, code: str, name: str, **changes: Any) -> "LocaleRuleTable":
        """Regional table sharing this table's rules."""
        return replace(self, code=code, name=name, **changes)


@dataclass(frozen=True)
class Capabilities:
    """What a locale can render."""

    code: str
    name: str
    cardinal: bool
    ordinal: bool
    currency: bool
    options: tuple[str, ...]
    naive_ordinals: bool = False
    currency_options: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "cardinal": self.cardinal,
            "ordinal": self.ordinal,
            "currency": self.currency,
            "options": list(self.options),
            "naive_ordinals": self.naive_ordinals,
            "currency_options": list(self.currency_options),
        }


# =============================================================================
# Facade
# =============================================================================


class Language:
    """Public entry points for one locale.

    ``render_*`` methods take parsed values. The ``cardinal``, ``ordinal``
    and ``currency`` wrappers parse raw input first.
    """

    def __init__(self, table: LocaleRuleTable) -> None:
        self.table = table

    def __repr__(self) -> str:
        return f"Language({self.table.code!r})"

    @property
    def code(self) -> str:
        return self.table.code

    @property
    def name(self) -> str:
        return self.table.name

    @property
    def capabilities(self) -> Capabilities:
        ordinal = self.table.ordinal
        return Capabilities(
            code=self.code,
            name=self.name,
            cardinal=True,
            ordinal=ordinal is not None,
            currency=self.table.currency is not None,
            options=tuple(sorted(self.table.accepted_options)),
            naive_ordinals=bool(ordinal is not None and ordinal.naive),
            currency_options=tuple(sorted(self.table.currency_options)) if self.table.currency else (),
        )

    # -------------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------------

    def resolve_options(
        self, options: OptionsInput = None, accepted: frozenset[str] | None = None
    ) -> tuple[LocaleRuleTable, RenderOptions]:
        """Validate options and return the table variant and merged options.

        Args:
            options: Caller options.
            accepted: Option names to allow. Defaults to the table's
                ``accepted_options``.

        Raises:
            InvalidOptionError: If an option is unknown, mistyped or not
                accepted by this locale.
        """
        if accepted is None:
            accepted = self.table.accepted_options
        requested = RenderOptions.from_mapping(options)
        unsupported = requested.provided() - accepted
        if unsupported:
            names = ", ".join(sorted(accepted)) or "none"
            raise InvalidOptionError(
                f"Locale '{self.code}' does not accept option(s) "
                f"{', '.join(sorted(unsupported))}. Accepted: {names}",
                key=sorted(unsupported)[0],
            )
        merged = requested.with_defaults(self.table.defaults)
        if requested.provided():
            logger.debug("Resolved options for '%s': %s", self.code, merged)
        return self.table.with_options(merged), merged

    # -------------------------------------------------------------------------
    # Engine entry points
    # -------------------------------------------------------------------------

    def render_cardinal(self, magnitude: Magnitude, options: OptionsInput = None) -> str:
        """Render a parsed magnitude as a cardinal number."""
        table, opts = self.resolve_options(options)
        with self._config_errors():
            words = render_magnitude(table, magnitude, opts.gender)
        if magnitude.negative:
            words = table.negative + table.negative_separator + words
        return words

    def render_ordinal(self, value: int, options: OptionsInput = None) -> str:
        """Render a positive integer as an ordinal.

        Raises:
            UnsupportedOperationError: If the locale has no ordinals.
        """
        if self.table.ordinal is None:
            raise UnsupportedOperationError(self.code, "ordinal")
        table, opts = self.resolve_options(options)
        with self._config_errors():
            return table.ordinal.render(table, value, opts.gender)

    def render_currency(self, amount: CurrencyAmount, options: OptionsInput = None) -> str:
        """Render a parsed currency amount.

        Raises:
            UnsupportedOperationError: If the locale has no currency style.
        """
        if self.table.currency is None:
            raise UnsupportedOperationError(self.code, "currency")
        requested = RenderOptions.from_mapping(options)
        table, _ = self.resolve_options(requested, self.table.currency_options)
        with self._config_errors():
            return table.currency.render(table, amount, requested.include_conjunction)

    # -------------------------------------------------------------------------
    # Raw-input wrappers
    # -------------------------------------------------------------------------

    def cardinal(self, value: NumericInput, **options: Any) -> str:
        return self.render_cardinal(parse_cardinal(value), options)

    def ordinal(self, value: NumericInput, **options: Any) -> str:
        return self.render_ordinal(parse_ordinal(value), options)

    def currency(self, value: NumericInput, **options: Any) -> str:
        return self.render_currency(parse_currency(value), options)

    def _config_errors(self) -> "_LocaleErrorScope":
        return _LocaleErrorScope(self.code)


class _LocaleErrorScope:
    """Re-raises rule-table errors tagged with the locale code."""

    def __init__(self, code: str) -> None:
        self.code = code

    def __enter__(self) -> None:
        return None

    def __exit__(self, exc_type, exc, tb) -> bool:
        if isinstance(exc, LocaleConfigError) and exc.locale is None:
            raise LocaleConfigError(exc.detail, locale=self.code) from exc
        return False
