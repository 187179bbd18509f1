"""Main API functions for numwords."""

from __future__ import annotations

from typing import Any, Literal

from numwords.parsing import NumericInput
from numwords.registry import get_language

Kind = Literal["cardinal", "ordinal", "currency"]

KINDS: tuple[str, ...] = ("cardinal", "ordinal", "currency")


def cardinal(value: NumericInput, locale: str = "en", **options: Any) -> str:
    """Spell a number as a cardinal.

    Args:
        value: int, Decimal, float or numeric string. Fractions and
            negative numbers are accepted.
        locale: Locale code ("en", "pl", "zh-Hans", ...).
        **options: Render options accepted by the locale (``gender``,
            ``include_conjunction``, ...).

    Returns:
        The number in words.

    Raises:
        UnsupportedLocaleError: If the locale is not registered.
        InvalidOptionError: If an option is unknown or not accepted.
        ValueParseError: If the value cannot be parsed.

    Example:
        >>> import numwords
        >>> numwords.cardinal(1001)
        'one thousand and one'
        >>> numwords.cardinal(2000, "pl")
        'dwa tysiące'
    """
    return get_language(locale).cardinal(value, **options)


def ordinal(value: NumericInput, locale: str = "en", **options: Any) -> str:
    """Spell a positive integer as an ordinal.

    Raises:
        UnsupportedOperationError: If the locale has no ordinals.

    Example:
        >>> numwords.ordinal(21)
        'twenty-first'
    """
    return get_language(locale).ordinal(value, **options)


def currency(value: NumericInput, locale: str = "en", **options: Any) -> str:
    """Spell an amount in the locale's currency.

    The first two fractional digits are the minor units; further digits
    are truncated.

    Example:
        >>> numwords.currency("0.50")
        'fifty cents'
    """
    return get_language(locale).currency(value, **options)


def to_words(value: NumericInput, locale: str = "en", kind: Kind = "cardinal", **options: Any) -> str:
    """Spell ``value`` as a cardinal, ordinal or currency amount.

    Raises:
        ValueError: If ``kind`` is not one of ``KINDS``.
    """
    if kind == "cardinal":
        return cardinal(value, locale, **options)
    if kind == "ordinal":
        return ordinal(value, locale, **options)
    if kind == "currency":
        return currency(value, locale, **options)
    raise ValueError(f"Unknown kind '{kind}'. Expected one of: {', '.join(KINDS)}")
