"""Value parser: turns raw user input into engine inputs.

The engine only ever sees validated values. This module owns every
input-level decision: sign handling, splitting integer and fractional
digits, scientific-notation expansion and currency truncation.

Example:
    >>> parse_cardinal("-12.050")
    Magnitude(negative=True, integer=12, fraction='050')
    >>> parse_currency("1.999")
    CurrencyAmount(negative=False, major=1, minor=99)
    >>> parse_ordinal("2e3")
    2000
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from numwords.exceptions import InvalidValueError, InvalidValueTypeError
from numwords.types import CurrencyAmount, Magnitude

NumericInput = Union[int, float, Decimal, str]

_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


# =============================================================================
# Internal helpers
# =============================================================================


def _reject_type(value: Any) -> InvalidValueTypeError:
    return InvalidValueTypeError(
        "Invalid value type: expected int, float, Decimal or str, "
        f"received {type(value).__name__}",
        value,
    )


def _plain_decimal_text(number: Decimal) -> str:
    """Render a finite Decimal without exponent notation."""
    return format(number, "f")


def _numeric_text(value: Any, kind: str) -> str:
    """Normalise any accepted input to a plain signed digit string.

    The result matches ``[+-]?digits[.digits]`` and never uses exponent
    notation.
    """
    if isinstance(value, bool):
        raise _reject_type(value)

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise InvalidValueError(f"{kind} must be finite (NaN and Infinity are not supported)", value)
        if value.is_integer():
            return str(int(value))
        return _plain_decimal_text(Decimal(repr(value)))

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidValueError(f"{kind} must be finite (NaN and Infinity are not supported)", value)
        return _plain_decimal_text(value)

    if isinstance(value, str):
        text = value.strip()
        if not text or not _NUMBER_PATTERN.match(text):
            raise InvalidValueError(f"Invalid {kind.lower()} format: {value!r}", value)
        if "e" in text or "E" in text:
            try:
                return _plain_decimal_text(Decimal(text))
            except InvalidOperation as e:
                raise InvalidValueError(f"Invalid {kind.lower()} format: {value!r}", value) from e
        return text

    raise _reject_type(value)


def _split(text: str) -> tuple[bool, int, str | None]:
    """Split a plain numeric string into sign, integer and fraction."""
    negative = text.startswith("-")
    text = text.lstrip("+-")
    integer_text, _, fraction = text.partition(".")
    integer = int(integer_text) if integer_text else 0
    return negative, integer, fraction or None


# =============================================================================
# Public API
# =============================================================================


def parse_cardinal(value: NumericInput) -> Magnitude:
    """Parse a value for cardinal rendering.

    Args:
        value: int, float, Decimal or numeric string. Strings may carry a
            sign, a fractional part and an exponent.

    Returns:
        Magnitude with the fractional digits exactly as written.

    Raises:
        InvalidValueTypeError: If the value has an unsupported type.
        InvalidValueError: If the value is empty, non-numeric or non-finite.
    """
    negative, integer, fraction = _split(_numeric_text(value, "Number"))
    if integer == 0 and (fraction is None or fraction.strip("0") == ""):
        negative = False
    return Magnitude(negative=negative, integer=integer, fraction=fraction)


def parse_ordinal(value: NumericInput) -> int:
    """Parse a value for ordinal rendering.

    Ordinals must be positive whole numbers. A written fractional part is
    rejected even when it is zero ("1.0").

    Raises:
        InvalidValueTypeError: If the value has an unsupported type.
        InvalidValueError: If the value is not a positive whole number.
    """
    if isinstance(value, bool):
        raise _reject_type(value)

    if isinstance(value, int):
        if value <= 0:
            raise InvalidValueError("Ordinals must be positive integers", value)
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidValueError("Ordinals cannot be empty strings", value)
        if text.startswith("-"):
            raise InvalidValueError("Ordinals cannot be negative", value)
        if "." in text:
            raise InvalidValueError("Ordinals must be whole numbers", value)

    number = Decimal(_numeric_text(value, "Ordinal"))
    if number != number.to_integral_value():
        raise InvalidValueError("Ordinals must be whole numbers", value)
    if number <= 0:
        raise InvalidValueError("Ordinals must be positive integers", value)
    return int(number)


def parse_currency(value: NumericInput) -> CurrencyAmount:
    """Parse a value for currency rendering.

    Minor units are the first two fractional digits, padded and truncated:
    "1.5" is 1 and 50, "1.999" is 1 and 99.

    Raises:
        InvalidValueTypeError: If the value has an unsupported type.
        InvalidValueError: If the value is empty, non-numeric or non-finite.
    """
    negative, major, fraction = _split(_numeric_text(value, "Currency"))
    minor = int(((fraction or "") + "00")[:2])
    if major == 0 and minor == 0:
        negative = False
    return CurrencyAmount(negative=negative, major=major, minor=minor)
