"""Core value types shared by the numwords engine.

Every type in this module is immutable. Values are created fresh for each
render call and discarded once the phrase is produced, so nothing here is
ever shared between calls.

Types:
    Gender: Grammatical gender of the counted noun.
    GroupingStrategy: How a magnitude is split into digit-groups.
    Magnitude: Sign, integer magnitude and optional fractional digits.
    CurrencyAmount: Sign, major units and minor units (0-99).
    DigitGroup: One digit-group value with its scale level.
    RenderedSegment: A rendered phrase plus the metadata the assembler needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Enums
# =============================================================================


class Gender(str, Enum):
    """Grammatical gender used for numeral agreement."""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"

    @classmethod
    def parse(cls, value: "Gender | str") -> "Gender":
        """Parse a gender from a string (case-insensitive).

        Raises:
            ValueError: If the string names no known gender.
        """
        if isinstance(value, Gender):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            choices = ", ".join(g.value for g in cls)
            raise ValueError(f"Unknown gender '{value}'. Expected one of: {choices}") from None


class GroupingStrategy(str, Enum):
    """Digit grouping conventions.

    THOUSANDS groups three digits at every level. MYRIAD groups four digits
    at every level (Chinese, Japanese, Korean). INDIAN peels a three-digit
    units group and then two-digit groups (thousand, lakh, crore). MILLIONS
    groups six digits at every level (Thai).
    """

    THOUSANDS = "thousands"
    MYRIAD = "myriad"
    INDIAN = "indian"
    MILLIONS = "millions"


# =============================================================================
# Inputs
# =============================================================================


@dataclass(frozen=True)
class Magnitude:
    """A signed number ready for rendering.

    Attributes:
        negative: True for numbers below zero.
        integer: Non-negative integer magnitude.
        fraction: Fractional digit characters, leading zeros preserved.
            None means the number has no fractional part.
    """

    negative: bool
    integer: int
    fraction: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.integer, bool) or not isinstance(self.integer, int):
            raise TypeError(f"Magnitude integer must be int, got {type(self.integer).__name__}")
        if self.integer < 0:
            raise ValueError(f"Magnitude integer must be >= 0, got {self.integer}")
        if self.fraction is not None:
            if self.fraction == "":
                object.__setattr__(self, "fraction", None)
            elif not (self.fraction.isascii() and self.fraction.isdigit()):
                raise ValueError(f"Fractional digits must be decimal digits, got {self.fraction!r}")

    @classmethod
    def of(cls, value: int) -> "Magnitude":
        """Build a magnitude from a plain Python integer."""
        return cls(negative=value < 0, integer=abs(value))

    @property
    def is_zero(self) -> bool:
        """True when both the integer and the fraction are zero."""
        return self.integer == 0 and (self.fraction is None or set(self.fraction) == {"0"})


@dataclass(frozen=True)
class CurrencyAmount:
    """A currency amount split into major and minor units.

    Attributes:
        negative: True for amounts below zero.
        major: Non-negative major units (dollars, euros, yuan).
        minor: Minor units in [0, 99] (cents, groszy, agorot).
    """

    negative: bool
    major: int
    minor: int = 0

    def __post_init__(self) -> None:
        if self.major < 0:
            raise ValueError(f"Major units must be >= 0, got {self.major}")
        if not 0 <= self.minor <= 99:
            raise ValueError(f"Minor units must be in [0, 99], got {self.minor}")


# =============================================================================
# Engine intermediates
# =============================================================================


@dataclass(frozen=True)
class DigitGroup:
    """One digit-group of a magnitude.

    Attributes:
        value: Group value, below the group ceiling for its level.
        level: Scale level; 0 is the units group.
    """

    value: int
    level: int


@dataclass(frozen=True)
class RenderedSegment:
    """A rendered phrase with the metadata the assembler relies on.

    Attributes:
        phrase: The words for this element.
        has_hundred: True when the group's hundreds digit is non-zero. Always
            computed from digits, never from the phrase text.
        is_pure_scale_word: True when this element is a scale word ("thousand",
            "tysiące", "万") rather than a numeral.
    """

    phrase: str
    has_hundred: bool = False
    is_pure_scale_word: bool = False

    def with_phrase(self, phrase: str) -> "RenderedSegment":
        """Return a copy carrying a different phrase and the same flags."""
        return RenderedSegment(phrase, self.has_hundred, self.is_pure_scale_word)
