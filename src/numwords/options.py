"""Render options accepted by the numwords entry points.

Options are an immutable value. A locale declares which keys it accepts and
their defaults; the Language facade rejects every other key before
rendering starts.

Example:
    >>> opts = RenderOptions.from_mapping({"gender": "feminine", "and": False})
    >>> opts.gender, opts.include_conjunction
    (<Gender.FEMININE: 'feminine'>, False)
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from numwords.exceptions import InvalidOptionError
from numwords.types import Gender

# camelCase and legacy spellings accepted for each option
OPTION_ALIASES: dict[str, str] = {
    "and": "include_conjunction",
    "includeConjunction": "include_conjunction",
    "includeOptionalAnd": "include_conjunction",
    "useLongScale": "long_scale",
    "hundredPairing": "hundred_pairing",
    "accentOne": "accent_one",
    "withHyphenSeparator": "hyphenate",
    "dropSpaces": "drop_spaces",
    "negativeWord": "negative_word",
}

_BOOLEAN_OPTIONS = frozenset(
    {
        "include_conjunction",
        "long_scale",
        "formal",
        "hundred_pairing",
        "accent_one",
        "hyphenate",
        "drop_spaces",
    }
)


@dataclass(frozen=True)
class RenderOptions:
    """Options for a single render call.

    A field left as None means "use the locale default".

    Attributes:
        gender: Grammatical gender of the counted noun.
        include_conjunction: Insert the locale's optional conjunction
            ("and", "en", "e").
        long_scale: Use the long-scale ladder where the locale has one.
        formal: Use formal (financial) numerals.
        hundred_pairing: Spell 1100-9999 as paired hundreds.
        accent_one: Use the accented one ("één").
        hyphenate: Join every word with hyphens.
        drop_spaces: Write the number as one compound word.
        negative_word: Replacement for the locale's minus word.
    """

    gender: Gender | None = None
    include_conjunction: bool | None = None
    long_scale: bool | None = None
    formal: bool | None = None
    hundred_pairing: bool | None = None
    accent_one: bool | None = None
    hyphenate: bool | None = None
    drop_spaces: bool | None = None
    negative_word: str | None = None

    @classmethod
    def keys(cls) -> frozenset[str]:
        """All canonical option names."""
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> "RenderOptions":
        """Build options from a plain mapping.

        Args:
            options: Option names (canonical or alias) to values. None
                values are ignored.

        Raises:
            InvalidOptionError: If a key is unknown or a value has the wrong type.
        """
        if options is None:
            return cls()
        if isinstance(options, RenderOptions):
            return options

        known = cls.keys()
        values: dict[str, Any] = {}
        for raw_key, value in options.items():
            key = OPTION_ALIASES.get(raw_key, raw_key)
            if key not in known:
                raise InvalidOptionError(
                    f"Unknown option '{raw_key}'. Known options: {', '.join(sorted(known))}",
                    key=raw_key,
                )
            if value is None:
                continue
            values[key] = cls._coerce(key, value)
        return cls(**values)

    @staticmethod
    def _coerce(key: str, value: Any) -> Any:
        if key == "gender":
            try:
                return Gender.parse(value)
            except (ValueError, AttributeError) as e:
                raise InvalidOptionError(str(e), key=key) from e
        if key in _BOOLEAN_OPTIONS:
            if not isinstance(value, bool):
                raise InvalidOptionError(
                    f"Option '{key}' must be a boolean, got {type(value).__name__}", key=key
                )
            return value
        if not isinstance(value, str):
            raise InvalidOptionError(
                f"Option '{key}' must be a string, got {type(value).__name__}", key=key
            )
        return value

    def provided(self) -> frozenset[str]:
        """Names of the options explicitly set."""
        return frozenset(f.name for f in fields(self) if getattr(self, f.name) is not None)

    def with_defaults(self, defaults: "RenderOptions") -> "RenderOptions":
        """Fill every unset option from ``defaults``."""
        missing = {
            name: getattr(defaults, name)
            for name in defaults.provided()
            if getattr(self, name) is None
        }
        return replace(self, **missing) if missing else self

    def flag(self, name: str) -> bool:
        """Boolean value of an option, treating unset as False."""
        return bool(getattr(self, name))
