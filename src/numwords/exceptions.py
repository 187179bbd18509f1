"""Exception hierarchy for numwords.

All library errors derive from NumWordsError. Parser errors additionally
derive from TypeError or ValueError so callers that only know the built-in
exceptions still catch them.

Hierarchy:
    NumWordsError
    ├── UnsupportedLocaleError
    ├── UnsupportedOperationError
    ├── LocaleConfigError
    ├── InvalidOptionError
    ├── ValueParseError
    │   ├── InvalidValueTypeError
    │   └── InvalidValueError
    └── ConfigError
        ├── ConfigValidationError
        └── ConfigSourceError
"""

from __future__ import annotations

from typing import Any, Iterable


class NumWordsError(Exception):
    """Base exception for all numwords errors."""

    pass


# =============================================================================
# Locale and rule-table errors
# =============================================================================


class UnsupportedLocaleError(NumWordsError, LookupError):
    """Raised when a locale code has no registered language."""

    def __init__(self, locale: str, available: Iterable[str] = ()) -> None:
        self.locale = locale
        self.available = sorted(available)
        message = f"Unsupported locale '{locale}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class UnsupportedOperationError(NumWordsError):
    """Raised when a locale does not provide ordinals or currency."""

    def __init__(self, locale: str, operation: str) -> None:
        self.locale = locale
        self.operation = operation
        super().__init__(f"Locale '{locale}' does not support {operation} rendering")


class LocaleConfigError(NumWordsError):
    """Raised when a locale rule table lacks data the input requires.

    This is a programming error in the rule table, never an input error,
    so it is raised instead of substituting a placeholder word.
    """

    def __init__(self, detail: str, *, locale: str | None = None) -> None:
        self.locale = locale
        self.detail = detail
        where = f" for '{locale}'" if locale else ""
        super().__init__(f"Incomplete rule table{where}: {detail}")


class InvalidOptionError(NumWordsError, ValueError):
    """Raised for unknown, unsupported or mistyped render options."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


# =============================================================================
# Value parser errors
# =============================================================================


class ValueParseError(NumWordsError):
    """Base class for input validation failures."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class InvalidValueTypeError(ValueParseError, TypeError):
    """The input has a type the parser does not accept."""

    pass


class InvalidValueError(ValueParseError, ValueError):
    """The input has an accepted type but an unusable value."""

    pass


# =============================================================================
# Configuration errors
# =============================================================================


class ConfigError(NumWordsError):
    """Base configuration error."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration validation error."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Configuration validation failed: {', '.join(errors)}")


class ConfigSourceError(ConfigError):
    """Configuration source error."""

    pass
