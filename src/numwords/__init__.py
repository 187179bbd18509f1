"""numwords - Spell numbers as words in dozens of locales."""

from numwords.api import KINDS, cardinal, currency, ordinal, to_words
from numwords.exceptions import (
    ConfigError,
    InvalidOptionError,
    InvalidValueError,
    InvalidValueTypeError,
    LocaleConfigError,
    NumWordsError,
    UnsupportedLocaleError,
    UnsupportedOperationError,
    ValueParseError,
)
from numwords.language import Capabilities, Language, LocaleRuleTable
from numwords.options import RenderOptions
from numwords.registry import LanguageRegistry, available_locales, get_language
from numwords.types import CurrencyAmount, Gender, GroupingStrategy, Magnitude

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("numwords")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Core API
    "cardinal",
    "ordinal",
    "currency",
    "to_words",
    "KINDS",
    # Locales
    "Language",
    "LocaleRuleTable",
    "Capabilities",
    "LanguageRegistry",
    "get_language",
    "available_locales",
    # Values and options
    "Magnitude",
    "CurrencyAmount",
    "Gender",
    "GroupingStrategy",
    "RenderOptions",
    # Errors
    "NumWordsError",
    "UnsupportedLocaleError",
    "UnsupportedOperationError",
    "LocaleConfigError",
    "InvalidOptionError",
    "ValueParseError",
    "InvalidValueTypeError",
    "InvalidValueError",
    "ConfigError",
]
