"""Explicit locale registry.

Maps locale codes to Language objects. A registry is an ordinary object:
callers can build their own with exactly the locales they need, or use the
default registry holding every built-in locale.

Lookups are case-insensitive and accept "_" for "-" ("zh_hans" finds
"zh-Hans"). Unknown codes raise UnsupportedLocaleError; there is no
fallback to a parent or default locale.

Example:
    registry = LanguageRegistry()
    registry.register(ENGLISH)
    registry.get("EN").cardinal(5)   # "five"

    get_language("pl").cardinal(5000)  # "pięć tysięcy"
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Iterator

from numwords.exceptions import UnsupportedLocaleError
from numwords.language import Language, LocaleRuleTable

logger = logging.getLogger(__name__)


def normalize_code(code: str) -> str:
    """Lookup key for a locale code."""
    return code.strip().replace("_", "-").lower()


class LanguageRegistry:
    """Registry of Language objects keyed by locale code."""

    def __init__(self, tables: Iterable[LocaleRuleTable] = ()) -> None:
        self._languages: dict[str, Language] = {}
        for table in tables:
            self.register(table)

    @classmethod
    def with_defaults(cls) -> "LanguageRegistry":
        """Registry holding every built-in locale."""
        from numwords.languages import builtin_tables

        return cls(builtin_tables())

    def register(self, table: LocaleRuleTable) -> Language:
        """Register a rule table, replacing any table with the same code."""
        language = Language(table)
        key = normalize_code(table.code)
        if key in self._languages:
            logger.debug("Replacing registered locale '%s'", table.code)
        self._languages[key] = language
        logger.debug("Registered locale '%s' (%s)", table.code, table.name)
        return language

    def unregister(self, code: str) -> None:
        """Remove a locale.

        Raises:
            UnsupportedLocaleError: If the code is not registered.
        """
        key = normalize_code(code)
        if key not in self._languages:
            raise UnsupportedLocaleError(code, self.codes)
        del self._languages[key]

    def get(self, code: str) -> Language:
        """Look up a locale.

        Raises:
            UnsupportedLocaleError: If the code is not registered.
        """
        try:
            return self._languages[normalize_code(code)]
        except KeyError:
            raise UnsupportedLocaleError(code, self.codes) from None

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and normalize_code(code) in self._languages

    def __iter__(self) -> Iterator[Language]:
        return iter(sorted(self._languages.values(), key=lambda lang: lang.code))

    def __len__(self) -> int:
        return len(self._languages)

    @property
    def codes(self) -> list[str]:
        """Canonical codes of every registered locale, sorted."""
        return sorted(language.code for language in self._languages.values())


_default_registry: LanguageRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> LanguageRegistry:
    """The process-wide registry of built-in locales, built on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = LanguageRegistry.with_defaults()
    return _default_registry


def get_language(code: str) -> Language:
    """Look up a built-in locale."""
    return get_default_registry().get(code)


def available_locales() -> list[str]:
    """Codes of every built-in locale."""
    return get_default_registry().codes
