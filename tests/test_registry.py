"""Tests for the locale registry."""

from __future__ import annotations

import pytest

from numwords.exceptions import UnsupportedLocaleError
from numwords.languages.english import ENGLISH
from numwords.registry import LanguageRegistry, available_locales, get_language, normalize_code

EXPECTED_LOCALES = {
    "en", "en-US", "en-GB", "en-IE", "en-AU", "en-NZ", "en-CA", "en-IN", "en-PK", "en-BD",
    "en-ZA", "en-GH", "en-NG", "en-KE", "en-MY", "en-PH",
    "de", "de-DE", "nl", "nl-NL", "sv", "sv-SE", "nb", "nb-NO", "da", "da-DK",
    "fr", "fr-FR", "fr-BE", "it", "it-IT", "es", "es-ES", "es-MX", "es-US",
    "pt", "pt-PT", "ro", "ro-RO",
    "pl", "ru", "uk", "cs", "hr", "sr-Latn", "sr-Cyrl",
    "lt", "lv", "el", "el-GR", "hu", "hu-HU", "fi", "fi-FI",
    "tr", "tr-TR", "az", "az-AZ", "he", "he-IL", "ar", "ar-SA", "fa", "fa-IR",
    "hi", "hi-IN", "bn", "bn-BD", "ta", "ta-IN", "te", "te-IN", "ur", "ur-PK",
    "mr", "mr-IN", "gu", "gu-IN", "kn", "kn-IN", "pa", "pa-IN",
    "zh-Hans", "zh-Hans-CN", "zh-Hant", "zh-Hant-TW", "ja", "ja-JP", "ko", "ko-KR",
    "fil", "ms", "id", "vi", "th", "sw",
    "am", "am-ET", "am-Latn", "am-Latn-ET", "ha", "ha-NG", "yo", "yo-NG",
}


class TestLanguageRegistry:
    """Tests for LanguageRegistry."""

    def test_register_and_get(self):
        registry = LanguageRegistry()
        registry.register(ENGLISH)
        assert registry.get("en").cardinal(5) == "five"
        assert "en" in registry
        assert len(registry) == 1

    def test_lookup_is_case_insensitive(self):
        registry = LanguageRegistry([ENGLISH])
        assert registry.get("EN").code == "en"
        assert registry.get(" en ").code == "en"

    def test_unknown_locale(self):
        registry = LanguageRegistry([ENGLISH])
        with pytest.raises(UnsupportedLocaleError) as exc_info:
            registry.get("xx")
        error = exc_info.value
        assert error.locale == "xx"
        assert error.available == ["en"]
        assert "Available: en" in str(error)
        assert isinstance(error, LookupError)

    def test_no_fallback_to_parent(self):
        registry = LanguageRegistry([ENGLISH])
        with pytest.raises(UnsupportedLocaleError):
            registry.get("en-FR")

    def test_unregister(self):
        registry = LanguageRegistry([ENGLISH])
        registry.unregister("en")
        assert "en" not in registry
        with pytest.raises(UnsupportedLocaleError):
            registry.unregister("en")

    def test_replace(self):
        registry = LanguageRegistry([ENGLISH])
        registry.register(ENGLISH.derive("en", "Replacement", zero="nought"))
        assert registry.get("en").cardinal(0) == "nought"
        assert len(registry) == 1

    def test_iteration_is_sorted(self):
        registry = LanguageRegistry.with_defaults()
        codes = [language.code for language in registry]
        assert codes == sorted(codes)

    def test_contains_rejects_non_strings(self):
        assert 5 not in LanguageRegistry([ENGLISH])


class TestDefaultRegistry:
    def test_catalogue(self):
        assert EXPECTED_LOCALES <= set(available_locales())

    def test_region_and_underscore_lookup(self):
        assert get_language("zh_hans").code == "zh-Hans"
        assert get_language("PT-pt").code == "pt-PT"

    def test_same_object_each_time(self):
        assert get_language("fr") is get_language("FR")

    def test_normalize_code(self):
        assert normalize_code(" sr_Latn ") == "sr-latn"
