"""Tests for render options."""

from __future__ import annotations

import dataclasses

import pytest

from numwords.exceptions import InvalidOptionError
from numwords.options import RenderOptions
from numwords.types import Gender


class TestRenderOptions:
    """Tests for RenderOptions."""

    def test_defaults_are_unset(self):
        assert RenderOptions().provided() == frozenset()

    def test_from_mapping(self):
        opts = RenderOptions.from_mapping({"gender": "Feminine", "include_conjunction": False})
        assert opts.gender is Gender.FEMININE
        assert opts.include_conjunction is False
        assert opts.provided() == {"gender", "include_conjunction"}

    @pytest.mark.parametrize(
        "alias, key",
        [
            ("and", "include_conjunction"),
            ("useLongScale", "long_scale"),
            ("hundredPairing", "hundred_pairing"),
            ("accentOne", "accent_one"),
            ("withHyphenSeparator", "hyphenate"),
            ("dropSpaces", "drop_spaces"),
        ],
    )
    def test_aliases(self, alias, key):
        opts = RenderOptions.from_mapping({alias: True})
        assert getattr(opts, key) is True

    def test_negative_word_alias(self):
        assert RenderOptions.from_mapping({"negativeWord": "neg"}).negative_word == "neg"

    def test_none_values_are_ignored(self):
        assert RenderOptions.from_mapping({"gender": None}).provided() == frozenset()

    def test_passthrough(self):
        opts = RenderOptions(formal=True)
        assert RenderOptions.from_mapping(opts) is opts
        assert RenderOptions.from_mapping(None) == RenderOptions()

    def test_unknown_key(self):
        with pytest.raises(InvalidOptionError, match="Unknown option 'colour'") as exc_info:
            RenderOptions.from_mapping({"colour": "red"})
        assert exc_info.value.key == "colour"

    @pytest.mark.parametrize(
        "options",
        [{"include_conjunction": "yes"}, {"long_scale": 1}, {"gender": "plural"}, {"negative_word": 5}],
    )
    def test_wrong_types(self, options):
        with pytest.raises(InvalidOptionError):
            RenderOptions.from_mapping(options)

    def test_with_defaults(self):
        requested = RenderOptions(include_conjunction=False)
        merged = requested.with_defaults(RenderOptions(include_conjunction=True, accent_one=True))
        assert merged.include_conjunction is False
        assert merged.accent_one is True

    def test_flag(self):
        assert RenderOptions(formal=True).flag("formal")
        assert not RenderOptions().flag("formal")

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RenderOptions().formal = True
