"""Tests for the Turkish and Azerbaijani tables."""

from __future__ import annotations

import logging

import pytest

from numwords.registry import get_language


class TestTurkish:
    @pytest.mark.parametrize(
        "value, expected",
        [(100, "yüz"), (1000, "bin"), (2003, "iki bin üç"), (1_000_000, "bir milyon")],
    )
    def test_cardinal(self, value, expected):
        assert get_language("tr").cardinal(value) == expected

    def test_drop_spaces(self):
        assert get_language("tr").cardinal(2003, drop_spaces=True) == "ikibinüç"

    @pytest.mark.parametrize(
        "value, expected",
        [(2, "ikinci"), (4, "dördüncü"), (6, "altıncı"), (10, "onuncu")],
    )
    def test_ordinal(self, value, expected):
        assert get_language("tr").ordinal(value) == expected

    def test_ordinal_is_logged_as_naive(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="numwords.engine.ordinal"):
            get_language("tr").ordinal(7)
        assert "Naive ordinal" in caplog.text


class TestAzerbaijani:
    def test_cardinal(self):
        azerbaijani = get_language("az")
        assert azerbaijani.cardinal(1000) == "min"
        assert azerbaijani.cardinal(14) == "on dörd"

    def test_currency(self):
        assert get_language("az").currency("2.50") == "iki manat əlli qəpik"
