"""Tests for the German and Dutch rule tables."""

from __future__ import annotations

import pytest

from numwords.registry import get_language


@pytest.fixture
def german():
    return get_language("de")


@pytest.fixture
def dutch():
    return get_language("nl")


class TestGerman:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "eins"),
            (21, "einundzwanzig"),
            (101, "einhunderteins"),
            (1000, "eintausend"),
            (1001, "eintausendeins"),
            (1_000_000, "eine Million"),
            (2_000_000, "zwei Millionen"),
            (2_003_000, "zwei Millionen dreitausend"),
        ],
    )
    def test_cardinal(self, german, value, expected):
        assert german.cardinal(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "erste"),
            (3, "dritte"),
            (11, "elfte"),
            (20, "zwanzigste"),
            (21, "einundzwanzigste"),
            (100, "einhundertste"),
        ],
    )
    def test_ordinal(self, german, value, expected):
        assert german.ordinal(value) == expected

    def test_currency(self, german):
        assert german.currency("1.00") == "ein Euro"
        assert german.currency("2.50") == "zwei Euro und fünfzig Cent"


class TestDutch:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "één"),
            (21, "eenentwintig"),
            (22, "tweeëntwintig"),
            (101, "honderdeen"),
            (1000, "duizend"),
            (1100, "elfhonderd"),
            (2000, "tweeduizend"),
        ],
    )
    def test_cardinal(self, dutch, value, expected):
        assert dutch.cardinal(value) == expected

    def test_options(self, dutch):
        assert dutch.cardinal(1, accent_one=False) == "een"
        assert dutch.cardinal(1100, hundred_pairing=False) == "duizend honderd"
        assert dutch.cardinal(104, include_conjunction=True) == "honderdenvier"

    @pytest.mark.parametrize(
        "value, expected",
        [(1, "eerste"), (8, "achtste"), (12, "twaalfde"), (21, "eenentwintigste"), (100, "honderdste")],
    )
    def test_ordinal(self, dutch, value, expected):
        assert dutch.ordinal(value) == expected

    def test_defaults_do_not_leak(self, dutch):
        dutch.cardinal(1, accent_one=False)
        assert dutch.cardinal(1) == "één"
