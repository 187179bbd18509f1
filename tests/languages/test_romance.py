"""Tests for the French, Italian, Spanish, Portuguese and Romanian tables."""

from __future__ import annotations

import pytest

from numwords.registry import get_language


class TestFrench:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (21, "vingt et un"),
            (71, "soixante et onze"),
            (80, "quatre-vingts"),
            (91, "quatre-vingt-onze"),
            (200, "deux cents"),
            (1000, "mille"),
            (2000, "deux mille"),
            (80_000, "quatre-vingt mille"),
            (1_000_000, "un million"),
            (2_000_000, "deux millions"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("fr").cardinal(value) == expected

    def test_hyphenate(self):
        assert get_language("fr").cardinal(2003, hyphenate=True) == "deux-mille-trois"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "premier"),
            (2, "deuxième"),
            (4, "quatrième"),
            (5, "cinquième"),
            (21, "vingt et unième"),
            (80, "quatre-vingtième"),
        ],
    )
    def test_ordinal(self, value, expected):
        assert get_language("fr").ordinal(value) == expected

    def test_currency(self):
        french = get_language("fr")
        assert french.currency(1) == "un euro"
        assert french.currency("2.50") == "deux euros et cinquante centimes"

    @pytest.mark.parametrize(
        "value, expected",
        [(70, "septante"), (71, "septante et un"), (80, "quatre-vingts"), (90, "nonante")],
    )
    def test_belgian(self, value, expected):
        assert get_language("fr-BE").cardinal(value) == expected


class TestItalian:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (23, "ventitré"),
            (28, "ventotto"),
            (180, "centottanta"),
            (1000, "mille"),
            (2000, "duemila"),
            (23_000, "ventitremila"),
            (103_000, "centotremila"),
            (123_000_000, "centoventitré milioni"),
            (203_000_000, "duecentotré milioni"),
            (1_000_003, "un milione e tre"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("it").cardinal(value) == expected

    def test_currency(self):
        assert get_language("it").currency("2.50") == "due euro e cinquanta centesimi"


class TestSpanish:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "uno"),
            (21, "veintiuno"),
            (31, "treinta y uno"),
            (100, "cien"),
            (101, "ciento uno"),
            (21_000, "veintiún mil"),
            (1_000_000, "un millón"),
            (2_000_000, "dos millones"),
            (1_500_000_000, "mil quinientos millones"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("es").cardinal(value) == expected

    def test_feminine(self):
        spanish = get_language("es")
        assert spanish.cardinal(21, gender="feminine") == "veintiuna"
        assert spanish.cardinal(200, gender="feminine") == "doscientas"

    @pytest.mark.parametrize(
        "value, expected",
        [(1, "primero"), (21, "vigésimo primero"), (1000, "milésimo")],
    )
    def test_ordinal(self, value, expected):
        assert get_language("es").ordinal(value) == expected

    def test_feminine_ordinal(self):
        assert get_language("es").ordinal(3, gender="feminine") == "tercera"

    def test_currency(self):
        spanish = get_language("es")
        assert spanish.currency(1) == "un euro"
        assert spanish.currency(21) == "veintiún euros"
        assert spanish.currency("2.50") == "dos euros con cincuenta céntimos"

    @pytest.mark.parametrize("code", ["es-MX", "es-US"])
    def test_americas_short_scale(self, code):
        spanish = get_language(code)
        assert spanish.cardinal(1_000_000_000) == "un billón"
        assert spanish.cardinal(1_000_000_000_000) == "un trillón"
        assert spanish.cardinal("5.5") == "cinco punto cinco"

    def test_americas_currency(self):
        assert get_language("es-US").currency("1.01") == "un dólar con un centavo"
        assert get_language("es-US").currency("1.01", include_conjunction=False) == "un dólar un centavo"
        assert get_language("es-MX").currency("2.50") == "dos pesos con cincuenta centavos"


class TestPortuguese:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (21, "vinte e um"),
            (100, "cem"),
            (101, "cento e um"),
            (1001, "mil e um"),
            (1100, "mil e cem"),
            (1200, "mil e duzentos"),
            (1201, "mil duzentos e um"),
            (1_000_100, "um milhão e cem"),
            (2_100_000, "dois milhões e cem mil"),
            (2_000_000, "dois milhões"),
            (2_000_000_000, "dois mil milhões"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("pt").cardinal(value) == expected

    def test_feminine(self):
        assert get_language("pt").cardinal(2, gender="feminine") == "duas"


class TestRomanian:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (21, "douăzeci și unu"),
            (1000, "o mie"),
            (2000, "două mii"),
            (20_000, "douăzeci de mii"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("ro").cardinal(value) == expected

    def test_ordinal(self):
        romanian = get_language("ro")
        assert romanian.ordinal(1) == "primul"
        assert romanian.ordinal(2) == "al doilea"

    def test_currency(self):
        romanian = get_language("ro")
        assert romanian.currency(1) == "un leu"
        assert romanian.currency(20) == "douăzeci de lei"
        assert romanian.currency("2.05") == "doi lei cinci bani"
