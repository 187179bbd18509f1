"""Tests for the Bengali, Tamil, Telugu, Urdu, Marathi, Gujarati, Kannada and Punjabi tables."""

from __future__ import annotations

import pytest

from numwords.exceptions import UnsupportedOperationError
from numwords.registry import get_language


class TestBengali:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "শূন্য"),
            (25, "পঁচিশ"),
            (100, "এক শত"),
            (100_000, "এক লাখ"),
            (1_234_567, "বারো লাখ চৌত্রিশ হাজার পাঁচ শত সাতষট্টি"),
            (12_345_678, "এক কোটি তেইশ লাখ পঁয়তাল্লিশ হাজার ছয় শত আটাত্তর"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("bn").cardinal(value) == expected

    def test_ordinal(self):
        bengali = get_language("bn-BD")
        assert bengali.ordinal(1) == "প্রথম"
        assert bengali.ordinal(7) == "সাততম"

    def test_currency(self):
        assert get_language("bn").currency("2.50") == "দুই টাকা পঞ্চাশ পয়সা"


class TestTamil:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (100, "நூறு"),
            (200, "இருநூறு"),
            (205, "இருநூற்று ஐந்து"),
            (999, "தொள்ளாயிரத்து தொண்ணூற்று ஒன்பது"),
            (2000, "இரண்டு ஆயிரம்"),
            (300_000, "மூன்று லட்சம்"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("ta").cardinal(value) == expected

    def test_ordinal(self):
        tamil = get_language("ta-IN")
        assert tamil.ordinal(1) == "முதல்"
        assert tamil.ordinal(7) == "ஏழுஆவது"

    def test_currency(self):
        assert get_language("ta").currency("2.50") == "இரண்டு ரூபாய் ஐம்பது பைசா"


class TestTelugu:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (100, "వంద"),
            (105, "వంద ఐదు"),
            (200, "రెండు వందలు"),
            (200_000, "రెండు లక్ష"),
            (20_000_000, "రెండు కోటి"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("te").cardinal(value) == expected

    def test_ordinal(self):
        telugu = get_language("te-IN")
        assert telugu.ordinal(1) == "మొదటి"
        assert telugu.ordinal(7) == "ఏడువ"

    def test_currency_plural(self):
        telugu = get_language("te")
        assert telugu.currency("1.01") == "ఒకటి రూపాయి ఒకటి పైసా"
        assert telugu.currency("2.50") == "రెండు రూపాయలు యాభై పైసలు"


class TestUrdu:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (100, "ایک سو"),
            (115, "ایک سو پندرہ"),
            (300_000, "تین لاکھ"),
            (-5, "منفی پانچ"),
        ],
    )
    def test_cardinal(self, value, expected):
        assert get_language("ur").cardinal(value) == expected

    def test_ordinal(self):
        urdu = get_language("ur-PK")
        assert urdu.ordinal(1) == "پہلا"
        assert urdu.ordinal(7) == "ساتواں"

    def test_currency_plural(self):
        urdu = get_language("ur")
        assert urdu.currency(1) == "ایک روپیہ"
        assert urdu.currency("2.50") == "دو روپے پچاس پیسے"


class TestMarathi:
    def test_cardinal(self):
        marathi = get_language("mr")
        assert marathi.cardinal(200) == "दोन शंभर"
        assert marathi.cardinal(1_500_000) == "पंधरा लाख"

    def test_ordinal(self):
        marathi = get_language("mr-IN")
        assert marathi.ordinal(1) == "पहिला"
        assert marathi.ordinal(7) == "सातवा"

    def test_currency_plural(self):
        assert get_language("mr").currency("2.50") == "दोन रुपये पन्नास पैसे"


class TestGujarati:
    def test_cardinal(self):
        gujarati = get_language("gu")
        assert gujarati.cardinal(305) == "ત્રણ સો પાંચ"
        assert gujarati.cardinal(10_000_000) == "એક કરોડ"

    def test_ordinal(self):
        gujarati = get_language("gu-IN")
        assert gujarati.ordinal(1) == "પહેલું"
        assert gujarati.ordinal(7) == "સાતમું"

    def test_currency_plural(self):
        gujarati = get_language("gu")
        assert gujarati.currency(1) == "એક રૂપિયો"
        assert gujarati.currency(2) == "બે રૂપિયા"


class TestKannada:
    def test_cardinal(self):
        kannada = get_language("kn")
        assert kannada.cardinal(21) == "ಇಪ್ಪತ್ತೊಂದು"
        assert kannada.cardinal(100_000) == "ಒಂದು ಲಕ್ಷ"

    def test_ordinal(self):
        kannada = get_language("kn-IN")
        assert kannada.ordinal(1) == "ಮೊದಲನೇ"
        assert kannada.ordinal(7) == "ಏಳುನೇ"

    def test_currency_plural(self):
        assert get_language("kn").currency("2.50") == "ಎರಡು ರೂಪಾಯಿಗಳು ಐವತ್ತು ಪೈಸೆಗಳು"


class TestPunjabi:
    def test_cardinal(self):
        punjabi = get_language("pa-IN")
        assert punjabi.cardinal(100) == "ਇੱਕ ਸੌ"
        assert punjabi.cardinal(100_000) == "ਇੱਕ ਲੱਖ"
        assert punjabi.cardinal("1.5") == "ਇੱਕ ਦਸ਼ਮਲਵ ਪੰਜ"

    def test_cardinals_only(self):
        with pytest.raises(UnsupportedOperationError):
            get_language("pa").ordinal(1)
        with pytest.raises(UnsupportedOperationError):
            get_language("pa").currency(1)
