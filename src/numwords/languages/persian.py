"""Persian rule tables.

Persian joins every part of a number with "و" ("دو هزار و سیصد و بیست و
یک") and writes a thousand without its count. Past میلیارد the top scale
word is counted by a full cardinal. Ordinals append "م" to the last word
("بیست و یکم"), with "سوم" for three and "ام" after a final vowel.
"""

from __future__ import annotations

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import TerminalWordOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, OverflowPolicy, ScaleLadder, ScaleWord
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable

FA_ONES = ("", "یک", "دو", "سه", "چهار", "پنج", "شش", "هفت", "هشت", "نه")
FA_TEENS = (
    "ده", "یازده", "دوازده", "سیزده", "چهارده",
    "پانزده", "شانزده", "هفده", "هجده", "نوزده",
)
FA_TENS = ("", "", "بیست", "سی", "چهل", "پنجاه", "شصت", "هفتاد", "هشتاد", "نود")
FA_HUNDREDS = ("", "صد", "دویست", "سیصد", "چهارصد", "پانصد", "ششصد", "هفتصد", "هشتصد", "نهصد")

AND = " و "


def _persian_ordinal(word: str, value: int) -> str:
    if word.endswith("ی"):
        return word + "\u200cام"
    return word + "م"


PERSIAN = LocaleRuleTable(
    code="fa",
    name="Persian",
    zero="صفر",
    negative="منفی",
    builder=TripletBuilder(
        ones=FA_ONES,
        teens=FA_TEENS,
        tens=FA_TENS,
        hundreds=FA_HUNDREDS,
        hundred_joiner=AND,
        tens_joiner=AND,
    ),
    ladder=ScaleLadder(
        (
            ScaleWord.of("هزار", policy=NumeralPolicy.OMIT_ONE),
            ScaleWord.of("میلیون"),
            ScaleWord.of("میلیارد"),
        ),
        overflow=OverflowPolicy.NEST,
    ),
    connector=ConnectorRule(conjunction=AND, policy=ConjunctionPolicy.BETWEEN_GROUPS),
    ordinal=TerminalWordOrdinal(
        numbers={1: "اول"},
        words={"یک": "یکم", "دو": "دوم", "سه": "سوم"},
        suffix=_persian_ordinal,
        delimiters=" ",
    ),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("ریال")),
        minor=CurrencyUnit(PluralForms.invariant("دینار")),
        conjunction=AND,
    ),
    decimal_word="ممیز",
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    PERSIAN,
    PERSIAN.derive("fa-IR", "Persian (Iran)"),
)
