"""Amharic rule tables, in Ethiopic script and in Latin transliteration.

Amharic counts every hundred and thousand explicitly ("አንድ መቶ", "አንድ
ሺ") and reads fractional digits one by one. Ordinals append "ኛ" to the
cardinal and are flagged naive. Amounts are in birr and santim.
"""

from __future__ import annotations

from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.decimal import FractionStyle
from numwords.engine.ordinal import SuffixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import OverflowPolicy, ScaleLadder, ladder_of
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable


def _amharic_builder(ones: tuple[str, ...], ten: str, teen_prefix: str, tens: tuple[str, ...], hundred: str):
    return TripletBuilder(
        ones=ones,
        teens=(ten,) + tuple(f"{teen_prefix} {word}" for word in ones[1:]),
        tens=tens,
        hundred=hundred,
        tens_joiner=" ",
    )


def _amharic_ordinal(first: str, suffix: str) -> SuffixOrdinal:
    return SuffixOrdinal(suffix=lambda cardinal, value: cardinal + suffix, numbers={1: first}, naive=True)


def _birr(birr: str, santim: str) -> CurrencyStyle:
    return CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant(birr)),
        minor=CurrencyUnit(PluralForms.invariant(santim)),
    )


AM_ONES = ("", "አንድ", "ሁለት", "ሶስት", "አራት", "አምስት", "ስድስት", "ሰባት", "ስምንት", "ዘጠኝ")
AM_TENS = ("", "", "ሃያ", "ሰላሳ", "አርባ", "ሃምሳ", "ስልሳ", "ሰባ", "ሰማንያ", "ዘጠና")

AMHARIC = LocaleRuleTable(
    code="am",
    name="Amharic",
    zero="ዜሮ",
    negative="አሉታዊ",
    builder=_amharic_builder(AM_ONES, "አስር", "አስራ", AM_TENS, "መቶ"),
    ladder=ScaleLadder(ladder_of(("ሺ", "ሚሊዮን", "ቢሊዮን", "ትሪሊዮን")), overflow=OverflowPolicy.NEST),
    ordinal=_amharic_ordinal("አንደኛ", "ኛ"),
    currency=_birr("ብር", "ሳንቲም"),
    decimal_word="ነጥብ",
    fraction_style=FractionStyle.DIGITS,
    accepted_options=frozenset({"negative_word"}),
)

AM_LATN_ONES = ("", "and", "hulet", "sost", "arat", "amist", "siddist", "sebat", "siment", "zeteny")
AM_LATN_TENS = ("", "", "haya", "selasa", "arba", "hamsa", "silsa", "seba", "semanya", "zetena")

AMHARIC_LATIN = AMHARIC.derive(
    "am-Latn",
    "Amharic (Latin)",
    zero="zero",
    negative="asitegna",
    builder=_amharic_builder(AM_LATN_ONES, "asir", "asra", AM_LATN_TENS, "meto"),
    ladder=ScaleLadder(ladder_of(("shi", "miliyon", "billiyon", "triliyon")), overflow=OverflowPolicy.NEST),
    ordinal=_amharic_ordinal("andenya", "nya"),
    currency=_birr("birr", "santim"),
    decimal_word="netib",
)

TABLES = (
    AMHARIC,
    AMHARIC.derive("am-ET", "Amharic (Ethiopia)"),
    AMHARIC_LATIN,
    AMHARIC_LATIN.derive("am-Latn-ET", "Amharic (Latin, Ethiopia)"),
)
