"""Finnish rule tables.

Numbers below a million are written as one word, with counted hundreds
and thousands in the partitive ("kaksisataa", "kolmetuhatta"). Million
scale words stand apart ("kaksi miljoonaa").

Ordinals are exact up to 99, where every component is inflected
("kahdeskymmenesensimmäinen"). Above that only the last part is made
ordinal and the result is flagged naive.
"""

from __future__ import annotations

from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.decimal import FractionStyle
from numwords.engine.ordinal import SuffixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import SegmentContext, TripletBuilder
from numwords.language import LocaleRuleTable

FI_ONES = ("", "yksi", "kaksi", "kolme", "neljä", "viisi", "kuusi", "seitsemän", "kahdeksan", "yhdeksän")
FI_TEENS = ("kymmenen",) + tuple(word + "toista" for word in FI_ONES[1:])
FI_TENS = ("", "") + tuple(word + "kymmentä" for word in FI_ONES[2:])
FI_HUNDREDS = ("", "sata") + tuple(word + "sataa" for word in FI_ONES[2:])
FI_SCALES = (
    "miljoona", "miljardi", "biljoona", "biljardi", "triljoona",
    "triljardi", "kvadriljoona", "kvadriljardi", "kvintiljoona",
)

FI_ORDINAL_ONES = (
    "", "ensimmäinen", "toinen", "kolmas", "neljäs", "viides",
    "kuudes", "seitsemäs", "kahdeksas", "yhdeksäs",
)
# Ordinal stems inside compounds ("kahdestoista", "kolmaskymmenes")
FI_ORDINAL_STEMS = ("", "yhdes", "kahdes") + FI_ORDINAL_ONES[3:]

# Round numbers above 99: ordinal form of the final word
FI_ORDINAL_ENDINGS = (
    ("sataa", "sadas"),
    ("sata", "sadas"),
    ("tuhatta", "tuhannes"),
    ("tuhat", "tuhannes"),
    ("aa", "as"),
    ("ia", "is"),
    ("a", "as"),
    ("i", "is"),
)

FI_BUILDER = TripletBuilder(
    ones=FI_ONES,
    teens=FI_TEENS,
    tens=FI_TENS,
    hundreds=FI_HUNDREDS,
    hundred_joiner="",
    tens_joiner="",
)


def finnish_small_ordinal(value: int) -> str:
    """Exact ordinal for 1-99."""
    if value < 10:
        return FI_ORDINAL_ONES[value]
    if value == 10:
        return "kymmenes"
    if value < 20:
        return FI_ORDINAL_STEMS[value - 10] + "toista"
    tens_digit, ones_digit = divmod(value, 10)
    return FI_ORDINAL_STEMS[tens_digit] + "kymmenes" + FI_ORDINAL_ONES[ones_digit]


def _finnish_ordinal(cardinal: str, value: int) -> str:
    rest = value % 100
    if rest:
        tail = FI_BUILDER.build(rest, SegmentContext()).phrase
        return cardinal[: len(cardinal) - len(tail)] + finnish_small_ordinal(rest)
    for ending, replacement in FI_ORDINAL_ENDINGS:
        if cardinal.endswith(ending):
            return cardinal[: len(cardinal) - len(ending)] + replacement
    return cardinal + "s"


FINNISH = LocaleRuleTable(
    code="fi",
    name="Finnish",
    zero="nolla",
    negative="miinus",
    builder=FI_BUILDER,
    ladder=ScaleLadder(
        (
            ScaleWord.of(
                "tuhat", "tuhatta", policy=NumeralPolicy.OMIT_ONE, glue_before="", glue_after=""
            ),
        )
        + ladder_of(FI_SCALES, tuple(word + "a" for word in FI_SCALES))
    ),
    ordinal=SuffixOrdinal(
        suffix=_finnish_ordinal,
        numbers={value: finnish_small_ordinal(value) for value in range(1, 100)},
        naive=True,
    ),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="euro", other="euroa")),
        minor=CurrencyUnit(PluralForms(one="sentti", other="senttiä")),
        conjunction=" ",
    ),
    decimal_word="pilkku",
    fraction_style=FractionStyle.DIGITS,
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    FINNISH,
    FINNISH.derive("fi-FI", "Finnish (Finland)"),
)
