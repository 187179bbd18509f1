"""Hausa and Yoruba rule tables.

Hausa names the scale before its count ("dubu biyu", "ɗari uku") and
joins every smaller part with "da" ("dubu da ɗaya", "ashirin da biyar").
A single thousand or hundred is the bare word. Currency nouns come before
the amount ("naira biyu").

Yoruba counts in twenties. Units one to four are added to a decade ("ọ̀kan
lé lógún", 21) and five to nine are subtracted from the next one
("àrùndínlọgbọ̀n", 25 = 30 - 5). Two and four hundred have their own words
("igba", "irinwó"), as do ten and twenty thousand ("ẹgbàárùn", "ọ̀kẹ́").
Groups are separated by commas and the last one is added with "ó lé".

Both read fractional digits one by one.
"""

from __future__ import annotations

from dataclasses import dataclass

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule, Piece
from numwords.engine.currency import CurrencyStyle, CurrencyUnit, UnitPosition
from numwords.engine.decimal import FractionStyle
from numwords.engine.ordinal import PrefixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, OverflowPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable

# =============================================================================
# Hausa
# =============================================================================

HA_ONES = ("", "ɗaya", "biyu", "uku", "huɗu", "biyar", "shida", "bakwai", "takwas", "tara")
HA_TENS = ("", "", "ashirin", "talatin", "arba'in", "hamsin", "sittin", "saba'in", "tamanin", "tis'in")

DA = " da "

HAUSA = LocaleRuleTable(
    code="ha",
    name="Hausa",
    zero="sifiri",
    negative="babu",
    builder=TripletBuilder(
        ones=HA_ONES,
        teens=("goma",) + tuple("sha " + word for word in HA_ONES[1:]),
        tens=HA_TENS,
        hundreds=("", "ɗari") + tuple("ɗari " + word for word in HA_ONES[2:]),
        hundred_joiner=DA,
        tens_joiner=DA,
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("dubu", policy=NumeralPolicy.OMIT_ONE),)
        + ladder_of(("miliyan", "biliyan", "tiriliyan")),
        overflow=OverflowPolicy.NEST,
    ),
    connector=ConnectorRule(conjunction=DA, policy=ConjunctionPolicy.FINAL_ALWAYS, scale_first=True),
    ordinal=PrefixOrdinal(prefix="na ", numbers={1: "na farko"}),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("naira"), position=UnitPosition.BEFORE),
        minor=CurrencyUnit(PluralForms.invariant("kobo"), position=UnitPosition.BEFORE),
        conjunction=DA,
    ),
    decimal_word="digo",
    fraction_style=FractionStyle.DIGITS,
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Yoruba
# =============================================================================

YO_ONES = ("", "ọ̀kan", "èjì", "ẹ̀ta", "ẹ̀rin", "àrùn", "ẹ̀fà", "èje", "ẹ̀jọ", "ẹ̀sán", "ẹ̀wá")
YO_ADDED_TEENS = ("ọ̀kànlá", "èjìlá", "ẹ̀talá", "ẹ̀rinlá")
YO_SUBTRACTED_TEENS = ("àrùndínlógún", "ẹ̀rìndínlógún", "ẹ̀tadínlógún", "èjìdínlógún", "ọ̀kàndínlógún")
YO_DECADES = {
    20: "ogún", 30: "ọgbọ̀n", 40: "ogójì", 50: "àádọ́ta", 60: "ogóta",
    70: "àádọ́rin", 80: "ogórin", 90: "àádọ́rùn", 100: "ọgọ́rùn",
}
# Decade as the object of "lé" (plus) and "dín" (minus)
YO_DECADES_OBJECT = {
    20: "lógún", 30: "lọgbọ̀n", 40: "lógójì", 50: "láàádọ́ta", 60: "lógóta",
    70: "láàádọ́rin", 80: "lógórin", 90: "láàádọ́rùn", 100: "lọ́gọ́rùn",
}
YO_HUNDREDS = ("", "ọgọ́rùn", "igba", "ẹ̀ta ọgọ́rùn", "irinwó") + tuple(
    word + " ọgọ́rùn" for word in YO_ONES[5:10]
)

O_LE = " ó lé "


def _yoruba_below_hundred(value: int) -> str:
    if value <= 10:
        return YO_ONES[value] or "òdo"
    if value < 15:
        return YO_ADDED_TEENS[value - 11]
    if value < 20:
        return YO_SUBTRACTED_TEENS[value - 15]
    decade, unit = divmod(value, 10)
    decade *= 10
    if unit == 0:
        return YO_DECADES[decade]
    if unit <= 4:
        return YO_ONES[unit] + " lé " + YO_DECADES_OBJECT[decade]
    return YO_ONES[10 - unit] + "dín" + YO_DECADES_OBJECT[decade + 10]


YO_BELOW_HUNDRED = tuple(_yoruba_below_hundred(value) for value in range(100))


@dataclass(frozen=True)
class YorubaConnector(ConnectorRule):
    """Comma before each group, space between a scale word and its count."""

    def separator_between(self, prev: Piece, cur: Piece, total: int) -> str:
        return self.separator if cur.starts_group else self.scale_separator


YORUBA = LocaleRuleTable(
    code="yo",
    name="Yoruba",
    zero="òdo",
    negative="àìní",
    builder=TripletBuilder(
        ones=YO_BELOW_HUNDRED[:10],
        hundreds=YO_HUNDREDS,
        hundred_joiner=O_LE,
        below_hundred=YO_BELOW_HUNDRED,
    ),
    ladder=ScaleLadder(
        (
            ScaleWord.of("ẹgbẹ̀rún", one_numeral="kan", fused={10: "ẹgbàárùn", 20: "ọ̀kẹ́"}),
            ScaleWord.of("mílíọ̀nù", one_numeral="kan"),
        ),
        overflow=OverflowPolicy.NEST,
    ),
    connector=YorubaConnector(
        separator=", ",
        conjunction="," + O_LE,
        policy=ConjunctionPolicy.FINAL_ALWAYS,
        scale_first=True,
    ),
    decimal_word="àmì",
    fraction_style=FractionStyle.DIGITS,
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    HAUSA,
    HAUSA.derive("ha-NG", "Hausa (Nigeria)"),
    YORUBA,
    YORUBA.derive("yo-NG", "Yoruba (Nigeria)"),
)
