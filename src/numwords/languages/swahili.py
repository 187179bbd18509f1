"""Swahili rule tables.

Swahili names the scale before its count ("elfu mbili", "mia tatu") and
joins the last small part with "na" ("ishirini na moja", "elfu moja na
moja"). Currency nouns come before the amount ("shilingi mia moja").
"""

from __future__ import annotations

from dataclasses import dataclass

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule
from numwords.engine.currency import CurrencyStyle, CurrencyUnit, UnitPosition
from numwords.engine.ordinal import PrefixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import ScaleLadder, ladder_of
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable

SW_ONES = ("", "moja", "mbili", "tatu", "nne", "tano", "sita", "saba", "nane", "tisa")
SW_TENS = ("", "kumi", "ishirini", "thelathini", "arobaini", "hamsini", "sitini", "sabini", "themanini", "tisini")
SW_SCALES = (
    "elfu", "milioni", "bilioni", "trilioni", "kwadrilioni",
    "kwintilioni", "sekstilioni", "septilioni", "oktilioni", "nonilioni",
)

NA = " na "


@dataclass(frozen=True)
class SwahiliBuilder(TripletBuilder):
    """"mia" before its count, "na" before a bare ones digit."""

    def join(self, head, tail, hundreds_digit, rest, context):
        if head and tail and rest < 10:
            return head + NA + tail
        return super().join(head, tail, hundreds_digit, rest, context)


SWAHILI = LocaleRuleTable(
    code="sw",
    name="Swahili",
    zero="sifuri",
    negative="minus",
    builder=SwahiliBuilder(
        ones=SW_ONES,
        teens=("kumi",) + tuple("kumi na " + word for word in SW_ONES[1:]),
        tens=SW_TENS,
        hundreds=("",) + tuple("mia " + word for word in SW_ONES[1:]),
        tens_joiner=NA,
    ),
    ladder=ScaleLadder(ladder_of(SW_SCALES)),
    connector=ConnectorRule(
        conjunction=NA,
        policy=ConjunctionPolicy.FINAL_WITHOUT_HUNDRED,
        scale_first=True,
    ),
    ordinal=PrefixOrdinal(prefix="wa ", numbers={1: "wa kwanza", 2: "wa pili"}),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("shilingi"), position=UnitPosition.BEFORE),
        minor=CurrencyUnit(PluralForms.invariant("senti"), position=UnitPosition.BEFORE),
        conjunction=NA,
    ),
    decimal_word="nukta",
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    SWAHILI,
    SWAHILI.derive("sw-KE", "Swahili (Kenya)"),
)
