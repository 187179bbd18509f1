"""English rule tables.

Locales:
    en: International English. "and" after hundreds and before a final
        group without hundreds ("one thousand and one"), dollars.
    en-US: No "and" by default ("one hundred one").
    en-GB, en-IE, en-AU, en-NZ, en-CA, en-ZA, en-GH, en-NG, en-KE, en-MY,
        en-PH: British-style "and", local currency.
    en-IN, en-PK, en-BD: Indian grouping (thousand, lakh, crore), rupees
        or taka.

Options: ``include_conjunction`` ("and"), ``hundred_pairing``
("fifteen hundred"), ``long_scale`` (milliard = 10**9).
"""

from __future__ import annotations

from dataclasses import replace

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule
from numwords.engine.cardinal import HundredPairingCardinal
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import TerminalWordOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import OverflowPolicy, ScaleLadder, ladder_of
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.options import RenderOptions
from numwords.types import GroupingStrategy

# =============================================================================
# Vocabulary
# =============================================================================

ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")

SHORT_SCALE = (
    "thousand", "million", "billion", "trillion", "quadrillion",
    "quintillion", "sextillion", "septillion", "octillion", "nonillion",
    "decillion", "undecillion", "duodecillion", "tredecillion", "quattuordecillion",
    "quindecillion", "sexdecillion", "septendecillion", "octodecillion", "novemdecillion",
    "vigintillion",
)
LONG_SCALE = (
    "thousand", "million", "milliard", "billion", "billiard",
    "trillion", "trilliard", "quadrillion", "quadrilliard", "quintillion",
    "quintilliard", "sextillion", "sextilliard",
)
INDIAN_SCALE = ("thousand", "lakh", "crore", "arab", "kharab", "neel", "padma", "shankh")

ORDINAL_ONES = (
    "", "first", "second", "third", "fourth", "fifth", "sixth", "seventh", "eighth", "ninth",
)
ORDINAL_TEENS = (
    "tenth", "eleventh", "twelfth", "thirteenth", "fourteenth",
    "fifteenth", "sixteenth", "seventeenth", "eighteenth", "nineteenth",
)
ORDINAL_TENS = (
    "", "", "twentieth", "thirtieth", "fortieth", "fiftieth",
    "sixtieth", "seventieth", "eightieth", "ninetieth",
)

AND = " and "


def english_variant(table: LocaleRuleTable, options: RenderOptions) -> LocaleRuleTable:
    """Apply "and", hundred pairing and long scale."""
    changes = {}
    if options.include_conjunction is not None:
        if options.include_conjunction:
            changes["builder"] = replace(table.builder, hundred_joiner=AND)
            changes["connector"] = replace(
                table.connector, policy=ConjunctionPolicy.FINAL_WITHOUT_HUNDRED
            )
        else:
            changes["builder"] = replace(table.builder, hundred_joiner=" ")
            changes["connector"] = replace(table.connector, policy=ConjunctionPolicy.NEVER)
    if options.hundred_pairing:
        conjunction = AND if options.include_conjunction else None
        changes["cardinal"] = HundredPairingCardinal(conjunction=conjunction)
    if options.long_scale and table.grouping is GroupingStrategy.THOUSANDS:
        changes["ladder"] = LONG_LADDER
    return replace(table, **changes) if changes else table


def _ordinal_suffix(word: str, value: int) -> str:
    if word.endswith("y"):
        return word[:-1] + "ieth"
    return word + "th"


BUILDER = TripletBuilder(
    ones=ONES,
    teens=TEENS,
    tens=TENS,
    hundred="hundred",
    hundred_joiner=AND,
    tens_joiner="-",
)

SHORT_LADDER = ScaleLadder(ladder_of(SHORT_SCALE))
LONG_LADDER = ScaleLadder(ladder_of(LONG_SCALE))
INDIAN_LADDER = ScaleLadder(ladder_of(INDIAN_SCALE), overflow=OverflowPolicy.NEST)

CONNECTOR = ConnectorRule(conjunction=AND, policy=ConjunctionPolicy.FINAL_WITHOUT_HUNDRED)

ORDINAL = TerminalWordOrdinal(
    words={
        **{word: ORDINAL_ONES[i] for i, word in enumerate(ONES) if word},
        **{word: ORDINAL_TEENS[i] for i, word in enumerate(TEENS)},
        **{word: ORDINAL_TENS[i] for i, word in enumerate(TENS) if word},
    },
    suffix=_ordinal_suffix,
)


def _currency(major: tuple[str, str], minor: tuple[str, str]) -> CurrencyStyle:
    return CurrencyStyle(
        major=CurrencyUnit(PluralForms(one=major[0], other=major[1])),
        minor=CurrencyUnit(PluralForms(one=minor[0], other=minor[1])),
        conjunction=AND,
    )


DOLLARS = _currency(("dollar", "dollars"), ("cent", "cents"))

OPTIONS = frozenset({"include_conjunction", "hundred_pairing", "long_scale"})


# =============================================================================
# Tables
# =============================================================================

ENGLISH = LocaleRuleTable(
    code="en",
    name="English",
    zero="zero",
    negative="minus",
    builder=BUILDER,
    ladder=SHORT_LADDER,
    connector=CONNECTOR,
    ordinal=ORDINAL,
    currency=DOLLARS,
    decimal_word="point",
    accepted_options=OPTIONS | {"negative_word"},
    defaults=RenderOptions(include_conjunction=True),
    variant=english_variant,
)

INDIAN_ENGLISH = ENGLISH.derive(
    "en-IN",
    "English (India)",
    grouping=GroupingStrategy.INDIAN,
    ladder=INDIAN_LADDER,
    currency=_currency(("rupee", "rupees"), ("paisa", "paise")),
    accepted_options=frozenset({"include_conjunction", "hundred_pairing", "negative_word"}),
)

TABLES = (
    ENGLISH,
    ENGLISH.derive(
        "en-US",
        "English (United States)",
        builder=replace(BUILDER, hundred_joiner=" "),
        connector=replace(CONNECTOR, policy=ConjunctionPolicy.NEVER),
        defaults=RenderOptions(include_conjunction=False),
    ),
    ENGLISH.derive("en-GB", "English (United Kingdom)", currency=_currency(("pound", "pounds"), ("penny", "pence"))),
    ENGLISH.derive("en-IE", "English (Ireland)", currency=_currency(("euro", "euro"), ("cent", "cents"))),
    ENGLISH.derive("en-AU", "English (Australia)"),
    ENGLISH.derive("en-NZ", "English (New Zealand)"),
    ENGLISH.derive("en-CA", "English (Canada)"),
    ENGLISH.derive("en-ZA", "English (South Africa)", currency=_currency(("rand", "rand"), ("cent", "cents"))),
    ENGLISH.derive("en-GH", "English (Ghana)", currency=_currency(("cedi", "cedis"), ("pesewa", "pesewas"))),
    ENGLISH.derive("en-NG", "English (Nigeria)", currency=_currency(("naira", "naira"), ("kobo", "kobo"))),
    ENGLISH.derive("en-KE", "English (Kenya)", currency=_currency(("shilling", "shillings"), ("cent", "cents"))),
    ENGLISH.derive("en-MY", "English (Malaysia)", currency=_currency(("ringgit", "ringgit"), ("sen", "sen"))),
    ENGLISH.derive("en-PH", "English (Philippines)", currency=_currency(("peso", "pesos"), ("centavo", "centavos"))),
    INDIAN_ENGLISH,
    INDIAN_ENGLISH.derive("en-PK", "English (Pakistan)"),
    INDIAN_ENGLISH.derive("en-BD", "English (Bangladesh)", currency=_currency(("taka", "taka"), ("paisa", "paise"))),
)
