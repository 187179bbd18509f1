"""Hungarian rule tables.

Hungarian writes each group as one word ("kétszázhuszonegy") and glues
the count to its scale word ("kétezer", "hárommillió"). Groups are
hyphenated when the number is above 2000 ("kétezer-egy") and run together
up to 2000 ("ezerkilencszáz"). Two is "két" in front of anything it
counts and "kettő" on its own.
"""

from __future__ import annotations

from dataclasses import dataclass

from numwords.engine.assembler import ConnectorRule, Piece
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import TerminalWordOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import SegmentContext, TripletBuilder
from numwords.language import LocaleRuleTable

HU_ONES = ("", "egy", "kettő", "három", "négy", "öt", "hat", "hét", "nyolc", "kilenc")
HU_TENS = ("", "tíz", "húsz", "harminc", "negyven", "ötven", "hatvan", "hetven", "nyolcvan", "kilencven")
# Tens in front of a ones digit
HU_TENS_PREFIX = ("", "tizen", "huszon") + HU_TENS[3:]
HU_SCALES = (
    "millió", "milliárd", "billió", "billiárd", "trillió",
    "trilliárd", "kvadrillió", "kvadrilliárd", "kvintillió",
)

# Checked in order against the end of the last word
HU_ORDINAL_ENDINGS = (
    ("kilenc", "kilencedik"),
    ("nyolc", "nyolcadik"),
    ("egy", "egyedik"),
    ("kettő", "kettedik"),
    ("három", "harmadik"),
    ("négy", "negyedik"),
    ("öt", "ötödik"),
    ("hat", "hatodik"),
    ("hét", "hetedik"),
    ("tíz", "tizedik"),
    ("húsz", "huszadik"),
    ("harminc", "harmincadik"),
    ("negyven", "negyvenedik"),
    ("ötven", "ötvenedik"),
    ("hatvan", "hatvanadik"),
    ("hetven", "hetvenedik"),
    ("nyolcvan", "nyolcvanadik"),
    ("kilencven", "kilencvenedik"),
    ("száz", "századik"),
    ("ezer", "ezredik"),
    ("ió", "iomodik"),
    ("árd", "árdodik"),
)


@dataclass(frozen=True)
class HungarianBuilder(TripletBuilder):
    """One-word groups with attributive "két"."""

    def ones_word(self, digit: int, context: SegmentContext) -> str:
        if digit == 2 and context.scale_follows:
            return "két"
        return super().ones_word(digit, context)

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        tens_digit, ones_digit = divmod(value, 10)
        if not ones_digit:
            return self.tens[tens_digit]
        return HU_TENS_PREFIX[tens_digit] + self.ones_word(ones_digit, context)

    def hundreds_word(self, digit: int, context: SegmentContext) -> str:
        if digit == 1:
            return "száz"
        return self.ones_word(digit, SegmentContext(scale_follows=True)) + "száz"


@dataclass(frozen=True)
class HungarianConnector(ConnectorRule):
    """Hyphen between groups above 2000, nothing up to 2000."""

    def separator_between(self, prev: Piece, cur: Piece, total: int) -> str:
        if prev.is_scale and total <= 2000:
            return ""
        return super().separator_between(prev, cur, total)


HUNGARIAN = LocaleRuleTable(
    code="hu",
    name="Hungarian",
    zero="nulla",
    negative="mínusz",
    builder=HungarianBuilder(ones=HU_ONES, tens=HU_TENS, hundred_joiner=""),
    ladder=ScaleLadder(
        (ScaleWord.of("ezer", policy=NumeralPolicy.OMIT_ONE),) + ladder_of(HU_SCALES)
    ),
    connector=HungarianConnector(separator="-", scale_separator=""),
    ordinal=TerminalWordOrdinal(
        numbers={1: "első", 2: "második"},
        endings=HU_ORDINAL_ENDINGS,
        delimiters="-",
    ),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("forint"), attributive=True),
        minor=CurrencyUnit(PluralForms.invariant("fillér"), attributive=True),
        conjunction=" ",
    ),
    decimal_word="egész",
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    HUNGARIAN,
    HUNGARIAN.derive("hu-HU", "Hungarian (Hungary)"),
)
