"""German and Dutch rule tables.

Both languages write numbers below a million as one compound word with
inverted tens ("einundzwanzig", "eenentwintig") and put spaces around the
million-scale words ("zwei Millionen dreitausend").

Dutch options: ``accent_one`` ("één", on by default), ``include_conjunction``
("honderdenvier", "duizend en twaalf") and ``hundred_pairing``
("elfhonderd", on by default).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from numwords.engine.assembler import ConnectorRule, Piece
from numwords.engine.cardinal import CardinalStrategy, HundredPairingCardinal
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import OrdinalStrategy, TerminalWordOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import SegmentContext, TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.options import RenderOptions
from numwords.types import Gender, RenderedSegment

# =============================================================================
# German
# =============================================================================

DE_ONES = ("", "eins", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun")
DE_TEENS = (
    "zehn", "elf", "zwölf", "dreizehn", "vierzehn",
    "fünfzehn", "sechzehn", "siebzehn", "achtzehn", "neunzehn",
)
DE_TENS = ("", "", "zwanzig", "dreißig", "vierzig", "fünfzig", "sechzig", "siebzig", "achtzig", "neunzig")
DE_SCALES = (
    "Million", "Milliarde", "Billion", "Billiarde", "Trillion",
    "Trilliarde", "Quadrillion", "Quadrilliarde", "Quintillion", "Quintilliarde",
)
DE_SCALES_PLURAL = (
    "Millionen", "Milliarden", "Billionen", "Billiarden", "Trillionen",
    "Trilliarden", "Quadrillionen", "Quadrilliarden", "Quintillionen", "Quintilliarden",
)

# Ordinal stems that differ from cardinal + "te"
DE_ORDINAL_ONES = (("eins", "erste"), ("drei", "dritte"), ("sieben", "siebte"), ("acht", "achte"))


@dataclass(frozen=True)
class GermanBuilder(TripletBuilder):
    """"eins" standalone, "ein"/"eine" in front of a scale word."""

    def ones_word(self, digit: int, context: SegmentContext) -> str:
        if digit == 1 and context.scale_follows:
            return "eine" if context.gender is Gender.FEMININE else "ein"
        return super().ones_word(digit, context)


def _german_ordinal(word: str, value: int) -> str:
    rest = value % 100
    if 0 < rest < 10:
        for ending, ordinal in DE_ORDINAL_ONES:
            if word.endswith(ending):
                return word[: -len(ending)] + ordinal
    if 0 < rest < 20:
        return word + "te"
    if word[:1].isupper() and word.endswith("en"):
        word = word[:-2]
    return word + "ste"


GERMAN = LocaleRuleTable(
    code="de",
    name="German",
    zero="null",
    negative="minus",
    builder=GermanBuilder(
        ones=DE_ONES,
        teens=DE_TEENS,
        tens=DE_TENS,
        hundred="hundert",
        hundred_one="ein",
        hundred_glue="",
        hundred_joiner="",
        inversion="und",
        compound_one="ein",
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("tausend", one_numeral="ein", glue_before="", glue_after=""),)
        + ladder_of(DE_SCALES, DE_SCALES_PLURAL, one_numeral="eine", gender=Gender.FEMININE)
    ),
    ordinal=TerminalWordOrdinal(suffix=_german_ordinal, delimiters=" "),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("Euro"), one_numeral="ein"),
        minor=CurrencyUnit(PluralForms.invariant("Cent"), one_numeral="ein"),
        conjunction=" und ",
    ),
    decimal_word="komma",
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Dutch
# =============================================================================

NL_ONES = ("", "een", "twee", "drie", "vier", "vijf", "zes", "zeven", "acht", "negen")
NL_TEENS = (
    "tien", "elf", "twaalf", "dertien", "veertien",
    "vijftien", "zestien", "zeventien", "achttien", "negentien",
)
NL_TENS = ("", "", "twintig", "dertig", "veertig", "vijftig", "zestig", "zeventig", "tachtig", "negentig")
NL_SCALES = (
    "miljoen", "miljard", "biljoen", "biljard", "triljoen",
    "triljard", "quadriljoen", "quadriljard", "quintiljoen", "quintiljard",
)
NL_ORDINAL_ONES = (
    "", "eerste", "tweede", "derde", "vierde", "vijfde", "zesde", "zevende", "achtste", "negende",
)

NL_AND = " en "


@dataclass(frozen=True)
class DutchBuilder(TripletBuilder):
    """Dutch compounds.

    Attributes:
        accent_one: Write a standalone one as "één".
        with_and: Insert "en" between hundreds and a remainder below 13.
    """

    accent_one: bool = True
    with_and: bool = False

    def build(self, value: int, context: SegmentContext) -> RenderedSegment:
        if value == 1 and self.accent_one:
            return RenderedSegment("één")
        return super().build(value, context)

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        tens_digit, ones_digit = divmod(value, 10)
        if tens_digit >= 2 and ones_digit:
            one = self.ones[ones_digit]
            return one + ("ën" if one.endswith("e") else "en") + self.tens[tens_digit]
        return super().below_hundred_word(value, context)

    def join(self, head, tail, hundreds_digit, rest, context):
        if head and tail and self.with_and and rest < 13:
            return head + "en" + tail
        return super().join(head, tail, hundreds_digit, rest, context)


@dataclass(frozen=True)
class SmallRemainderConnector(ConnectorRule):
    """Conjunction before a final group below ``below`` that follows a scale."""

    below: int = 13

    def wants_conjunction(self, prev: Piece, cur: Piece, *, final: bool = False) -> bool:
        return (
            cur.starts_group
            and cur.level == 0
            and prev.level > 0
            and cur.value < self.below
        )


@dataclass(frozen=True)
class DutchOrdinal(OrdinalStrategy):
    """Ordinal of the last two digits after the cardinal of the rest.

    "honderd eerste", "duizend eenentwintigste", "tweehonderdste".
    """

    def render(self, table, value, gender=None):
        table = replace(table, builder=replace(table.builder, accent_one=False, with_and=False))
        rest = value % 100
        if rest == 0:
            return table.cardinal.render(table, value) + "ste"
        low = self.small(table, rest)
        if value == rest:
            return low
        return table.cardinal.render(table, value - rest) + " " + low

    def small(self, table: LocaleRuleTable, value: int) -> str:
        """Ordinal for 1-99."""
        if value < 10:
            return NL_ORDINAL_ONES[value]
        word = table.cardinal.render(table, value)
        if value < 20:
            return word + ("e" if word.endswith("d") else "de")
        return word + "ste"


def dutch_variant(table: LocaleRuleTable, options: RenderOptions) -> LocaleRuleTable:
    """Apply accent, "en" and hundred pairing."""
    with_and = bool(options.include_conjunction)
    builder = replace(table.builder, with_and=with_and)
    if options.accent_one is not None:
        builder = replace(builder, accent_one=options.accent_one)
    conjunction = NL_AND if with_and else None
    if options.hundred_pairing:
        cardinal = HundredPairingCardinal(glue="", conjunction=conjunction, conjunction_below=13)
    else:
        cardinal = CardinalStrategy()
    return replace(
        table,
        builder=builder,
        cardinal=cardinal,
        connector=replace(table.connector, conjunction=conjunction),
    )


DUTCH = LocaleRuleTable(
    code="nl",
    name="Dutch",
    zero="nul",
    negative="min",
    builder=DutchBuilder(
        ones=NL_ONES,
        teens=NL_TEENS,
        tens=NL_TENS,
        hundred="honderd",
        hundred_omit_one=True,
        hundred_glue="",
        hundred_joiner="",
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("duizend", policy=NumeralPolicy.OMIT_ONE, glue_before=""),)
        + ladder_of(NL_SCALES)
    ),
    connector=SmallRemainderConnector(),
    ordinal=DutchOrdinal(),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("euro")),
        minor=CurrencyUnit(PluralForms.invariant("cent")),
        conjunction=NL_AND,
    ),
    decimal_word="komma",
    accepted_options=frozenset({"accent_one", "include_conjunction", "hundred_pairing", "negative_word"}),
    defaults=RenderOptions(accent_one=True, include_conjunction=False, hundred_pairing=True),
    variant=dutch_variant,
)

TABLES = (
    GERMAN,
    GERMAN.derive("de-DE", "German (Germany)"),
    DUTCH,
    DUTCH.derive("nl-NL", "Dutch (Netherlands)"),
)
