"""Swedish, Norwegian Bokmål and Danish rule tables.

Swedish and Norwegian insert "och"/"og" between hundreds and the rest of a
group and before a final group without hundreds. Norwegian writes a comma
after "tusen" when a hundreds group follows ("to tusen, tre hundre og fire").

Norwegian ordinals past "tolvte" are built by suffixing the cardinal and
are flagged naive.

Danish fuses everything below a million ("firetusinde og ethundrede og
seksoghalvfems"), puts ones before tens and counts tens by twenties from
fifty ("halvtreds").
"""

from __future__ import annotations

from dataclasses import dataclass

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule, Piece
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import SuffixOrdinal, TerminalWordOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.types import Gender

# =============================================================================
# Swedish
# =============================================================================

SV_ONES = ("", "ett", "två", "tre", "fyra", "fem", "sex", "sju", "åtta", "nio")
SV_TEENS = (
    "tio", "elva", "tolv", "tretton", "fjorton",
    "femton", "sexton", "sjutton", "arton", "nitton",
)
SV_TENS = ("", "", "tjugo", "trettio", "fyrtio", "femtio", "sextio", "sjuttio", "åttio", "nittio")
SV_SCALES = (
    "miljon", "miljard", "biljon", "biljard", "triljon",
    "triljard", "kvadriljon", "kvadriljard", "kvintiljon",
)
SV_SCALES_PLURAL = (
    "miljoner", "miljarder", "biljoner", "biljarder", "triljoner",
    "triljarder", "kvadriljoner", "kvadriljarder", "kvintiljoner",
)
SV_ORDINALS = {
    "ett": "första", "en": "första", "två": "andra", "tre": "tredje", "fyra": "fjärde",
    "fem": "femte", "sex": "sjätte", "sju": "sjunde", "åtta": "åttonde", "nio": "nionde",
    "tio": "tionde", "elva": "elfte", "tolv": "tolfte",
}


def _swedish_ordinal(word: str, value: int) -> str:
    if word.endswith(("ljoner", "ljarder")):
        return word[:-2] + "te"
    if word.endswith(("ljon", "ljard")):
        return word + "te"
    if word.endswith("o"):
        return word + "nde"
    return word + "de"


SWEDISH = LocaleRuleTable(
    code="sv",
    name="Swedish",
    zero="noll",
    negative="minus",
    builder=TripletBuilder(
        ones=SV_ONES,
        teens=SV_TEENS,
        tens=SV_TENS,
        hundred="hundra",
        hundred_omit_one=True,
        hundred_joiner=" och ",
        tens_joiner="-",
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("tusen", policy=NumeralPolicy.OMIT_ONE),)
        + ladder_of(SV_SCALES, SV_SCALES_PLURAL, one_numeral="en")
    ),
    connector=ConnectorRule(conjunction=" och ", policy=ConjunctionPolicy.FINAL_WITHOUT_HUNDRED),
    ordinal=TerminalWordOrdinal(words=SV_ORDINALS, suffix=_swedish_ordinal),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="krona", other="kronor"), one_numeral="en"),
        minor=CurrencyUnit(PluralForms.invariant("öre")),
        conjunction=" och ",
    ),
    decimal_word="komma",
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Norwegian Bokmål
# =============================================================================

NB_ONES = ("", "en", "to", "tre", "fire", "fem", "seks", "syv", "åtte", "ni")
NB_NEUTER = ("", "ett", "to", "tre", "fire", "fem", "seks", "syv", "åtte", "ni")
NB_TEENS = (
    "ti", "elleve", "tolv", "tretten", "fjorten",
    "femten", "seksten", "sytten", "atten", "nitten",
)
NB_TENS = ("", "", "tjue", "tretti", "førti", "femti", "seksti", "sytti", "åtti", "nitti")
NB_SCALES = (
    "tusen", "million", "milliard", "billion", "billiard",
    "trillion", "trilliard", "kvadrillion", "kvadrilliard", "kvintillion",
)
NB_SCALES_PLURAL = (
    "tusen", "millioner", "milliarder", "billioner", "billiarder",
    "trillioner", "trilliarder", "kvadrillioner", "kvadrilliarder", "kvintillioner",
)
NB_ORDINALS = {
    1: "første", 2: "andre", 3: "tredje", 4: "fjerde", 5: "femte", 6: "sjette",
    7: "sjuende", 8: "åttende", 9: "niende", 10: "tiende", 11: "ellevte", 12: "tolvte",
}


@dataclass(frozen=True)
class NorwegianConnector(ConnectorRule):
    """Comma between "tusen" and a following hundreds group."""

    def separator_between(self, prev: Piece, cur: Piece, total: int) -> str:
        if prev.is_scale and prev.level == 1 and cur.segment.has_hundred:
            return ", "
        return super().separator_between(prev, cur, total)


def _norwegian_ordinal(cardinal: str, value: int) -> str:
    if cardinal.endswith(("ioner", "iarder")):
        cardinal = cardinal[:-2]
    if cardinal.endswith(("ion", "iard")):
        return cardinal + "te"
    if 13 <= value <= 19 or cardinal.endswith("en"):
        return cardinal[:-2] + "ende"
    if cardinal.endswith("ni"):
        return cardinal + "ende"
    return cardinal + "de"


NORWEGIAN = LocaleRuleTable(
    code="nb",
    name="Norwegian Bokmål",
    zero="null",
    negative="minus",
    builder=TripletBuilder(
        ones=NB_ONES,
        teens=NB_TEENS,
        tens=NB_TENS,
        hundred="hundre",
        hundred_joiner=" og ",
        tens_joiner="-",
        neuter=NB_NEUTER,
    ),
    ladder=ScaleLadder(ladder_of(NB_SCALES, NB_SCALES_PLURAL)),
    connector=NorwegianConnector(conjunction=" og ", policy=ConjunctionPolicy.FINAL_WITHOUT_HUNDRED),
    ordinal=SuffixOrdinal(suffix=_norwegian_ordinal, numbers=NB_ORDINALS, naive=True),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="krone", other="kroner")),
        minor=CurrencyUnit(PluralForms.invariant("øre"), gender=Gender.NEUTER),
        conjunction=" og ",
    ),
    decimal_word="komma",
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Danish
# =============================================================================

DA_ONES = ("", "et", "to", "tre", "fire", "fem", "seks", "syv", "otte", "ni")
DA_TEENS = (
    "ti", "elleve", "tolv", "tretten", "fjorten",
    "femten", "seksten", "sytten", "atten", "nitten",
)
# Vigesimal from fifty: "halvtreds" is two and a half twenties
DA_TENS = ("", "", "tyve", "tredive", "fyrre", "halvtreds", "treds", "halvfjerds", "firs", "halvfems")
DA_SCALES = (
    "million", "milliard", "billion", "billiard",
    "trillion", "trilliard", "kvadrillion", "kvadrilliard", "kvintillion",
)
DA_SCALES_PLURAL = (
    "millioner", "milliarder", "billioner", "billiarder",
    "trillioner", "trilliarder", "kvadrillioner", "kvadrilliarder", "kvintillioner",
)
DA_ORDINALS = {
    "et": "første", "en": "første", "to": "anden", "tre": "tredje", "fire": "fjerde",
    "fem": "femte", "seks": "sjette", "syv": "syvende", "otte": "ottende", "ni": "niende",
    "ti": "tiende", "elleve": "ellevte", "tolv": "tolvte",
}
DA_ORDINAL_TENS = (
    ("halvtreds", "halvtredsindstyvende"),
    ("halvfjerds", "halvfjerdsindstyvende"),
    ("halvfems", "halvfemsindstyvende"),
    ("tredive", "tredivte"),
    ("treds", "tresindstyvende"),
    ("fyrre", "fyrretyvende"),
    ("firs", "firsindstyvende"),
    ("tyve", "tyvende"),
)


@dataclass(frozen=True)
class DanishConnector(ConnectorRule):
    """"tusind" becomes "tusinde og" when more follows ("ettusinde og et")."""

    def wants_conjunction(self, prev: Piece, cur: Piece, *, final: bool = False) -> bool:
        if prev.is_scale and prev.level == 1:
            return False
        return super().wants_conjunction(prev, cur, final=final)

    def separator_between(self, prev: Piece, cur: Piece, total: int) -> str:
        if prev.is_scale and prev.level == 1:
            return "e" + (self.conjunction or self.separator)
        return super().separator_between(prev, cur, total)


def _danish_ordinal(word: str, value: int) -> str:
    if word.endswith(("ioner", "iarder")):
        word = word[:-2]
    if word.endswith(("ion", "iard")):
        return word + "te"
    if word.endswith("tusind"):
        return word + "e"
    if word.endswith("hundrede"):
        return word
    return word + "de"


DANISH = LocaleRuleTable(
    code="da",
    name="Danish",
    zero="nul",
    negative="minus",
    builder=TripletBuilder(
        ones=DA_ONES,
        teens=DA_TEENS,
        tens=DA_TENS,
        hundred="hundrede",
        hundred_glue="",
        hundred_joiner=" og ",
        inversion="og",
        compound_one="en",
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("tusind", glue_before=""),)
        + ladder_of(DA_SCALES, DA_SCALES_PLURAL, one_numeral="en")
    ),
    connector=DanishConnector(conjunction=" og ", policy=ConjunctionPolicy.FINAL_ALWAYS),
    ordinal=TerminalWordOrdinal(words=DA_ORDINALS, endings=DA_ORDINAL_TENS, suffix=_danish_ordinal),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="krone", other="kroner"), one_numeral="en"),
        minor=CurrencyUnit(PluralForms.invariant("øre")),
        conjunction=" og ",
    ),
    decimal_word="komma",
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    SWEDISH,
    SWEDISH.derive("sv-SE", "Swedish (Sweden)"),
    NORWEGIAN,
    NORWEGIAN.derive("nb-NO", "Norwegian Bokmål (Norway)"),
    DANISH,
    DANISH.derive("da-DK", "Danish (Denmark)"),
)
