"""Turkish and Azerbaijani rule tables.

Both languages count with an omitted one in front of "hundred" and
"thousand" ("yüz", "bin", but "iki yüz", "bir milyon"). Turkish may also be
written as a single word (``drop_spaces``: "ikibinüç").

Ordinals add a suffix chosen by vowel harmony on the last vowel of the
number: -inci, -ıncı, -uncu, -üncü, without the first vowel after a vowel
("ikinci", "altıncı"). The rule is mechanical and the ordinals are flagged
naive.
"""

from __future__ import annotations

from dataclasses import replace

from numwords.engine.cardinal import RespacedCardinal
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import SuffixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.options import RenderOptions

# Harmonic vowel of the ordinal suffix for each vowel
HARMONY = {
    "a": "ı", "ı": "ı",
    "e": "i", "i": "i", "ə": "i",
    "o": "u", "u": "u",
    "ö": "ü", "ü": "ü",
}
VOWELS = frozenset(HARMONY)


def harmonic_ordinal(cardinal: str, value: int) -> str:
    """Append the ordinal suffix matching the last vowel of ``cardinal``."""
    vowel = next((HARMONY[ch] for ch in reversed(cardinal) if ch in VOWELS), "i")
    if cardinal.endswith("dört"):
        cardinal = cardinal[:-1] + "d"
    if cardinal[-1] in VOWELS:
        return cardinal + "nc" + vowel
    return cardinal + vowel + "nc" + vowel


# =============================================================================
# Turkish
# =============================================================================

TR_ONES = ("", "bir", "iki", "üç", "dört", "beş", "altı", "yedi", "sekiz", "dokuz")
TR_TENS = ("", "on", "yirmi", "otuz", "kırk", "elli", "altmış", "yetmiş", "seksen", "doksan")
TR_SCALES = (
    "milyon", "milyar", "trilyon", "katrilyon", "kentilyon",
    "seksilyon", "septilyon", "oktilyon", "nonilyon",
)


def turkish_variant(table: LocaleRuleTable, options: RenderOptions) -> LocaleRuleTable:
    """Write the number as one word when ``drop_spaces`` is set."""
    if options.drop_spaces:
        return replace(table, cardinal=RespacedCardinal(""))
    return table


TURKISH = LocaleRuleTable(
    code="tr",
    name="Turkish",
    zero="sıfır",
    negative="eksi",
    builder=TripletBuilder(
        ones=TR_ONES,
        teens=tuple("on " + word if word else "on" for word in TR_ONES),
        tens=TR_TENS,
        hundred="yüz",
        hundred_omit_one=True,
        tens_joiner=" ",
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("bin", policy=NumeralPolicy.OMIT_ONE),) + ladder_of(TR_SCALES)
    ),
    ordinal=SuffixOrdinal(suffix=harmonic_ordinal, naive=True),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("lira")),
        minor=CurrencyUnit(PluralForms.invariant("kuruş")),
        conjunction=" ",
    ),
    decimal_word="virgül",
    accepted_options=frozenset({"drop_spaces", "negative_word"}),
    defaults=RenderOptions(drop_spaces=False),
    variant=turkish_variant,
)


# =============================================================================
# Azerbaijani
# =============================================================================

AZ_ONES = ("", "bir", "iki", "üç", "dörd", "beş", "altı", "yeddi", "səkkiz", "doqquz")
AZ_TENS = ("", "on", "iyirmi", "otuz", "qırx", "əlli", "altmış", "yetmiş", "səksən", "doxsan")
AZ_SCALES = (
    "milyon", "milyard", "trilyon", "katrilyon", "kentilyon",
    "sekstilyon", "septilyon", "oktilyon", "nonilyon",
)

AZERBAIJANI = LocaleRuleTable(
    code="az",
    name="Azerbaijani",
    zero="sıfır",
    negative="mənfi",
    builder=TripletBuilder(
        ones=AZ_ONES,
        teens=tuple("on " + word if word else "on" for word in AZ_ONES),
        tens=AZ_TENS,
        hundred="yüz",
        hundred_omit_one=True,
        tens_joiner=" ",
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("min", policy=NumeralPolicy.OMIT_ONE),) + ladder_of(AZ_SCALES)
    ),
    ordinal=SuffixOrdinal(suffix=harmonic_ordinal, naive=True),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("manat")),
        minor=CurrencyUnit(PluralForms.invariant("qəpik")),
        conjunction=" ",
    ),
    decimal_word="nöqtə",
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    TURKISH,
    TURKISH.derive("tr-TR", "Turkish (Turkey)"),
    AZERBAIJANI,
    AZERBAIJANI.derive("az-AZ", "Azerbaijani (Azerbaijan)"),
)
