"""Greek rule tables.

Thousands are counted in the feminine ("τρεις χιλιάδες", "διακόσιες
χιλιάδες") with the bare "χίλια" for one thousand. One hundred is "εκατό"
alone and "εκατόν" before the rest of its group. Fractional digits are
read one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass

from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.decimal import FractionStyle
from numwords.engine.ordinal import ComponentOrdinal, OrdinalTables
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import SegmentContext, TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.types import Gender

EL_ONES = ("", "ένα", "δύο", "τρία", "τέσσερα", "πέντε", "έξι", "επτά", "οκτώ", "εννέα")
EL_FEMININE = ("", "μία", "δύο", "τρεις", "τέσσερις", "πέντε", "έξι", "επτά", "οκτώ", "εννέα")
EL_MASCULINE = ("", "ένας", "δύο", "τρεις", "τέσσερις", "πέντε", "έξι", "επτά", "οκτώ", "εννέα")
EL_TEENS = (
    "δέκα", "έντεκα", "δώδεκα", "δεκατρία", "δεκατέσσερα",
    "δεκαπέντε", "δεκαέξι", "δεκαεπτά", "δεκαοκτώ", "δεκαεννέα",
)
EL_TENS = ("", "", "είκοσι", "τριάντα", "σαράντα", "πενήντα", "εξήντα", "εβδομήντα", "ογδόντα", "ενενήντα")
EL_HUNDREDS = (
    "", "εκατό", "διακόσια", "τριακόσια", "τετρακόσια",
    "πεντακόσια", "εξακόσια", "επτακόσια", "οκτακόσια", "εννιακόσια",
)
EL_SCALES = (
    "εκατομμύριο", "δισεκατομμύριο", "τρισεκατομμύριο", "τετράκις εκατομμύριο",
    "πεντάκις εκατομμύριο", "εξάκις εκατομμύριο", "επτάκις εκατομμύριο",
    "οκτάκις εκατομμύριο", "εννεάκις εκατομμύριο",
)


@dataclass(frozen=True)
class GreekBuilder(TripletBuilder):
    """Gendered teens and hundreds, "εκατόν" before a remainder."""

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        if value in (13, 14) and context.gender in (Gender.FEMININE, Gender.MASCULINE):
            return "δεκα" + ("τρείς" if value == 13 else "τέσσερις")
        return super().below_hundred_word(value, context)

    def hundreds_word(self, digit: int, context: SegmentContext) -> str:
        word = super().hundreds_word(digit, context)
        if digit > 1 and context.gender is Gender.FEMININE:
            return word[:-1] + "ες"
        if digit > 1 and context.gender is Gender.MASCULINE:
            return word[:-1] + "οι"
        return word

    def join(self, head, tail, hundreds_digit, rest, context):
        if hundreds_digit == 1 and rest:
            head = "εκατόν"
        return super().join(head, tail, hundreds_digit, rest, context)


EL_ORDINALS = OrdinalTables(
    ones=("", "πρώτος", "δεύτερος", "τρίτος", "τέταρτος", "πέμπτος", "έκτος", "έβδομος", "όγδοος", "ένατος"),
    teens=(
        "δέκατος", "ενδέκατος", "δωδέκατος", "δέκατος τρίτος", "δέκατος τέταρτος",
        "δέκατος πέμπτος", "δέκατος έκτος", "δέκατος έβδομος", "δέκατος όγδοος", "δέκατος ένατος",
    ),
    tens=(
        "", "", "εικοστός", "τριακοστός", "τεσσαρακοστός", "πεντηκοστός",
        "εξηκοστός", "εβδομηκοστός", "ογδοηκοστός", "ενενηκοστός",
    ),
    hundreds=(
        "", "εκατοστός", "διακοσιοστός", "τριακοσιοστός", "τετρακοσιοστός",
        "πεντακοσιοστός", "εξακοσιοστός", "επτακοσιοστός", "οκτακοσιοστός", "εννιακοσιοστός",
    ),
    scales=("χιλιοστός", "εκατομμυριοστός", "δισεκατομμυριοστός", "τρισεκατομμυριοστός")
    + tuple(word.split(" ")[0] + " εκατομμυριοστός" for word in EL_SCALES[3:]),
    ordinal_tens=True,
    ordinal_hundreds=True,
)

GREEK = LocaleRuleTable(
    code="el",
    name="Greek",
    zero="μηδέν",
    negative="μείον",
    builder=GreekBuilder(
        ones=EL_ONES,
        teens=EL_TEENS,
        tens=EL_TENS,
        hundreds=EL_HUNDREDS,
        tens_joiner=" ",
        feminine=EL_FEMININE,
        masculine=EL_MASCULINE,
    ),
    ladder=ScaleLadder(
        (
            ScaleWord(
                PluralForms(one="χίλια", other="χιλιάδες"),
                policy=NumeralPolicy.OMIT_ONE,
                gender=Gender.FEMININE,
            ),
        )
        + ladder_of(EL_SCALES, tuple(word[:-1] + "α" for word in EL_SCALES), gender=Gender.NEUTER)
    ),
    ordinal=ComponentOrdinal(EL_ORDINALS, feminine=EL_ORDINALS.inflected((("ός", "ή"), ("ος", "η")))),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("ευρώ"), gender=Gender.NEUTER),
        minor=CurrencyUnit(PluralForms(one="λεπτό", other="λεπτά"), gender=Gender.NEUTER),
        conjunction=" και ",
    ),
    decimal_word="κόμμα",
    fraction_style=FractionStyle.DIGITS,
    accepted_options=frozenset({"gender", "negative_word"}),
)

TABLES = (
    GREEK,
    GREEK.derive("el-GR", "Greek (Greece)"),
)
