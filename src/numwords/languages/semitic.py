"""Hebrew and Arabic rule tables.

Hebrew counts in the feminine by default ("אחת", "שלוש") and agrees in
the masculine with thousands and millions ("אחד עשר אלף"). Two to ten
thousand are fused forms ("אלפיים", "שלושת אלפים"). The conjunction "ו"
is attached to the last word of a group ("עשרים ואחת") and joins the final
group when it is a single word ("אלף ואחת", "אלף ומאה").

Arabic writes ones before tens ("واحد وعشرون") and joins every group with
"و". Scale words take four forms by count: dual ("ألفان"), plural for 3-10
("ثلاثة آلاف"), accusative singular for 11-99 ("أحد عشر ألفاً") and the
plain singular above.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule, Piece
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.decimal import FractionStyle
from numwords.engine.ordinal import ComponentOrdinal, OrdinalTables, PrefixOrdinal
from numwords.engine.plural import PluralForms, arabic
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import SegmentContext, TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.types import Gender

SEMITIC_OPTIONS = frozenset({"gender", "negative_word"})


# =============================================================================
# Hebrew
# =============================================================================

HE_FEMININE = ("", "אחת", "שתיים", "שלוש", "ארבע", "חמש", "שש", "שבע", "שמונה", "תשע")
HE_MASCULINE = ("", "אחד", "שניים", "שלושה", "ארבעה", "חמישה", "שישה", "שבעה", "שמונה", "תשעה")
HE_TEENS = (
    "עשר", "אחת עשרה", "שתים עשרה", "שלוש עשרה", "ארבע עשרה",
    "חמש עשרה", "שש עשרה", "שבע עשרה", "שמונה עשרה", "תשע עשרה",
)
HE_TEENS_MASCULINE = (
    "עשרה", "אחד עשר", "שנים עשר", "שלושה עשר", "ארבעה עשר",
    "חמישה עשר", "שישה עשר", "שבעה עשר", "שמונה עשר", "תשעה עשר",
)
HE_TENS = ("", "", "עשרים", "שלושים", "ארבעים", "חמישים", "שישים", "שבעים", "שמונים", "תשעים")
HE_HUNDREDS = ("", "מאה", "מאתיים") + tuple(word + " מאות" for word in HE_FEMININE[3:])
HE_SCALES = (
    "מיליון", "מיליארד", "טריליון", "קוודריליון", "קווינטיליון",
    "סקסטיליון", "ספטיליון", "אוקטיליון", "נוניליון",
)
# Construct state of the counted thousands
HE_THOUSANDS = {
    2: "אלפיים",
    3: "שלושת אלפים",
    4: "ארבעת אלפים",
    5: "חמשת אלפים",
    6: "ששת אלפים",
    7: "שבעת אלפים",
    8: "שמונת אלפים",
    9: "תשעת אלפים",
    10: "עשרת אלפים",
}

AND = " ו"


def _single_word(value: int) -> bool:
    """True when a group value is written as one word."""
    return value < 20 or (value < 100 and value % 10 == 0) or value % 100 == 0


@dataclass(frozen=True)
class HebrewBuilder(TripletBuilder):
    """Gendered teens, construct "שני"/"שתי" and the attached "ו"."""

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        if value == 2 and context.scale_follows:
            return "שתי" if context.gender is Gender.FEMININE else "שני"
        if 10 <= value < 20 and context.gender is Gender.MASCULINE:
            return HE_TEENS_MASCULINE[value - 10]
        return super().below_hundred_word(value, context)

    def join(self, head, tail, hundreds_digit, rest, context):
        if head and tail:
            return head + (AND if _single_word(rest) else " ") + tail
        return head or tail


@dataclass(frozen=True)
class HebrewConnector(ConnectorRule):
    """"ו" before a final single-word group that follows a scale word."""

    def wants_conjunction(self, prev: Piece, cur: Piece, *, final: bool = False) -> bool:
        return final and cur.starts_group and prev.is_scale and _single_word(cur.value)


@dataclass(frozen=True)
class ArticleOrdinal(PrefixOrdinal):
    """Ordinal adjectives up to ten, definite cardinals above ("העשרים ואחד").

    Attributes:
        feminine_numbers: Feminine ordinal adjectives by number.
    """

    feminine_numbers: Mapping[int, str] = field(default_factory=dict)

    def render(self, table, value, gender=None):
        numbers = self.feminine_numbers if gender is Gender.FEMININE else self.numbers
        if value in numbers:
            return numbers[value]
        return self.prefix + table.cardinal.render(table, value, gender or Gender.MASCULINE)


HEBREW = LocaleRuleTable(
    code="he",
    name="Hebrew",
    zero="אפס",
    negative="מינוס",
    builder=HebrewBuilder(
        ones=HE_FEMININE,
        teens=HE_TEENS,
        tens=HE_TENS,
        hundreds=HE_HUNDREDS,
        tens_joiner=AND,
        masculine=HE_MASCULINE,
    ),
    ladder=ScaleLadder(
        (
            ScaleWord.of(
                "אלף",
                policy=NumeralPolicy.OMIT_ONE,
                gender=Gender.MASCULINE,
                fused=HE_THOUSANDS,
            ),
        )
        + ladder_of(HE_SCALES, policy=NumeralPolicy.OMIT_ONE, gender=Gender.MASCULINE)
    ),
    connector=HebrewConnector(conjunction=AND, policy=ConjunctionPolicy.FINAL_SIMPLE),
    ordinal=ArticleOrdinal(
        prefix="ה",
        numbers={
            1: "ראשון", 2: "שני", 3: "שלישי", 4: "רביעי", 5: "חמישי",
            6: "שישי", 7: "שביעי", 8: "שמיני", 9: "תשיעי", 10: "עשירי",
        },
        feminine_numbers={
            1: "ראשונה", 2: "שנייה", 3: "שלישית", 4: "רביעית", 5: "חמישית",
            6: "שישית", 7: "שביעית", 8: "שמינית", 9: "תשיעית", 10: "עשירית",
        },
    ),
    currency=CurrencyStyle(
        major=CurrencyUnit(
            PluralForms(one="שקל", other="שקלים"),
            gender=Gender.MASCULINE,
            fused={1: "שקל אחד", 2: "שני שקלים"},
        ),
        minor=CurrencyUnit(
            PluralForms(one="אגורה", other="אגורות"),
            gender=Gender.FEMININE,
            fused={1: "אגורה אחת", 2: "שתי אגורות"},
        ),
        conjunction=AND,
    ),
    decimal_word="נקודה",
    fraction_style=FractionStyle.DIGITS,
    accepted_options=SEMITIC_OPTIONS,
)


# =============================================================================
# Arabic
# =============================================================================

AR_MASCULINE = ("", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة")
AR_FEMININE = ("", "واحدة", "اثنتان", "ثلاث", "أربع", "خمس", "ست", "سبع", "ثمان", "تسع")
AR_TEENS = (
    "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
    "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
)
AR_TEENS_FEMININE = (
    "عشر", "إحدى عشرة", "اثنتا عشرة", "ثلاث عشرة", "أربع عشرة",
    "خمس عشرة", "ست عشرة", "سبع عشرة", "ثماني عشرة", "تسع عشرة",
)
AR_TENS = ("", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون")
AR_HUNDREDS = (
    "", "مائة", "مئتان", "ثلاثمائة", "أربعمائة",
    "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
)
AR_SCALES = (
    ("ألف", "آلاف"),
    ("مليون", "ملايين"),
    ("مليار", "مليارات"),
    ("تريليون", "تريليونات"),
    ("كوادريليون", "كوادريليونات"),
    ("كوينتليون", "كوينتليونات"),
    ("سكستيليون", "سكستيليونات"),
    ("سبتيليون", "سبتيليونات"),
    ("أوكتيليون", "أوكتيليونات"),
    ("نونيليون", "نونيليونات"),
)

AR_AND = " و"


def arabic_scale(word: str, plural: str) -> ScaleWord:
    """Scale word with dual, plural and accusative forms."""
    return ScaleWord(
        PluralForms(one=word, two=word + "ان", few=plural, many=word + "اً", other=word, rule=arabic),
        policy=NumeralPolicy.OMIT_ONE,
        gender=Gender.MASCULINE,
        fused={2: word + "ان"},
    )


@dataclass(frozen=True)
class ArabicBuilder(TripletBuilder):
    """Feminine teens on top of the gendered ones tables."""

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        if 10 <= value < 20 and context.gender is Gender.FEMININE:
            return AR_TEENS_FEMININE[value - 10]
        return super().below_hundred_word(value, context)


AR_ORDINALS = OrdinalTables(
    ones=("", "الأول", "الثاني", "الثالث", "الرابع", "الخامس", "السادس", "السابع", "الثامن", "التاسع"),
    teens=(
        "العاشر", "الحادي عشر", "الثاني عشر", "الثالث عشر", "الرابع عشر",
        "الخامس عشر", "السادس عشر", "السابع عشر", "الثامن عشر", "التاسع عشر",
    ),
    tens=("", "") + tuple("ال" + word for word in AR_TENS[2:]),
    hundreds=("",) + tuple("ال" + word for word in AR_HUNDREDS[1:]),
    scales=tuple("ال" + word for word, _ in AR_SCALES),
    ordinal_tens=True,
    ordinal_hundreds=True,
    tens_joiner=AR_AND,
    hundred_joiner=AR_AND,
)
AR_ORDINALS_FEMININE = replace(
    AR_ORDINALS,
    ones=("", "الأولى", "الثانية", "الثالثة", "الرابعة", "الخامسة", "السادسة", "السابعة", "الثامنة", "التاسعة"),
    teens=(
        "العاشرة", "الحادية عشرة", "الثانية عشرة", "الثالثة عشرة", "الرابعة عشرة",
        "الخامسة عشرة", "السادسة عشرة", "السابعة عشرة", "الثامنة عشرة", "التاسعة عشرة",
    ),
)


@dataclass(frozen=True)
class ArabicOrdinal(ComponentOrdinal):
    """Ordinals with the article, ones before tens ("الحادي والعشرون").

    Numbers ending in several units of a scale word take the article on
    the cardinal ("الثلاثة آلاف").
    """

    def render(self, table, value, gender=None):
        pieces = table.cardinal.pieces(table, value, gender)
        if pieces[-1].is_scale and pieces[-1].value > 1:
            return "ال" + table.connector.join(pieces, value)
        return super().render(table, value, gender)

    def group_words(self, table, tables, value, gender):
        hundreds_digit, rest = divmod(value, 100)
        tens_digit, ones_digit = divmod(rest, 10)
        if tens_digit < 2 or not ones_digit:
            return super().group_words(table, tables, value, gender)
        one = tables.ones[ones_digit]
        if ones_digit == 1:
            one = "الحادية" if tables is AR_ORDINALS_FEMININE else "الحادي"
        low = one + tables.tens_joiner + tables.tens[tens_digit]
        if not hundreds_digit:
            return low
        return tables.hundreds[hundreds_digit] + tables.hundred_joiner + low


ARABIC = LocaleRuleTable(
    code="ar",
    name="Arabic",
    zero="صفر",
    negative="ناقص",
    builder=ArabicBuilder(
        ones=AR_MASCULINE,
        teens=AR_TEENS,
        tens=AR_TENS,
        hundreds=AR_HUNDREDS,
        hundred_joiner=AR_AND,
        inversion=AR_AND,
        feminine=AR_FEMININE,
    ),
    ladder=ScaleLadder(tuple(arabic_scale(word, plural) for word, plural in AR_SCALES)),
    connector=ConnectorRule(conjunction=AR_AND, policy=ConjunctionPolicy.BETWEEN_GROUPS),
    ordinal=ArabicOrdinal(AR_ORDINALS, feminine=AR_ORDINALS_FEMININE),
    currency=CurrencyStyle(
        major=CurrencyUnit(
            PluralForms(one="ريال", few="ريالات", many="ريالاً", other="ريال", rule=arabic),
            gender=Gender.MASCULINE,
            fused={1: "ريال واحد", 2: "ريالان"},
        ),
        minor=CurrencyUnit(
            PluralForms(one="هللة", few="هللات", other="هللة", rule=arabic),
            gender=Gender.FEMININE,
            fused={1: "هللة واحدة", 2: "هللتان"},
        ),
        conjunction=AR_AND,
    ),
    decimal_word="فاصلة",
    accepted_options=SEMITIC_OPTIONS,
)

TABLES = (
    HEBREW,
    HEBREW.derive("he-IL", "Hebrew (Israel)"),
    ARABIC,
    ARABIC.derive("ar-SA", "Arabic (Saudi Arabia)"),
)
