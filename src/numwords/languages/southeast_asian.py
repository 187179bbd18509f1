"""Filipino, Malay, Indonesian, Vietnamese and Thai rule tables.

Filipino links a numeral to the word it counts with "-ng" after a vowel
and "na" after a consonant ("dalawang libo", "apat na libo"). Malay and
Indonesian fuse one with its scale word ("seribu", "sejuta"). Vietnamese
inserts "lẻ" before a final group below ten hundreds ("một trăm lẻ năm",
"một nghìn lẻ năm") and repeats "tỷ" for larger numbers. Thai groups digits
by six and repeats "ล้าน" ("หนึ่งล้านล้าน").
"""

from __future__ import annotations

from dataclasses import dataclass

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.decimal import FractionStyle
from numwords.engine.ordinal import PrefixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import OverflowPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import PositionalBuilder, SegmentContext, TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.types import GroupingStrategy

# =============================================================================
# Filipino
# =============================================================================

FIL_ONES = ("", "isa", "dalawa", "tatlo", "apat", "lima", "anim", "pito", "walo", "siyam")
FIL_TEENS = (
    "sampu", "labing-isa", "labindalawa", "labintatlo", "labing-apat",
    "labinlima", "labing-anim", "labimpito", "labingwalo", "labinsiyam",
)
FIL_TENS = (
    "", "", "dalawampu", "tatlumpu", "apatnapu", "limampu",
    "animnapu", "pitumpu", "walumpu", "siyamnapu",
)
FIL_HUNDREDS = (
    "", "sandaan", "dalawang daan", "tatlong daan", "apat na raan", "limang daan",
    "anim na raan", "pitong daan", "walong daan", "siyam na raan",
)
FIL_SCALES = (
    "libo", "milyon", "bilyon", "trilyon", "kuwadrilyon",
    "kuwintilyon", "sekstilyon", "septilyon", "oktilyon", "nonilyon",
)


def filipino_linker(text: str) -> str:
    """Attach the linker a numeral takes before the word it counts."""
    if text[-1] in "aeiou":
        return text + "ng "
    if text.endswith("n"):
        return text + "g "
    return text + " na "


@dataclass(frozen=True)
class FilipinoUnit(CurrencyUnit):
    """Currency noun joined to its numeral with the linker."""

    def phrase(self, table, count):
        return filipino_linker(table.cardinal.render(table, count)) + self.forms.select(count)


FILIPINO = LocaleRuleTable(
    code="fil",
    name="Filipino",
    zero="sero",
    negative="negatibo",
    builder=TripletBuilder(
        ones=FIL_ONES,
        teens=FIL_TEENS,
        tens=FIL_TENS,
        hundreds=FIL_HUNDREDS,
        hundred_joiner=" at ",
        tens_joiner="'t ",
    ),
    ladder=ScaleLadder(ladder_of(FIL_SCALES)),
    connector=ConnectorRule(
        conjunction=" at ",
        policy=ConjunctionPolicy.FINAL_WITHOUT_HUNDRED,
        linker=filipino_linker,
    ),
    ordinal=PrefixOrdinal(prefix="ika", numbers={1: "una", 2: "ikalawa", 3: "ikatlo"}),
    currency=CurrencyStyle(
        major=FilipinoUnit(PluralForms.invariant("piso")),
        minor=FilipinoUnit(PluralForms.invariant("sentimo")),
        conjunction=" at ",
    ),
    decimal_word="punto",
    fraction_style=FractionStyle.DIGITS,
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Malay and Indonesian
# =============================================================================

MALAY_ONES = ("", "satu", "dua", "tiga", "empat", "lima", "enam", "tujuh", "lapan", "sembilan")
INDONESIAN_ONES = MALAY_ONES[:8] + ("delapan", "sembilan")


def malay_builder(ones: tuple[str, ...]) -> TripletBuilder:
    return TripletBuilder(
        ones=ones,
        teens=("sepuluh", "sebelas") + tuple(word + " belas" for word in ones[2:]),
        tens=("", "") + tuple(word + " puluh" for word in ones[2:]),
        hundreds=("", "seratus") + tuple(word + " ratus" for word in ones[2:]),
        tens_joiner=" ",
    )


def se_scale(word: str) -> ScaleWord:
    """Scale word fused with "se-" for a count of one ("seribu")."""
    return ScaleWord.of(word, fused={1: "se" + word})


MALAY = LocaleRuleTable(
    code="ms",
    name="Malay",
    zero="sifar",
    negative="negatif",
    builder=malay_builder(MALAY_ONES),
    ladder=ScaleLadder(
        tuple(
            se_scale(word)
            for word in (
                "ribu", "juta", "bilion", "trilion", "kuadrilion",
                "kuintilion", "sekstilion", "septilion", "oktilion", "nonilion",
            )
        )
    ),
    ordinal=PrefixOrdinal(prefix="ke", numbers={1: "pertama"}),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("ringgit")),
        minor=CurrencyUnit(PluralForms.invariant("sen")),
        conjunction=" dan ",
    ),
    decimal_word="perpuluhan",
    accepted_options=frozenset({"negative_word"}),
)

INDONESIAN = LocaleRuleTable(
    code="id",
    name="Indonesian",
    zero="nol",
    negative="minus",
    builder=malay_builder(INDONESIAN_ONES),
    ladder=ScaleLadder(
        (se_scale("ribu"),)
        + ladder_of(
            (
                "juta", "miliar", "triliun", "kuadriliun", "kuintiliun",
                "sekstiliun", "septiliun", "oktiliun", "noniliun",
            )
        )
    ),
    ordinal=PrefixOrdinal(prefix="ke", numbers={1: "pertama"}),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("rupiah")),
        minor=CurrencyUnit(PluralForms.invariant("sen")),
        conjunction=" dan ",
    ),
    decimal_word="koma",
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Vietnamese
# =============================================================================

VI_ONES = ("", "một", "hai", "ba", "bốn", "năm", "sáu", "bảy", "tám", "chín")

LE = " lẻ "


@dataclass(frozen=True)
class VietnameseBuilder(TripletBuilder):
    """"mốt" and "lăm" after tens, "lẻ" after a hundred."""

    def compound(self, tens_digit: int, ones_digit: int, context: SegmentContext) -> str:
        if ones_digit == 1:
            return self.tens[tens_digit] + self.tens_joiner + "mốt"
        if ones_digit == 5:
            return self.tens[tens_digit] + self.tens_joiner + "lăm"
        return super().compound(tens_digit, ones_digit, context)

    def join(self, head, tail, hundreds_digit, rest, context):
        if head and 0 < rest < 10:
            return head + LE + tail
        return super().join(head, tail, hundreds_digit, rest, context)


VIETNAMESE = LocaleRuleTable(
    code="vi",
    name="Vietnamese",
    zero="không",
    negative="âm",
    builder=VietnameseBuilder(
        ones=VI_ONES,
        teens=("mười", "mười một", "mười hai", "mười ba", "mười bốn",
               "mười lăm", "mười sáu", "mười bảy", "mười tám", "mười chín"),
        tens=("", "") + tuple(word + " mươi" for word in VI_ONES[2:]),
        hundred="trăm",
        tens_joiner=" ",
    ),
    # "nghìn tỷ" and "tỷ tỷ" are counted forms of the top scale word
    ladder=ScaleLadder(ladder_of(("nghìn", "triệu", "tỷ")), overflow=OverflowPolicy.NEST),
    connector=ConnectorRule(conjunction=LE, policy=ConjunctionPolicy.FINAL_WITHOUT_HUNDRED),
    ordinal=PrefixOrdinal(prefix="thứ ", numbers={1: "thứ nhất", 4: "thứ tư"}),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("đồng")),
        minor=CurrencyUnit(PluralForms.invariant("xu")),
        conjunction=" ",
    ),
    decimal_word="phẩy",
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Thai
# =============================================================================

TH_DIGITS = ("ศูนย์", "หนึ่ง", "สอง", "สาม", "สี่", "ห้า", "หก", "เจ็ด", "แปด", "เก้า")


@dataclass(frozen=True)
class ThaiBuilder(PositionalBuilder):
    """"สิบ", "ยี่สิบ" and the final "เอ็ด"."""

    def digit_word(self, pos, digit, digits, leading, context):
        if pos == 1 and digit == 2:
            return "ยี่" + self.positions[1]
        if pos == 0 and digit == 1 and any(digits[1:]):
            return "เอ็ด"
        return super().digit_word(pos, digit, digits, leading, context)


THAI = LocaleRuleTable(
    code="th",
    name="Thai",
    zero="ศูนย์",
    negative="ลบ",
    builder=ThaiBuilder(
        digits=TH_DIGITS,
        positions=("", "สิบ", "ร้อย", "พัน", "หมื่น", "แสน"),
        omit_one=frozenset({1}),
    ),
    ladder=ScaleLadder(ladder_of(("ล้าน",)), overflow=OverflowPolicy.NEST),
    grouping=GroupingStrategy.MILLIONS,
    connector=ConnectorRule(separator="", scale_separator=""),
    ordinal=PrefixOrdinal(prefix="ที่"),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("บาท"), separator=""),
        minor=CurrencyUnit(PluralForms.invariant("สตางค์"), separator=""),
        conjunction="",
        joiner="",
    ),
    decimal_word="จุด",
    fraction_style=FractionStyle.DIGITS,
    word_separator="",
    negative_separator="",
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    FILIPINO,
    FILIPINO.derive("fil-PH", "Filipino (Philippines)"),
    MALAY,
    MALAY.derive("ms-MY", "Malay (Malaysia)"),
    INDONESIAN,
    INDONESIAN.derive("id-ID", "Indonesian (Indonesia)"),
    VIETNAMESE,
    VIETNAMESE.derive("vi-VN", "Vietnamese (Vietnam)"),
    THAI,
    THAI.derive("th-TH", "Thai (Thailand)"),
)
