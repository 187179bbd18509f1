"""Chinese, Japanese and Korean rule tables.

All three group digits by four (万, 億/亿, 兆) and write each group as
digit-times-position words with no spaces. Chinese writes 零 for every
run of skipped positions ("一千零五", "一万零五十") and has formal
(financial) numerals ("壹仟零伍"). Japanese and Korean drop the one before
十, 百 and 千; Korean also before 만, and separates groups with spaces.

Fractional digits are read one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from numwords.engine.assembler import ConnectorRule
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.decimal import FractionStyle
from numwords.engine.ordinal import PrefixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import NumeralPolicy, OverflowPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import PositionalBuilder
from numwords.language import LocaleRuleTable
from numwords.options import RenderOptions
from numwords.types import GroupingStrategy

COMPACT = ConnectorRule(separator="", scale_separator="")


# =============================================================================
# Chinese
# =============================================================================


@dataclass(frozen=True)
class JiaoFenUnit(CurrencyUnit):
    """Chinese minor units: tenths (角) and hundredths (分) of the yuan."""

    tenth: str = "角"

    def phrase(self, table, count):
        jiao, fen = divmod(count, 10)
        text = ""
        if jiao:
            text += table.cardinal.render(table, jiao) + self.tenth
        if fen:
            if jiao:
                text += self.separator
            text += table.cardinal.render(table, fen) + self.forms.one
        return text


def chinese_builder(digits: tuple[str, ...], positions: tuple[str, ...], formal: bool) -> PositionalBuilder:
    return PositionalBuilder(
        digits=digits,
        positions=positions,
        omit_one_leading=frozenset() if formal else frozenset({1}),
        zero=digits[0],
    )


def chinese_variant(table: LocaleRuleTable, options: RenderOptions) -> LocaleRuleTable:
    """Switch to formal numerals when ``formal`` is set."""
    if options.formal:
        return replace(table, builder=FORMAL_BUILDERS[table.code.split("-")[1]])
    return table


ZH_HANS_DIGITS = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
ZH_HANS_FORMAL = ("零", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖")
ZH_HANT_FORMAL = ("零", "壹", "貳", "參", "肆", "伍", "陸", "柒", "捌", "玖")
ZH_POSITIONS = ("", "十", "百", "千")
ZH_FORMAL_POSITIONS = ("", "拾", "佰", "仟")

FORMAL_BUILDERS = {
    "Hans": chinese_builder(ZH_HANS_FORMAL, ZH_FORMAL_POSITIONS, formal=True),
    "Hant": chinese_builder(ZH_HANT_FORMAL, ZH_FORMAL_POSITIONS, formal=True),
}

CHINESE_ORDINAL = PrefixOrdinal(prefix="第")


def _yuan(tenth: str = "角") -> CurrencyStyle:
    return CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("元"), separator=""),
        minor=JiaoFenUnit(PluralForms.invariant("分"), separator="", tenth=tenth),
        conjunction="",
        joiner="",
    )


SIMPLIFIED_CHINESE = LocaleRuleTable(
    code="zh-Hans",
    name="Chinese (Simplified)",
    zero="零",
    negative="负",
    builder=chinese_builder(ZH_HANS_DIGITS, ZH_POSITIONS, formal=False),
    # 万亿 and 亿亿 are counted forms of the top scale word
    ladder=ScaleLadder(ladder_of(("万", "亿")), overflow=OverflowPolicy.NEST),
    grouping=GroupingStrategy.MYRIAD,
    connector=replace(COMPACT, zero_marker="零"),
    ordinal=CHINESE_ORDINAL,
    currency=_yuan(),
    decimal_word="点",
    fraction_style=FractionStyle.DIGITS,
    word_separator="",
    negative_separator="",
    accepted_options=frozenset({"formal", "negative_word"}),
    defaults=RenderOptions(formal=False),
    variant=chinese_variant,
)

TRADITIONAL_CHINESE = SIMPLIFIED_CHINESE.derive(
    "zh-Hant",
    "Chinese (Traditional)",
    negative="負",
    ladder=ScaleLadder(ladder_of(("萬", "億", "兆", "京", "垓", "秭", "穰"))),
    decimal_word="點",
)


# =============================================================================
# Japanese
# =============================================================================

JA_DIGITS = ("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九")
JA_SCALES = ("万", "億", "兆", "京", "垓", "秭", "穣", "溝", "澗", "正", "載", "極")

JAPANESE = LocaleRuleTable(
    code="ja",
    name="Japanese",
    zero="零",
    negative="マイナス",
    builder=PositionalBuilder(digits=JA_DIGITS, omit_one=frozenset({1, 2, 3})),
    ladder=ScaleLadder(ladder_of(JA_SCALES)),
    grouping=GroupingStrategy.MYRIAD,
    connector=COMPACT,
    ordinal=PrefixOrdinal(prefix="第"),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("円"), separator=""),
        minor=CurrencyUnit(PluralForms.invariant("銭"), separator=""),
        conjunction="",
        joiner="",
    ),
    decimal_word="点",
    fraction_style=FractionStyle.DIGITS,
    word_separator="",
    negative_separator="",
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Korean
# =============================================================================

KO_DIGITS = ("영", "일", "이", "삼", "사", "오", "육", "칠", "팔", "구")
KO_SCALES = ("억", "조", "경", "해", "자", "양")

KOREAN = LocaleRuleTable(
    code="ko",
    name="Korean",
    zero="영",
    negative="마이너스",
    builder=PositionalBuilder(digits=KO_DIGITS, positions=("", "십", "백", "천"), omit_one=frozenset({1, 2, 3})),
    ladder=ScaleLadder((ScaleWord.of("만", policy=NumeralPolicy.OMIT_ONE),) + ladder_of(KO_SCALES)),
    grouping=GroupingStrategy.MYRIAD,
    connector=ConnectorRule(separator=" ", scale_separator=""),
    ordinal=PrefixOrdinal(prefix="제"),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("원")),
        minor=CurrencyUnit(PluralForms.invariant("전")),
        conjunction=" ",
    ),
    decimal_word="점",
    fraction_style=FractionStyle.DIGITS,
    word_separator="",
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    SIMPLIFIED_CHINESE,
    SIMPLIFIED_CHINESE.derive("zh-Hans-CN", "Chinese (Simplified, China)"),
    TRADITIONAL_CHINESE,
    TRADITIONAL_CHINESE.derive("zh-Hant-TW", "Chinese (Traditional, Taiwan)"),
    JAPANESE,
    JAPANESE.derive("ja-JP", "Japanese (Japan)"),
    KOREAN,
    KOREAN.derive("ko-KR", "Korean (Korea)"),
)
