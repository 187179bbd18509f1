"""Slavic rule tables: Polish, Russian, Ukrainian, Czech, Croatian, Serbian.

Scale words take one of three forms chosen by the count (singular, paucal,
genitive plural): "tysiąc", "dwa tysiące", "pięć tysięcy". The digit
windows differ per language and live in ``numwords.engine.plural``.

Numerals agree with the gender of what they count. Thousands are feminine
in Russian, Ukrainian, Croatian and Serbian ("две тысячи", "dvije tisuće")
and masculine in Polish ("dwa tysiące"). The ``gender`` option sets the
agreement of the units group.

Ordinals re-render the last group from ordinal tables
("dwudziesty pierwszy", "двадцать первый", "тысячный").
"""

from __future__ import annotations

from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import ComponentOrdinal, OrdinalTables
from numwords.engine.plural import (
    CZECH,
    EAST_SLAVIC,
    POLISH,
    PluralCategory,
    PluralForms,
    PluralRuleFunc,
)
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.types import Gender

SLAVIC_OPTIONS = frozenset({"gender", "negative_word"})


def three_form_ladder(
    forms: tuple[tuple[str, str, str], ...],
    rule: PluralRuleFunc,
    *,
    feminine: frozenset[int] = frozenset(),
    omit_one: bool = False,
) -> ScaleLadder:
    """Ladder of (one, few, many) scale words.

    Args:
        forms: Word forms by level, starting at level 1.
        rule: Plural rule choosing among the forms.
        feminine: Levels whose scale noun is feminine.
        omit_one: Write a count of one as the bare scale word.
    """
    policy = NumeralPolicy.OMIT_ONE if omit_one else NumeralPolicy.KEEP_ONE
    return ScaleLadder(
        tuple(
            ScaleWord(
                PluralForms.three(one, few, many, rule=rule),
                policy=policy,
                gender=Gender.FEMININE if level in feminine else Gender.MASCULINE,
            )
            for level, (one, few, many) in enumerate(forms, start=1)
        )
    )


def three_form_currency(
    major: tuple[str, str, str],
    minor: tuple[str, str, str],
    rule: PluralRuleFunc,
    *,
    major_gender: Gender = Gender.MASCULINE,
    minor_gender: Gender = Gender.MASCULINE,
    conjunction: str = " ",
) -> CurrencyStyle:
    return CurrencyStyle(
        major=CurrencyUnit(PluralForms.three(*major, rule=rule), gender=major_gender),
        minor=CurrencyUnit(PluralForms.three(*minor, rule=rule), gender=minor_gender),
        conjunction=conjunction,
    )


def scale_ordinals(words: tuple[str, ...], feminine_ending: str, suffix: str) -> tuple[str, ...]:
    """Ordinal scale words built by suffixing the singular noun.

    A final "-a" becomes ``feminine_ending`` first ("tisuća" -> "tisućiti").
    """
    return tuple(
        word[:-1] + feminine_ending + suffix if word.endswith(("a", "а")) else word + suffix
        for word in words
    )


# =============================================================================
# Polish
# =============================================================================

PL_ONES = ("", "jeden", "dwa", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć")
PL_FEMININE = ("", "jedna", "dwie") + PL_ONES[3:]
PL_NEUTER = ("", "jedno") + PL_ONES[2:]
PL_TEENS = (
    "dziesięć", "jedenaście", "dwanaście", "trzynaście", "czternaście",
    "piętnaście", "szesnaście", "siedemnaście", "osiemnaście", "dziewiętnaście",
)
PL_TENS = (
    "", "", "dwadzieścia", "trzydzieści", "czterdzieści", "pięćdziesiąt",
    "sześćdziesiąt", "siedemdziesiąt", "osiemdziesiąt", "dziewięćdziesiąt",
)
PL_HUNDREDS = (
    "", "sto", "dwieście", "trzysta", "czterysta",
    "pięćset", "sześćset", "siedemset", "osiemset", "dziewięćset",
)
PL_SCALES = (
    ("tysiąc", "tysiące", "tysięcy"),
) + tuple(
    (stem, stem + "y", stem + "ów")
    for stem in (
        "milion", "miliard", "bilion", "biliard", "trylion",
        "tryliard", "kwadrylion", "kwadryliard", "kwintylion",
    )
)

PL_ORDINALS = OrdinalTables(
    ones=("", "pierwszy", "drugi", "trzeci", "czwarty", "piąty", "szósty", "siódmy", "ósmy", "dziewiąty"),
    teens=(
        "dziesiąty", "jedenasty", "dwunasty", "trzynasty", "czternasty",
        "piętnasty", "szesnasty", "siedemnasty", "osiemnasty", "dziewiętnasty",
    ),
    tens=(
        "", "", "dwudziesty", "trzydziesty", "czterdziesty", "pięćdziesiąty",
        "sześćdziesiąty", "siedemdziesiąty", "osiemdziesiąty", "dziewięćdziesiąty",
    ),
    hundreds=(
        "", "setny", "dwusetny", "trzechsetny", "czterechsetny",
        "pięćsetny", "sześćsetny", "siedemsetny", "osiemsetny", "dziewięćsetny",
    ),
    scales=("tysięczny", "milionowy", "miliardowy"),
    scale_suffix="owy",
    ordinal_tens=True,
)

POLISH_TABLE = LocaleRuleTable(
    code="pl",
    name="Polish",
    zero="zero",
    negative="minus",
    builder=TripletBuilder(
        ones=PL_ONES,
        teens=PL_TEENS,
        tens=PL_TENS,
        hundreds=PL_HUNDREDS,
        tens_joiner=" ",
        feminine=PL_FEMININE,
        neuter=PL_NEUTER,
    ),
    ladder=three_form_ladder(PL_SCALES, POLISH, omit_one=True),
    ordinal=ComponentOrdinal(
        PL_ORDINALS,
        feminine=PL_ORDINALS.inflected((("ci", "cia"), ("gi", "ga"), ("y", "a"))),
    ),
    currency=three_form_currency(
        ("złoty", "złote", "złotych"), ("grosz", "grosze", "groszy"), POLISH
    ),
    decimal_word="przecinek",
    accepted_options=SLAVIC_OPTIONS,
)


# =============================================================================
# Russian
# =============================================================================

RU_ONES = ("", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять")
RU_FEMININE = ("", "одна", "две") + RU_ONES[3:]
RU_NEUTER = ("", "одно") + RU_ONES[2:]
RU_TEENS = (
    "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
    "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
)
RU_TENS = (
    "", "", "двадцать", "тридцать", "сорок", "пятьдесят",
    "шестьдесят", "семьдесят", "восемьдесят", "девяносто",
)
RU_HUNDREDS = (
    "", "сто", "двести", "триста", "четыреста",
    "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот",
)
RU_SCALES = (
    ("тысяча", "тысячи", "тысяч"),
) + tuple(
    (stem, stem + "а", stem + "ов")
    for stem in (
        "миллион", "миллиард", "триллион", "квадриллион", "квинтиллион",
        "секстиллион", "септиллион", "октиллион", "нониллион",
    )
)

RU_ORDINALS = OrdinalTables(
    ones=("", "первый", "второй", "третий", "четвёртый", "пятый", "шестой", "седьмой", "восьмой", "девятый"),
    teens=(
        "десятый", "одиннадцатый", "двенадцатый", "тринадцатый", "четырнадцатый",
        "пятнадцатый", "шестнадцатый", "семнадцатый", "восемнадцатый", "девятнадцатый",
    ),
    tens=(
        "", "", "двадцатый", "тридцатый", "сороковой", "пятидесятый",
        "шестидесятый", "семидесятый", "восьмидесятый", "девяностый",
    ),
    hundreds=(
        "", "сотый", "двухсотый", "трёхсотый", "четырёхсотый",
        "пятисотый", "шестисотый", "семисотый", "восьмисотый", "девятисотый",
    ),
    scales=("тысячный", "миллионный", "миллиардный"),
    scale_suffix="ный",
)

RUSSIAN = LocaleRuleTable(
    code="ru",
    name="Russian",
    zero="ноль",
    negative="минус",
    builder=TripletBuilder(
        ones=RU_ONES,
        teens=RU_TEENS,
        tens=RU_TENS,
        hundreds=RU_HUNDREDS,
        tens_joiner=" ",
        feminine=RU_FEMININE,
        neuter=RU_NEUTER,
    ),
    ladder=three_form_ladder(RU_SCALES, EAST_SLAVIC, feminine=frozenset({1})),
    ordinal=ComponentOrdinal(
        RU_ORDINALS,
        feminine=RU_ORDINALS.inflected((("третий", "третья"), ("ый", "ая"), ("ой", "ая"))),
    ),
    currency=three_form_currency(
        ("рубль", "рубля", "рублей"),
        ("копейка", "копейки", "копеек"),
        EAST_SLAVIC,
        minor_gender=Gender.FEMININE,
    ),
    decimal_word="запятая",
    accepted_options=SLAVIC_OPTIONS,
)


# =============================================================================
# Ukrainian
# =============================================================================

UK_ONES = ("", "один", "два", "три", "чотири", "п'ять", "шість", "сім", "вісім", "дев'ять")
UK_FEMININE = ("", "одна", "дві") + UK_ONES[3:]
UK_NEUTER = ("", "одне") + UK_ONES[2:]
UK_TEENS = (
    "десять", "одинадцять", "дванадцять", "тринадцять", "чотирнадцять",
    "п'ятнадцять", "шістнадцять", "сімнадцять", "вісімнадцять", "дев'ятнадцять",
)
UK_TENS = (
    "", "", "двадцять", "тридцять", "сорок", "п'ятдесят",
    "шістдесят", "сімдесят", "вісімдесят", "дев'яносто",
)
UK_HUNDREDS = (
    "", "сто", "двісті", "триста", "чотириста",
    "п'ятсот", "шістсот", "сімсот", "вісімсот", "дев'ятсот",
)
UK_SCALES = (
    ("тисяча", "тисячі", "тисяч"),
) + tuple(
    (stem, stem + "и", stem + "ів")
    for stem in (
        "мільйон", "мільярд", "трильйон", "квадрильйон", "квінтильйон",
        "секстильйон", "септильйон", "октильйон", "нонільйон",
    )
)

UK_ORDINALS = OrdinalTables(
    ones=("", "перший", "другий", "третій", "четвертий", "п'ятий", "шостий", "сьомий", "восьмий", "дев'ятий"),
    teens=(
        "десятий", "одинадцятий", "дванадцятий", "тринадцятий", "чотирнадцятий",
        "п'ятнадцятий", "шістнадцятий", "сімнадцятий", "вісімнадцятий", "дев'ятнадцятий",
    ),
    tens=(
        "", "", "двадцятий", "тридцятий", "сороковий", "п'ятдесятий",
        "шістдесятий", "сімдесятий", "вісімдесятий", "дев'яностий",
    ),
    hundreds=(
        "", "сотий", "двохсотий", "трьохсотий", "чотирьохсотий",
        "п'ятисотий", "шестисотий", "семисотий", "восьмисотий", "дев'ятисотий",
    ),
    scales=("тисячний", "мільйонний", "мільярдний"),
    scale_suffix="ний",
)

UKRAINIAN = LocaleRuleTable(
    code="uk",
    name="Ukrainian",
    zero="нуль",
    negative="мінус",
    builder=TripletBuilder(
        ones=UK_ONES,
        teens=UK_TEENS,
        tens=UK_TENS,
        hundreds=UK_HUNDREDS,
        tens_joiner=" ",
        feminine=UK_FEMININE,
        neuter=UK_NEUTER,
    ),
    ladder=three_form_ladder(UK_SCALES, EAST_SLAVIC, feminine=frozenset({1})),
    ordinal=ComponentOrdinal(
        UK_ORDINALS,
        feminine=UK_ORDINALS.inflected((("ій", "я"), ("ий", "а"))),
    ),
    currency=three_form_currency(
        ("гривня", "гривні", "гривень"),
        ("копійка", "копійки", "копійок"),
        EAST_SLAVIC,
        major_gender=Gender.FEMININE,
        minor_gender=Gender.FEMININE,
    ),
    decimal_word="кома",
    accepted_options=SLAVIC_OPTIONS,
)


# =============================================================================
# Czech
# =============================================================================

# Counting forms: "jedna", "dvacet jedna"
CS_ONES = ("", "jedna", "dva", "tři", "čtyři", "pět", "šest", "sedm", "osm", "devět")
CS_MASCULINE = ("", "jeden") + CS_ONES[2:]
CS_FEMININE = ("", "jedna", "dvě") + CS_ONES[3:]
CS_NEUTER = ("", "jedno", "dvě") + CS_ONES[3:]
CS_TEENS = (
    "deset", "jedenáct", "dvanáct", "třináct", "čtrnáct",
    "patnáct", "šestnáct", "sedmnáct", "osmnáct", "devatenáct",
)
CS_TENS = (
    "", "", "dvacet", "třicet", "čtyřicet", "padesát",
    "šedesát", "sedmdesát", "osmdesát", "devadesát",
)
CS_HUNDREDS = (
    "", "sto", "dvě stě", "tři sta", "čtyři sta",
    "pět set", "šest set", "sedm set", "osm set", "devět set",
)
CS_SCALES = (
    ("tisíc", "tisíce", "tisíc"),
    ("milion", "miliony", "milionů"),
    ("miliarda", "miliardy", "miliard"),
    ("bilion", "biliony", "bilionů"),
    ("biliarda", "biliardy", "biliard"),
    ("trilion", "triliony", "trilionů"),
    ("triliarda", "triliardy", "triliard"),
    ("kvadrilion", "kvadriliony", "kvadrilionů"),
    ("kvadriliarda", "kvadriliardy", "kvadriliard"),
    ("kvintilion", "kvintiliony", "kvintilionů"),
)

CS_ORDINALS = OrdinalTables(
    ones=("", "první", "druhý", "třetí", "čtvrtý", "pátý", "šestý", "sedmý", "osmý", "devátý"),
    teens=(
        "desátý", "jedenáctý", "dvanáctý", "třináctý", "čtrnáctý",
        "patnáctý", "šestnáctý", "sedmnáctý", "osmnáctý", "devatenáctý",
    ),
    tens=(
        "", "", "dvacátý", "třicátý", "čtyřicátý", "padesátý",
        "šedesátý", "sedmdesátý", "osmdesátý", "devadesátý",
    ),
    hundreds=(
        "", "stý", "dvoustý", "třístý", "čtyřstý",
        "pětistý", "šestistý", "sedmistý", "osmistý", "devítistý",
    ),
    scales=(
        "tisící", "miliontý", "miliardtý", "biliontý", "biliardtý",
        "triliontý", "triliardtý", "kvadriliontý", "kvadriliardtý", "kvintiliontý",
    ),
    ordinal_tens=True,
)

def _whole_count(n: int) -> PluralCategory:
    """celá for 0 and 1, celé for 2-4, celých otherwise."""
    if n in (0, 1):
        return PluralCategory.ONE
    if 2 <= n <= 4:
        return PluralCategory.FEW
    return PluralCategory.MANY


CS_DECIMAL_WORD = PluralForms(one="celá", few="celé", many="celých", other="celých", rule=_whole_count)

CZECH_TABLE = LocaleRuleTable(
    code="cs",
    name="Czech",
    zero="nula",
    negative="mínus",
    builder=TripletBuilder(
        ones=CS_ONES,
        teens=CS_TEENS,
        tens=CS_TENS,
        hundreds=CS_HUNDREDS,
        tens_joiner=" ",
        masculine=CS_MASCULINE,
        feminine=CS_FEMININE,
        neuter=CS_NEUTER,
    ),
    ladder=three_form_ladder(
        CS_SCALES, CZECH, feminine=frozenset({3, 5, 7, 9}), omit_one=True
    ),
    ordinal=ComponentOrdinal(CS_ORDINALS, feminine=CS_ORDINALS.inflected((("ý", "á"),))),
    currency=three_form_currency(
        ("koruna", "koruny", "korun"),
        ("haléř", "haléře", "haléřů"),
        CZECH,
        major_gender=Gender.FEMININE,
    ),
    decimal_word=CS_DECIMAL_WORD,
    accepted_options=SLAVIC_OPTIONS,
)


# =============================================================================
# Croatian and Serbian
# =============================================================================

HR_ONES = ("", "jedan", "dva", "tri", "četiri", "pet", "šest", "sedam", "osam", "devet")
HR_FEMININE = ("", "jedna", "dvije") + HR_ONES[3:]
HR_NEUTER = ("", "jedno") + HR_ONES[2:]
SH_TEENS = (
    "deset", "jedanaest", "dvanaest", "trinaest", "četrnaest",
    "petnaest", "šesnaest", "sedamnaest", "osamnaest", "devetnaest",
)
SH_TENS = (
    "", "", "dvadeset", "trideset", "četrdeset", "pedeset",
    "šezdeset", "sedamdeset", "osamdeset", "devedeset",
)
HR_HUNDREDS = (
    "", "sto", "dvjesto", "tristo", "četiristo",
    "petsto", "šeststo", "sedamsto", "osamsto", "devetsto",
)
HR_SCALES = (
    ("tisuća", "tisuće", "tisuća"),
    ("milijun", "milijuna", "milijuna"),
    ("milijarda", "milijarde", "milijardi"),
    ("bilijun", "bilijuna", "bilijuna"),
    ("bilijarda", "bilijarde", "bilijardi"),
    ("trilijun", "trilijuna", "trilijuna"),
    ("trilijarda", "trilijarde", "trilijardi"),
    ("kvadrilijun", "kvadrilijuna", "kvadrilijuna"),
    ("kvadrilijarda", "kvadrilijarde", "kvadrilijardi"),
    ("kvintilijun", "kvintilijuna", "kvintilijuna"),
)
# Feminine scale nouns: tisuća and every -arda word
LONG_SCALE_FEMININE = frozenset({1, 3, 5, 7, 9})

SH_ORDINAL_ONES = ("", "prvi", "drugi", "treći", "četvrti", "peti", "šesti", "sedmi", "osmi", "deveti")
SH_ORDINAL_TEENS = (
    "deseti", "jedanaesti", "dvanaesti", "trinaesti", "četrnaesti",
    "petnaesti", "šesnaesti", "sedamnaesti", "osamnaesti", "devetnaesti",
)
SH_ORDINAL_TENS = (
    "", "", "dvadeseti", "trideseti", "četrdeseti", "pedeseti",
    "šezdeseti", "sedamdeseti", "osamdeseti", "devedeseti",
)
SH_FEMININE_ENDINGS = (("i", "a"),)

HR_ORDINALS = OrdinalTables(
    ones=SH_ORDINAL_ONES,
    teens=SH_ORDINAL_TEENS,
    tens=SH_ORDINAL_TENS,
    hundreds=("",) + tuple(word + "ti" for word in HR_HUNDREDS[1:]),
    scales=scale_ordinals(tuple(one for one, _, _ in HR_SCALES), "i", "ti"),
)

CROATIAN = LocaleRuleTable(
    code="hr",
    name="Croatian",
    zero="nula",
    negative="minus",
    builder=TripletBuilder(
        ones=HR_ONES,
        teens=SH_TEENS,
        tens=SH_TENS,
        hundreds=HR_HUNDREDS,
        tens_joiner=" ",
        feminine=HR_FEMININE,
        neuter=HR_NEUTER,
    ),
    ladder=three_form_ladder(HR_SCALES, EAST_SLAVIC, feminine=LONG_SCALE_FEMININE),
    ordinal=ComponentOrdinal(HR_ORDINALS, feminine=HR_ORDINALS.inflected(SH_FEMININE_ENDINGS)),
    currency=three_form_currency(("euro", "eura", "eura"), ("cent", "centa", "centi"), EAST_SLAVIC),
    decimal_word="zarez",
    accepted_options=SLAVIC_OPTIONS,
)

SR_FEMININE = ("", "jedna", "dve") + HR_ONES[3:]
SR_HUNDREDS = (
    "", "sto", "dvesta", "trista", "četiristo",
    "petsto", "šesto", "sedamsto", "osamsto", "devetsto",
)
SR_SCALES = (
    ("hiljada", "hiljade", "hiljada"),
    ("milion", "miliona", "miliona"),
    ("milijarda", "milijarde", "milijardi"),
    ("bilion", "biliona", "biliona"),
    ("bilijarda", "bilijarde", "bilijardi"),
    ("trilion", "triliona", "triliona"),
    ("trilijarda", "trilijarde", "trilijardi"),
    ("kvadrilion", "kvadriliona", "kvadriliona"),
    ("kvadrilijarda", "kvadrilijarde", "kvadrilijardi"),
    ("kvintilion", "kvintiliona", "kvintiliona"),
)

SR_ORDINALS = OrdinalTables(
    ones=SH_ORDINAL_ONES,
    teens=SH_ORDINAL_TEENS,
    tens=SH_ORDINAL_TENS,
    hundreds=("",) + tuple(word + "ti" for word in SR_HUNDREDS[1:]),
    scales=scale_ordinals(tuple(one for one, _, _ in SR_SCALES), "i", "ti"),
)

SERBIAN_LATIN = LocaleRuleTable(
    code="sr-Latn",
    name="Serbian (Latin)",
    zero="nula",
    negative="minus",
    builder=TripletBuilder(
        ones=HR_ONES,
        teens=SH_TEENS,
        tens=SH_TENS,
        hundreds=SR_HUNDREDS,
        tens_joiner=" ",
        feminine=SR_FEMININE,
        neuter=HR_NEUTER,
    ),
    ladder=three_form_ladder(SR_SCALES, EAST_SLAVIC, feminine=LONG_SCALE_FEMININE),
    ordinal=ComponentOrdinal(SR_ORDINALS, feminine=SR_ORDINALS.inflected(SH_FEMININE_ENDINGS)),
    currency=three_form_currency(
        ("dinar", "dinara", "dinara"),
        ("para", "pare", "para"),
        EAST_SLAVIC,
        minor_gender=Gender.FEMININE,
        conjunction=" i ",
    ),
    decimal_word="zapeta",
    accepted_options=SLAVIC_OPTIONS,
)

SR_CYRL_ONES = ("", "један", "два", "три", "четири", "пет", "шест", "седам", "осам", "девет")
SR_CYRL_FEMININE = ("", "једна", "две") + SR_CYRL_ONES[3:]
SR_CYRL_NEUTER = ("", "једно") + SR_CYRL_ONES[2:]
SR_CYRL_TEENS = (
    "десет", "једанаест", "дванаест", "тринаест", "четрнаест",
    "петнаест", "шеснаест", "седамнаест", "осамнаест", "деветнаест",
)
SR_CYRL_TENS = (
    "", "", "двадесет", "тридесет", "четрдесет", "педесет",
    "шездесет", "седамдесет", "осамдесет", "деведесет",
)
SR_CYRL_HUNDREDS = (
    "", "сто", "двеста", "триста", "четиристо",
    "петсто", "шесто", "седамсто", "осамсто", "деветсто",
)
SR_CYRL_SCALES = (
    ("хиљада", "хиљаде", "хиљада"),
    ("милион", "милиона", "милиона"),
    ("милијарда", "милијарде", "милијарди"),
    ("билион", "билиона", "билиона"),
    ("билијарда", "билијарде", "билијарди"),
    ("трилион", "трилиона", "трилиона"),
    ("трилијарда", "трилијарде", "трилијарди"),
    ("квадрилион", "квадрилиона", "квадрилиона"),
    ("квадрилијарда", "квадрилијарде", "квадрилијарди"),
    ("квинтилион", "квинтилиона", "квинтилиона"),
)

SR_CYRL_ORDINALS = OrdinalTables(
    ones=("", "први", "други", "трећи", "четврти", "пети", "шести", "седми", "осми", "девети"),
    teens=(
        "десети", "једанаести", "дванаести", "тринаести", "четрнаести",
        "петнаести", "шеснаести", "седамнаести", "осамнаести", "деветнаести",
    ),
    tens=(
        "", "", "двадесети", "тридесети", "четрдесети", "педесети",
        "шездесети", "седамдесети", "осамдесети", "деведесети",
    ),
    hundreds=("",) + tuple(word + "ти" for word in SR_CYRL_HUNDREDS[1:]),
    scales=scale_ordinals(tuple(one for one, _, _ in SR_CYRL_SCALES), "и", "ти"),
)

SERBIAN_CYRILLIC = LocaleRuleTable(
    code="sr-Cyrl",
    name="Serbian (Cyrillic)",
    zero="нула",
    negative="минус",
    builder=TripletBuilder(
        ones=SR_CYRL_ONES,
        teens=SR_CYRL_TEENS,
        tens=SR_CYRL_TENS,
        hundreds=SR_CYRL_HUNDREDS,
        tens_joiner=" ",
        feminine=SR_CYRL_FEMININE,
        neuter=SR_CYRL_NEUTER,
    ),
    ladder=three_form_ladder(SR_CYRL_SCALES, EAST_SLAVIC, feminine=LONG_SCALE_FEMININE),
    ordinal=ComponentOrdinal(SR_CYRL_ORDINALS, feminine=SR_CYRL_ORDINALS.inflected((("и", "а"),))),
    currency=three_form_currency(
        ("динар", "динара", "динара"),
        ("пара", "паре", "пара"),
        EAST_SLAVIC,
        minor_gender=Gender.FEMININE,
        conjunction=" и ",
    ),
    decimal_word="запета",
    accepted_options=SLAVIC_OPTIONS,
)


TABLES = (
    POLISH_TABLE,
    POLISH_TABLE.derive("pl-PL", "Polish (Poland)"),
    RUSSIAN,
    RUSSIAN.derive("ru-RU", "Russian (Russia)"),
    UKRAINIAN,
    UKRAINIAN.derive("uk-UA", "Ukrainian (Ukraine)"),
    CZECH_TABLE,
    CZECH_TABLE.derive("cs-CZ", "Czech (Czechia)"),
    CROATIAN,
    CROATIAN.derive("hr-HR", "Croatian (Croatia)"),
    SERBIAN_LATIN,
    SERBIAN_LATIN.derive("sr-Latn-RS", "Serbian (Latin, Serbia)"),
    SERBIAN_CYRILLIC,
    SERBIAN_CYRILLIC.derive("sr-Cyrl-RS", "Serbian (Cyrillic, Serbia)"),
)
