"""French, Italian, Spanish, Portuguese and Romanian rule tables.

Locales:
    fr, fr-FR: vigesimal seventies and nineties ("soixante-dix",
        "quatre-vingt-dix"), "cents"/"quatre-vingts" plural agreement.
    fr-BE: "septante" and "nonante".
    it, it-IT: one-word compounds below a million with vowel elision
        ("ventotto", "centottanta", "duemilatré").
    es, es-ES: long scale with "mil millones", apocope before nouns
        ("veintiún mil"), feminine agreement.
    es-MX, es-US: short scale ("un billón" is 10**9), "punto", pesos and
        dollars.
    pt, pt-PT: long scale with "mil milhões", "e" inside and between groups.
    ro, ro-RO: "de" before the counted noun for 20 and above
        ("douăzeci de mii"), feminine agreement.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule, Piece
from numwords.engine.cardinal import RespacedCardinal
from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import ComponentOrdinal, OrdinalTables, TerminalWordOrdinal
from numwords.engine.plural import PluralCategory, PluralForms, romanian, zero_one_other
from numwords.engine.scales import NumeralPolicy, OverflowPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import SegmentContext, TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.options import RenderOptions
from numwords.types import Gender

# =============================================================================
# French
# =============================================================================

FR_ONES = ("", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf")
FR_TEENS = (
    "dix", "onze", "douze", "treize", "quatorze",
    "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf",
)
FR_TENS = (
    "", "", "vingt", "trente", "quarante", "cinquante",
    "soixante", "soixante", "quatre-vingt", "quatre-vingt",
)
BE_TENS = FR_TENS[:7] + ("septante", "quatre-vingt", "nonante")
FR_SCALES = (
    "million", "milliard", "billion", "billiard", "trillion",
    "trilliard", "quadrillion", "quadrilliard", "quintillion",
)


@dataclass(frozen=True)
class FrenchBuilder(TripletBuilder):
    """French tens with "et un" and plural "cents"/"quatre-vingts".

    Attributes:
        vigesimal: Tens digits counted as the previous ten plus 10-19
            ("soixante-dix", "quatre-vingt-onze").
    """

    vigesimal: frozenset[int] = frozenset({7, 9})

    @staticmethod
    def before_mille(context: SegmentContext) -> bool:
        return context.scale_follows and context.level == 1

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        if value < 20:
            return super().below_hundred_word(value, context)
        tens_digit, ones_digit = divmod(value, 10)
        base = self.tens[tens_digit]
        if tens_digit in self.vigesimal:
            ones_digit += 10
        if ones_digit == 0:
            if base == "quatre-vingt" and not self.before_mille(context):
                return base + "s"
            return base
        word = self.ones_word(ones_digit, context) if ones_digit < 10 else self.teens[ones_digit - 10]
        if ones_digit in (1, 11) and base != "quatre-vingt":
            return base + " et " + word
        return base + "-" + word

    def join(self, head, tail, hundreds_digit, rest, context):
        if hundreds_digit > 1 and rest == 0 and not self.before_mille(context):
            head += "s"
        return super().join(head, tail, hundreds_digit, rest, context)


def french_variant(table: LocaleRuleTable, options: RenderOptions) -> LocaleRuleTable:
    """Hyphenate every word (1990 spelling reform)."""
    if not options.hyphenate:
        return table
    return replace(
        table,
        cardinal=RespacedCardinal("-"),
        word_separator="-",
        negative_separator="-",
    )


FRENCH = LocaleRuleTable(
    code="fr",
    name="French",
    zero="zéro",
    negative="moins",
    builder=FrenchBuilder(
        ones=FR_ONES,
        teens=FR_TEENS,
        tens=FR_TENS,
        hundred="cent",
        hundred_omit_one=True,
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("mille", policy=NumeralPolicy.OMIT_ONE),)
        + ladder_of(FR_SCALES, tuple(word + "s" for word in FR_SCALES))
    ),
    ordinal=TerminalWordOrdinal(
        numbers={1: "premier"},
        words={"un": "unième", "cinq": "cinquième", "neuf": "neuvième"},
        endings=(
            ("cents", "centième"),
            ("vingts", "vingtième"),
            ("lions", "lionième"),
            ("liards", "liardième"),
            ("e", "ième"),
        ),
        suffix=lambda word, value: word + "ième",
    ),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="euro", other="euros", rule=zero_one_other)),
        minor=CurrencyUnit(PluralForms(one="centime", other="centimes", rule=zero_one_other)),
        conjunction=" et ",
    ),
    decimal_word="virgule",
    accepted_options=frozenset({"hyphenate", "negative_word"}),
    variant=french_variant,
)

FRENCH_BELGIAN = FRENCH.derive(
    "fr-BE",
    "French (Belgium)",
    builder=replace(FRENCH.builder, tens=BE_TENS, vigesimal=frozenset()),
)


# =============================================================================
# Italian
# =============================================================================

IT_ONES = ("", "uno", "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove")
IT_TEENS = (
    "dieci", "undici", "dodici", "tredici", "quattordici",
    "quindici", "sedici", "diciassette", "diciotto", "diciannove",
)
IT_TENS = ("", "", "venti", "trenta", "quaranta", "cinquanta", "sessanta", "settanta", "ottanta", "novanta")
IT_HUNDREDS = (
    "", "cento", "duecento", "trecento", "quattrocento",
    "cinquecento", "seicento", "settecento", "ottocento", "novecento",
)
IT_SCALES = (
    "milione", "miliardo", "bilione", "biliardo", "trilione",
    "triliardo", "quadrilione", "quadriliardo", "quintilione",
)
IT_SCALES_PLURAL = (
    "milioni", "miliardi", "bilioni", "biliardi", "trilioni",
    "triliardi", "quadrilioni", "quadriliardi", "quintilioni",
)
IT_ORDINALS = {
    1: "primo", 2: "secondo", 3: "terzo", 4: "quarto", 5: "quinto",
    6: "sesto", 7: "settimo", 8: "ottavo", 9: "nono", 10: "decimo",
}


def _before_mila(context: SegmentContext) -> bool:
    """The segment fuses with "mila" ("ventitremila"), so "tré" loses its accent."""
    return context.scale_follows and context.level == 1


@dataclass(frozen=True)
class ItalianBuilder(TripletBuilder):
    """Italian compounds with vowel elision."""

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        if value < 20:
            return super().below_hundred_word(value, context)
        tens_digit, ones_digit = divmod(value, 10)
        tens = self.tens[tens_digit]
        if ones_digit == 0:
            return tens
        if ones_digit in (1, 8):
            tens = tens[:-1]
        if ones_digit == 1 and context.scale_follows:
            return tens + "un"
        if ones_digit == 3 and not _before_mila(context):
            return tens + "tré"
        return tens + self.ones[ones_digit]

    def join(self, head, tail, hundreds_digit, rest, context):
        if head and (rest == 8 or 80 <= rest <= 89):
            head = head[:-1]
        if head and rest == 3 and not _before_mila(context):
            tail = "tré"
        return super().join(head, tail, hundreds_digit, rest, context)


@dataclass(frozen=True)
class MillionConjunctionConnector(ConnectorRule):
    """Conjunction before the units group when it directly follows a
    million-scale word ("un milione e tre")."""

    def wants_conjunction(self, prev: Piece, cur: Piece, *, final: bool = False) -> bool:
        return cur.starts_group and cur.level == 0 and prev.is_scale and prev.level >= 2


def _italian_ordinal(word: str, value: int) -> str:
    if word[-1] in "aeiou":
        return word[:-1] + "esimo"
    return word + "esimo"


ITALIAN = LocaleRuleTable(
    code="it",
    name="Italian",
    zero="zero",
    negative="meno",
    builder=ItalianBuilder(
        ones=IT_ONES,
        teens=IT_TEENS,
        tens=IT_TENS,
        hundreds=IT_HUNDREDS,
        hundred_joiner="",
        tens_joiner="",
    ),
    ladder=ScaleLadder(
        (
            ScaleWord(
                PluralForms(one="mille", other="mila"),
                policy=NumeralPolicy.OMIT_ONE,
                glue_before="",
                glue_after="",
            ),
        )
        + ladder_of(IT_SCALES, IT_SCALES_PLURAL, one_numeral="un")
    ),
    connector=MillionConjunctionConnector(conjunction=" e "),
    ordinal=TerminalWordOrdinal(
        numbers=IT_ORDINALS,
        endings=(
            ("tré", "treesimo"),
            ("mila", "millesimo"),
            ("mille", "millesimo"),
            ("ardo", "ardiesimo"),
            ("ardi", "ardiesimo"),
            ("sei", "seiesimo"),
        ),
        suffix=_italian_ordinal,
        delimiters=" ",
    ),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("euro"), one_numeral="un"),
        minor=CurrencyUnit(PluralForms(one="centesimo", other="centesimi"), one_numeral="un"),
        conjunction=" e ",
    ),
    decimal_word="virgola",
    accepted_options=frozenset({"negative_word"}),
)


# =============================================================================
# Spanish and Portuguese
# =============================================================================


@dataclass(frozen=True)
class IberianBuilder(TripletBuilder):
    """Gendered hundreds and a distinct word for exactly one hundred.

    Attributes:
        hundreds_feminine: Feminine forms of 100-900.
        hundred_exact: Word for exactly 100 ("cien", "cem").
    """

    hundreds_feminine: tuple[str, ...] | None = None
    hundred_exact: str | None = None

    def hundreds_word(self, digit: int, context: SegmentContext) -> str:
        if context.gender is Gender.FEMININE and self.hundreds_feminine is not None:
            return self.hundreds_feminine[digit]
        return super().hundreds_word(digit, context)

    def join(self, head, tail, hundreds_digit, rest, context):
        if hundreds_digit == 1 and rest == 0 and self.hundred_exact is not None:
            return self.hundred_exact
        return super().join(head, tail, hundreds_digit, rest, context)


ES_ONES = ("", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve")
ES_ONES_FEMININE = ("", "una") + ES_ONES[2:]
ES_TEENS = (
    "diez", "once", "doce", "trece", "catorce",
    "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
)
ES_TWENTIES = (
    "veinte", "veintiuno", "veintidós", "veintitrés", "veinticuatro",
    "veinticinco", "veintiséis", "veintisiete", "veintiocho", "veintinueve",
)
ES_TWENTIES_FEMININE = ES_TWENTIES[:1] + ("veintiuna",) + ES_TWENTIES[2:]
ES_TENS = ("", "", "veinte", "treinta", "cuarenta", "cincuenta", "sesenta", "setenta", "ochenta", "noventa")
ES_HUNDREDS = (
    "", "ciento", "doscientos", "trescientos", "cuatrocientos",
    "quinientos", "seiscientos", "setecientos", "ochocientos", "novecientos",
)
ES_HUNDREDS_FEMININE = tuple(
    word[:-2] + "as" if word.endswith("os") else word for word in ES_HUNDREDS
)
ES_SCALES = ("millón", "billón", "trillón", "cuatrillón", "quintillón")
ES_SCALES_PLURAL = ("millones", "billones", "trillones", "cuatrillones", "quintillones")


@dataclass(frozen=True)
class SpanishBuilder(IberianBuilder):
    """Spanish twenties and apocope of "uno" before a noun."""

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        feminine = context.gender is Gender.FEMININE
        tens_digit, ones_digit = divmod(value, 10)
        if tens_digit == 2:
            word = (ES_TWENTIES_FEMININE if feminine else ES_TWENTIES)[ones_digit]
        elif tens_digit >= 3 and ones_digit:
            word = self.tens[tens_digit] + " y " + self.ones_word(ones_digit, context)
        else:
            word = super().below_hundred_word(value, context)
        if context.scale_follows and word.endswith("uno"):
            word = word[:-3] + ("ún" if tens_digit == 2 else "un")
        return word


# Masculine -o endings to feminine -a
MASCULINE_O = (("o", "a"),)

ES_ORDINALS = OrdinalTables(
    ones=("", "primero", "segundo", "tercero", "cuarto", "quinto", "sexto", "séptimo", "octavo", "noveno"),
    teens=(
        "décimo", "undécimo", "duodécimo", "decimotercero", "decimocuarto",
        "decimoquinto", "decimosexto", "decimoséptimo", "decimoctavo", "decimonoveno",
    ),
    tens=(
        "", "", "vigésimo", "trigésimo", "cuadragésimo", "quincuagésimo",
        "sexagésimo", "septuagésimo", "octogésimo", "nonagésimo",
    ),
    hundreds=(
        "", "centésimo", "ducentésimo", "tricentésimo", "cuadringentésimo", "quingentésimo",
        "sexcentésimo", "septingentésimo", "octingentésimo", "noningentésimo",
    ),
    scales=("milésimo", "millonésimo", "billonésimo", "trillonésimo", "cuatrillonésimo", "quintillonésimo"),
    ordinal_tens=True,
    ordinal_hundreds=True,
)

SPANISH = LocaleRuleTable(
    code="es",
    name="Spanish",
    zero="cero",
    negative="menos",
    builder=SpanishBuilder(
        ones=ES_ONES,
        teens=ES_TEENS,
        tens=ES_TENS,
        hundreds=ES_HUNDREDS,
        hundreds_feminine=ES_HUNDREDS_FEMININE,
        hundred_exact="cien",
        feminine=ES_ONES_FEMININE,
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("mil", policy=NumeralPolicy.OMIT_ONE),)
        + ladder_of(ES_SCALES, ES_SCALES_PLURAL, one_numeral="un", gender=Gender.MASCULINE),
        pairing=True,
    ),
    ordinal=ComponentOrdinal(ES_ORDINALS, feminine=ES_ORDINALS.inflected(MASCULINE_O)),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="euro", other="euros"), one_numeral="un", attributive=True),
        minor=CurrencyUnit(PluralForms(one="céntimo", other="céntimos"), one_numeral="un", attributive=True),
        conjunction=" con ",
    ),
    decimal_word="coma",
    accepted_options=frozenset({"gender", "negative_word"}),
)

# Mexico and the US count "billón" as 10**9
ES_SHORT_LADDER = ScaleLadder(
    (ScaleWord.of("mil", policy=NumeralPolicy.OMIT_ONE),)
    + ladder_of(ES_SCALES, ES_SCALES_PLURAL, one_numeral="un", gender=Gender.MASCULINE),
    overflow=OverflowPolicy.NEST,
)


def _americas_currency(major: str, majors: str) -> CurrencyStyle:
    return CurrencyStyle(
        major=CurrencyUnit(PluralForms(one=major, other=majors), one_numeral="un", attributive=True),
        minor=CurrencyUnit(PluralForms(one="centavo", other="centavos"), one_numeral="un", attributive=True),
        conjunction=" con ",
    )


PT_ONES =("", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove")
PT_ONES_FEMININE = ("", "uma", "duas") + PT_ONES[3:]
PT_TEENS = (
    "dez", "onze", "doze", "treze", "catorze",
    "quinze", "dezasseis", "dezassete", "dezoito", "dezanove",
)
PT_TENS = ("", "", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa")
PT_HUNDREDS = (
    "", "cento", "duzentos", "trezentos", "quatrocentos",
    "quinhentos", "seiscentos", "setecentos", "oitocentos", "novecentos",
)
PT_HUNDREDS_FEMININE = tuple(
    word[:-2] + "as" if word.endswith("os") else word for word in PT_HUNDREDS
)
PT_SCALES = ("milhão", "bilião", "trilião", "quatrilião", "quintilião")
PT_SCALES_PLURAL = ("milhões", "biliões", "triliões", "quatriliões", "quintiliões")

PT_ORDINALS = OrdinalTables(
    ones=("", "primeiro", "segundo", "terceiro", "quarto", "quinto", "sexto", "sétimo", "oitavo", "nono"),
    teens=(
        "décimo", "décimo primeiro", "décimo segundo", "décimo terceiro", "décimo quarto",
        "décimo quinto", "décimo sexto", "décimo sétimo", "décimo oitavo", "décimo nono",
    ),
    tens=(
        "", "", "vigésimo", "trigésimo", "quadragésimo", "quinquagésimo",
        "sexagésimo", "septuagésimo", "octogésimo", "nonagésimo",
    ),
    hundreds=(
        "", "centésimo", "ducentésimo", "tricentésimo", "quadringentésimo", "quingentésimo",
        "sexcentésimo", "septingentésimo", "octingentésimo", "nongentésimo",
    ),
    scales=("milésimo", "milionésimo", "bilionésimo", "trilionésimo", "quatrilionésimo", "quintilionésimo"),
    ordinal_tens=True,
    ordinal_hundreds=True,
)

PORTUGUESE = LocaleRuleTable(
    code="pt",
    name="Portuguese",
    zero="zero",
    negative="menos",
    builder=IberianBuilder(
        ones=PT_ONES,
        teens=PT_TEENS,
        tens=PT_TENS,
        hundreds=PT_HUNDREDS,
        hundreds_feminine=PT_HUNDREDS_FEMININE,
        hundred_exact="cem",
        hundred_joiner=" e ",
        tens_joiner=" e ",
        feminine=PT_ONES_FEMININE,
    ),
    ladder=ScaleLadder(
        (ScaleWord.of("mil", policy=NumeralPolicy.OMIT_ONE),)
        + ladder_of(PT_SCALES, PT_SCALES_PLURAL, gender=Gender.MASCULINE),
        pairing=True,
    ),
    connector=ConnectorRule(conjunction=" e ", policy=ConjunctionPolicy.LAST_SIMPLE),
    ordinal=ComponentOrdinal(PT_ORDINALS, feminine=PT_ORDINALS.inflected(MASCULINE_O)),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="euro", other="euros"), gender=Gender.MASCULINE),
        minor=CurrencyUnit(PluralForms(one="cêntimo", other="cêntimos"), gender=Gender.MASCULINE),
        conjunction=" e ",
    ),
    decimal_word="vírgula",
    accepted_options=frozenset({"gender", "include_conjunction", "negative_word"}),
)


# =============================================================================
# Romanian
# =============================================================================

RO_ONES = ("", "unu", "doi", "trei", "patru", "cinci", "șase", "șapte", "opt", "nouă")
RO_ONES_FEMININE = ("", "una", "două") + RO_ONES[3:]
RO_TEENS = (
    "zece", "unsprezece", "doisprezece", "treisprezece", "paisprezece",
    "cincisprezece", "șaisprezece", "șaptesprezece", "optsprezece", "nouăsprezece",
)
RO_TEENS_FEMININE = RO_TEENS[:2] + ("douăsprezece",) + RO_TEENS[3:]
RO_TENS = (
    "", "", "douăzeci", "treizeci", "patruzeci", "cincizeci",
    "șaizeci", "șaptezeci", "optzeci", "nouăzeci",
)
RO_HUNDREDS = (
    "", "o sută", "două sute", "trei sute", "patru sute",
    "cinci sute", "șase sute", "șapte sute", "opt sute", "nouă sute",
)
RO_SCALES = (
    ("milion", "milioane"), ("miliard", "miliarde"), ("bilion", "bilioane"),
    ("biliard", "biliarde"), ("trilion", "trilioane"), ("triliard", "triliarde"),
    ("cvadrilion", "cvadrilioane"), ("cvadriliard", "cvadriliarde"), ("cvintilion", "cvintilioane"),
)


@dataclass(frozen=True)
class RomanianBuilder(TripletBuilder):
    """Feminine teens ("douăsprezece") in feminine agreement."""

    def below_hundred_word(self, value: int, context: SegmentContext) -> str:
        if 10 <= value < 20 and context.gender is Gender.FEMININE:
            return RO_TEENS_FEMININE[value - 10]
        return super().below_hundred_word(value, context)


def _romanian_scale(one: str, plural: str, numeral: str) -> ScaleWord:
    return ScaleWord(
        PluralForms(one=one, few=plural, other="de " + plural, rule=romanian),
        one_numeral=numeral,
        gender=Gender.FEMININE,
    )


def _romanian_de(count: int) -> str:
    return "de " if romanian(count) is PluralCategory.OTHER else ""


def _romanian_ordinal(word: str, value: int) -> str:
    if word[-1] in "aeiouăâî":
        return word + "lea"
    return word + "ulea"


ROMANIAN = LocaleRuleTable(
    code="ro",
    name="Romanian",
    zero="zero",
    negative="minus",
    builder=RomanianBuilder(
        ones=RO_ONES,
        teens=RO_TEENS,
        tens=RO_TENS,
        hundreds=RO_HUNDREDS,
        tens_joiner=" și ",
        feminine=RO_ONES_FEMININE,
    ),
    ladder=ScaleLadder(
        (_romanian_scale("mie", "mii", "o"),)
        + tuple(_romanian_scale(one, plural, "un") for one, plural in RO_SCALES)
    ),
    ordinal=TerminalWordOrdinal(
        numbers={1: "primul"},
        words={"mie": "miilea"},
        suffix=_romanian_ordinal,
        delimiters=" ",
        prefix="al ",
    ),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="leu", other="lei"), one_numeral="un", linker=_romanian_de),
        minor=CurrencyUnit(PluralForms(one="ban", other="bani"), one_numeral="un", linker=_romanian_de),
        conjunction=" și ",
        conjunction_default=False,
    ),
    decimal_word="virgulă",
    accepted_options=frozenset({"gender", "include_conjunction", "negative_word"}),
)


TABLES = (
    FRENCH,
    FRENCH.derive("fr-FR", "French (France)"),
    FRENCH_BELGIAN,
    ITALIAN,
    ITALIAN.derive("it-IT", "Italian (Italy)"),
    SPANISH,
    SPANISH.derive("es-ES", "Spanish (Spain)"),
    SPANISH.derive(
        "es-MX",
        "Spanish (Mexico)",
        ladder=ES_SHORT_LADDER,
        currency=_americas_currency("peso", "pesos"),
        decimal_word="punto",
    ),
    SPANISH.derive(
        "es-US",
        "Spanish (United States)",
        ladder=ES_SHORT_LADDER,
        currency=_americas_currency("dólar", "dólares"),
        decimal_word="punto",
    ),
    PORTUGUESE,
    PORTUGUESE.derive("pt-PT", "Portuguese (Portugal)"),
    ROMANIAN,
    ROMANIAN.derive("ro-RO", "Romanian (Romania)"),
)
