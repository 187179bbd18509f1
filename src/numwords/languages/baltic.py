"""Lithuanian and Latvian rule tables.

Lithuanian chooses among three scale forms ("tūkstantis", "tūkstančiai",
"tūkstančių"): a last digit of 1 is singular, 2-9 plural, and 0 or a teen
takes the genitive. Latvian has two: singular when the count ends in 1 but
not 11 ("divdesmit viens tūkstotis"), plural otherwise.

Lithuanian always writes the count of one ("vienas šimtas", "vienas
tūkstantis"). Latvian drops it ("simts", "tūkstotis").

Latvian writes one hundred as "simts", or "simtu" when only a ones digit
follows ("simtu viens").
"""

from __future__ import annotations

from dataclasses import dataclass

from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import ComponentOrdinal, OrdinalTables
from numwords.engine.plural import LITHUANIAN, PluralForms, last_digit_one
from numwords.engine.scales import NumeralPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.types import Gender

# =============================================================================
# Lithuanian
# =============================================================================

LT_ONES = ("", "vienas", "du", "trys", "keturi", "penki", "šeši", "septyni", "aštuoni", "devyni")
LT_FEMININE = (
    "", "viena", "dvi", "trys", "keturios", "penkios",
    "šešios", "septynios", "aštuonios", "devynios",
)
LT_TEENS = (
    "dešimt", "vienuolika", "dvylika", "trylika", "keturiolika",
    "penkiolika", "šešiolika", "septyniolika", "aštuoniolika", "devyniolika",
)
LT_TENS = (
    "", "", "dvidešimt", "trisdešimt", "keturiasdešimt", "penkiasdešimt",
    "šešiasdešimt", "septyniasdešimt", "aštuoniasdešimt", "devyniasdešimt",
)
LT_HUNDREDS = ("", "vienas šimtas") + tuple(word + " šimtai" for word in LT_ONES[2:])
LT_SCALE_STEMS = (
    "milijon", "milijard", "trilijon", "kvadrilijon", "kvintilijon",
    "sikstilijon", "septilijon", "oktilijon", "naintilijon",
)

LT_ORDINALS = OrdinalTables(
    ones=("", "pirmas", "antras", "trečias", "ketvirtas", "penktas", "šeštas", "septintas", "aštuntas", "devintas"),
    teens=(
        "dešimtas", "vienuoliktas", "dvyliktas", "tryliktas", "keturioliktas",
        "penkioliktas", "šešioliktas", "septynioliktas", "aštuonioliktas", "devynioliktas",
    ),
    tens=(
        "", "", "dvidešimtas", "trisdešimtas", "keturiasdešimtas", "penkiasdešimtas",
        "šešiasdešimtas", "septyniasdešimtas", "aštuoniasdešimtas", "devyniasdešimtas",
    ),
    hundreds=("", "šimtasis") + tuple(word + " šimtasis" for word in LT_ONES[2:]),
    scales=("tūkstantasis",) + tuple(stem + "asis" for stem in LT_SCALE_STEMS),
)

LITHUANIAN_TABLE = LocaleRuleTable(
    code="lt",
    name="Lithuanian",
    zero="nulis",
    negative="minus",
    builder=TripletBuilder(
        ones=LT_ONES,
        teens=LT_TEENS,
        tens=LT_TENS,
        hundreds=LT_HUNDREDS,
        tens_joiner=" ",
        feminine=LT_FEMININE,
    ),
    ladder=ScaleLadder(
        (
            ScaleWord(
                PluralForms.three("tūkstantis", "tūkstančiai", "tūkstančių", rule=LITHUANIAN),
                gender=Gender.MASCULINE,
            ),
        )
        + tuple(
            ScaleWord(
                PluralForms.three(stem + "as", stem + "ai", stem + "ų", rule=LITHUANIAN),
                gender=Gender.MASCULINE,
            )
            for stem in LT_SCALE_STEMS
        )
    ),
    ordinal=ComponentOrdinal(LT_ORDINALS, feminine=LT_ORDINALS.inflected((("asis", "oji"), ("as", "a")))),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.three("euras", "eurai", "eurų", rule=LITHUANIAN)),
        minor=CurrencyUnit(PluralForms.three("centas", "centai", "centų", rule=LITHUANIAN)),
        conjunction=" ",
    ),
    decimal_word="kablelis",
    accepted_options=frozenset({"gender", "negative_word"}),
)


# =============================================================================
# Latvian
# =============================================================================

LV_ONES = ("", "viens", "divi", "trīs", "četri", "pieci", "seši", "septiņi", "astoņi", "deviņi")
LV_FEMININE = (
    "", "viena", "divas", "trīs", "četras", "piecas",
    "sešas", "septiņas", "astoņas", "deviņas",
)
LV_TEENS = (
    "desmit", "vienpadsmit", "divpadsmit", "trīspadsmit", "četrpadsmit",
    "piecpadsmit", "sešpadsmit", "septiņpadsmit", "astoņpadsmit", "deviņpadsmit",
)
LV_TENS = (
    "", "", "divdesmit", "trīsdesmit", "četrdesmit", "piecdesmit",
    "sešdesmit", "septiņdesmit", "astoņdesmit", "deviņdesmit",
)
LV_HUNDREDS = ("", "simts") + tuple(word + " simti" for word in LV_ONES[2:])
LV_SCALES = (
    "tūkstotis", "miljons", "miljards", "triljons", "kvadriljons",
    "kvintiljons", "sikstiljons", "septiljons", "oktiljons", "nontiljons",
)
LV_SCALES_PLURAL = ("tūkstoši",) + tuple(word[:-1] + "i" for word in LV_SCALES[1:])


@dataclass(frozen=True)
class LatvianBuilder(TripletBuilder):
    """"simtu" before a bare ones digit."""

    def join(self, head, tail, hundreds_digit, rest, context):
        if hundreds_digit == 1 and 0 < rest < 10:
            head = "simtu"
        return super().join(head, tail, hundreds_digit, rest, context)


LV_ORDINALS = OrdinalTables(
    ones=("", "pirmais", "otrais", "trešais", "ceturtais", "piektais", "sestais", "septītais", "astotais", "devītais"),
    teens=(
        "desmitais", "vienpadsmitais", "divpadsmitais", "trīspadsmitais", "četrpadsmitais",
        "piecpadsmitais", "sešpadsmitais", "septiņpadsmitais", "astoņpadsmitais", "deviņpadsmitais",
    ),
    tens=(
        "", "", "divdesmitais", "trīsdesmitais", "četrdesmitais", "piecdesmitais",
        "sešdesmitais", "septiņdesmitais", "astoņdesmitais", "deviņdesmitais",
    ),
    hundreds=(
        "", "simtais", "divsimtais", "trīssimtais", "četrsimtais",
        "piecsimtais", "sešsimtais", "septiņsimtais", "astoņsimtais", "deviņsimtais",
    ),
    scales=("tūkstošais",) + tuple(word[:-1] + "ais" for word in LV_SCALES[1:]),
)

LATVIAN = LocaleRuleTable(
    code="lv",
    name="Latvian",
    zero="nulle",
    negative="mīnus",
    builder=LatvianBuilder(
        ones=LV_ONES,
        teens=LV_TEENS,
        tens=LV_TENS,
        hundreds=LV_HUNDREDS,
        tens_joiner=" ",
        feminine=LV_FEMININE,
    ),
    ladder=ScaleLadder(
        ladder_of(
            LV_SCALES,
            LV_SCALES_PLURAL,
            rule=last_digit_one,
            policy=NumeralPolicy.OMIT_ONE,
            gender=Gender.MASCULINE,
        )
    ),
    ordinal=ComponentOrdinal(LV_ORDINALS, feminine=LV_ORDINALS.inflected((("ais", "ā"),))),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms.invariant("eiro")),
        minor=CurrencyUnit(PluralForms(one="cents", other="centi", rule=last_digit_one)),
        conjunction=" ",
    ),
    decimal_word="komats",
    accepted_options=frozenset({"gender", "negative_word"}),
)


TABLES = (
    LITHUANIAN_TABLE,
    LITHUANIAN_TABLE.derive("lt-LT", "Lithuanian (Lithuania)"),
    LATVIAN,
    LATVIAN.derive("lv-LV", "Latvian (Latvia)"),
)
