"""Hindi rule tables.

Hindi groups digits the Indian way (thousand, lakh, crore) and has an
irregular word for every number below one hundred. Past शंख the top scale
word is counted by a full cardinal.
"""

from __future__ import annotations

from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import SuffixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import OverflowPolicy, ScaleLadder, ladder_of
from numwords.engine.segment import TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.types import GroupingStrategy

HI_BELOW_HUNDRED = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तैंतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे",
)
HI_SCALES = ("हज़ार", "लाख", "करोड़", "अरब", "खरब", "नील", "पद्म", "शंख")


def _hindi_ordinal(cardinal: str, value: int) -> str:
    return cardinal + "वाँ"


HINDI = LocaleRuleTable(
    code="hi",
    name="Hindi",
    zero="शून्य",
    negative="माइनस",
    builder=TripletBuilder(
        ones=HI_BELOW_HUNDRED[:10],
        hundred="सौ",
        below_hundred=HI_BELOW_HUNDRED,
    ),
    ladder=ScaleLadder(ladder_of(HI_SCALES), overflow=OverflowPolicy.NEST),
    grouping=GroupingStrategy.INDIAN,
    ordinal=SuffixOrdinal(
        suffix=_hindi_ordinal,
        numbers={1: "पहला", 2: "दूसरा", 3: "तीसरा", 4: "चौथा", 6: "छठा"},
    ),
    currency=CurrencyStyle(
        major=CurrencyUnit(PluralForms(one="रुपया", other="रुपये")),
        minor=CurrencyUnit(PluralForms(one="पैसा", other="पैसे")),
        conjunction=" और ",
    ),
    decimal_word="दशमलव",
    accepted_options=frozenset({"negative_word"}),
)

TABLES = (
    HINDI,
    HINDI.derive("hi-IN", "Hindi (India)"),
)
