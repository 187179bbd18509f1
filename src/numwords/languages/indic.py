"""Bengali, Tamil, Telugu, Urdu, Marathi, Gujarati, Kannada and Punjabi rule tables.

All of them group digits the Indian way (thousand, lakh, crore) like Hindi
and have a complete word for every number below one hundred. Ordinals
1-6 are irregular; the rest append a suffix to the cardinal. Punjabi has
cardinals only.

Tamil fuses the hundreds ("இருநூறு") and switches to a linking form when
more follows ("இருநூற்று ஐந்து"). Telugu writes hundreds with their own
plural ("రెండు వందలు").
"""

from __future__ import annotations

from dataclasses import dataclass

from numwords.engine.currency import CurrencyStyle, CurrencyUnit
from numwords.engine.ordinal import SuffixOrdinal
from numwords.engine.plural import PluralForms
from numwords.engine.scales import OverflowPolicy, ScaleLadder, ladder_of
from numwords.engine.segment import SegmentBuilder, SegmentContext, TripletBuilder
from numwords.language import LocaleRuleTable
from numwords.types import GroupingStrategy


def _suffixed(ending: str):
    def apply(cardinal: str, value: int) -> str:
        return cardinal + ending

    return apply


def _rupees(major: PluralForms, minor: PluralForms) -> CurrencyStyle:
    return CurrencyStyle(major=CurrencyUnit(major), minor=CurrencyUnit(minor))


def _indic_table(
    code: str,
    name: str,
    *,
    zero: str,
    negative: str,
    builder: SegmentBuilder,
    scales: tuple[str, ...],
    decimal_word: str,
    ordinal: SuffixOrdinal | None = None,
    currency: CurrencyStyle | None = None,
) -> LocaleRuleTable:
    return LocaleRuleTable(
        code=code,
        name=name,
        zero=zero,
        negative=negative,
        builder=builder,
        ladder=ScaleLadder(ladder_of(scales), overflow=OverflowPolicy.NEST),
        grouping=GroupingStrategy.INDIAN,
        ordinal=ordinal,
        currency=currency,
        decimal_word=decimal_word,
        accepted_options=frozenset({"negative_word"}),
    )


# =============================================================================
# Bengali
# =============================================================================

BN_BELOW_HUNDRED = (
    "শূন্য", "এক", "দুই", "তিন", "চার", "পাঁচ", "ছয়", "সাত", "আট", "নয়",
    "দশ", "এগারো", "বারো", "তেরো", "চৌদ্দ", "পনেরো", "ষোল", "সতেরো", "আঠারো", "উনিশ",
    "বিশ", "একুশ", "বাইশ", "তেইশ", "চব্বিশ", "পঁচিশ", "ছাব্বিশ", "সাতাশ", "আঠাশ", "উনত্রিশ",
    "ত্রিশ", "একত্রিশ", "বত্রিশ", "তেত্রিশ", "চৌত্রিশ", "পঁয়ত্রিশ", "ছত্রিশ", "সাঁইত্রিশ", "আটত্রিশ", "উনচল্লিশ",
    "চল্লিশ", "একচল্লিশ", "বেয়াল্লিশ", "তেতাল্লিশ", "চুয়াল্লিশ", "পঁয়তাল্লিশ", "ছেচল্লিশ", "সাতচল্লিশ", "আটচল্লিশ", "উনপঞ্চাশ",
    "পঞ্চাশ", "একান্ন", "বাহান্ন", "তিপ্পান্ন", "চুয়ান্ন", "পঞ্চান্ন", "ছাপ্পান্ন", "সাতান্ন", "আটান্ন", "উনষাট",
    "ষাট", "একষট্টি", "বাষট্টি", "তেষট্টি", "চৌষট্টি", "পঁয়ষট্টি", "ছেষট্টি", "সাতষট্টি", "আটষট্টি", "ঊনসত্তর",
    "সত্তর", "একাত্তর", "বাহাত্তর", "তেহাত্তর", "চুয়াত্তর", "পঁচাত্তর", "ছিয়াত্তর", "সাতাত্তর", "আটাত্তর", "উনআশি",
    "আশি", "একাশি", "বিরাশি", "তিরাশি", "চুরাশি", "পঁচাশি", "ছিয়াশি", "সাতাশি", "আটাশি", "উননব্বই",
    "নব্বই", "একানব্বই", "বিরানব্বই", "তিরানব্বই", "চুরানব্বই", "পঁচানব্বই", "ছিয়ানব্বই", "সাতানব্বই", "আটানব্বই", "নিরানব্বই",
)

BENGALI = _indic_table(
    "bn",
    "Bengali",
    zero="শূন্য",
    negative="মাইনাস",
    builder=TripletBuilder(ones=BN_BELOW_HUNDRED[:10], hundred="শত", below_hundred=BN_BELOW_HUNDRED),
    scales=("হাজার", "লাখ", "কোটি", "আরব", "খরব", "নীল", "পদ্ম", "শঙ্খ"),
    decimal_word="দশমিক",
    ordinal=SuffixOrdinal(
        suffix=_suffixed("তম"),
        numbers={1: "প্রথম", 2: "দ্বিতীয়", 3: "তৃতীয়", 4: "চতুর্থ", 5: "পঞ্চম", 6: "ষষ্ঠ"},
    ),
    currency=_rupees(PluralForms.invariant("টাকা"), PluralForms.invariant("পয়সা")),
)


# =============================================================================
# Tamil
# =============================================================================

TA_BELOW_HUNDRED = (
    "பூஜ்ஜியம்", "ஒன்று", "இரண்டு", "மூன்று", "நான்கு", "ஐந்து", "ஆறு", "ஏழு", "எட்டு", "ஒன்பது",
    "பத்து", "பதினொன்று", "பன்னிரண்டு", "பதிமூன்று", "பதினான்கு", "பதினைந்து", "பதினாறு", "பதினேழு", "பதினெட்டு", "பத்தொன்பது",
    "இருபது", "இருபத்தொன்று", "இருபத்திரண்டு", "இருபத்திமூன்று", "இருபத்திநான்கு", "இருபத்தைந்து", "இருபத்தாறு", "இருபத்தேழு", "இருபத்தெட்டு", "இருபத்தொன்பது",
    "முப்பது", "முப்பத்தொன்று", "முப்பத்திரண்டு", "முப்பத்திமூன்று", "முப்பத்திநான்கு", "முப்பத்தைந்து", "முப்பத்தாறு", "முப்பத்தேழு", "முப்பத்தெட்டு", "முப்பத்தொன்பது",
    "நாற்பது", "நாற்பத்தொன்று", "நாற்பத்திரண்டு", "நாற்பத்திமூன்று", "நாற்பத்திநான்கு", "நாற்பத்தைந்து", "நாற்பத்தாறு", "நாற்பத்தேழு", "நாற்பத்தெட்டு", "நாற்பத்தொன்பது",
    "ஐம்பது", "ஐம்பத்தொன்று", "ஐம்பத்திரண்டு", "ஐம்பத்திமூன்று", "ஐம்பத்திநான்கு", "ஐம்பத்தைந்து", "ஐம்பத்தாறு", "ஐம்பத்தேழு", "ஐம்பத்தெட்டு", "ஐம்பத்தொன்பது",
    "அறுபது", "அறுபத்தொன்று", "அறுபத்திரண்டு", "அறுபத்திமூன்று", "அறுபத்திநான்கு", "அறுபத்தைந்து", "அறுபத்தாறு", "அறுபத்தேழு", "அறுபத்தெட்டு", "அறுபத்தொன்பது",
    "எழுபது", "எழுபத்தொன்று", "எழுபத்திரண்டு", "எழுபத்திமூன்று", "எழுபத்திநான்கு", "எழுபத்தைந்து", "எழுபத்தாறு", "எழுபத்தேழு", "எழுபத்தெட்டு", "எழுபத்தொன்பது",
    "எண்பது", "எண்பத்தொன்று", "எண்பத்திரண்டு", "எண்பத்திமூன்று", "எண்பத்திநான்கு", "எண்பத்தைந்து", "எண்பத்தாறு", "எண்பத்தேழு", "எண்பத்தெட்டு", "எண்பத்தொன்பது",
    "தொண்ணூறு", "தொண்ணூற்று ஒன்று", "தொண்ணூற்று இரண்டு", "தொண்ணூற்று மூன்று", "தொண்ணூற்று நான்கு", "தொண்ணூற்று ஐந்து", "தொண்ணூற்று ஆறு", "தொண்ணூற்று ஏழு", "தொண்ணூற்று எட்டு", "தொண்ணூற்று ஒன்பது",
)
TA_HUNDREDS = ("", "நூறு", "இருநூறு", "முன்னூறு", "நானூறு", "ஐநூறு", "அறுநூறு", "எழுநூறு", "எண்நூறு", "தொள்ளாயிரம்")
TA_HUNDREDS_LINKED = (
    "", "நூற்று", "இருநூற்று", "முன்னூற்று", "நானூற்று", "ஐநூற்று", "அறுநூற்று", "எழுநூற்று", "எண்நூற்று", "தொள்ளாயிரத்து",
)


@dataclass(frozen=True)
class TamilBuilder(TripletBuilder):
    """Linking form of the hundreds when tens or ones follow.

    Attributes:
        hundreds_linked: Words for 100, 200, ... 900 followed by more.
    """

    hundreds_linked: tuple[str, ...] = ()

    def join(
        self, head: str, tail: str, hundreds_digit: int, rest: int, context: SegmentContext
    ) -> str:
        if head and tail:
            return self.hundreds_linked[hundreds_digit] + self.hundred_joiner + tail
        return head or tail


TAMIL = _indic_table(
    "ta",
    "Tamil",
    zero="பூஜ்ஜியம்",
    negative="மைனஸ்",
    builder=TamilBuilder(
        ones=TA_BELOW_HUNDRED[:10],
        hundreds=TA_HUNDREDS,
        hundreds_linked=TA_HUNDREDS_LINKED,
        below_hundred=TA_BELOW_HUNDRED,
    ),
    scales=("ஆயிரம்", "லட்சம்", "கோடி", "அரபு", "கராபு", "நீல்", "பத்ம", "சங்கு"),
    decimal_word="புள்ளி",
    ordinal=SuffixOrdinal(
        suffix=_suffixed("ஆவது"),
        numbers={1: "முதல்", 2: "இரண்டாவது", 3: "மூன்றாவது", 4: "நான்காவது", 5: "ஐந்தாவது", 6: "ஆறாவது"},
    ),
    currency=_rupees(PluralForms.invariant("ரூபாய்"), PluralForms.invariant("பைசா")),
)


# =============================================================================
# Telugu
# =============================================================================

TE_BELOW_HUNDRED = (
    "సున్నా", "ఒకటి", "రెండు", "మూడు", "నాలుగు", "ఐదు", "ఆరు", "ఏడు", "ఎనిమిది", "తొమ్మిది",
    "పది", "పదకొండు", "పన్నెండు", "పదమూడు", "పద్నాలుగు", "పదిహేను", "పదహారు", "పదిహేడు", "పద్దెనిమిది", "పంతొమ్మిది",
    "ఇరవై", "ఇరవై ఒక్కటి", "ఇరవై రెండు", "ఇరవై మూడు", "ఇరవై నాలుగు", "ఇరవై ఐదు", "ఇరవై ఆరు", "ఇరవై ఏడు", "ఇరవై ఎనిమిది", "ఇరవై తొమ్మిది",
    "ముప్పై", "ముప్పై ఒకటి", "ముప్పై రెండు", "ముప్పై మూడు", "ముప్పై నాలుగు", "ముప్పై ఐదు", "ముప్పై ఆరు", "ముప్పై ఏడు", "ముప్పై ఎనిమిది", "ముప్పై తొమ్మిది",
    "నలభై", "నలభై ఒకటి", "నలభై రెండు", "నలభై మూడు", "నలభై నాలుగు", "నలభై ఐదు", "నలభై ఆరు", "నలభై ఏడు", "నలభై ఎనిమిది", "నలభై తొమ్మిది",
    "యాభై", "యాభై ఒకటి", "యాభై రెండు", "యాభై మూడు", "యాభై నాలుగు", "యాభై ఐదు", "యాభై ఆరు", "యాభై ఏడు", "యాభై ఎనిమిది", "యాభై తొమ్మిది",
    "అరవై", "అరవై ఒకటి", "అరవై రెండు", "అరవై మూడు", "అరవై నాలుగు", "అరవై ఐదు", "అరవై ఆరు", "అరవై ఏడు", "అరవై ఎనిమిది", "అరవై తొమ్మిది",
    "డెబ్బై", "డెబ్బై ఒకటి", "డెబ్బై రెండు", "డెబ్బై మూడు", "డెబ్బై నాలుగు", "డెబ్బై ఐదు", "డెబ్బై ఆరు", "డెబ్బై ఏడు", "డెబ్బై ఎనిమిది", "డెబ్బై తొమ్మిది",
    "ఎనభై", "ఎనభై ఒకటి", "ఎనభై రెండు", "ఎనభై మూడు", "ఎనభై నాలుగు", "ఎనభై ఐదు", "ఎనభై ఆరు", "ఎనభై ఏడు", "ఎనభై ఎనిమిది", "ఎనభై తొమ్మిది",
    "తొంభై", "తొంభై ఒకటి", "తొంభై రెండు", "తొంభై మూడు", "తొంభై నాలుగు", "తొంభై ఐదు", "తొంభై ఆరు", "తొంభై ఏడు", "తొంభై ఎనిమిది", "తొంభై తొమ్మిది",
)
TE_HUNDREDS = (
    "", "వంద", "రెండు వందలు", "మూడు వందలు", "నాలుగు వందలు", "ఐదు వందలు",
    "ఆరు వందలు", "ఏడు వందలు", "ఎనిమిది వందలు", "తొమ్మిది వందలు",
)

TELUGU = _indic_table(
    "te",
    "Telugu",
    zero="సున్నా",
    negative="మైనస్",
    builder=TripletBuilder(ones=TE_BELOW_HUNDRED[:10], hundreds=TE_HUNDREDS, below_hundred=TE_BELOW_HUNDRED),
    scales=("వెయ్యి", "లక్ష", "కోటి", "అరబ్", "ఖరబ్", "నిల్", "పడ్మ", "శంకు"),
    decimal_word="పాయింట్",
    ordinal=SuffixOrdinal(
        suffix=_suffixed("వ"),
        numbers={1: "మొదటి", 2: "రెండవ", 3: "మూడవ", 4: "నాలుగవ", 5: "ఐదవ", 6: "ఆరవ"},
    ),
    currency=_rupees(
        PluralForms(one="రూపాయి", other="రూపాయలు"),
        PluralForms(one="పైసా", other="పైసలు"),
    ),
)


# =============================================================================
# Urdu
# =============================================================================

UR_BELOW_HUNDRED = (
    "صفر", "ایک", "دو", "تین", "چار", "پانچ", "چھ", "سات", "آٹھ", "نو",
    "دس", "گیارہ", "بارہ", "تیرہ", "چودہ", "پندرہ", "سولہ", "سترہ", "اٹھارہ", "انیس",
    "بیس", "اکیس", "بائیس", "تیئیس", "چوبیس", "پچیس", "چھبیس", "ستائیس", "اٹھائیس", "انتیس",
    "تیس", "اکتیس", "بتیس", "تینتیس", "چونتیس", "پینتیس", "چھتیس", "سینتیس", "اڑتیس", "انتالیس",
    "چالیس", "اکتالیس", "بیالیس", "تینتالیس", "چوالیس", "پینتالیس", "چھالیس", "سینتالیس", "اڑتالیس", "انچاس",
    "پچاس", "اکاون", "باون", "ترپن", "چون", "پچپن", "چھپن", "ستاون", "اٹھاون", "انسٹھ",
    "ساٹھ", "اکسٹھ", "باسٹھ", "ترسٹھ", "چونسٹھ", "پینسٹھ", "چھیاسٹھ", "سڑسٹھ", "اڑسٹھ", "انہتر",
    "ستر", "اکہتر", "بہتر", "تہتر", "چوہتر", "پچھتر", "چھہتر", "ستتر", "اٹھہتر", "اناسی",
    "اسی", "اکیاسی", "بیاسی", "تریاسی", "چوراسی", "پچاسی", "چھیاسی", "ستاسی", "اٹھاسی", "نواسی",
    "نوے", "اکانوے", "بانوے", "ترانوے", "چورانوے", "پچانوے", "چھیانوے", "ستانوے", "اٹھانوے", "ننانوے",
)

URDU = _indic_table(
    "ur",
    "Urdu",
    zero="صفر",
    negative="منفی",
    builder=TripletBuilder(ones=UR_BELOW_HUNDRED[:10], hundred="سو", below_hundred=UR_BELOW_HUNDRED),
    scales=("ہزار", "لاکھ", "کروڑ", "ارب", "کھرب", "نیل", "پدم", "شنکھ"),
    decimal_word="اعشاریہ",
    ordinal=SuffixOrdinal(
        suffix=_suffixed("واں"),
        numbers={1: "پہلا", 2: "دوسرا", 3: "تیسرا", 4: "چوتھا", 5: "پانچواں", 6: "چھٹا"},
    ),
    currency=_rupees(
        PluralForms(one="روپیہ", other="روپے"),
        PluralForms(one="پیسہ", other="پیسے"),
    ),
)


# =============================================================================
# Marathi
# =============================================================================

MR_BELOW_HUNDRED = (
    "शून्य", "एक", "दोन", "तीन", "चार", "पाच", "सहा", "सात", "आठ", "नऊ",
    "दहा", "अकरा", "बारा", "तेरा", "चौदा", "पंधरा", "सोळा", "सतरा", "अठरा", "एकोणीस",
    "वीस", "एकवीस", "बावीस", "तेवीस", "चोवीस", "पंचवीस", "सव्वीस", "सत्तावीस", "अठ्ठावीस", "एकोणतीस",
    "तीस", "एकतीस", "बत्तीस", "तेहेतीस", "चौतीस", "पस्तीस", "छत्तीस", "सदतीस", "अडतीस", "एकोणचाळीस",
    "चाळीस", "एकेचाळीस", "बेचाळीस", "त्रेचाळीस", "चव्वेचाळीस", "पंचेचाळीस", "सेहेचाळीस", "सत्तेचाळीस", "अठ्ठेचाळीस", "एकोणपन्नास",
    "पन्नास", "एक्काव्वन", "बावन्न", "त्रेपन्न", "चोपन्न", "पंचाव्वन", "छप्पन्न", "सत्तावन्न", "अठ्ठावन्न", "एकोणसाठ",
    "साठ", "एकसष्ठ", "बासष्ठ", "त्रेसष्ठ", "चौसष्ठ", "पासष्ठ", "सहासष्ठ", "सदुसष्ठ", "अडुसष्ठ", "एकोणसत्तर",
    "सत्तर", "एकाहत्तर", "बाहत्तर", "त्र्याहत्तर", "चौऱ्याहत्तर", "पंच्याहत्तर", "शहात्तर", "सत्याहत्तर", "अठ्ठ्याहत्तर", "एकोणऐंशी",
    "ऐंशी", "एक्याऐंशी", "ब्याऐंशी", "त्र्याऐंशी", "चौऱ्याऐंशी", "पंच्याऐंशी", "शहाऐंशी", "सत्याऐंशी", "अठ्ठ्याऐंशी", "एकोणनव्वद",
    "नव्वद", "एक्याण्णव", "ब्याण्णव", "त्र्याण्णव", "चौऱ्याण्णव", "पंच्याण्णव", "शहाण्णव", "सत्याण्णव", "अठ्ठ्याण्णव", "नव्याण्णव",
)

MARATHI = _indic_table(
    "mr",
    "Marathi",
    zero="शून्य",
    negative="उणे",
    builder=TripletBuilder(ones=MR_BELOW_HUNDRED[:10], hundred="शंभर", below_hundred=MR_BELOW_HUNDRED),
    scales=("हजार", "लाख", "कोटी", "अब्ज", "खर्व", "निखर्व", "महापद्म", "शंकू"),
    decimal_word="दशांश",
    ordinal=SuffixOrdinal(
        suffix=_suffixed("वा"),
        numbers={1: "पहिला", 2: "दुसरा", 3: "तिसरा", 4: "चौथा", 5: "पाचवा", 6: "सहावा"},
    ),
    currency=_rupees(
        PluralForms(one="रुपया", other="रुपये"),
        PluralForms(one="पैसा", other="पैसे"),
    ),
)


# =============================================================================
# Gujarati
# =============================================================================

GU_BELOW_HUNDRED = (
    "શૂન્ય", "એક", "બે", "ત્રણ", "ચાર", "પાંચ", "છ", "સાત", "આઠ", "નવ",
    "દસ", "અગિયાર", "બાર", "તેર", "ચૌદ", "પંદર", "સોળ", "સત્તર", "અઢાર", "ઓગણીસ",
    "વીસ", "એકવીસ", "બાવીસ", "ત્રેવીસ", "ચોવીસ", "પચીસ", "છવ્વીસ", "સત્તાવીસ", "અઠ્ઠાવીસ", "ઓગણત્રીસ",
    "ત્રીસ", "એકત્રીસ", "બત્રીસ", "તેત્રીસ", "ચોત્રીસ", "પાંત્રીસ", "છત્રીસ", "સાડત્રીસ", "અડત્રીસ", "ઓગણચાલીસ",
    "ચાલીસ", "એકતાલીસ", "બેતાળીસ", "ત્રેતાળીસ", "ચુંમાલીસ", "પિસ્તાલીસ", "છેતાળીસ", "સુડતાળીસ", "અડતાળીસ", "ઓગણપચાસ",
    "પચાસ", "એકાવન", "બાવન", "ત્રેપન", "ચોપન", "પંચાવન", "છપ્પન", "સત્તાવન", "અઠ્ઠાવન", "ઓગણસાઠ",
    "સાઠ", "એકસઠ", "બાસઠ", "ત્રેસઠ", "ચોસઠ", "પાંસઠ", "છાસઠ", "સડસઠ", "અડસઠ", "અગણોસિત્તેર",
    "સિત્તેર", "એકોતેર", "બોતેર", "તોતેર", "ચુમોતેર", "પંચોતેર", "છોતેર", "સિત્યોતેર", "ઇઠ્યોતેર", "ઓગણાએંસી",
    "એંસી", "એક્યાસી", "બ્યાસી", "ત્યાસી", "ચોર્યાસી", "પંચાસી", "છ્યાસી", "સિત્યાસી", "અઠ્યાસી", "નેવ્યાસી",
    "નેવું", "એકાણું", "બાણું", "ત્રાણું", "ચોરાણું", "પંચાણું", "છન્નું", "સત્તાણું", "અઠ્ઠાણું", "નવ્વાણું",
)

GUJARATI = _indic_table(
    "gu",
    "Gujarati",
    zero="શૂન્ય",
    negative="ઋણ",
    builder=TripletBuilder(ones=GU_BELOW_HUNDRED[:10], hundred="સો", below_hundred=GU_BELOW_HUNDRED),
    scales=("હજાર", "લાખ", "કરોડ", "અબજ", "ખરબ", "નીલ", "પદ્મ", "શંખ"),
    decimal_word="દશાંશ",
    ordinal=SuffixOrdinal(
        suffix=_suffixed("મું"),
        numbers={1: "પહેલું", 2: "બીજું", 3: "ત્રીજું", 4: "ચોથું", 5: "પાંચમું", 6: "છઠ્ઠું"},
    ),
    currency=_rupees(
        PluralForms(one="રૂપિયો", other="રૂપિયા"),
        PluralForms(one="પૈસો", other="પૈસા"),
    ),
)


# =============================================================================
# Kannada
# =============================================================================

KN_BELOW_HUNDRED = (
    "ಸೊನ್ನೆ", "ಒಂದು", "ಎರಡು", "ಮೂರು", "ನಾಲ್ಕು", "ಐದು", "ಆರು", "ಏಳು", "ಎಂಟು", "ಒಂಬತ್ತು",
    "ಹತ್ತು", "ಹನ್ನೊಂದು", "ಹನ್ನೆರಡು", "ಹದಿಮೂರು", "ಹದಿನಾಲ್ಕು", "ಹದಿನೈದು", "ಹದಿನಾರು", "ಹದಿನೇಳು", "ಹದಿನೆಂಟು", "ಹತ್ತೊಂಬತ್ತು",
    "ಇಪ್ಪತ್ತು", "ಇಪ್ಪತ್ತೊಂದು", "ಇಪ್ಪತ್ತೆರಡು", "ಇಪ್ಪತ್ತಮೂರು", "ಇಪ್ಪತ್ತನಾಲ್ಕು", "ಇಪ್ಪತ್ತೈದು", "ಇಪ್ಪತ್ತಾರು", "ಇಪ್ಪತ್ತೇಳು", "ಇಪ್ಪತ್ತೆಂಟು", "ಇಪ್ಪತ್ತೊಂಬತ್ತು",
    "ಮೂವತ್ತು", "ಮೂವತ್ತೊಂದು", "ಮೂವತ್ತೆರಡು", "ಮೂವತ್ತಮೂರು", "ಮೂವತ್ತನಾಲ್ಕು", "ಮೂವತ್ತೈದು", "ಮೂವತ್ತಾರು", "ಮೂವತ್ತೇಳು", "ಮೂವತ್ತೆಂಟು", "ಮೂವತ್ತೊಂಬತ್ತು",
    "ನಲವತ್ತು", "ನಲವತ್ತೊಂದು", "ನಲವತ್ತೆರಡು", "ನಲವತ್ತಮೂರು", "ನಲವತ್ತನಾಲ್ಕು", "ನಲವತ್ತೈದು", "ನಲವತ್ತಾರು", "ನಲವತ್ತೇಳು", "ನಲವತ್ತೆಂಟು", "ನಲವತ್ತೊಂಬತ್ತು",
    "ಐವತ್ತು", "ಐವತ್ತೊಂದು", "ಐವತ್ತೆರಡು", "ಐವತ್ತಮೂರು", "ಐವತ್ತನಾಲ್ಕು", "ಐವತ್ತೈದು", "ಐವತ್ತಾರು", "ಐವತ್ತೇಳು", "ಐವತ್ತೆಂಟು", "ಐವತ್ತೊಂಬತ್ತು",
    "ಅರವತ್ತು", "ಅರವತ್ತೊಂದು", "ಅರವತ್ತೆರಡು", "ಅರವತ್ತಮೂರು", "ಅರವತ್ತನಾಲ್ಕು", "ಅರವತ್ತೈದು", "ಅರವತ್ತಾರು", "ಅರವತ್ತೇಳು", "ಅರವತ್ತೆಂಟು", "ಅರವತ್ತೊಂಬತ್ತು",
    "ಎಪ್ಪತ್ತು", "ಎಪ್ಪತ್ತೊಂದು", "ಎಪ್ಪತ್ತೆರಡು", "ಎಪ್ಪತ್ತಮೂರು", "ಎಪ್ಪತ್ತನಾಲ್ಕು", "ಎಪ್ಪತ್ತೈದು", "ಎಪ್ಪತ್ತಾರು", "ಎಪ್ಪತ್ತೇಳು", "ಎಪ್ಪತ್ತೆಂಟು", "ಎಪ್ಪತ್ತೊಂಬತ್ತು",
    "ಎಂಬತ್ತು", "ಎಂಬತ್ತೊಂದು", "ಎಂಬತ್ತೆರಡು", "ಎಂಬತ್ತಮೂರು", "ಎಂಬತ್ತನಾಲ್ಕು", "ಎಂಬತ್ತೈದು", "ಎಂಬತ್ತಾರು", "ಎಂಬತ್ತೇಳು", "ಎಂಬತ್ತೆಂಟು", "ಎಂಬತ್ತೊಂಬತ್ತು",
    "ತೊಂಬತ್ತು", "ತೊಂಬತ್ತೊಂದು", "ತೊಂಬತ್ತೆರಡು", "ತೊಂಬತ್ತಮೂರು", "ತೊಂಬತ್ತನಾಲ್ಕು", "ತೊಂಬತ್ತೈದು", "ತೊಂಬತ್ತಾರು", "ತೊಂಬತ್ತೇಳು", "ತೊಂಬತ್ತೆಂಟು", "ತೊಂಬತ್ತೊಂಬತ್ತು",
)

KANNADA = _indic_table(
    "kn",
    "Kannada",
    zero="ಸೊನ್ನೆ",
    negative="ಋಣಾತ್ಮಕ",
    builder=TripletBuilder(ones=KN_BELOW_HUNDRED[:10], hundred="ನೂರು", below_hundred=KN_BELOW_HUNDRED),
    scales=("ಸಾವಿರ", "ಲಕ್ಷ", "ಕೋಟಿ", "ಅಬ್ಜ", "ಖರ್ವ", "ನೀಲ", "ಪದ್ಮ", "ಶಂಖ"),
    decimal_word="ದಶಮಾಂಶ",
    ordinal=SuffixOrdinal(
        suffix=_suffixed("ನೇ"),
        numbers={1: "ಮೊದಲನೇ", 2: "ಎರಡನೇ", 3: "ಮೂರನೇ", 4: "ನಾಲ್ಕನೇ", 5: "ಐದನೇ", 6: "ಆರನೇ"},
    ),
    currency=_rupees(
        PluralForms(one="ರೂಪಾಯಿ", other="ರೂಪಾಯಿಗಳು"),
        PluralForms(one="ಪೈಸೆ", other="ಪೈಸೆಗಳು"),
    ),
)


# =============================================================================
# Punjabi
# =============================================================================

PA_BELOW_HUNDRED = (
    "ਸਿਫ਼ਰ", "ਇੱਕ", "ਦੋ", "ਤਿੰਨ", "ਚਾਰ", "ਪੰਜ", "ਛੇ", "ਸੱਤ", "ਅੱਠ", "ਨੌਂ",
    "ਦੱਸ", "ਗਿਆਰਾਂ", "ਬਾਰਾਂ", "ਤੇਰਾਂ", "ਚੌਦਾਂ", "ਪੰਦਰਾਂ", "ਸੋਲਾਂ", "ਸਤਾਰਾਂ", "ਅਠਾਰਾਂ", "ਉੱਨੀ",
    "ਵੀਹ", "ਇੱਕੀ", "ਬਾਈ", "ਤੇਈ", "ਚੌਬੀ", "ਪੱਚੀ", "ਛੱਬੀ", "ਸਤਾਈ", "ਅਠਾਈ", "ਉਨੱਤੀ",
    "ਤੀਹ", "ਇਕੱਤੀ", "ਬੱਤੀ", "ਤੇਤੀ", "ਚੌਂਤੀ", "ਪੈਂਤੀ", "ਛੱਤੀ", "ਸੈਂਤੀ", "ਅਠੱਤੀ", "ਉਨਤਾਲੀ",
    "ਚਾਲੀ", "ਇਕਤਾਲੀ", "ਬਿਆਲੀ", "ਤਿਰਤਾਲੀ", "ਚੁਵਾਲੀ", "ਪੰਤਾਲੀ", "ਛਿਆਲੀ", "ਸੈਂਤਾਲੀ", "ਅਠਤਾਲੀ", "ਉਨੰਜਾ",
    "ਪੰਜਾਹ", "ਇਕਵੰਜਾ", "ਬਵੰਜਾ", "ਤਰਵੰਜਾ", "ਚੁਰਵੰਜਾ", "ਪੰਜਵੰਜਾ", "ਛਪੰਜਾ", "ਸੱਤਵੰਜਾ", "ਅਠਵੰਜਾ", "ਉਨਾਹਠ",
    "ਸੱਠ", "ਇਕਾਹਠ", "ਬਾਹਠ", "ਤਰਸਠ", "ਚੌਂਸਠ", "ਪੈਂਸਠ", "ਛਿਆਸਠ", "ਸੜਸਠ", "ਅੜਸਠ", "ਉਣਹੱਤਰ",
    "ਸਤੱਰ", "ਇਕਹੱਤਰ", "ਬਹੱਤਰ", "ਤਹੱਤਰ", "ਚੌਹੱਤਰ", "ਪੰਝਹੱਤਰ", "ਛਿਹੱਤਰ", "ਸਤੱਤਰ", "ਅਠੱਤਰ", "ਉਨਾਸੀ",
    "ਅੱਸੀ", "ਇਕਿਆਸੀ", "ਬਿਆਸੀ", "ਤਰਿਆਸੀ", "ਚੌਰਿਆਸੀ", "ਪਚਾਸੀ", "ਛਿਆਸੀ", "ਸੱਤਾਸੀ", "ਅਠਾਸੀ", "ਨਵਾਸੀ",
    "ਨੱਬੇ", "ਇਕਾਨਵੇਂ", "ਬਾਨਵੇਂ", "ਤਰਾਨਵੇਂ", "ਚੁਰਾਨਵੇਂ", "ਪੰਚਾਨਵੇਂ", "ਛਿਆਨਵੇਂ", "ਸਤਾਨਵੇਂ", "ਅਠਾਨਵੇਂ", "ਨਿਨਾਨਵੇਂ",
)

PUNJABI = _indic_table(
    "pa",
    "Punjabi",
    zero="ਸਿਫ਼ਰ",
    negative="ਮਾਇਨਸ",
    builder=TripletBuilder(ones=PA_BELOW_HUNDRED[:10], hundred="ਸੌ", below_hundred=PA_BELOW_HUNDRED),
    scales=("ਹਜ਼ਾਰ", "ਲੱਖ", "ਕਰੋੜ", "ਅਰਬ", "ਖਰਬ", "ਨੀਲ", "ਪਦਮ", "ਸ਼ੰਖ"),
    decimal_word="ਦਸ਼ਮਲਵ",
)

TABLES = (
    BENGALI,
    BENGALI.derive("bn-BD", "Bengali (Bangladesh)"),
    TAMIL,
    TAMIL.derive("ta-IN", "Tamil (India)"),
    TELUGU,
    TELUGU.derive("te-IN", "Telugu (India)"),
    URDU,
    URDU.derive("ur-PK", "Urdu (Pakistan)"),
    MARATHI,
    MARATHI.derive("mr-IN", "Marathi (India)"),
    GUJARATI,
    GUJARATI.derive("gu-IN", "Gujarati (India)"),
    KANNADA,
    KANNADA.derive("kn-IN", "Kannada (India)"),
    PUNJABI,
    PUNJABI.derive("pa-IN", "Punjabi (India)"),
)
