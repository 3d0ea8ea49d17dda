"""
Arabic Stemming Data

Static linguistic data consumed by the light stemmer:
- Letter classes for prefixes, suffixes and infixes
- Valid prefix-suffix pairs for nouns and verbs
- Prefix and suffix lists (derived from the pairs)
- Root dictionary
- Verb list for verb stamps
"""

from typing import FrozenSet, Iterable, Tuple

# =============================================================================
# LETTER CLASSES AND LIMITS
# =============================================================================

DEFAULT_PREFIX_LETTERS = 'اأبتسفكلنوي'
DEFAULT_SUFFIX_LETTERS = 'اةتكمنهوي'
DEFAULT_INFIX_LETTERS = 'اتطدوي'

DEFAULT_MAX_PREFIX = 5
DEFAULT_MAX_SUFFIX = 6
DEFAULT_MIN_STEM = 2
DEFAULT_JOKER = '*'

# =============================================================================
# PROCLITICS AND ENCLITICS
# =============================================================================

CONJUNCTIONS = ('', 'و', 'ف')

# Prepositions attached to indefinite nouns
NOUN_PROCLITICS = ('', 'ب', 'ك', 'ل')

# Definite article, alone or fused with a preposition (ل + ال = لل)
DEFINITE_PROCLITICS = ('ال', 'بال', 'كال', 'لل')

# Number and gender inflections
NOUN_INFLECTIONS = ('', 'ة', 'ات', 'ان', 'ين', 'ون', 'تان', 'تين', 'ية', 'يات')

# Possessive pronouns
NOUN_ENCLITICS = ('ه', 'ها', 'هم', 'هما', 'هن', 'ك', 'كم', 'كما', 'كن', 'ي', 'نا')

# Inflections change shape before an enclitic (كتابة → كتابته, معلمون → معلموه)
NOUN_INFLECTION_BEFORE_ENCLITIC = {
    '': '',
    'ة': 'ت',
    'ات': 'ات',
    'ان': 'ا',
    'ين': 'ي',
    'ون': 'و',
    'تان': 'تا',
    'تين': 'تي',
    'ية': 'يت',
    'يات': 'يات',
}

# Future seen and lam of command before the present tense marker
VERB_PROCLITICS = ('', 'س', 'ل')
PRESENT_MARKERS = ('أ', 'ت', 'ن', 'ي')

PRESENT_SUFFIXES = ('', 'ان', 'ون', 'ين', 'ن', 'ا', 'وا')
PAST_SUFFIXES = ('', 'ت', 'تا', 'ا', 'وا', 'ن', 'نا', 'تم', 'تما', 'تن')

# Object pronouns
VERB_ENCLITICS = ('ه', 'ها', 'هم', 'هما', 'هن', 'ك', 'كم', 'كما', 'كن', 'ني', 'نا')

# Subject suffixes change shape before an object (كتبوا → كتبوه, كتبتم → كتبتموه)
VERB_SUFFIX_BEFORE_ENCLITIC = {
    'وا': 'و',
    'تم': 'تمو',
}


def _noun_suffixes() -> Tuple[str, ...]:
    suffixes = list(NOUN_INFLECTIONS)
    for inflection in NOUN_INFLECTIONS:
        joined = NOUN_INFLECTION_BEFORE_ENCLITIC[inflection]
        suffixes.extend(joined + enclitic for enclitic in NOUN_ENCLITICS)
    return tuple(suffixes)


def _verb_suffixes(subjects: Iterable[str]) -> Tuple[str, ...]:
    suffixes = []
    for subject in subjects:
        suffixes.append(subject)
        joined = VERB_SUFFIX_BEFORE_ENCLITIC.get(subject, subject)
        suffixes.extend(joined + enclitic for enclitic in VERB_ENCLITICS)
    return tuple(suffixes)


def _pairs(prefixes: Iterable[str], suffixes: Iterable[str]) -> FrozenSet[str]:
    suffixes = tuple(suffixes)
    return frozenset(f"{prefix}-{suffix}" for prefix in prefixes for suffix in suffixes)


# =============================================================================
# VALID AFFIX PAIRS
# =============================================================================

NOUN_AFFIX_LIST: FrozenSet[str] = (
    _pairs(
        (conj + proclitic for conj in CONJUNCTIONS for proclitic in NOUN_PROCLITICS),
        _noun_suffixes(),
    )
    | _pairs(
        (conj + article for conj in CONJUNCTIONS for article in DEFINITE_PROCLITICS),
        NOUN_INFLECTIONS,
    )
)

VERB_AFFIX_LIST: FrozenSet[str] = (
    _pairs(
        (conj + proclitic + marker
         for conj in CONJUNCTIONS
         for proclitic in VERB_PROCLITICS
         for marker in PRESENT_MARKERS),
        _verb_suffixes(PRESENT_SUFFIXES),
    )
    | _pairs(CONJUNCTIONS, _verb_suffixes(PAST_SUFFIXES))
)

# Prefix and suffix lists are the two halves of every valid pair
DEFAULT_PREFIX_LIST: Tuple[str, ...] = tuple(sorted(
    {affix.split('-', 1)[0] for affix in NOUN_AFFIX_LIST | VERB_AFFIX_LIST}
))
DEFAULT_SUFFIX_LIST: Tuple[str, ...] = tuple(sorted(
    {affix.split('-', 1)[1] for affix in NOUN_AFFIX_LIST | VERB_AFFIX_LIST}
))

# =============================================================================
# ROOT DICTIONARY
# =============================================================================

ROOTS: Tuple[str, ...] = (
    # أ
    'أبد', 'أثر', 'أجر', 'أجل', 'أخذ', 'أخر', 'أدب', 'أذن', 'أرض', 'أسس',
    'أصل', 'أكل', 'ألف', 'أمر', 'أمل', 'أمن', 'أنس', 'أهل', 'أول',
    # ب
    'بحث', 'بحر', 'بدأ', 'بدل', 'برد', 'برز', 'برك', 'بسط', 'بعث', 'بعد',
    'بقي', 'بلغ', 'بني', 'بيت', 'بين', 'بيع',
    # ت - ث
    'تبع', 'ترك', 'تعب', 'تمم', 'ثبت', 'ثقف', 'ثمر',
    # ج
    'جبل', 'جدد', 'جرى', 'جلس', 'جمع', 'جمل', 'جهد', 'جوب', 'جيء',
    # ح
    'حبب', 'حدث', 'حدد', 'حرب', 'حرر', 'حرك', 'حسب', 'حسن', 'حضر', 'حفظ',
    'حقق', 'حكم', 'حكي', 'حلل', 'حمل', 'حوج', 'حول', 'حيي',
    # خ
    'خبر', 'خدم', 'خرج', 'خطط', 'خلف', 'خلق', 'خوف',
    # د - ذ
    'دخل', 'درس', 'دعو', 'دفع', 'دلل', 'دور', 'دول', 'ذكر', 'ذهب',
    # ر
    'رأس', 'رأي', 'ربط', 'رجع', 'رجل', 'ردد', 'رسل', 'رسم', 'رفع', 'رقم',
    'ركب', 'رمي', 'روي',
    # ز - س
    'زرع', 'زور', 'زيد', 'سأل', 'سبب', 'سجل', 'سعد', 'سعي', 'سفر', 'سكن',
    'سلم', 'سمع', 'سهل', 'سير',
    # ش - ص
    'شدد', 'شرب', 'شرح', 'شرك', 'شعب', 'شعر', 'شغل', 'شكل', 'شهد', 'شهر',
    'شيء', 'صبح', 'صدر', 'صدق', 'صعب', 'صعد', 'صغر', 'صلح', 'صنع', 'صور',
    'صير',
    # ض - ظ
    'ضرب', 'ضعف', 'ضمن', 'طبع', 'طرق', 'طلب', 'طور', 'طير', 'ظهر',
    # ع
    'عبر', 'عدد', 'عدل', 'عرب', 'عرف', 'عرض', 'عشر', 'عطي', 'عقد', 'عقل',
    'علق', 'علم', 'عمل', 'عني', 'عود', 'عيش',
    # غ - ف
    'غرب', 'غلق', 'غير', 'غيب', 'فتح', 'فرح', 'فرق', 'فشل', 'فضل', 'فعل',
    'فقد', 'فكر', 'فهم',
    # ق
    'قبل', 'قتل', 'قدر', 'قدم', 'قرأ', 'قرب', 'قرر', 'قسم', 'قصد', 'قصر',
    'قطع', 'قلب', 'قلل', 'قول', 'قوم', 'قوي',
    # ك
    'كبر', 'كتب', 'كثر', 'كرم', 'كسر', 'كشف', 'كلم', 'كمل', 'كون',
    # ل - م
    'لبس', 'لعب', 'لغو', 'لقي', 'لمس', 'مدد', 'مرر', 'مشي', 'ملك', 'منع',
    'موت',
    # ن
    'نجح', 'نزل', 'نشر', 'نصر', 'نظر', 'نظم', 'نفع', 'نقل', 'نوم',
    # هـ - و
    'هدي', 'همم', 'وجد', 'وجه', 'وصف', 'وصل', 'وضع', 'وطن', 'وعد', 'وقت',
    'وقف', 'ولد',
    # ي
    'يسر', 'يمن',
    # Quadriliteral
    'ترجم', 'دحرج', 'زلزل', 'طمأن', 'وسوس',
)

# =============================================================================
# VERB LIST (VERB STAMPS)
# =============================================================================

# Canonical past-tense verbs; normalized into stamps when the registry loads.
VERBS: Tuple[str, ...] = (
    # Form I
    'أخذ', 'أكل', 'أمر', 'بحث', 'بدأ', 'بعث', 'بقي', 'بلغ', 'بنى', 'ترك',
    'ثبت', 'جرى', 'جلس', 'جمع', 'حدث', 'حسب', 'حضر', 'حفظ', 'حكم', 'حمل',
    'خرج', 'خلق', 'دخل', 'درس', 'دعا', 'دفع', 'ذكر', 'ذهب', 'رأى', 'ربط',
    'رجع', 'رسم', 'رفع', 'ركب', 'رمى', 'زار', 'زرع', 'سأل', 'سار', 'سعى',
    'سكن', 'سمع', 'شرب', 'شرح', 'شعر', 'شغل', 'شهد', 'صار', 'صدر', 'صدق',
    'صعد', 'صنع', 'ضرب', 'طبع', 'طلب', 'طار', 'ظهر', 'عاد', 'عاش', 'عبر',
    'عرف', 'عرض', 'عقد', 'علم', 'عمل', 'غاب', 'فتح', 'فرح', 'فشل', 'فعل',
    'فقد', 'فهم', 'قال', 'قام', 'قبل', 'قتل', 'قدر', 'قرأ', 'قطع', 'كان',
    'كتب', 'كسر', 'كشف', 'لبس', 'لعب', 'لقي', 'لمس', 'مات', 'مد', 'مر',
    'مشى', 'ملك', 'منع', 'نام', 'نجح', 'نزل', 'نشر', 'نصر', 'نظر', 'نفع',
    'نقل', 'وجد', 'وصف', 'وصل', 'وضع', 'وعد', 'وقف', 'ولد',
    # Form II
    'درّس', 'علّم', 'فكّر', 'قدّم', 'قرّر', 'كرّر', 'نظّم', 'حدّد', 'طوّر',
    'غيّر', 'صوّر', 'جدّد', 'وجّه', 'سجّل',
    # Form III
    'سافر', 'شارك', 'ساعد', 'حاول', 'قابل', 'كاتب', 'تابع', 'راجع', 'ناقش',
    # Form IV
    'أرسل', 'أصبح', 'أعطى', 'أكمل', 'أنتج', 'أعلن', 'أكرم', 'أخبر',
    # Form V
    'تعلّم', 'تكلّم', 'تقدّم', 'تطوّر', 'تحدّث', 'تغيّر', 'تحوّل', 'تأثّر',
    # Form VI
    'تعاون', 'تبادل', 'تكاتب', 'تعامل', 'تضارب',
    # Form VII
    'انتقل', 'انطلق', 'انكسر', 'انقطع', 'انتهى',
    # Form VIII
    'اجتمع', 'اختلف', 'اعتقد', 'اعتمد', 'انتظر', 'اشترك', 'احتاج', 'اضطرب',
    'ازدهر',
    # Form X
    'استخدم', 'استمر', 'استقبل', 'استطاع', 'استعمل',
    # Quadriliteral
    'ترجم', 'دحرج', 'زلزل', 'وسوس',
)
