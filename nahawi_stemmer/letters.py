"""
Arabic Letter Constants

Letters the stemmer refers to by name: hamza forms, alef variants,
the Teh group, weak letters and the harakat.
"""

# Hamza forms
HAMZA = 'ء'
ALEF_MADDA = 'آ'
ALEF_HAMZA_ABOVE = 'أ'
WAW_HAMZA = 'ؤ'
ALEF_HAMZA_BELOW = 'إ'
YEH_HAMZA = 'ئ'
HAMZA_ABOVE = '\u0654'
HAMZA_BELOW = '\u0655'

# Letters
ALEF = 'ا'
BEH = 'ب'
TEH_MARBUTA = 'ة'
TEH = 'ت'
DAL = 'د'
ZAIN = 'ز'
SEEN = 'س'
DAD = 'ض'
TAH = 'ط'
FEH = 'ف'
KAF = 'ك'
LAM = 'ل'
MEEM = 'م'
NOON = 'ن'
HEH = 'ه'
WAW = 'و'
ALEF_MAKSURA = 'ى'
YEH = 'ي'

TATWEEL = '\u0640'

# Harakat (tashkeel)
FATHATAN = '\u064b'
DAMMATAN = '\u064c'
KASRATAN = '\u064d'
FATHA = '\u064e'
DAMMA = '\u064f'
KASRA = '\u0650'
SHADDA = '\u0651'
SUKUN = '\u0652'

TASHKEEL = (FATHATAN, DAMMATAN, KASRATAN, FATHA, DAMMA, KASRA, SHADDA, SUKUN)

# Lam-Alef ligatures
LAM_ALEF = '\ufefb'
LAM_ALEF_HAMZA_ABOVE = '\ufef7'
LAM_ALEF_HAMZA_BELOW = '\ufef9'
LAM_ALEF_MADDA_ABOVE = '\ufef5'

ALEFAT = (ALEF_MADDA, ALEF_HAMZA_ABOVE, ALEF_HAMZA_BELOW, HAMZA_ABOVE, HAMZA_BELOW)
HAMZAT = (WAW_HAMZA, YEH_HAMZA)
LAM_ALEFAT = (LAM_ALEF, LAM_ALEF_HAMZA_ABOVE, LAM_ALEF_HAMZA_BELOW, LAM_ALEF_MADDA_ABOVE)

# Weak letters
WEAK_LETTERS = (ALEF, WAW, YEH, ALEF_MAKSURA)

# Letters that double as verb-pattern augments and radicals
TEH_GROUP = (TEH, TAH, DAL)
