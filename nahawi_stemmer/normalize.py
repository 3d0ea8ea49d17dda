"""
Arabic Text Normalization

Pure text-to-text helpers used before stemming and inside root
normalization:
- Harakat (tashkeel) and tatweel stripping
- Hamza and Lam-Alef unification
- Common spelling confusions (ة/ه, ى/ي)
"""

import re

from .letters import (
    ALEF, ALEFAT, HAMZA, HAMZAT, HEH, LAM, LAM_ALEFAT,
    ALEF_MAKSURA, TASHKEEL, TATWEEL, TEH_MARBUTA, YEH,
)

HARAKAT_PATTERN = re.compile('[%s]' % ''.join(TASHKEEL))
TATWEEL_PATTERN = re.compile(TATWEEL)
ALEFAT_PATTERN = re.compile('[%s]' % ''.join(ALEFAT))
HAMZAT_PATTERN = re.compile('[%s]' % ''.join(HAMZAT))
LAM_ALEFAT_PATTERN = re.compile('[%s]' % ''.join(LAM_ALEFAT))


def is_vocalized(word: str) -> bool:
    """Check if a word carries any harakat."""
    return bool(HARAKAT_PATTERN.search(word))


def strip_tashkeel(text: str) -> str:
    """Remove harakat (fatha, damma, kasra, tanween, shadda, sukun)."""
    if not text:
        return text
    return HARAKAT_PATTERN.sub('', text)


def strip_tatweel(text: str) -> str:
    """Remove tatweel (elongation) marks."""
    return TATWEEL_PATTERN.sub('', text)


def normalize_hamza(text: str) -> str:
    """Unify hamza forms: alef carriers become ا, waw/yeh carriers become ء."""
    text = ALEFAT_PATTERN.sub(ALEF, text)
    return HAMZAT_PATTERN.sub(HAMZA, text)


def normalize_lamalef(text: str) -> str:
    """Expand Lam-Alef ligatures into two letters."""
    return LAM_ALEFAT_PATTERN.sub(LAM + ALEF, text)


def normalize_spellerrors(text: str) -> str:
    """Fold the usual spelling confusions: ة → ه and ى → ي."""
    text = text.replace(TEH_MARBUTA, HEH)
    return text.replace(ALEF_MAKSURA, YEH)


def normalize_searchtext(text: str) -> str:
    """Full normalization for search and comparison."""
    text = strip_tashkeel(text)
    text = strip_tatweel(text)
    text = normalize_lamalef(text)
    text = normalize_hamza(text)
    return normalize_spellerrors(text)
