"""
Affix Validation

A segment is kept only if its prefix-suffix pair is a valid noun or verb
affixation and the stem left between them obeys the rules of that word
class.
"""

import logging
from typing import Optional

from .config import StemmerConfig
from .letters import ALEF, ALEF_HAMZA_ABOVE, NOON, TEH, TEH_MARBUTA, YEH
from .segmenter import SegmentMap, Segmentation, left_right
from .stamps import VerbStampRegistry
from .stopwords import StopwordTable

logger = logging.getLogger(__name__)

MAX_VERB_STEM = 6
MAX_NOUN_STEM = 8

# A 5-letter stem not starting with ا/ت cannot follow these present markers
PRESENT_MARKER_LETTERS = (YEH, TEH, NOON, ALEF_HAMZA_ABOVE)

# A stem starting with ا cannot follow these letters (no doubled weak letter)
NO_ALEF_AFTER = (YEH, NOON, TEH, ALEF_HAMZA_ABOVE, ALEF)


class AffixValidator:
    """
    Validates segments and picks the stem.

    Usage:
        validator = AffixValidator(config, verb_stamps, stopwords)
        validator.verify_affix('ي', 'ون', 'كتب')  # True
    """

    def __init__(self, config: StemmerConfig, verb_stamps: VerbStampRegistry,
                 stopwords: Optional[StopwordTable] = None):
        self.config = config
        self.verb_stamps = verb_stamps
        self.stopwords = stopwords

    def valid_stem(self, stem: str, tag: str = 'noun', prefix: str = '') -> bool:
        """Check a stem against the rules of a word class ('verb' or 'noun')."""
        if not stem:
            return False
        length = len(stem)

        if tag == 'verb':
            if length > MAX_VERB_STEM or length < 2:
                return False
            # Teh Marbuta never appears in a verb
            if TEH_MARBUTA in stem:
                return False
            # Six-letter verbs are استفعل / افعوعل shapes
            if length == 6 and not stem.startswith(ALEF):
                return False
            if length == 5 and not stem.startswith((ALEF, TEH)):
                if prefix.endswith(PRESENT_MARKER_LETTERS):
                    return False
            if stem.startswith(ALEF) and prefix and prefix[-1] in NO_ALEF_AFTER:
                return False
            return self.verb_stamps.is_verb_stamp(stem)

        if tag == 'noun':
            return length < MAX_NOUN_STEM

        return True

    def verify_affix(self, prefix: str, suffix: str, stem: str) -> bool:
        """
        Check that (prefix, suffix) is a valid affixation of `stem`.

        The verb reading is tried first; a noun reading is only consulted
        when the verb reading fails.
        """
        affix = f"{prefix}-{suffix}"
        if affix in self.config.verb_affixes and self.valid_stem(stem, 'verb', prefix):
            return True
        if affix in self.config.noun_affixes and self.valid_stem(stem, 'noun', prefix):
            return True
        return False

    def valid_segments(self, segmentation: Segmentation) -> SegmentMap:
        """Keep the segments whose affixation verifies, grouped by left boundary."""
        word = segmentation.word
        valid: SegmentMap = {}
        for left, right in segmentation.pairs():
            if self.verify_affix(word[:left], word[right:], word[left:right]):
                valid.setdefault(left, []).append((left, right))
        return valid

    def choose_stem(self, word: str, segmentation: Segmentation) -> str:
        """
        Pick the stem of a word.

        Stopwords (exact raw form) short-circuit to their stored stem. If
        no segment verifies, the whole prepared word is the stem.
        """
        if self.stopwords is not None and self.stopwords.is_stopword(word):
            return self.stopwords.stem_of(word)

        prepared = segmentation.word
        valid = self.valid_segments(segmentation)
        if not valid:
            logger.debug(f"No valid segment for {word!r}, keeping the whole word")
            return prepared

        left, right = left_right(valid, self.config.min_stem_length)
        logger.debug(f"Stem of {word!r} at ({left}, {right}) out of {sum(map(len, valid.values()))} valid segments")
        return prepared[left:right]
