"""
Root Extraction

Derives the consonantal root of a stem from its starred pattern:
- joker positions are radicals, the others are pattern letters
- two-letter roots get their weak radical back from the pattern
- candidates from several segmentations are reconciled with the
  root dictionary and a frequency vote
"""

import logging
from collections import Counter
from typing import Iterable, List

from .letters import ALEF, ALEF_MADDA, ALEF_MAKSURA, HAMZA, TEH_MARBUTA, WAW, YEH
from .normalize import normalize_hamza

logger = logging.getLogger(__name__)

MIN_ROOT_LENGTH = 2
MAX_ROOT_LENGTH = 4


def normalize_root(root: str) -> str:
    """آ → ءا, ة dropped, ى → ي, hamza forms unified."""
    root = root.replace(ALEF_MADDA, HAMZA + ALEF)
    root = root.replace(TEH_MARBUTA, '')
    root = root.replace(ALEF_MAKSURA, YEH)
    return normalize_hamza(root)


def restore_weak(text: str) -> str:
    """Spell long vowels as the weak radicals they stand for (قال → قول)."""
    return text.replace(ALEF, WAW).replace(ALEF_MAKSURA, YEH)


def is_root_length_valid(root: str) -> bool:
    return MIN_ROOT_LENGTH <= len(root) <= MAX_ROOT_LENGTH


class RootDictionary:
    """Known roots, compared in normalized form."""

    def __init__(self, roots: Iterable[str]):
        self.roots = {normalize_root(root) for root in roots if root}

    def __len__(self) -> int:
        return len(self.roots)

    def __contains__(self, root: str) -> bool:
        return self.is_root(root)

    def is_root(self, root: str) -> bool:
        return normalize_root(root) in self.roots


class RootExtractor:
    """
    Root extraction for one configuration.

    Usage:
        extractor = RootExtractor(RootDictionary(ROOTS), joker='*')
        extractor.extract_root('كاتب', '*ا**')  # 'كتب'
        extractor.choose_root(['كتب', 'كبو', 'كتب'])  # 'كتب'
    """

    def __init__(self, dictionary: RootDictionary, joker: str = '*'):
        self.dictionary = dictionary
        self.joker = joker

    def extract_root(self, stem: str, starstem: str) -> str:
        """Root of a stem given its starred pattern."""
        # A three-letter stem is its own root
        if len(stem) == 3:
            return normalize_root(self.adjust_root(stem, stem))

        if len(starstem) == len(stem):
            root = ''.join(char for char, star in zip(stem, starstem) if star == self.joker)
        else:
            root = stem

        root = normalize_root(root)
        if len(root) == 2:
            root = self.adjust_root(root, starstem)
        return root

    def adjust_root(self, root: str, starstem: str) -> str:
        """
        Rebuild a missing weak radical from the pattern.

        A three-letter pattern gives the root directly, its long vowels read
        as weak radicals. Otherwise the first and last pattern letters say
        where و or ي was dropped; a pattern that is all jokers at both ends
        means a doubled radical (two letters) or a hollow middle.
        """
        if not starstem:
            return root

        if len(starstem) == 3:
            pattern = restore_weak(starstem)
            if self.joker not in pattern:
                return pattern
            if pattern.count(self.joker) != len(root):
                return root
            radicals = iter(root)
            return ''.join(next(radicals) if char == self.joker else char for char in pattern)

        if len(root) != 2:
            return root

        first, last = starstem[0], starstem[-1]
        if first in (ALEF, WAW):
            return WAW + root
        if first == YEH:
            return YEH + root
        if first == self.joker and last in (ALEF, WAW):
            return root + WAW
        if first == self.joker and last in (ALEF_MAKSURA, YEH):
            return root + YEH
        if first == self.joker and last == self.joker:
            if len(starstem) == 2:
                return root + root[-1]
            return root[0] + WAW + root[1]
        return root

    def most_common(self, roots: List[str]) -> str:
        """
        Most frequent root, three-letter roots first.

        Ties go to the alphabetically first root.
        """
        if not roots:
            return ''
        triliteral = [root for root in roots if len(root) == 3]
        if triliteral:
            roots = triliteral
        counts = Counter(roots)
        return min(counts, key=lambda root: (-counts[root], root))

    def choose_root(self, candidates: Iterable[str]) -> str:
        """
        Reconcile root candidates into one root.

        Candidates outside 2-4 letters are discarded (nothing left gives
        ''). Known roots are preferred when there are any.
        """
        roots = [root for root in candidates if is_root_length_valid(root)]
        if not roots:
            return ''

        known = [root for root in roots if self.dictionary.is_root(root)]
        if known:
            roots = known

        root = self.most_common(roots)
        logger.debug(f"Chose root {root!r} among {len(roots)} candidates")
        return root
