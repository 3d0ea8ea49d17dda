"""
Starred Patterns

Rewrites a word so that letters which cannot be affix (or infix) letters
become a joker. The joker positions of a starred stem are the candidate
radicals of the root.
"""

from dataclasses import dataclass

from .config import StemmerConfig
from .letters import ALEF, ALEF_MADDA, DAD, DAL, HAMZA, TAH, TEH, TEH_GROUP, TEH_MARBUTA, ZAIN
from .normalize import strip_tashkeel, strip_tatweel


@dataclass
class StarWindow:
    """Result of the window estimate: the starred word and the stem bounds."""
    starword: str
    left: int
    right: int


def prepare_word(word: str) -> str:
    """Unvocalized form used for all offsets: no harakat, no tatweel, آ spelled ءا."""
    word = strip_tatweel(strip_tashkeel(word))
    return word.replace(ALEF_MADDA, HAMZA + ALEF)


class StarTransform:
    """
    Starred-pattern builder for one configuration.

    Usage:
        stars = StarTransform(StemmerConfig())
        window = stars.estimate_window('الكاتب')
        window.starword, window.left, window.right  # ('ال*ا**', 2, 6)
    """

    def __init__(self, config: StemmerConfig):
        self.config = config
        self.joker = config.joker
        self.prefixes = set(config.prefix_list)
        self.suffixes = set(config.suffix_list)

    def mask(self, text: str, letters: str) -> str:
        """Replace every character outside `letters` by the joker."""
        return ''.join(char if char in letters else self.joker for char in text)

    def estimate_window(self, word: str) -> StarWindow:
        """
        Estimate where the stem lies before any trie lookup.

        Letters outside the prefix and suffix classes are radicals, so the
        first and last of them bound the stem. The prefix and suffix texts
        are then trimmed down to known list entries.
        """
        config = self.config
        word = prepare_word(word)
        starred = self.mask(word, config.prefix_letters + config.suffix_letters)
        left = starred.find(self.joker)
        right = starred.rfind(self.joker)

        if left >= 0:
            left = min(left, config.max_prefix_length - 1)
            right = max(right + 1, len(word) - config.max_suffix_length)
            starred = (
                self.mask(word[:left], config.prefix_letters)
                + self.mask(word[left:right], config.infix_letters)
                + self.mask(word[right:], config.suffix_letters)
            )
            left = starred.find(self.joker)
            right = starred.rfind(self.joker)

        if left < 0:
            left = max(0, min(config.max_prefix_length, len(word) - 2))
            right = -1

        prefix = word[:left]
        while prefix and prefix not in self.prefixes:
            prefix = prefix[:-1]

        if right < 0:
            suffix_start = max(len(prefix), len(word) - config.max_suffix_length)
        else:
            suffix_start = right + 1
        suffix = word[suffix_start:]
        while suffix and suffix not in self.suffixes:
            suffix = suffix[1:]

        left = len(prefix)
        right = len(word) - len(suffix)
        starword = prefix + self.star_stem(word, left, right) + suffix
        return StarWindow(starword=starword, left=left, right=right)

    def star_stem(self, word: str, left: int, right: int) -> str:
        """Starred form of `word[left:right]`; infix letters stay visible."""
        stem = word[left:right]
        if not self.config.infix_letters:
            return self.joker * len(stem)
        starred = self.mask(stem, self.config.infix_letters + TEH_MARBUTA)
        return self.handle_teh_infix(stem, starred)

    def handle_teh_infix(self, stem: str, starred: str) -> str:
        """
        Decide whether Teh, Tah and Dal are infixes or radicals.

        They count as infixes only in a four-letter stem: Teh in the first
        two places, Tah right after Dad (اضطرب), Dal right after Zain (ازدهر).
        Everywhere else they are radicals.
        """
        key_stem = starred.replace(TEH_MARBUTA, '')
        if len(key_stem) != 4:
            return ''.join(self.joker if char in TEH_GROUP else char for char in starred)

        head, tail = starred[:2], starred[2:]
        tail = tail.replace(TEH, self.joker)

        if stem.startswith(DAD + TAH):
            tail = tail.replace(TAH, self.joker)
        else:
            head = head.replace(TAH, self.joker)
            tail = tail.replace(TAH, self.joker)

        if stem.startswith(ZAIN + DAL):
            tail = tail.replace(DAL, self.joker)
        else:
            head = head.replace(DAL, self.joker)
            tail = tail.replace(DAL, self.joker)

        return head + tail
