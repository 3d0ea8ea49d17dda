"""
Arabic Light Stemmer
====================

Strips prefixes and suffixes from an Arabic word and infers its root.

Pipeline:
1. Stopwords short-circuit to a stored stem/root
2. Star transform estimates the stem window
3. Affix tries enumerate every admissible (prefix, suffix) split
4. Validation keeps splits that form a valid noun or verb affixation
5. The root is read off the starred stem and reconciled across splits
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .config import StemmerConfig
from .roots import RootDictionary, RootExtractor
from .segmenter import Segmentation, Segmenter
from .stamps import VerbStampRegistry
from .stars import StarTransform, StarWindow, prepare_word
from .stopwords import StopwordTable
from .trie import AffixTrie
from .validator import AffixValidator

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    """One segmentation of a word, with its stem, starred stem and root."""
    prefix: str
    suffix: str
    stem: str
    starstem: str
    left: int
    right: int
    root: str

    @property
    def affix(self) -> str:
        return f"{self.prefix}-{self.suffix}"


class ArabicLightStemmer:
    """
    Configurable Arabic light stemmer.

    Usage:
        stemmer = ArabicLightStemmer()

        stemmer.light_stem("الكاتب")   # كاتب
        stemmer.get_root("يكتبون")     # كتب

        # Reconfigure (rebuilds the affected structures)
        stemmer.set_prefix_list(['', 'ال', 'وال'])
    """

    def __init__(self, config: Optional[StemmerConfig] = None,
                 stopwords: Optional[StopwordTable] = None):
        self.config = config or StemmerConfig()
        self.stopwords = stopwords if stopwords is not None else StopwordTable.load(self.config.stopwords_path)
        self.prefix_trie = None
        self.suffix_trie = None
        self.dictionary = None
        self.verb_stamps = None
        self._rebuild(changed=None)

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    def _rebuild(self, changed: Optional[Iterable[str]]):
        """Rebuild what depends on the changed fields (everything when None)."""
        config = self.config
        changed = set(changed) if changed is not None else None

        if changed is None or 'prefix_list' in changed:
            self.prefix_trie = AffixTrie.build(config.prefix_list)
            logger.info(f"Built prefix trie with {len(self.prefix_trie)} prefixes")
        if changed is None or 'suffix_list' in changed:
            self.suffix_trie = AffixTrie.build(config.suffix_list, reverse=True)
            logger.info(f"Built suffix trie with {len(self.suffix_trie)} suffixes")
        if changed is None or 'roots' in changed:
            self.dictionary = RootDictionary(config.roots)
        if changed is None or 'verbs' in changed:
            self.verb_stamps = VerbStampRegistry(config.verbs)
        if changed is not None and 'stopwords_path' in changed:
            self.stopwords = StopwordTable.load(config.stopwords_path)

        # Cheap views over the config; always rebuilt
        self.stars = StarTransform(config)
        self.segmenter = Segmenter(self.prefix_trie, self.suffix_trie, config.min_stem_length)
        self.validator = AffixValidator(config, self.verb_stamps, self.stopwords)
        self.extractor = RootExtractor(self.dictionary, joker=config.joker)

    def configure(self, **changes) -> StemmerConfig:
        """Swap in a config with the given fields replaced; returns the new config."""
        new_config = self.config.with_changes(**changes)
        changed = new_config.changed_fields(self.config)
        self.config = new_config
        if changed:
            logger.info(f"Reconfigured stemmer: {', '.join(changed)}")
        self._rebuild(changed)
        return new_config

    def get_prefix_letters(self) -> str:
        return self.config.prefix_letters

    def set_prefix_letters(self, letters: str):
        self.configure(prefix_letters=letters)

    def get_suffix_letters(self) -> str:
        return self.config.suffix_letters

    def set_suffix_letters(self, letters: str):
        self.configure(suffix_letters=letters)

    def get_infix_letters(self) -> str:
        return self.config.infix_letters

    def set_infix_letters(self, letters: str):
        self.configure(infix_letters=letters)

    def get_joker(self) -> str:
        return self.config.joker

    def set_joker(self, joker: str):
        """Set the wildcard; only its first character is kept, '' is ignored."""
        if joker:
            self.configure(joker=joker)

    def get_max_prefix_length(self) -> int:
        return self.config.max_prefix_length

    def set_max_prefix_length(self, length: int):
        self.configure(max_prefix_length=length)

    def get_max_suffix_length(self) -> int:
        return self.config.max_suffix_length

    def set_max_suffix_length(self, length: int):
        self.configure(max_suffix_length=length)

    def get_min_stem_length(self) -> int:
        return self.config.min_stem_length

    def set_min_stem_length(self, length: int):
        self.configure(min_stem_length=length)

    def get_prefix_list(self) -> List[str]:
        return list(self.config.prefix_list)

    def set_prefix_list(self, prefixes: Iterable[str]):
        """Replace the prefix list; the prefix trie is rebuilt."""
        self.configure(prefix_list=tuple(prefixes))

    def get_suffix_list(self) -> List[str]:
        return list(self.config.suffix_list)

    def set_suffix_list(self, suffixes: Iterable[str]):
        """Replace the suffix list; the suffix trie is rebuilt."""
        self.configure(suffix_list=tuple(suffixes))

    def get_roots_list(self) -> List[str]:
        return list(self.config.roots)

    def set_roots_list(self, roots: Iterable[str]):
        self.configure(roots=tuple(roots))

    def get_noun_affixes_list(self) -> List[str]:
        return sorted(self.config.noun_affixes)

    def set_noun_affixes_list(self, affixes: Iterable[str]):
        self.configure(noun_affixes=frozenset(affixes))

    def get_verb_affixes_list(self) -> List[str]:
        return sorted(self.config.verb_affixes)

    def set_verb_affixes_list(self, affixes: Iterable[str]):
        self.configure(verb_affixes=frozenset(affixes))

    def get_valid_affixes_list(self) -> List[str]:
        return self.config.valid_affixes

    # =========================================================================
    # STEMMING
    # =========================================================================

    def light_stem(self, word: str) -> str:
        """Stem of a word; the whole (unvocalized) word when nothing can be stripped."""
        if not word:
            return ''

        segmentation = self.segment(word)
        stem = self.validator.choose_stem(word, segmentation)
        logger.debug(f"light_stem({word!r}) = {stem!r}")
        return stem

    def transform_to_stars(self, word: str) -> StarWindow:
        """Starred word and estimated stem window."""
        return self.stars.estimate_window(word)

    def get_starword(self, word: str) -> str:
        return self.transform_to_stars(word).starword

    def get_left(self, word: str) -> int:
        return self.transform_to_stars(word).left

    def get_right(self, word: str) -> int:
        return self.transform_to_stars(word).right

    def segment(self, word: str) -> Segmentation:
        """All admissible segments of a word."""
        segmentation = self.segmenter.segment(prepare_word(word))
        logger.debug(f"Segmented {word!r} into {len(segmentation)} segments")
        return segmentation

    def _bounds(self, word: str, prefix_index: int, suffix_index: int):
        """Explicit boundaries, falling back to the estimated window for negative ones."""
        prepared = prepare_word(word)
        if prefix_index < 0 or suffix_index < 0:
            window = self.transform_to_stars(word)
            left = prefix_index if prefix_index >= 0 else window.left
            right = suffix_index if suffix_index >= 0 else window.right
        else:
            left, right = prefix_index, suffix_index
        left = min(max(left, 0), len(prepared))
        right = min(max(right, left), len(prepared))
        return prepared, left, right

    def get_stem_at(self, word: str, prefix_index: int = -1, suffix_index: int = -1) -> str:
        prepared, left, right = self._bounds(word, prefix_index, suffix_index)
        return prepared[left:right]

    def get_prefix(self, word: str, prefix_index: int = -1) -> str:
        prepared, left, _ = self._bounds(word, prefix_index, len(prepare_word(word)))
        return prepared[:left]

    def get_suffix(self, word: str, suffix_index: int = -1) -> str:
        prepared, _, right = self._bounds(word, 0, suffix_index)
        return prepared[right:]

    def get_affix(self, word: str, prefix_index: int = -1, suffix_index: int = -1) -> str:
        return f"{self.get_prefix(word, prefix_index)}-{self.get_suffix(word, suffix_index)}"

    def get_starstem(self, word: str, prefix_index: int = -1, suffix_index: int = -1) -> str:
        prepared, left, right = self._bounds(word, prefix_index, suffix_index)
        return self.stars.star_stem(prepared, left, right)

    # =========================================================================
    # ROOTS
    # =========================================================================

    def get_affix_list(self, word: str) -> List[Candidate]:
        """Every admissible segmentation of a word, each with its root."""
        segmentation = self.segment(word)
        prepared = segmentation.word
        candidates = []
        for left, right in segmentation.pairs():
            stem = prepared[left:right]
            starstem = self.stars.star_stem(prepared, left, right)
            candidates.append(Candidate(
                prefix=prepared[:left],
                suffix=prepared[right:],
                stem=stem,
                starstem=starstem,
                left=left,
                right=right,
                root=self.extractor.extract_root(stem, starstem),
            ))
        return candidates

    def extract_root(self, stem: str, starstem: Optional[str] = None) -> str:
        """Root of a single stem; the starred pattern is computed when omitted."""
        stem = prepare_word(stem)
        if starstem is None:
            starstem = self.stars.star_stem(stem, 0, len(stem))
        return self.extractor.extract_root(stem, starstem)

    def get_root(self, word: str) -> str:
        """Root of a word ('' when no candidate survives)."""
        if not word:
            return ''
        if self.stopwords.is_stopword(word):
            return self.stopwords.root_of(word)

        candidates = self.get_affix_list(word)
        root = self.extractor.choose_root(candidate.root for candidate in candidates)
        logger.debug(f"get_root({word!r}) = {root!r} from {len(candidates)} candidates")
        return root
