"""
Nahawi Arabic Light Stemmer

Affix stripping and root extraction for Arabic words:
- Prefix/suffix tries over configurable affix lists
- Segmentation into every admissible (prefix, stem, suffix) split
- Noun and verb affixation rules to validate splits
- Root extraction from starred patterns, with weak-letter reconstruction
- Stopword lookup for closed-class words
"""

from functools import lru_cache
from typing import Optional

from .config import StemmerConfig
from .roots import RootDictionary, RootExtractor, normalize_root
from .segmenter import Segmentation, Segmenter
from .stamps import VerbStampRegistry, normalize_verb
from .stars import StarTransform, StarWindow
from .stemmer import ArabicLightStemmer, Candidate
from .stopwords import StopwordTable
from .trie import AffixTrie, TrieNode
from .validator import AffixValidator

__version__ = "1.0.0"
__all__ = [
    'ArabicLightStemmer',
    'StemmerConfig',
    'Candidate',
    'AffixTrie',
    'StarTransform',
    'Segmenter',
    'AffixValidator',
    'RootExtractor',
    'StopwordTable',
    'light_stem',
    'get_root',
]


@lru_cache(maxsize=8)
def _stemmer_for(config: StemmerConfig) -> ArabicLightStemmer:
    return ArabicLightStemmer(config)


def light_stem(word: str, config: Optional[StemmerConfig] = None) -> str:
    """
    Stem an Arabic word.

    Usage:
        light_stem("الكاتب")  # كاتب
    """
    return _stemmer_for(config or StemmerConfig()).light_stem(word)


def get_root(word: str, config: Optional[StemmerConfig] = None) -> str:
    """Root of an Arabic word ('' when unknown)."""
    return _stemmer_for(config or StemmerConfig()).get_root(word)
