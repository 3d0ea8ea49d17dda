"""
Configuration for the Arabic light stemmer.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from .data import (
    DEFAULT_INFIX_LETTERS, DEFAULT_JOKER, DEFAULT_MAX_PREFIX, DEFAULT_MAX_SUFFIX,
    DEFAULT_MIN_STEM, DEFAULT_PREFIX_LETTERS, DEFAULT_PREFIX_LIST,
    DEFAULT_SUFFIX_LETTERS, DEFAULT_SUFFIX_LIST, NOUN_AFFIX_LIST, ROOTS,
    VERB_AFFIX_LIST, VERBS,
)

# A stem is never shorter than two letters
MIN_ADMISSIBLE_STEM = 2


@dataclass(frozen=True)
class StemmerConfig:
    """
    Immutable stemmer configuration.

    Changing a field means building a new value (see `with_changes`);
    the owning stemmer rebuilds whatever depends on the changed fields.
    """

    # Letter classes
    prefix_letters: str = DEFAULT_PREFIX_LETTERS
    suffix_letters: str = DEFAULT_SUFFIX_LETTERS
    infix_letters: str = DEFAULT_INFIX_LETTERS

    # Limits
    max_prefix_length: int = DEFAULT_MAX_PREFIX
    max_suffix_length: int = DEFAULT_MAX_SUFFIX
    min_stem_length: int = DEFAULT_MIN_STEM

    # Wildcard used in starred patterns
    joker: str = DEFAULT_JOKER

    # Affixes and dictionaries
    prefix_list: Tuple[str, ...] = DEFAULT_PREFIX_LIST
    suffix_list: Tuple[str, ...] = DEFAULT_SUFFIX_LIST
    roots: Tuple[str, ...] = ROOTS
    noun_affixes: FrozenSet[str] = NOUN_AFFIX_LIST
    verb_affixes: FrozenSet[str] = VERB_AFFIX_LIST
    verbs: Tuple[str, ...] = VERBS

    # None selects the bundled stopword table
    stopwords_path: Optional[Path] = None

    def __post_init__(self):
        """Coerce list-like fields so the config stays hashable."""
        for name in ('prefix_list', 'suffix_list', 'roots', 'verbs'):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        for name in ('noun_affixes', 'verb_affixes'):
            object.__setattr__(self, name, frozenset(getattr(self, name)))

        # The joker is a single character
        joker = self.joker[:1] if self.joker else DEFAULT_JOKER
        object.__setattr__(self, 'joker', joker)

        object.__setattr__(self, 'min_stem_length', max(self.min_stem_length, MIN_ADMISSIBLE_STEM))

        if self.stopwords_path is not None:
            object.__setattr__(self, 'stopwords_path', Path(self.stopwords_path))

    @property
    def valid_affixes(self) -> List[str]:
        """All valid prefix-suffix pairs, nouns and verbs together."""
        return sorted(self.noun_affixes | self.verb_affixes)

    def with_changes(self, **changes) -> 'StemmerConfig':
        """Return a new config with the given fields replaced."""
        return replace(self, **changes)

    def changed_fields(self, other: 'StemmerConfig') -> List[str]:
        """Names of the fields whose values differ from `other`."""
        return [f.name for f in fields(self) if getattr(self, f.name) != getattr(other, f.name)]
