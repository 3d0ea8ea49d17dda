"""
Stopword Table

Closed-class words (particles, pronouns, demonstratives...) are not
stemmed; their stem and root come straight from a static table keyed
on the exact surface form.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .normalize import strip_tashkeel

logger = logging.getLogger(__name__)

DEFAULT_STOPWORDS_PATH = Path(__file__).parent / 'resources' / 'stopwords.json'


class StopwordTable:
    """
    Exact-match stopword lookup.

    Usage:
        stopwords = StopwordTable.load()
        stopwords.is_stopword('وفي')  # True
        stopwords.stem_of('وفي')      # 'في'
    """

    def __init__(self, entries: Dict[str, Dict[str, str]]):
        self.entries = entries

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> 'StopwordTable':
        """Load a `{word: {"stem": ..., "root": ...}}` JSON table."""
        path = Path(path) if path is not None else DEFAULT_STOPWORDS_PATH
        with open(path, 'r', encoding='utf-8') as f:
            entries = json.load(f)
        logger.info(f"Loaded {len(entries)} stopwords from {path}")
        return cls(entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, word: str) -> bool:
        return word in self.entries

    def is_stopword(self, word: str) -> bool:
        return word in self.entries

    def stem_of(self, word: str) -> str:
        """Stored stem without harakat ('' for non-stopwords)."""
        entry = self.entries.get(word)
        if entry is None:
            return ''
        return strip_tashkeel(entry.get('stem', word))

    def root_of(self, word: str) -> str:
        """Stored root; a stopword's root defaults to its stem."""
        entry = self.entries.get(word)
        if entry is None:
            return ''
        if 'root' in entry:
            return strip_tashkeel(entry['root'])
        return self.stem_of(word)
