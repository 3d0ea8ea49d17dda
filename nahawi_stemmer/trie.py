"""
Affix Tries

Character tries over the prefix list (indexed front to back) and the
suffix list (indexed back to front). A lookup walks the word from its
anchored end and reports every boundary where a known affix ends, not
only the longest one.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set


@dataclass
class TrieNode:
    """A trie node; `affixes` is set on nodes where a known affix ends."""
    children: Dict[str, 'TrieNode'] = field(default_factory=dict)
    affixes: Optional[Set[str]] = None

    @property
    def is_terminal(self) -> bool:
        return self.affixes is not None


class AffixTrie:
    """
    Trie of prefixes or suffixes.

    Usage:
        prefixes = AffixTrie.build(['', 'ال', 'وال'])
        prefixes.boundaries('والكتاب')  # [0, 3]

        suffixes = AffixTrie.build(['', 'ون'], reverse=True)
        suffixes.boundaries('يكتبون')  # [4, 6]
    """

    def __init__(self, root: TrieNode, reverse: bool = False, size: int = 0):
        self.root = root
        self.reverse = reverse
        self.size = size

    @classmethod
    def build(cls, affixes: Iterable[str], reverse: bool = False) -> 'AffixTrie':
        """Build a trie from an affix list; suffix tries index each affix backwards."""
        root = TrieNode()
        size = 0
        for affix in affixes:
            node = root
            for char in (reversed(affix) if reverse else affix):
                node = node.children.setdefault(char, TrieNode())
            if node.affixes is None:
                node.affixes = set()
            node.affixes.add(affix)
            size += 1
        return cls(root, reverse=reverse, size=size)

    def __len__(self) -> int:
        return self.size

    def boundaries(self, word: str) -> List[int]:
        """All admissible affix boundaries of `word`, in ascending order."""
        if self.reverse:
            return self.lookup_suffixes(word)
        return self.lookup_prefixes(word)

    def lookup_prefixes(self, word: str) -> List[int]:
        """
        Offsets where a known prefix of `word` ends.

        Offset 0 (empty prefix) is always admissible. A prefix covering the
        whole word is not reported: a stem must remain.
        """
        lefts = {0}
        node = self.root
        for i, char in enumerate(word):
            if node.is_terminal:
                lefts.add(i)
            node = node.children.get(char)
            if node is None:
                break
        return sorted(lefts)

    def lookup_suffixes(self, word: str) -> List[int]:
        """Offsets where a known suffix of `word` starts."""
        rights = set()
        node = self.root
        for depth, char in enumerate(reversed(word)):
            if node.is_terminal:
                rights.add(len(word) - depth)
            node = node.children.get(char)
            if node is None:
                break
        return sorted(rights)
