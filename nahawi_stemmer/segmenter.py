"""
Word Segmentation

Enumerates every (left, right) boundary pair allowed by the affix tries:
prefix = word[:left], stem = word[left:right], suffix = word[right:].
Offsets are code-point indices into the prepared word.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .trie import AffixTrie

Segment = Tuple[int, int]
SegmentMap = Dict[int, List[Segment]]


def max_offset(offsets: Iterable[int], default: int = -1) -> int:
    """Largest offset, or `default` when there are none."""
    return max(offsets, default=default)


def min_offset(offsets: Iterable[int], default: int = -1) -> int:
    """Smallest offset, or `default` when there are none."""
    return min(offsets, default=default)


def left_right(segments: SegmentMap, min_stem_length: int = 2) -> Tuple[int, int]:
    """
    Pick the default boundary pair of a segment map.

    Takes the longest prefix (largest left boundary) with the shortest
    suffix (smallest right boundary) of the whole map. When that pair
    leaves less than `min_stem_length` letters, the shortest suffix among
    the segments starting at `left` is used instead.
    Returns (-1, -1) for an empty map.
    """
    left = max_offset(start for start, pairs in segments.items() if pairs)
    if left < 0:
        return -1, -1
    right = min_offset(end for pairs in segments.values() for _, end in pairs)
    if right < left + min_stem_length:
        right = min_offset(end for _, end in segments[left])
    return left, right


def iter_segments(segments: SegmentMap) -> List[Segment]:
    """Flatten a segment map into (left, right) pairs, ordered by left then right."""
    return [pair for left in sorted(segments) for pair in sorted(segments[left])]


@dataclass
class Segmentation:
    """All admissible segments of a prepared word, grouped by left boundary."""
    word: str
    segments: SegmentMap = field(default_factory=dict)
    left: int = -1
    right: int = -1

    def __len__(self) -> int:
        return sum(len(pairs) for pairs in self.segments.values())

    def pairs(self) -> List[Segment]:
        return iter_segments(self.segments)


class Segmenter:
    """
    Cross product of prefix and suffix boundaries.

    Usage:
        segmenter = Segmenter(prefix_trie, suffix_trie)
        segmentation = segmenter.segment('يكتبون')
        segmentation.left, segmentation.right  # (1, 4)
    """

    def __init__(self, prefix_trie: AffixTrie, suffix_trie: AffixTrie, min_stem_length: int = 2):
        self.prefix_trie = prefix_trie
        self.suffix_trie = suffix_trie
        self.min_stem_length = min_stem_length

    def segment(self, word: str) -> Segmentation:
        """Segment an already prepared (unvocalized) word."""
        lefts = self.prefix_trie.boundaries(word)
        # The empty suffix is always admissible
        rights = sorted(set(self.suffix_trie.boundaries(word)) | {len(word)})

        segments: SegmentMap = {}
        for left in lefts:
            pairs = [(left, right) for right in rights if right >= left + self.min_stem_length]
            if pairs:
                segments[left] = pairs

        left, right = left_right(segments, self.min_stem_length)
        return Segmentation(word=word, segments=segments, left=left, right=right)
