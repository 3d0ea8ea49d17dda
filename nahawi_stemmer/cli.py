#!/usr/bin/env python3
"""
Command-line stemming.

Usage:
    nahawi-stem الكاتب يكتبون
    nahawi-stem --root --json < words.txt
    nahawi-stem --segments والكتاب
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .config import StemmerConfig
from .stemmer import ArabicLightStemmer


def _read_words(words: List[str]) -> Iterable[str]:
    if words:
        yield from words
        return
    for line in sys.stdin:
        yield from line.split()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Arabic light stemmer')
    parser.add_argument('words', nargs='*', help='Words to stem (stdin when omitted)')
    parser.add_argument('--root', action='store_true', help='Also print the root')
    parser.add_argument('--segments', action='store_true', help='List every candidate segmentation')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    parser.add_argument('--stopwords', type=Path, default=None, help='Alternative stopword JSON table')
    parser.add_argument('--verbose', action='store_true', help='Log debug traces')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s'
    )

    stemmer = ArabicLightStemmer(StemmerConfig(stopwords_path=args.stopwords))

    results = []
    for word in _read_words(args.words):
        result = {'word': word, 'stem': stemmer.light_stem(word)}
        if args.root:
            result['root'] = stemmer.get_root(word)
        if args.segments:
            result['segments'] = [
                {'prefix': c.prefix, 'stem': c.stem, 'suffix': c.suffix,
                 'starstem': c.starstem, 'root': c.root}
                for c in stemmer.get_affix_list(word)
            ]
        results.append(result)

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
        return 0

    for result in results:
        fields = [result['word'], result['stem']]
        if args.root:
            fields.append(result['root'])
        print('\t'.join(fields))
        for segment in result.get('segments', []):
            print(f"  {segment['prefix']}-{segment['stem']}-{segment['suffix']}"
                  f"\t{segment['starstem']}\t{segment['root']}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
