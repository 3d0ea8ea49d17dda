#!/usr/bin/env python3
"""
Tests for the Nahawi Arabic light stemmer: stems, roots, stopwords
and reconfiguration.
"""

import pytest

from nahawi_stemmer import ArabicLightStemmer, StemmerConfig, StopwordTable, get_root, light_stem


@pytest.fixture(scope='module')
def stemmer():
    return ArabicLightStemmer()


def test_light_stem(stemmer):
    """Prefixes and suffixes are stripped."""
    test_cases = [
        # (word, expected_stem)
        # Definite article
        ("الكاتب", "كاتب"),
        ("والكتاب", "كتاب"),
        # Article + feminine ending
        ("المدرسة", "مدرس"),
        # Present tense
        ("يكتبون", "كتب"),
        ("سيكتبون", "كتب"),
        # Vocalized input
        ("الكَاتِب", "كاتب"),
        # Shortest suffix of any valid split, with the longest prefix
        ("كتبوا", "تب"),
        # Nothing to strip
        ("قال", "قال"),
    ]

    for word, expected in test_cases:
        actual = stemmer.light_stem(word)
        assert actual == expected, f"{word}: expected={expected}, got={actual}"


def test_light_stem_empty(stemmer):
    assert stemmer.light_stem('') == ''
    assert stemmer.get_root('') == ''


def test_light_stem_is_repeatable(stemmer):
    for word in ["الكاتب", "يكتبون", "والكتاب", "المدرسة"]:
        assert stemmer.light_stem(word) == stemmer.light_stem(word)


def test_stopwords_bypass_segmentation(stemmer):
    """Stopwords return their stored stem and root."""
    test_cases = [
        # (word, expected_stem, expected_root)
        ("في", "في", "في"),
        ("وفي", "في", "في"),
        ("فهذا", "هذا", "هذا"),
        ("عليه", "على", "علو"),
    ]

    for word, stem, root in test_cases:
        assert stemmer.light_stem(word) == stemmer.stopwords.stem_of(word) == stem
        assert stemmer.get_root(word) == root


def test_custom_stopword_table():
    stopwords = StopwordTable({"الكاتب": {"stem": "كتب"}})
    stemmer = ArabicLightStemmer(stopwords=stopwords)

    assert stemmer.validator.stopwords is stopwords
    assert stemmer.light_stem("الكاتب") == "كتب"
    # The bundled table (عليه → على) is not consulted
    assert stemmer.light_stem("عليه") != "على"


def test_whole_word_fallback(stemmer):
    """A word too short to split is its own stem."""
    assert stemmer.light_stem("ب") == "ب"
    assert stemmer.get_root("ب") == ""


def test_whole_word_fallback_without_valid_pairs():
    """When no affix pair is valid, the whole word is the stem."""
    config = StemmerConfig(noun_affixes=frozenset(), verb_affixes=frozenset())
    stemmer = ArabicLightStemmer(config)
    assert stemmer.light_stem("الكاتب") == "الكاتب"
    assert stemmer.light_stem("يكتبون") == "يكتبون"


def test_get_root(stemmer):
    test_cases = [
        # (word, expected_root)
        ("يكتبون", "كتب"),
        ("سيكتبون", "كتب"),
        ("الكاتب", "كتب"),
        # Hollow verb: the long vowel stands for و
        ("قال", "قول"),
    ]

    for word, expected in test_cases:
        actual = stemmer.get_root(word)
        assert actual == expected, f"{word}: expected={expected}, got={actual}"


def test_accepted_segments_keep_two_letters(stemmer):
    for word in ["الكاتب", "يكتبون", "سيكتبون", "والكتاب", "المدرسة", "بها"]:
        segmentation = stemmer.segment(word)
        for left, right in segmentation.pairs():
            assert right >= left + 2
        valid = stemmer.validator.valid_segments(segmentation)
        for pairs in valid.values():
            for left, right in pairs:
                assert right >= left + 2


def test_affix_list(stemmer):
    candidates = stemmer.get_affix_list("الكاتب")
    assert [(c.left, c.right) for c in candidates] == [(0, 6), (2, 6)]

    candidate = candidates[1]
    assert candidate.prefix == "ال"
    assert candidate.suffix == ""
    assert candidate.stem == "كاتب"
    assert candidate.starstem == "*ا**"
    assert candidate.root == "كتب"
    assert candidate.affix == "ال-"
    assert all(isinstance(c.root, str) for c in candidates)


def test_window_accessors(stemmer):
    assert stemmer.get_starword("الكاتب") == "ال*ا**"
    assert stemmer.get_left("الكاتب") == 2
    assert stemmer.get_right("الكاتب") == 6

    assert stemmer.get_stem_at("الكاتب") == "كاتب"
    assert stemmer.get_stem_at("الكاتب", 2, 6) == "كاتب"
    assert stemmer.get_stem_at("الكاتب", 0) == "الكاتب"

    assert stemmer.get_prefix("يكتبون") == "ي"
    assert stemmer.get_suffix("يكتبون") == "ون"
    assert stemmer.get_affix("يكتبون") == "ي-ون"
    assert stemmer.get_affix("يكتبون", 0, 5) == "-ن"
    assert stemmer.get_starstem("يكتبون") == "***"


def test_extract_root_of_stem(stemmer):
    assert stemmer.extract_root("كتب") == "كتب"
    assert stemmer.extract_root("كاتب") == "كتب"
    assert stemmer.extract_root("كاتب", "*ا**") == "كتب"


def test_set_prefix_list_rebuilds_trie():
    stemmer = ArabicLightStemmer()
    prefix_trie = stemmer.prefix_trie
    suffix_trie = stemmer.suffix_trie

    stemmer.set_prefix_list([''])

    assert stemmer.prefix_trie is not prefix_trie
    assert stemmer.suffix_trie is suffix_trie
    assert stemmer.get_prefix_list() == ['']
    assert stemmer.light_stem("الكاتب") == "الكاتب"


def test_set_suffix_list_rebuilds_trie():
    stemmer = ArabicLightStemmer()
    suffix_trie = stemmer.suffix_trie

    stemmer.set_suffix_list([''])

    assert stemmer.suffix_trie is not suffix_trie
    assert stemmer.get_suffix_list() == ['']
    # "ي-" alone cannot front a five-letter verb stem
    assert stemmer.light_stem("يكتبون") == "يكتبون"


def test_set_joker():
    stemmer = ArabicLightStemmer()
    stemmer.set_joker('#$')
    assert stemmer.get_joker() == '#'
    assert stemmer.get_starword("الكاتب") == "ال#ا##"
    assert stemmer.get_root("الكاتب") == "كتب"

    stemmer.set_joker('')
    assert stemmer.get_joker() == '#'


def test_configure_swaps_config():
    stemmer = ArabicLightStemmer()
    old_config = stemmer.config

    new_config = stemmer.configure(max_prefix_length=3, min_stem_length=3)

    assert stemmer.config is new_config
    assert old_config.max_prefix_length == 5
    assert stemmer.get_max_prefix_length() == 3
    assert stemmer.get_min_stem_length() == 3
    assert stemmer.segmenter.min_stem_length == 3


def test_roots_list_drives_root_choice():
    stemmer = ArabicLightStemmer()
    assert stemmer.get_root("سيكتبون") == "كتب"

    # Only the four-letter reading is a known root now
    stemmer.set_roots_list(['سكتب'])
    assert stemmer.get_roots_list() == ['سكتب']
    assert stemmer.get_root("سيكتبون") == "سكتب"


def test_letter_class_accessors():
    stemmer = ArabicLightStemmer()
    stemmer.set_prefix_letters('الو')
    stemmer.set_suffix_letters('ةن')
    stemmer.set_infix_letters('ا')
    stemmer.set_max_suffix_length(3)

    assert stemmer.get_prefix_letters() == 'الو'
    assert stemmer.get_suffix_letters() == 'ةن'
    assert stemmer.get_infix_letters() == 'ا'
    assert stemmer.get_max_suffix_length() == 3
    assert stemmer.get_starstem("كاتب", 0, 4) == "*ا**"


def test_affix_list_accessors():
    stemmer = ArabicLightStemmer()
    assert 'ال-' in stemmer.get_noun_affixes_list()
    assert 'ي-ون' in stemmer.get_verb_affixes_list()
    assert set(stemmer.get_valid_affixes_list()) == (
        set(stemmer.get_noun_affixes_list()) | set(stemmer.get_verb_affixes_list())
    )

    stemmer.set_noun_affixes_list(['-'])
    stemmer.set_verb_affixes_list([])
    assert stemmer.get_valid_affixes_list() == ['-']
    assert stemmer.light_stem("الكاتب") == "الكاتب"


def test_module_level_helpers():
    assert light_stem("الكاتب") == "كاتب"
    assert get_root("يكتبون") == "كتب"

    config = StemmerConfig(prefix_list=('',))
    assert light_stem("الكاتب", config) == "الكاتب"
