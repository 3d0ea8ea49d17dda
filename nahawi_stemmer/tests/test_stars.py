#!/usr/bin/env python3
"""
Tests for starred patterns and stem window estimation.
"""

import pytest

from nahawi_stemmer.config import StemmerConfig
from nahawi_stemmer.stars import StarTransform, prepare_word


@pytest.fixture(scope='module')
def stars():
    return StarTransform(StemmerConfig())


def test_prepare_word():
    test_cases = [
        # (word, expected)
        ("الكَاتِبُ", "الكاتب"),
        ("كـــتاب", "كتاب"),
        ("آمن", "ءامن"),
        ("", ""),
    ]

    for word, expected in test_cases:
        assert prepare_word(word) == expected


def test_estimate_window(stars):
    test_cases = [
        # (word, starword, left, right)
        ("الكاتب", "ال*ا**", 2, 6),
        ("يكتبون", "ي***ون", 1, 4),
        ("يذهبون", "ي***ون", 1, 4),
    ]

    for word, starword, left, right in test_cases:
        window = stars.estimate_window(word)
        assert (window.starword, window.left, window.right) == (starword, left, right), \
            f"{word}: got {window}"


def test_window_bounds_are_ordered(stars):
    for word in ["الكاتب", "يكتبون", "والكتاب", "المدرسة", "في", "ب"]:
        window = stars.estimate_window(word)
        assert 0 <= window.left <= window.right <= len(prepare_word(word))


def test_star_stem_teh_group(stars):
    """Teh, Tah and Dal are pattern letters only in four-letter stems."""
    test_cases = [
        # (stem, expected)
        ("كاتب", "*ا**"),
        # Teh in first position: تفعّل
        ("تكلم", "ت***"),
        # Tah after Dad
        ("ضطرب", "*ط**"),
        ("مطرب", "****"),
        # Dal after Zain
        ("زدهر", "*د**"),
        ("مدرس", "****"),
        # Teh Marbuta does not count toward the length
        ("كتابة", "*تا*ة"),
        # Six letters: Teh and Dal are radicals
        ("استخدم", "ا*****"),
        ("كتب", "***"),
    ]

    for stem, expected in test_cases:
        actual = stars.star_stem(stem, 0, len(stem))
        assert actual == expected, f"{stem}: expected={expected}, got={actual}"


def test_star_stem_slice(stars):
    assert stars.star_stem("الكاتب", 2, 6) == "*ا**"
    assert stars.star_stem("الكاتب", 2, 2) == ""


def test_star_stem_without_infixes():
    stars = StarTransform(StemmerConfig(infix_letters=''))
    assert stars.star_stem("كاتب", 0, 4) == "****"


def test_custom_joker():
    stars = StarTransform(StemmerConfig(joker='#'))
    assert stars.star_stem("كاتب", 0, 4) == "#ا##"
    assert stars.mask("كاتب", "ا") == "#ا##"
