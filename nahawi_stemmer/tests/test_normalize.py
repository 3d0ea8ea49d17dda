#!/usr/bin/env python3
"""
Tests for Arabic text normalization helpers.
"""

from nahawi_stemmer.normalize import (
    is_vocalized, normalize_hamza, normalize_lamalef, normalize_searchtext,
    normalize_spellerrors, strip_tashkeel, strip_tatweel,
)


def test_strip_tashkeel():
    assert strip_tashkeel("كَتَبَ") == "كتب"
    assert strip_tashkeel("مُدَرِّسٌ") == "مدرس"
    assert strip_tashkeel("كتب") == "كتب"
    assert strip_tashkeel("") == ""


def test_strip_tatweel():
    assert strip_tatweel("كـــتاب") == "كتاب"


def test_is_vocalized():
    assert is_vocalized("كَتَبَ")
    assert not is_vocalized("كتب")


def test_normalize_hamza():
    assert normalize_hamza("أإآ") == "ااا"
    assert normalize_hamza("ؤئ") == "ءء"
    assert normalize_hamza("سأل") == "سال"


def test_normalize_lamalef():
    assert normalize_lamalef("\ufefb") == "لا"
    assert normalize_lamalef("\ufef7") == "لا"


def test_normalize_spellerrors():
    assert normalize_spellerrors("مدرسة على") == "مدرسه علي"


def test_normalize_searchtext():
    assert normalize_searchtext("الْمَدْرَسَةُ") == "المدرسه"
    assert normalize_searchtext("إلى") == "الي"
