#!/usr/bin/env python3
"""
Tests for the nahawi-stem command line.
"""

import io
import json

from nahawi_stemmer.cli import main


def test_stem_words(capsys):
    assert main(["الكاتب", "يكتبون"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["الكاتب\tكاتب", "يكتبون\tكتب"]


def test_root_column(capsys):
    main(["--root", "يكتبون"])
    assert capsys.readouterr().out.strip() == "يكتبون\tكتب\tكتب"


def test_json_output(capsys):
    main(["--json", "--root", "الكاتب"])
    results = json.loads(capsys.readouterr().out)
    assert results == [{'word': "الكاتب", 'stem': "كاتب", 'root': "كتب"}]


def test_segments(capsys):
    main(["--json", "--segments", "الكاتب"])
    results = json.loads(capsys.readouterr().out)
    segments = results[0]['segments']
    assert [(s['prefix'], s['stem'], s['suffix']) for s in segments] == [
        ("", "الكاتب", ""),
        ("ال", "كاتب", ""),
    ]
    assert segments[1]['starstem'] == "*ا**"


def test_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO("الكاتب\nوفي يكتبون\n"))
    main([])
    stems = [line.split('\t')[1] for line in capsys.readouterr().out.splitlines()]
    assert stems == ["كاتب", "في", "كتب"]


def test_custom_stopwords(capsys, tmp_path):
    path = tmp_path / 'stopwords.json'
    path.write_text(json.dumps({"الكاتب": {"stem": "الكاتب"}}, ensure_ascii=False), encoding='utf-8')
    main(["--stopwords", str(path), "الكاتب"])
    assert capsys.readouterr().out.strip() == "الكاتب\tالكاتب"
