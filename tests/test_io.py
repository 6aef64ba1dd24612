"""
Word list loading: CSV, JSON, plain text; errors for missing files and bad weights.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wordcloud_layout.core.io import (
    load_words,
    load_words_csv,
    parse_words,
    words_from_text,
)
from wordcloud_layout.core.types import Word


def test_parse_words_dict() -> None:
    assert parse_words({"alpha": 3, "beta": 1.5}) == [Word("alpha", 3.0), Word("beta", 1.5)]


def test_parse_words_objects_and_pairs() -> None:
    data = [{"name": "alpha", "weight": 2}, ["beta", "4"], {"name": "gamma"}]
    assert parse_words(data) == [Word("alpha", 2.0), Word("beta", 4.0), Word("gamma", 1.0)]


def test_parse_words_negative_weight() -> None:
    with pytest.raises(ValueError):
        parse_words({"alpha": -1})


def test_parse_words_bad_entry() -> None:
    with pytest.raises(ValueError):
        parse_words(["alpha"])
    with pytest.raises(ValueError):
        parse_words("alpha")


def test_words_from_text_counts_and_stopwords() -> None:
    text = "The cloud, the cloud and the rain. Rain on the cloud! A x"
    words = words_from_text(text)
    assert words[0] == Word("cloud", 3.0)
    assert Word("rain", 2.0) in words
    names = {w.name for w in words}
    assert "the" not in names and "a" not in names and "x" not in names


def test_load_words_csv(tmp_path: Path) -> None:
    p = tmp_path / "words.csv"
    p.write_text("name,weight\nalpha,3\nbeta,1\n", encoding="utf-8")
    assert load_words_csv(p) == [Word("alpha", 3.0), Word("beta", 1.0)]
    assert load_words(p) == [Word("alpha", 3.0), Word("beta", 1.0)]


def test_load_words_csv_requires_name_column(tmp_path: Path) -> None:
    p = tmp_path / "words.csv"
    p.write_text("word,count\nalpha,3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_words(p)


def test_load_words_json_repo_relative(tmp_path: Path) -> None:
    (tmp_path / "words.json").write_text(json.dumps({"alpha": 2}), encoding="utf-8")
    assert load_words("words.json", repo_root=tmp_path) == [Word("alpha", 2.0)]


def test_load_words_plain_text(tmp_path: Path) -> None:
    p = tmp_path / "notes.txt"
    p.write_text("spiral spiral field", encoding="utf-8")
    assert load_words(p) == [Word("spiral", 2.0), Word("field", 1.0)]


def test_load_words_missing_file(tmp_path: Path) -> None:
    for name in ("missing.csv", "missing.json", "missing.txt"):
        with pytest.raises(FileNotFoundError):
            load_words(tmp_path / name)
