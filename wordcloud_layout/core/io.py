# wordcloud_layout/core/io.py
"""
Load weighted word lists from CSV (name,weight), JSON, or plain text.
Plain text is tokenized and counted; the count becomes the weight.
"""

from __future__ import annotations

import csv
import json
import re
from collections import Counter
from pathlib import Path

from wordcloud_layout.core.config import MAX_WORDS, MIN_WORD_LENGTH
from wordcloud_layout.core.types import Word

_TOKEN_RE = re.compile(r"[^\W\d_]+(?:['-][^\W\d_]+)*", re.UNICODE)

DEFAULT_STOPWORDS: frozenset[str] = frozenset(
    """
    a an and are as at be but by for from has have in is it its of on or
    that the this to was were will with not no so than then there these
    they we you i he she his her our your their them us me my
    """.split()
)


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _to_word(name: object, weight: object) -> Word:
    text = str(name).strip()
    if not text:
        raise ValueError("Word name is empty")
    try:
        w = float(weight)
    except (TypeError, ValueError):
        raise ValueError(f"Weight for {text!r} is not a number: {weight!r}") from None
    if w < 0:
        raise ValueError(f"Weight for {text!r} is negative: {w}")
    return Word(name=text, weight=w)


def parse_words(data: object) -> list[Word]:
    """
    Words from {name: weight}, a list of {"name", "weight"} objects,
    or a list of [name, weight] pairs. Raises ValueError on anything else.
    """
    if isinstance(data, dict):
        return [_to_word(k, v) for k, v in data.items()]
    if not isinstance(data, list):
        raise ValueError(f"Unsupported word list type: {type(data).__name__}")
    out: list[Word] = []
    for item in data:
        if isinstance(item, dict):
            if "name" not in item:
                raise ValueError(f"Word entry without 'name': {item!r}")
            out.append(_to_word(item["name"], item.get("weight", 1)))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            out.append(_to_word(item[0], item[1]))
        else:
            raise ValueError(f"Unsupported word entry: {item!r}")
    return out


def words_from_text(
    text: str,
    stopwords: frozenset[str] | None = None,
    min_length: int = MIN_WORD_LENGTH,
    max_words: int = MAX_WORDS,
) -> list[Word]:
    """Count tokens (case-folded) in text; heaviest max_words words, ties by first occurrence."""
    stop = DEFAULT_STOPWORDS if stopwords is None else stopwords
    counts: Counter[str] = Counter()
    for token in _TOKEN_RE.findall(text):
        key = token.lower()
        if len(key) < min_length or key in stop:
            continue
        counts[key] += 1
    return [Word(name=name, weight=float(n)) for name, n in counts.most_common(max_words)]


def load_words_csv(path: str | Path, repo_root: Path | None = None) -> list[Word]:
    """Read a CSV with a name,weight header. Raises FileNotFoundError / ValueError."""
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Word file not found: {resolved}")
    with open(resolved, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or "name" not in reader.fieldnames:
            raise ValueError(f"CSV needs a 'name' column: {resolved}")
        return [_to_word(row["name"], row.get("weight") or 1) for row in reader if (row.get("name") or "").strip()]


def load_words_json(path: str | Path, repo_root: Path | None = None) -> list[Word]:
    """Read a JSON word list (see parse_words). Raises FileNotFoundError / ValueError."""
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Word file not found: {resolved}")
    return parse_words(json.loads(resolved.read_text(encoding="utf-8")))


def load_words(path: str | Path, repo_root: Path | None = None) -> list[Word]:
    """
    Load words by suffix: .csv, .json, anything else is plain text.
    Raises FileNotFoundError if path is missing, ValueError if content is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    suffix = resolved.suffix.lower()
    if suffix == ".csv":
        return load_words_csv(resolved)
    if suffix == ".json":
        return load_words_json(resolved)
    if not resolved.exists():
        raise FileNotFoundError(f"Word file not found: {resolved}")
    return words_from_text(resolved.read_text(encoding="utf-8"))
