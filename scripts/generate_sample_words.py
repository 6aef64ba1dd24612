#!/usr/bin/env python3
"""
Generate word-list files for batch runs of wordcloud-layout.

Categories:
1-10:  Zipf-like weights (few heavy words, long tail)
11-15: Equal weights (tie ordering)
16-18: Many zero weights (minimum font size)
19-20: Stress tests (long words, many words)
"""

from __future__ import annotations

import csv
from pathlib import Path

import numpy as np

OUTPUT_DIR = Path(__file__).parent.parent / "data" / "batch_words"
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

SYLLABLES = ["ka", "lo", "mi", "ren", "sta", "vo", "dun", "pel", "tor", "qui", "zan", "bre"]


def make_name(rng: np.random.Generator, min_syllables: int = 1, max_syllables: int = 3) -> str:
    n = int(rng.integers(min_syllables, max_syllables + 1))
    return "".join(rng.choice(SYLLABLES, size=n))


def unique_names(rng: np.random.Generator, count: int, **kwargs: int) -> list[str]:
    names: list[str] = []
    seen: set[str] = set()
    while len(names) < count:
        name = make_name(rng, **kwargs)
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names


def save_csv(filename: str, names: list[str], weights: list[float]) -> None:
    path = OUTPUT_DIR / filename
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["name", "weight"])
        for name, weight in zip(names, weights):
            w.writerow([name, round(float(weight), 3)])
    print(f"Created: {path.name}")


def main() -> None:
    rng = np.random.default_rng(42)
    case = 1
    for _ in range(10):
        count = int(rng.integers(10, 40))
        names = unique_names(rng, count)
        weights = 100.0 / np.arange(1, count + 1) ** float(rng.uniform(0.8, 1.5))
        save_csv(f"words_{case:03d}_zipf.csv", names, list(weights))
        case += 1
    for _ in range(5):
        count = int(rng.integers(5, 20))
        save_csv(f"words_{case:03d}_equal.csv", unique_names(rng, count), [1.0] * count)
        case += 1
    for _ in range(3):
        count = int(rng.integers(10, 25))
        weights = [10.0, 5.0] + [0.0] * (count - 2)
        save_csv(f"words_{case:03d}_zeros.csv", unique_names(rng, count), weights)
        case += 1
    save_csv(f"words_{case:03d}_long.csv", unique_names(rng, 8, min_syllables=5, max_syllables=7), list(range(8, 0, -1)))
    case += 1
    count = 150
    save_csv(f"words_{case:03d}_many.csv", unique_names(rng, count), list(rng.uniform(0.0, 50.0, size=count)))


if __name__ == "__main__":
    main()
