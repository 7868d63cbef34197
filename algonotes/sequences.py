"""Dynamic-programming and sliding-window problems over strings and number sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any


def longest_repeating_subsequence(text: str) -> int:
    """Return the length of the longest subsequence that occurs twice using distinct indices."""
    size = len(text)
    table = [[0] * (size + 1) for _ in range(size + 1)]
    for i in range(1, size + 1):
        for j in range(1, size + 1):
            if text[i - 1] == text[j - 1] and i != j:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])
    return table[size][size]


def count_subsets_with_sum(values: Iterable[int], target: int) -> int:
    """Return how many subsets of non-negative values add up to ``target``."""
    items = list(values)
    if target < 0:
        raise ValueError("target must not be negative")
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    counts = [1] + [0] * target
    for value in items:
        for total in range(target, 0, -1):
            if value <= total:
                counts[total] += counts[total - value]
    return counts[target]


def longest_increasing_subsequence(values: Sequence[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        lengths.append(
            max((lengths[j] + 1 for j in range(i) if value > values[j]), default=1)
        )
    return max(lengths, default=0)


def count_anagram_occurrences(pattern: str, text: str) -> int:
    """Return how many windows of ``text`` are anagrams of ``pattern``."""
    width = len(pattern)
    if width == 0:
        raise ValueError("pattern must not be empty")
    if width > len(text):
        return 0
    wanted = Counter(pattern)
    window = Counter(text[:width])
    matches = int(window == wanted)
    for leaving, entering in zip(text, text[width:]):
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        window[entering] += 1
        matches += window == wanted
    return matches