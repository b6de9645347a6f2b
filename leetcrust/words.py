"""Problems on words: anagrams, paths, windows and letter multisets."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

__all__ = [
    "group_anagrams",
    "simplify_path",
    "min_window",
    "word_subsets",
    "max_occur",
]

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def _letter_counts(word: str) -> list[int]:
    counts = [0] * 26
    for char in word:
        if char not in _ALPHABET:
            raise ValueError(f"expected a lowercase letter, got {char!r}")
        counts[ord(char) - ord("a")] += 1
    return counts


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, keeping first-seen order."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def simplify_path(path: str) -> str:
    """Turn an absolute Unix path into its canonical form."""
    dirs: list[str] = []
    for part in path.split("/"):
        if part == "..":
            if dirs:
                dirs.pop()
        elif part and part != ".":
            dirs.append(part)
    return "/" + "/".join(dirs)


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t`` with multiplicity.

    Returns an empty string when there is no such window.
    """
    if not t:
        return ""
    wanted = Counter(t)
    needed = len(t)
    left = 0
    best_len: int | None = None
    best_left = 0

    for right, char in enumerate(s):
        if wanted[char] > 0:
            needed -= 1
        wanted[char] -= 1

        while needed == 0:
            dropped = s[left]
            wanted[dropped] += 1
            if wanted[dropped] > 0:
                needed += 1
                length = right - left + 1
                if best_len is None or length < best_len:
                    best_len = length
                    best_left = left
            left += 1

    if best_len is None:
        return ""
    return s[best_left : best_left + best_len]


def max_occur(words: Sequence[str]) -> list[int]:
    """For each letter a..z, the largest number of times it appears in any single word."""
    maxima = [0] * 26
    for word in words:
        maxima = [max(a, b) for a, b in zip(maxima, _letter_counts(word))]
    return maxima


def word_subsets(words1: Sequence[str], words2: Sequence[str]) -> list[str]:
    """Words of ``words1`` that contain every word of ``words2`` as a letter multiset.

    When ``words2`` requires no letters at all, no word is returned.
    """
    required = max_occur(words2)
    amount = sum(required)
    if amount == 0:
        return []
    result: list[str] = []
    for word in words1:
        if len(word) < amount:
            continue
        counts = _letter_counts(word)
        if all(have >= need for have, need in zip(counts, required)):
            result.append(word)
    return result