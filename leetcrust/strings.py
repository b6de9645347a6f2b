"""Problems on strings and characters."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, combinations, groupby
from typing import Sequence

__all__ = [
    "is_circular_sentence",
    "min_changes",
    "minimum_steps",
    "count_prefix_suffix_pairs",
    "compressed_string",
    "minimum_length",
    "calculate_score",
    "resulting_string",
    "can_construct",
    "vowel_strings",
]

_VOWELS = frozenset("aeiou")
_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def _require_lowercase(s: str) -> None:
    for char in s:
        if char not in _ALPHABET:
            raise ValueError(f"expected a lowercase letter, got {char!r}")


def is_circular_sentence(sentence: str) -> bool:
    """Tell whether each word starts with the last letter of the word before it, cyclically."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    first = sentence[0]
    last = first
    after_space = False
    for char in sentence[1:]:
        if char == " ":
            after_space = True
            continue
        if after_space and char != last:
            return False
        last = char
        after_space = False
    return last == first


def min_changes(s: str) -> int:
    """Fewest flips making a binary string a run of even-length blocks of equal bits."""
    if not s:
        raise ValueError("s must not be empty")
    return sum(a != b for a, b in zip(s[::2], s[1::2]))


def minimum_steps(s: str) -> int:
    """Fewest adjacent swaps that move every '1' to the right of every '0'."""
    total = 0
    zeros_seen = 0
    for char in reversed(s):
        if char == "1":
            total += zeros_seen
        else:
            zeros_seen += 1
    return total


def count_prefix_suffix_pairs(words: Sequence[str]) -> int:
    """Count index pairs i < j where words[i] is both a prefix and a suffix of words[j]."""
    return sum(
        1
        for word, other in combinations(words, 2)
        if other.startswith(word) and other.endswith(word)
    )


def compressed_string(word: str) -> str:
    """Run-length encode ``word`` with runs of at most nine characters, count first."""
    if not word:
        raise ValueError("word must not be empty")
    parts: list[str] = []
    for char, run in groupby(word):
        length = sum(1 for _ in run)
        full, rest = divmod(length, 9)
        parts.extend(f"9{char}" for _ in range(full))
        if rest:
            parts.append(f"{rest}{char}")
    return "".join(parts)


def minimum_length(s: str) -> int:
    """Length left after repeatedly removing a letter's nearest equal neighbours on both sides."""
    _require_lowercase(s)
    removable = sum((count - 1) >> 1 for count in Counter(s).values())
    return len(s) - (removable << 1)


def calculate_score(s: str) -> int:
    """Total distance between each letter and the nearest unmarked mirror letter before it."""
    _require_lowercase(s)
    pending: dict[int, list[int]] = {letter: [] for letter in range(26)}
    score = 0
    for index, char in enumerate(s):
        letter = ord(char) - ord("a")
        mirrors = pending[25 - letter]
        if mirrors:
            score += index - mirrors.pop()
        else:
            pending[letter].append(index)
    return score


def resulting_string(s: str) -> str:
    """Repeatedly remove the leftmost pair of alphabetically adjacent letters (a and z count)."""
    _require_lowercase(s)
    stack: list[int] = []
    for char in s:
        letter = ord(char) - ord("a")
        if stack and (stack[-1] - letter) % 26 in (1, 25):
            stack.pop()
        else:
            stack.append(letter)
    return "".join(_ALPHABET[letter] for letter in stack)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether the note can be written using each magazine letter at most once."""
    return not (Counter(ransom_note) - Counter(magazine))


def vowel_strings(words: Sequence[str], queries: Sequence[Sequence[int]]) -> list[int]:
    """For each inclusive range query, count words that start and end with a vowel."""
    if any(not word for word in words):
        raise ValueError("words must not be empty strings")
    flags = (word[0] in _VOWELS and word[-1] in _VOWELS for word in words)
    prefix = [0, *accumulate(int(flag) for flag in flags)]
    return [prefix[right + 1] - prefix[left] for left, right in queries]