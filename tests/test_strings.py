import pytest

from leetcrust.strings import (
    calculate_score,
    can_construct,
    compressed_string,
    count_prefix_suffix_pairs,
    is_circular_sentence,
    min_changes,
    minimum_length,
    minimum_steps,
    resulting_string,
    vowel_strings,
)


@pytest.mark.parametrize(
    "sentence, expected",
    [
        ("leetcode exercises sound delightful", True),
        ("eetcode", True),
        ("Leetcode is cool", False),
    ],
)
def test_is_circular_sentence(sentence, expected):
    assert is_circular_sentence(sentence) is expected


def test_is_circular_sentence_empty():
    with pytest.raises(ValueError):
        is_circular_sentence("")


@pytest.mark.parametrize("s, expected", [("1001", 2), ("10", 1), ("0000", 0)])
def test_min_changes(s, expected):
    assert min_changes(s) == expected


@pytest.mark.parametrize("s, expected", [("101", 1), ("100", 2), ("0111", 0)])
def test_minimum_steps(s, expected):
    assert minimum_steps(s) == expected


@pytest.mark.parametrize(
    "words, expected",
    [
        (["a", "aba", "ababa", "aa"], 4),
        (["pa", "papa", "ma", "mama"], 2),
        (["abab", "ab"], 0),
    ],
)
def test_count_prefix_suffix_pairs(words, expected):
    assert count_prefix_suffix_pairs(words) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("abcde", "1a1b1c1d1e"),
        ("aaaaaaaaaaaaaabb", "9a5a2b"),
        ("aaaaaaaaa", "9a"),
        ("aaaaaaaaaa", "9a1a"),
    ],
)
def test_compressed_string(word, expected):
    assert compressed_string(word) == expected


def test_compressed_string_empty():
    with pytest.raises(ValueError):
        compressed_string("")


@pytest.mark.parametrize("s, expected", [("abaacbcbb", 5), ("aa", 2)])
def test_minimum_length(s, expected):
    assert minimum_length(s) == expected


def test_minimum_length_rejects_uppercase():
    with pytest.raises(ValueError):
        minimum_length("aBc")


@pytest.mark.parametrize("s, expected", [("aczzx", 5), ("abcdef", 0)])
def test_calculate_score(s, expected):
    assert calculate_score(s) == expected


@pytest.mark.parametrize("s, expected", [("abc", "c"), ("adcb", ""), ("zadb", "db")])
def test_resulting_string(s, expected):
    assert resulting_string(s) == expected


@pytest.mark.parametrize(
    "note, magazine, expected",
    [("a", "b", False), ("aa", "ab", False), ("aa", "aab", True)],
)
def test_can_construct(note, magazine, expected):
    assert can_construct(note, magazine) is expected


@pytest.mark.parametrize(
    "words, queries, expected",
    [
        (["aba", "bcb", "ece", "aa", "e"], [[0, 2], [1, 4], [1, 1]], [2, 3, 0]),
        (["a", "e", "i"], [[0, 2], [0, 1], [2, 2]], [3, 2, 1]),
    ],
)
def test_vowel_strings(words, queries, expected):
    assert vowel_strings(words, queries) == expected


def test_vowel_strings_rejects_empty_word():
    with pytest.raises(ValueError):
        vowel_strings(["a", ""], [[0, 1]])