import os
import random
import re

import pytest

from cpkit.textalgo import (
    aho_corasick,
    is_cyclic,
    kmp_count,
    lcp_array,
    prefix_function,
    repeated_substrings,
    split,
    suffix_array,
)


def _random_word(rng, length, alphabet="ab"):
    return "".join(rng.choice(alphabet) for _ in range(length))


def _occurrences(text, pattern):
    return [i for i in range(len(text)) if text.startswith(pattern, i)]


def test_prefix_function_example():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("seed", range(5))
def test_prefix_function_borders(seed):
    s = _random_word(random.Random(seed), 30)
    for i, length in enumerate(prefix_function(s)):
        assert length <= i
        assert s[:length] == s[i + 1 - length : i + 1]


@pytest.mark.parametrize("seed", range(6))
def test_kmp_count_matches_occurrences(seed):
    rng = random.Random(seed)
    text = _random_word(rng, 60)
    pattern = _random_word(rng, rng.randint(1, 4))
    assert kmp_count(text, pattern) == len(_occurrences(text, pattern))


def test_kmp_empty_pattern_rejected():
    with pytest.raises(ValueError):
        kmp_count("abc", "")


@pytest.mark.parametrize("word", ["ab", "abc", "aab"])
@pytest.mark.parametrize("times", [1, 2, 3])
def test_is_cyclic_repetitions(word, times):
    assert is_cyclic(word * times) == (times >= 2)


def test_empty_string_is_not_cyclic():
    assert not is_cyclic("")


def test_aho_corasick_example():
    assert aho_corasick("ushers", ["he", "she", "his", "hers"]) == [(1, 1), (0, 2), (3, 2)]


def test_aho_corasick_duplicates_newest_first():
    assert aho_corasick("a", ["a", "a"]) == [(1, 0), (0, 0)]


@pytest.mark.parametrize("seed", range(6))
def test_aho_corasick_finds_everything(seed):
    rng = random.Random(seed)
    text = _random_word(rng, 50)
    patterns = [_random_word(rng, rng.randint(1, 4)) for _ in range(5)]
    result = aho_corasick(text, patterns)
    expected = [(i, start) for i, p in enumerate(patterns) for start in _occurrences(text, p)]
    assert sorted(result) == sorted(expected)
    ends = [start + len(patterns[i]) for i, start in result]
    assert ends == sorted(ends)


def test_aho_corasick_empty_pattern_rejected():
    with pytest.raises(ValueError):
        aho_corasick("abc", ["a", ""])


@pytest.mark.parametrize("seed", range(6))
def test_suffix_array_sorts_suffixes(seed):
    s = _random_word(random.Random(seed), 40, "abc")
    assert suffix_array(s) == sorted(range(len(s)), key=lambda i: s[i:])


@pytest.mark.parametrize("seed", range(6))
def test_lcp_array_neighbours(seed):
    s = _random_word(random.Random(seed), 40)
    sa = suffix_array(s)
    lcp = lcp_array(s, sa)
    assert len(lcp) == len(s) - 1
    for value, a, b in zip(lcp, sa, sa[1:]):
        assert value == len(os.path.commonprefix([s[a:], s[b:]]))


def test_lcp_array_rejects_bad_permutation():
    with pytest.raises(ValueError):
        lcp_array("abc", [0, 0, 1])


@pytest.mark.parametrize("k", [1, 2, 3, 5])
@pytest.mark.parametrize("seed", range(3))
def test_repeated_substrings(k, seed):
    s = _random_word(random.Random(seed), 30)
    sa = suffix_array(s)
    found = repeated_substrings(s, sa, lcp_array(s, sa), k)
    expected = {s[i : i + k] for i in range(len(s) - k + 1) if len(_occurrences(s, s[i : i + k])) >= 2}
    assert sorted(found) == sorted(expected)


def test_repeated_substrings_zero_length():
    s = "banana"
    sa = suffix_array(s)
    assert repeated_substrings(s, sa, lcp_array(s, sa), 0) == []


@pytest.mark.parametrize("text", ["  a b\tc\n", "one", "", "x\r\ny  z", "   "])
def test_split_whitespace(text):
    assert split(text) == text.split()


def test_split_custom_delimiters():
    text = "a,,b;c,"
    assert split(text, ",;") == [part for part in re.split("[,;]", text) if part]


def test_split_no_delimiters_keeps_whole_string():
    assert split("a b", "") == ["a b"]