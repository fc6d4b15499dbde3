from collections import Counter

import pytest

from gramlookup.normalize import gram_counter, iter_grams, normalize, vector_norm


@pytest.mark.parametrize("raw, expected", [
    ("Hello World", "hello world"),
    ("!!Hello, World??", "!!hello, world??"),
    ("  padded  ", "  padded  "),          # spaces are word chars
    ("Café!", "café!"),
    ("C++", "c++"),
    ("«مرحبا»", "«مرحبا»"),
    ("!!!", ""),
    ("«»", ""),
    ("", ""),
])
def test_normalize_lowercases_and_empties_symbol_only_strings(raw, expected):
    assert normalize(raw) == expected


def test_normalize_keeps_symbols_next_to_word_chars():
    # only a string made entirely of non-word characters is stripped
    assert normalize("Rock'n'Roll!") == "rock'n'roll!"
    assert normalize("#C++ & Go#") == "#c++ & go#"
    assert normalize("Hello!") != normalize("Hello")


@pytest.mark.parametrize("raw", ["Hello!", "..a.b..", "X-Men: Apocalypse", "ÉCOLE", "", "***"])
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_iter_grams_pads_both_ends():
    assert list(iter_grams("ab", 2)) == ["-a", "ab", "b-"]
    assert list(iter_grams("abc", 3)) == ["-ab", "abc", "bc-"]
    assert list(iter_grams("abc", 1)) == ["-", "a", "b", "c", "-"]


def test_iter_grams_right_pads_short_strings():
    assert list(iter_grams("", 2)) == ["--"]
    assert list(iter_grams("", 3)) == ["---"]
    assert list(iter_grams("a", 4)) == ["-a--"]


def test_iter_grams_is_restartable():
    first = list(iter_grams("banana", 2))
    assert first == list(iter_grams("banana", 2))
    assert len(first) == len("-banana-") - 1


def test_iter_grams_rejects_non_positive_size():
    with pytest.raises(ValueError):
        list(iter_grams("abc", 0))


def test_gram_counter_counts_repeats():
    assert gram_counter("aaa", 2) == Counter({"-a": 1, "aa": 2, "a-": 1})
    assert gram_counter("banana", 3)["ana"] == 2


def test_vector_norm_is_l2():
    assert vector_norm(Counter({"a": 3, "b": 4})) == 5.0
    assert vector_norm(gram_counter("ab", 2)) == pytest.approx(3 ** 0.5)
