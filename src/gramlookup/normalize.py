from __future__ import annotations
import math
import re
from collections import Counter
from typing import Iterator, Mapping

from .config import PAD_CHAR

# Letters/digits (ASCII, Latin-1 supplement, Arabic), comma and space are "word" chars.
_WORD_CLASS = r"a-zA-Z0-9\u00C0-\u00FF\u0621-\u064A\u0660-\u0669, "

# Matches only a string made entirely of non-word characters.
_ALL_NON_WORD_RE = re.compile(rf"^[^{_WORD_CLASS}]+\Z")


def normalize(raw: str) -> str:
    """
    Canonical comparable form of a string:
      * lowercased
      * emptied if made only of non-word characters ("!!!" -> "")
    Symbols next to word characters are kept: "Hello!" -> "hello!".
    Idempotent: normalize(normalize(s)) == normalize(s).
    """
    return _ALL_NON_WORD_RE.sub("", raw.lower())


def iter_grams(normalized: str, gram_size: int) -> Iterator[str]:
    """
    Yield the sliding-window grams of `normalized`, left to right.

    The string is padded with PAD_CHAR on both sides first, then right-padded
    up to `gram_size`, so every input (including "") yields at least one gram.

    >>> list(iter_grams("ab", 2))
    ['-a', 'ab', 'b-']
    >>> list(iter_grams("", 3))
    ['---']
    """
    if gram_size < 1:
        raise ValueError(f"gram_size must be >= 1, got {gram_size}")
    padded = PAD_CHAR + normalized + PAD_CHAR
    if len(padded) < gram_size:
        padded = padded.ljust(gram_size, PAD_CHAR)
    for i in range(len(padded) - gram_size + 1):
        yield padded[i:i + gram_size]


def gram_counter(normalized: str, gram_size: int) -> Counter[str]:
    """Gram -> frequency for `normalized` at `gram_size`."""
    return Counter(iter_grams(normalized, gram_size))


def vector_norm(counts: Mapping[str, int]) -> float:
    """L2 norm of a gram-count vector."""
    return math.sqrt(sum(c * c for c in counts.values()))
