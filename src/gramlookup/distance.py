from __future__ import annotations
from typing import Optional


class InvalidComparisonError(ValueError):
    """Raised when asked to compare two missing values."""


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance between `a` and `b` (insertions, deletions, substitutions).
    Classic DP keeping a single rolling row of len(a) + 1 costs.
    """
    row = list(range(len(a) + 1))
    for i, cb in enumerate(b, start=1):
        prev = row[0]          # row[i-1][j-1]
        row[0] = i
        for j, ca in enumerate(a, start=1):
            if ca == cb:
                value = prev
            else:
                value = min(row[j], row[j - 1], prev) + 1
            prev = row[j]
            row[j] = value
    return row[len(a)]


def similarity(a: Optional[str], b: Optional[str]) -> float:
    """
    1 - distance / longer length.
      * both None  -> InvalidComparisonError
      * one None   -> 0.0
      * both empty -> 1.0
    """
    if a is None and b is None:
        raise InvalidComparisonError("Trying to compare two null values")
    if a is None or b is None:
        return 0.0
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest
