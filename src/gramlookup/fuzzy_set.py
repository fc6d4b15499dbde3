from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, List, Optional

from . import config as CFG
from .index import GramIndex
from .models import Match
from .normalize import normalize
from .search import rank_query


class FuzzySet:
    """
    In-memory fuzzy lookup over a set of strings.

    Each string is normalized (see normalize.normalize) and indexed once per gram
    size in [gram_size_lower, gram_size_upper]. Queries are scored by gram cosine
    similarity, trying the largest gram size first and falling back to smaller
    ones only when nothing overlaps; the top candidates are then optionally
    re-ranked by Levenshtein similarity.

    The set is append-only and not thread-safe: serialize add() calls if shared.

        >>> fs = FuzzySet(["apple", "orange"])
        >>> fs.get("appel")[0].value
        'apple'
    """

    def __init__(self,
                 entries: Iterable[str] = (),
                 use_levenshtein: bool = CFG.USE_LEVENSHTEIN,
                 gram_size_lower: int = CFG.GRAM_SIZE_LOWER,
                 gram_size_upper: int = CFG.GRAM_SIZE_UPPER) -> None:
        if gram_size_lower < 1:
            raise ValueError(f"gram_size_lower must be >= 1, got {gram_size_lower}")
        if gram_size_upper < gram_size_lower:
            raise ValueError(
                f"gram_size_upper ({gram_size_upper}) must be >= gram_size_lower ({gram_size_lower})"
            )
        self.use_levenshtein = bool(use_levenshtein)
        self.gram_size_lower = gram_size_lower
        self.gram_size_upper = gram_size_upper

        self._catalog: Dict[str, str] = {}    # normalized -> original
        self._indexes: Dict[int, GramIndex] = {
            n: GramIndex(n) for n in range(gram_size_lower, gram_size_upper + 1)
        }

        for value in entries:
            self.add(value)

    # ---- Build ----
    def add(self, value: str) -> None:
        """Insert `value`; a value whose normalized form is already present is ignored."""
        normalized = normalize(value)
        if normalized in self._catalog:
            return
        for index in self._indexes.values():
            index.add(normalized)
        self._catalog[normalized] = value

    # ---- Query ----
    def get(self, query: str, default: Any = None,
            min_match_score: float = CFG.MIN_MATCH_SCORE) -> Optional[List[Match]]:
        """
        Best matches for `query` as [Match(score, value), ...], highest score first.

        Returns `default` (None unless given) when no entry shares a single gram
        with the query at any gram size. When candidates exist but none reaches
        `min_match_score` the result is an empty list.
        """
        result = rank_query(
            normalize(query),
            self._descending_indexes(),
            self._catalog,
            use_levenshtein=self.use_levenshtein,
            min_match_score=min_match_score,
        )
        if result is None:
            return default
        return result

    def _descending_indexes(self) -> Iterator[GramIndex]:
        for n in range(self.gram_size_upper, self.gram_size_lower - 1, -1):
            yield self._indexes[n]

    # ---- Getters ----
    def length(self) -> int:
        return len(self._catalog)

    def is_empty(self) -> bool:
        return not self._catalog

    def values(self) -> List[str]:
        """Original strings, in insertion order."""
        return list(self._catalog.values())

    def gram_index(self, gram_size: int) -> GramIndex:
        return self._indexes[gram_size]

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and normalize(value) in self._catalog

    def __iter__(self) -> Iterator[str]:
        return iter(self.values())

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(entries={self.length()}, "
                f"grams={self.gram_size_lower}..{self.gram_size_upper}, "
                f"use_levenshtein={self.use_levenshtein})")


def fuzzy_set(entries: Iterable[str] = (),
              use_levenshtein: bool = CFG.USE_LEVENSHTEIN,
              gram_size_lower: int = CFG.GRAM_SIZE_LOWER,
              gram_size_upper: int = CFG.GRAM_SIZE_UPPER) -> FuzzySet:
    """Factory mirroring the FuzzySet constructor."""
    return FuzzySet(entries, use_levenshtein, gram_size_lower, gram_size_upper)
