from __future__ import annotations
from typing import Iterable, List, Mapping, Optional, Tuple

from .config import LEVENSHTEIN_CANDIDATES
from .distance import similarity
from .index import GramIndex
from .models import Match
from .normalize import gram_counter, vector_norm

# (score, normalized) pairs flowing through the ranking stages
Scored = List[Tuple[float, str]]


def _by_score(rows: Scored) -> Scored:
    # stable: equal scores keep their incoming (entry index) order
    return sorted(rows, key=lambda r: r[0], reverse=True)


def cosine_scores(query_norm: str, index: GramIndex) -> Optional[Scored]:
    """
    Cosine similarity between the query and every entry sharing a gram with it,
    at index.gram_size. Returns None when no entry shares any gram.
    """
    counts = gram_counter(query_norm, index.gram_size)
    dots = index.dot_products(counts)
    if not dots:
        return None

    q_norm = vector_norm(counts)
    rows: Scored = []
    for i, rec in index.iter_records(sorted(dots)):
        rows.append((dots[i] / (q_norm * rec.norm), rec.normalized))
    return _by_score(rows)


def fallback_cosine(query_norm: str, indexes: Iterable[GramIndex]) -> Optional[Scored]:
    """
    Try each gram index in the given order (largest gram size first) and stop
    at the first one that yields any candidate.
    """
    for index in indexes:
        rows = cosine_scores(query_norm, index)
        if rows is not None:
            return rows
    return None


def refine(rows: Scored, query_norm: str, limit: int = LEVENSHTEIN_CANDIDATES) -> Scored:
    """
    /* ~~~ Rescore the top `limit` cosine candidates by normalized Levenshtein
       similarity; the rest are dropped. ~~~ */
    """
    head = rows[:min(limit, len(rows))]
    return _by_score([(similarity(normalized, query_norm), normalized) for _, normalized in head])


def rank_query(query_norm: str,
               indexes: Iterable[GramIndex],
               catalog: Mapping[str, str],
               *,
               use_levenshtein: bool,
               min_match_score: float) -> Optional[List[Match]]:
    """
    Full query pipeline over already-normalized input:
      cosine (with gram-size fallback) -> optional Levenshtein -> threshold -> originals.
    None means no entry shared a gram at any size; [] means all fell below threshold.
    """
    rows = fallback_cosine(query_norm, indexes)
    if rows is None:
        return None
    if use_levenshtein:
        rows = refine(rows, query_norm)
    return [Match(score, catalog[normalized]) for score, normalized in rows
            if score >= min_match_score]
