from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Tuple

from .models import GramRecord
from .normalize import gram_counter, vector_norm


class GramIndex:
    """
    Inverted index for one gram size.
      - records[i]    : (norm, normalized) of entry i, in insertion order
      - postings[gram]: [(entry_index, frequency), ...] for every entry containing gram
    Append-only; entry indexes are never reused.
    """
    def __init__(self, gram_size: int) -> None:
        self.gram_size = gram_size
        self.records: List[GramRecord] = []
        self.postings: Dict[str, List[Tuple[int, int]]] = {}

    def __len__(self) -> int:
        return len(self.records)

    # ---- Build ----
    def add(self, normalized: str) -> int:
        """Index `normalized` and return its entry index."""
        counts = gram_counter(normalized, self.gram_size)
        index = len(self.records)
        self.records.append(GramRecord(vector_norm(counts), normalized))
        for gram, freq in counts.items():
            self.postings.setdefault(gram, []).append((index, freq))
        return index

    # ---- Query ----
    def dot_products(self, query_counts: Dict[str, int]) -> Dict[int, int]:
        """
        Accumulate query_freq * entry_freq per entry over the posting lists of
        the query's grams. Only entries sharing at least one gram appear.
        """
        dots: Dict[int, int] = {}
        for gram, q_freq in query_counts.items():
            for index, freq in self.postings.get(gram, ()):
                dots[index] = dots.get(index, 0) + q_freq * freq
        return dots

    def iter_records(self, indexes: Iterable[int]) -> Iterator[Tuple[int, GramRecord]]:
        for i in indexes:
            yield i, self.records[i]
