# gramlookup/engine.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from . import config as CFG
from .fuzzy_set import FuzzySet
from .loader import load_corpus
from .models import LookupResult
from .normalize import normalize

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - corpus loading (loader.load_corpus) and/or in-memory entries,
      - the fuzzy index (FuzzySet),
      - result shaping for the CLI and Flask layers (LookupResult rows).

    Public API:
      * build(roots, entries=..., ...): ingest -> index
      * lookup(query, top_k, min_match_score): ranked matches
      * add(value), size()
      * shutdown(): drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[FuzzySet] = None
        self._sources: Dict[str, str] = {}    # original value -> relative file path

    # /* ~~~ Build an index from source folders and/or explicit entries ~~~ */
    def build(
        self,
        roots: Optional[Iterable[str]] = None,
        *,
        entries: Optional[Iterable[str]] = None,
        use_levenshtein: Optional[bool] = None,
        gram_size_lower: Optional[int] = None,
        gram_size_upper: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            CFG.VERBOSE = True

        roots = list(roots or [])
        entries = list(entries or [])
        if not roots and not entries:
            raise ValueError("build(): at least one root folder or entry is required")

        idx = FuzzySet(
            use_levenshtein=CFG.USE_LEVENSHTEIN if use_levenshtein is None else use_levenshtein,
            gram_size_lower=CFG.GRAM_SIZE_LOWER if gram_size_lower is None else gram_size_lower,
            gram_size_upper=CFG.GRAM_SIZE_UPPER if gram_size_upper is None else gram_size_upper,
        )

        sources: Dict[str, str] = {}
        if roots:
            log.info("Loading corpus from %s", roots)
            corpus = load_corpus(roots)
            sources.update(corpus.sources)
            entries = corpus.entries + entries

        log.info("Building gram index (%d..%d)", idx.gram_size_lower, idx.gram_size_upper)
        for value in entries:
            idx.add(value)

        # Commit engine state
        self.index = idx
        self._sources = sources
        log.info("Engine build() complete: entries=%d", idx.length())

    # ------------- query -------------

    # /* ~~~ Run a fuzzy lookup and return ranked rows ~~~ */
    def lookup(self, query: str, *, top_k: int = CFG.TOP_K,
               min_match_score: float = CFG.MIN_MATCH_SCORE) -> List[LookupResult]:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        if not query:
            return []
        matches = self.index.get(query, default=[], min_match_score=min_match_score)
        return [
            LookupResult(
                value=m.value,
                normalized=normalize(m.value),
                score=float(m.score),
                rank=rank,
                source_text=self._sources.get(m.value, ""),
            )
            for rank, m in enumerate(matches[:max(0, top_k)], start=1)
        ]

    def add(self, value: str) -> None:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        self.index.add(value)

    def size(self) -> int:
        return self.index.length() if self.index is not None else 0

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self._sources = {}
        log.info("Engine shutdown complete")
