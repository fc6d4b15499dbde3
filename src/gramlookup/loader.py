from __future__ import annotations
import logging
import os
from typing import Iterable, List

from .models import Corpus
from . import config as CFG

log = logging.getLogger(__name__)

PROGRESS_EVERY_ENTRIES = 10_000
PROGRESS_EVERY_FILES = 500

def _iter_corpus_files(roots: Iterable[str]) -> Iterable[tuple[str, str]]:
    """Yield (root, path) for corpus files recursively under each root, in sorted walk order."""
    for root in roots:
        root = os.path.abspath(root)
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fn in sorted(filenames):
                if fn.lower().endswith(CFG.INCLUDE_EXTS):
                    yield root, os.path.join(dirpath, fn)

def _rel_to_any_root(path: str, roots_abs: List[str]) -> str:
    """Return the shortest relative path to any of the given absolute roots."""
    best = path
    for r in roots_abs:
        try:
            rel = os.path.relpath(path, r)
            if len(rel) < len(best):
                best = rel
        except ValueError:
            pass
    return best.replace("\\", "/")

def load_corpus(roots: List[str]) -> Corpus:
    """
    Scan roots for corpus files and collect one entry per non-blank line.
    Entries keep file-walk order; `sources` remembers the first file each entry came from.
    """
    entries: List[str] = []
    sources: dict[str, str] = {}
    roots_abs = [os.path.abspath(p) for p in roots]

    file_count = 0
    for _, path in _iter_corpus_files(roots):
        rel = _rel_to_any_root(path, roots_abs)
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                raw_lines = [ln.rstrip("\r\n") for ln in f]
        except OSError as exc:
            log.warning("Skipping unreadable file %s: %s", path, exc)
            continue

        for line in raw_lines:
            if not line.strip():
                continue
            entries.append(line)
            sources.setdefault(line, rel)
            if CFG.VERBOSE and len(entries) % PROGRESS_EVERY_ENTRIES == 0:
                log.info("[loaded] entries=%s", f"{len(entries):,}")

        file_count += 1
        if CFG.VERBOSE and file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%s", f"{file_count:,}")

    log.info("Loaded %d entries from %d files", len(entries), file_count)
    return Corpus(entries=entries, sources=sources)
