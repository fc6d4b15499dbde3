"""
gramlookup: in-memory fuzzy string lookup

Given a collection of strings, returns the closest matches to a query by
character n-gram cosine similarity, optionally re-ranked by normalized
Levenshtein similarity. Meant to be embedded (autocomplete, typo-tolerant
search, record matching).

Main entry points:
    FuzzySet(entries, use_levenshtein=True, gram_size_lower=2, gram_size_upper=3)
    Engine().build(roots) / .lookup(query)  - file-backed corpus wrapper

Example Usage:
    from gramlookup import FuzzySet

    fs = FuzzySet(["Lord of the Rings", "Rings of Power"])
    for score, value in fs.get("rings of powr"):
        print(f"{score:.2f}: {value}")
"""

from .distance import InvalidComparisonError, levenshtein, similarity
from .engine import Engine
from .fuzzy_set import FuzzySet, fuzzy_set
from .loader import load_corpus
from .models import Corpus, LookupResult, Match
from .normalize import gram_counter, iter_grams, normalize

__version__ = "1.0.0"
__all__ = [
    "FuzzySet", "fuzzy_set", "Engine", "load_corpus",
    "Match", "LookupResult", "Corpus",
    "normalize", "iter_grams", "gram_counter",
    "levenshtein", "similarity", "InvalidComparisonError",
]
