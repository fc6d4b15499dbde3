from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, List, NamedTuple

class Match(NamedTuple):
    score: float
    value: str                # original string as inserted

@dataclass(frozen=True)
class GramRecord:
    norm: float               # L2 norm of the entry's gram-count vector
    normalized: str           # join key back to the catalog

@dataclass
class Corpus:
    entries: List[str]
    sources: Dict[str, str] = field(default_factory=dict)   # entry -> relative file path

@dataclass(frozen=True)
class LookupResult:
    value: str
    normalized: str
    score: float
    rank: int                 # 1-based
    source_text: str = ""

    def as_dict(self) -> dict:
        return asdict(self)
