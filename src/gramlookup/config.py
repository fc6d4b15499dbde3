import os

# Ranking
USE_LEVENSHTEIN: bool = True
MIN_MATCH_SCORE: float = 0.33

# Gram sizes searched, largest first
GRAM_SIZE_LOWER: int = 2
GRAM_SIZE_UPPER: int = 3

# Boundary marker used to pad strings before gram extraction
PAD_CHAR: str = "-"

# /* ~~~ how many cosine candidates get rescored by edit distance ~~~ */
LEVENSHTEIN_CANDIDATES: int = 50

# Result caps for the engine / CLI / web layers
TOP_K: int = 10
MAX_TOP_K: int = 50

# Corpus files picked up by the loader
INCLUDE_EXTS = (".txt",)

# Progress logging (set GRAMLOOKUP_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("GRAMLOOKUP_VERBOSE") == "1"
