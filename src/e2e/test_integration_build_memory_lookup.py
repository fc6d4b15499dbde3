from pathlib import Path
import pytest
from gramlookup.engine import Engine

def _seed(tmp: Path) -> str:
    root = tmp / "Archive"
    root.mkdir()
    (root / "titles.txt").write_text(
        "Lord of the Rings\n"
        "Rings of Power\n"
        "The Hobbit\n"
        "The Silmarillion\n",
        encoding="utf-8",
    )
    return str(root)

@pytest.mark.e2e
def test_build_memory_lookup(tmp_path: Path):
    roots = _seed(tmp_path)
    eng = Engine()
    try:
        eng.build(roots=[roots])
        assert eng.size() == 4
        rows = eng.lookup("Lord of the Rigns", top_k=5)
        assert isinstance(rows, list) and rows
        assert rows[0].value == "Lord of the Rings"
        assert rows[0].normalized == "lord of the rings"
        assert rows[0].source_text == "titles.txt"
        assert rows[0].rank == 1
    finally:
        eng.shutdown()
