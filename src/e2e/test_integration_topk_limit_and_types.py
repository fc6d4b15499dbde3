from pathlib import Path
import pytest
from gramlookup.engine import Engine

def _seed(tmp: Path) -> str:
    root = tmp / "Archive"; root.mkdir()
    (root / "t.txt").write_text(
        "".join(f"item number {i}\n" for i in range(20)), encoding="utf-8"
    )
    return str(root)

@pytest.mark.e2e
def test_topk_limit_and_result_types(tmp_path: Path):
    roots = _seed(tmp_path)
    eng = Engine()
    try:
        eng.build(roots=[roots])
        rows = eng.lookup("item number", top_k=2)
        assert isinstance(rows, list)
        assert len(rows) == 2
        assert [r.rank for r in rows] == [1, 2]

        r = rows[0]
        assert isinstance(r.value, str) and r.value.startswith("item number")
        assert isinstance(r.score, float)
        assert rows[0].score >= rows[1].score
        assert set(r.as_dict()) == {"value", "normalized", "score", "rank", "source_text"}
    finally:
        eng.shutdown()
