from pathlib import Path
import pytest
from gramlookup.loader import load_corpus

def _seed(tmp: Path) -> str:
    root = tmp / "Archive"; (root / "sub").mkdir(parents=True)
    (root / "b.txt").write_text("second file\n\n   \nlast line\r\n", encoding="utf-8")
    (root / "a.TXT").write_text("first file\n", encoding="utf-8")
    (root / "sub" / "c.txt").write_text("nested line\nfirst file\n", encoding="utf-8")
    (root / "notes.md").write_text("ignored markdown\n", encoding="utf-8")
    return str(root)

@pytest.mark.e2e
def test_loader_reads_non_blank_lines_in_walk_order(tmp_path: Path):
    corpus = load_corpus([_seed(tmp_path)])
    assert corpus.entries == [
        "first file", "second file", "last line", "nested line", "first file",
    ]
    assert corpus.sources["first file"] == "a.TXT"
    assert corpus.sources["nested line"] == "sub/c.txt"
    assert "ignored markdown" not in corpus.entries

@pytest.mark.e2e
def test_loader_handles_missing_root(tmp_path: Path):
    corpus = load_corpus([str(tmp_path / "does-not-exist")])
    assert corpus.entries == [] and corpus.sources == {}
