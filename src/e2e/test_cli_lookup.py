import json
from pathlib import Path
import pytest
from gramlookup.__main__ import main

def _seed(tmp: Path) -> str:
    root = tmp / "Archive"; root.mkdir()
    (root / "fruit.txt").write_text("apple\norange\n", encoding="utf-8")
    return str(root)

@pytest.mark.e2e
def test_cli_single_query_table(tmp_path: Path, capsys):
    assert main(["--roots", _seed(tmp_path), "--q", "appel"]) == 0
    out = capsys.readouterr().out
    assert "apple" in out
    assert "orange" not in out
    assert "fruit.txt" in out

@pytest.mark.e2e
def test_cli_json_output(capsys):
    assert main(["--entries", "apple", "orange", "--q", "appel", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows[0]["value"] == "apple"
    assert rows[0]["score"] == pytest.approx(0.6)

@pytest.mark.e2e
def test_cli_no_matches(capsys):
    assert main(["--entries", "apple", "orange", "--q", "xyz"]) == 0
    assert "(no matches)" in capsys.readouterr().out

@pytest.mark.e2e
def test_cli_flags_reach_the_engine(capsys):
    argv = ["--entries", "abcd", "--q", "xbcy", "--json"]
    main(argv + ["--gram-lower", "3"])
    assert json.loads(capsys.readouterr().out) == []
    main(argv + ["--no-levenshtein", "--min-score", "0"])
    assert json.loads(capsys.readouterr().out)[0]["value"] == "abcd"

@pytest.mark.e2e
def test_cli_repl_until_empty_line(monkeypatch, capsys):
    answers = iter(["appel", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
    assert main(["--entries", "apple", "--repl"]) == 0
    out = capsys.readouterr().out
    assert "1 entries indexed" in out
    assert "apple" in out

@pytest.mark.e2e
def test_cli_requires_a_source():
    with pytest.raises(SystemExit) as exc:
        main(["--q", "apple"])
    assert exc.value.code == 2
