# tests/test_cli.py
import sys
import pytest
from pathlib import Path
from unittest.mock import patch

from symfreq.cli import main, parse_extensions
from symfreq.core.analyzer import SymbolAnalyzer
from symfreq.core.report import format_file_bigrams, format_symbol_counts, no_files_message
from symfreq.models import FileBigrams
from symfreq.utils.text import join_with_commas

# --- Fixtures ---

@pytest.fixture
def sample_project(tmp_path):
    """
    src/main.rs      -> 'fn main() {}' (last chunk is '{}')
    src/pairs.rs     -> ';/;/'
    notes.md         -> '# Title!'
    logs/app.log     -> ignored by .gitignore
    bad.rs           -> not valid UTF-8
    """
    src = tmp_path / "src"
    src.mkdir()
    logs = tmp_path / "logs"
    logs.mkdir()

    (src / "main.rs").write_text("fn main() {}", encoding="utf-8")
    (src / "pairs.rs").write_text(";/;/", encoding="utf-8")
    (tmp_path / "notes.md").write_text("# Title!", encoding="utf-8")
    (logs / "app.log").write_text("<<<>>>", encoding="utf-8")
    (tmp_path / "bad.rs").write_bytes(b"\xff\xfe(((")
    (tmp_path / ".gitignore").write_text("logs/\n", encoding="utf-8")
    return tmp_path

def run_cli(*args):
    with patch.object(sys, "argv", ["symfreq", *args]):
        main()

# --- Test 1: Helpers ---

def test_join_with_commas():
    assert join_with_commas([]) == ""
    assert join_with_commas(["first"]) == "first"
    assert join_with_commas(["first", "second"]) == "first, second"
    assert join_with_commas(["first", "second", "third"]) == "first, second, third"

def test_parse_extensions():
    assert parse_extensions(None) is None
    assert parse_extensions(["rs"]) == ["rs"]
    assert parse_extensions(["rs,py", " md ", "rs"]) == ["rs", "py", "md"]
    assert parse_extensions([" , "]) is None

def test_no_files_message():
    root = Path("/work")
    assert no_files_message(root) == "No files found in '/work'"
    assert no_files_message(root, ["rs"]) == "No files with the extension 'rs' found in '/work'"
    assert no_files_message(root, ["rs", "py"]) == "No files with the extensions 'rs, py' found in '/work'"

def test_format_helpers():
    assert format_symbol_counts([(";", 3), ("(", 1)]) == ";: 3\n(: 1"

    fb = FileBigrams(path=Path("a.rs"), rel_path="a.rs", bigrams={"()": 1, ";/": 2})
    assert format_file_bigrams(fb) == "--- a.rs ---\n;/: 2\n(): 1"

# --- Test 2: Analyzer ---

def test_analyzer_without_filter_honors_ignore_files(sample_project):
    result = SymbolAnalyzer(sample_project).run()

    assert result is not None
    # bad.rs fails to decode, the other three are read; logs/ is ignored
    assert result.files_scanned == 3
    assert [rel for rel, _ in result.skipped] == ["bad.rs"]
    assert "<" not in result.symbol_counts

    assert result.symbol_counts == {
        "(": 1, ")": 1, "{": 1, "}": 1,
        ";": 2, "/": 2,
        "#": 1, "!": 1,
    }

    # Tables are kept per file; notes.md has none ("# " and "e!" pair a symbol with a non-symbol)
    assert [fb.rel_path for fb in result.bigrams] == ["src/main.rs", "src/pairs.rs"]
    assert result.bigrams[0].bigrams == {"{}": 1}
    assert result.bigrams[1].bigrams == {";/": 2}

def test_analyzer_sorted_counts_descending(sample_project):
    result = SymbolAnalyzer(sample_project, ["rs"]).run()
    counts = [c for _, c in result.sorted_counts()]
    assert counts == sorted(counts, reverse=True)
    assert result.sorted_counts()[0][1] == 2

def test_analyzer_with_filter_includes_ignored_files(sample_project):
    result = SymbolAnalyzer(sample_project, ["log"]).run()
    assert result.symbol_counts == {"<": 3, ">": 3}
    # "<<" lands as a same-symbol chunk, so the file has no bigram table
    assert result.bigrams == []

def test_analyzer_keeps_crlf_line_endings(tmp_path):
    # '\r\n' occupies the first chunk, so ';/' lands in the second one
    (tmp_path / "win.txt").write_bytes(b"\r\n;/")

    result = SymbolAnalyzer(tmp_path).run()

    assert [fb.bigrams for fb in result.bigrams] == [{";/": 1}]
    assert result.symbol_counts == {";": 1, "/": 1}

def test_analyzer_returns_none_without_files(sample_project):
    assert SymbolAnalyzer(sample_project, ["zz"]).run() is None

def test_analyzer_verbose_reports_skipped_files(sample_project, capsys):
    SymbolAnalyzer(sample_project, verbose=True).run()
    err = capsys.readouterr().err
    assert "Skipping bad.rs" in err

def test_analyzer_quiet_by_default(sample_project, capsys):
    SymbolAnalyzer(sample_project).run()
    assert capsys.readouterr().err == ""

# --- Test 3: Integration - CLI Entry Point ---

def test_cli_prints_symbol_counts(sample_project, capsys):
    run_cli(str(sample_project), "-e", "rs")

    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == [";: 2", "/: 2"] or lines[:2] == ["/: 2", ";: 2"]
    assert set(lines) == {";: 2", "/: 2", "(: 1", "): 1", "{: 1", "}: 1"}

def test_cli_prints_bigrams(sample_project, capsys):
    run_cli(str(sample_project), "--extension", "rs,md", "--bigrams")

    out = capsys.readouterr().out
    assert "--- src/pairs.rs ---\n;/: 2" in out
    assert "#: 1" in out

def test_cli_no_files_with_extensions(sample_project, capsys):
    run_cli(str(sample_project), "-e", "zz", "-e", "yy")

    out = capsys.readouterr().out
    assert out.strip() == f"No files with the extensions 'zz, yy' found in '{sample_project.resolve()}'"

def test_cli_no_files_in_empty_dir(tmp_path, capsys):
    run_cli(str(tmp_path))

    out = capsys.readouterr().out
    assert out.strip() == f"No files found in '{tmp_path.resolve()}'"

def test_cli_defaults_to_current_directory(sample_project, monkeypatch, capsys):
    monkeypatch.chdir(sample_project)
    # The default is evaluated when the parser is built
    run_cli("-e", "md")

    assert capsys.readouterr().out.splitlines() == ["#: 1", "!: 1"]

def test_cli_invalid_directory_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(str(tmp_path / "missing"))

    assert exc.value.code == 1
    assert "Error: Invalid directory" in capsys.readouterr().err

def test_cli_verbose_reports_unreadable_files(sample_project, capsys):
    run_cli(str(sample_project), "-v")

    err = capsys.readouterr().err
    assert "Skipping bad.rs" in err
    assert "Skipped 1 unreadable file(s)." in err
