# tests/test_cli.py
import sys
import pytest
from pathlib import Path
from unittest.mock import patch

from spacebench.cli import main
from spacebench.core.corpus import create_test_files

# --- Test 1: Full generated run ---

def test_end_to_end_run(tmp_path, capsys):
    """
    Generates a corpus, benchmarks it and removes it again.
    Both strategies must report the number of spaces that were written.
    """
    folder = tmp_path / "TestFiles"
    expected = create_test_files(tmp_path / "reference", 3, 4, seed=11)

    test_args = ["spacebench", str(folder), "-n", "3", "-l", "4", "--seed", "11"]
    with patch.object(sys, "argv", test_args):
        main()

    out = capsys.readouterr().out
    assert f"({expected:,} spaces)" in out
    assert out.count(f"Spaces:  {expected:,}") == 2
    assert "Lines processed: 12" in out
    assert "Space difference:    0" in out
    assert "removed" in out
    assert not folder.exists()

def test_keep_leaves_corpus(tmp_path, capsys):
    folder = tmp_path / "kept"
    test_args = ["spacebench", str(folder), "-n", "2", "-l", "2", "--keep", "-w", "2"]
    with patch.object(sys, "argv", test_args):
        main()

    assert sorted(p.name for p in folder.iterdir()) == ["test_0.txt", "test_1.txt"]

def test_refuses_to_generate_into_non_empty_folder(tmp_path, capsys):
    work = tmp_path / "work"
    work.mkdir()
    notes = work / "notes.md"
    notes.write_text("keep me", encoding="utf-8")

    test_args = ["spacebench", str(work), "-n", "1", "-l", "1", "--seed", "1"]
    with patch.object(sys, "argv", test_args):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1
    assert "not empty" in capsys.readouterr().err
    assert notes.read_text(encoding="utf-8") == "keep me"
    assert [p.name for p in work.iterdir()] == ["notes.md"]

def test_generates_into_existing_empty_folder(tmp_path, capsys):
    work = tmp_path / "empty"
    work.mkdir()

    test_args = ["spacebench", str(work), "-n", "2", "-l", "3", "--keep"]
    with patch.object(sys, "argv", test_args):
        main()

    assert sorted(p.name for p in work.iterdir()) == ["test_0.txt", "test_1.txt"]

# --- Test 2: Existing folder ---

def test_existing_folder_with_exclude(tmp_path, capsys):
    (tmp_path / "a.txt").write_text("a b c", encoding="utf-8")
    (tmp_path / "b.txt").write_text("  ", encoding="utf-8")
    (tmp_path / "c.txt").write_text("", encoding="utf-8")
    (tmp_path / "noise.log").write_text("          ", encoding="utf-8")

    test_args = ["spacebench", str(tmp_path), "--existing", "-x", "*.log"]
    with patch.object(sys, "argv", test_args):
        main()

    out = capsys.readouterr().out
    assert out.count("Spaces:  4") == 2
    # --existing never deletes the folder
    assert (tmp_path / "a.txt").exists()

def test_missing_existing_folder_exits_with_error(tmp_path, capsys):
    test_args = ["spacebench", str(tmp_path / "missing"), "--existing"]
    with patch.object(sys, "argv", test_args):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1
    assert "Directory not found" in capsys.readouterr().err

def test_invalid_file_count_is_rejected(tmp_path):
    test_args = ["spacebench", str(tmp_path / "x"), "-n", "0"]
    with patch.object(sys, "argv", test_args):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 2
