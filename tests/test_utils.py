import os

import pytest

from term_todo.utils import append_line, write_text


def test_write_text(tmp_path):
    file = tmp_path / "file.txt"
    file.write_text("old contents")
    write_text(file, "hello")
    assert file.read_text() == "hello"


def test_write_text_atomic(tmp_path):
    file = tmp_path / "file.txt"
    write_text(file, "héllo", atomic=True)
    assert file.read_text(encoding="utf-8") == "héllo"
    assert [p.name for p in tmp_path.iterdir()] == ["file.txt"]


def test_append_line_adds_missing_newline(tmp_path):
    file = tmp_path / "list"
    file.write_text("a")
    append_line(file, "b")
    append_line(file, "c")
    assert file.read_text() == "a\nb\nc\n"


def test_append_line_empty_file(tmp_path):
    file = tmp_path / "list"
    file.write_text("")
    append_line(file, "b")
    assert file.read_text() == "b\n"


def test_write_text_atomic_failure_leaves_no_temp_file(tmp_path):
    file = tmp_path / "file.txt"
    file.write_text("old")
    with pytest.raises(UnicodeEncodeError):
        write_text(file, "bad \ud800", atomic=True)
    assert [p.name for p in tmp_path.iterdir()] == ["file.txt"]
    assert file.read_text() == "old"


def test_write_text_atomic_replace_failure(tmp_path, monkeypatch):
    def replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", replace)
    with pytest.raises(OSError):
        write_text(tmp_path / "file.txt", "hello", atomic=True)
    assert list(tmp_path.iterdir()) == []
