"""Tests for screensync.io module - text I/O utilities."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from screensync.io import read_text, write_text


class TestReadText:
    def test_read_unicode(self, tmp_path: Path) -> None:
        path = tmp_path / "script.txt"
        path.write_text("JOSÉ\n¡Hola!", encoding="utf-8")
        assert read_text(path) == "JOSÉ\n¡Hola!"

    def test_read_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_text(tmp_path / "nonexistent.txt")

    def test_read_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("JOHN\n"))
        assert read_text(Path("-")) == "JOHN\n"


class TestWriteText:
    def test_writes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.fdx"
        write_text(path, "<FinalDraft/>")
        assert path.read_text(encoding="utf-8") == "<FinalDraft/>"

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "out.fdx"
        write_text(path, "x")
        assert path.exists()

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        write_text(tmp_path / "out.fdx", "x")
        assert list(tmp_path.glob("*.tmp")) == []

    def test_overwrites(self, tmp_path: Path) -> None:
        path = tmp_path / "out.fdx"
        write_text(path, "first")
        write_text(path, "second")
        assert path.read_text(encoding="utf-8") == "second"

    def test_failed_rename_removes_temp_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.fdx"
        target.mkdir()
        with pytest.raises(OSError):
            write_text(target, "x")
        assert list(tmp_path.glob("*.tmp")) == []
