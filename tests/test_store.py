"""Tests for screensync.store module."""

from __future__ import annotations

from pathlib import Path

import pytest

from screensync.exceptions import ExportError, NotFoundError, ValidationError
from screensync.store import ScriptStore


class TestScriptStoreSave:
    def test_save_writes_fdx(self, tmp_path: Path, sample_script: str) -> None:
        store = ScriptStore(tmp_path / "downloads")
        result = store.save("My Play", sample_script, "my_play")

        assert result.success is True
        assert result.message == "Screenplay saved successfully"
        assert result.path == tmp_path / "downloads" / "my_play.fdx"
        assert result.download_url == "/download/my_play.fdx"

        content = result.path.read_text(encoding="utf-8")
        assert "<FinalDraft" in content
        assert "INT. HOUSE - DAY" in content

    def test_custom_extension(self, tmp_path: Path) -> None:
        store = ScriptStore(tmp_path, extension=".xml")
        result = store.save("T", "JOHN", "t")
        assert result.path.name == "t.xml"

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        store = ScriptStore(tmp_path)
        store.save("First", "JOHN", "draft")
        result = store.save("Second", "MARY", "draft")
        assert "MARY" in result.path.read_text(encoding="utf-8")
        assert "JOHN" not in result.path.read_text(encoding="utf-8")

    @pytest.mark.parametrize(
        "title,content,filename",
        [(None, "JOHN", "t"), ("T", "", "t"), ("T", "JOHN", ""), ("", "", "")],
    )
    def test_missing_fields_write_nothing(
        self, tmp_path: Path, title: str | None, content: str, filename: str
    ) -> None:
        store = ScriptStore(tmp_path / "downloads")
        with pytest.raises(ValidationError):
            store.save(title, content, filename)
        assert not (tmp_path / "downloads").exists()

    def test_write_failure_raises_export_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "downloads"
        blocker.write_text("not a directory")
        store = ScriptStore(blocker)
        with pytest.raises(ExportError):
            store.save("T", "JOHN", "t")

    def test_failed_rename_leaves_no_temp_file(self, tmp_path: Path) -> None:
        (tmp_path / "t.fdx").mkdir()
        store = ScriptStore(tmp_path)
        with pytest.raises(ExportError):
            store.save("T", "JOHN", "t")
        assert list(tmp_path.glob("*.tmp")) == []
        assert (tmp_path / "t.fdx").is_dir()

    def test_nul_filename_rejected_before_writing(self, tmp_path: Path) -> None:
        store = ScriptStore(tmp_path / "downloads")
        with pytest.raises(ValidationError):
            store.save("T", "JOHN", "a\x00b")
        assert not (tmp_path / "downloads").exists()


class TestScriptStoreGet:
    def test_get_with_extension(self, tmp_path: Path) -> None:
        store = ScriptStore(tmp_path)
        saved = store.save("T", "JOHN", "t").path
        assert store.get("t.fdx") == saved

    def test_get_without_extension(self, tmp_path: Path) -> None:
        store = ScriptStore(tmp_path)
        saved = store.save("T", "JOHN", "t").path
        assert store.get("t") == saved

    def test_get_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError):
            ScriptStore(tmp_path).get("missing.fdx")

    def test_get_rejects_traversal(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            ScriptStore(tmp_path).get("../secret")


class TestScriptStoreList:
    def test_list_empty_when_missing(self, tmp_path: Path) -> None:
        assert ScriptStore(tmp_path / "nowhere").list_scripts() == []

    def test_list_sorted(self, tmp_path: Path) -> None:
        store = ScriptStore(tmp_path)
        store.save("B", "JOHN", "b")
        store.save("A", "JOHN", "a")
        assert [p.name for p in store.list_scripts()] == ["a.fdx", "b.fdx"]
