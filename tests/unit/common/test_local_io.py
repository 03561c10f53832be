"""Tests for common.local_io module."""

from pathlib import Path

import pytest

from common.local_io import backup_path, list_markdown_files, read_document, write_document


class TestListMarkdownFiles:
    def test_only_markdown_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "b.md").write_text("b")
        (tmp_path / "a.md").write_text("a")
        (tmp_path / "a.BAK").write_text("old")
        (tmp_path / "notes.txt").write_text("x")
        (tmp_path / "sub.md").mkdir()

        assert [p.name for p in list_markdown_files(tmp_path)] == ["a.md", "b.md"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list_markdown_files(tmp_path) == []


class TestWriteDocument:
    def test_backup_keeps_original(self, tmp_path: Path) -> None:
        path = tmp_path / "post.md"
        path.write_text("original", encoding="utf-8")

        bak = write_document(path, "updated")

        assert bak == tmp_path / "post.BAK"
        assert bak.read_text(encoding="utf-8") == "original"
        assert read_document(path) == "updated"

    def test_existing_backup_is_never_overwritten(self, tmp_path: Path) -> None:
        path = tmp_path / "post.md"
        path.write_text("original", encoding="utf-8")
        backup_path(path).write_text("older backup", encoding="utf-8")

        with pytest.raises(FileExistsError):
            write_document(path, "updated")

        assert read_document(path) == "original"
        assert backup_path(path).read_text(encoding="utf-8") == "older backup"

    def test_no_backup_writes_in_place(self, tmp_path: Path) -> None:
        path = tmp_path / "post.md"
        path.write_text("original", encoding="utf-8")

        assert write_document(path, "updated", backup=False) is None
        assert read_document(path) == "updated"
        assert not backup_path(path).exists()


class TestBackupPath:
    def test_replaces_suffix(self) -> None:
        assert backup_path(Path("/blog/post.md")) == Path("/blog/post.BAK")
