"""Tests for crash-safe file writing."""

from pathlib import Path

import pytest

from ghswitch.utils.fileio import atomic_write_bytes, replace_atomically, write_temp_sibling


class TestWriteTempSibling:
    """Test temp file creation."""

    def test_temp_in_same_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "config"
        tmp = write_temp_sibling(target, b"data")
        assert tmp.parent == tmp_path
        assert tmp.read_bytes() == b"data"
        assert not target.exists()

    def test_creates_missing_parent(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "config"
        tmp = write_temp_sibling(target, b"")
        assert tmp.parent == target.parent

    def test_mode(self, tmp_path: Path) -> None:
        tmp = write_temp_sibling(tmp_path / "config", b"x", mode=0o640)
        assert (tmp.stat().st_mode & 0o777) == 0o640

    def test_write_failure_removes_temp(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def failing_fsync(fd: int) -> None:
            raise OSError("fsync failed")

        monkeypatch.setattr("ghswitch.utils.fileio.os.fsync", failing_fsync)

        with pytest.raises(OSError, match="fsync failed"):
            write_temp_sibling(tmp_path / "config", b"x")

        assert list(tmp_path.iterdir()) == []


class TestReplaceAtomically:
    """Test the final replace step."""

    def test_replaces_target(self, tmp_path: Path) -> None:
        target = tmp_path / "config"
        target.write_text("old")
        tmp = write_temp_sibling(target, b"new")

        replace_atomically(tmp, target)

        assert target.read_text() == "new"
        assert not tmp.exists()

    def test_failure_removes_temp(self, tmp_path: Path) -> None:
        target = tmp_path / "dir-target"
        target.mkdir()
        tmp = write_temp_sibling(tmp_path / "config", b"new")

        with pytest.raises(OSError):
            replace_atomically(tmp, target)

        assert not tmp.exists()


def test_atomic_write_bytes(tmp_path: Path) -> None:
    target = tmp_path / "file"
    atomic_write_bytes(target, b"payload")
    assert target.read_bytes() == b"payload"
    assert [p.name for p in tmp_path.iterdir()] == ["file"]
