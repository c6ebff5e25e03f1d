"""Tests for the local FileSystem implementation."""

from pathlib import Path

import pytest

from scriptfolders.core.filesystem import LocalFileSystem
from scriptfolders.core.protocols import FileSystem
from tests._support import write_tree
from tests._support.memory_fs import InMemoryFileSystem


@pytest.fixture()
def fs() -> LocalFileSystem:
    return LocalFileSystem()


class TestProtocol:
    def test_local_satisfies_protocol(self, fs):
        assert isinstance(fs, FileSystem)

    def test_in_memory_fake_satisfies_protocol(self):
        assert isinstance(InMemoryFileSystem(), FileSystem)


class TestLocalFileSystem:
    def test_list_subdirectories_names_only(self, fs, tmp_path: Path):
        write_tree(tmp_path, {"1.0": {}, "2.0": {}})
        (tmp_path / "readme.sql").write_text("x", encoding="utf-8")
        assert sorted(fs.list_subdirectories(tmp_path)) == ["1.0", "2.0"]

    def test_list_files_matches_pattern(self, fs, tmp_path: Path):
        write_tree(tmp_path, {"1.0": {"a.sql": "", "b.txt": "", "c.sql.bak": ""}, "1.0/sub": {}})
        assert fs.list_files(tmp_path / "1.0", "*.sql") == ["a.sql"]

    def test_open_for_read_returns_bytes(self, fs, tmp_path: Path):
        write_tree(tmp_path, {"1.0": {"a.sql": "SELECT 1;"}})
        with fs.open_for_read(tmp_path / "1.0" / "a.sql") as stream:
            assert stream.read() == b"SELECT 1;"

    def test_missing_directory_raises_oserror(self, fs, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            fs.list_subdirectories(tmp_path / "missing")
        with pytest.raises(FileNotFoundError):
            fs.list_files(tmp_path / "missing", "*.sql")
