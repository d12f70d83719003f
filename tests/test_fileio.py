"""Tests for femto.fileio -- loading and saving lines."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from femto.errors import FileLoadError, FileSaveError, NotARegularFileError
from femto.fileio import load_lines, save_lines, split_lines


class TestSplitLines:
    def test_trailing_newline_does_not_add_line(self) -> None:
        assert split_lines(b"a\nb\n") == [b"a", b"b"]

    def test_missing_trailing_newline_keeps_last_line(self) -> None:
        assert split_lines(b"a\nb") == [b"a", b"b"]

    def test_empty_input(self) -> None:
        assert split_lines(b"") == [b""]

    def test_blank_lines_preserved(self) -> None:
        assert split_lines(b"\n\nx\n") == [b"", b"", b"x"]

    def test_carriage_returns_are_content(self) -> None:
        assert split_lines(b"a\r\nb\r\n") == [b"a\r", b"b\r"]


class TestLoadLines:
    def test_missing_file_is_one_empty_line(self, tmp_path: Path) -> None:
        assert load_lines(str(tmp_path / "new.txt")) == [b""]

    def test_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_bytes(b"hello\nworld\n")
        assert load_lines(str(path)) == [b"hello", b"world"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        assert load_lines(str(path)) == [b""]

    def test_binary_content_untouched(self, tmp_path: Path) -> None:
        path = tmp_path / "bin"
        path.write_bytes(b"\xff\x00\xfe\n")
        assert load_lines(str(path)) == [b"\xff\x00\xfe"]

    def test_directory_is_not_regular(self, tmp_path: Path) -> None:
        with pytest.raises(NotARegularFileError) as exc_info:
            load_lines(str(tmp_path))
        assert "not a regular file" in str(exc_info.value)

    def test_not_regular_is_a_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileLoadError):
            load_lines(str(tmp_path))

    def test_stat_failure_is_load_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_bytes(b"x")
        # A path through a regular file fails with ENOTDIR, not ENOENT.
        with pytest.raises(FileLoadError):
            load_lines(str(blocker / "child"))

    @pytest.mark.skipif(
        hasattr(os, "geteuid") and os.geteuid() == 0,
        reason="root can read unreadable files",
    )
    def test_unreadable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "secret"
        path.write_bytes(b"x\n")
        path.chmod(0)
        try:
            with pytest.raises(FileLoadError):
                load_lines(str(path))
        finally:
            path.chmod(0o600)


class TestSaveLines:
    def test_each_line_followed_by_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        written = save_lines([b"a", b"", b"bc"], str(path))
        assert path.read_bytes() == b"a\n\nbc\n"
        assert written == 6

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        path.write_bytes(b"old content that is longer\n")
        save_lines([b"new"], str(path))
        assert path.read_bytes() == b"new\n"

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileSaveError) as exc_info:
            save_lines([b"x"], str(tmp_path / "nope" / "out.txt"))
        assert "directory does not exist" in str(exc_info.value)


class TestRoundTrip:
    @pytest.mark.parametrize(
        "content",
        [b"one\ntwo\n", b"\n", b"tabs\there\n\n\nend\n", b"\xc3\xa9t\xc3\xa9\n"],
    )
    def test_load_then_save_is_identical(self, tmp_path: Path, content: bytes) -> None:
        path = tmp_path / "f.txt"
        path.write_bytes(content)
        save_lines(load_lines(str(path)), str(path))
        assert path.read_bytes() == content

    def test_missing_final_newline_gains_one(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_bytes(b"a\nb")
        save_lines(load_lines(str(path)), str(path))
        assert path.read_bytes() == b"a\nb\n"
