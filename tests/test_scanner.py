"""Tests for FolderScanner."""

import os
from pathlib import Path

import pytest

from testnames.errors import DirectoryReadError, InvalidPathError, RenameConflictError, RenamerError
from testnames.models import DIRECTORY, FILE, OTHER, SYMLINK
from testnames.scanner import FolderScanner, regular_files


class TestFolderScanner:
    """Test listing and classification."""

    def test_scan_classifies_entries(self, operator_dir, make_files):
        """Links to files count as files; links to directories stay links."""
        make_files(operator_dir, "b_file.txt", "a_file.txt")
        (operator_dir / "sub_dir").mkdir()
        os.symlink(operator_dir / "a_file.txt", operator_dir / "link_lox")
        os.symlink(operator_dir / "sub_dir", operator_dir / "link_dir")

        entries = FolderScanner(operator_dir).scan()

        assert [(e.name, e.kind) for e in entries] == [
            ("a_file.txt", FILE),
            ("b_file.txt", FILE),
            ("link_dir", SYMLINK),
            ("link_lox", FILE),
            ("sub_dir", DIRECTORY),
        ]
        assert entries[0].path == operator_dir.resolve() / "a_file.txt"

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs mkfifo")
    def test_special_nodes_are_other(self, operator_dir):
        os.mkfifo(operator_dir / "pipe_lox")
        entries = FolderScanner(operator_dir).scan()
        assert entries[0].kind == OTHER

    def test_scan_is_not_recursive(self, operator_dir, make_files):
        """Files inside subdirectories are never listed."""
        nested = operator_dir / "nested"
        nested.mkdir()
        make_files(nested, "deep_lox.txt")

        entries = FolderScanner(operator_dir).scan()

        assert [e.name for e in entries] == ["nested"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DirectoryReadError, match="does not exist"):
            FolderScanner(tmp_path / "nope").scan()

    def test_not_a_directory(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x", encoding="utf-8")
        with pytest.raises(InvalidPathError, match="Not a directory"):
            FolderScanner(target).scan()

    def test_listing_failure(self, operator_dir, monkeypatch):
        """An OSError while listing becomes DirectoryReadError."""
        def fail(self):
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "iterdir", fail)

        with pytest.raises(DirectoryReadError, match="Cannot read directory"):
            FolderScanner(operator_dir).scan()

    def test_stat_failure_is_isolated(self, operator_dir, make_files, monkeypatch):
        """One entry that cannot be stat'ed is reported; the rest are still listed."""
        make_files(operator_dir, "a_ok.txt", "b_bad.txt", "c_ok.txt")
        real_lstat = Path.lstat

        def flaky_lstat(self):
            if self.name == "b_bad.txt":
                raise PermissionError("stat denied")
            return real_lstat(self)

        monkeypatch.setattr(Path, "lstat", flaky_lstat)
        scanner = FolderScanner(operator_dir)

        entries = scanner.scan()

        assert [e.name for e in entries] == ["a_ok.txt", "c_ok.txt"]
        assert len(scanner.failures) == 1
        assert scanner.failures[0].src.name == "b_bad.txt"
        assert "stat denied" in scanner.failures[0].error
        assert not scanner.failures[0].ok

    def test_broken_link_is_a_failure(self, operator_dir, make_files):
        """A dangling link cannot be classified and is reported like a stat error."""
        make_files(operator_dir, "a_ok.txt")
        os.symlink(operator_dir / "missing.txt", operator_dir / "dangling_lox")
        scanner = FolderScanner(operator_dir)

        entries = scanner.scan()

        assert [e.name for e in entries] == ["a_ok.txt"]
        assert [f.src.name for f in scanner.failures] == ["dangling_lox"]

    def test_overlong_name_is_a_directory_read_error(self, tmp_path):
        """Stat errors other than "missing" still surface as DirectoryReadError."""
        with pytest.raises(DirectoryReadError):
            FolderScanner(tmp_path / ("a" * 300)).scan()


class TestRegularFiles:
    """Test the file filter."""

    def test_only_files_survive(self, operator_dir, make_files):
        make_files(operator_dir, "keep_me.txt")
        (operator_dir / "skip_dir").mkdir()
        os.symlink(operator_dir / "keep_me.txt", operator_dir / "file_link")
        os.symlink(operator_dir / "skip_dir", operator_dir / "dir_link")

        files = regular_files(FolderScanner(operator_dir).scan())

        assert [f.name for f in files] == ["file_link", "keep_me.txt"]


def test_errors_share_one_base():
    assert issubclass(DirectoryReadError, RenamerError)
    assert issubclass(RenameConflictError, RenamerError)
