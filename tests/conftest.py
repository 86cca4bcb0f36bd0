"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def program_dir(tmp_path: Path) -> Path:
    """A fake program directory with an empty tests/operator folder."""
    (tmp_path / "tests" / "operator").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def operator_dir(program_dir: Path) -> Path:
    return program_dir / "tests" / "operator"


@pytest.fixture
def make_files():
    """Create small text files named after their content."""
    def _make(folder: Path, *names: str) -> None:
        for name in names:
            (folder / name).write_text(name, encoding="utf-8")
    return _make
