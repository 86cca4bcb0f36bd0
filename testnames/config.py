from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from .default_rules import (
    DEFAULT_FOLDER_NAME,
    DEFAULT_MAX_WORKERS,
    DEFAULT_SUBSTITUTIONS,
    DEFAULT_TESTS_SUBDIR,
)

@dataclass(frozen=True)
class RenameConfig:
    """Everything one run needs. ``folder_name`` is both the directory and the output label."""
    base_dir: Path
    folder_name: str = DEFAULT_FOLDER_NAME
    dry_run: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS
    substitutions: Tuple[Tuple[str, str], ...] = field(default=DEFAULT_SUBSTITUTIONS)

    def __post_init__(self):
        if not self.folder_name or "/" in self.folder_name or "\\" in self.folder_name:
            raise ValueError(f"folder_name must be a single path segment: {self.folder_name!r}")
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    @classmethod
    def for_program(cls, program_dir: Path, **overrides) -> "RenameConfig":
        """Default layout: <program_dir>/tests/<folder_name>."""
        return cls(base_dir=Path(program_dir) / DEFAULT_TESTS_SUBDIR, **overrides)

    @property
    def folder_path(self) -> Path:
        return (self.base_dir / self.folder_name).expanduser()
