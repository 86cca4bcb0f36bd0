from dataclasses import dataclass
from pathlib import Path

FILE = "file"
DIRECTORY = "directory"
SYMLINK = "symlink"
OTHER = "other"

@dataclass(frozen=True)
class DirectoryEntry:
    path: Path
    name: str
    kind: str  # one of FILE, DIRECTORY, SYMLINK, OTHER

    @property
    def is_regular_file(self) -> bool:
        return self.kind == FILE

@dataclass(frozen=True)
class RenameResult:
    src: Path
    dst: Path
    performed: bool  # False if dry-run or failed
    error: str = ""
    reason: str = ""  # e.g., "dry run", "unchanged"

    @property
    def ok(self) -> bool:
        # Dry-run results are ok without being performed
        return not self.error

@dataclass(frozen=True)
class RenamePlan:
    entry: DirectoryEntry
    new_name: str
    conflict: str = ""  # non-empty when the target is already taken

    @property
    def dst(self) -> Path:
        return self.entry.path.with_name(self.new_name)
