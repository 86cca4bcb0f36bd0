import logging
import stat
from pathlib import Path
from typing import List

from .errors import DirectoryReadError
from .models import DIRECTORY, FILE, OTHER, SYMLINK, DirectoryEntry, RenameResult
from .utils import ensure_dir

logger = logging.getLogger(__name__)

class FolderScanner:
    """Lists the immediate entries of one folder and classifies them.

    A symlink counts as a file when its target is a regular file; links to
    directories or special nodes are reported as ``symlink`` and skipped.

    Entries that cannot be stat'ed are not returned; they are collected in
    ``failures`` so the caller can report them next to the rename results.
    """

    def __init__(self, root: Path):
        self.root = root
        self.failures: List[RenameResult] = []

    def scan(self) -> List[DirectoryEntry]:
        root = ensure_dir(self.root)
        try:
            paths = sorted(root.iterdir())
        except OSError as e:
            raise DirectoryReadError(f"Cannot read directory {root}: {e}") from e

        self.failures = []
        entries: List[DirectoryEntry] = []
        for p in paths:
            try:
                mode = p.lstat().st_mode
                if stat.S_ISLNK(mode):
                    mode = _link_kind_mode(p.stat().st_mode)
            except OSError as e:
                logger.error("Cannot stat %s: %s", p, e)
                self.failures.append(RenameResult(p, p, performed=False, error=str(e)))
                continue
            entries.append(DirectoryEntry(path=p, name=p.name, kind=_kind(mode)))
        return entries


def regular_files(entries: List[DirectoryEntry]) -> List[DirectoryEntry]:
    """Keep plain files. Directories, links to directories and special nodes are skipped."""
    files = []
    for entry in entries:
        if entry.is_regular_file:
            files.append(entry)
        else:
            logger.debug("Skipping %s (%s)", entry.name, entry.kind)
    return files


def _link_kind_mode(target_mode: int) -> int:
    # Links to regular files are renamed like files; anything else stays a link
    if stat.S_ISREG(target_mode):
        return target_mode
    return stat.S_IFLNK


def _kind(mode: int) -> str:
    if stat.S_ISLNK(mode):
        return SYMLINK
    if stat.S_ISDIR(mode):
        return DIRECTORY
    if stat.S_ISREG(mode):
        return FILE
    return OTHER
