import errno
import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, List, Optional

from .default_rules import DEFAULT_MAX_WORKERS
from .errors import RenameConflictError, RenameError
from .models import RenamePlan, RenameResult

logger = logging.getLogger(__name__)

class SafeRenamer:
    """Renames files inside one folder without ever overwriting an existing file."""

    def __init__(self, dry_run: bool = True, max_workers: int = DEFAULT_MAX_WORKERS):
        self.dry_run = dry_run
        self.max_workers = max_workers

    def rename_one(self, plan: RenamePlan) -> RenameResult:
        src = plan.entry.path
        dst = plan.dst
        try:
            if plan.conflict:
                raise RenameConflictError(plan.conflict)

            if src == dst:
                reason = "unchanged"
            elif dst.exists() or dst.is_symlink():
                # Something appeared after planning
                raise RenameConflictError(f"target already exists: {dst.name}")
            else:
                reason = ""

            if self.dry_run:
                return RenameResult(src, dst, performed=False, reason="dry run")

            try:
                if src == dst:
                    os.rename(src, dst)
                else:
                    rename_no_clobber(src, dst)
            except FileExistsError as e:
                raise RenameConflictError(f"target already exists: {dst.name}") from e
            except OSError as e:
                raise RenameError(f"Failed to rename {src.name}: {e}") from e
        except RenameError as e:
            logger.error("Error renaming file %s: %s", src, e)
            return RenameResult(src, dst, performed=False, error=str(e))

        logger.debug("Renamed %s -> %s", src.name, dst.name)
        return RenameResult(src, dst, performed=True, reason=reason)

    def rename_many(self, plans: List[RenamePlan],
                    on_result: Optional[Callable[[RenameResult], None]] = None) -> List[RenameResult]:
        """Run every rename as its own task and wait for all of them.

        ``on_result`` is called in completion order; the returned list follows
        the order of ``plans``.
        """
        results: List[Optional[RenameResult]] = [None] * len(plans)
        if not plans:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="rename") as pool:
            futures = {pool.submit(self.rename_one, plan): i for i, plan in enumerate(plans)}
            for future in as_completed(futures):
                result = future.result()
                results[futures[future]] = result
                if on_result is not None:
                    on_result(result)
        return results  # type: ignore[return-value]


# Filesystems that cannot hard link (FAT, some network shares)
_NO_HARDLINK_ERRNOS = {errno.EPERM, errno.EXDEV, errno.EMLINK, errno.ENOTSUP, errno.EOPNOTSUPP}


def rename_no_clobber(src: Path, dst: Path) -> None:
    """Move ``src`` to ``dst``; raise FileExistsError instead of replacing ``dst``.

    Hard link then unlink, so the existence check and the move are one step.
    Where hard links are unavailable this degrades to check-then-rename.
    """
    try:
        os.link(src, dst, follow_symlinks=False)
    except FileExistsError:
        raise
    except NotImplementedError:
        _checked_rename(src, dst)
        return
    except OSError as e:
        if e.errno not in _NO_HARDLINK_ERRNOS:
            raise
        _checked_rename(src, dst)
        return

    try:
        os.unlink(src)
    except OSError:
        os.unlink(dst)
        raise


def _checked_rename(src: Path, dst: Path) -> None:
    if os.path.lexists(dst):
        raise FileExistsError(errno.EEXIST, "File exists", str(dst))
    os.rename(src, dst)
