import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional

from testnames.config import RenameConfig
from testnames.default_rules import DEFAULT_FOLDER_NAME, DEFAULT_MAX_WORKERS
from testnames.errors import DirectoryReadError
from testnames.logger import configure_logging
from testnames.models import RenameResult
from testnames.naming import NameRules, plan_renames
from testnames.renamer import SafeRenamer
from testnames.scanner import FolderScanner, regular_files
from testnames.utils import property_line

logger = logging.getLogger("testnames")

PROGRAM_DIR = Path(__file__).resolve().parent

def rename_folder(config: RenameConfig, emit: Callable[[str], None] = print) -> List[RenameResult]:
    """Rename every regular file in the configured folder and emit one line per success.

    Returns all results, stat failures first. An unreadable folder raises
    DirectoryReadError before anything is renamed.
    """
    folder = config.folder_path
    scanner = FolderScanner(folder)
    entries = scanner.scan()

    files = regular_files(entries)

    # Non-files and unreadable entries still occupy their names
    existing = [e.name for e in entries] + [r.src.name for r in scanner.failures]
    plans = plan_renames(files, NameRules(config.substitutions), existing)

    def report(result: RenameResult) -> None:
        if result.ok:
            emit(property_line(config.folder_name, result.dst.name))

    renamer = SafeRenamer(dry_run=config.dry_run, max_workers=config.max_workers)
    results = scanner.failures + renamer.rename_many(plans, on_result=report)

    failed = sum(1 for r in results if not r.ok)
    verb = "would rename" if config.dry_run else "renamed"
    logger.info("%s: %s %d, failed %d", folder, verb, len(results) - failed, failed)
    return results


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Replace '_' with '-' and 'lox' with 'lax' in the names of the files in "
            "tests/<folder>, printing a CTest set_property line for each renamed file."
        )
    )
    parser.add_argument("folder", nargs="?", default=DEFAULT_FOLDER_NAME,
                        help="Folder under the base directory, also used as the test label (default: %(default)s)")
    parser.add_argument("--base-dir", type=Path, default=None,
                        help="Parent of the folder (default: the tests/ directory next to this script)")
    parser.add_argument("--dry-run", action="store_true", help="Print the lines without renaming anything")
    parser.add_argument("--workers", type=int, default=DEFAULT_MAX_WORKERS, help="Concurrent renames")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)

    overrides = dict(folder_name=args.folder, dry_run=args.dry_run, max_workers=args.workers)
    try:
        if args.base_dir is not None:
            config = RenameConfig(base_dir=args.base_dir, **overrides)
        else:
            config = RenameConfig.for_program(PROGRAM_DIR, **overrides)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return

    try:
        rename_folder(config)
    except DirectoryReadError as e:
        logger.error("Error reading directory: %s", e)

if __name__ == "__main__":
    main()
