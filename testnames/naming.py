import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from .default_rules import DEFAULT_SUBSTITUTIONS
from .models import DirectoryEntry, RenamePlan

logger = logging.getLogger(__name__)

class NameRules:
    """Ordered literal substitutions applied to a file name."""
    def __init__(self, substitutions: Sequence[Tuple[str, str]] = DEFAULT_SUBSTITUTIONS):
        self.substitutions: Tuple[Tuple[str, str], ...] = tuple(substitutions)

    def apply(self, name: str) -> str:
        for old, new in self.substitutions:
            name = name.replace(old, new)
        return name


def plan_renames(entries: Iterable[DirectoryEntry], rules: NameRules,
                 existing: Iterable[str] = ()) -> List[RenamePlan]:
    """Pair each entry with its new name and flag targets that are already taken.

    ``existing`` holds every name currently in the folder, files or not.
    A target clashes when another entry already has that name, or when an
    earlier source (in sorted order) claimed it in this batch.
    """
    entries = sorted(entries, key=lambda e: e.name)
    present = set(existing) | {e.name for e in entries}
    claimed: Dict[str, str] = {}
    plans: List[RenamePlan] = []

    for entry in entries:
        new_name = rules.apply(entry.name)
        conflict = ""
        if new_name != entry.name and new_name in present:
            conflict = f"target already exists: {new_name}"
        elif new_name in claimed:
            conflict = f"target already claimed by {claimed[new_name]}"
        else:
            claimed[new_name] = entry.name

        if conflict:
            logger.debug("Conflict for %s: %s", entry.name, conflict)
        plans.append(RenamePlan(entry, new_name, conflict))
    return plans
