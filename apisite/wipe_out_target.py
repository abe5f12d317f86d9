"""Logic for removing the output of a previous run before regenerating."""

import fnmatch
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from apisite.link_resolver import pattern_glob

logger = logging.getLogger(__name__)


@dataclass
class WipePlan:
    """Files and directories to delete, in deletion order."""

    resource_entries: list[Path] = field(default_factory=list)
    common_files: list[Path] = field(default_factory=list)
    generated_files: list[Path] = field(default_factory=list)
    completed: int = 0

    def steps(self) -> list[Path]:
        """All entries in the order they are removed."""
        return [*self.resource_entries, *self.common_files, *self.generated_files]


def _within(path: Path, roots: Iterable[Path]) -> bool:
    return any(path == r or r in path.parents for r in roots)


def plan_wipe(target: Path, config: dict[str, Any]) -> WipePlan:
    """Collect everything a previous run could have generated under ``target``.

    Only resource mirror subtrees, common outputs named in the configuration
    and files matching a configured filename pattern are listed.
    """
    plan = WipePlan()
    if not target.is_dir():
        return plan

    resource_roots: list[Path] = []
    for dest in config["resources"].values():
        root = target / dest
        if not root.is_dir():
            continue
        resource_roots.append(root)
        # Children first, deepest paths first.
        children = sorted(
            root.rglob("*"), key=lambda p: (len(p.parts), str(p)), reverse=True
        )
        plan.resource_entries.extend(children)
        plan.resource_entries.append(root)

    files = sorted(
        p for p in target.rglob("*") if p.is_file() and not _within(p, resource_roots)
    )

    common = set(config["templates"]["common"])
    common_names = {Path(name).name for name in common}
    for p in files:
        rel = p.relative_to(target).as_posix()
        if rel in common or p.name in common_names:
            plan.common_files.append(p)

    # A mask with a directory part matches the path below the target,
    # a bare mask matches the file name at any depth.
    masks = [pattern_glob(m) for m in config["filenames"].values() if m]
    taken = set(plan.common_files)
    for p in files:
        if p in taken:
            continue
        rel = p.relative_to(target).as_posix()
        if any(
            fnmatch.fnmatchcase(rel if "/" in mask else p.name, mask)
            for mask in masks
        ):
            plan.generated_files.append(p)

    return plan


def execute_wipe(plan: WipePlan) -> bool:
    """Delete the planned entries, stopping at the first failure.

    ``plan.completed`` counts the entries removed before stopping.
    """
    for entry in plan.steps()[plan.completed :]:
        try:
            if entry.is_dir() and not entry.is_symlink():
                entry.rmdir()
            else:
                entry.unlink()
        except OSError as e:
            logger.warning("Cannot remove %s: %s", entry, e)
            return False
        plan.completed += 1
        logger.debug("Removed %s", entry)
    return True


def wipe_out_target(target: Path, config: dict[str, Any]) -> bool:
    """Wipe previously generated output from ``target``.

    Returns False when some entry could not be removed; nothing is rolled back.
    """
    plan = plan_wipe(target, config)
    logger.info("Wiping %d generated entries from %s", len(plan.steps()), target)
    return execute_wipe(plan)
