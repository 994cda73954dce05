"""Overlay composition: which trees get copied, and where."""
from pathlib import Path
from typing import List, Tuple

from woragis.models import MaterializationTask, Overlay, ResolvedSources

# Top-level names the base template may never write into
RESERVED_SUBDIRS = frozenset(overlay.subdir for overlay in Overlay)


def effective_overlays(with_ci: bool, with_infra: bool) -> Tuple[bool, bool]:
    """Apply the overlay implication rule.

    Enabling infrastructure always enables CI.

    Returns:
        Tuple of (effective_ci, effective_infra)
    """
    return (with_ci or with_infra, with_infra)


def build_tasks(sources: ResolvedSources, project_root: Path) -> List[MaterializationTask]:
    """Build the ordered copy list: base first, then CI, then infrastructure.

    Destinations are disjoint: the base copy skips the overlay subdirectory
    names, and each overlay lands in its own fixed subdirectory.
    """
    project_root = Path(project_root)
    tasks = [
        MaterializationTask(
            label="base",
            source=sources.base_path,
            destination=project_root,
            exclude=RESERVED_SUBDIRS,
        )
    ]

    if sources.ci_overlay_path is not None:
        tasks.append(MaterializationTask(
            label=Overlay.CI.value,
            source=sources.ci_overlay_path,
            destination=project_root / Overlay.CI.subdir,
            overlay=Overlay.CI,
        ))

    if sources.infra_overlay_path is not None:
        tasks.append(MaterializationTask(
            label=Overlay.INFRA.value,
            source=sources.infra_overlay_path,
            destination=project_root / Overlay.INFRA.subdir,
            overlay=Overlay.INFRA,
        ))

    return tasks
