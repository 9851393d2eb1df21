"""
Folio Kernel — Tag Index

The tag universe is derived from the projects on every call. Nothing is
cached: a stale universe after a portfolio replacement would leave chips
pointing at tags that no longer exist.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from engine.kernel.types import Project

# Sentinel selection that matches every project
ALL = "All"


def tags_of(projects: Iterable[Project]) -> list[str]:
    """Sorted, de-duplicated tags across all projects."""
    return sorted({tag for project in projects for tag in project.tags})


def filter_projects(projects: Sequence[Project], selected: str) -> list[Project]:
    """
    Projects visible under `selected`, in their original order.

    ALL returns every project. Any other value is an exact, case-sensitive
    tag match. A tag outside the universe simply matches nothing.
    """
    if selected == ALL:
        return list(projects)
    return [p for p in projects if selected in p.tags]


def chip_labels(projects: Iterable[Project]) -> list[str]:
    """
    Chip row labels: ALL first, then the tag universe.

    A tag spelled exactly like the sentinel folds into the ALL chip, so the
    row never shows two chips that both read as selected. Empty when no
    project has tags.
    """
    tags = tags_of(projects)
    if not tags:
        return []
    return [ALL, *(tag for tag in tags if tag != ALL)]
