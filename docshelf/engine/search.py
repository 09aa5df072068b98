"""Sidebar filtering by free-text query."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .index import FlatIndexEntry
from .sidebar import SidebarLink


def normalize_query(query: str) -> str:
    return query.strip().lower()


def link_haystack(link: SidebarLink, entry: FlatIndexEntry | None) -> str:
    """Label plus hierarchy text; links missing from the index use the label only."""
    hierarchy_text = entry.hierarchy_text if entry is not None else ""
    return f"{link.label} {hierarchy_text}".lower()


def hidden_link_paths(
    links: Iterable[SidebarLink],
    entries_by_path: Mapping[str, FlatIndexEntry],
    query: str,
) -> set[str]:
    """Return paths of links hidden for ``query``.

    Matching is an unanchored, case-insensitive substring test, so ``install``
    also matches ``uninstall``. An empty query hides nothing. Directories are
    never candidates.
    """
    needle = normalize_query(query)
    if not needle:
        return set()
    return {
        link.path
        for link in links
        if needle not in link_haystack(link, entries_by_path.get(link.path))
    }


__all__ = [
    "normalize_query",
    "link_haystack",
    "hidden_link_paths",
]
