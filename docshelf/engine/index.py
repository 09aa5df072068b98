"""Flattened search index derived from the manifest tree."""

from __future__ import annotations

from dataclasses import dataclass

from ..doc_tree_model import DirNode, TreeNode

HIERARCHY_SEPARATOR = " / "


@dataclass(frozen=True)
class FlatIndexEntry:
    """Search record for one document; ``hierarchy_text`` is never displayed."""

    title: str
    path: str
    hierarchy_text: str


def flatten_index(tree: tuple[TreeNode, ...], trail: tuple[str, ...] = ()) -> tuple[FlatIndexEntry, ...]:
    """Depth-first flatten carrying the ancestor title trail."""
    entries: list[FlatIndexEntry] = []
    for node in tree:
        if isinstance(node, DirNode):
            entries.extend(flatten_index(node.children, (*trail, node.title)))
            continue
        entries.append(
            FlatIndexEntry(
                title=node.title,
                path=node.path,
                hierarchy_text=HIERARCHY_SEPARATOR.join((*trail, node.title)).lower(),
            )
        )
    return tuple(entries)


def index_by_path(entries: tuple[FlatIndexEntry, ...]) -> dict[str, FlatIndexEntry]:
    """Map path to entry; the first entry wins for duplicate paths."""
    by_path: dict[str, FlatIndexEntry] = {}
    for entry in entries:
        by_path.setdefault(entry.path, entry)
    return by_path


__all__ = [
    "HIERARCHY_SEPARATOR",
    "FlatIndexEntry",
    "flatten_index",
    "index_by_path",
]
