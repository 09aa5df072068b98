"""Domain datatypes for manifest document trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileNode:
    """One document leaf; ``path`` is site-relative and POSIX-separated."""

    name: str
    path: str
    title: str = ""


@dataclass(frozen=True)
class DirNode:
    """Directory entry with ordered children; ``path`` ends with ``/``."""

    name: str
    path: str
    title: str = ""
    children: tuple["TreeNode", ...] = ()


TreeNode = DirNode | FileNode


def iter_file_nodes(tree: tuple[TreeNode, ...]):
    """Yield every ``FileNode`` in depth-first order."""
    for node in tree:
        if isinstance(node, DirNode):
            yield from iter_file_nodes(node.children)
        else:
            yield node


__all__ = [
    "FileNode",
    "DirNode",
    "TreeNode",
    "iter_file_nodes",
]
