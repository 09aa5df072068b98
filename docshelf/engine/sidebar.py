"""Pure renderable sidebar model mirroring the manifest tree.

Expand/collapse, visibility and active-link flags live in ``AppState``; the
nodes here never change after construction.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..doc_tree_model import DirNode, TreeNode


@dataclass(frozen=True)
class SidebarLink:
    """Navigable document link tagged with its document path."""

    path: str
    label: str
    depth: int


@dataclass(frozen=True)
class SidebarDir:
    """Toggle control owning a children container; starts collapsed."""

    path: str
    label: str
    depth: int
    children: tuple["SidebarNode", ...] = ()


SidebarNode = SidebarDir | SidebarLink


def build_sidebar(tree: tuple[TreeNode, ...], depth: int = 0) -> tuple[SidebarNode, ...]:
    nodes: list[SidebarNode] = []
    for node in tree:
        if isinstance(node, DirNode):
            nodes.append(
                SidebarDir(
                    path=node.path,
                    label=node.title,
                    depth=depth,
                    children=build_sidebar(node.children, depth + 1),
                )
            )
        else:
            nodes.append(SidebarLink(path=node.path, label=node.title, depth=depth))
    return tuple(nodes)


def iter_links(nodes: tuple[SidebarNode, ...]) -> Iterator[SidebarLink]:
    """Yield links depth-first, including those inside collapsed directories."""
    for node in nodes:
        if isinstance(node, SidebarDir):
            yield from iter_links(node.children)
        else:
            yield node


def iter_dirs(nodes: tuple[SidebarNode, ...]) -> Iterator[SidebarDir]:
    for node in nodes:
        if isinstance(node, SidebarDir):
            yield node
            yield from iter_dirs(node.children)


__all__ = [
    "SidebarLink",
    "SidebarDir",
    "SidebarNode",
    "build_sidebar",
    "iter_links",
    "iter_dirs",
]
