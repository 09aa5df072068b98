"""Display titles and default-document selection for document trees."""

from __future__ import annotations

import re

from .types import DirNode, FileNode, TreeNode

_EXTENSION_RE = re.compile(r"\.(md|markdown)$", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[-_]")


def make_title(name: str) -> str:
    """Turn a document filename into a display title.

    ``getting-started_guide.md`` becomes ``Getting started guide``.
    """
    base = _SEPARATOR_RE.sub(" ", _EXTENSION_RE.sub("", name))
    return base[:1].upper() + base[1:]


def assign_titles(tree: tuple[TreeNode, ...]) -> tuple[TreeNode, ...]:
    """Return a titled copy of ``tree``; the input is left untouched.

    Titles are derived from ``name`` only, so reapplying is a no-op.
    """
    titled: list[TreeNode] = []
    for node in tree:
        if isinstance(node, DirNode):
            titled.append(
                DirNode(
                    name=node.name,
                    path=node.path,
                    title=node.name,
                    children=assign_titles(node.children),
                )
            )
        else:
            titled.append(FileNode(name=node.name, path=node.path, title=make_title(node.name)))
    return tuple(titled)


def select_default_doc(tree: tuple[TreeNode, ...], content_prefix: str = "content/") -> str | None:
    """Pick the document shown when no navigation target is given.

    A ``README.md`` (any case) directly under the content root wins; otherwise
    the first file in depth-first order; ``None`` for an empty tree.
    """
    readme_path = f"{content_prefix}README.md".casefold()
    first: str | None = None
    readme: str | None = None

    def traverse(nodes: tuple[TreeNode, ...]) -> None:
        nonlocal first, readme
        for node in nodes:
            if isinstance(node, FileNode):
                if first is None:
                    first = node.path
                if node.path.casefold() == readme_path:
                    readme = node.path
            else:
                traverse(node.children)

    traverse(tree)
    return readme or first


__all__ = [
    "make_title",
    "assign_titles",
    "select_default_doc",
]
