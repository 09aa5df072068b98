"""Manifest datatype plus JSON (de)serialization."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone

from .titles import select_default_doc
from .types import DirNode, FileNode, TreeNode

MANIFEST_FILENAME = "manifest.json"


@dataclass(frozen=True)
class Manifest:
    """Immutable snapshot of the document tree and its metadata."""

    generated_at: str
    root: str
    default_doc: str
    tree: tuple[TreeNode, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "generatedAt": self.generated_at,
            "root": self.root,
            "defaultDoc": self.default_doc,
            "tree": tree_to_dicts(self.tree),
        }

    def to_json(self) -> str:
        """Serialize as stable, pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


def node_to_dict(node: TreeNode) -> dict[str, object]:
    if isinstance(node, DirNode):
        return {
            "type": "dir",
            "name": node.name,
            "path": node.path,
            "title": node.title,
            "children": tree_to_dicts(node.children),
        }
    return {
        "type": "file",
        "name": node.name,
        "path": node.path,
        "title": node.title,
    }


def tree_to_dicts(tree: tuple[TreeNode, ...]) -> list[dict[str, object]]:
    return [node_to_dict(node) for node in tree]


def tree_from_dicts(raw_nodes: list[dict[str, object]]) -> tuple[TreeNode, ...]:
    """Rebuild tree nodes from decoded JSON; ``type`` selects the variant."""
    nodes: list[TreeNode] = []
    for raw in raw_nodes:
        name = str(raw.get("name", ""))
        path = str(raw.get("path", ""))
        title = str(raw.get("title", ""))
        if raw.get("type") == "dir":
            children = raw.get("children") or []
            nodes.append(DirNode(name=name, path=path, title=title, children=tree_from_dicts(children)))
        else:
            nodes.append(FileNode(name=name, path=path, title=title))
    return tuple(nodes)


def manifest_from_dict(data: dict[str, object]) -> Manifest:
    """Decode a manifest object. Missing keys fall back to empty values."""
    return Manifest(
        generated_at=str(data.get("generatedAt", "")),
        root=str(data.get("root", "")),
        default_doc=str(data.get("defaultDoc", "")),
        tree=tree_from_dicts(data.get("tree") or []),
    )


def emit_manifest(
    tree: tuple[TreeNode, ...],
    content_dir_name: str = "content",
    now: datetime | None = None,
) -> Manifest:
    """Stamp a titled tree with time, root string and default document."""
    stamp = now or datetime.now(timezone.utc)
    default_doc = select_default_doc(tree, content_prefix=f"{content_dir_name}/")
    return Manifest(
        generated_at=stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        root=f"/{content_dir_name}/",
        default_doc=default_doc or f"/{content_dir_name}/README.md",
        tree=tree,
    )


__all__ = [
    "MANIFEST_FILENAME",
    "Manifest",
    "node_to_dict",
    "tree_to_dicts",
    "tree_from_dicts",
    "manifest_from_dict",
    "emit_manifest",
]
