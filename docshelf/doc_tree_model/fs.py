"""Filesystem scanning for the manifest document tree."""

from __future__ import annotations

import os
import re
from pathlib import Path

from ..errors import FilesystemScanError
from .types import DirNode, FileNode, TreeNode

DOCUMENT_EXTENSIONS = frozenset({".md", ".markdown"})
HIDDEN_PREFIX = "."

_DIGITS_RE = re.compile(r"(\d+)")


def natural_sort_key(name: str) -> tuple[tuple[tuple[int, int, str], ...], str]:
    """Case-insensitive sort key comparing digit runs by numeric value.

    ``chapter2`` sorts before ``chapter10``. Digit runs sort before text at the
    same position; the raw name breaks remaining ties so ordering is total.
    """
    parts: list[tuple[int, int, str]] = []
    for chunk in _DIGITS_RE.split(name):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk), chunk))
        else:
            parts.append((1, 0, chunk.casefold()))
    return tuple(parts), name


def is_document_name(name: str) -> bool:
    """Return whether ``name`` carries a recognized document extension."""
    return Path(name).suffix.lower() in DOCUMENT_EXTENSIONS


def relative_posix(path: Path, site_root: Path) -> str:
    """Return ``path`` relative to ``site_root`` using ``/`` separators."""
    return path.relative_to(site_root).as_posix()


def scan_directory(directory: Path, site_root: Path) -> tuple[TreeNode, ...]:
    """Recursively build untitled tree nodes for ``directory``.

    Hidden entries are skipped and non-document files dropped. Directories
    precede files; each group is ordered by ``natural_sort_key``. Any
    ``OSError`` or a name that is not valid UTF-8 raises
    ``FilesystemScanError``; there is no partial result.
    """
    dirs: list[DirNode] = []
    files: list[FileNode] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if name.startswith(HIDDEN_PREFIX):
                    continue
                is_dir = child.is_dir(follow_symlinks=False)
                if not is_dir and not is_document_name(name):
                    continue
                child_path = Path(child.path)
                try:
                    name.encode("utf-8")
                except UnicodeEncodeError as exc:
                    raise FilesystemScanError(child_path, exc) from exc
                if is_dir:
                    dirs.append(
                        DirNode(
                            name=name,
                            path=f"{relative_posix(child_path, site_root)}/",
                            children=scan_directory(child_path, site_root),
                        )
                    )
                else:
                    files.append(FileNode(name=name, path=relative_posix(child_path, site_root)))
    except OSError as exc:
        raise FilesystemScanError(directory, exc) from exc

    dirs.sort(key=lambda node: natural_sort_key(node.name))
    files.sort(key=lambda node: natural_sort_key(node.name))
    return (*dirs, *files)


__all__ = [
    "DOCUMENT_EXTENSIONS",
    "HIDDEN_PREFIX",
    "natural_sort_key",
    "is_document_name",
    "relative_posix",
    "scan_directory",
]
