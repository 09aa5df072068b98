"""Domain model for manifest document trees.

This package contains the builder-side primitives:
- directory/document node datatypes
- filesystem scanning with natural ordering
- title heuristics and default-document selection
- the manifest datatype and its JSON form
"""

from __future__ import annotations

from .types import DirNode, FileNode, TreeNode, iter_file_nodes
from .fs import DOCUMENT_EXTENSIONS, HIDDEN_PREFIX, is_document_name, natural_sort_key, scan_directory
from .titles import assign_titles, make_title, select_default_doc
from .manifest import (
    MANIFEST_FILENAME,
    Manifest,
    emit_manifest,
    manifest_from_dict,
    tree_from_dicts,
    tree_to_dicts,
)

__all__ = [
    "DirNode",
    "FileNode",
    "TreeNode",
    "iter_file_nodes",
    "DOCUMENT_EXTENSIONS",
    "HIDDEN_PREFIX",
    "is_document_name",
    "natural_sort_key",
    "scan_directory",
    "assign_titles",
    "make_title",
    "select_default_doc",
    "MANIFEST_FILENAME",
    "Manifest",
    "emit_manifest",
    "manifest_from_dict",
    "tree_from_dicts",
    "tree_to_dicts",
]
