"""Navigation/search engine over a generated manifest.

- document sources (filesystem and in-memory)
- pure sidebar model and flattened search index
- document rendering with breadcrumbs
- ``DocController`` owning navigation and search state
- HTML and console bindings
"""

from __future__ import annotations

from .controller import DocController, NavigationRequest, load_manifest, parse_fragment
from .document import Crumb, DocumentView, breadcrumb_segments, markdown_to_html, render_document
from .index import FlatIndexEntry, flatten_index, index_by_path
from .search import hidden_link_paths, normalize_query
from .sidebar import SidebarDir, SidebarLink, SidebarNode, build_sidebar, iter_dirs, iter_links
from .source import DocumentSource, FileSystemSource, MappingSource
from .state import AppState

__all__ = [
    "DocController",
    "NavigationRequest",
    "load_manifest",
    "parse_fragment",
    "Crumb",
    "DocumentView",
    "breadcrumb_segments",
    "markdown_to_html",
    "render_document",
    "FlatIndexEntry",
    "flatten_index",
    "index_by_path",
    "hidden_link_paths",
    "normalize_query",
    "SidebarDir",
    "SidebarLink",
    "SidebarNode",
    "build_sidebar",
    "iter_dirs",
    "iter_links",
    "DocumentSource",
    "FileSystemSource",
    "MappingSource",
    "AppState",
]
