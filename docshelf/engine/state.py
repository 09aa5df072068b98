from __future__ import annotations

from dataclasses import dataclass, field

from ..doc_tree_model import Manifest
from .document import DocumentView
from .index import FlatIndexEntry
from .sidebar import SidebarNode


@dataclass
class AppState:
    manifest: Manifest
    sidebar: tuple[SidebarNode, ...]
    flat_index: tuple[FlatIndexEntry, ...]
    entries_by_path: dict[str, FlatIndexEntry]
    current_path: str | None = None
    expanded: set[str] = field(default_factory=set)
    hidden: set[str] = field(default_factory=set)
    query: str = ""
    document: DocumentView | None = None
    request_token: int = 0
