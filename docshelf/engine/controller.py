"""Engine controller owning manifest, index, and navigation state.

All engine mutations go through ``load``, ``navigate``, ``search`` and
``toggle``. Bindings read ``state`` and never change it directly.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from urllib.parse import unquote

from ..doc_tree_model import MANIFEST_FILENAME, Manifest, manifest_from_dict
from ..errors import DocumentLoadError, ManifestLoadError
from ..highlight import DEFAULT_STYLE
from .document import DocumentView, render_document
from .index import flatten_index, index_by_path
from .search import hidden_link_paths, normalize_query
from .sidebar import build_sidebar, iter_dirs, iter_links
from .source import DocumentSource
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationRequest:
    """Pending document render; only the latest token may publish its view."""

    token: int
    path: str


def load_manifest(source: DocumentSource, manifest_path: str = MANIFEST_FILENAME) -> Manifest:
    """Fetch and decode the manifest, raising ``ManifestLoadError`` on any failure."""
    try:
        raw = source.fetch_text(manifest_path)
    except DocumentLoadError as exc:
        raise ManifestLoadError(f"failed to load {manifest_path}: {exc.reason or exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestLoadError(f"failed to decode {manifest_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestLoadError(f"{manifest_path} is not a JSON object")
    try:
        return manifest_from_dict(data)
    except (AttributeError, TypeError) as exc:
        raise ManifestLoadError(f"{manifest_path} has an invalid tree: {exc}") from exc


def parse_fragment(fragment: str | None) -> str:
    """Turn an address fragment (``#docs%20x.md``) into a document path."""
    if not fragment:
        return ""
    return unquote(fragment.removeprefix("#"))


class DocController:
    """Single owner of engine state for one loaded manifest."""

    def __init__(
        self,
        source: DocumentSource,
        style: str = DEFAULT_STYLE,
        content_dir_name: str = "content",
    ) -> None:
        self.source = source
        self.style = style
        self.content_dir_name = content_dir_name
        self._state: AppState | None = None

    @property
    def state(self) -> AppState:
        if self._state is None:
            raise RuntimeError("manifest not loaded; call load() first")
        return self._state

    @property
    def loaded(self) -> bool:
        return self._state is not None

    def load(self) -> Manifest:
        """Load the manifest and rebuild sidebar and search index from scratch."""
        manifest = load_manifest(self.source)
        flat_index = flatten_index(manifest.tree)
        self._state = AppState(
            manifest=manifest,
            sidebar=build_sidebar(manifest.tree),
            flat_index=flat_index,
            entries_by_path=index_by_path(flat_index),
        )
        logger.debug("loaded manifest with %d documents", len(flat_index))
        return manifest

    def begin_navigation(self, fragment: str | None = None) -> NavigationRequest:
        """Resolve the current path and mark its link active.

        Each call issues a new token; views for older tokens are discarded by
        ``complete_navigation``.
        """
        state = self.state
        state.current_path = parse_fragment(fragment) or state.manifest.default_doc
        state.request_token += 1
        return NavigationRequest(token=state.request_token, path=state.current_path)

    def complete_navigation(self, request: NavigationRequest, view: DocumentView) -> bool:
        """Publish ``view`` unless a newer navigation superseded ``request``."""
        if request.token != self.state.request_token:
            logger.debug("discarding stale render for %s", request.path)
            return False
        self.state.document = view
        return True

    def render(self, path: str) -> DocumentView:
        return render_document(self.source, path, style=self.style, content_dir_name=self.content_dir_name)

    def navigate(self, fragment: str | None = None) -> DocumentView:
        """Route to ``fragment`` (or the default document) and render it."""
        request = self.begin_navigation(fragment)
        view = self.render(request.path)
        self.complete_navigation(request, view)
        return view

    def active_paths(self) -> list[str]:
        """Link paths currently marked active (at most one)."""
        current = self.state.current_path
        return [link.path for link in iter_links(self.state.sidebar) if link.path == current]

    def search(self, query: str) -> set[str]:
        """Apply ``query`` to the sidebar and return the hidden link paths."""
        state = self.state
        state.query = normalize_query(query)
        state.hidden = hidden_link_paths(iter_links(state.sidebar), state.entries_by_path, state.query)
        return state.hidden

    def is_visible(self, link_path: str) -> bool:
        return link_path not in self.state.hidden

    def toggle(self, dir_path: str) -> bool:
        """Flip a directory between collapsed and expanded; returns the new state."""
        state = self.state
        if not any(node.path == dir_path for node in iter_dirs(state.sidebar)):
            raise KeyError(dir_path)
        if dir_path in state.expanded:
            state.expanded.discard(dir_path)
            return False
        state.expanded.add(dir_path)
        return True


__all__ = [
    "NavigationRequest",
    "DocController",
    "load_manifest",
    "parse_fragment",
]
