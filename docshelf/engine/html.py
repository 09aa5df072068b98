"""HTML binding for the sidebar model and content pane.

Renders ``AppState`` to markup mirroring the browser shell: directories as
toggles with a hidden-by-default children container, documents as ``#path``
links tagged with ``data-doc-path``.
"""

from __future__ import annotations

from html import escape
from html.parser import HTMLParser

from .document import Crumb
from .sidebar import SidebarDir, SidebarNode
from .state import AppState

ACTIVE_CLASS = "active-link"
HIDDEN_CLASS = "hidden"


def _class_attr(*names: str) -> str:
    joined = " ".join(name for name in names if name)
    return f' class="{joined}"' if joined else ""


def render_sidebar_html(
    nodes: tuple[SidebarNode, ...],
    expanded: set[str] | frozenset[str] = frozenset(),
    hidden: set[str] | frozenset[str] = frozenset(),
    current_path: str | None = None,
) -> str:
    items: list[str] = []
    for node in nodes:
        if isinstance(node, SidebarDir):
            container_class = "children" if node.path in expanded else f"children {HIDDEN_CLASS}"
            children = render_sidebar_html(node.children, expanded, hidden, current_path) if node.children else ""
            items.append(
                "<li>"
                f'<div class="dir-toggle" data-dir-path="{escape(node.path)}">'
                f"<span>📁</span><span>{escape(node.label)}</span></div>"
                f'<div class="{container_class}">{children}</div>'
                "</li>"
            )
            continue
        li_class = HIDDEN_CLASS if node.path in hidden else ""
        link_class = ACTIVE_CLASS if node.path == current_path else ""
        items.append(
            f"<li{_class_attr(li_class)}>"
            f'<a href="#{escape(node.path)}" data-doc-path="{escape(node.path)}"{_class_attr(link_class)}>'
            f"📄 {escape(node.label)}</a>"
            "</li>"
        )
    return f"<ul>{''.join(items)}</ul>"


def render_breadcrumb_html(crumbs: tuple[Crumb, ...]) -> str:
    parts: list[str] = []
    for crumb in crumbs:
        css = "crumb-active" if crumb.active else "crumb-muted"
        parts.append(f'<span class="{css}">{escape(crumb.label)}</span>')
    return " / ".join(parts)


def render_shell_html(state: AppState) -> str:
    """Render sidebar, breadcrumb and content regions for the current state."""
    document = state.document
    content = document.html if document is not None else ""
    crumbs = render_breadcrumb_html(document.breadcrumbs) if document is not None else ""
    sidebar = render_sidebar_html(state.sidebar, state.expanded, state.hidden, state.current_path)
    generated = escape(state.manifest.generated_at)
    return (
        '<div class="docshelf">'
        f'<nav id="sidebar">{sidebar}</nav>'
        f'<header id="breadcrumb">{crumbs}</header>'
        f'<article id="content">{content}</article>'
        f'<footer id="metaInfo">Generated: {generated}</footer>'
        "</div>"
    )


class _LinkCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self.paths: list[str] = []
        self.active: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            return
        attributes = dict(attrs)
        path = attributes.get("data-doc-path")
        if path is None:
            return
        self.paths.append(path)
        if ACTIVE_CLASS in (attributes.get("class") or "").split():
            self.active.append(path)


def extract_link_paths(markup: str) -> list[str]:
    """Return ``data-doc-path`` values of every link in ``markup``."""
    collector = _LinkCollector()
    collector.feed(markup)
    collector.close()
    return collector.paths


def extract_active_paths(markup: str) -> list[str]:
    collector = _LinkCollector()
    collector.feed(markup)
    collector.close()
    return collector.active


__all__ = [
    "ACTIVE_CLASS",
    "HIDDEN_CLASS",
    "render_sidebar_html",
    "render_breadcrumb_html",
    "render_shell_html",
    "extract_link_paths",
    "extract_active_paths",
]
