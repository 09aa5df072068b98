"""Document fetching, markdown conversion, and breadcrumb derivation."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

import markdown
from markdown.extensions.codehilite import CodeHiliteExtension

from ..errors import DocumentLoadError
from ..highlight import DEFAULT_STYLE, normalize_style
from .source import DocumentSource

BASE_EXTENSIONS = ["fenced_code", "tables", "toc"]

_DOC_EXTENSION_RE = re.compile(r"\.(md|markdown)$", re.IGNORECASE)


@dataclass(frozen=True)
class Crumb:
    """One breadcrumb segment; only the last segment is ``active``."""

    label: str
    active: bool = False


@dataclass(frozen=True)
class DocumentView:
    """Rendered content pane for one path.

    ``error`` is set when the fetch failed; ``html`` then holds an inline
    message naming the path and ``source`` is empty.
    """

    path: str
    html: str
    source: str = ""
    breadcrumbs: tuple[Crumb, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def breadcrumb_segments(path: str, content_dir_name: str = "content") -> tuple[Crumb, ...]:
    """Split ``path`` into crumbs below the content root.

    ``/content/guide/install.md`` yields ``guide`` (muted) and ``install``
    (active). Empty segments are dropped.
    """
    prefix_re = re.compile(rf"^/?{re.escape(content_dir_name)}/")
    segments = [segment for segment in prefix_re.sub("", path).split("/") if segment]
    crumbs: list[Crumb] = []
    for idx, segment in enumerate(segments):
        is_last = idx == len(segments) - 1
        label = _DOC_EXTENSION_RE.sub("", segment) if is_last else segment
        crumbs.append(Crumb(label=label, active=is_last))
    return tuple(crumbs)


def markdown_extensions(style: str = DEFAULT_STYLE) -> list:
    """Extension list for one render; fenced code is colored with inline styles."""
    codehilite = CodeHiliteExtension(pygments_style=normalize_style(style), noclasses=True, guess_lang=True)
    return [*BASE_EXTENSIONS, codehilite]


def markdown_to_html(text: str, style: str = DEFAULT_STYLE) -> str:
    return markdown.markdown(text, extensions=markdown_extensions(style))


def error_view(path: str, reason: str) -> DocumentView:
    message = f'<div class="doc-error">Cannot load: <code>{html.escape(path)}</code></div>'
    return DocumentView(path=path, html=message, error=reason)


def render_document(
    source: DocumentSource,
    path: str,
    style: str = DEFAULT_STYLE,
    content_dir_name: str = "content",
) -> DocumentView:
    """Fetch ``path`` and build its content pane.

    Fetch failures become an error view instead of propagating, so the rest
    of the shell stays usable.
    """
    try:
        text = source.fetch_text(path)
    except DocumentLoadError as exc:
        return error_view(path, str(exc))
    return DocumentView(
        path=path,
        html=markdown_to_html(text, style),
        source=text,
        breadcrumbs=breadcrumb_segments(path, content_dir_name),
    )


__all__ = [
    "BASE_EXTENSIONS",
    "markdown_extensions",
    "Crumb",
    "DocumentView",
    "breadcrumb_segments",
    "markdown_to_html",
    "error_view",
    "render_document",
]
