"""Text loading, sanitization, and Pygments-backed syntax highlighting.

Fenced code in rendered markdown is colored by Markdown's codehilite extension
with the style validated here. Terminal output colors whole document sources
for the console browser.
"""

from __future__ import annotations

import re
from pathlib import Path

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

DEFAULT_STYLE = "monokai"

_PYGMENTS_VALID_STYLES: set[str] = set()
_PYGMENTS_INVALID_STYLES: set[str] = set()
_TERMINAL_FORMATTERS: dict[str, object] = {}


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    if style in _PYGMENTS_VALID_STYLES:
        return style
    if style in _PYGMENTS_INVALID_STYLES:
        return DEFAULT_STYLE

    from pygments.styles import get_style_by_name
    from pygments.util import ClassNotFound

    try:
        get_style_by_name(style)
    except ClassNotFound:
        _PYGMENTS_INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _PYGMENTS_VALID_STYLES.add(style)
    return style


def _terminal_formatter(style: str):
    formatter = _TERMINAL_FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    from pygments.formatters import TerminalFormatter

    formatter = TerminalFormatter(style=style)
    _TERMINAL_FORMATTERS[style] = formatter
    return formatter


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Render ``source`` with ANSI colors using a lexer picked from ``path``."""
    from pygments import highlight as pygments_highlight
    from pygments.lexers import TextLexer, get_lexer_for_filename
    from pygments.util import ClassNotFound

    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return pygments_highlight(source, lexer, _terminal_formatter(normalize_style(style)))


__all__ = [
    "DEFAULT_STYLE",
    "read_text",
    "sanitize_terminal_text",
    "normalize_style",
    "colorize_source",
]
