"""Line-mode console binding for the navigation engine.

Prints the sidebar as an ANSI tree and the current document source, then
reads commands (``open``, ``/query``, ``toggle``, ``tree``, ``help``, ``quit``)
one line at a time.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from ..highlight import colorize_source, sanitize_terminal_text
from ..ui_theme import DEFAULT_THEME, UITheme
from .controller import DocController
from .sidebar import SidebarDir, SidebarNode

HELP_TEXT = (
    "open <path>     show a document (no path: default document)\n"
    "/<query>        filter the sidebar (a bare / clears the filter)\n"
    "toggle <dir/>   expand or collapse a directory\n"
    "tree            print the sidebar again\n"
    "quit            leave the browser"
)


class ConsoleBrowser:
    def __init__(
        self,
        controller: DocController,
        out: TextIO,
        theme: UITheme = DEFAULT_THEME,
        no_color: bool = False,
    ) -> None:
        self.controller = controller
        self.out = out
        self.theme = theme
        self.no_color = no_color

    def format_tree_lines(self) -> list[str]:
        state = self.controller.state
        lines: list[str] = []
        theme = self.theme

        def walk(nodes: tuple[SidebarNode, ...]) -> None:
            for node in nodes:
                indent = "  " * node.depth
                if isinstance(node, SidebarDir):
                    is_open = node.path in state.expanded
                    marker = "▾ " if is_open else "▸ "
                    lines.append(
                        f"{indent}{theme.tree_marker}{marker}{theme.reset}"
                        f"{theme.tree_dir}{node.label}/{theme.reset}"
                    )
                    if is_open:
                        walk(node.children)
                    continue
                if node.path in state.hidden:
                    continue
                color = theme.tree_active if node.path == state.current_path else theme.tree_file
                lines.append(f"{indent}  {color}{node.label}{theme.reset}")

        walk(state.sidebar)
        return lines

    def format_breadcrumb(self) -> str:
        document = self.controller.state.document
        if document is None:
            return ""
        theme = self.theme
        parts = [
            f"{theme.crumb_active if crumb.active else theme.crumb_muted}{crumb.label}{theme.reset}"
            for crumb in document.breadcrumbs
        ]
        return " / ".join(parts)

    def format_document(self) -> str:
        document = self.controller.state.document
        if document is None:
            return ""
        if not document.ok:
            return f"{self.theme.error}Cannot load: {document.path}{self.theme.reset}\n"
        text = sanitize_terminal_text(document.source)
        if self.no_color:
            return text
        return colorize_source(text, Path(document.path), self.controller.style)

    def print_tree(self) -> None:
        for line in self.format_tree_lines():
            self.out.write(line + "\n")

    def render(self) -> None:
        self.print_tree()
        self.out.write(f"{self.theme.divider}{'─' * 40}{self.theme.reset}\n")
        breadcrumb = self.format_breadcrumb()
        if breadcrumb:
            self.out.write(breadcrumb + "\n\n")
        body = self.format_document()
        self.out.write(body if body.endswith("\n") or not body else body + "\n")
        self.out.flush()

    def message(self, text: str) -> None:
        self.out.write(f"{self.theme.hint}{text}{self.theme.reset}\n")

    def handle_command(self, line: str) -> bool:
        """Apply one command line; returns ``False`` when the session should end."""
        command = line.strip()
        if not command:
            return True
        if command in {"quit", "q", "exit"}:
            return False
        if command.startswith("/"):
            hidden = self.controller.search(command[1:])
            self.print_tree()
            if hidden:
                self.message(f"{len(hidden)} document(s) hidden")
            return True

        name, _, argument = command.partition(" ")
        argument = argument.strip()
        if name == "open":
            self.controller.navigate(argument or None)
            self.render()
        elif name == "toggle":
            try:
                self.controller.toggle(argument)
            except KeyError:
                self.message(f"no directory {argument!r}")
                return True
            self.print_tree()
        elif name == "tree":
            self.print_tree()
        elif name == "help":
            self.message(HELP_TEXT)
        else:
            self.message(f"unknown command {name!r}; type help")
        return True

    def run(self, lines: Iterable[str], fragment: str | None = None) -> None:
        """Route to ``fragment``, render, then process commands until quit or EOF."""
        self.controller.navigate(fragment)
        self.render()
        for line in lines:
            if not self.handle_command(line):
                break


__all__ = [
    "HELP_TEXT",
    "ConsoleBrowser",
]
