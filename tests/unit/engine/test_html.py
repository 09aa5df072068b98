"""Tests for the HTML binding of sidebar and shell state."""

from __future__ import annotations

import unittest

from docshelf.doc_tree_model import DirNode, FileNode, Manifest
from docshelf.engine import DocController, MappingSource, build_sidebar
from docshelf.engine.html import (
    extract_active_paths,
    extract_link_paths,
    render_shell_html,
    render_sidebar_html,
)


def _controller() -> DocController:
    manifest = Manifest(
        generated_at="2024-01-01T00:00:00.000Z",
        root="/content/",
        default_doc="README.md",
        tree=(
            DirNode(
                name="docs",
                path="docs/",
                title="docs",
                children=(
                    FileNode(name="guide.md", path="docs/guide.md", title="Guide"),
                    FileNode(name="faq.md", path="docs/faq.md", title="Faq"),
                ),
            ),
            FileNode(name="README.md", path="README.md", title="README"),
        ),
    )
    source = MappingSource(
        {
            "manifest.json": manifest.to_json(),
            "README.md": "# Home\n",
            "docs/guide.md": "# Guide\n\n```\nx = 1\n```\n",
        }
    )
    controller = DocController(source)
    controller.load()
    return controller


class SidebarHtmlTests(unittest.TestCase):
    def test_directories_start_collapsed(self) -> None:
        controller = _controller()

        markup = render_sidebar_html(controller.state.sidebar)

        self.assertIn('data-dir-path="docs/"', markup)
        self.assertIn('<div class="children hidden">', markup)

    def test_expanded_directory_drops_hidden_class(self) -> None:
        controller = _controller()
        controller.toggle("docs/")

        markup = render_sidebar_html(controller.state.sidebar, controller.state.expanded)

        self.assertIn('<div class="children">', markup)

    def test_labels_are_escaped(self) -> None:
        sidebar = build_sidebar((FileNode(name="a<b>.md", path="content/a<b>.md", title="A<b>"),))

        markup = render_sidebar_html(sidebar)

        self.assertIn("📄 A&lt;b&gt;</a>", markup)
        self.assertEqual(extract_link_paths(markup), ["content/a<b>.md"])


class ShellHtmlTests(unittest.TestCase):
    def test_fragment_marks_exactly_one_active_link(self) -> None:
        controller = _controller()

        controller.navigate("docs/guide.md")
        markup = render_shell_html(controller.state)

        self.assertEqual(extract_active_paths(markup), ["docs/guide.md"])
        self.assertEqual(set(extract_link_paths(markup)), {"docs/guide.md", "docs/faq.md", "README.md"})
        self.assertIn('<span class="crumb-muted">docs</span> / <span class="crumb-active">guide</span>', markup)
        self.assertIn('class="codehilite"', markup)

    def test_default_route_moves_active_mark(self) -> None:
        controller = _controller()
        controller.navigate("docs/guide.md")

        controller.navigate("")

        self.assertEqual(extract_active_paths(render_shell_html(controller.state)), ["README.md"])

    def test_search_hides_list_items_only(self) -> None:
        controller = _controller()
        controller.search("faq")

        markup = render_shell_html(controller.state)

        self.assertIn('<li class="hidden"><a href="#docs/guide.md"', markup)
        self.assertIn('<li><a href="#docs/faq.md"', markup)
        self.assertIn('data-dir-path="docs/"', markup)

        controller.search("")
        self.assertNotIn('<li class="hidden">', render_shell_html(controller.state))

    def test_error_view_is_shown_in_content(self) -> None:
        controller = _controller()
        controller.navigate("docs/faq.md")

        markup = render_shell_html(controller.state)

        self.assertIn("Cannot load: <code>docs/faq.md</code>", markup)
        self.assertIn("Generated: 2024-01-01T00:00:00.000Z", markup)


if __name__ == "__main__":
    unittest.main()
