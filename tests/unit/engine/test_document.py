"""Tests for document rendering, highlighting, and breadcrumbs."""

from __future__ import annotations

import unittest

from docshelf.engine import Crumb, MappingSource, breadcrumb_segments, markdown_to_html, render_document


class BreadcrumbTests(unittest.TestCase):
    def test_strips_content_prefix_and_extension(self) -> None:
        self.assertEqual(
            breadcrumb_segments("/content/guide/setup/install.md"),
            (Crumb("guide"), Crumb("setup"), Crumb("install", active=True)),
        )

    def test_relative_path_and_markdown_extension(self) -> None:
        self.assertEqual(
            breadcrumb_segments("content/notes.Markdown"),
            (Crumb("notes", active=True),),
        )

    def test_other_prefix_is_kept(self) -> None:
        self.assertEqual(
            breadcrumb_segments("docs/a.md"),
            (Crumb("docs"), Crumb("a", active=True)),
        )

    def test_custom_content_dir(self) -> None:
        self.assertEqual(breadcrumb_segments("docs/a.md", content_dir_name="docs"), (Crumb("a", active=True),))


class MarkdownToHtmlTests(unittest.TestCase):
    def test_converts_headings_and_tables(self) -> None:
        rendered = markdown_to_html("# Title\n\n| a | b |\n|---|---|\n| 1 | 2 |\n")

        self.assertIn('<h1 id="title">Title</h1>', rendered)
        self.assertIn("<table>", rendered)

    def test_fenced_code_is_colored(self) -> None:
        rendered = markdown_to_html("```python\ndef f():\n    return 1 < 2\n```\n")

        self.assertIn('<div class="codehilite"', rendered)
        self.assertIn("style=", rendered)
        self.assertIn("&lt;", rendered)
        self.assertNotIn("&amp;lt;", rendered)

    def test_unknown_style_falls_back_to_default(self) -> None:
        rendered = markdown_to_html("```python\nx = 1\n```\n", style="no-such-style")

        self.assertEqual(rendered, markdown_to_html("```python\nx = 1\n```\n"))

    def test_plain_text_has_no_code_wrapper(self) -> None:
        self.assertNotIn("<pre>", markdown_to_html("just text"))


class RenderDocumentTests(unittest.TestCase):
    def test_success_view(self) -> None:
        source = MappingSource({"content/guide/install.md": "# Install\n"})

        view = render_document(source, "content/guide/install.md")

        self.assertTrue(view.ok)
        self.assertEqual(view.source, "# Install\n")
        self.assertIn("<h1", view.html)
        self.assertEqual(view.breadcrumbs[-1], Crumb("install", active=True))

    def test_fetch_failure_renders_inline_error(self) -> None:
        view = render_document(MappingSource({}), "content/<missing>.md")

        self.assertFalse(view.ok)
        self.assertIn("Cannot load", view.html)
        self.assertIn("content/&lt;missing&gt;.md", view.html)
        self.assertEqual(view.breadcrumbs, ())
        self.assertEqual(view.source, "")


if __name__ == "__main__":
    unittest.main()
