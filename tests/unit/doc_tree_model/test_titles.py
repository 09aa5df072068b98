"""Tests for display titles and default-document selection."""

from __future__ import annotations

import unittest

from docshelf.doc_tree_model import DirNode, FileNode, assign_titles, make_title, select_default_doc


def _sample_tree():
    return (
        DirNode(
            name="getting_started",
            path="content/getting_started/",
            children=(
                FileNode(name="first-steps.md", path="content/getting_started/first-steps.md"),
                FileNode(name="install_guide.markdown", path="content/getting_started/install_guide.markdown"),
            ),
        ),
        FileNode(name="faq.md", path="content/faq.md"),
    )


class MakeTitleTests(unittest.TestCase):
    def test_strips_extension_and_separators(self) -> None:
        self.assertEqual(make_title("getting-started_guide.md"), "Getting started guide")
        self.assertEqual(make_title("notes.MARKDOWN"), "Notes")

    def test_only_first_character_is_capitalized(self) -> None:
        self.assertEqual(make_title("api-REFERENCE.md"), "Api REFERENCE")

    def test_empty_name(self) -> None:
        self.assertEqual(make_title(".md"), "")


class AssignTitlesTests(unittest.TestCase):
    def test_directory_titles_keep_raw_name(self) -> None:
        titled = assign_titles(_sample_tree())

        self.assertEqual(titled[0].title, "getting_started")
        self.assertEqual([child.title for child in titled[0].children], ["First steps", "Install guide"])
        self.assertEqual(titled[1].title, "Faq")

    def test_is_idempotent(self) -> None:
        once = assign_titles(_sample_tree())
        twice = assign_titles(once)

        self.assertEqual(once, twice)

    def test_input_tree_is_not_mutated(self) -> None:
        tree = _sample_tree()
        assign_titles(tree)

        self.assertEqual(tree, _sample_tree())
        self.assertEqual(tree[1].title, "")


class SelectDefaultDocTests(unittest.TestCase):
    def test_root_readme_wins_over_earlier_documents(self) -> None:
        tree = (
            DirNode(name="a", path="content/a/", children=(FileNode(name="intro.md", path="content/a/intro.md"),)),
            FileNode(name="about.md", path="content/about.md"),
            FileNode(name="readme.MD", path="content/readme.MD"),
        )

        self.assertEqual(select_default_doc(tree), "content/readme.MD")

    def test_nested_readme_is_not_preferred(self) -> None:
        tree = (
            DirNode(
                name="guide",
                path="content/guide/",
                children=(
                    FileNode(name="basics.md", path="content/guide/basics.md"),
                    FileNode(name="README.md", path="content/guide/README.md"),
                ),
            ),
        )

        self.assertEqual(select_default_doc(tree), "content/guide/basics.md")

    def test_first_depth_first_document_without_readme(self) -> None:
        tree = (
            DirNode(
                name="a",
                path="content/a/",
                children=(DirNode(name="b", path="content/a/b/", children=(FileNode(name="deep.md", path="content/a/b/deep.md"),)),),
            ),
            FileNode(name="top.md", path="content/top.md"),
        )

        self.assertEqual(select_default_doc(tree), "content/a/b/deep.md")

    def test_empty_tree_returns_none(self) -> None:
        self.assertIsNone(select_default_doc(()))
        self.assertIsNone(select_default_doc((DirNode(name="empty", path="content/empty/"),)))

    def test_custom_content_prefix(self) -> None:
        tree = (
            FileNode(name="a.md", path="docs/a.md"),
            FileNode(name="README.md", path="docs/README.md"),
        )

        self.assertEqual(select_default_doc(tree, content_prefix="docs/"), "docs/README.md")


if __name__ == "__main__":
    unittest.main()
