"""Tests for the ``docshelf`` command-line front door."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from docshelf.cli import build_parser, main


class CliBuildTests(unittest.TestCase):
    def test_build_bootstraps_and_writes_manifest(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            site = Path(tmp).resolve()

            with mock.patch("docshelf.cli.load_content_dir_name", return_value="content"):
                main(["--site", str(site), "build"])

            data = json.loads((site / "manifest.json").read_text(encoding="utf-8"))
            self.assertEqual(data["defaultDoc"], "content/README.md")

    def test_build_watch_runs_loop_with_interval(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            site = Path(tmp).resolve()

            with mock.patch("docshelf.cli.run_watch") as run_watch:
                main(["--site", str(site), "--content-dir", "docs", "build", "--watch", "--interval", "2"])

            run_watch.assert_called_once_with(site, "docs", interval=2.0)
            self.assertTrue((site / "docs" / "README.md").exists())

    def test_scan_error_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            site = Path(tmp).resolve()
            (site / "content").mkdir()
            with mock.patch("docshelf.doc_tree_model.fs.os.scandir", side_effect=PermissionError("denied")):
                with self.assertRaises(SystemExit) as ctx:
                    main(["--site", str(site), "--content-dir", "content", "build"])
            self.assertIn("failed to scan", str(ctx.exception))

    def test_interval_must_be_positive(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                build_parser().parse_args(["build", "--interval", "0"])


class CliBrowseTests(unittest.TestCase):
    def test_browse_renders_default_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            site = Path(tmp).resolve()
            main(["--site", str(site), "--content-dir", "content", "build"])
            out = io.StringIO()

            with mock.patch("sys.stdin", io.StringIO("quit\n")), mock.patch("sys.stdout", out):
                main(["--site", str(site), "--content-dir", "content", "browse", "--no-color"])

            self.assertIn("# Welcome", out.getvalue())

    def test_browse_without_manifest_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                main(["--site", tmp, "--content-dir", "content", "browse"])
            self.assertIn("manifest.json", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
