"""Command-line front door for docshelf.

``build`` writes ``manifest.json`` (optionally watching for changes).
``browse`` loads the manifest and opens the line-mode console browser.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .builder import generate, run_watch
from .config import load_content_dir_name, load_style_name, load_theme_name, load_watch_interval
from .engine import DocController, FileSystemSource
from .engine.console import ConsoleBrowser
from .errors import DocshelfError
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "[docs] %(message)s"


def _positive_float(value: str) -> float:
    """argparse type for positive float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docshelf",
        description="Generate a manifest for a folder of markdown documents and browse it.",
    )
    parser.add_argument("--site", type=Path, default=None, help="Site root holding the content folder. Defaults to cwd.")
    parser.add_argument("--content-dir", default=None, help="Content folder name below the site root.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Write manifest.json for the content folder.")
    build.add_argument("--watch", action="store_true", help="Keep running and rebuild on every change.")
    build.add_argument(
        "--interval",
        type=_positive_float,
        default=None,
        help="Seconds between change polls in watch mode.",
    )

    browse = sub.add_parser("browse", help="Browse the generated manifest in the terminal.")
    browse.add_argument("fragment", nargs="?", default=None, help="Document path to open first.")
    browse.add_argument("--style", default=None, help="Pygments style name.")
    browse.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    browse.add_argument("--no-color", action="store_true", help="Disable color output.")
    return parser


def _run_build(args: argparse.Namespace, site_root: Path, content_dir_name: str) -> None:
    try:
        generate(site_root, content_dir_name)
    except (DocshelfError, OSError) as exc:
        raise SystemExit(str(exc)) from exc
    if args.watch:
        interval = args.interval if args.interval is not None else load_watch_interval()
        try:
            run_watch(site_root, content_dir_name, interval=interval)
        except KeyboardInterrupt:
            pass


def _run_browse(args: argparse.Namespace, site_root: Path, content_dir_name: str) -> None:
    controller = DocController(
        FileSystemSource(site_root),
        style=args.style or load_style_name(),
        content_dir_name=content_dir_name,
    )
    try:
        controller.load()
    except DocshelfError as exc:
        raise SystemExit(str(exc)) from exc
    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)
    browser = ConsoleBrowser(controller, sys.stdout, theme=theme, no_color=no_color)
    try:
        browser.run(sys.stdin, fragment=args.fragment)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the builder or the browser."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    site_root = Path(args.site) if args.site is not None else Path.cwd()
    content_dir_name = args.content_dir or load_content_dir_name()

    if args.command == "build":
        _run_build(args, site_root, content_dir_name)
        return

    if not site_root.is_dir():
        raise SystemExit(f"Path not found: {site_root}")
    _run_browse(args, site_root, content_dir_name)


if __name__ == "__main__":
    main()
