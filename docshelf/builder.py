"""Manifest builder: scan the content folder and write ``manifest.json``.

Each run is a full rebuild. Watch mode reruns the same pipeline whenever the
content signature changes and logs failed rebuilds instead of exiting.
"""

from __future__ import annotations

import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path

from .config import DEFAULT_CONTENT_DIR
from .doc_tree_model import MANIFEST_FILENAME, Manifest, assign_titles, emit_manifest, scan_directory
from .watch import DEFAULT_WATCH_INTERVAL_SECONDS, watch_content

logger = logging.getLogger(__name__)

PLACEHOLDER_FILENAME = "README.md"
PLACEHOLDER_TEXT = "# Welcome\n\nAdd your documents to the **{content}/** folder.\n"


def ensure_content_root(content_root: Path) -> bool:
    """Create ``content_root`` with a placeholder document when it is missing.

    Returns ``True`` when the folder was created. Existing folders are left
    alone, so repeated calls are harmless.
    """
    if content_root.exists():
        return False
    content_root.mkdir(parents=True, exist_ok=True)
    placeholder = content_root / PLACEHOLDER_FILENAME
    placeholder.write_text(PLACEHOLDER_TEXT.format(content=content_root.name), encoding="utf-8")
    logger.info("created %s with placeholder %s", content_root, placeholder.name)
    return True


def build_manifest(site_root: Path, content_dir_name: str = DEFAULT_CONTENT_DIR) -> Manifest:
    """Run scan, titling and default selection for one site."""
    site_root = site_root.resolve()
    content_root = site_root / content_dir_name
    ensure_content_root(content_root)
    tree = assign_titles(scan_directory(content_root, site_root))
    return emit_manifest(tree, content_dir_name=content_dir_name)


def write_manifest(manifest: Manifest, target: Path) -> None:
    """Replace ``target`` atomically; an encoding failure leaves it untouched."""
    payload = manifest.to_json().encode("utf-8")
    with tempfile.NamedTemporaryFile(
        "wb", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
    ) as handle:
        handle.write(payload)
        temp_path = Path(handle.name)
    try:
        os.replace(temp_path, target)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise


def generate(site_root: Path, content_dir_name: str = DEFAULT_CONTENT_DIR) -> Path:
    """Build and write the manifest for ``site_root``; returns its path.

    Scan failures propagate before anything is written.
    """
    manifest = build_manifest(site_root, content_dir_name)
    target = site_root.resolve() / MANIFEST_FILENAME
    write_manifest(manifest, target)
    logger.info("manifest generated -> %s", target.name)
    return target


def run_watch(
    site_root: Path,
    content_dir_name: str = DEFAULT_CONTENT_DIR,
    interval: float = DEFAULT_WATCH_INTERVAL_SECONDS,
    should_stop: Callable[[], bool] | None = None,
    max_polls: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Rebuild the manifest on every content change until stopped.

    A failing rebuild is logged and the loop keeps polling. Returns the
    number of rebuild attempts.
    """
    content_root = site_root.resolve() / content_dir_name

    def rebuild() -> None:
        try:
            generate(site_root, content_dir_name)
        except Exception:
            logger.exception("manifest rebuild failed")

    logger.info("watching %s/ for changes", content_dir_name)
    return watch_content(
        content_root,
        rebuild,
        interval=interval,
        should_stop=should_stop,
        max_polls=max_polls,
        sleep=sleep,
    )


__all__ = [
    "PLACEHOLDER_FILENAME",
    "ensure_content_root",
    "build_manifest",
    "write_manifest",
    "generate",
    "run_watch",
]
