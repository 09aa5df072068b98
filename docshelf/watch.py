"""Content-tree watch signatures and the poll loop built on them.

Computes a cheap hash over visible tree metadata. The watch loop compares
successive signatures and fires a callback whenever the content changes.
"""

from __future__ import annotations

import hashlib
import logging
import os
import time
from collections.abc import Callable
from pathlib import Path

from .doc_tree_model import HIDDEN_PREFIX

logger = logging.getLogger(__name__)

DEFAULT_WATCH_INTERVAL_SECONDS = 0.5


def _update_digest(digest, token: str) -> None:
    """Append a token plus separator byte to a hash digest."""
    digest.update(token.encode("utf-8", errors="surrogateescape"))
    digest.update(b"\0")


def build_content_watch_signature(root: Path) -> str:
    """Build a digest over every visible entry below ``root``.

    Names, entry kinds, mtimes and sizes all feed the digest, so adds, removes,
    renames and edits change it. Hidden entries never contribute.
    """
    digest = hashlib.blake2b(digest_size=20)
    _update_digest(digest, f"root:{root}")

    pending: list[Path] = [root]
    while pending:
        directory = pending.pop()
        _update_digest(digest, f"dir:{directory}")
        children: list[tuple[str, bool, int, int]] = []
        try:
            with os.scandir(directory) as entries:
                for child in entries:
                    if child.name.startswith(HIDDEN_PREFIX):
                        continue
                    try:
                        is_dir = child.is_dir(follow_symlinks=False)
                        st = child.stat(follow_symlinks=False)
                        mtime_ns = st.st_mtime_ns
                        size = 0 if is_dir else st.st_size
                    except OSError:
                        is_dir = False
                        mtime_ns = 0
                        size = 0
                    children.append((child.name, is_dir, mtime_ns, size))
        except FileNotFoundError:
            _update_digest(digest, "children:missing")
            continue
        except OSError:
            _update_digest(digest, "children:error")
            continue

        children.sort(key=lambda item: (not item[1], item[0]))
        for name, is_dir, mtime_ns, size in children:
            _update_digest(digest, f"child:{name}:{1 if is_dir else 0}:{mtime_ns}:{size}")
            if is_dir:
                pending.append(directory / name)

    return digest.hexdigest()


def watch_content(
    root: Path,
    on_change: Callable[[], None],
    interval: float = DEFAULT_WATCH_INTERVAL_SECONDS,
    should_stop: Callable[[], bool] | None = None,
    max_polls: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Poll ``root`` and call ``on_change`` once per observed change.

    Changes are not coalesced beyond the poll interval. Returns the number of
    ``on_change`` calls made before ``should_stop`` or ``max_polls`` ended
    the loop; with neither given the loop runs until interrupted.
    """
    signature = build_content_watch_signature(root)
    polls = 0
    fired = 0
    while True:
        if should_stop is not None and should_stop():
            break
        if max_polls is not None and polls >= max_polls:
            break
        sleep(interval)
        polls += 1
        latest = build_content_watch_signature(root)
        if latest == signature:
            continue
        signature = latest
        logger.debug("change detected under %s", root)
        on_change()
        fired += 1
    return fired


__all__ = [
    "DEFAULT_WATCH_INTERVAL_SECONDS",
    "build_content_watch_signature",
    "watch_content",
]
