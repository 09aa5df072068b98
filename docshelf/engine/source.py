"""Document sources the engine fetches the manifest and documents from."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from ..errors import DocumentLoadError
from ..highlight import read_text


class DocumentSource(Protocol):
    """Anything that maps a site-relative path to raw document text."""

    def fetch_text(self, path: str) -> str:
        """Return text for ``path`` or raise ``DocumentLoadError``."""
        ...


class FileSystemSource:
    """Serve site-relative paths from a site root on disk.

    A leading ``/`` is ignored, so ``/content/README.md`` and
    ``content/README.md`` name the same file. Paths resolving outside the
    site root are refused.
    """

    def __init__(self, site_root: Path) -> None:
        self.site_root = site_root.resolve()

    def resolve(self, path: str) -> Path:
        relative = path.lstrip("/")
        if not relative:
            raise DocumentLoadError(path, "empty path")
        try:
            target = (self.site_root / relative).resolve()
        except (OSError, ValueError) as exc:
            raise DocumentLoadError(path, str(exc)) from exc
        if not target.is_relative_to(self.site_root):
            raise DocumentLoadError(path, "outside site root")
        return target

    def fetch_text(self, path: str) -> str:
        target = self.resolve(path)
        try:
            return read_text(target)
        except OSError as exc:
            raise DocumentLoadError(path, exc.strerror or str(exc)) from exc
        except ValueError as exc:
            raise DocumentLoadError(path, str(exc)) from exc


class MappingSource:
    """In-memory source keyed by site-relative path."""

    def __init__(self, documents: Mapping[str, str]) -> None:
        self.documents = dict(documents)

    def fetch_text(self, path: str) -> str:
        key = path.lstrip("/")
        try:
            return self.documents[key]
        except KeyError:
            raise DocumentLoadError(path, "not found") from None


__all__ = [
    "DocumentSource",
    "FileSystemSource",
    "MappingSource",
]
