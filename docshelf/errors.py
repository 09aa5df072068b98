"""Exception types shared by the manifest builder and navigation engine."""

from __future__ import annotations


class DocshelfError(Exception):
    """Base class for docshelf failures."""


class ManifestLoadError(DocshelfError):
    """The manifest could not be fetched or decoded."""


class DocumentLoadError(DocshelfError):
    """A single document could not be fetched."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"cannot load {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FilesystemScanError(DocshelfError):
    """Reading the content tree failed; the current build is aborted."""

    def __init__(self, path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to scan {path}: {cause}")


__all__ = [
    "DocshelfError",
    "ManifestLoadError",
    "DocumentLoadError",
    "FilesystemScanError",
]
