"""Public package surface for docshelf.

Exports ``main`` for programmatic CLI invocation.
The manifest builder lives in ``docshelf.builder`` and the navigation engine
in ``docshelf.engine``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
