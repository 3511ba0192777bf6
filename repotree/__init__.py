"""Public package surface for repotree.

Exports ``main`` for programmatic CLI invocation.
Tree building and rendering live in ``repotree.tree_model``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
