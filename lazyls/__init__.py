"""lazyls: list a directory as a table, JSON records, or a bounded tree.

The listing core lives in ``lazyls.listing``; output formats live in
``lazyls.render``. Only ``main`` is re-exported here.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the command-line entrypoint, importing it on first use."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
