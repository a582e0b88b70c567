"""Logging setup for the command-line entrypoint."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Route ``lazyls`` log records to stderr.

    Only warnings are shown by default; ``verbose`` enables per-entry debug
    records such as skipped metadata reads.
    """
    logger = logging.getLogger("lazyls")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


__all__ = ["LOG_FORMAT", "configure_logging"]
