"""Command-line front door for lazyls.

Parses CLI options, merges them with persisted defaults, validates the root
path, and dispatches to the presentation layer.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from . import config
from .errors import ListingError
from .listing.enumeration import validate_root
from .listing.types import ListingConfig
from .log import configure_logging
from .presentation import present, select_mode
from .ui_theme import available_theme_names


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _color_disabled(no_color_flag: bool) -> bool:
    """Return whether output should be plain text."""
    if no_color_flag or os.environ.get("NO_COLOR"):
        return True
    return not sys.stdout.isatty()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyls",
        description="List directory entries as a table, JSON records, or a tree.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden files.")
    parser.add_argument("-l", "--long", action="store_true", help="Use a long listing format.")
    parser.add_argument("-j", "--json", action="store_true", help="Print entries as JSON records.")
    parser.add_argument("--tree", action="store_true", help="List files in a tree-like format.")
    parser.add_argument(
        "--depth",
        type=_nonnegative_int,
        default=None,
        help="Deepest directory level expanded in --tree output (default: from config, else 32).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries to stderr.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist --all, --depth, --theme and --no-color as defaults.",
    )
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing.

    ``default_path`` is primarily for tests; when omitted the current
    directory is listed. A missing or unreadable root exits with a message
    and no listing output.
    """
    args = build_parser().parse_args()
    configure_logging(args.verbose)

    show_hidden = args.all or config.load_show_hidden()
    max_depth = args.depth if args.depth is not None else config.load_tree_max_depth()
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    no_color_pref = args.no_color or config.load_no_color()

    if args.save_defaults:
        config.save_listing_defaults(show_hidden, max_depth, theme_name, no_color_pref)

    path = Path(args.path) if args.path is not None else (default_path or Path("."))
    try:
        validate_root(path)
    except ListingError as exc:
        raise SystemExit(str(exc)) from exc

    listing = ListingConfig(
        root_path=path,
        show_hidden=show_hidden,
        mode=select_mode(tree=args.tree, structured=args.json, detailed=args.long),
        max_depth=max_depth,
        theme_name=theme_name,
        no_color=_color_disabled(no_color_pref),
    )
    try:
        present(listing, sys.stdout)
        sys.stdout.flush()
    except BrokenPipeError:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


if __name__ == "__main__":
    main()
