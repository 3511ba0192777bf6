"""Command-line front door for repotree.

Parses CLI options, layers them over config-file defaults, and prints the
colorized repository tree for the requested path.
"""

from __future__ import annotations

import argparse
import sys

from . import config
from .log import configure_logging
from .repo_tree import DEFAULT_DEPTH, DEFAULT_SKIP_DIRECTORIES, RepositoryTree, RootNotFoundError
from .ui_theme import PLAIN_THEME, available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show a directory tree with git repositories colored by dirty/clean status."
    )
    parser.add_argument("path", nargs="?", default=None, help="Start path. Defaults to current directory.")
    parser.add_argument("-p", "--path", dest="path_option", metavar="PATH", default=None, help="Start path (alternative to the positional argument).")
    parser.add_argument(
        "-d",
        "--depth",
        type=_positive_int,
        default=None,
        help=f"Maximum depth to descend (default: {DEFAULT_DEPTH}).",
    )
    parser.add_argument(
        "-s",
        "--skip",
        default=None,
        help=f"Comma-separated directory names to list without descending (default: {','.join(DEFAULT_SKIP_DIRECTORIES)}).",
    )
    parser.add_argument("-i", "--include-hidden", action="store_true", default=None, help="Include entries starting with '.'.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join((*available_theme_names(), PLAIN_THEME.name))}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug diagnostics to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the repository tree.

    Flags override values from the config file, which override built-in
    defaults. A missing start path exits with status 1 and no tree output.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.path is not None and args.path_option is not None:
        raise SystemExit("Cannot combine positional path with --path.")

    configure_logging(verbose=args.verbose)

    skip_directories = config.parse_skip_list(args.skip) if args.skip is not None else config.load_skip_directories()
    depth = args.depth if args.depth is not None else config.load_max_depth()
    include_hidden = args.include_hidden if args.include_hidden is not None else config.load_include_hidden()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)

    repo_tree = RepositoryTree()
    options = repo_tree.resolve_options(
        path=args.path or args.path_option,
        skip_directories=skip_directories,
        depth=depth,
        include_hidden=include_hidden,
    )
    try:
        repo_tree.show(options, sys.stdout, theme)
    except RootNotFoundError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
