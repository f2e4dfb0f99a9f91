"""Command-line argument parsing for ls-option.

This module defines the command-line interface and maps parsed arguments onto a
ListOption.
"""

import argparse
from pathlib import Path

from ls_option import __version__
from ls_option.list_option import ListOption
from ls_option.permission_action import PermissionAction

# CLI permission choices mapped onto the library policy
PERMISSION_ACTIONS = {
    "ignore": PermissionAction.IGNORE,
    "warn": PermissionAction.IGNORE,
    "fail": PermissionAction.RAISE,
}


def non_negative_int(value: str) -> int:
    """argparse type for --level."""
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level: {value!r}")
    if level < 0:
        raise argparse.ArgumentTypeError(f"level must not be negative: {level}")
    return level


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with ls-option's options.
    """
    description = """
    ls-option: list directory entries selected by kind, visibility and suffix.

    Entries are printed one per line in directory order, with the contents of a
    directory directly after the directory itself. Like ls, entries whose name
    starts with a dot are hidden unless -a is given.
    """

    epilog = """
    Examples:
      # List the current directory
      ls-option

      # All Rust sources below the current directory, like the crate's list_all_rs example
      ls-option -r -d -x rs .

      # Include dot files, go two levels deep
      ls-option -a -l 2 /path/to/project

      # Only dot entries, shown as a tree
      ls-option -H -t ~

      # Several suffixes
      ls-option -r -s .tar.gz -s .zip downloads

      # Permission handling
      ls-option -r -P ignore /    # Skip unreadable directories silently (default)
      ls-option -r -P warn /      # Skip them and print a warning for each
      ls-option -r -P fail /      # Stop with exit status 126
    """

    parser = argparse.ArgumentParser(
        prog="ls-option",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"ls-option {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        type=Path,
        help="The file or directory to list (default: current directory).",
    )
    parser.add_argument(
        "-f",
        "--no-files",
        action="store_true",
        help="Do not list files.",
    )
    parser.add_argument(
        "-d",
        "--no-dirs",
        action="store_true",
        help="Do not list directories. Directories are still descended into.",
    )

    visibility = parser.add_mutually_exclusive_group()
    visibility.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Also list entries whose name starts with a dot, and descend into such directories.",
    )
    visibility.add_argument(
        "-H",
        "--only-hidden",
        action="store_true",
        help="List only entries whose name starts with a dot.",
    )

    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Descend into subdirectories without a depth limit.",
    )
    parser.add_argument(
        "-l",
        "--level",
        type=non_negative_int,
        metavar="N",
        help="Descend at most N levels (default: 1, the direct children only).",
    )
    parser.add_argument(
        "-s",
        "--suffix",
        action="append",
        default=[],
        metavar="SUF",
        help="Only list entries whose name ends with SUF. Can be specified multiple times.",
    )
    parser.add_argument(
        "-x",
        "--ext",
        action="append",
        default=[],
        metavar="EXT",
        help="Only list entries with extension EXT (given without the dot). Can be specified multiple times.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Descend into symbolic links that point at directories. Symlink loops are not detected.",
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Show the matching entries as a tree instead of one path per line.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=list(PERMISSION_ACTIONS),
        default="ignore",
        help=(
            "How to handle unreadable directories: skip them silently (ignore), skip them with a "
            "warning on stderr (warn), or stop with exit status 126 (fail). Default: ignore."
        ),
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.recursive and args.level is not None:
        raise ValueError("-r/--recursive and -l/--level cannot be used together")
    if args.no_files and args.no_dirs:
        raise ValueError("-f/--no-files and -d/--no-dirs together would list nothing")


def build_list_option(args: argparse.Namespace) -> ListOption:
    """Translate parsed arguments into a ListOption."""
    option = (
        ListOption.default()
        .file(not args.no_files)
        .dir(not args.no_dirs)
        .hidden(args.all or args.only_hidden)
        .unhidden(not args.only_hidden)
        .recursive(args.recursive)
        .follow_symlinks(args.follow_symlinks)
        .permission_action(PERMISSION_ACTIONS[args.permission_action])
    )
    if args.level is not None:
        option = option.level(args.level)

    option = option.sufs(args.suffix)
    for ext in args.ext:
        option = option.ext(ext)
    return option
