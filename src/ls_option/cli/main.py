"""Command-line interface for ls-option.

This module provides the ``ls-option`` command, which builds a ListOption from
command-line flags, lists the given path and prints the result either as plain
paths or as a tree.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied (with -P fail)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe, the reader closed stdout early

Example:
    # Every Rust source below the current directory
    $ ls-option -r -d -x rs .

    # Stop on the first unreadable directory
    $ ls-option -r -P fail /var
"""

import sys
from typing import Iterator, List, Tuple

from ls_option.cli.argparser import build_list_option, create_parser, validate_args
from ls_option.cli.output import open_output, write_listing
from ls_option.tree import build_listing_tree, render_listing_tree
from ls_option.types import PathType


def format_listing(root: PathType, paths: List[str], as_tree: bool = False) -> Iterator[str]:
    """Yield the output lines for a listing.

    Args:
        root: The path that was listed.
        paths: The result of ListOption.list.
        as_tree: Render the entries as a tree rooted at ``root``.
    """
    if as_tree:
        yield from render_listing_tree(build_listing_tree(root, paths))
    else:
        yield from paths


def main() -> None:
    """Main entry point for the ls-option command-line interface."""
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)
        option = build_list_option(args)

        skipped: List[Tuple[str, OSError]] = []
        try:
            paths = option.list(args.path, skipped)
        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

        if args.permission_action == "warn":
            for directory, error in skipped:
                print(f"Warning: Skipped unreadable directory {directory}: {error}", file=sys.stderr)

        with open_output(args.output) as stream:
            if not write_listing(stream, format_listing(args.path, paths, args.tree)):
                sys.exit(141)

    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
