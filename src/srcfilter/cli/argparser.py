"""Command-line argument parsing for srcfilter.

This module defines the command-line interface for srcfilter,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from srcfilter import __version__


class ToggleRecursiveAction(argparse.Action):
    """Action recording recursion toggles in the order they appear on the command line.

    Both -R/--recursive and -N/--non-recursive record into the ``toggles``
    list as ``(path, value)`` pairs, so a later option for the same path wins, just
    like clicking a checkbox twice.
    """

    def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if values is None:
            return
        value = option_string in ("-R", "--recursive")
        toggles = list(getattr(namespace, "toggles", None) or [])
        toggles.append((str(values), value))
        namespace.toggles = toggles


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with srcfilter's options.
    """
    description = """
    srcfilter: Merge source-path rules into a selectable tree.

    Reads a list of source-path rules, merges them into a tree of path components and
    shows which paths are included by a recursive rule higher up. Rules can be toggled
    between recursive and non-recursive and written back to the rule file.

    Rule File Formats:
    - text: one rule per line, '#' starts a comment, a trailing '/...' marks a
      recursive rule (e.g. 'app/src/...')
    - json: a list of path strings or {"path": ..., "recursive": ...} objects
    """

    epilog = """
    Examples:
      # Show the tree built from a rule file
      srcfilter rules.txt

      # Export the tree as JSON
      srcfilter --format json -o tree.json rules.txt

      # Make app/src recursive and app/lib non-recursive, then save the rule file
      srcfilter -R app/src -N app/lib --save rules.txt

      # Check which paths the rules include, without printing the tree
      srcfilter -T -c app/src/main.c -c docs/readme.md rules.txt

      # Print summary to stderr
      srcfilter -s stderr rules.json

      # Display version information and exit
      srcfilter -V
    """

    parser = argparse.ArgumentParser(
        prog="srcfilter",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"srcfilter {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "rules",
        type=Path,
        help="The rule file to read.",
    )
    parser.add_argument(
        "-F",
        "--rules-format",
        choices=["text", "json"],
        help="Format of the rule file (default: json for *.json files, text otherwise).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for the tree (default: text).",
    )
    parser.add_argument(
        "-T",
        "--no-tree",
        action="store_true",
        help="Disable tree output.",
    )
    parser.add_argument(
        "-R",
        "--recursive",
        metavar="PATH",
        action=ToggleRecursiveAction,
        help="Mark the rule for PATH as recursive (can be specified multiple times).",
    )
    parser.add_argument(
        "-N",
        "--non-recursive",
        metavar="PATH",
        action=ToggleRecursiveAction,
        help="Mark the rule for PATH as non-recursive (can be specified multiple times).",
    )
    parser.add_argument(
        "-c",
        "--check",
        metavar="PATH",
        action="append",
        default=[],
        help="Report whether PATH is included by the rules (can be specified multiple times).",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write the rules back to the rule file if any toggle changed them.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print summary report. Valid destinations: stderr, stdout",
    )
    parser.set_defaults(toggles=[])

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.save and not args.toggles:
        raise ValueError("--save requires at least one -R/--recursive or -N/--non-recursive option")
    if args.save and args.output is not None and args.output.resolve() == args.rules.resolve():
        raise ValueError("-o/--output must not overwrite the rule file when --save is given")
