"""Command-line interface for srcfilter.

This module provides the command-line interface for srcfilter, allowing users to view
the tree built from a rule file, toggle rules between recursive and non-recursive,
check which paths the rules include and write modified rules back.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (missing or malformed rule file, invalid options)
    2: Command-line syntax error
    141: Broken pipe (e.g., when piping to `head`)

Example:
    # Show the tree built from a rule file
    $ srcfilter rules.txt

    # Make a rule recursive and save the rule file
    $ srcfilter -R app/src --save rules.txt

    # Display version information
    $ srcfilter --version
"""

import argparse
import sys
from collections.abc import Mapping
from typing import List, Optional, Tuple

from srcfilter.cli.argparser import create_parser, validate_args
from srcfilter.output_strategies.base_strategy import OutputStrategy
from srcfilter.output_strategies.json_strategy import JSONOutputStrategy
from srcfilter.output_strategies.text_strategy import TextOutputStrategy
from srcfilter.path_tree.source_filter_tree import SourceFilterTree
from srcfilter.rule_loader import load_rules, save_rules
from srcfilter.source_path import SourcePath
from srcfilter.types import RuleFormat


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing various count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    return "\n".join(
        [
            f"Nodes: {counts['nodes']}",
            f"Rules: {counts['rules']}",
            f"Recursive rules: {counts['recursive_rules']}",
        ]
    )


def create_strategy(output_format: str) -> OutputStrategy:
    """Create the output strategy for a ``--format`` value."""
    if output_format == "json":
        return JSONOutputStrategy()
    return TextOutputStrategy()


def apply_toggles(tree: SourceFilterTree, toggles: List[Tuple[str, bool]]) -> None:
    """Apply ``(path, value)`` recursion toggles in order, warning about paths without a rule."""
    for path, value in toggles:
        node = tree.find_node(path)
        if node is None or node.entry is None:
            print(f"Warning: No rule for path '{path}'; ignoring", file=sys.stderr)
            continue
        tree.set_recursive(node, value)


def render_output(args: argparse.Namespace, tree: SourceFilterTree) -> str:
    """Assemble everything destined for the output file or stdout."""
    sections = []
    if not args.no_tree:
        sections.append(create_strategy(args.format).format_tree(tree))
    if args.check:
        sections.append(
            "\n".join(f"{'included' if tree.includes(path) else 'excluded'}\t{path}" for path in args.check)
        )
    if args.summary:
        counts = {
            "nodes": tree.node_count,
            "rules": tree.rule_count,
            "recursive_rules": tree.recursive_rule_count,
        }
        if args.summary == "stdout":
            sections.append(format_counts(counts))
        else:
            print(format_counts(counts), file=sys.stderr)
    return "".join(f"{section}\n" for section in sections)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the srcfilter command-line interface.

    Args:
        argv: Command-line arguments, defaulting to ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        141: Broken pipe
    """
    try:
        parser = create_parser()
        args = parser.parse_args(argv)

        # Perform additional validation beyond what argparse supports directly
        validate_args(args)

        rule_format = RuleFormat(args.rules_format) if args.rules_format else None
        rules = load_rules(args.rules, rule_format)

        changed: List[SourcePath] = []
        tree = SourceFilterTree(rules, on_change=changed.append)

        for rule in tree.overwritten:
            print(f"Warning: Rule '{rule.path}' is overridden by a later rule with the same path", file=sys.stderr)

        apply_toggles(tree, args.toggles)

        output = render_output(args, tree)
        if args.output:
            args.output.write_text(output, encoding="utf-8")
        elif output:
            sys.stdout.write(output)
            sys.stdout.flush()

        if args.save:
            if changed:
                save_rules(args.rules, tree.rules, rule_format)
            else:
                print("Warning: No rule changed; rule file left untouched.", file=sys.stderr)

    except BrokenPipeError:
        sys.exit(141)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
