"""Construction of source filter trees from flat lists of path rules.

This module provides the FilterTreeBuilder class, which merges source-path rules
into a tree of path components, and the split_path helper defining how a rule's
path is decomposed.
"""

import re
from typing import Iterable, List, Optional

from srcfilter.path_tree.path_node import PathNode
from srcfilter.source_path import SourcePath

COMPONENT_DELIMITERS = re.compile(r"[/:]")


def split_path(path: str) -> List[str]:
    """Split a rule path into its non-empty components.

    Both ``/`` and ``:`` delimit components; empty components produced by leading,
    trailing or consecutive delimiters are dropped.

    Args:
        path: The rule path to split.

    Returns:
        The ordered list of components.

    Example:
        >>> split_path("a/b:c/d")
        ['a', 'b', 'c', 'd']
        >>> split_path("//app/src:main")
        ['app', 'src', 'main']
        >>> split_path("///")
        []
    """
    return [component for component in COMPONENT_DELIMITERS.split(path) if component]


class FilterTreeBuilder:
    """Builds a forest of PathNode objects from an ordered list of rules.

    Each rule's path is split into components and merged into a tree rooted at a
    synthetic, nameless node: existing children are reused when their name matches,
    new children are appended in discovery order. The node reached by the last
    component is bound to the rule. Once every rule has been merged, the
    recursive-ancestor flags of the whole tree are computed in a single top-down pass.

    Builders are reusable; every call to build() starts from a fresh root.

    Attributes:
        root (Optional[PathNode]): The synthetic root of the most recent build.
        recursive_roots (List[PathNode]): Nodes bound to a recursive rule at the end of
            the most recent build, in the order their rules were merged. Flags are
            computed from the whole tree, not from this list.
        overwritten (List[SourcePath]): Rules whose node was re-bound to a later rule
            with an identical path during the most recent build.

    Example:
        >>> builder = FilterTreeBuilder()
        >>> forest = builder.build([SourcePath("a/b"), SourcePath("a/c", recursive=True), SourcePath("a/c/d")])
        >>> [node.name for node in forest]
        ['a']
        >>> [node.name for node in forest[0].children]
        ['b', 'c']
        >>> forest[0].children[1].children[0].has_recursive_ancestor
        True
    """

    def __init__(self) -> None:
        self.root: Optional[PathNode] = None
        self.recursive_roots: List[PathNode] = []
        self.overwritten: List[SourcePath] = []

    def build(self, rules: Iterable[SourcePath]) -> List[PathNode]:
        """Merge ``rules`` into a tree and return its top-level nodes.

        When two rules resolve to the same path the later one replaces the earlier
        one on the shared node; the replaced rule is recorded in ``overwritten``.
        A rule whose path has no components binds to the synthetic root. No rule
        list makes this method raise, and an empty list yields an empty forest.

        Args:
            rules: Rules to merge, in order.

        Returns:
            The children of the synthetic root, in discovery order.
        """
        self.root = PathNode("")
        self.recursive_roots = []
        self.overwritten = []

        for rule in rules:
            node = self._merge(rule)
            if node.entry is not None:
                self.overwritten.append(node.entry)
            node.entry = rule
            if node.is_recursive and node not in self.recursive_roots:
                self.recursive_roots.append(node)

        # A later duplicate may have replaced a recursive rule
        self.recursive_roots = [node for node in self.recursive_roots if node.is_recursive]

        # Flags are only meaningful once the whole tree exists
        self.root.refresh_descendants()

        return list(self.root.children)

    def _merge(self, rule: SourcePath) -> PathNode:
        """Walk (and extend) the tree along a rule's path and return the final node."""
        assert self.root is not None
        node = self.root
        for component in split_path(rule.path):
            child = node.find_child(component)
            if child is None:
                child = node.add_child(component)
            node = child
        return node
