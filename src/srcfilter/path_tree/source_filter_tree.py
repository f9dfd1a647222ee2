"""Source filter tree sessions.

This module provides the SourceFilterTree class, which owns the tree built from a
list of rules for the lifetime of a picker session and exposes the operations a
host application needs: lookup, toggling recursion, inclusion checks, counting and
text rendering.
"""

from typing import Callable, Iterable, Iterator, List, Optional, Union

from anytree import PreOrderIter, RenderTree

from srcfilter.path_tree.filter_tree_builder import FilterTreeBuilder, split_path
from srcfilter.path_tree.path_node import PathNode
from srcfilter.source_path import SourcePath

ChangeCallback = Callable[[SourcePath], None]


class SourceFilterTree:
    """A tree representation of a list of source-path rules.

    The tree is built lazily on first access and rebuilt from scratch by refresh(),
    which is what a picker does every time it is shown: the rule list is the
    authoritative state and nodes are transient. Toggling a node's recursion writes
    through to its rule and reports the change through ``on_change`` so the host can
    mark its document as modified.

    Attributes:
        rules (List[SourcePath]): The rules the tree is built from, in order.
        on_change (Optional[Callable[[SourcePath], None]]): Called with the rule whose
            recursive flag was changed through set_recursive().

    Example:
        >>> tree = SourceFilterTree([SourcePath("app/src"), SourcePath("app/lib", recursive=True)])
        >>> print(tree.get_tree_representation())
        app/
        ├── src
        └── lib/...
        >>> tree.includes("app/lib/deep/file.c")
        True
        >>> tree.includes("app/other.c")
        False
    """

    def __init__(self, rules: Iterable[SourcePath], on_change: Optional[ChangeCallback] = None) -> None:
        """Initialize a SourceFilterTree.

        Args:
            rules: Rules to build the tree from. The sequence is copied, the rules
                themselves are shared and will be updated by set_recursive().
            on_change: Optional callback invoked with a rule after its recursive flag
                changed. Defaults to None.
        """
        self.rules = list(rules)
        self.on_change = on_change
        self._builder = FilterTreeBuilder()
        self._forest: Optional[List[PathNode]] = None

    def get_forest(self) -> List[PathNode]:
        """Get the top-level nodes of the tree, building it if necessary."""
        if self._forest is None:
            self._build_tree()
        assert self._forest is not None
        return self._forest

    @property
    def root(self) -> PathNode:
        """The synthetic root holding the forest."""
        self.get_forest()
        assert self._builder.root is not None
        return self._builder.root

    @property
    def overwritten(self) -> List[SourcePath]:
        """Rules replaced by a later rule with an identical path."""
        self.get_forest()
        return list(self._builder.overwritten)

    def _build_tree(self) -> None:
        self._forest = self._builder.build(self.rules)

    def refresh(self) -> None:
        """Discard the current tree and rebuild it from the rule list.

        Nodes obtained before the refresh are no longer part of the tree.
        """
        self._forest = None
        self._build_tree()

    def find_node(self, path: str) -> Optional[PathNode]:
        """Find the node a rule path resolves to.

        Args:
            path: A rule path; delimiters are handled as in split_path().

        Returns:
            The node for ``path``, the synthetic root for a path without components,
            or None if the tree has no such node.
        """
        node: Optional[PathNode] = self.root
        for component in split_path(path):
            assert node is not None
            node = node.find_child(component)
            if node is None:
                return None
        return node

    def set_recursive(self, target: Union[str, PathNode], value: bool) -> bool:
        """Toggle the recursive flag of a node's rule.

        Nodes without an entry are left alone. ``on_change`` fires only when the
        rule's flag actually changed.

        Args:
            target: A node of this tree or a rule path resolving to one.
            value: The new recursive flag.

        Returns:
            True if the rule's flag changed, False otherwise.

        Raises:
            KeyError: If ``target`` is a path with no node in the tree, or a node that
                is not part of the current tree (for example one obtained before
                refresh()).
        """
        if isinstance(target, PathNode):
            if target.root is not self.root:
                raise KeyError(f"Node is not part of the current tree: {target.source_path}")
            node: Optional[PathNode] = target
        else:
            node = self.find_node(target)
            if node is None:
                raise KeyError(f"No node for path: {target}")

        assert node is not None
        changed = node.set_recursive(value)
        if changed and self.on_change is not None and node.entry is not None:
            self.on_change(node.entry)
        return changed

    def includes(self, file_path: str) -> bool:
        """Check whether a concrete source path is selected by the rules.

        A path is included if a rule names it exactly, if a rule names the directory
        directly containing it, or if any rule on one of its prefixes is recursive.

        Args:
            file_path: The path to check, delimited like a rule path.

        Returns:
            True if the path is included, False otherwise.
        """
        components = split_path(file_path)
        nodes = [self.root]
        for component in components:
            child = nodes[-1].find_child(component)
            if child is None:
                break
            nodes.append(child)

        deepest = nodes[-1]
        if deepest.is_recursive or deepest.has_recursive_ancestor:
            return True
        if len(nodes) == len(components) + 1 and deepest.entry is not None:
            return True
        # nodes[len(components) - 1] is the containing directory when it was reached
        return bool(components) and len(nodes) >= len(components) and nodes[len(components) - 1].entry is not None

    def iterate_rules(self) -> Iterator[SourcePath]:
        """Yield the rules bound to nodes, in tree (pre-order) order.

        Rules replaced by a later duplicate are not yielded.
        """
        for node in PreOrderIter(self.root):
            if node.entry is not None:
                yield node.entry

    @property
    def node_count(self) -> int:
        """Number of nodes in the forest, excluding the synthetic root."""
        return len(self.root.descendants)

    @property
    def rule_count(self) -> int:
        """Number of rules bound to nodes."""
        return sum(1 for _ in self.iterate_rules())

    @property
    def recursive_rule_count(self) -> int:
        """Number of rules bound to nodes that are marked recursive."""
        return sum(1 for rule in self.iterate_rules() if rule.recursive)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a text rendering of the forest one line at a time.

        Each top-level node starts its own tree drawn with box characters. Recursive
        nodes are shown as ``name/...``, nodes without a rule as ``name/`` and nodes
        below a recursive rule are marked ``(inherited)``.

        Yields:
            Lines of the tree representation, without line terminators.

        Example:
            >>> tree = SourceFilterTree([SourcePath("a/b"), SourcePath("a/c", recursive=True), SourcePath("a/c/d")])
            >>> for line in tree.stream_tree_representation():
            ...     print(line)
            a/
            ├── b
            └── c/...
                └── d (inherited)
        """
        for top in self.get_forest():
            for row in RenderTree(top):
                yield f"{row.pre}{self._label(row.node)}"

    def get_tree_representation(self) -> str:
        """Get the complete text rendering of the forest as a single string."""
        return "\n".join(self.stream_tree_representation())

    @staticmethod
    def _label(node: PathNode) -> str:
        if node.is_recursive:
            label = f"{node.name}/..."
        elif node.entry is None:
            label = f"{node.name}/"
        else:
            label = node.name
        if node.has_recursive_ancestor:
            label += " (inherited)"
        return label
