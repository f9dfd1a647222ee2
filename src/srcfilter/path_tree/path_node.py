"""Node representation for path components in the source filter tree."""

from typing import Any, Dict, List, Optional

from anytree import Node, PreOrderIter

from srcfilter.source_path import SourcePath


class PathNode(Node):  # type: ignore
    """Node class representing one component of a source path.

    Extends anytree.Node with an optional rule binding and the recursion state shown
    by a source filter picker. Children keep their discovery order; a name index on
    each node allows constant time lookup of a child by name while the anytree
    parent/child links remain the owning structure.

    Attributes:
        name (str): The path component this node represents ("" for a synthetic root).
            Names must be unique among siblings and must not change after the node
            is attached.
        entry (Optional[SourcePath]): The rule whose path ends exactly at this node,
            or None for purely intermediate components.
        is_recursive (bool): True if the node carries a rule marked recursive.
        has_recursive_ancestor (bool): True if any strict ancestor is recursive or
            itself has a recursive ancestor.
        children (tuple[PathNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = PathNode("")
        >>> app = root.add_child("app")
        >>> src = app.add_child("src")
        >>> app.entry = SourcePath("app", recursive=True)
        >>> root.refresh_descendants()
        >>> src.has_recursive_ancestor
        True
        >>> src.source_path
        'app/src'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["PathNode"] = None,
        entry: Optional[SourcePath] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a PathNode.

        Args:
            name: The path component this node represents.
            parent: The parent node. Defaults to None.
            entry: The rule terminating at this node. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        # Must exist before anytree attaches children to this node
        self._child_index: Dict[str, "PathNode"] = {}
        self._has_recursive_ancestor = False
        super().__init__(name, parent, **kwargs)
        self.entry = entry

    # anytree hooks keeping the parent's name index in step with its children.
    # Names are fixed once a node is attached; renaming leaves the index stale.

    def _pre_attach(self, parent: "PathNode") -> None:
        existing = parent._child_index.get(self.name)
        if existing is not None and existing is not self:
            raise ValueError(f"Node already has a child named '{self.name}'")

    def _post_attach(self, parent: "PathNode") -> None:
        parent._child_index[self.name] = self

    def _post_detach(self, parent: "PathNode") -> None:
        if parent._child_index.get(self.name) is self:
            del parent._child_index[self.name]

    @property
    def is_recursive(self) -> bool:
        """Whether this node carries a rule marked recursive."""
        return self.entry is not None and bool(self.entry.recursive)

    @property
    def has_recursive_ancestor(self) -> bool:
        """Whether some strict ancestor of this node is recursive."""
        return self._has_recursive_ancestor

    @has_recursive_ancestor.setter
    def has_recursive_ancestor(self, value: bool) -> None:
        """Set the derived ancestor flag and push it down the subtree.

        Children are left alone when this node is itself recursive (they keep seeing a
        recursive parent whatever happens above) or when the value does not change.

        Args:
            value: The new flag value.
        """
        skip_children = self.is_recursive or value == self._has_recursive_ancestor
        self._has_recursive_ancestor = value
        if not skip_children:
            self.propagate_to_children(value)

    def propagate_to_children(self, value: bool) -> None:
        """Apply ``has_recursive_ancestor = value`` to every direct child.

        Each child forwards the value further down according to the setter's rules.

        Args:
            value: The flag value to hand to the children.
        """
        for child in self.children:
            child.has_recursive_ancestor = value

    def set_recursive(self, value: bool) -> bool:
        """Mark the rule bound to this node as recursive or not.

        Only nodes carrying an entry can be toggled; on any other node this is a
        silent no-op. After the rule is updated every descendant's ancestor flag is
        recomputed, so direct children end up with ``value or self.has_recursive_ancestor``
        and a subtree below another recursive node never loses its flag.

        Args:
            value: The new recursive flag for this node's rule.

        Returns:
            True if the rule's flag changed, False otherwise (including when the node
            has no entry).

        Example:
            >>> node = PathNode("lib", entry=SourcePath("lib"))
            >>> child = PathNode("util", parent=node)
            >>> node.set_recursive(True)
            True
            >>> child.has_recursive_ancestor
            True
            >>> PathNode("orphan").set_recursive(True)
            False
        """
        if self.entry is None:
            return False

        changed = bool(self.entry.recursive) != value
        self.entry.recursive = value
        self.refresh_descendants()
        return changed

    def refresh_descendants(self) -> None:
        """Recompute ``has_recursive_ancestor`` for every node below this one.

        Walks the subtree top-down once and derives each node's flag from its parent's
        ``is_recursive`` and ``has_recursive_ancestor``. This node's own flag is taken
        as given.
        """
        for node in PreOrderIter(self):
            if node is self:
                continue
            parent = node.parent
            node._has_recursive_ancestor = parent.is_recursive or parent._has_recursive_ancestor

    def find_child(self, name: str) -> Optional["PathNode"]:
        """Return the direct child called ``name``, or None if there is none."""
        return self._child_index.get(name)

    def add_child(self, name: str) -> "PathNode":
        """Create a child called ``name`` and append it after the existing children."""
        return PathNode(name, parent=self)

    @property
    def path_components(self) -> List[str]:
        """Component names from the top of the forest down to this node.

        A nameless synthetic root does not contribute a component.
        """
        return [node.name for node in self.path if not (node.is_root and node.name == "")]

    @property
    def source_path(self) -> str:
        """The ``/``-joined form of :attr:`path_components`."""
        return "/".join(self.path_components)
