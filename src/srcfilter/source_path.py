"""Source path rules as supplied by the user."""

from typing import Any


class SourcePath:
    """A user-specified source path plus its recursive-inclusion flag.

    Instances are the authoritative state behind a filter tree: nodes built from a
    rule keep a reference to it as their ``entry`` and toggling a node's recursion
    writes straight through to the rule.

    Attributes:
        path (str): Source path, with components delimited by ``/`` or ``:``.
        recursive (bool): Whether every path below ``path`` is included as well.

    Example:
        >>> rule = SourcePath("app/src", recursive=True)
        >>> rule
        SourcePath(path='app/src', recursive=True)
        >>> rule == SourcePath("app/src", True)
        True
    """

    def __init__(self, path: str, recursive: bool = False):
        self.path = path
        self.recursive = recursive

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SourcePath):
            return False
        return self.path == other.path and self.recursive == other.recursive

    # Mutable, hence unhashable
    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"SourcePath(path={self.path!r}, recursive={self.recursive})"
