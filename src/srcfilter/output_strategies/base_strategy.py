"""Output strategy base class defining the interface for filter tree formatting.

This module provides the abstract base class that defines how a source filter tree
is turned into output. Concrete strategies decide the format; the tree itself is
never modified by a strategy.
"""

from abc import ABC, abstractmethod

from srcfilter.path_tree.source_filter_tree import SourceFilterTree


class OutputStrategy(ABC):
    """Abstract base class defining the interface for filter tree output formatting strategies.

    This class implements the Strategy pattern for formatting a SourceFilterTree in
    different formats (e.g., plain text, JSON).

    Example:
        >>> from srcfilter.source_path import SourcePath
        >>> class NameListStrategy(OutputStrategy):
        ...     def format_tree(self, tree: SourceFilterTree) -> str:
        ...         return " ".join(node.name for node in tree.get_forest())
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".lst"
        >>> NameListStrategy().format_tree(SourceFilterTree([SourcePath("a/b"), SourcePath("c")]))
        'a c'
    """

    @abstractmethod
    def format_tree(self, tree: SourceFilterTree) -> str:
        """Format a complete source filter tree.

        Args:
            tree: The tree to format. It is built first if it has not been yet.

        Returns:
            The formatted tree, without a trailing newline.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".txt", ".json").
        """
        pass
