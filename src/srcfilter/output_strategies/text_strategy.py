"""Plain text output strategy for filter trees."""

from srcfilter.path_tree.source_filter_tree import SourceFilterTree

from .base_strategy import OutputStrategy


class TextOutputStrategy(OutputStrategy):
    """Output strategy that renders the filter tree like the Unix ``tree`` command.

    Example:
        >>> from srcfilter.source_path import SourcePath
        >>> tree = SourceFilterTree([SourcePath("src/main", recursive=True), SourcePath("docs")])
        >>> print(TextOutputStrategy().format_tree(tree))
        src/
        └── main/...
        docs
    """

    def format_tree(self, tree: SourceFilterTree) -> str:
        return tree.get_tree_representation()

    def get_file_extension(self) -> str:
        return ".txt"
