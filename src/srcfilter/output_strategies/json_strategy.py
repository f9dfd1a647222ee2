"""JSON output strategy for filter trees.

This module provides a strategy for exporting a filter tree as nested JSON objects
using anytree's dictionary exporter.
"""

import json
from typing import Any, Dict, Iterable, List, Optional, Tuple

from anytree.exporter import DictExporter

from srcfilter.path_tree.source_filter_tree import SourceFilterTree

from .base_strategy import OutputStrategy


def _node_attributes(attr_values: Iterable[Tuple[str, Any]]) -> List[Tuple[str, Any]]:
    """Map a PathNode's instance attributes to the exported JSON fields."""
    values = dict(attr_values)
    attributes: List[Tuple[str, Any]] = [("name", values["name"])]
    entry = values.get("entry")
    if entry is not None:
        attributes.append(("entry", {"path": entry.path, "recursive": bool(entry.recursive)}))
    attributes.append(("has_recursive_ancestor", values["_has_recursive_ancestor"]))
    return attributes


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that formats the filter tree as a JSON array of node objects.

    Every top-level node becomes one element of the array. Nodes are formatted as:
    {
        "name": "component",
        "entry": {"path": "rule/path", "recursive": true},  # Only on nodes bound to a rule
        "has_recursive_ancestor": false,
        "children": [...]  # Only when the node has children
    }

    Attributes:
        exporter: anytree DictExporter configured for PathNode attributes.
        indent: Indentation passed to json.dumps, or None for compact output.

    Example:
        >>> from srcfilter.source_path import SourcePath
        >>> tree = SourceFilterTree([SourcePath("lib", recursive=True)])
        >>> print(JSONOutputStrategy(indent=None).format_tree(tree))
        [{"name": "lib", "entry": {"path": "lib", "recursive": true}, "has_recursive_ancestor": false}]
    """

    def __init__(self, indent: Optional[int] = 2) -> None:
        self.exporter = DictExporter(attriter=_node_attributes)
        self.indent = indent

    def export_tree(self, tree: SourceFilterTree) -> List[Dict[str, Any]]:
        """Export the forest as a list of plain dictionaries."""
        return [self.exporter.export(node) for node in tree.get_forest()]

    def format_tree(self, tree: SourceFilterTree) -> str:
        return json.dumps(self.export_tree(tree), indent=self.indent, ensure_ascii=False)

    def get_file_extension(self) -> str:
        return ".json"
