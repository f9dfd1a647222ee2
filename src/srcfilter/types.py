from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class RuleFormat(str, Enum):
    """Serialization format of a rule file.

    Attributes:
        TEXT: One rule per line, recursive rules end in ``/...``
        JSON: A JSON list of ``{"path": ..., "recursive": ...}`` objects
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def for_path(cls, path: PathType) -> "RuleFormat":
        """Pick the format from a file name: ``.json`` files are JSON, anything else is text.

        Example:
            >>> RuleFormat.for_path("rules.json")
            <RuleFormat.JSON: 'json'>
            >>> RuleFormat.for_path("rules.txt")
            <RuleFormat.TEXT: 'text'>
        """
        return cls.JSON if Path(path).suffix.lower() == ".json" else cls.TEXT
