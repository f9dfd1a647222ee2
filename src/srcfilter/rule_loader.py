"""Reading and writing rule files.

Two formats are supported. The text format holds one rule per line; blank lines and
lines starting with ``#`` are ignored and a trailing ``/...`` marks a rule as
recursive::

    # generated project sources
    app/src/...
    app/resources
    //lib:util/...

The JSON format is a list whose items are either plain path strings (non-recursive
rules) or objects with a ``path`` string and an optional ``recursive`` boolean.
"""

import json
from pathlib import Path
from typing import Iterable, List, Optional

from srcfilter.exceptions import RuleFileError
from srcfilter.source_path import SourcePath
from srcfilter.types import PathType, RuleFormat

RECURSIVE_SUFFIX = "/..."


def parse_text_rules(lines: Iterable[str]) -> List[SourcePath]:
    """Parse rules in the line-oriented text format.

    Args:
        lines: Lines of the rule file, with or without line terminators.

    Returns:
        The rules, in file order.

    Example:
        >>> parse_text_rules(["# comment", "app/src/...", "", "  app/res  "])
        [SourcePath(path='app/src', recursive=True), SourcePath(path='app/res', recursive=False)]
    """
    rules = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line == RECURSIVE_SUFFIX[1:]:
            rules.append(SourcePath("", recursive=True))
        elif line.endswith(RECURSIVE_SUFFIX):
            rules.append(SourcePath(line[: -len(RECURSIVE_SUFFIX)], recursive=True))
        else:
            rules.append(SourcePath(line))
    return rules


def parse_json_rules(text: str, source: Optional[str] = None) -> List[SourcePath]:
    """Parse rules in the JSON format.

    Args:
        text: The JSON document.
        source: Name of the file the document came from, used in error messages.

    Returns:
        The rules, in document order.

    Raises:
        RuleFileError: If the document is not valid JSON, is not a list, or contains
            an item that is not a valid rule.

    Example:
        >>> parse_json_rules('["app/res", {"path": "app/src", "recursive": true}]')
        [SourcePath(path='app/res', recursive=False), SourcePath(path='app/src', recursive=True)]
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RuleFileError(f"invalid JSON: {e.msg}", source=source, location=e.lineno) from e

    if not isinstance(data, list):
        raise RuleFileError("expected a list of rules", source=source)

    rules = []
    for number, item in enumerate(data, start=1):
        if isinstance(item, str):
            rules.append(SourcePath(item))
            continue
        if not isinstance(item, dict):
            raise RuleFileError("rule must be a string or an object", source=source, location=number)
        path = item.get("path")
        if not isinstance(path, str):
            raise RuleFileError("'path' must be a string", source=source, location=number)
        recursive = item.get("recursive", False)
        if not isinstance(recursive, bool):
            raise RuleFileError("'recursive' must be a boolean", source=source, location=number)
        rules.append(SourcePath(path, recursive))
    return rules


def load_rules(rules_file: PathType, rule_format: Optional[RuleFormat] = None) -> List[SourcePath]:
    """Load rules from a file.

    Args:
        rules_file: Path to the rule file. Can be any path-like object.
        rule_format: Format of the file. Defaults to the format implied by the file
            name (see RuleFormat.for_path).

    Returns:
        The rules, in file order.

    Raises:
        FileNotFoundError: If the rule file does not exist.
        RuleFileError: If the file cannot be parsed.
    """
    path = Path(rules_file)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")

    if rule_format is None:
        rule_format = RuleFormat.for_path(path)

    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    if rule_format == RuleFormat.JSON:
        return parse_json_rules(content, source=str(path))
    return parse_text_rules(content.splitlines())


def _text_line(rule: SourcePath) -> Optional[str]:
    """Return the text-format line for ``rule``, or None if the format cannot hold it."""
    path = rule.path
    if path != path.strip() or path.startswith("#") or len(path.splitlines()) > 1:
        return None
    if rule.recursive:
        return f"{path}{RECURSIVE_SUFFIX}" if path else RECURSIVE_SUFFIX[1:]
    if path == RECURSIVE_SUFFIX[1:] or path.endswith(RECURSIVE_SUFFIX):
        return None
    # An empty line would be skipped on reading; "/" has no components either
    return path or "/"


def dump_rules(rules: Iterable[SourcePath], rule_format: RuleFormat = RuleFormat.TEXT) -> str:
    """Serialize rules in the given format.

    load_rules() reads the result back as equal rules. The one exception is a
    non-recursive rule with an empty path, which the text format writes as ``/``
    (a path with the same, empty, list of components).

    Args:
        rules: The rules to serialize.
        rule_format: Output format. Defaults to TEXT.

    Returns:
        The serialized rules, ending with a newline.

    Raises:
        RuleFileError: If a rule cannot be written in the text format: its path has
            leading or trailing whitespace, starts with ``#``, spans several lines,
            or is non-recursive and ends in ``...``. The location is the rule's
            1-based position.

    Example:
        >>> print(dump_rules([SourcePath("app/src", True), SourcePath("app/res")]), end="")
        app/src/...
        app/res
    """
    if rule_format == RuleFormat.JSON:
        data = [{"path": rule.path, "recursive": bool(rule.recursive)} for rule in rules]
        return json.dumps(data, indent=2) + "\n"

    lines = []
    for number, rule in enumerate(rules, start=1):
        line = _text_line(rule)
        if line is None:
            raise RuleFileError(f"path {rule.path!r} cannot be written in the text format", location=number)
        lines.append(line)
    return "".join(f"{line}\n" for line in lines)


def save_rules(rules_file: PathType, rules: Iterable[SourcePath], rule_format: Optional[RuleFormat] = None) -> None:
    """Write rules to a file, replacing its contents.

    Args:
        rules_file: Path of the file to write. Can be any path-like object.
        rules: The rules to write.
        rule_format: Format of the file. Defaults to the format implied by the file name.

    Raises:
        RuleFileError: If a rule cannot be written in the format; the file is left untouched.
    """
    path = Path(rules_file)
    if rule_format is None:
        rule_format = RuleFormat.for_path(path)
    try:
        content = dump_rules(rules, rule_format)
    except RuleFileError as e:
        raise RuleFileError(e.reason, source=str(path), location=e.location) from e
    path.write_text(content, encoding="utf-8")
