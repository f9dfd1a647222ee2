from typing import Optional


class RuleFileError(ValueError):
    """
    Exception raised when a rule file cannot be parsed or written.

    Raised for malformed JSON, for JSON documents that are not a list of rules, for
    rule items whose fields have the wrong type, and for rules whose path the text
    format cannot represent. Missing files are reported with the
    built-in FileNotFoundError instead.

    Attributes:
        source (Optional[str]): Path of the offending file, if the rules came from a file.
        location (Optional[int]): 1-based line number (text) or item number (JSON).
        reason (str): What was wrong with the input.

    Example:
        >>> error = RuleFileError("expected a list of rules", source="rules.json")
        >>> str(error)
        'rules.json: expected a list of rules'
        >>> str(RuleFileError("'path' must be a string", source="rules.json", location=3))
        "rules.json:3: 'path' must be a string"
    """

    def __init__(self, reason: str, source: Optional[str] = None, location: Optional[int] = None) -> None:
        self.reason = reason
        self.source = source
        self.location = location

        prefix = ""
        if source is not None:
            prefix = f"{source}:{location}: " if location is not None else f"{source}: "
        elif location is not None:
            prefix = f"{location}: "
        super().__init__(f"{prefix}{reason}")
