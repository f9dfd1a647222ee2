"""Tests for custom exceptions."""

from srcfilter.exceptions import RuleFileError


class TestRuleFileError:
    """Test RuleFileError exception."""

    def test_rule_file_error_with_source_and_location(self):
        error = RuleFileError("'path' must be a string", source="rules.json", location=4)
        assert error.reason == "'path' must be a string"
        assert error.source == "rules.json"
        assert error.location == 4
        assert str(error) == "rules.json:4: 'path' must be a string"

    def test_rule_file_error_with_source_only(self):
        error = RuleFileError("expected a list of rules", source="rules.json")
        assert error.location is None
        assert str(error) == "rules.json: expected a list of rules"

    def test_rule_file_error_with_location_only(self):
        assert str(RuleFileError("bad item", location=2)) == "2: bad item"

    def test_rule_file_error_without_context(self):
        error = RuleFileError("bad input")
        assert str(error) == "bad input"
        assert isinstance(error, ValueError)
