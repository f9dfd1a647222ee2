"""Test configuration and fixtures for srcfilter."""

import pytest

from srcfilter.source_path import SourcePath


@pytest.fixture
def scenario_rules():
    """Rules with a recursive rule in the middle of a branch."""
    return [SourcePath("a/b"), SourcePath("a/c", recursive=True), SourcePath("a/c/d")]


@pytest.fixture
def project_rules():
    """A realistic rule list mixing delimiters, depths and recursion."""
    return [
        SourcePath("//app/src", recursive=True),
        SourcePath("//app/res"),
        SourcePath("lib:util"),
        SourcePath("lib:util/strings"),
        SourcePath("lib/net/http", recursive=True),
        SourcePath("lib/net/http/tls"),
        SourcePath("docs"),
    ]
