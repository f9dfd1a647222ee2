"""Unit tests for the SourcePath class."""

import pytest

from srcfilter.source_path import SourcePath


def test_source_path_initialization():
    rule = SourcePath("app/src")
    assert rule.path == "app/src"
    assert rule.recursive is False

    recursive = SourcePath("app/src", recursive=True)
    assert recursive.recursive is True


def test_source_path_equality():
    assert SourcePath("a", True) == SourcePath("a", True)
    assert SourcePath("a", True) != SourcePath("a", False)
    assert SourcePath("a") != SourcePath("b")
    assert SourcePath("a") != "a"


def test_source_path_is_mutable_and_unhashable():
    rule = SourcePath("a")
    rule.recursive = True
    assert rule == SourcePath("a", True)
    with pytest.raises(TypeError):
        hash(rule)


def test_source_path_repr():
    assert repr(SourcePath("//lib:util", True)) == "SourcePath(path='//lib:util', recursive=True)"
