"""Unit tests for the SourceFilterTree class."""

import pytest

from srcfilter.path_tree.source_filter_tree import SourceFilterTree
from srcfilter.source_path import SourcePath


@pytest.fixture
def project_tree(project_rules):
    return SourceFilterTree(project_rules)


def test_source_filter_tree_initialization(project_rules):
    tree = SourceFilterTree(project_rules)
    assert tree.rules == project_rules
    assert tree.rules is not project_rules
    assert tree.on_change is None
    assert tree._forest is None


def test_get_forest_builds_lazily(scenario_rules):
    tree = SourceFilterTree(scenario_rules)
    forest = tree.get_forest()
    assert [node.name for node in forest] == ["a"]
    assert tree.get_forest() is forest


def test_refresh_rebuilds_from_rules(scenario_rules):
    tree = SourceFilterTree(scenario_rules)
    old_forest = tree.get_forest()
    tree.rules.append(SourcePath("e/f"))
    tree.refresh()
    forest = tree.get_forest()
    assert forest is not old_forest
    assert [node.name for node in forest] == ["a", "e"]


def test_refresh_reflects_rule_state_after_toggle(scenario_rules):
    tree = SourceFilterTree(scenario_rules)
    tree.set_recursive("a/b", True)
    tree.refresh()
    b = tree.find_node("a/b")
    assert b.is_recursive
    assert scenario_rules[0].recursive


def test_find_node(project_tree):
    node = project_tree.find_node("lib:util/strings")
    assert node is not None
    assert node.source_path == "lib/util/strings"
    assert project_tree.find_node("//app") is project_tree.get_forest()[0]
    assert project_tree.find_node("app/missing") is None
    assert project_tree.find_node("") is project_tree.root


def test_set_recursive_by_path_notifies_change(scenario_rules):
    changes = []
    tree = SourceFilterTree(scenario_rules, on_change=changes.append)

    assert tree.set_recursive("a/b", True) is True
    b = tree.find_node("a/b")
    assert b.is_recursive
    assert changes == [scenario_rules[0]]

    # No descendants, so nothing else changes
    assert not tree.find_node("a").has_recursive_ancestor

    assert tree.set_recursive("a/b", False) is True
    assert not b.is_recursive
    assert not b.has_recursive_ancestor
    assert len(changes) == 2


def test_set_recursive_by_node(scenario_rules):
    changes = []
    tree = SourceFilterTree(scenario_rules, on_change=changes.append)
    c = tree.find_node("a/c")
    d = tree.find_node("a/c/d")

    assert tree.set_recursive(c, False) is True
    assert not d.has_recursive_ancestor
    assert changes == [scenario_rules[1]]


def test_set_recursive_unchanged_does_not_notify(scenario_rules):
    changes = []
    tree = SourceFilterTree(scenario_rules, on_change=changes.append)
    assert tree.set_recursive("a/c", True) is False
    assert changes == []


def test_set_recursive_on_intermediate_node_is_noop(scenario_rules):
    changes = []
    tree = SourceFilterTree(scenario_rules, on_change=changes.append)
    assert tree.set_recursive("a", True) is False
    assert not tree.find_node("a").is_recursive
    assert not tree.find_node("a/b").has_recursive_ancestor
    assert changes == []


def test_set_recursive_unknown_path_raises(scenario_rules):
    tree = SourceFilterTree(scenario_rules)
    with pytest.raises(KeyError):
        tree.set_recursive("a/zzz", True)


def test_set_recursive_rejects_node_from_before_refresh():
    changes = []
    rules = [SourcePath("a"), SourcePath("a/b")]
    tree = SourceFilterTree(rules, on_change=changes.append)
    old_a = tree.find_node("a")
    tree.refresh()

    with pytest.raises(KeyError):
        tree.set_recursive(old_a, True)
    assert not rules[0].recursive
    assert not tree.find_node("a").is_recursive
    assert not tree.find_node("a/b").has_recursive_ancestor
    assert changes == []

    assert tree.set_recursive(tree.find_node("a"), True) is True
    assert tree.find_node("a/b").has_recursive_ancestor


def test_set_recursive_rejects_node_from_another_tree(scenario_rules):
    other = SourceFilterTree([SourcePath("a/b")])
    tree = SourceFilterTree(scenario_rules)
    with pytest.raises(KeyError):
        tree.set_recursive(other.find_node("a/b"), True)


def test_toggles_keep_invariant(project_tree):
    """Test that a sequence of toggles leaves the same flags as a fresh build."""
    project_tree.set_recursive("app/res", True)
    project_tree.set_recursive("lib/util", True)
    project_tree.set_recursive("lib/net/http", False)
    project_tree.set_recursive("lib/util", False)
    toggled = [(n.source_path, n.has_recursive_ancestor) for n in project_tree.root.descendants]

    fresh = SourceFilterTree(project_tree.rules)
    rebuilt = [(n.source_path, n.has_recursive_ancestor) for n in fresh.root.descendants]
    assert toggled == rebuilt


@pytest.mark.parametrize(
    "path, expected",
    [
        ("app/src", True),  # exact recursive rule
        ("app/src/deep/nested/main.c", True),  # below a recursive rule
        ("app/res/icon.png", True),  # directly inside a non-recursive rule
        ("app/res/drawable/icon.png", False),  # too deep for a non-recursive rule
        ("app/res", True),  # exact non-recursive rule
        ("app/other.c", False),  # intermediate node has no rule
        ("lib/util/strings/format.c", True),  # directly inside lib/util/strings
        ("lib/util/strings", True),
        ("lib/net/http/tls/cert.c", True),
        ("lib/net/readme.md", False),
        ("docs/index.md", True),
        ("unknown/file.c", False),
        ("", False),
    ],
)
def test_includes(project_tree, path, expected):
    assert project_tree.includes(path) is expected


def test_includes_with_root_rule():
    tree = SourceFilterTree([SourcePath(""), SourcePath("a/b")])
    assert tree.includes("top.c")
    assert tree.includes("")
    assert not tree.includes("a/file.c")


def test_includes_direct_child_that_is_also_a_node():
    tree = SourceFilterTree([SourcePath("a"), SourcePath("a/b/c")])
    assert tree.includes("a/b")


def test_iterate_rules_in_tree_order(project_rules):
    tree = SourceFilterTree(project_rules)
    assert [rule.path for rule in tree.iterate_rules()] == [
        "//app/src",
        "//app/res",
        "lib:util",
        "lib:util/strings",
        "lib/net/http",
        "lib/net/http/tls",
        "docs",
    ]


def test_counts(project_tree):
    # app, src, res, lib, util, strings, net, http, tls, docs
    assert project_tree.node_count == 10
    assert project_tree.rule_count == 7
    assert project_tree.recursive_rule_count == 2


def test_counts_empty_tree():
    tree = SourceFilterTree([])
    assert tree.get_forest() == []
    assert tree.node_count == 0
    assert tree.rule_count == 0
    assert tree.recursive_rule_count == 0
    assert tree.get_tree_representation() == ""


def test_overwritten_duplicates():
    first = SourcePath("x/y")
    tree = SourceFilterTree([first, SourcePath("x/y", recursive=True)])
    assert tree.overwritten == [first]
    assert tree.rule_count == 1
    assert tree.find_node("x/y").is_recursive


def test_tree_representation(project_tree):
    expected = "\n".join(
        [
            "app/",
            "├── src/...",
            "└── res",
            "lib/",
            "├── util",
            "│   └── strings",
            "└── net/",
            "    └── http/...",
            "        └── tls (inherited)",
            "docs",
        ]
    )
    assert project_tree.get_tree_representation() == expected


def test_stream_tree_representation_matches_complete_representation(project_tree):
    assert "\n".join(project_tree.stream_tree_representation()) == project_tree.get_tree_representation()


def test_tree_representation_marks_recursive_and_inherited():
    tree = SourceFilterTree([SourcePath("a", recursive=True), SourcePath("a/b", recursive=True)])
    assert tree.get_tree_representation() == "a/...\n└── b/... (inherited)"
