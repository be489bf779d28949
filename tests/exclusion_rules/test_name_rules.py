"""Unit tests for NameExclusionRules."""

import pytest

from treesnap.exclusion_rules import BaseExclusionRules, DEFAULT_IGNORE_NAMES, NameExclusionRules


def test_default_names():
    rules = NameExclusionRules()
    assert rules.names == frozenset({"node_modules", ".git", "dist", "build"})
    assert rules.names == frozenset(DEFAULT_IGNORE_NAMES)


def test_empty_rules_exclude_nothing():
    rules = NameExclusionRules([])
    assert not rules.exclude("node_modules")
    assert rules.filter_names(["node_modules", ".git"]) == ["node_modules", ".git"]


@pytest.mark.parametrize(
    "name,expected",
    [
        ("build", True),
        ("Build", False),  # no case folding
        ("build.log", False),  # no prefix matching
        ("src", False),
    ],
)
def test_exact_match(name, expected):
    rules = NameExclusionRules(["build"])
    assert rules.exclude(name) is expected


def test_glob_characters_are_literal():
    rules = NameExclusionRules(["*.log"])
    assert rules.exclude("*.log")
    assert not rules.exclude("server.log")


def test_filter_names_preserves_order():
    rules = NameExclusionRules(["b"])
    assert rules.filter_names(["z", "b", "a", "y"]) == ["z", "a", "y"]


def test_empty_string_rule_is_kept():
    rules = NameExclusionRules(["", "dist"])
    assert "" in rules.names
    assert rules.filter_names(["dist", "src"]) == ["src"]


def test_repr():
    assert repr(NameExclusionRules(["b", "a"])) == "NameExclusionRules(['a', 'b'])"


def test_base_rules_is_abstract():
    with pytest.raises(TypeError):
        BaseExclusionRules()


def test_custom_rules_get_filtering():
    class SuffixRules(BaseExclusionRules):
        def exclude(self, name: str) -> bool:
            return name.endswith(".tmp")

    assert SuffixRules().filter_names(["a.tmp", "b.py", "c.tmp"]) == ["b.py"]
