"""Tests for TraversalConfig."""

import pytest

from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.traversal_config import UNLIMITED_DEPTH, TraversalConfig
from dirtree.types import OrderingPolicy


def test_defaults():
    config = TraversalConfig()
    assert config.max_depth == UNLIMITED_DEPTH
    assert config.unlimited
    assert config.excluded_names == frozenset()
    assert config.show_size is False
    assert config.ordering is OrderingPolicy.PLATFORM_DEFAULT
    assert config.ignore_rules is None


def test_excluded_names_become_frozenset():
    config = TraversalConfig(excluded_names=["dist", "dist", "node_modules"])
    assert config.excluded_names == frozenset({"dist", "node_modules"})


def test_single_string_is_rejected_as_excluded_names():
    with pytest.raises(TypeError):
        TraversalConfig(excluded_names="node_modules")


def test_ordering_accepts_string_values():
    assert TraversalConfig(ordering="sorted").ordering is OrderingPolicy.SORTED


def test_unknown_ordering_is_rejected():
    with pytest.raises(ValueError):
        TraversalConfig(ordering="random")


def test_attributes_cannot_be_reassigned():
    config = TraversalConfig(max_depth=2)
    with pytest.raises(AttributeError):
        config.max_depth = 3
    with pytest.raises(AttributeError):
        config.extra = True
    assert config.max_depth == 2


def test_replace_returns_modified_copy():
    rules = GitIgnoreExclusionRules()
    config = TraversalConfig(max_depth=2, excluded_names=["dist"], ignore_rules=rules)

    changed = config.replace(show_size=True, max_depth=-1)

    assert changed.show_size is True
    assert changed.unlimited
    assert changed.excluded_names == frozenset({"dist"})
    assert changed.ignore_rules is rules
    assert config.show_size is False
    assert config.max_depth == 2


def test_replace_rejects_unknown_fields():
    with pytest.raises(TypeError, match="depth"):
        TraversalConfig().replace(depth=3)


def test_equality_and_hashing():
    first = TraversalConfig(max_depth=3, excluded_names=["a", "b"], show_size=True)
    second = TraversalConfig(max_depth=3, excluded_names=("b", "a"), show_size=True)
    assert first == second
    assert hash(first) == hash(second)
    assert first != first.replace(show_size=False)
    assert first != "TraversalConfig"


def test_repr_lists_fields():
    text = repr(TraversalConfig(max_depth=1, excluded_names=["b", "a"]))
    assert "max_depth=1" in text
    assert "['a', 'b']" in text
