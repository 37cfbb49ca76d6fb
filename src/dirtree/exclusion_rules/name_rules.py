"""Exclusion rules matching the base name of an entry."""

from typing import FrozenSet, Iterable, Set

from .base_rules import BaseExclusionRules, base_name


class HiddenEntryRules(BaseExclusionRules):
    """Exclude every entry whose base name starts with a dot.

    Example:
        >>> rules = HiddenEntryRules()
        >>> rules.exclude(".git/")
        True
        >>> rules.exclude("src/.env")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    def exclude(self, path: str) -> bool:
        return base_name(path).startswith(".")


class NameExclusionRules(BaseExclusionRules):
    """Exclude entries whose base name is exactly one of a set of names.

    Matching is case-sensitive and ignores the rest of the path, so a name is
    excluded at every depth of the tree.

    Attributes:
        names (FrozenSet[str]): Names currently excluded.

    Example:
        >>> rules = NameExclusionRules(["node_modules", "dist"])
        >>> rules.exclude("packages/app/node_modules/")
        True
        >>> rules.exclude("Node_Modules/")
        False
        >>> rules.add_rule("build")
        >>> rules.exclude("build/")
        True
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: Set[str] = set(names)

    @property
    def names(self) -> FrozenSet[str]:
        return frozenset(self._names)

    def exclude(self, path: str) -> bool:
        return base_name(path) in self._names

    def add_rule(self, rule: str) -> None:
        """Add one more excluded name.

        Args:
            rule: Exact base name to exclude.
        """
        self._names.add(rule)

    def has_rules(self) -> bool:
        return bool(self._names)
