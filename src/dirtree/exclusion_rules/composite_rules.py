"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclude an entry when any of the constituent rules excludes it.

    The tree builder uses this to apply the always-on hidden-entry rule, the
    configured excluded names and any gitignore-style patterns as one filter.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent rules, evaluated in order.

    Example:
        >>> from dirtree.exclusion_rules.name_rules import HiddenEntryRules, NameExclusionRules
        >>> composite = CompositeExclusionRules([HiddenEntryRules(), NameExclusionRules(["dist"])])
        >>> composite.exclude(".cache/")
        True
        >>> composite.exclude("dist/")
        True
        >>> composite.exclude("src/")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Add another rule object to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)
