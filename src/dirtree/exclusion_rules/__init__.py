"""Exclusion rules for filtering directory entries."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .name_rules import HiddenEntryRules, NameExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "HiddenEntryRules",
    "NameExclusionRules",
]
