"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from dirtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules written in .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches them:
    globs, ``**``, negation with ``!``, comments and directory-only patterns ending
    in ``/`` are all supported. Patterns from files and from ``add_rule()`` are
    combined in the order they were added, so a later negation can re-include an
    earlier match.

    Paths passed to ``exclude()`` are relative to the rendered root and end in ``/``
    for directories.

    Attributes:
        spec (GitIgnoreSpec): Compiled matcher for all patterns added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("build/")
        >>> rules.exclude("logs/server.log")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")
        False
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("keep.log")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Args:
            rules_files: Path or sequence of paths of pattern files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")
            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern, e.g. ``"*.pyc"`` or ``"!keep.txt"``."""
        self._lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def has_rules(self) -> bool:
        return any(line.strip() and not line.lstrip().startswith("#") for line in self._lines)
