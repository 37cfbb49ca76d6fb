from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules deciding which directory entries are left out of a tree.

    Every rule receives the path of an entry relative to the rendered root, using
    forward slashes, with a trailing slash when the entry is a directory (so that
    gitignore-style patterns such as ``build/`` only match directories). Rules that
    care about the base name only should strip the trailing slash first.

    Loading rules from files and adding single rules are optional capabilities.

    Example:
        >>> from dirtree.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(["node_modules"])
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.exclude("web/src/")
        False
        >>> rules.load_rules("ignore.txt")
        Traceback (most recent call last):
        ...
        NotImplementedError: NameExclusionRules doesn't support loading rules from files.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine whether an entry should be excluded.

        Args:
            path (str): Root-relative POSIX path of the entry, ending in ``/`` for
                directories.

        Returns:
            bool: True if the entry should be excluded, False otherwise.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether this object would ever exclude anything.

        Returns:
            bool: True by default. Subclasses that can be empty override this.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load rules from one or more files.

        Args:
            rules_files: Path or sequence of paths of files containing rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule.

        Args:
            rule (str): The rule to add. Its format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")


def base_name(path: str) -> str:
    """Return the last component of a root-relative POSIX path.

    Example:
        >>> base_name("src/utils/")
        'utils'
        >>> base_name("README.md")
        'README.md'
    """
    return path.rstrip("/").rsplit("/", 1)[-1]
