"""Default traversal preferences and their merging with invocation arguments.

Defaults come from the environment so they persist across invocations:

    DIRTREE_DEFAULT_DEPTH          default depth (falls back to 2)
    DIRTREE_DEFAULT_EXCLUDED_DIRS  comma-separated names (falls back to ".git,node_modules")

Arguments given for a single invocation override the default depth and add to the
default excluded names.
"""

import os
import re
from typing import Iterable, List, Mapping, Optional

from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.traversal_config import TraversalConfig
from dirtree.types import OrderingPolicy

DEFAULT_DEPTH = 2
DEFAULT_EXCLUDED_DIRS = ".git,node_modules"

DEPTH_ENV_VAR = "DIRTREE_DEFAULT_DEPTH"
EXCLUDED_DIRS_ENV_VAR = "DIRTREE_DEFAULT_EXCLUDED_DIRS"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_depth(text: Optional[str], default: int = DEFAULT_DEPTH) -> int:
    """Parse a depth preference.

    The leading integer of the text is used, so ``"3 levels"`` gives 3. Missing,
    unparsable and zero values all fall back to the default.

    Example:
        >>> parse_depth("4")
        4
        >>> parse_depth("-1")
        -1
        >>> parse_depth("0")
        2
        >>> parse_depth("deep", default=3)
        3
    """
    if text is None:
        return default
    match = _LEADING_INT.match(text)
    if match is None:
        return default
    return int(match.group(1)) or default


def split_names(text: Optional[str]) -> List[str]:
    """Split a comma-separated list of names, trimming whitespace and dropping blanks.

    Example:
        >>> split_names(" .git, node_modules ,,dist")
        ['.git', 'node_modules', 'dist']
    """
    if not text:
        return []
    return [name.strip() for name in text.split(",") if name.strip()]


def parse_show_size(text: Optional[str]) -> bool:
    """Interpret a show-size argument; only a case-insensitive "false" turns sizes off.

    Example:
        >>> parse_show_size(None)
        True
        >>> parse_show_size("FALSE")
        False
        >>> parse_show_size("no")
        True
    """
    if text is None:
        return True
    return text.strip().lower() != "false"


class Preferences:
    """Persistent defaults for tree rendering.

    Attributes:
        default_depth (int): Depth used when an invocation gives none.
        default_excluded_dirs (List[str]): Names excluded on every invocation.
    """

    def __init__(self, default_depth: int = DEFAULT_DEPTH, default_excluded_dirs: Optional[Iterable[str]] = None):
        self.default_depth = default_depth
        if default_excluded_dirs is None:
            default_excluded_dirs = split_names(DEFAULT_EXCLUDED_DIRS)
        self.default_excluded_dirs = list(default_excluded_dirs)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Preferences":
        """Read preferences from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Preferences with the built-in defaults for anything not set.
        """
        if environ is None:
            environ = os.environ
        return cls(
            default_depth=parse_depth(environ.get(DEPTH_ENV_VAR)),
            default_excluded_dirs=split_names(environ.get(EXCLUDED_DIRS_ENV_VAR, DEFAULT_EXCLUDED_DIRS)),
        )

    def merge(
        self,
        depth: Optional[int] = None,
        exclude: Iterable[str] = (),
        show_size: bool = True,
        ordering: OrderingPolicy = OrderingPolicy.PLATFORM_DEFAULT,
        ignore_rules: Optional[BaseExclusionRules] = None,
        use_default_excludes: bool = True,
    ) -> TraversalConfig:
        """Combine these defaults with the arguments of one invocation.

        Args:
            depth: Depth for this invocation, or None for the default depth.
            exclude: Names to exclude in addition to the defaults.
            show_size: Whether to show sizes. Defaults to True.
            ordering: Child ordering policy.
            ignore_rules: Optional pattern-based exclusion rules.
            use_default_excludes: If False, only the names in ``exclude`` are used.

        Returns:
            The merged TraversalConfig.

        Example:
            >>> config = Preferences().merge(depth=3, exclude=["dist"])
            >>> config.max_depth, sorted(config.excluded_names)
            (3, ['.git', 'dist', 'node_modules'])
        """
        excluded = set(exclude)
        if use_default_excludes:
            excluded.update(self.default_excluded_dirs)
        return TraversalConfig(
            max_depth=self.default_depth if depth is None else depth,
            excluded_names=excluded,
            show_size=show_size,
            ordering=ordering,
            ignore_rules=ignore_rules,
        )
