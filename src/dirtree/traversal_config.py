"""Immutable traversal parameters shared by every level of a tree render."""

from typing import Any, FrozenSet, Iterable, Optional

from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.types import OrderingPolicy

UNLIMITED_DEPTH = -1


class TraversalConfig:
    """Read-only configuration for a directory tree render.

    The same instance is handed to every recursive step, so it cannot be modified
    after construction. Use ``replace()`` to derive a variant.

    Attributes:
        max_depth (int): Maximum number of levels to render, -1 for unlimited.
            Values of 0 and 1 both render only the direct children of the root.
        excluded_names (FrozenSet[str]): Base names skipped at every depth
            (exact, case-sensitive match).
        show_size (bool): Whether to append the size of each entry.
        ordering (OrderingPolicy): Order of the children within a directory.
        ignore_rules (Optional[BaseExclusionRules]): Extra rules matched against the
            root-relative path of each entry.

    Example:
        >>> config = TraversalConfig(max_depth=2, excluded_names=["node_modules"])
        >>> config.excluded_names
        frozenset({'node_modules'})
        >>> config.replace(show_size=True).show_size
        True
        >>> config.show_size
        False
    """

    __slots__ = ("_max_depth", "_excluded_names", "_show_size", "_ordering", "_ignore_rules")

    def __init__(
        self,
        max_depth: int = UNLIMITED_DEPTH,
        excluded_names: Iterable[str] = (),
        show_size: bool = False,
        ordering: OrderingPolicy = OrderingPolicy.PLATFORM_DEFAULT,
        ignore_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        """Initialize a TraversalConfig.

        Args:
            max_depth: Maximum depth to render. Defaults to -1 (unlimited).
            excluded_names: Base names to skip. Defaults to none.
            show_size: Append entry sizes. Defaults to False.
            ordering: Child ordering policy, as an enum or its string value.
                Defaults to the platform listing order.
            ignore_rules: Optional pattern-based exclusion rules. Defaults to None.

        Raises:
            TypeError: If excluded_names is a single string instead of a collection.
            ValueError: If ordering is not a known policy.
        """
        if isinstance(excluded_names, str):
            raise TypeError("excluded_names must be a collection of names, not a string")
        object.__setattr__(self, "_max_depth", int(max_depth))
        object.__setattr__(self, "_excluded_names", frozenset(excluded_names))
        object.__setattr__(self, "_show_size", bool(show_size))
        object.__setattr__(self, "_ordering", OrderingPolicy(ordering))
        object.__setattr__(self, "_ignore_rules", ignore_rules)

    @property
    def max_depth(self) -> int:
        return self._max_depth  # type: ignore[no-any-return]

    @property
    def excluded_names(self) -> FrozenSet[str]:
        return self._excluded_names  # type: ignore[no-any-return]

    @property
    def show_size(self) -> bool:
        return self._show_size  # type: ignore[no-any-return]

    @property
    def ordering(self) -> OrderingPolicy:
        return self._ordering  # type: ignore[no-any-return]

    @property
    def ignore_rules(self) -> Optional[BaseExclusionRules]:
        return self._ignore_rules  # type: ignore[no-any-return]

    @property
    def unlimited(self) -> bool:
        """True if the depth is unlimited."""
        return self.max_depth == UNLIMITED_DEPTH

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def replace(self, **changes: Any) -> "TraversalConfig":
        """Return a copy of this config with the given fields changed.

        Args:
            **changes: New values keyed by constructor argument name.

        Returns:
            A new TraversalConfig.

        Raises:
            TypeError: If an unknown field name is given.
        """
        fields = {
            "max_depth": self.max_depth,
            "excluded_names": self.excluded_names,
            "show_size": self.show_size,
            "ordering": self.ordering,
            "ignore_rules": self.ignore_rules,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown TraversalConfig fields: {', '.join(sorted(unknown))}")
        fields.update(changes)
        return TraversalConfig(**fields)

    def _key(self) -> tuple:
        return (self.max_depth, self.excluded_names, self.show_size, self.ordering, id(self.ignore_rules))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TraversalConfig):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"TraversalConfig(max_depth={self.max_depth}, excluded_names={sorted(self.excluded_names)}, "
            f"show_size={self.show_size}, ordering={self.ordering.value!r})"
        )
