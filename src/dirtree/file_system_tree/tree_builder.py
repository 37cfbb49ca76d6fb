"""Recursive construction and rendering of directory trees.

This module provides the TreeBuilder class, which lists a directory recursively
into a tree of DirectoryEntry nodes and renders it in the style of the Unix
``tree`` command:

    project
    ├── src
    │   └── main.go
    └── README.md

All filesystem reads happen while the node tree is built, before the first line
is produced, so a failure anywhere aborts the render without partial output.
"""

import os
import stat
from typing import Iterator, List, NamedTuple, Optional, Tuple

from anytree import PreOrderIter

from dirtree.exceptions import FilesystemError
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.exclusion_rules.composite_rules import CompositeExclusionRules
from dirtree.exclusion_rules.name_rules import HiddenEntryRules, NameExclusionRules
from dirtree.file_system_tree.directory_entry import DirectoryEntry
from dirtree.size_formatter import format_size
from dirtree.traversal_config import TraversalConfig
from dirtree.types import EntryKind, OrderingPolicy, PathType

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


class TreeSummary(NamedTuple):
    """Number of directories and files in a built tree, root excluded."""

    directories: int
    files: int


def _entry_kind(entry: "os.DirEntry[str]") -> EntryKind:
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


class TreeBuilder:
    """Builds and renders depth-limited, filtered directory trees.

    A TreeBuilder holds nothing but its configuration, so every call reads the
    filesystem afresh and the same builder can render any number of directories.

    Filtering:
        - Entries whose base name starts with a dot are always left out.
        - Entries whose base name is in ``config.excluded_names`` are left out at
          every depth; excluded directories are not descended into.
        - ``config.ignore_rules``, if set, are matched against the root-relative
          path of each entry (directories end in ``/``).

    Ordering:
        With ``OrderingPolicy.PLATFORM_DEFAULT`` children keep the order of the
        directory read, which depends on the filesystem. ``OrderingPolicy.SORTED``
        orders them by name.

    Depth:
        The direct children of the root are always listed. A directory at depth
        ``d`` (0 for the root's children) is descended into only if the depth is
        unlimited (-1) or ``d < max_depth - 1``; a ``max_depth`` of 0 therefore
        behaves like 1.

    Sizes:
        With ``config.show_size`` every line, the root included, ends with the
        ``os.stat`` size of the entry. For directories this is the size of the
        directory itself, not the total of its contents.

    Attributes:
        config (TraversalConfig): The traversal parameters.

    Example:
        >>> builder = TreeBuilder(TraversalConfig(max_depth=2, excluded_names=["node_modules"]))
        >>> print(builder.render("project"), end="")  # doctest: +SKIP
        project
        ├── src
        │   └── main.go
        └── README.md
    """

    def __init__(self, config: Optional[TraversalConfig] = None) -> None:
        """Initialize a TreeBuilder.

        Args:
            config: Traversal parameters. Defaults to unlimited depth, no excluded
                names and no sizes.
        """
        self.config = config if config is not None else TraversalConfig()

        rules: List[BaseExclusionRules] = [HiddenEntryRules(), NameExclusionRules(self.config.excluded_names)]
        if self.config.ignore_rules is not None:
            rules.append(self.config.ignore_rules)
        self._exclusion_rules = CompositeExclusionRules(rules)

    def build(self, path: PathType) -> DirectoryEntry:
        """List a directory recursively into a tree of nodes.

        Args:
            path: Directory to list. Relative paths are made absolute.

        Returns:
            The root node, named after the last component of the path.

        Raises:
            NotADirectoryError: If path exists but is not a directory.
            FilesystemError: If path does not exist, or any directory cannot be
                listed or any entry cannot be stat'ed.
        """
        root_path = os.path.abspath(os.fspath(path))
        try:
            root_stat = os.stat(root_path)
        except OSError as e:
            raise FilesystemError(root_path, e) from e
        if not stat.S_ISDIR(root_stat.st_mode):
            raise NotADirectoryError(f"Not a directory: {root_path}")

        root = DirectoryEntry(
            os.path.basename(root_path) or root_path,
            kind=EntryKind.DIRECTORY,
            fs_path=root_path,
            size_bytes=root_stat.st_size if self.config.show_size else None,
        )
        self._add_children(root, "", 0)
        return root

    def _add_children(self, node: DirectoryEntry, relative_dir: str, current_depth: int) -> None:
        """Attach the visible children of a directory node, recursing as depth allows."""
        for entry, kind in self._list_children(node.fs_path, relative_dir):
            child = DirectoryEntry(
                entry.name,
                parent=node,
                kind=kind,
                fs_path=entry.path,
                size_bytes=self._stat_size(entry.path) if self.config.show_size else None,
            )
            if child.is_dir and self._should_descend(current_depth):
                self._add_children(child, f"{relative_dir}{entry.name}/", current_depth + 1)

    def _list_children(self, directory: str, relative_dir: str) -> List[Tuple["os.DirEntry[str]", EntryKind]]:
        """List, filter and order the children of one directory."""
        try:
            listed = [(entry, _entry_kind(entry)) for entry in self._scan_directory(directory)]
        except OSError as e:
            raise FilesystemError(e.filename or directory, e) from e

        visible = [
            (entry, kind)
            for entry, kind in listed
            if not self._exclusion_rules.exclude(
                f"{relative_dir}{entry.name}/" if kind is EntryKind.DIRECTORY else f"{relative_dir}{entry.name}"
            )
        ]
        if self.config.ordering is OrderingPolicy.SORTED:
            visible.sort(key=lambda item: item[0].name)
        return visible

    def _scan_directory(self, directory: str) -> List["os.DirEntry[str]"]:
        """Read the immediate children of a directory in the order the OS returns them."""
        with os.scandir(directory) as it:
            return list(it)

    def _stat_size(self, path: str) -> int:
        try:
            return os.stat(path).st_size
        except OSError as e:
            raise FilesystemError(path, e) from e

    def _should_descend(self, current_depth: int) -> bool:
        return self.config.unlimited or current_depth < self.config.max_depth - 1

    def iter_lines(self, root: DirectoryEntry) -> Iterator[str]:
        """Render an already built tree one newline-terminated line at a time.

        Args:
            root: Root node returned by ``build()``.

        Yields:
            The root line, then one line per descendant in depth-first order.
        """
        yield f"{root.name}{_size_suffix(root)}\n"
        yield from self._iter_children(root, "")

    def _iter_children(self, node: DirectoryEntry, parent_prefix: str) -> Iterator[str]:
        children = node.children
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            entry_prefix = LAST_BRANCH if is_last else BRANCH
            yield f"{parent_prefix}{entry_prefix}{child.name}{_size_suffix(child)}\n"
            if child.children:
                yield from self._iter_children(child, parent_prefix + (SPACE if is_last else PIPE))

    def stream_lines(self, path: PathType) -> Iterator[str]:
        """Build the tree for a directory and yield its lines.

        The whole tree is built when iteration starts, so errors are raised before
        the first line is yielded.

        Args:
            path: Directory to render.

        Yields:
            Newline-terminated lines of the rendering.

        Raises:
            NotADirectoryError: If path exists but is not a directory.
            FilesystemError: If any listing or stat call fails.
        """
        root = self.build(path)
        yield from self.iter_lines(root)

    def render(self, path: PathType) -> str:
        """Render a directory as a single string.

        Args:
            path: Directory to render.

        Returns:
            The rendering, every line (the last one included) ending in a newline.

        Raises:
            NotADirectoryError: If path exists but is not a directory.
            FilesystemError: If any listing or stat call fails.
        """
        return "".join(self.stream_lines(path))

    @staticmethod
    def summarize(root: DirectoryEntry) -> TreeSummary:
        """Count the directories and files of a built tree, not counting the root.

        Entries that are neither directories nor regular files count as files.
        """
        directories = files = 0
        for node in PreOrderIter(root):
            if node is root:
                continue
            if node.is_dir:
                directories += 1
            else:
                files += 1
        return TreeSummary(directories, files)


def _size_suffix(node: DirectoryEntry) -> str:
    if node.size_bytes is None:
        return ""
    return f" ({format_size(node.size_bytes)})"


def render_tree(path: PathType, config: Optional[TraversalConfig] = None) -> str:
    """Render a directory tree with a one-off TreeBuilder.

    Args:
        path: Directory to render.
        config: Traversal parameters. Defaults to ``TraversalConfig()``.

    Returns:
        The rendered tree.

    Raises:
        NotADirectoryError: If path exists but is not a directory.
        FilesystemError: If any listing or stat call fails.
    """
    return TreeBuilder(config).render(path)
