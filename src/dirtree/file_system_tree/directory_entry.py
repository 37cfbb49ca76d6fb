"""Node representation for a listed directory entry."""

from typing import Any, Optional

from anytree import Node

from dirtree.types import EntryKind


class DirectoryEntry(Node):  # type: ignore
    """Node for one file, directory or other entry of a rendered tree.

    Extends anytree.Node with the entry kind, its filesystem path and, when sizes
    were requested, its size in bytes. Children are kept in the order they will be
    rendered. (``path`` and ``size`` are taken by anytree for the node path and the
    subtree node count, hence ``fs_path`` and ``size_bytes``.)

    Attributes:
        name (str): Base name of the entry.
        kind (EntryKind): Directory, file or other (symlinks are never followed).
        fs_path (Optional[str]): Absolute path of the entry.
        size_bytes (Optional[int]): Size from ``os.stat``, or None if not requested.

    Example:
        >>> root = DirectoryEntry("project", kind=EntryKind.DIRECTORY)
        >>> readme = DirectoryEntry("README.md", parent=root, size_bytes=2048)
        >>> readme.is_dir
        False
        >>> [child.name for child in root.children]
        ['README.md']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["DirectoryEntry"] = None,
        kind: EntryKind = EntryKind.FILE,
        fs_path: Optional[str] = None,
        size_bytes: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.kind = kind
        self.fs_path = fs_path
        self.size_bytes = size_bytes

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
