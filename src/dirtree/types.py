from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Kind of a listed directory entry.

    Symbolic links are never followed when deciding the kind, so a link to a
    directory is reported as OTHER and is not descended into.

    Attributes:
        DIRECTORY: Directory
        FILE: Regular file
        OTHER: Symlink, socket, device or anything else
    """

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


class OrderingPolicy(str, Enum):
    """Order in which the children of a directory are rendered.

    Values:
        PLATFORM_DEFAULT: Whatever order the directory read yields (default)
        SORTED: Code-point order of the base names
    """

    PLATFORM_DEFAULT = "platform-default"
    SORTED = "sorted"
