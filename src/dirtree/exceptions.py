from typing import Optional

from dirtree.types import PathType


class FilesystemError(Exception):
    """
    Exception raised when a directory cannot be listed or an entry cannot be stat'ed.

    Rendering is all-or-nothing: this error aborts the whole render, whatever depth
    the failure happened at. The original ``OSError`` is kept as ``reason`` and is
    also chained as ``__cause__`` by the code raising this error.

    Attributes:
        path (str): Path that could not be accessed.
        reason (OSError): The underlying operating system error.
        errno (Optional[int]): Error number copied from ``reason``.

    Example:
        >>> error = FilesystemError("/srv/data", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot access /srv/data: Permission denied'
        >>> error.errno
        13
    """

    def __init__(self, path: PathType, reason: OSError) -> None:
        """
        Initialize the exception from the failing path and the underlying error.

        Args:
            path (PathType): Path that could not be accessed.
            reason (OSError): The error raised by the operating system call.
        """
        self.path = str(path)
        self.reason = reason
        self.errno: Optional[int] = reason.errno
        super().__init__(f"Cannot access {self.path}: {reason.strerror or reason}")
