"""Signal-aware output for the dirtree CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from dirtree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text to a file descriptor or a file, stopping once the output is gone.

    Writing after SIGPIPE or SIGINT, or to a pipe whose reader has exited, raises
    BrokenPipeError so the caller can stop producing output.

    Names read from a POSIX filesystem may hold bytes that are not valid in the
    filesystem encoding. Python carries them as lone surrogates, and the default
    ``surrogateescape`` error handler turns them back into the original bytes,
    so such names are written exactly as they are stored on disk.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor actually written to.
    """

    def __init__(
        self,
        file: Union[int, str, "os.PathLike[str]"],
        encoding: str = "utf-8",
        errors: str = "surrogateescape",
    ):
        """Initialize the writer.

        Args:
            file: An open file descriptor, or a path to create or truncate.
            encoding: Encoding of the written text. Defaults to UTF-8, which the
                box-drawing characters of a tree need.
            errors: Error handler used when encoding.

        Raises:
            TypeError: If file is neither a descriptor nor a path.
        """
        if isinstance(file, bool) or not isinstance(file, (int, str, os.PathLike)):
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

        self.file = file
        self.encoding = encoding
        self.errors = errors
        self._closed = False
        self._file_obj = None if isinstance(file, int) else Path(file).open("wb")
        self.fd = file if self._file_obj is None else self._file_obj.fileno()

    def write(self, data: str) -> None:
        """Write text.

        Raises:
            BrokenPipeError: If a signal was received or the pipe is broken.
            OSError: For any other I/O error.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode(self.encoding, self.errors)
        try:
            # os.write may write only part of the buffer
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each string of an iterable in turn."""
        for line in lines:
            self.write(line)

    def close(self) -> None:
        """Close the file if this writer opened it; descriptors passed in are left open."""
        if not self._closed and self._file_obj is not None:
            self._file_obj.close()
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
