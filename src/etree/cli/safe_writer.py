"""Signal-aware output for the etree CLI.

Lines go straight to a file descriptor as bytes. The encoding comes from the
platform metadata provider, so on POSIX a file name that is not valid UTF-8
reaches the terminal exactly as it is stored on disk.
"""

import errno
import os
import types
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Type, Union

from etree.cli.signal_handler import signal_handler

Encoder = Callable[[str], bytes]
OutputTarget = Union[int, Path, str]


def _utf8(text: str) -> bytes:
    return text.encode("utf-8")


class SafeWriter:
    """Writes encoded text to a descriptor, stopping once SIGPIPE or SIGINT arrives.

    A descriptor is used as is and never closed by the writer. A path is opened
    for binary writing and closed with the writer.

    Attributes:
        file: The descriptor or path given at construction.
        fd: Descriptor that receives the bytes.
        encoder: Function turning text into bytes.
        bytes_written: Total number of bytes written.

    Example:
        >>> with SafeWriter(1) as out:  # doctest: +SKIP
        ...     out.write("└── b.tmp\\n")
    """

    def __init__(self, file: OutputTarget, encoder: Optional[Encoder] = None):
        """
        Args:
            file: Descriptor or path to write to.
            encoder: Text encoder; strict UTF-8 when omitted.

        Raises:
            TypeError: If file is neither a descriptor nor a path.
        """
        self.file = file
        self.encoder: Encoder = encoder or _utf8
        self.bytes_written = 0
        self._closed = False
        self._file_obj: Optional[BinaryIO] = None

        # bool is an int subclass but never a valid descriptor here
        if isinstance(file, int) and not isinstance(file, bool):
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Encode and write text, looping over partial writes.

        Raises:
            BrokenPipeError: If a signal was received or the reader went away.
            OSError: For any other write failure.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted:
            raise BrokenPipeError()

        remaining = memoryview(self.encoder(data))
        while remaining:
            try:
                written = os.write(self.fd, remaining)
            except OSError as e:
                if e.errno == errno.EPIPE:
                    raise BrokenPipeError() from e
                raise
            self.bytes_written += written
            remaining = remaining[written:]

    def close(self) -> None:
        """Close a file opened by the writer. A broken pipe on close is ignored."""
        if self._closed:
            return
        self._closed = True
        if self._file_obj is None:
            return
        try:
            self._file_obj.close()
        except OSError as e:
            if e.errno != errno.EPIPE:
                raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # an exception from the with block wins over a failing close
            if exc_type is None:
                raise
