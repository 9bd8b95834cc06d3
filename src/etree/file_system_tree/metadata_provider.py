"""Platform-specific access to entry metadata.

The traversal logic is shared by every platform. Everything that differs
between Windows and POSIX systems (hidden attributes, permission strings,
creation times and the encoding used for output) goes through an
OSMetadataProvider, one implementation per platform, picked once at import time.
"""

import os
import stat
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Tuple

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(timestamp: Optional[float]) -> str:
    """Format a POSIX timestamp as local ``YYYY-MM-DD HH:MM:SS``.

    Returns an empty string when there is no timestamp or it cannot be converted.

    Example:
        >>> format_timestamp(None)
        ''
        >>> len(format_timestamp(1_000_000_000.0))
        19
    """
    if timestamp is None:
        return ""
    try:
        return datetime.fromtimestamp(timestamp).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, OSError, ValueError):
        return ""


class OSMetadataProvider(ABC):
    """Interface for the platform-dependent parts of metadata reading.

    All methods receive an ``os.stat_result`` (or any object with the same
    attributes) that the caller already obtained, so providers never touch the
    filesystem themselves and never raise for a missing attribute.
    """

    @abstractmethod
    def is_hidden(self, stat_result: os.stat_result) -> bool:
        """Whether the platform's native hidden attribute is set.

        Dot-names are handled by the caller; this only covers the attribute.
        """
        pass

    @abstractmethod
    def permission_string(self, stat_result: os.stat_result) -> str:
        """Build the display form of the entry's permissions."""
        pass

    @abstractmethod
    def file_times(self, stat_result: os.stat_result) -> Tuple[str, str]:
        """Return ``(created, modified)`` as formatted local timestamps.

        Either value is an empty string when the platform cannot supply it.
        """
        pass

    @abstractmethod
    def encode(self, text: str) -> bytes:
        """Encode text for writing to the console or a redirected stream."""
        pass


class PosixMetadataProvider(OSMetadataProvider):
    """Metadata provider for Linux, macOS and other POSIX systems.

    Example:
        >>> from types import SimpleNamespace
        >>> provider = PosixMetadataProvider()
        >>> provider.permission_string(SimpleNamespace(st_mode=0o100754))
        'rwxr-xr--'
    """

    _PERMISSION_BITS = (
        (stat.S_IRUSR, "r"),
        (stat.S_IWUSR, "w"),
        (stat.S_IXUSR, "x"),
        (stat.S_IRGRP, "r"),
        (stat.S_IWGRP, "w"),
        (stat.S_IXGRP, "x"),
        (stat.S_IROTH, "r"),
        (stat.S_IWOTH, "w"),
        (stat.S_IXOTH, "x"),
    )

    def is_hidden(self, stat_result: os.stat_result) -> bool:
        # UF_HIDDEN only exists on BSD and macOS; elsewhere st_flags is absent.
        return bool(getattr(stat_result, "st_flags", 0) & stat.UF_HIDDEN)

    def permission_string(self, stat_result: os.stat_result) -> str:
        mode = stat_result.st_mode
        return "".join(char if mode & bit else "-" for bit, char in self._PERMISSION_BITS)

    def file_times(self, stat_result: os.stat_result) -> Tuple[str, str]:
        created = format_timestamp(getattr(stat_result, "st_birthtime", None))
        modified = format_timestamp(getattr(stat_result, "st_mtime", None))
        return created, modified

    def encode(self, text: str) -> bytes:
        # Names that were not valid UTF-8 on disk come back as their original bytes.
        return text.encode("utf-8", errors="surrogateescape")


class WindowsMetadataProvider(OSMetadataProvider):
    """Metadata provider for Windows.

    Permissions are the file attribute letters ``R`` (read-only), ``H``
    (hidden), ``S`` (system) and ``A`` (archive), in that order, or ``-`` when
    none is set.

    Example:
        >>> import stat
        >>> from types import SimpleNamespace
        >>> provider = WindowsMetadataProvider()
        >>> attrs = stat.FILE_ATTRIBUTE_READONLY | stat.FILE_ATTRIBUTE_ARCHIVE
        >>> provider.permission_string(SimpleNamespace(st_file_attributes=attrs))
        'RA'
    """

    _ATTRIBUTE_LETTERS = (
        (stat.FILE_ATTRIBUTE_READONLY, "R"),
        (stat.FILE_ATTRIBUTE_HIDDEN, "H"),
        (stat.FILE_ATTRIBUTE_SYSTEM, "S"),
        (stat.FILE_ATTRIBUTE_ARCHIVE, "A"),
    )

    def is_hidden(self, stat_result: os.stat_result) -> bool:
        return bool(getattr(stat_result, "st_file_attributes", 0) & stat.FILE_ATTRIBUTE_HIDDEN)

    def permission_string(self, stat_result: os.stat_result) -> str:
        attributes = getattr(stat_result, "st_file_attributes", 0)
        letters = "".join(letter for bit, letter in self._ATTRIBUTE_LETTERS if attributes & bit)
        return letters or "-"

    def file_times(self, stat_result: os.stat_result) -> Tuple[str, str]:
        # st_ctime is the creation time on Windows; st_birthtime is preferred where available.
        birthtime = getattr(stat_result, "st_birthtime", None)
        if birthtime is None:
            birthtime = getattr(stat_result, "st_ctime", None)
        return format_timestamp(birthtime), format_timestamp(getattr(stat_result, "st_mtime", None))

    def encode(self, text: str) -> bytes:
        return text.encode("utf-8", errors="replace")


def get_metadata_provider() -> OSMetadataProvider:
    """Return the provider for the running platform."""
    return default_provider


default_provider: OSMetadataProvider = WindowsMetadataProvider() if os.name == "nt" else PosixMetadataProvider()
