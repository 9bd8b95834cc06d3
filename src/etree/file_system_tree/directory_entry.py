"""Entry representation for file system elements met during traversal."""

import os
from dataclasses import dataclass
from typing import Optional

from etree.file_system_tree.metadata_provider import OSMetadataProvider


@dataclass
class DirectoryEntry:
    """One child of a listed directory, with the metadata the tree can display.

    Entries are created while a directory is listed and consumed right away by
    the walker; nothing keeps them once traversal has moved on.

    Attributes:
        path (str): Path of the entry, joined from the listed directory.
        name (str): Base name, as stored on disk.
        is_dir (bool): True if the entry is traversed as a directory.
        size (int): Size in bytes; always 0 for directories or when unreadable.
        permissions (str): Platform permission string, ``"-"`` when unknown.
        created (str): Creation timestamp, empty where the platform has none.
        modified (str): Modification timestamp, empty when unknown.
        is_hidden (bool): True if the native hidden attribute is set.

    Example:
        >>> entry = DirectoryEntry("/x/a", "a", is_dir=True)
        >>> entry.size, entry.permissions
        (0, '-')
    """

    path: str
    name: str
    is_dir: bool = False
    size: int = 0
    permissions: str = "-"
    created: str = ""
    modified: str = ""
    is_hidden: bool = False

    @classmethod
    def from_dir_entry(
        cls,
        dir_entry: "os.DirEntry[str]",
        provider: OSMetadataProvider,
        follow_symlinks: bool = False,
    ) -> "DirectoryEntry":
        """Build an entry from an ``os.scandir`` result.

        Metadata errors never propagate: an entry that cannot be examined is a
        zero-byte non-directory with unknown permissions and timestamps.

        Args:
            dir_entry: Entry produced by ``os.scandir``.
            provider: Platform metadata provider.
            follow_symlinks: Describe symlinks by their target instead of the link itself.

        Returns:
            The populated DirectoryEntry.
        """
        try:
            is_dir = dir_entry.is_dir(follow_symlinks=follow_symlinks)
        except OSError:
            is_dir = False

        stat_result = _safe_stat(dir_entry, follow_symlinks)
        if stat_result is None:
            return cls(dir_entry.path, dir_entry.name, is_dir=is_dir)

        created, modified = provider.file_times(stat_result)
        return cls(
            path=dir_entry.path,
            name=dir_entry.name,
            is_dir=is_dir,
            size=0 if is_dir else stat_result.st_size,
            permissions=provider.permission_string(stat_result),
            created=created,
            modified=modified,
            is_hidden=provider.is_hidden(stat_result),
        )


def _safe_stat(dir_entry: "os.DirEntry[str]", follow_symlinks: bool) -> Optional[os.stat_result]:
    try:
        return dir_entry.stat(follow_symlinks=follow_symlinks)
    except OSError:
        if not follow_symlinks:
            return None
    # a dangling link has no target to stat; describe the link itself
    try:
        return dir_entry.stat(follow_symlinks=False)
    except OSError:
        return None
