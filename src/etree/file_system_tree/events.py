"""Events produced by the tree walker.

The walker describes a traversal as a pre-order stream of these events;
renderers and row collectors consume the stream independently.
"""

from dataclasses import dataclass
from typing import Union

from etree.file_system_tree.directory_entry import DirectoryEntry


@dataclass(frozen=True)
class EntryVisited:
    """A child entry was visited.

    Attributes:
        entry: The visited entry.
        level: Depth of the entry, 1 for the root's children.
        is_last: True if the entry is the last of its siblings.
        relative_path: Forward-slash path from the traversal root.
    """

    entry: DirectoryEntry
    level: int
    is_last: bool
    relative_path: str


@dataclass(frozen=True)
class DirectoryEntered:
    """The walker is about to descend into a visited directory.

    ``level`` is the depth of the directory's children.
    """

    entry: DirectoryEntry
    level: int
    is_last: bool
    relative_path: str


@dataclass(frozen=True)
class DirectoryLeft:
    """All of a directory's children have been processed."""

    entry: DirectoryEntry
    level: int


@dataclass(frozen=True)
class EnumerationFailed:
    """A directory could not be listed; it is treated as having no children."""

    path: str
    level: int
    error: OSError

    @property
    def reason(self) -> str:
        return self.error.strerror or str(self.error)


TraversalEvent = Union[EntryVisited, DirectoryEntered, DirectoryLeft, EnumerationFailed]
