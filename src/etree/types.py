from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryType(str, Enum):
    """Enumeration of entry types as they appear in exported rows.

    Attributes:
        FILE: Anything that is not traversed as a directory
        FOLDER: Directory
    """

    FILE = "file"
    FOLDER = "folder"
