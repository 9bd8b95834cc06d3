"""Collection of visited entries as flat rows for tabular export."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from etree.file_system_tree.directory_entry import DirectoryEntry
from etree.file_system_tree.events import EntryVisited
from etree.output.base_consumer import EventConsumer
from etree.types import EntryType


@dataclass
class Row:
    """Flat description of one visited entry.

    Attributes:
        relative_path (str): Forward-slash path from the traversal root, without a leading slash.
        name (str): Entry name.
        type (EntryType): ``file`` or ``folder``.
        size (int): Size in bytes, 0 for folders.
        created (str): Creation timestamp, possibly empty.
        modified (str): Modification timestamp, possibly empty.
        permissions (str): Platform permission string.
    """

    relative_path: str
    name: str
    type: EntryType
    size: int
    created: str
    modified: str
    permissions: str

    @classmethod
    def from_entry(cls, entry: DirectoryEntry, relative_path: str) -> "Row":
        return cls(
            relative_path=relative_path,
            name=entry.name,
            type=EntryType.FOLDER if entry.is_dir else EntryType.FILE,
            size=0 if entry.is_dir else entry.size,
            created=entry.created,
            modified=entry.modified,
            permissions=entry.permissions,
        )

    def as_fields(self) -> List[str]:
        """Return the row's values in export column order.

        Example:
            >>> Row("a/f.txt", "f.txt", EntryType.FILE, 10, "", "", "rw-r--r--").as_fields()
            ['a/f.txt', 'f.txt', 'file', '10', '', '', 'rw-r--r--']
        """
        return [
            self.relative_path,
            self.name,
            self.type.value,
            str(self.size),
            self.created,
            self.modified,
            self.permissions,
        ]

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "Row":
        """Rebuild a row from values in export column order.

        Raises:
            ValueError: If the number of fields, the type or the size is invalid.
        """
        if len(fields) != 7:
            raise ValueError(f"Expected 7 fields, got {len(fields)}")
        relative_path, name, type_name, size, created, modified, permissions = fields
        return cls(relative_path, name, EntryType(type_name), int(size), created, modified, permissions)


class RowAccumulator(EventConsumer):
    """Appends one Row per visited entry.

    Attributes:
        rows (List[Row]): Rows in traversal order.
    """

    def __init__(self, rows: Optional[List[Row]] = None) -> None:
        self.rows: List[Row] = rows if rows is not None else []

    def on_entry(self, event: EntryVisited) -> Optional[str]:
        self.rows.append(Row.from_entry(event.entry, event.relative_path))
        return None
