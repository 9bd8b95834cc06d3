"""Tab-separated export of collected rows.

The format targets spreadsheet import: UTF-8 with a byte-order mark, one header
line, then one tab-separated line per row, ``\\n`` line endings. Fields are
written as they are, without quoting.
"""

from pathlib import Path
from typing import Iterable, Iterator, List

from etree.exceptions import ExportError
from etree.output.row_accumulator import Row
from etree.types import PathType

HEADER = ("Relative Path", "Name", "Type", "Size (bytes)", "Created", "Modified", "Permissions")
ENCODING = "utf-8-sig"


def format_tsv(rows: Iterable[Row]) -> Iterator[str]:
    """Yield the export lines, header first, each ending in a newline.

    The byte-order mark is added by the file encoding, not by this function.

    Example:
        >>> from etree.types import EntryType
        >>> lines = list(format_tsv([Row("a", "a", EntryType.FOLDER, 0, "", "", "rwxr-xr-x")]))
        >>> lines[1]
        'a\\ta\\tfolder\\t0\\t\\t\\trwxr-xr-x\\n'
    """
    yield "\t".join(HEADER) + "\n"
    for row in rows:
        yield "\t".join(row.as_fields()) + "\n"


def write_tsv(path: PathType, rows: Iterable[Row]) -> None:
    """Write rows to a TSV file.

    Args:
        path: Destination file; overwritten if it exists.
        rows: Rows to export. They are only read.

    Raises:
        ExportError: If the file cannot be created or written.
    """
    try:
        with open(path, "w", encoding=ENCODING, errors="replace", newline="") as out:
            for line in format_tsv(rows):
                out.write(line)
    except OSError as e:
        raise ExportError(str(path), e.strerror or str(e)) from e


def read_tsv(path: PathType) -> List[Row]:
    """Read a file written by write_tsv back into rows.

    Raises:
        ValueError: If the header or a line does not have the export layout.
        OSError: If the file cannot be read.
    """
    lines = Path(path).read_text(encoding=ENCODING).split("\n")
    if not lines or tuple(lines[0].split("\t")) != HEADER:
        raise ValueError(f"Not an export file: {path}")
    return [Row.from_fields(line.split("\t")) for line in lines[1:] if line]
