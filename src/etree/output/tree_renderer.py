"""Rendering of traversal events as tree-drawing lines."""

from dataclasses import dataclass
from typing import List, Optional

from humanfriendly import format_number

from etree.config import TraversalConfig
from etree.file_system_tree.events import DirectoryEntered, DirectoryLeft, EntryVisited
from etree.output.base_consumer import EventConsumer
from etree.rtl_shaper import shape_for_console

DIR_COLOR = "\033[1;34m"
FILE_COLOR = "\033[0;32m"
PERM_COLOR = "\033[0;36m"
SIZE_COLOR = "\033[0;33m"
RESET_COLOR = "\033[0m"


@dataclass(frozen=True)
class Glyphs:
    """Characters used to draw branches and indentation."""

    branch: str
    last_branch: str
    vertical: str
    blank: str = "    "


UNICODE_GLYPHS = Glyphs(branch="├── ", last_branch="└── ", vertical="│   ")
ASCII_GLYPHS = Glyphs(branch="|-- ", last_branch="`-- ", vertical="|   ")


def format_size(size: int) -> str:
    """Format a byte count with thousands separators.

    Example:
        >>> format_size(1234567)
        '1,234,567 B'
        >>> format_size(10)
        '10 B'
    """
    return f"{format_number(size)} B"


class TreeRenderer(EventConsumer):
    """Turns visit events into lines of an indented tree.

    Each visited entry becomes one line: the indentation inherited from its
    ancestors, the branch glyph, the name and the optional size and permission
    suffixes. The indentation is tracked from DirectoryEntered/DirectoryLeft
    events, four spaces below an ancestor that was the last of its siblings and
    a vertical bar plus three spaces otherwise.

    Lines are returned without a trailing newline.

    Attributes:
        colors (bool): Wrap names and suffixes in ANSI colour codes.
        rtl_shaping (bool): Reorder RTL names for consoles without bidi support.
        show_size (bool): Append ``" [N B]"``.
        show_permissions (bool): Append ``" (perms)"``.
        glyphs (Glyphs): Characters used for drawing.

    Example:
        >>> from etree.file_system_tree.directory_entry import DirectoryEntry
        >>> renderer = TreeRenderer(show_size=True)
        >>> entry = DirectoryEntry("x/b.tmp", "b.tmp", size=1024)
        >>> renderer.consume(EntryVisited(entry, level=1, is_last=True, relative_path="b.tmp"))
        '└── b.tmp [1,024 B]'
    """

    def __init__(
        self,
        *,
        colors: bool = False,
        rtl_shaping: bool = False,
        show_size: bool = False,
        show_permissions: bool = False,
        ascii_glyphs: bool = False,
    ) -> None:
        self.colors = colors
        self.rtl_shaping = rtl_shaping
        self.show_size = show_size
        self.show_permissions = show_permissions
        self.glyphs = ASCII_GLYPHS if ascii_glyphs else UNICODE_GLYPHS
        self._ancestors_last: List[bool] = []

    @classmethod
    def from_config(cls, config: TraversalConfig) -> "TreeRenderer":
        return cls(
            colors=config.use_colors,
            rtl_shaping=config.shape_rtl,
            show_size=config.show_size,
            show_permissions=config.show_permissions,
            ascii_glyphs=config.ascii_glyphs,
        )

    def _color(self, code: str) -> str:
        return code if self.colors else ""

    def _display_name(self, name: str) -> str:
        return shape_for_console(name) if self.rtl_shaping else name

    @property
    def prefix(self) -> str:
        """Indentation for entries at the current depth."""
        return "".join(self.glyphs.blank if last else self.glyphs.vertical for last in self._ancestors_last)

    def render_root(self, label: str) -> str:
        """Render the line naming the traversal root, coloured as a directory."""
        return f"{self._color(DIR_COLOR)}{self._display_name(label)}{self._color(RESET_COLOR)}"

    def on_entry(self, event: EntryVisited) -> Optional[str]:
        entry = event.entry
        branch = self.glyphs.last_branch if event.is_last else self.glyphs.branch
        color = self._color(DIR_COLOR if entry.is_dir else FILE_COLOR)
        reset = self._color(RESET_COLOR)

        parts = [self.prefix, color, branch, self._display_name(entry.name), reset]
        if self.show_size:
            size = 0 if entry.is_dir else entry.size
            parts.append(f"{self._color(SIZE_COLOR)} [{format_size(size)}]{reset}")
        if self.show_permissions:
            parts.append(f"{self._color(PERM_COLOR)} ({entry.permissions}){reset}")
        return "".join(parts)

    def on_enter_directory(self, event: DirectoryEntered) -> Optional[str]:
        self._ancestors_last.append(event.is_last)
        return None

    def on_leave_directory(self, event: DirectoryLeft) -> Optional[str]:
        if self._ancestors_last:
            self._ancestors_last.pop()
        return None
