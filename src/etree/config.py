"""Traversal configuration."""

from dataclasses import dataclass
from typing import Optional, Tuple

from etree.file_system_tree.permission_action import PermissionAction
from etree.types import PathType


@dataclass(frozen=True)
class TraversalConfig:
    """Read-only settings for one traversal run.

    The command line fills this in once at startup. ``interactive`` is the
    resolved "stdout is a terminal" signal; the core never queries the terminal
    itself.

    Attributes:
        root: Directory to traverse. Displayed as given.
        exclude_pattern: Wildcard pattern (``*`` and ``?``) matched against entry
            names. Empty means nothing is excluded.
        max_level: Deepest level to visit, 1 being the root's children. Zero or
            any negative value means unlimited.
        include_hidden: Include dot-names and entries with the native hidden attribute.
        directories_only: Skip everything that is not a directory.
        show_size: Append the byte size to each rendered line.
        show_permissions: Append the permission string to each rendered line.
        colors_enabled: Allow ANSI colours. Colours are still only used on a terminal.
        export_mode: Collect rows for export instead of rendering lines.
        interactive: Whether output goes to an interactive terminal.
        ignore_files: Gitignore-style rule files applied to relative paths.
        follow_symlinks: Describe symlinks by their target and descend into linked
            directories. When off, a link is a file with its own metadata.
        ascii_glyphs: Draw the tree with ASCII characters only.
        rtl_shaping: Force RTL shaping on or off; None follows ``interactive``.
        permission_action: What to do with directories that cannot be listed
            because access is denied.

    Example:
        >>> config = TraversalConfig(max_level=-3, interactive=True)
        >>> config.depth_limit
        0
        >>> config.use_colors, config.shape_rtl
        (True, True)
    """

    root: PathType = "."
    exclude_pattern: str = ""
    max_level: int = 0
    include_hidden: bool = False
    directories_only: bool = False
    show_size: bool = False
    show_permissions: bool = False
    colors_enabled: bool = True
    export_mode: bool = False
    interactive: bool = False
    ignore_files: Tuple[PathType, ...] = ()
    follow_symlinks: bool = True
    ascii_glyphs: bool = False
    rtl_shaping: Optional[bool] = None
    permission_action: PermissionAction = PermissionAction.IGNORE

    @property
    def depth_limit(self) -> int:
        """Effective depth limit, 0 meaning unlimited."""
        return self.max_level if self.max_level > 0 else 0

    @property
    def use_colors(self) -> bool:
        return self.colors_enabled and self.interactive

    @property
    def shape_rtl(self) -> bool:
        if self.rtl_shaping is None:
            return self.interactive
        return self.rtl_shaping
