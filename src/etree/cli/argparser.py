"""Command-line argument parsing for etree.

This module defines the command-line interface for etree, handling argument
parsing, validation and the translation of parsed arguments into a
TraversalConfig.
"""

import argparse
import os
from pathlib import Path
from typing import List, Optional, Sequence

from etree import __version__
from etree.config import TraversalConfig
from etree.file_system_tree.permission_action import PermissionAction

# Switches that may also be spelled with a leading slash on Windows (/a, /l2, /?).
_SLASH_SWITCHES = ("d", "a", "s", "p", "l", "I", "nc", "o", "v", "?", "A", "L", "e", "P")


def normalize_switches(argv: Sequence[str], windows: Optional[bool] = None) -> List[str]:
    """Rewrite Windows-style ``/x`` switches as ``-x``.

    Only arguments that start with a known switch are rewritten, and only on
    Windows, where absolute paths never start with a slash.

    Args:
        argv: Arguments without the program name.
        windows: Force the platform decision; defaults to ``os.name == "nt"``.

    Returns:
        The rewritten argument list.

    Example:
        >>> normalize_switches(["/a", "/l2", "/tmp", "/?"], windows=True)
        ['-a', '-l2', '/tmp', '-?']
        >>> normalize_switches(["/a"], windows=False)
        ['/a']
    """
    if windows is None:
        windows = os.name == "nt"
    if not windows:
        return list(argv)

    return ["-" + arg[1:] if _is_slash_switch(arg) else arg for arg in argv]


def _is_slash_switch(arg: str) -> bool:
    if not arg.startswith("/"):
        return False
    body = arg[1:]
    # -l and -I also take their value attached (/l2, /I*.tmp)
    return body in _SLASH_SWITCHES or (len(body) > 1 and body[0] in ("l", "I"))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with etree's options.
    """
    description = """
    etree: display a directory as a tree, or export its metadata as TSV.

    Entries are listed in code point order of their names, directories and files
    together. Hidden entries (dot-names and, where the platform has one, the
    hidden attribute) are skipped unless -a is given. Colours and right-to-left
    name shaping are only used when writing to a terminal.
    """

    epilog = """
    Examples:
      # All visible and hidden entries, 2 levels deep
      etree -a -l2

      # Exclude .tmp files, show sizes and permissions
      etree -I "*.tmp" -s -p

      # Also apply the rules of a .gitignore file
      etree -e .gitignore src

      # TSV export for spreadsheet import, hidden entries included
      etree -a -o all.tsv

      # Plain ASCII drawing without colours
      etree -A -nc /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="etree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("-?", action="help", help="Show this help message and exit")
    parser.add_argument(
        "-v", "--version", action="version", version=f"etree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="The directory to display (default: current directory).",
    )
    parser.add_argument("-d", "--dirs-only", action="store_true", help="Only show directories.")
    parser.add_argument("-a", "--all", action="store_true", help="Include hidden files and folders.")
    parser.add_argument(
        "-I",
        "--exclude-pattern",
        metavar="PATTERN",
        default="",
        help="Exclude entries whose name matches PATTERN (wildcards * and ?, case-insensitive).",
    )
    parser.add_argument(
        "-e",
        "--exclude-from",
        metavar="FILE",
        type=Path,
        action="append",
        default=[],
        help="Exclude entries matching the gitignore-style rules in FILE (can be specified multiple times).",
    )
    parser.add_argument("-s", "--size", action="store_true", help="Show file sizes in bytes.")
    parser.add_argument(
        "-p", "--permissions", action="store_true", help="Show permissions (rwx on POSIX, RHSA on Windows)."
    )
    parser.add_argument(
        "-l",
        "--level",
        metavar="N",
        type=int,
        nargs="?",
        const=1,
        default=0,
        help="Limit the depth to N levels; -l alone means 1, 0 or less means unlimited (default).",
    )
    parser.add_argument(
        "-nc", "--no-color", action="store_true", help="Disable colour output (always off when not on a terminal)."
    )
    parser.add_argument(
        "--no-rtl", action="store_true", help="Do not reorder right-to-left names for terminal display."
    )
    parser.add_argument("-A", "--ascii", action="store_true", help="Draw the tree with ASCII characters.")
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        dest="follow_symlinks",
        action="store_true",
        default=True,
        help="Descend into symbolic links to directories (default).",
    )
    parser.add_argument(
        "--no-follow",
        dest="follow_symlinks",
        action="store_false",
        help="Show symbolic links as files with their own metadata.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=[action.value for action in PermissionAction],
        default=PermissionAction.IGNORE.value,
        help="How to handle directories that cannot be read for lack of permission (default: ignore).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Export entries to FILE as tab-separated UTF-8 instead of drawing the tree.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    directory = Path(args.directory)
    if not directory.exists():
        raise ValueError(f"Directory does not exist: {args.directory}")
    if not directory.is_dir():
        raise ValueError(f"Not a directory: {args.directory}")
    for rules_file in args.exclude_from:
        if not Path(rules_file).is_file():
            raise ValueError(f"Rules file not found: {rules_file}")


def build_config(args: argparse.Namespace, interactive: bool) -> TraversalConfig:
    """Translate parsed arguments into a TraversalConfig.

    Args:
        args: Parsed and validated command-line arguments.
        interactive: Whether stdout is an interactive terminal.

    Returns:
        The traversal configuration.
    """
    return TraversalConfig(
        root=args.directory,
        exclude_pattern=args.exclude_pattern or "",
        max_level=args.level,
        include_hidden=args.all,
        directories_only=args.dirs_only,
        show_size=args.size,
        show_permissions=args.permissions,
        colors_enabled=not args.no_color,
        export_mode=args.output is not None,
        interactive=interactive,
        ignore_files=tuple(args.exclude_from),
        follow_symlinks=args.follow_symlinks,
        ascii_glyphs=args.ascii,
        rtl_shaping=False if args.no_rtl else None,
        permission_action=PermissionAction(args.permission_action),
    )
