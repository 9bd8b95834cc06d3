"""Command-line interface for etree.

This module provides the command-line entry point. It parses the arguments,
resolves whether stdout is a terminal, streams the rendered tree through a
SafeWriter and, in export mode, writes the collected rows as TSV.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g. ``etree | head``) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion
    1: Runtime error (invalid directory, unwritable export file, ...)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Draw the current directory
    $ etree

    # Two levels, sizes and permissions, without .tmp files
    $ etree -l2 -s -p -I "*.tmp" /path/to/dir

    # Export to TSV
    $ etree -o files.tsv /path/to/dir
"""

import os
import sys
from typing import List, Optional

from etree.cli.argparser import build_config, create_parser, normalize_switches, validate_args
from etree.cli.safe_writer import SafeWriter
from etree.cli.signal_handler import setup_signal_handling, signal_handler
from etree.etree import StreamingTree
from etree.file_system_tree.metadata_provider import get_metadata_provider
from etree.output.tsv_export import write_tsv


def is_interactive() -> bool:
    """Check whether stdout is an interactive terminal."""
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def needs_bom(interactive: bool, windows: Optional[bool] = None) -> bool:
    """Whether redirected output should start with a UTF-8 byte-order mark.

    Windows tools guess the encoding of redirected text, so output that does
    not go to a console is marked as UTF-8 there. Elsewhere no mark is written.

    Example:
        >>> needs_bom(interactive=False, windows=True), needs_bom(interactive=True, windows=True)
        (True, False)
        >>> needs_bom(interactive=False, windows=False)
        False
    """
    if windows is None:
        windows = os.name == "nt"
    return windows and not interactive


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the etree command-line interface.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        args = parser.parse_args(normalize_switches(sys.argv[1:] if argv is None else argv))

        validate_args(args)

        interactive = is_interactive()
        config = build_config(args, interactive=interactive)
        provider = get_metadata_provider()
        tree = StreamingTree(config, provider=provider)

        with SafeWriter(sys.stdout.fileno(), encoder=provider.encode) as safe_writer:
            try:
                if needs_bom(interactive):
                    safe_writer.write("\ufeff")
                for line in tree.stream():
                    safe_writer.write(line)

                if config.export_mode:
                    write_tsv(args.output, tree.rows)
                else:
                    safe_writer.write("\n" + tree.summary() + "\n")
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
