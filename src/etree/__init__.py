"""Directory tree rendering and metadata export.

This package walks a directory, renders it as an indented tree for the
terminal, and collects per-entry metadata for tab-separated export.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("etree")
except PackageNotFoundError:
    __version__ = "unknown"
