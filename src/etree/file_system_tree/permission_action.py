"""Permission action enum for handling permission errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed because access is denied.

    Values:
        IGNORE: Render the directory as empty without any report (default behavior)
        WARN: Render the directory as empty and report the failure on the error channel
    """

    IGNORE = "ignore"
    WARN = "warn"
