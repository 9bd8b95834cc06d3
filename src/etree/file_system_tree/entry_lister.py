"""Filtered, sorted listing of a single directory."""

import os
from typing import List, Optional

from etree.config import TraversalConfig
from etree.exclusion_rules.base_rules import BaseExclusionRules
from etree.file_system_tree.directory_entry import DirectoryEntry
from etree.file_system_tree.metadata_provider import OSMetadataProvider


def child_relative_path(parent_relative_path: str, name: str) -> str:
    """Join a child name onto its parent's relative path.

    Example:
        >>> child_relative_path("", "a")
        'a'
        >>> child_relative_path("a", "f.txt")
        'a/f.txt'
    """
    return f"{parent_relative_path}/{name}" if parent_relative_path else name


def list_children(
    directory: str,
    relative_path: str,
    config: TraversalConfig,
    provider: OSMetadataProvider,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> List[DirectoryEntry]:
    """List a directory's children after filtering, in code point order of their names.

    An entry is dropped when:

    - hidden entries are not included and its name starts with ``.`` or its
      native hidden attribute is set;
    - the exclusion rules exclude its relative path (directories are checked
      with a trailing slash);
    - only directories are wanted and it is not one.

    Args:
        directory: Path of the directory to list.
        relative_path: Path of the directory relative to the traversal root
            (empty for the root itself).
        config: Traversal configuration.
        provider: Platform metadata provider.
        exclusion_rules: Optional rules applied to each child's relative path.

    Returns:
        The remaining entries sorted by name.

    Raises:
        OSError: If the directory itself cannot be opened or read. Problems with
            individual children never raise.
    """
    entries: List[DirectoryEntry] = []
    with os.scandir(directory) as iterator:
        for dir_entry in iterator:
            entry = DirectoryEntry.from_dir_entry(dir_entry, provider, config.follow_symlinks)

            if not config.include_hidden and (entry.name.startswith(".") or entry.is_hidden):
                continue

            if exclusion_rules is not None:
                rule_path = child_relative_path(relative_path, entry.name)
                if entry.is_dir:
                    rule_path += "/"
                if exclusion_rules.exclude(rule_path):
                    continue

            if config.directories_only and not entry.is_dir:
                continue

            entries.append(entry)

    entries.sort(key=lambda e: e.name)
    return entries
