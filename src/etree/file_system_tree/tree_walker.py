"""Depth-first traversal producing visit events.

This module provides the TreeWalker class, the recursive part of the engine.
It lists, filters and sorts each directory, and describes the traversal as an
ordered stream of events while keeping the run's statistics up to date.
"""

import os
from typing import Iterator, Optional

from etree.config import TraversalConfig
from etree.exclusion_rules.base_rules import BaseExclusionRules
from etree.exclusion_rules.composite_rules import CompositeExclusionRules
from etree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from etree.exclusion_rules.wildcard_rules import WildcardExclusionRules
from etree.file_system_tree.directory_entry import DirectoryEntry
from etree.file_system_tree.entry_lister import child_relative_path, list_children
from etree.file_system_tree.events import (
    DirectoryEntered,
    DirectoryLeft,
    EntryVisited,
    EnumerationFailed,
    TraversalEvent,
)
from etree.file_system_tree.metadata_provider import OSMetadataProvider, get_metadata_provider
from etree.file_system_tree.permission_action import PermissionAction
from etree.file_system_tree.traversal_stats import TraversalStats


def build_exclusion_rules(config: TraversalConfig) -> Optional[BaseExclusionRules]:
    """Build the exclusion rules described by a configuration.

    Args:
        config: Traversal configuration.

    Returns:
        Combined rules, or None when there is no pattern and the rule files hold no patterns.

    Raises:
        FileNotFoundError: If a configured rule file does not exist.
    """
    rules = CompositeExclusionRules()
    if config.exclude_pattern:
        rules.add_rule_object(WildcardExclusionRules(config.exclude_pattern))
    if config.ignore_files:
        rules.add_rule_object(GitIgnoreExclusionRules(list(config.ignore_files)))
    return rules if rules.has_rules() else None


class TreeWalker:
    """Recursive directory walker that yields visit events.

    The root directory is never filtered and never reported as an entry. Its
    children are at level 1. For every directory the walker:

    1. stops if a depth limit is set and the level is past it;
    2. lists the filtered, sorted children, or reports the directory as
       unreadable and treats it as empty;
    3. yields an EntryVisited per child and, for directories, descends between
       a DirectoryEntered and a DirectoryLeft event;
    4. records the level in the statistics once all children are done.

    Statistics are updated as events are produced, so they are final only once
    the stream is exhausted.

    Attributes:
        config (TraversalConfig): Traversal configuration.
        provider (OSMetadataProvider): Platform metadata provider.
        exclusion_rules (Optional[BaseExclusionRules]): Rules applied to each child.

    Example:
        >>> walker = TreeWalker(TraversalConfig(root="src"))  # doctest: +SKIP
        >>> stats = TraversalStats()  # doctest: +SKIP
        >>> [e.relative_path for e in walker.walk(stats) if isinstance(e, EntryVisited)]  # doctest: +SKIP
        ['etree', 'etree/__init__.py', ...]
    """

    def __init__(
        self,
        config: TraversalConfig,
        provider: Optional[OSMetadataProvider] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        """Initialize a TreeWalker.

        Args:
            config: Traversal configuration.
            provider: Metadata provider. Defaults to the running platform's provider.
            exclusion_rules: Rules applied to each child. Defaults to the rules
                built from the configuration.

        Raises:
            FileNotFoundError: If a configured rule file does not exist.
        """
        self.config = config
        self.provider = provider if provider is not None else get_metadata_provider()
        self.exclusion_rules = exclusion_rules if exclusion_rules is not None else build_exclusion_rules(config)

    def walk(self, stats: TraversalStats) -> Iterator[TraversalEvent]:
        """Traverse the configured root.

        Args:
            stats: Statistics object updated in place during the walk.

        Yields:
            Visit events in pre-order, siblings in name order.
        """
        yield from self._walk_directory(os.fspath(self.config.root), 1, "", stats)

    def _walk_directory(
        self, directory: str, level: int, relative_path: str, stats: TraversalStats
    ) -> Iterator[TraversalEvent]:
        limit = self.config.depth_limit
        if limit > 0 and level > limit:
            return

        try:
            children = list_children(directory, relative_path, self.config, self.provider, self.exclusion_rules)
        except PermissionError as e:
            if self.config.permission_action == PermissionAction.WARN:
                yield EnumerationFailed(directory, level, e)
            return
        except OSError as e:
            yield EnumerationFailed(directory, level, e)
            return

        for index, entry in enumerate(children):
            is_last = index == len(children) - 1
            entry_path = child_relative_path(relative_path, entry.name)
            yield EntryVisited(entry, level, is_last, entry_path)

            if entry.is_dir:
                stats.folders += 1
                yield from self._descend(entry, level, is_last, entry_path, stats)
            else:
                stats.files += 1

        stats.max_depth = max(stats.max_depth, level)

    def _descend(
        self, entry: DirectoryEntry, level: int, is_last: bool, entry_path: str, stats: TraversalStats
    ) -> Iterator[TraversalEvent]:
        yield DirectoryEntered(entry, level + 1, is_last, entry_path)
        yield from self._walk_directory(entry.path, level + 1, entry_path, stats)
        yield DirectoryLeft(entry, level + 1)
