"""Directory tree rendering with streaming output.

This module ties the walker to its two consumers. StreamingTree walks the
configured directory once and either yields the rendered tree line by line or,
in export mode, collects one row per entry for the tabular export.
"""

import sys
from typing import Callable, Iterator, List, Optional

from etree.config import TraversalConfig
from etree.exclusion_rules.base_rules import BaseExclusionRules
from etree.file_system_tree.events import EnumerationFailed
from etree.file_system_tree.metadata_provider import OSMetadataProvider
from etree.file_system_tree.traversal_stats import TraversalStats
from etree.file_system_tree.tree_walker import TreeWalker
from etree.output.row_accumulator import Row, RowAccumulator
from etree.output.tree_renderer import TreeRenderer

ErrorHandler = Callable[[EnumerationFailed], None]


def report_enumeration_failure(event: EnumerationFailed) -> None:
    """Default error channel: one warning line on stderr per unreadable directory."""
    print(f"Warning: Failed to enumerate directory '{event.path}': {event.reason}", file=sys.stderr)


class StreamingTree:
    """Single-pass directory tree generator.

    Streaming properties:
    - stream() can only be consumed once
    - stats reflect only the processed part of the tree until streaming_complete is True
    - in export mode stream() yields nothing and rows fill up instead

    Attributes:
        config (TraversalConfig): Traversal configuration.
        stats (TraversalStats): Statistics of the run.
        rows (List[Row]): Rows collected in export mode; empty otherwise.
        errors (List[EnumerationFailed]): Directories that could not be listed.
        streaming_complete (bool): Whether the stream has been fully consumed.

    Example:
        >>> tree = StreamingTree(TraversalConfig(root="/x"))  # doctest: +SKIP
        >>> for line in tree.stream():  # doctest: +SKIP
        ...     print(line, end="")
        /x
        ├── a
        │   └── f.txt
        └── b.tmp
        >>> tree.summary()  # doctest: +SKIP
        'The tree counts 2 layers, 1 folders, 2 files.'

    Raises:
        FileNotFoundError: If a configured rule file does not exist.
    """

    def __init__(
        self,
        config: TraversalConfig,
        *,
        provider: Optional[OSMetadataProvider] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """Initialize the tree.

        Args:
            config: Traversal configuration.
            provider: Metadata provider. Defaults to the running platform's provider.
            exclusion_rules: Exclusion rules. Defaults to the rules built from the configuration.
            error_handler: Called once for each directory that cannot be listed.
                Defaults to a warning on stderr.
        """
        self.config = config
        self.stats = TraversalStats()
        self.rows: List[Row] = []
        self.errors: List[EnumerationFailed] = []
        self.streaming_complete = False
        self._walker = TreeWalker(config, provider, exclusion_rules)
        self._renderer = TreeRenderer.from_config(config)
        self._accumulator = RowAccumulator(self.rows)
        self._error_handler = error_handler if error_handler is not None else report_enumeration_failure
        self._started = False

    def stream(self) -> Iterator[str]:
        """Walk the tree and yield the rendered output.

        In render mode the first line names the root, followed by one line per
        entry. Every line ends with a newline. In export mode nothing is yielded.

        Yields:
            Rendered lines.

        Raises:
            RuntimeError: If the stream was already started.
        """
        if self._started:
            raise RuntimeError("The tree has already been streamed")
        self._started = True

        export = self.config.export_mode
        if not export:
            yield self._renderer.render_root(str(self.config.root)) + "\n"

        for event in self._walker.walk(self.stats):
            if isinstance(event, EnumerationFailed):
                self.errors.append(event)
                self._error_handler(event)
                continue
            if export:
                self._accumulator.consume(event)
                continue
            line = self._renderer.consume(event)
            if line is not None:
                yield line + "\n"

        self.streaming_complete = True

    def run(self) -> List[str]:
        """Consume the whole stream and return the rendered lines."""
        return list(self.stream())

    def summary(self) -> str:
        return self.stats.summary()
