"""Base class for consumers of the walker's event stream.

Consumers subscribe to the events produced by TreeWalker. Each event type has
its own hook; hooks that a consumer does not override ignore the event.
"""

from abc import ABC
from typing import Optional

from etree.file_system_tree.events import (
    DirectoryEntered,
    DirectoryLeft,
    EntryVisited,
    EnumerationFailed,
    TraversalEvent,
)


class EventConsumer(ABC):
    """Dispatches traversal events to per-type hooks.

    Hooks return the text produced for the event, if any. Consumers that only
    collect data return None.

    Example:
        >>> class Counter(EventConsumer):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def on_entry(self, event):
        ...         self.count += 1
        ...         return None
        >>> counter = Counter()
        >>> counter.consume(DirectoryLeft(entry=None, level=2)) is None
        True
        >>> counter.count
        0
    """

    def consume(self, event: TraversalEvent) -> Optional[str]:
        """Route an event to the matching hook.

        Args:
            event: Event from the walker.

        Returns:
            Output text for the event, or None.

        Raises:
            TypeError: If the object is not a traversal event.
        """
        if isinstance(event, EntryVisited):
            return self.on_entry(event)
        if isinstance(event, DirectoryEntered):
            return self.on_enter_directory(event)
        if isinstance(event, DirectoryLeft):
            return self.on_leave_directory(event)
        if isinstance(event, EnumerationFailed):
            return self.on_enumeration_failed(event)
        raise TypeError(f"Unsupported traversal event: {type(event).__name__}")

    def on_entry(self, event: EntryVisited) -> Optional[str]:
        return None

    def on_enter_directory(self, event: DirectoryEntered) -> Optional[str]:
        return None

    def on_leave_directory(self, event: DirectoryLeft) -> Optional[str]:
        return None

    def on_enumeration_failed(self, event: EnumerationFailed) -> Optional[str]:
        return None
