"""Aggregate statistics of a traversal run."""

from dataclasses import dataclass


@dataclass
class TraversalStats:
    """Counters shared by every level of one traversal.

    The walker only ever increases these values. They are final once the event
    stream has been fully consumed.

    Attributes:
        max_depth (int): Deepest level whose listing completed, 1 being the root's children.
        folders (int): Directories visited, not counting the root.
        files (int): Non-directory entries visited.
    """

    max_depth: int = 0
    folders: int = 0
    files: int = 0

    @property
    def entries(self) -> int:
        return self.folders + self.files

    def summary(self) -> str:
        """Format the one-line summary printed after the tree.

        Example:
            >>> TraversalStats(max_depth=2, folders=1, files=2).summary()
            'The tree counts 2 layers, 1 folders, 2 files.'
        """
        return f"The tree counts {self.max_depth} layers, {self.folders} folders, {self.files} files."
