"""Case-insensitive wildcard matching of entry names."""

import re
from functools import lru_cache
from typing import Pattern

from .base_rules import BaseExclusionRules


@lru_cache(maxsize=64)
def _compile(pattern: str) -> Pattern[str]:
    # Only * and ? are special; everything else, "." and "[" included, is literal.
    escaped = re.escape(pattern)
    escaped = escaped.replace(r"\*", ".*").replace(r"\?", ".")
    return re.compile(escaped, re.IGNORECASE | re.DOTALL)


def matches(name: str, pattern: str) -> bool:
    """Check whether a name matches a wildcard pattern.

    The match is anchored at both ends and ignores case. ``*`` matches any
    sequence of characters, including none, and ``?`` matches exactly one.
    An empty pattern never matches.

    Args:
        name: Entry name to test.
        pattern: Wildcard pattern.

    Returns:
        True if the whole name matches the pattern.

    Example:
        >>> matches("FILE.TXT", "*.txt")
        True
        >>> matches("file.txtx", "*.txt")
        False
        >>> matches("a.b", "a?b"), matches("axb", "a.b")
        (True, False)
        >>> matches("anything", "")
        False
    """
    if not pattern:
        return False
    return _compile(pattern).fullmatch(name) is not None


class WildcardExclusionRules(BaseExclusionRules):
    """Exclude entries whose name matches a single wildcard pattern.

    Only the last component of the relative path is tested, so the pattern
    applies at every depth of the tree.

    Attributes:
        pattern (str): The configured wildcard pattern; empty disables the rule.

    Example:
        >>> rules = WildcardExclusionRules("*.tmp")
        >>> rules.exclude("a/b.tmp")
        True
        >>> rules.exclude("a/")
        False
    """

    def __init__(self, pattern: str = "") -> None:
        self.pattern = pattern

    def exclude(self, path: str) -> bool:
        name = path.rstrip("/").rsplit("/", 1)[-1]
        return matches(name, self.pattern)

    def has_rules(self) -> bool:
        return bool(self.pattern)
