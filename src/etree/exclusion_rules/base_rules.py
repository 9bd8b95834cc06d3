"""Interface shared by all exclusion rules."""

from abc import ABC, abstractmethod
from typing import Sequence, Union

from etree.types import PathType


class BaseExclusionRules(ABC):
    """Decides which entries are left out of the tree, the counts and the rows.

    Every rule is asked about the entry's path relative to the traversal root,
    written with forward slashes and ending in ``/`` for directories
    (``"src/build/"``). Rules that only look at names use the last component.

    Loading rule files and adding single rules are optional; rule types that
    cannot do either keep the defaults, which raise NotImplementedError.

    Example:
        >>> from etree.exclusion_rules.wildcard_rules import WildcardExclusionRules
        >>> rules = WildcardExclusionRules("*.tmp")
        >>> rules.exclude("cache/b.TMP")
        True
        >>> rules.exclude("cache/")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """Return True if the entry at ``path`` must not be visited.

        Args:
            path: Root-relative path; directories end with ``/``.
        """

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Read rules from one or more files.

        Raises:
            NotImplementedError: Unless the rule type supports rule files.
        """
        raise NotImplementedError(f"{type(self).__name__} cannot load rules from files")

    def add_rule(self, rule: str) -> None:
        """Add one rule in the rule type's own syntax.

        Raises:
            NotImplementedError: Unless the rule type supports single rules.
        """
        raise NotImplementedError(f"{type(self).__name__} cannot add individual rules")
