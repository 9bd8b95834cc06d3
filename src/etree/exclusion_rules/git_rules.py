"""Gitignore-style rule files."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from etree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules written in .gitignore syntax.

    Matching is done by pathspec, so rule files support globs, ``**``,
    ``!`` negation, ``/`` anchoring and directory-only patterns. The walker
    presents directories with a trailing slash, which lets a pattern such as
    ``build/`` drop the directory together with everything below it.

    Lines from several files are kept in the order they were loaded; the last
    matching line decides, as in Git.

    Attributes:
        lines (List[str]): Rule lines in load order, comments included.
        spec (PathSpec): Matcher compiled from ``lines``.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.add_rule("*.log")
        >>> rules.exclude("build/"), rules.exclude("src/app.log"), rules.exclude("src/")
        (True, True, False)
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """
        Args:
            rules_files: One rule file or several, loaded in order.

        Raises:
            FileNotFoundError: If a rule file does not exist.
        """
        self.lines: List[str] = []
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self.lines)
        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the lines of one or more rule files.

        Raises:
            FileNotFoundError: If a rule file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")
            self.lines.extend(path.read_text(encoding="utf-8").splitlines())

        self._recompile()

    def add_rule(self, rule: str) -> None:
        """Append a single pattern, e.g. ``"*.pyc"`` or ``"node_modules/"``."""
        self.lines.append(rule)
        self._recompile()

    def has_rules(self) -> bool:
        return len(self.spec.patterns) > 0

    def _recompile(self) -> None:
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self.lines)
