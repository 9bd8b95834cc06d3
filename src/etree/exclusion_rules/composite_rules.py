"""Combination of several exclusion rules."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Excludes a path as soon as one of its member rules does.

    The walker builds one of these from the wildcard pattern and the rule
    files, so both apply to every entry.

    Attributes:
        rules (List[BaseExclusionRules]): Member rules, checked in order.

    Example:
        >>> from etree.exclusion_rules.wildcard_rules import WildcardExclusionRules
        >>> composite = CompositeExclusionRules([WildcardExclusionRules("*.tmp"), WildcardExclusionRules("*.bak")])
        >>> composite.exclude("x.bak"), composite.exclude("x.txt")
        (True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules] = ()):
        """
        Args:
            rules: Member rules. An empty composite excludes nothing.

        Raises:
            TypeError: If a member is not a BaseExclusionRules.
        """
        self.rules: List[BaseExclusionRules] = []
        for index, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {index} must implement BaseExclusionRules, got {type(rule)}")
            self.rules.append(rule)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """Whether any member has something configured.

        Members without a ``has_rules`` method count as configured.
        """
        return any(getattr(rule, "has_rules", lambda: True)() for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Append another member rule.

        Raises:
            TypeError: If rule is not a BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)
