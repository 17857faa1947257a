"""Priority-ordered rule pipelines.

A pipeline sorts its rules once, by ascending priority (ties keep the order
they were given in), and folds the text through each rule's
``replace_all``. Anything exposing ``priority`` and ``replace_all`` can take
part, which is how the compound CJK normalizer joins regex rules.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Protocol, Sequence, Tuple


class TextRule(Protocol):
    """Structural type of a pipeline member"""

    priority: Optional[int]

    def replace_all(self, text: Optional[str]) -> Optional[str]: ...


def _priority_key(rule: TextRule) -> Tuple[bool, int]:
    priority = getattr(rule, "priority", None)
    return priority is None, priority or 0


def sort_rules(rules: Sequence[Optional[TextRule]]) -> Tuple[TextRule, ...]:
    """Drop None entries and stable-sort the rest by priority."""
    return tuple(sorted((r for r in rules if r is not None), key=_priority_key))


class RulePipeline:
    """
    Immutable, ordered sequence of rules.

    Example:
        >>> from text_commonizer.cleansing.rules.base import Rule
        >>> pipeline = RulePipeline(Rule.simple("b", "c", 2), Rule.simple("a", "b", 1))
        >>> pipeline("ab")
        'cc'
    """

    __slots__ = ("_rules",)

    def __init__(self, *rules: Optional[TextRule]) -> None:
        self._rules = sort_rules(rules)

    @property
    def rules(self) -> Tuple[TextRule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[TextRule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RulePipeline({len(self._rules)} rules)"

    def apply(self, text: Optional[str]) -> Optional[str]:
        """Run ``text`` through every rule in priority order."""
        if text is None:
            return None
        result: Optional[str] = text
        for rule in self._rules:
            result = rule.replace_all(result)
        return result

    __call__ = apply

    def any_match(self, text: Optional[str]) -> bool:
        return text is not None and any(_matches(rule, text) for rule in self._rules)

    def find_any(self, text: Optional[str]) -> List[str]:
        """Matches of every rule, concatenated in priority order."""
        if not text:
            return []
        found: List[str] = []
        for rule in self._rules:
            finder = getattr(rule, "find", None)
            if finder is not None:
                found.extend(finder(text))
        return found


def _matches(rule: Any, text: str) -> bool:
    matcher = getattr(rule, "matches", None)
    return bool(matcher(text)) if matcher is not None else False


def replace_all(text: Optional[str], *rules: Optional[TextRule]) -> Optional[str]:
    """Apply ``rules`` to ``text`` in priority order."""
    return RulePipeline(*rules).apply(text)


def any_match(text: Optional[str], *rules: Optional[TextRule]) -> bool:
    """True when at least one of ``rules`` matches ``text``."""
    return RulePipeline(*rules).any_match(text)


def find_any(text: Optional[str], *rules: Optional[TextRule]) -> List[str]:
    return RulePipeline(*rules).find_any(text)
