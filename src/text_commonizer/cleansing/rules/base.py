"""Regex replacement rules.

A :class:`Rule` couples a compiled pattern with its replacement and a
priority. Three variants share the class and are told apart by
:class:`RuleKind`:

- ``SIMPLE``: one ``pattern.sub`` pass
- ``RECURSIVE``: repeated passes until the pattern stops matching or a pass
  leaves the text unchanged, bounded by a pass limit and a growth cap
- ``NOOP``: never matches and returns its input

Rules are immutable and safe to share between threads.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from re import Match, Pattern
from typing import Callable, List, Optional, Union

from pydantic import ValidationError

from text_commonizer.config import get_settings
from text_commonizer.utils.logging import get_logger

logger = get_logger(__name__)

Replacement = Union[str, Callable[[Match[str]], str]]

DEFAULT_RECURSION_LIMIT = 10_000

# A recursive rule stops once its result would exceed this multiple of the
# input length
MAX_GROWTH_FACTOR = 16

# Failures a replacement may raise while a rule is applied
_APPLY_ERRORS = (re.error, IndexError, TypeError, ValueError, UnicodeError)


class RuleKind(Enum):
    """Variants of a replacement rule"""

    SIMPLE = "simple"
    RECURSIVE = "recursive"
    NOOP = "noop"


@dataclass(frozen=True)
class Rule:
    """
    Immutable regex replacement with a priority.

    Attributes:
        regex: Pattern source, or None for the no-op rule.
        replacement: Template string (``\\1``, ``\\g<name>``) or a callable
            receiving the match; None is treated as the empty string.
        priority: Ordering key used by pipelines; negative values clamp to 0.
            Not part of equality.
        kind: Application strategy, see :class:`RuleKind`.

    Example:
        >>> Rule.simple(r"\\d+", "#").replace_all("room 101")
        'room #'
    """

    regex: Optional[str]
    replacement: Optional[Replacement] = ""
    priority: int = field(default=0, compare=False)
    kind: RuleKind = RuleKind.SIMPLE
    pattern: Optional[Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.replacement is None:
            object.__setattr__(self, "replacement", "")
        object.__setattr__(self, "priority", max(0, int(self.priority or 0)))

        if self.regex is None:
            object.__setattr__(self, "kind", RuleKind.NOOP)
            return

        try:
            compiled = re.compile(self.regex)
        except re.error as exc:
            raise ValueError(f"Invalid rule pattern {self.regex!r}: {exc}") from exc
        object.__setattr__(self, "pattern", compiled)

    # --- Constructors ------------------------------------------------------------
    @classmethod
    def simple(
        cls, regex: str, replacement: Optional[Replacement] = "", priority: int = 0
    ) -> "Rule":
        return cls(regex, replacement, priority, RuleKind.SIMPLE)

    @classmethod
    def recursive(
        cls, regex: str, replacement: Optional[Replacement] = "", priority: int = 0
    ) -> "Rule":
        """Rule reapplied until its output no longer changes."""
        return cls(regex, replacement, priority, RuleKind.RECURSIVE)

    @classmethod
    def noop(cls, priority: int = 0) -> "Rule":
        return cls(None, "", priority, RuleKind.NOOP)

    # --- Application -------------------------------------------------------------
    @property
    def is_noop(self) -> bool:
        return self.kind is RuleKind.NOOP or self.pattern is None

    def replace_all(self, text: Optional[str]) -> Optional[str]:
        """Replace every match in ``text``; None is returned unchanged."""
        if text is None or self.is_noop:
            return text
        if self.kind is RuleKind.RECURSIVE:
            return self._replace_until_stable(text)
        return self._substitute(text)

    def matches(self, text: Optional[str]) -> bool:
        """True when the pattern occurs anywhere in ``text``."""
        if text is None or self.is_noop:
            return False
        return self.pattern.search(text) is not None

    def find(self, text: Optional[str]) -> List[str]:
        """All matched substrings of ``text`` in order of occurrence."""
        if not text or self.is_noop:
            return []
        return [match.group(0) for match in self.pattern.finditer(text)]

    def _substitute(self, text: str) -> str:
        try:
            return self.pattern.sub(self.replacement, text)
        except _APPLY_ERRORS as exc:
            logger.warning(
                "text_rule.apply_failed",
                regex=self.regex,
                text=text,
                error=str(exc),
            )
            return text

    def _replace_until_stable(self, text: str) -> str:
        limit = _recursion_limit()
        current = text
        max_length = MAX_GROWTH_FACTOR * max(len(text), 1)
        for _ in range(limit):
            if not self.pattern.search(current):
                return current
            replaced = self._substitute(current)
            if replaced == current:
                return current
            if len(replaced) > max_length:
                logger.warning(
                    "text_rule.growth_limit_reached",
                    regex=self.regex,
                    max_length=max_length,
                    text=current,
                )
                return current
            current = replaced

        logger.warning(
            "text_rule.recursion_limit_reached",
            regex=self.regex,
            limit=limit,
            text=current,
        )
        return current


def _recursion_limit() -> int:
    try:
        return get_settings().recursion_limit
    except ValidationError:
        return DEFAULT_RECURSION_LIMIT
