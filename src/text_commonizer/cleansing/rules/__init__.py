"""Built-in text rules."""

from text_commonizer.cleansing.rules.base import Rule, RuleKind

__all__ = ["Rule", "RuleKind"]
