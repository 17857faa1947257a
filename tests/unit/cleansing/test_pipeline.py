"""Unit tests for RulePipeline ordering and the one-shot helpers."""

from dataclasses import dataclass
from typing import Optional

import pytest

from text_commonizer.cleansing.pipeline import (
    RulePipeline,
    any_match,
    find_any,
    replace_all,
)
from text_commonizer.cleansing.rules.base import Rule


@dataclass
class _Appender:
    suffix: str
    priority: Optional[int]

    def replace_all(self, text):
        return None if text is None else text + self.suffix


@pytest.mark.unit
class TestRulePipeline:
    def test_rules_run_in_ascending_priority(self):
        pipeline = RulePipeline(Rule.simple("b", "c", 2), Rule.simple("a", "b", 1))
        assert pipeline("ab") == "cc"

    def test_sort_is_stable_for_equal_priorities(self):
        pipeline = RulePipeline(_Appender("1", 5), _Appender("2", 5), _Appender("0", 0))
        assert pipeline.apply("") == "012"

    def test_none_rules_are_dropped(self):
        pipeline = RulePipeline(None, Rule.simple("a", "b"), None)
        assert len(pipeline) == 1
        assert pipeline.apply("aa") == "bb"

    def test_missing_priority_sorts_last(self):
        pipeline = RulePipeline(_Appender("z", None), _Appender("a", 100))
        assert pipeline.apply("") == "az"

    def test_none_text_returns_none(self):
        assert RulePipeline(Rule.simple("a", "b")).apply(None) is None

    def test_rules_property_is_sorted_tuple(self):
        low, high = Rule.simple("x", "y", 1), Rule.simple("y", "z", 7)
        assert RulePipeline(high, low).rules == (low, high)


@pytest.mark.unit
class TestPipelineHelpers:
    def test_replace_all_without_rules_returns_text(self):
        assert replace_all("unchanged") == "unchanged"
        assert replace_all(None) is None

    def test_replace_all_orders_by_priority(self):
        result = replace_all(
            "hello",
            Rule.simple("l+", "L", 10),
            Rule.simple("hello", "help", 0),
        )
        assert result == "heLp"

    def test_any_match(self):
        assert any_match("abc", Rule.simple("z", ""), Rule.simple("b", "")) is True
        assert any_match("abc", Rule.simple("z", "")) is False
        assert any_match(None, Rule.simple("a", "")) is False

    def test_find_any_concatenates_in_priority_order(self):
        found = find_any(
            "a1b2",
            Rule.simple("[a-z]", "", 5),
            Rule.simple(r"\d", "", 1),
        )
        assert found == ["1", "2", "a", "b"]
