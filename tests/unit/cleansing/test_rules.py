"""Unit tests for Rule variants and the built-in rule catalog."""

import logging

import pytest

from text_commonizer.cleansing.rules.base import Rule, RuleKind
from text_commonizer.cleansing.rules.whitespace_rules import (
    LINE_FEEDS_SINGLIZE,
    NORMALIZE_SPACES,
    REMOVE_CTRLS,
    REMOVE_EMPTIES,
    SPACES_SINGLIZE,
    TRIM,
    TRIM_EDGES,
)


@pytest.mark.unit
class TestRule:
    def test_simple_rule_replaces_every_match(self):
        rule = Rule.simple(r"\d+", "#")
        assert rule.replace_all("a1b22c333") == "a#b#c#"

    def test_none_text_returns_none(self):
        assert Rule.simple("a", "b").replace_all(None) is None

    def test_none_replacement_deletes_matches(self):
        rule = Rule.simple("x", None)
        assert rule.replacement == ""
        assert rule.replace_all("axbxc") == "abc"

    def test_backreferences_use_python_templates(self):
        rule = Rule.simple(r"(\w+)@(\w+)", r"\2 at \1")
        assert rule.replace_all("user@host") == "host at user"

    def test_callable_replacement_receives_match(self):
        rule = Rule.simple("[a-z]+", lambda m: m.group(0).upper())
        assert rule.replace_all("ab-cd") == "AB-CD"

    def test_negative_priority_clamps_to_zero(self):
        assert Rule.simple("a", "b", -5).priority == 0

    def test_equality_ignores_priority(self):
        assert Rule.simple("a", "b", 1) == Rule.simple("a", "b", 99)
        assert Rule.simple("a", "b") != Rule.recursive("a", "b")
        assert Rule.simple("a", "b") != Rule.simple("a", "c")

    def test_rules_are_immutable(self):
        rule = Rule.simple("a", "b")
        with pytest.raises(AttributeError):
            rule.priority = 5  # type: ignore[misc]

    def test_invalid_pattern_fails_at_construction(self):
        with pytest.raises(ValueError) as exc_info:
            Rule.simple("(unclosed", "")
        assert "Invalid rule pattern" in str(exc_info.value)

    def test_bad_group_reference_returns_input(self, caplog):
        caplog.set_level(logging.WARNING)
        rule = Rule.simple("a", r"\3")

        assert rule.replace_all("banana") == "banana"
        assert any("text_rule.apply_failed" in r.message for r in caplog.records)

    def test_failing_callable_returns_input(self):
        def broken(match):
            raise ValueError("boom")

        assert Rule.simple("a", broken).replace_all("abc") == "abc"

    def test_matches_and_find(self):
        rule = Rule.simple("o+", "0")
        assert rule.matches("foo") is True
        assert rule.matches("bar") is False
        assert rule.matches(None) is False
        assert rule.find("foo boo bar") == ["oo", "oo"]
        assert rule.find("") == []
        assert rule.find(None) == []


@pytest.mark.unit
class TestNoopRule:
    def test_noop_returns_input(self):
        rule = Rule.noop()
        assert rule.kind is RuleKind.NOOP
        assert rule.replace_all("anything") == "anything"
        assert rule.replace_all(None) is None

    def test_noop_never_matches(self):
        rule = Rule(None, "x", 3)
        assert rule.kind is RuleKind.NOOP
        assert rule.matches("text") is False
        assert rule.find("text") == []


@pytest.mark.unit
class TestRecursiveRule:
    def test_reapplies_until_no_match(self):
        rule = Rule.recursive("aa", "a")
        assert rule.replace_all("aaaaaaaa") == "a"

    def test_stops_at_fixed_point(self):
        rule = Rule.recursive("a", "a")
        assert rule.replace_all("banana") == "banana"

    def test_recursion_guard_bounds_growing_rule(self, monkeypatch, caplog):
        monkeypatch.setenv("TXC_RECURSION_LIMIT", "3")
        caplog.set_level(logging.WARNING)

        assert Rule.recursive("x", "xy").replace_all("x") == "xyyy"
        assert any(
            "text_rule.recursion_limit_reached" in r.message for r in caplog.records
        )

    def test_growth_guard_bounds_doubling_rule(self, caplog):
        caplog.set_level(logging.WARNING)

        assert Rule.recursive("a", "aa").replace_all("a") == "a" * 16
        assert any(
            "text_rule.growth_limit_reached" in r.message for r in caplog.records
        )


@pytest.mark.unit
class TestWhitespaceRules:
    def test_remove_ctrls_keeps_layout_controls(self):
        text = "a\x00b\x07c\td\ne\x1cf\x7fg\x9fh"
        assert REMOVE_CTRLS.replace_all(text) == "abc\td\ne\x1cfgh"

    def test_remove_empties(self):
        text = "a\u200bb\u200dc\u202ed\u2060e\u2003f"
        assert REMOVE_EMPTIES.replace_all(text) == "abcdef"

    def test_normalize_spaces_keeps_line_feeds(self):
        text = "a\t\tb\u00a0c\u3000d\ne  f"
        assert NORMALIZE_SPACES.replace_all(text) == "a b c d\ne  f"

    def test_spaces_singlize(self):
        assert SPACES_SINGLIZE.replace_all("a  \t b\n\nc") == "a b\n\nc"

    def test_line_feeds_singlize(self):
        text = "a  \n \n\n  b\nc"
        assert LINE_FEEDS_SINGLIZE.replace_all(text) == "a\nb\nc"

    def test_trim_keeps_no_break_space(self):
        assert TRIM.replace_all(" \u3000 a b \n") == "a b"
        assert TRIM.replace_all("\u00a0a\u00a0") == "\u00a0a\u00a0"

    def test_trim_edges_strips_no_break_space(self):
        assert TRIM_EDGES.replace_all("\u00a0 a b \u00a0") == "a b"

    def test_catalog_priorities(self):
        assert [
            REMOVE_CTRLS.priority,
            REMOVE_EMPTIES.priority,
            NORMALIZE_SPACES.priority,
            SPACES_SINGLIZE.priority,
            LINE_FEEDS_SINGLIZE.priority,
            TRIM.priority,
            TRIM_EDGES.priority,
        ] == [0, 1, 10, 100, 1000, 10000, 10]

    def test_recursive_catalog_kinds(self):
        assert SPACES_SINGLIZE.kind is RuleKind.RECURSIVE
        assert LINE_FEEDS_SINGLIZE.kind is RuleKind.RECURSIVE
        assert TRIM.kind is RuleKind.SIMPLE
