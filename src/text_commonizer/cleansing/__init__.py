"""
Rule-based text cleansing framework.

Usage:
    # 1. Apply a named profile
    from text_commonizer.cleansing import registry

    registry.apply_profile("  ｶﾀｶﾅ  ", "cjk_width")  # "カタカナ"

    # 2. Compose rules directly
    from text_commonizer.cleansing import Rule, RulePipeline

    pipeline = RulePipeline(Rule.simple(" +", " "), Rule.simple("^ | $", "", 1))

    # 3. Register a custom rule
    from text_commonizer.cleansing import rule, RuleCategory

    @rule(
        name="strip_bom",
        category=RuleCategory.CUSTOM,
        description="Remove byte order marks",
    )
    def strip_bom(text):
        return text.replace("\\ufeff", "") if text else text
"""

from typing import Any, Dict, List

from text_commonizer.cleansing.pipeline import (
    RulePipeline,
    any_match,
    find_any,
    replace_all,
)
from text_commonizer.cleansing.registry import (
    CleansingRegistry,
    CleansingRule,
    RuleCategory,
    get_cleansing_registry,
    register_rule,
    registry,
    rule,
)
from text_commonizer.cleansing.rule_engine import (
    FieldCleansingResult,
    RecordCleansingResult,
    TextCleansingEngine,
)
from text_commonizer.cleansing.rules.base import Rule, RuleKind
from text_commonizer.cleansing.rules.cjk_rules import (
    CJK_WIDTH_NORMALIZER,
    CjkWidthNormalizer,
)
from text_commonizer.cleansing.translators import (
    HALFWIDTH_TO_FULLWIDTH,
    HIRAGANA_TO_KATAKANA,
    KATAKANA_TO_HIRAGANA,
    CodepointTranslator,
    FullwidthTranslator,
)

__all__: list[str] = [
    # Core components
    "Rule",
    "RuleKind",
    "RulePipeline",
    "replace_all",
    "any_match",
    "find_any",
    "registry",
    "rule",
    "register_rule",
    "RuleCategory",
    "CleansingRule",
    "CleansingRegistry",
    "get_cleansing_registry",
    # Record cleansing
    "TextCleansingEngine",
    "FieldCleansingResult",
    "RecordCleansingResult",
    # Width and kana
    "CjkWidthNormalizer",
    "CJK_WIDTH_NORMALIZER",
    "CodepointTranslator",
    "FullwidthTranslator",
    "KATAKANA_TO_HIRAGANA",
    "HIRAGANA_TO_KATAKANA",
    "HALFWIDTH_TO_FULLWIDTH",
]


def list_available_rules() -> List[Dict[str, Any]]:
    """List every registered rule with its category and priority"""
    return [
        {
            "name": rule_obj.name,
            "category": rule_obj.category.value,
            "priority": rule_obj.priority,
            "description": rule_obj.description,
        }
        for rule_obj in registry.list_all_rules()
    ]
