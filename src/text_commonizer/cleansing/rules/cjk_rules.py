"""CJK width normalization and Kana fix-up rules.

The width normalizer runs three stages:

1. a pre-pass that folds dash variants to ``-`` and turns (optionally
   space-separated) voiced and semi-voiced sound marks into their halfwidth
   forms, so that NFKC composes them with the preceding kana;
2. NFKC applied to each maximal run of CJK punctuation, kana and
   halfwidth/fullwidth forms, replaced in place by match span;
3. a post-pass that turns combining sound marks left without a base into
   their spacing forms.

Fullwidth ``$ ~ ¢ £ ¥ ₩`` are kept out of the runs because NFKC would turn
them into different glyphs.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from re import Match
from typing import List, Optional

from text_commonizer.cleansing.constants import (
    CJK_RUN_CLASS,
    KATAKANA_VOICED_W_TO_HIRAGANA,
    PRIORITY_KANA_FIXUP,
    PRIORITY_NORMALIZE_CJK,
)
from text_commonizer.cleansing.pipeline import RulePipeline
from text_commonizer.cleansing.registry import RuleCategory, register_rule
from text_commonizer.cleansing.rules.base import Rule


def _nfkc(match: Match[str]) -> str:
    return unicodedata.normalize("NFKC", match.group(0))


def _expand_voiced_w(match: Match[str]) -> str:
    return KATAKANA_VOICED_W_TO_HIRAGANA[match.group(0)]


def _compose_voiced_w(match: Match[str]) -> str:
    # ワヰヱヲ + 8 = ヷヸヹヺ
    return chr(ord(match.group(1)) + 8)


DASHES_TO_HYPHEN = Rule.simple("[\u2010-\u2012]", "-", 1)
VOICED_MARK_TO_HALFWIDTH = Rule.simple(" ?[\u3099\u309b\uff9e]", "\uff9e", 2)
SEMI_VOICED_MARK_TO_HALFWIDTH = Rule.simple(" ?[\u309a\u309c\uff9f]", "\uff9f", 3)

CJK_RUNS_TO_NFKC = Rule.simple(CJK_RUN_CLASS + "+", _nfkc)

COMBINING_VOICED_MARK_TO_SPACING = Rule.simple(" ?\u3099", "\u309b", 1)
COMBINING_SEMI_VOICED_MARK_TO_SPACING = Rule.simple(" ?\u309a", "\u309c", 2)


@dataclass(frozen=True)
class CjkWidthNormalizer:
    """
    Compound rule folding CJK width variants with NFKC.

    Example:
        >>> CJK_WIDTH_NORMALIZER.replace_all("ﾃﾞｰﾀ　ＡＢＣ")
        'データ ABC'
    """

    priority: int = PRIORITY_NORMALIZE_CJK

    @property
    def pre_pass(self) -> RulePipeline:
        return _PRE_PASS

    @property
    def post_pass(self) -> RulePipeline:
        return _POST_PASS

    def replace_all(self, text: Optional[str]) -> Optional[str]:
        if not text:
            return text
        result = self.pre_pass.apply(text)
        result = CJK_RUNS_TO_NFKC.replace_all(result)
        return self.post_pass.apply(result)

    def matches(self, text: Optional[str]) -> bool:
        if not text:
            return False
        return self.pre_pass.any_match(text) or CJK_RUNS_TO_NFKC.matches(text)

    def find(self, text: Optional[str]) -> List[str]:
        """Substrings the pre-pass or the NFKC stage would rewrite."""
        return self.pre_pass.find_any(text) + CJK_RUNS_TO_NFKC.find(text)


_PRE_PASS = RulePipeline(
    DASHES_TO_HYPHEN, VOICED_MARK_TO_HALFWIDTH, SEMI_VOICED_MARK_TO_HALFWIDTH
)
_POST_PASS = RulePipeline(
    COMBINING_VOICED_MARK_TO_SPACING, COMBINING_SEMI_VOICED_MARK_TO_SPACING
)

CJK_WIDTH_NORMALIZER = register_rule(
    name="normalize_cjk",
    category=RuleCategory.WIDTH,
    description="CJK 标点、假名与全角/半角字符按 NFKC 规范化（保留 ＄ ～ ￠ ￡ ￥ ￦）",
    text_rule=CjkWidthNormalizer(),
)

EXPAND_VOICED_W_KATAKANA = register_rule(
    name="expand_voiced_w_katakana",
    category=RuleCategory.KANA,
    description="ヷヸヹヺ 拆分为平假名加浊点（わ゛ ゐ゛ ゑ゛ を゛）",
    text_rule=Rule.simple("[\u30f7-\u30fa]", _expand_voiced_w, PRIORITY_KANA_FIXUP),
)

COMPOSE_VOICED_W_KATAKANA = register_rule(
    name="compose_voiced_w_katakana",
    category=RuleCategory.KANA,
    description="ワ゛ ヰ゛ ヱ゛ ヲ゛ 合成为 ヷヸヹヺ",
    text_rule=Rule.simple(
        "([\u30ef-\u30f2])\u309b", _compose_voiced_w, PRIORITY_KANA_FIXUP
    ),
)
