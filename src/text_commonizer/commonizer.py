"""Text normalization facade.

Every function takes ``Optional[str]`` and returns ``Optional[str]``: None
stays None, the empty string stays empty, and no string input raises.

Usage:
    >>> from text_commonizer import normalize_cjk, hiraganize
    >>> normalize_cjk("Ｈｅｌｌｏ　Ｗｏｒｌｄ．")
    'Hello World.'
    >>> hiraganize("コンニチハ　世界")
    'こんにちは 世界'
"""

from __future__ import annotations

from typing import Optional

from text_commonizer.cleansing.constants import IDEOGRAPHIC_SPACE
from text_commonizer.cleansing.pipeline import RulePipeline
from text_commonizer.cleansing.rules.cjk_rules import (
    CJK_WIDTH_NORMALIZER,
    COMPOSE_VOICED_W_KATAKANA,
    EXPAND_VOICED_W_KATAKANA,
)
from text_commonizer.cleansing.rules.whitespace_rules import (
    LINE_FEEDS_SINGLIZE,
    OPTIMIZE_RULES,
    TRIM,
    TRIM_RULES,
)
from text_commonizer.cleansing.translators import (
    HALFWIDTH_TO_FULLWIDTH,
    HIRAGANA_TO_KATAKANA,
    KATAKANA_TO_HIRAGANA,
)

_OPTIMIZE = RulePipeline(*OPTIMIZE_RULES)
_TRIM = RulePipeline(*TRIM_RULES)
_MULTILINE = RulePipeline(LINE_FEEDS_SINGLIZE, TRIM)
_HIRAGANIZE = RulePipeline(KATAKANA_TO_HIRAGANA, EXPAND_VOICED_W_KATAKANA)
_KATAKANIZE = RulePipeline(HIRAGANA_TO_KATAKANA, COMPOSE_VOICED_W_KATAKANA)


def optimize(text: Optional[str]) -> Optional[str]:
    """Remove invisible characters, fold whitespace and trim.

    Example:
        >>> optimize("   the      String.   ")
        'the String.'
    """
    if not text:
        return text
    return _OPTIMIZE.apply(text)


def trim(text: Optional[str]) -> Optional[str]:
    """Remove invisible characters and strip whitespace (U+00A0 included) at both ends."""
    if not text:
        return text
    return _TRIM.apply(text)


def trim_multiline(text: Optional[str]) -> Optional[str]:
    """Like :func:`trim`, also dropping blank lines and whitespace around line feeds.

    Example:
        >>> trim_multiline("  \\n  trimmed  \\n  trimmed  \\n  ")
        'trimmed\\ntrimmed'
    """
    if not text:
        return text
    return _MULTILINE.apply(trim(text))


def normalize_cjk(text: Optional[str]) -> Optional[str]:
    """Optimize, then fold CJK width variants (fullwidth ASCII, halfwidth kana)."""
    if not text:
        return text
    return optimize(CJK_WIDTH_NORMALIZER.replace_all(optimize(text)))


def denormalize_cjk(text: Optional[str]) -> Optional[str]:
    """Normalize, then widen ASCII and spaces to their fullwidth forms.

    Example:
        >>> denormalize_cjk("Hello World.")
        'Ｈｅｌｌｏ\\u3000Ｗｏｒｌｄ．'
    """
    normalized = normalize_cjk(text)
    if not normalized:
        return normalized
    widened = HALFWIDTH_TO_FULLWIDTH.translate_text(normalized)
    return widened.replace(" ", IDEOGRAPHIC_SPACE)


def hiraganize(text: Optional[str]) -> Optional[str]:
    """Normalize, then convert Katakana to Hiragana.

    ヷ ヸ ヹ ヺ have no Hiragana letter and become わ゛ ゐ゛ ゑ゛ を゛.
    """
    normalized = normalize_cjk(text)
    if not normalized:
        return normalized
    return _HIRAGANIZE.apply(normalized)


def katakanize(text: Optional[str]) -> Optional[str]:
    """Normalize, then convert Hiragana to Katakana.

    わ゛ ゐ゛ ゑ゛ を゛ are composed back into ヷ ヸ ヹ ヺ.
    """
    normalized = normalize_cjk(text)
    if not normalized:
        return normalized
    return _KATAKANIZE.apply(normalized)
