"""Built-in control character and whitespace rules.

"Whitespace" here is the line-breaking set from
:data:`text_commonizer.utils.codepoints.WHITESPACE_CODEPOINTS`; the
no-break space U+00A0 is only folded by ``normalize_spaces`` and
``trim_edges``.
"""

from __future__ import annotations

from text_commonizer.cleansing.constants import (
    ASCII_WHITESPACE_CLASS,
    CONTROLS_CLASS,
    EDGE_WHITESPACE_CLASS,
    EMPTIES_CLASS,
    INLINE_WHITESPACE_CLASS,
    NON_SPACE_WHITESPACE_CLASS,
    PRIORITY_LINE_FEEDS_SINGLIZE,
    PRIORITY_NORMALIZE_SPACES,
    PRIORITY_REMOVE_CTRLS,
    PRIORITY_REMOVE_EMPTIES,
    PRIORITY_SPACES_SINGLIZE,
    PRIORITY_TRIM,
    PRIORITY_TRIM_EDGES,
    WHITESPACE_CLASS,
)
from text_commonizer.cleansing.registry import RuleCategory, register_rule
from text_commonizer.cleansing.rules.base import Rule

REMOVE_CTRLS = register_rule(
    name="remove_ctrls",
    category=RuleCategory.CONTROL,
    description="移除 C0/C1 控制字符（保留 \\t \\n \\v \\f \\r 与 U+001C..U+001F）",
    text_rule=Rule.simple(CONTROLS_CLASS + "+", "", PRIORITY_REMOVE_CTRLS),
)

REMOVE_EMPTIES = register_rule(
    name="remove_empties",
    category=RuleCategory.CONTROL,
    description="移除零宽字符、双向控制符及 General Punctuation 空白",
    text_rule=Rule.simple(EMPTIES_CLASS + "+", "", PRIORITY_REMOVE_EMPTIES),
)

NORMALIZE_SPACES = register_rule(
    name="normalize_spaces",
    category=RuleCategory.WHITESPACE,
    description="将除换行和半角空格外的空白（含 U+00A0）统一为单个半角空格",
    text_rule=Rule.simple(
        NON_SPACE_WHITESPACE_CLASS + "+", " ", PRIORITY_NORMALIZE_SPACES
    ),
)

SPACES_SINGLIZE = register_rule(
    name="spaces_singlize",
    category=RuleCategory.WHITESPACE,
    description="连续的非换行空白压缩为单个半角空格",
    text_rule=Rule.recursive(
        INLINE_WHITESPACE_CLASS + "{2,}", " ", PRIORITY_SPACES_SINGLIZE
    ),
)

LINE_FEEDS_SINGLIZE = register_rule(
    name="line_feeds_singlize",
    category=RuleCategory.WHITESPACE,
    description="换行两侧的空白与连续换行压缩为单个换行",
    text_rule=Rule.recursive(
        rf"{ASCII_WHITESPACE_CLASS}+\n|\n{ASCII_WHITESPACE_CLASS}+",
        "\n",
        PRIORITY_LINE_FEEDS_SINGLIZE,
    ),
)

TRIM = register_rule(
    name="trim",
    category=RuleCategory.WHITESPACE,
    description="移除首尾空白",
    text_rule=Rule.simple(
        rf"\A{WHITESPACE_CLASS}+|{WHITESPACE_CLASS}+\Z", "", PRIORITY_TRIM
    ),
)

TRIM_EDGES = register_rule(
    name="trim_edges",
    category=RuleCategory.WHITESPACE,
    description="移除首尾空白（含不换行空格 U+00A0）",
    text_rule=Rule.simple(
        rf"\A{EDGE_WHITESPACE_CLASS}+|{EDGE_WHITESPACE_CLASS}+\Z",
        "",
        PRIORITY_TRIM_EDGES,
    ),
)

OPTIMIZE_RULES = (
    REMOVE_CTRLS,
    REMOVE_EMPTIES,
    NORMALIZE_SPACES,
    SPACES_SINGLIZE,
    LINE_FEEDS_SINGLIZE,
    TRIM,
)

TRIM_RULES = (REMOVE_CTRLS, REMOVE_EMPTIES, TRIM_EDGES, TRIM)
