"""Unicode processing constants for the normalization rules.

Codepoint ranges, priorities and regex character classes shared by the
whitespace catalog, the CJK width normalizer and the translators.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

from text_commonizer.utils.codepoints import (
    WHITESPACE_CODEPOINTS,
    UnicodeBlock,
    block_range,
    char_class,
    char_class_of,
)

# Fullwidth ASCII character range (U+FF01 to U+FF5E)
FULLWIDTH_CHAR_START = 0xFF01  # Fullwidth exclamation mark ！
FULLWIDTH_CHAR_END = 0xFF5E  # Fullwidth tilde ～

# Offset to convert halfwidth ASCII to fullwidth
# fullwidth - halfwidth = 0xFEE0
FULLWIDTH_TO_HALFWIDTH_OFFSET = 0xFEE0

# Offset between the Hiragana and Katakana blocks
# katakana - hiragana = 0x60
KANA_OFFSET = 0x60

IDEOGRAPHIC_SPACE = "\u3000"
NO_BREAK_SPACE = 0x00A0

# Priorities of the built-in rules; pipelines apply lower values first
PRIORITY_REMOVE_CTRLS = 0
PRIORITY_REMOVE_EMPTIES = 1
PRIORITY_NORMALIZE_SPACES = 10
PRIORITY_TRIM_EDGES = 10
PRIORITY_SPACES_SINGLIZE = 100
PRIORITY_LINE_FEEDS_SINGLIZE = 1000
PRIORITY_TRIM = 10000
PRIORITY_NORMALIZE_CJK = 100000
PRIORITY_TRANSLATE = 200000
PRIORITY_KANA_FIXUP = 300000
PRIORITY_WIDEN_SPACES = 300000

# --- Character classes -------------------------------------------------------

# C0/C1 controls without the layout controls \t\n\v\f\r and U+001C..U+001F
CONTROLS_CLASS = char_class([(0x00, 0x08), (0x0E, 0x1B), (0x7F, 0x9F)])

# Zero-width and bidi format characters plus the General Punctuation spaces
# U+2000..U+200A
EMPTIES_CLASS = char_class([(0x2000, 0x200F), (0x202A, 0x202F), (0x2060, 0x206F)])

WHITESPACE_CLASS = char_class_of(WHITESPACE_CODEPOINTS)

# Whitespace that is neither a line feed nor a regular space; U+00A0 included
NON_SPACE_WHITESPACE_CLASS = char_class_of(
    (WHITESPACE_CODEPOINTS | {NO_BREAK_SPACE}) - {0x0A, 0x20}
)

# Whitespace without the line feed
INLINE_WHITESPACE_CLASS = char_class_of(WHITESPACE_CODEPOINTS - {0x0A})

EDGE_WHITESPACE_CLASS = char_class_of(WHITESPACE_CODEPOINTS | {NO_BREAK_SPACE})

# ASCII \s as used around line feeds
ASCII_WHITESPACE_CLASS = r"[ \t\n\x0b\x0c\r]"

# Fullwidth symbols whose NFKC form is a different glyph ($ ~ ¢ £ ¥ ₩)
CJK_NFKC_EXCLUSIONS: FrozenSet[int] = frozenset(
    {0xFF04, 0xFF5E, 0xFFE0, 0xFFE1, 0xFFE5, 0xFFE6}
)

CJK_WIDTH_BLOCKS = (
    UnicodeBlock.CJK_SYMBOLS_AND_PUNCTUATION,
    UnicodeBlock.HIRAGANA,
    UnicodeBlock.KATAKANA,
    UnicodeBlock.HALFWIDTH_AND_FULLWIDTH_FORMS,
)

CJK_RUN_CLASS = char_class(
    [block_range(block) for block in CJK_WIDTH_BLOCKS],
    exclude=CJK_NFKC_EXCLUSIONS,
)

# --- Kana --------------------------------------------------------------------

# Katakana without a Hiragana counterpart at -0x60
KATAKANA_EXCLUSIONS: FrozenSet[int] = frozenset(
    {0x30A0, *range(0x30F7, 0x30FD), 0x30FF}
)

# Hiragana without a Katakana counterpart at +0x60
HIRAGANA_EXCLUSIONS: FrozenSet[int] = frozenset(
    {0x3040, *range(0x3097, 0x309D), 0x309F}
)

# Katakana VA/VI/VE/VO spelled with Hiragana and a standalone voiced mark
KATAKANA_VOICED_W_TO_HIRAGANA: Mapping[str, str] = MappingProxyType(
    {
        "\u30f7": "\u308f\u309b",
        "\u30f8": "\u3090\u309b",
        "\u30f9": "\u3091\u309b",
        "\u30fa": "\u3092\u309b",
    }
)

# --- Fullwidth remapping ------------------------------------------------------

# Halfwidth symbols whose fullwidth form is not at +0xFEE0
FULLWIDTH_REMAP: Mapping[int, int] = MappingProxyType(
    {
        0x00B7: 0xFF65,  # middle dot -> halfwidth katakana middle dot
        0x00A2: 0xFFE0,  # cent
        0x00A3: 0xFFE1,  # pound
        0x00AC: 0xFFE2,  # not sign
        0x00AF: 0xFFE3,  # macron
        0x00A6: 0xFFE4,  # broken bar
        0x00A5: 0xFFE5,  # yen
        0x20A9: 0xFFE6,  # won
        0x2502: 0xFFE8,  # box drawings light vertical
    }
)
