"""Codepoint classification helpers.

Python's standard library has no notion of Unicode blocks, so the blocks the
normalizers care about are kept in a sorted range table and looked up with
``bisect``. The whitespace predicate follows the line-breaking definition
(separators plus ASCII layout controls) and leaves the
no-break spaces out.
"""

from __future__ import annotations

import bisect
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple

MAX_CODE_POINT = 0x10FFFF


class UnicodeBlock(str, Enum):
    """Unicode blocks known to the normalizers."""

    BASIC_LATIN = "Basic Latin"
    LATIN_1_SUPPLEMENT = "Latin-1 Supplement"
    GENERAL_PUNCTUATION = "General Punctuation"
    CURRENCY_SYMBOLS = "Currency Symbols"
    BOX_DRAWING = "Box Drawing"
    CJK_RADICALS_SUPPLEMENT = "CJK Radicals Supplement"
    KANGXI_RADICALS = "Kangxi Radicals"
    CJK_SYMBOLS_AND_PUNCTUATION = "CJK Symbols and Punctuation"
    HIRAGANA = "Hiragana"
    KATAKANA = "Katakana"
    BOPOMOFO = "Bopomofo"
    HANGUL_COMPATIBILITY_JAMO = "Hangul Compatibility Jamo"
    KATAKANA_PHONETIC_EXTENSIONS = "Katakana Phonetic Extensions"
    ENCLOSED_CJK_LETTERS_AND_MONTHS = "Enclosed CJK Letters and Months"
    CJK_COMPATIBILITY = "CJK Compatibility"
    CJK_UNIFIED_IDEOGRAPHS = "CJK Unified Ideographs"
    HANGUL_SYLLABLES = "Hangul Syllables"
    CJK_COMPATIBILITY_IDEOGRAPHS = "CJK Compatibility Ideographs"
    HALFWIDTH_AND_FULLWIDTH_FORMS = "Halfwidth and Fullwidth Forms"
    KANA_SUPPLEMENT = "Kana Supplement"
    KANA_EXTENDED_A = "Kana Extended-A"
    SMALL_KANA_EXTENSION = "Small Kana Extension"


# (first, last, block), sorted by first codepoint; ranges never overlap
BLOCK_RANGES: Tuple[Tuple[int, int, UnicodeBlock], ...] = (
    (0x0000, 0x007F, UnicodeBlock.BASIC_LATIN),
    (0x0080, 0x00FF, UnicodeBlock.LATIN_1_SUPPLEMENT),
    (0x2000, 0x206F, UnicodeBlock.GENERAL_PUNCTUATION),
    (0x20A0, 0x20CF, UnicodeBlock.CURRENCY_SYMBOLS),
    (0x2500, 0x257F, UnicodeBlock.BOX_DRAWING),
    (0x2E80, 0x2EFF, UnicodeBlock.CJK_RADICALS_SUPPLEMENT),
    (0x2F00, 0x2FDF, UnicodeBlock.KANGXI_RADICALS),
    (0x3000, 0x303F, UnicodeBlock.CJK_SYMBOLS_AND_PUNCTUATION),
    (0x3040, 0x309F, UnicodeBlock.HIRAGANA),
    (0x30A0, 0x30FF, UnicodeBlock.KATAKANA),
    (0x3100, 0x312F, UnicodeBlock.BOPOMOFO),
    (0x3130, 0x318F, UnicodeBlock.HANGUL_COMPATIBILITY_JAMO),
    (0x31F0, 0x31FF, UnicodeBlock.KATAKANA_PHONETIC_EXTENSIONS),
    (0x3200, 0x32FF, UnicodeBlock.ENCLOSED_CJK_LETTERS_AND_MONTHS),
    (0x3300, 0x33FF, UnicodeBlock.CJK_COMPATIBILITY),
    (0x4E00, 0x9FFF, UnicodeBlock.CJK_UNIFIED_IDEOGRAPHS),
    (0xAC00, 0xD7AF, UnicodeBlock.HANGUL_SYLLABLES),
    (0xF900, 0xFAFF, UnicodeBlock.CJK_COMPATIBILITY_IDEOGRAPHS),
    (0xFF00, 0xFFEF, UnicodeBlock.HALFWIDTH_AND_FULLWIDTH_FORMS),
    (0x1B000, 0x1B0FF, UnicodeBlock.KANA_SUPPLEMENT),
    (0x1B100, 0x1B12F, UnicodeBlock.KANA_EXTENDED_A),
    (0x1B130, 0x1B16F, UnicodeBlock.SMALL_KANA_EXTENSION),
)

_BLOCK_STARTS = [first for first, _, _ in BLOCK_RANGES]

# Line-breaking whitespace: ASCII layout controls, the information separators
# U+001C..U+001F and every space separator except the no-break ones
WHITESPACE_CODEPOINTS: FrozenSet[int] = frozenset(
    [*range(0x0009, 0x000E), *range(0x001C, 0x0021), 0x1680]
    + [*range(0x2000, 0x2007), *range(0x2008, 0x200B)]
    + [0x2028, 0x2029, 0x205F, 0x3000]
)


def block_range(block: UnicodeBlock) -> Tuple[int, int]:
    """Return the inclusive ``(first, last)`` codepoints of ``block``."""
    for first, last, candidate in BLOCK_RANGES:
        if candidate is block:
            return first, last
    raise ValueError(f"Unicode block {block!r} has no registered range")


def block_of(code_point: int) -> Optional[UnicodeBlock]:
    """Return the block containing ``code_point``, or None when unknown."""
    index = bisect.bisect_right(_BLOCK_STARTS, code_point) - 1
    if index >= 0:
        first, last, block = BLOCK_RANGES[index]
        if first <= code_point <= last:
            return block
    return None


def is_whitespace(code_point: int) -> bool:
    return code_point in WHITESPACE_CODEPOINTS


def is_valid_code_point(code_point: int) -> bool:
    return 0 <= code_point <= MAX_CODE_POINT


def new_string(*code_points: int) -> str:
    """Build a string from codepoints, silently dropping invalid values.

    Example:
        >>> new_string(-1, 0x52AB)
        '劫'
    """
    return "".join(chr(cp) for cp in code_points if is_valid_code_point(cp))


def code_points(*texts: Optional[str]) -> List[int]:
    """Concatenate ``texts`` (None entries skipped) and list their codepoints."""
    return [ord(char) for text in texts if text for char in text]


def char_class(
    ranges: Iterable[Tuple[int, int]],
    exclude: Iterable[int] = (),
    negate: bool = False,
) -> str:
    """Render a regex character class covering ``ranges`` minus ``exclude``.

    Python's ``re`` has no class intersection, so exclusions are applied by
    splitting the ranges before rendering.
    """
    excluded = sorted(set(exclude))
    pieces: List[str] = []
    for first, last in sorted(ranges):
        start = first
        for cp in excluded:
            if cp < start or cp > last:
                continue
            if cp > start:
                pieces.append(_render_range(start, cp - 1))
            start = cp + 1
        if start <= last:
            pieces.append(_render_range(start, last))

    if not pieces:
        raise ValueError("Character class would be empty")
    return "[" + ("^" if negate else "") + "".join(pieces) + "]"


def char_class_of(code_points_: Iterable[int], negate: bool = False) -> str:
    """Render a regex character class for an arbitrary set of codepoints."""
    ordered = sorted(set(code_points_))
    ranges: List[Tuple[int, int]] = []
    for cp in ordered:
        if ranges and ranges[-1][1] == cp - 1:
            ranges[-1] = (ranges[-1][0], cp)
        else:
            ranges.append((cp, cp))
    return char_class(ranges, negate=negate)


def _render_range(first: int, last: int) -> str:
    if first == last:
        return f"\\U{first:08x}"
    return f"\\U{first:08x}-\\U{last:08x}"
