"""Per-codepoint translators.

Translators shift codepoints by a fixed offset, limited to one Unicode block
and minus an exclusion set, or look them up in a remap table first. They
expose ``priority`` and ``replace_all`` so they can run inside a
:class:`~text_commonizer.cleansing.pipeline.RulePipeline` next to regex rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Mapping, Optional

from text_commonizer.cleansing.constants import (
    FULLWIDTH_CHAR_END,
    FULLWIDTH_CHAR_START,
    FULLWIDTH_REMAP,
    FULLWIDTH_TO_HALFWIDTH_OFFSET,
    HIRAGANA_EXCLUSIONS,
    KANA_OFFSET,
    KATAKANA_EXCLUSIONS,
    PRIORITY_TRANSLATE,
)
from text_commonizer.cleansing.registry import RuleCategory, register_rule
from text_commonizer.utils.codepoints import (
    UnicodeBlock,
    block_of,
    code_points,
    is_whitespace,
    new_string,
)

# Printable ASCII with a fullwidth form at +0xFEE0 ("!" .. "~")
_HALFWIDTH_CHAR_START = FULLWIDTH_CHAR_START - FULLWIDTH_TO_HALFWIDTH_OFFSET
_HALFWIDTH_CHAR_END = FULLWIDTH_CHAR_END - FULLWIDTH_TO_HALFWIDTH_OFFSET


class _CodepointMapper:
    """Text-level operations shared by all translators"""

    priority: int

    def translate(self, code_point: int) -> int:
        raise NotImplementedError

    def translate_text(self, text: Optional[str]) -> Optional[str]:
        """Translate every codepoint of ``text``; invalid results are dropped."""
        if not text:
            return text
        return new_string(*(self.translate(cp) for cp in code_points(text)))

    def replace_all(self, text: Optional[str]) -> Optional[str]:
        return self.translate_text(text)

    def matches(self, text: Optional[str]) -> bool:
        return bool(self.find(text))

    def find(self, text: Optional[str]) -> List[str]:
        """Characters of ``text`` that this translator would change."""
        if not text:
            return []
        return [char for char in text if self.translate(ord(char)) != ord(char)]


@dataclass(frozen=True)
class CodepointTranslator(_CodepointMapper):
    """
    Shift codepoints of one Unicode block by a fixed offset.

    Attributes:
        offset: Signed distance added to each eligible codepoint.
        target_block: Only codepoints of this block are shifted.
        exclusions: Codepoints of the block that are left untouched.
        priority: Position when used inside a pipeline.

    Example:
        >>> KATAKANA_TO_HIRAGANA.translate_text("カタカナ")
        'かたかな'
    """

    offset: int
    target_block: UnicodeBlock
    exclusions: FrozenSet[int] = frozenset()
    priority: int = PRIORITY_TRANSLATE

    def translate(self, code_point: int) -> int:
        if code_point in self.exclusions:
            return code_point
        if block_of(code_point) is self.target_block:
            return code_point + self.offset
        return code_point


@dataclass(frozen=True)
class FullwidthTranslator(_CodepointMapper):
    """Map halfwidth characters to their fullwidth forms.

    The remap table wins; otherwise printable, non-whitespace ASCII is moved
    by ``offset`` into the Halfwidth and Fullwidth Forms block.
    """

    offset: int = FULLWIDTH_TO_HALFWIDTH_OFFSET
    remap: Mapping[int, int] = field(
        default_factory=lambda: FULLWIDTH_REMAP, compare=False
    )
    priority: int = PRIORITY_TRANSLATE

    def translate(self, code_point: int) -> int:
        mapped = self.remap.get(code_point)
        if mapped is not None:
            return mapped
        if (
            _HALFWIDTH_CHAR_START <= code_point <= _HALFWIDTH_CHAR_END
            and not is_whitespace(code_point)
        ):
            return code_point + self.offset
        return code_point


KATAKANA_TO_HIRAGANA = register_rule(
    name="katakana_to_hiragana",
    category=RuleCategory.KANA,
    description="片假名转换为平假名（ヷ..ヺ、゠、ー 等无对应字符保持不变）",
    text_rule=CodepointTranslator(
        offset=-KANA_OFFSET,
        target_block=UnicodeBlock.KATAKANA,
        exclusions=KATAKANA_EXCLUSIONS,
    ),
)

HIRAGANA_TO_KATAKANA = register_rule(
    name="hiragana_to_katakana",
    category=RuleCategory.KANA,
    description="平假名转换为片假名（浊点、半浊点等无对应字符保持不变）",
    text_rule=CodepointTranslator(
        offset=KANA_OFFSET,
        target_block=UnicodeBlock.HIRAGANA,
        exclusions=HIRAGANA_EXCLUSIONS,
    ),
)

HALFWIDTH_TO_FULLWIDTH = register_rule(
    name="halfwidth_to_fullwidth",
    category=RuleCategory.WIDTH,
    description="半角 ASCII 与符号转换为全角形式",
    text_rule=FullwidthTranslator(),
)
