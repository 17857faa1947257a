"""
text_commonizer - rule-based Unicode text normalization.

Whitespace and control-character cleanup, CJK width folding and
Hiragana/Katakana conversion built from prioritized regex rules.
"""

from text_commonizer.commonizer import (
    denormalize_cjk,
    hiraganize,
    katakanize,
    normalize_cjk,
    optimize,
    trim,
    trim_multiline,
)
from text_commonizer.utils.codepoints import code_points, new_string

__version__ = "0.1.0"

__all__ = [
    "optimize",
    "trim",
    "trim_multiline",
    "normalize_cjk",
    "denormalize_cjk",
    "hiraganize",
    "katakanize",
    "new_string",
    "code_points",
    "__version__",
]
