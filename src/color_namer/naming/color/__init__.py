"""
color.
=====

Does: Aggregate core color-domain definitions (base colors, hue boundary
      constants, word vocabularies) shared by classification and pipelines.
Used By: Hue geometry, alias scoring, name pipeline.
Returns: Pure data structures and accessor functions; palettes load lazily.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    ACHROMATIC_BASES,
    ALIAS_TIE_GAP,
    CHROMATIC_BASES,
    GRAYISH_ELIGIBLE_BASES,
    BaseColor,
    HueBoundary,
)

# ── Vocabulary ───────────────────────────────────────────────────────────────
from .vocab import (
    base_color_from_word,
    css_base_hint,
    iscc_compound_hint,
    iscc_main_base_color,
    minimal_base_color,
)

__all__ = [
    # constants
    "BaseColor",
    "HueBoundary",
    "CHROMATIC_BASES",
    "ACHROMATIC_BASES",
    "GRAYISH_ELIGIBLE_BASES",
    "ALIAS_TIE_GAP",
    # vocab
    "base_color_from_word",
    "iscc_main_base_color",
    "iscc_compound_hint",
    "css_base_hint",
    "minimal_base_color",
]
