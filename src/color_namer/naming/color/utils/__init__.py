"""
utils.
=====

Does: Public color utilities: hex normalization, palette distance/matching and
      hue arithmetic.
Used By: Palette store, vocab, classification and pipeline modules.
"""

from __future__ import annotations

from .hue_math import HSV, circular_distance, normalize_hue, rgb_to_hsv_degrees
from .rgb_distance import (
    PaletteEntry,
    PaletteMatch,
    UnitRGB,
    find_exact_hex,
    hex_to_unit_rgb,
    nearest_palette_match,
    normalized_hex,
    pick_closer,
    squared_distance,
    unit_rgb_to_hex,
    validate_unit_rgb,
)

__all__ = [
    # hex / rgb
    "UnitRGB",
    "normalized_hex",
    "hex_to_unit_rgb",
    "unit_rgb_to_hex",
    "validate_unit_rgb",
    # palette matching
    "PaletteEntry",
    "PaletteMatch",
    "squared_distance",
    "find_exact_hex",
    "nearest_palette_match",
    "pick_closer",
    # hue
    "HSV",
    "rgb_to_hsv_degrees",
    "normalize_hue",
    "circular_distance",
]

__docformat__ = "google"
