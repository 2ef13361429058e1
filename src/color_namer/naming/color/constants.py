# constants.py
# ============

"""
constants.
=========

Does: Define global, immutable color-domain constants for naming
      (base colors, fixed hue boundaries, achromatic gates, prefix cutoffs,
      alias tie gap, neutral tiers of the extended palette).
Used By: Hue geometry, alias scoring, vocabulary parsing and the name pipeline.
Returns: Pure data structures only (no side effects).

Notes:
- The orange/yellow and purple/pink boundaries are not constants; they shift with
  saturation and brightness and live in hue_geometry.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


# ── 1) Base colors ───────────────────────────────────────────────────────────
class BaseColor(str, Enum):
    """The eleven basic color categories; the value is the display name."""

    BLACK = "Black"
    WHITE = "White"
    GRAY = "Gray"
    RED = "Red"
    ORANGE = "Orange"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    PURPLE = "Purple"
    PINK = "Pink"
    BROWN = "Brown"


CHROMATIC_BASES: frozenset[BaseColor] = frozenset(
    {
        BaseColor.RED,
        BaseColor.ORANGE,
        BaseColor.YELLOW,
        BaseColor.GREEN,
        BaseColor.BLUE,
        BaseColor.PURPLE,
        BaseColor.PINK,
        BaseColor.BROWN,
    }
)

# Bases that may take a "Grayish-" form at low saturation
GRAYISH_ELIGIBLE_BASES: frozenset[BaseColor] = CHROMATIC_BASES

ACHROMATIC_BASES: frozenset[BaseColor] = frozenset(
    {BaseColor.BLACK, BaseColor.WHITE, BaseColor.GRAY}
)


# ── 2) Hue boundaries ────────────────────────────────────────────────────────
class HueBoundary(NamedTuple):
    """A hue angle (degrees) separating two adjacent base colors."""

    a: BaseColor
    b: BaseColor
    angle: float

    def includes(self, color: BaseColor | None) -> bool:
        return color is not None and (self.a == color or self.b == color)

    def is_between(self, first: BaseColor, second: BaseColor) -> bool:
        return (self.a == first and self.b == second) or (
            self.a == second and self.b == first
        )

    def other(self, color: BaseColor) -> BaseColor:
        return self.b if self.a == color else self.a


RED_ORANGE_BOUNDARY = 18.0
YELLOW_GREEN_BOUNDARY = 78.0
GREEN_BLUE_BOUNDARY = 170.0
BLUE_PURPLE_BOUNDARY = 250.0
PINK_RED_BOUNDARY = 347.5


# ── 3) Achromatic gates & prefixes ───────────────────────────────────────────
BLACK_MAX_BRIGHTNESS = 0.10
WHITE_MIN_BRIGHTNESS = 0.94
WHITE_MAX_SATURATION = 0.12
GRAY_MAX_SATURATION = 0.10

# Below this saturation a chromatic base becomes "Grayish-<base>" (or White/Gray)
GRAYISH_MAX_SATURATION = 0.24
GRAYISH_WHITE_MIN_BRIGHTNESS = 0.85

LIGHT_DARK_MIN_SATURATION = 0.28
LIGHT_MIN_BRIGHTNESS = 0.88
DARK_MAX_BRIGHTNESS = 0.18


# ── 4) Alias selection ───────────────────────────────────────────────────────
# Top two candidates closer than this → no alias
ALIAS_TIE_GAP = 0.05


# ── 5) Extended palette neutrals ─────────────────────────────────────────────
ISCC_NEUTRAL_MAX_SATURATION = 0.04

# (min brightness, label), checked after the black tier
ISCC_NEUTRAL_TIERS: tuple[tuple[float, str], ...] = (
    (0.72, "Light Gray"),
    (0.35, "Medium Gray"),
)
ISCC_NEUTRAL_WHITE_MIN_BRIGHTNESS = 0.95
ISCC_NEUTRAL_BLACK_MAX_BRIGHTNESS = 0.08

PURE_WHITE_HEX = "FFFFFF"
PURE_BLACK_HEX = "000000"

CLOSEST_SUFFIX = " (closest)"
UNKNOWN_NAME = "Unknown"
