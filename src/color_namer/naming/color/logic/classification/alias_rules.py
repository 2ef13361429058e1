"""
alias_rules.py

Does:
    Declare the colloquial alias table ("teal", "maroon", "olive", ...) scored by
    alias_scoring. Several aliases appear more than once with different hue
    windows; each row is an independent rule and the order of rows is kept.
Returns:
    AliasRule records and the ordered COLOR_ALIAS_RULES tuple.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional, Tuple

from color_namer.naming.color.constants import BaseColor
from color_namer.naming.color.utils.hue_math import normalize_hue

__all__ = ["AliasRule", "hue_alias", "neutral_alias", "COLOR_ALIAS_RULES"]

Range = Tuple[float, float]


class AliasRule(NamedTuple):
    name: str
    allowed_bases: frozenset[BaseColor]
    hue_center: Optional[float]
    hue_radius: Optional[float]
    saturation_range: Range
    brightness_range: Range
    minimum_score: float

    @property
    def is_hue_rule(self) -> bool:
        return self.hue_center is not None and self.hue_radius is not None


def hue_alias(
    name: str,
    bases: Iterable[BaseColor],
    hue: float,
    radius: float,
    saturation: Range,
    brightness: Range,
    minimum_score: float = 0.84,
) -> AliasRule:
    """Alias scored on hue distance from `hue` plus saturation/brightness fit."""
    return AliasRule(
        name, frozenset(bases), normalize_hue(hue), radius, saturation, brightness, minimum_score
    )


def neutral_alias(
    name: str,
    bases: Iterable[BaseColor],
    saturation: Range,
    brightness: Range,
    minimum_score: float = 0.80,
) -> AliasRule:
    """Alias scored on saturation/brightness fit only."""
    return AliasRule(name, frozenset(bases), None, None, saturation, brightness, minimum_score)


_RED, _ORANGE, _YELLOW = BaseColor.RED, BaseColor.ORANGE, BaseColor.YELLOW
_GREEN, _BLUE, _PURPLE = BaseColor.GREEN, BaseColor.BLUE, BaseColor.PURPLE
_PINK, _BROWN = BaseColor.PINK, BaseColor.BROWN
_GRAY, _WHITE = BaseColor.GRAY, BaseColor.WHITE

COLOR_ALIAS_RULES: Tuple[AliasRule, ...] = (
    # ── Blue/green boundary ──────────────────────────────────────────────────
    hue_alias("teal", [_BLUE, _GREEN], 172, 18, (0.24, 1.0), (0.16, 0.84), 0.58),
    hue_alias("teal", [_BLUE, _GREEN], 160, 15, (0.20, 0.80), (0.32, 0.88), 0.58),
    hue_alias("teal", [_BLUE, _GREEN], 184, 12, (0.50, 1.0), (0.18, 0.68), 0.55),
    hue_alias("teal", [_BLUE, _GREEN], 180, 22, (0.15, 1.0), (0.12, 0.95), 0.46),
    hue_alias("teal", [_BLUE, _GREEN], 190, 16, (0.35, 1.0), (0.24, 0.82), 0.44),
    hue_alias("turquoise", [_BLUE, _GREEN], 176, 12, (0.30, 0.95), (0.68, 1.0), 0.78),
    hue_alias("cyan", [_BLUE, _GREEN], 182, 10, (0.70, 1.0), (0.82, 1.0), 0.80),
    hue_alias("cyan", [_BLUE, _GREEN], 186, 8, (0.55, 1.0), (0.68, 0.88), 0.78),
    hue_alias("aqua", [_BLUE, _GREEN], 178, 10, (0.18, 0.55), (0.88, 1.0), 0.78),
    hue_alias("seafoam", [_GREEN, _BLUE], 160, 15, (0.12, 0.50), (0.72, 1.0), 0.84),
    hue_alias("mint", [_GREEN], 150, 16, (0.18, 0.65), (0.72, 1.0), 0.84),
    hue_alias("sage", [_GREEN], 102, 18, (0.12, 0.45), (0.45, 0.78), 0.83),
    hue_alias("emerald green", [_GREEN], 145, 14, (0.55, 1.0), (0.35, 0.85), 0.86),
    # ── Yellow/green ─────────────────────────────────────────────────────────
    hue_alias("chartreuse", [_YELLOW, _GREEN], 90, 16, (0.40, 1.0), (0.50, 0.94), 0.66),
    hue_alias("lime", [_YELLOW, _GREEN], 120, 16, (0.45, 1.0), (0.55, 1.0), 0.67),
    hue_alias("lime", [_YELLOW, _GREEN], 98, 18, (0.35, 1.0), (0.50, 1.0), 0.46),
    hue_alias("lime", [_YELLOW, _GREEN], 72, 16, (0.30, 1.0), (0.60, 1.0), 0.40),
    hue_alias("lime", [_YELLOW, _GREEN], 66, 12, (0.55, 1.0), (0.70, 1.0), 0.48),
    hue_alias("lime", [_YELLOW, _GREEN], 90, 12, (0.85, 1.0), (0.85, 1.0), 0.60),
    hue_alias("olive", [_GREEN], 78, 18, (0.22, 1.0), (0.10, 0.58), 0.48),
    hue_alias("olive", [_GREEN], 96, 14, (0.30, 0.90), (0.10, 0.55), 0.52),
    # ── Blues & purples ──────────────────────────────────────────────────────
    hue_alias("sky blue", [_BLUE], 198, 16, (0.25, 0.75), (0.68, 1.0), 0.85),
    hue_alias("royal blue", [_BLUE], 224, 12, (0.55, 1.0), (0.45, 0.85), 0.86),
    hue_alias("navy blue", [_BLUE], 228, 10, (0.45, 1.0), (0.12, 0.42), 0.86),
    hue_alias("periwinkle", [_BLUE, _PURPLE], 240, 14, (0.18, 0.55), (0.62, 1.0), 0.85),
    hue_alias("indigo", [_BLUE, _PURPLE], 270, 20, (0.35, 1.0), (0.15, 0.78), 0.58),
    hue_alias("lavender", [_PURPLE, _BLUE], 270, 16, (0.18, 0.52), (0.72, 1.0), 0.84),
    hue_alias("lavender", [_PURPLE, _BLUE, _WHITE], 240, 18, (0.02, 0.20), (0.92, 1.0), 0.62),
    hue_alias("lilac", [_PURPLE, _PINK], 288, 14, (0.25, 0.62), (0.62, 0.95), 0.84),
    hue_alias("mauve", [_PURPLE, _PINK], 312, 14, (0.18, 0.52), (0.42, 0.82), 0.84),
    hue_alias("plum", [_PURPLE], 300, 14, (0.35, 0.85), (0.25, 0.65), 0.85),
    # ── Pinks & magentas ─────────────────────────────────────────────────────
    hue_alias("fuchsia", [_PINK, _PURPLE], 300, 12, (0.75, 1.0), (0.72, 1.0), 0.55),
    hue_alias("magenta", [_PINK, _PURPLE], 300, 8, (0.85, 1.0), (0.32, 0.80), 0.58),
    hue_alias("magenta", [_PINK, _PURPLE], 312, 18, (0.35, 0.90), (0.28, 0.90), 0.48),
    # ── Reds ─────────────────────────────────────────────────────────────────
    hue_alias("rose", [_PINK, _RED], 346, 12, (0.28, 0.80), (0.52, 0.95), 0.84),
    hue_alias("crimson", [_RED], 350, 18, (0.45, 1.0), (0.28, 0.95), 0.55),
    hue_alias("vermilion", [_RED, _ORANGE], 14, 12, (0.62, 1.0), (0.52, 1.0), 0.86),
    hue_alias("coral", [_RED, _ORANGE, _PINK], 12, 14, (0.35, 0.85), (0.68, 1.0), 0.84),
    hue_alias("salmon", [_PINK, _ORANGE, _RED], 16, 15, (0.20, 0.62), (0.62, 0.95), 0.84),
    hue_alias("brick", [_RED, _ORANGE, _BROWN], 14, 10, (0.35, 0.80), (0.25, 0.60), 0.85),
    hue_alias("scarlet", [_RED, _ORANGE], 4, 10, (0.75, 1.0), (0.45, 0.95), 0.87),
    hue_alias("ruby", [_RED, _PINK], 350, 9, (0.68, 1.0), (0.35, 0.80), 0.87),
    hue_alias("cherry", [_RED], 358, 10, (0.72, 1.0), (0.40, 0.90), 0.87),
    hue_alias("burgundy", [_RED, _PURPLE], 340, 13, (0.40, 0.90), (0.16, 0.48), 0.86),
    hue_alias("maroon", [_RED, _BROWN], 355, 12, (0.35, 0.90), (0.10, 0.40), 0.86),
    # ── Oranges & yellows ────────────────────────────────────────────────────
    hue_alias("amber", [_ORANGE, _YELLOW], 42, 12, (0.60, 1.0), (0.50, 1.0), 0.85),
    hue_alias("schoolbus", [_YELLOW, _ORANGE], 44, 8, (0.70, 1.0), (0.85, 1.0), 0.75),
    hue_alias("tangerine", [_ORANGE], 26, 10, (0.65, 1.0), (0.65, 1.0), 0.86),
    hue_alias("mustard", [_YELLOW, _BROWN], 52, 10, (0.45, 0.90), (0.38, 0.75), 0.85),
    hue_alias("saffron", [_YELLOW, _ORANGE], 46, 11, (0.55, 1.0), (0.62, 1.0), 0.86),
    hue_alias("gold", [_YELLOW, _ORANGE], 50, 14, (0.38, 1.0), (0.45, 1.0), 0.56),
    hue_alias("rust", [_ORANGE, _RED, _BROWN], 21, 12, (0.45, 0.95), (0.20, 0.58), 0.85),
    hue_alias("ochre", [_YELLOW, _ORANGE, _BROWN], 38, 12, (0.35, 0.85), (0.36, 0.82), 0.85),
    # ── Browns ───────────────────────────────────────────────────────────────
    hue_alias("tan", [_BROWN, _YELLOW], 34, 14, (0.20, 0.50), (0.62, 0.90), 0.84),
    hue_alias("beige", [_BROWN, _YELLOW, _GRAY], 40, 14, (0.08, 0.30), (0.72, 0.96), 0.84),
    hue_alias("taupe", [_BROWN, _GRAY], 28, 16, (0.04, 0.22), (0.35, 0.72), 0.84),
    hue_alias("chocolate", [_BROWN], 22, 9, (0.45, 0.95), (0.08, 0.42), 0.86),
    hue_alias("caramel", [_BROWN, _ORANGE], 30, 10, (0.45, 0.90), (0.32, 0.68), 0.85),
    hue_alias("mocha", [_BROWN], 24, 9, (0.35, 0.78), (0.14, 0.45), 0.86),
    hue_alias("walnut", [_BROWN], 26, 9, (0.28, 0.72), (0.12, 0.42), 0.86),
    # ── Neutrals ─────────────────────────────────────────────────────────────
    neutral_alias("ivory", [_WHITE, _YELLOW], (0.02, 0.18), (0.90, 1.0), 0.81),
    neutral_alias("linen", [_WHITE, _YELLOW, _GRAY], (0.03, 0.16), (0.82, 0.95), 0.81),
    neutral_alias("silver", [_GRAY], (0.00, 0.10), (0.60, 0.92), 0.58),
    hue_alias("slate", [_GRAY, _BLUE], 210, 10, (0.08, 0.34), (0.28, 0.72), 0.70),
    hue_alias("slate", [_GRAY, _BLUE], 222, 12, (0.14, 0.52), (0.20, 0.60), 0.72),
    hue_alias("steel blue", [_BLUE], 208, 12, (0.25, 0.72), (0.38, 0.86), 0.72),
    neutral_alias("graphite", [_GRAY], (0.00, 0.10), (0.18, 0.40), 0.84),
    hue_alias("gunmetal", [_GRAY, _BLUE], 210, 15, (0.08, 0.30), (0.16, 0.38), 0.85),
    neutral_alias("charcoal", [_GRAY], (0.00, 0.12), (0.08, 0.30), 0.85),
)
