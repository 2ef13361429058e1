"""
name_pipeline.py
================

Does: Turn one sampled color into its three labels:
      - simplified: minimal hue name plus optional alias ("Greenish-blue (teal)")
      - detailed: web/supplementary palette name ("Alice Blue", "Navy (closest)")
      - iscc_extended: ISCC-NBS name ("Vivid Pink", "Medium Gray (closest)")
Used By: Public API (color_namer.names_for_rgb / names_for_hex) and the demo CLI.
Returns: ColorNames.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Sequence, Tuple

from color_namer.naming.color.constants import (
    CLOSEST_SUFFIX,
    ISCC_NEUTRAL_BLACK_MAX_BRIGHTNESS,
    ISCC_NEUTRAL_MAX_SATURATION,
    ISCC_NEUTRAL_TIERS,
    ISCC_NEUTRAL_WHITE_MIN_BRIGHTNESS,
    PURE_BLACK_HEX,
    PURE_WHITE_HEX,
    UNKNOWN_NAME,
)
from color_namer.naming.color.logic.classification.alias_scoring import (
    append_alias_if_needed,
)
from color_namer.naming.color.logic.classification.hue_geometry import minimal_name
from color_namer.naming.color.palettes import (
    format_css_name,
    get_css_palette,
    get_iscc_palette,
    get_supplementary_palette,
)
from color_namer.naming.color.utils.hue_math import rgb_to_hsv_degrees
from color_namer.naming.color.utils.rgb_distance import (
    find_exact_hex,
    hex_to_unit_rgb,
    nearest_palette_match,
    normalized_hex,
    pick_closer,
    unit_rgb_to_hex,
    validate_unit_rgb,
)
from color_namer.naming.color.vocab import (
    css_base_hint,
    iscc_compound_hint,
    iscc_main_base_color,
    minimal_base_color,
)

__all__ = [
    "ColorNames",
    "web_display_name",
    "nearest_iscc_extended_match",
    "names_for_rgb",
    "names_for_hex",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class ColorNames(NamedTuple):
    simplified: str
    detailed: str
    iscc_extended: str


# =============================================================================
# 1) DETAILED (web + supplementary palettes)
# =============================================================================

def web_display_name(sample_hex: str) -> str:
    """
    Does: Exact CSS name → exact supplementary name → the nearer of the two
          nearest matches with " (closest)" (CSS wins ties).
    Returns: Display name, or "Unknown" when no palette has entries.
    """
    css = get_css_palette()
    exact_css = find_exact_hex(sample_hex, css)
    if exact_css is not None:
        return format_css_name(exact_css.name)

    supplementary = get_supplementary_palette()
    exact_supp = find_exact_hex(sample_hex, supplementary)
    if exact_supp is not None:
        return exact_supp.name

    target = hex_to_unit_rgb(sample_hex)
    if target is None:
        return UNKNOWN_NAME

    css_match = nearest_palette_match(target, css)
    supp_match = nearest_palette_match(target, supplementary)
    best = pick_closer(css_match, supp_match)
    if best is None:
        return UNKNOWN_NAME
    name = format_css_name(best.entry.name) if best is css_match else best.entry.name
    return f"{name}{CLOSEST_SUFFIX}"


# =============================================================================
# 2) EXTENDED (ISCC-NBS)
# =============================================================================

def _neutral_tier(brightness: float) -> str:
    if brightness >= ISCC_NEUTRAL_WHITE_MIN_BRIGHTNESS:
        return "White"
    if brightness <= ISCC_NEUTRAL_BLACK_MAX_BRIGHTNESS:
        return "Black"
    for min_brightness, label in ISCC_NEUTRAL_TIERS:
        if brightness >= min_brightness:
            return label
    return "Dark Gray"


def nearest_iscc_extended_match(
    rgb: Sequence[float],
    sample_hex: str,
    saturation: float,
    brightness: float,
) -> Tuple[str, bool]:
    """
    Does: Pure white/black by hex, exact ISCC hex, brightness tiers for
          near-neutrals (saturation ≤ 0.04), else nearest ISCC entry by `rgb`.
    Returns: (name, is_exact).
    """
    if sample_hex == PURE_WHITE_HEX:
        return ("White", True)
    if sample_hex == PURE_BLACK_HEX:
        return ("Black", True)

    palette = get_iscc_palette()
    exact = find_exact_hex(sample_hex, palette)
    if exact is not None:
        return (exact.name, True)

    if saturation <= ISCC_NEUTRAL_MAX_SATURATION:
        return (_neutral_tier(brightness), False)

    match = nearest_palette_match(rgb, palette)
    if match is None:
        return (UNKNOWN_NAME, False)
    return (match.entry.name, False)


# =============================================================================
# 3) ORCHESTRATION
# =============================================================================

def names_for_rgb(
    rgb: Sequence[float],
    sampled_hex: Optional[str] = None,
    *,
    debug: bool = False,
) -> ColorNames:
    """
    Does: Name a color given as unit RGB (alpha, if present, is ignored).
          `sampled_hex` is the capture's own hex; when valid it is the color's
          identity for exact palette lookups, otherwise the hex is derived from rgb.
    Returns: ColorNames(simplified, detailed, iscc_extended).
    Raises: ValueError for bad arity or channels outside [0, 1].
    """
    r, g, b = validate_unit_rgb(rgb)
    hue, saturation, brightness = rgb_to_hsv_degrees((r, g, b))

    sample_hex = (
        normalized_hex(sampled_hex)
        or normalized_hex(unit_rgb_to_hex((r, g, b)))
        or PURE_BLACK_HEX
    )

    detailed = web_display_name(sample_hex)
    iscc_name, iscc_exact = nearest_iscc_extended_match(
        (r, g, b), sample_hex, saturation, brightness
    )
    iscc_extended = iscc_name if iscc_exact else f"{iscc_name}{CLOSEST_SUFFIX}"

    minimal = minimal_name(
        hue,
        saturation,
        brightness,
        iscc_hint=iscc_compound_hint(iscc_name),
        css_base_hint=css_base_hint(sample_hex),
        debug=debug,
    )
    simplified = append_alias_if_needed(
        minimal,
        minimal_base_color(minimal),
        iscc_main_base_color(iscc_name),
        hue,
        saturation,
        brightness,
        debug=debug,
    )

    if debug and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "[NAMES] %s hsv=(%.1f, %.3f, %.3f) → %r / %r / %r",
            sample_hex, hue, saturation, brightness, simplified, detailed, iscc_extended,
        )
    return ColorNames(simplified, detailed, iscc_extended)


def names_for_hex(value: str, *, debug: bool = False) -> ColorNames:
    """
    Does: Name a color given as a 6-digit hex string ("#0A0B0C" or "0a0b0c").
    Raises: ValueError when `value` is not a 6-digit hex color.
    """
    hx = normalized_hex(value)
    rgb = hex_to_unit_rgb(hx)
    if hx is None or rgb is None:
        raise ValueError(f"Not a 6-digit hex color: {value!r}")
    return names_for_rgb(rgb, hx, debug=debug)
