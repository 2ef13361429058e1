"""
hue_geometry.py

Does:
    Classify an HSV color into a minimal name ("Red", "Light Blue",
    "Greenish-blue", "Grayish-purple") using seven hue boundaries, two of which
    move with saturation/brightness, plus CSS and ISCC-NBS hints that may
    override the computed base or redirect a compound.
Returns:
    minimal_name() → str; the helpers return boundaries, bases, thresholds.
"""

from __future__ import annotations

# ── Imports & Public API ──────────────────────────────────────────────────────
import logging
from typing import List, Optional, Tuple

from color_namer.naming.color.constants import (
    ACHROMATIC_BASES,
    BLACK_MAX_BRIGHTNESS,
    BLUE_PURPLE_BOUNDARY,
    DARK_MAX_BRIGHTNESS,
    GRAY_MAX_SATURATION,
    GRAYISH_ELIGIBLE_BASES,
    GRAYISH_MAX_SATURATION,
    GRAYISH_WHITE_MIN_BRIGHTNESS,
    GREEN_BLUE_BOUNDARY,
    LIGHT_DARK_MIN_SATURATION,
    LIGHT_MIN_BRIGHTNESS,
    PINK_RED_BOUNDARY,
    RED_ORANGE_BOUNDARY,
    WHITE_MAX_SATURATION,
    WHITE_MIN_BRIGHTNESS,
    YELLOW_GREEN_BOUNDARY,
    BaseColor,
    HueBoundary,
)
from color_namer.naming.color.utils.hue_math import circular_distance, normalize_hue

__all__ = [
    "CompoundHint",
    "HUE_COMPOUNDS",
    "orange_yellow_boundary",
    "yellow_green_boundary",
    "purple_pink_boundary",
    "hue_boundaries",
    "chromatic_base",
    "nearest_boundary",
    "shared_boundary",
    "should_adopt_css_base",
    "compound_ambiguity_threshold",
    "hue_compound",
    "apply_light_dark_prefix",
    "minimal_name",
]

logger = logging.getLogger(__name__)

# (modifier, base)
CompoundHint = Tuple[BaseColor, BaseColor]

HUE_COMPOUNDS: dict[CompoundHint, str] = {
    (BaseColor.RED, BaseColor.ORANGE): "Reddish-orange",
    (BaseColor.YELLOW, BaseColor.ORANGE): "Yellowish-orange",
    (BaseColor.ORANGE, BaseColor.YELLOW): "Orangish-yellow",
    (BaseColor.YELLOW, BaseColor.GREEN): "Yellowish-green",
    (BaseColor.BLUE, BaseColor.GREEN): "Bluish-green",
    (BaseColor.GREEN, BaseColor.BLUE): "Greenish-blue",
    (BaseColor.PURPLE, BaseColor.BLUE): "Purplish-blue",
    (BaseColor.BLUE, BaseColor.PURPLE): "Bluish-purple",
    (BaseColor.PINK, BaseColor.PURPLE): "Pinkish-purple",
    (BaseColor.PURPLE, BaseColor.PINK): "Purplish-pink",
    (BaseColor.RED, BaseColor.PINK): "Reddish-pink",
}


# ── Boundaries ───────────────────────────────────────────────────────────────
def orange_yellow_boundary(saturation: float, brightness: float) -> float:
    """Vivid oranges reach further toward yellow; pale light ones stop earlier."""
    if saturation >= 0.75:
        return 43.0
    if brightness >= 0.80 and saturation <= 0.65:
        return 35.0
    return 40.0


def yellow_green_boundary() -> float:
    return YELLOW_GREEN_BOUNDARY


def purple_pink_boundary(saturation: float, brightness: float) -> float:
    if brightness < 0.45:
        return 342.0
    if brightness < 0.68 and saturation > 0.55:
        return 332.0
    if saturation < 0.35:
        return 305.0
    return 318.0


def hue_boundaries(saturation: float, brightness: float) -> List[HueBoundary]:
    """Does: The seven boundaries, red/orange first, pink/red last."""
    return [
        HueBoundary(BaseColor.RED, BaseColor.ORANGE, RED_ORANGE_BOUNDARY),
        HueBoundary(BaseColor.ORANGE, BaseColor.YELLOW, orange_yellow_boundary(saturation, brightness)),
        HueBoundary(BaseColor.YELLOW, BaseColor.GREEN, yellow_green_boundary()),
        HueBoundary(BaseColor.GREEN, BaseColor.BLUE, GREEN_BLUE_BOUNDARY),
        HueBoundary(BaseColor.BLUE, BaseColor.PURPLE, BLUE_PURPLE_BOUNDARY),
        HueBoundary(BaseColor.PURPLE, BaseColor.PINK, purple_pink_boundary(saturation, brightness)),
        HueBoundary(BaseColor.PINK, BaseColor.RED, PINK_RED_BOUNDARY),
    ]


# ── Base from hue ────────────────────────────────────────────────────────────
def chromatic_base(hue: float, saturation: float, brightness: float) -> BaseColor:
    """
    Does: Bucket a hue into a chromatic base after the pink and brown gates.
    Returns: One of the eight chromatic BaseColor members.
    """
    h = normalize_hue(hue)
    orange_yellow = orange_yellow_boundary(saturation, brightness)
    purple_pink = purple_pink_boundary(saturation, brightness)

    # Light warm reds read as pink
    if h < 12.0 and brightness >= 0.85 and saturation <= 0.75:
        return BaseColor.PINK
    if h >= 355.0 and brightness >= 0.55 and saturation <= 0.70:
        return BaseColor.PINK

    # Brown: dark orange/yellow region, unless vivid enough to stay orange
    brown_candidate = (
        saturation >= 0.25 and 0.10 <= brightness <= 0.62 and 14.0 <= h < 50.0
    )
    vivid_orange = saturation >= 0.90 and brightness >= 0.45
    if brown_candidate and not vivid_orange:
        return BaseColor.BROWN

    if h >= PINK_RED_BOUNDARY or h < RED_ORANGE_BOUNDARY:
        return BaseColor.RED
    if h < orange_yellow:
        return BaseColor.ORANGE
    if h < YELLOW_GREEN_BOUNDARY:
        return BaseColor.YELLOW
    if h < GREEN_BLUE_BOUNDARY:
        return BaseColor.GREEN
    if h < BLUE_PURPLE_BOUNDARY:
        return BaseColor.BLUE
    if h < purple_pink:
        return BaseColor.PURPLE
    return BaseColor.PINK


def nearest_boundary(
    base: BaseColor, hue: float, saturation: float, brightness: float
) -> Optional[HueBoundary]:
    """Does: Closest boundary touching `base` (first one wins on ties), None for brown/neutrals."""
    h = normalize_hue(hue)
    candidates = [b for b in hue_boundaries(saturation, brightness) if b.includes(base)]
    if not candidates:
        return None
    return min(candidates, key=lambda b: circular_distance(h, b.angle))


def shared_boundary(
    first: BaseColor, second: BaseColor, saturation: float, brightness: float
) -> Optional[HueBoundary]:
    for boundary in hue_boundaries(saturation, brightness):
        if boundary.is_between(first, second):
            return boundary
    return None


def should_adopt_css_base(
    computed: BaseColor,
    css_base: BaseColor,
    hue: float,
    saturation: float,
    brightness: float,
) -> bool:
    """
    Does: Accept the CSS-implied base only when it is the computed base or an
          adjacent one whose shared boundary is close to the hue
          (10° when saturation ≥ 0.80; otherwise 12° widened for pale/dark colors).
    """
    if computed == css_base:
        return True

    boundary = shared_boundary(computed, css_base, saturation, brightness)
    if boundary is None:
        return False
    distance = circular_distance(hue, boundary.angle)

    if saturation >= 0.80:
        return distance <= 10.0

    threshold = 12.0
    if saturation <= 0.35:
        threshold += 2.0
    if brightness <= 0.20:
        threshold += 1.0
    return distance <= threshold


# ── Compounds ────────────────────────────────────────────────────────────────
def compound_ambiguity_threshold(
    boundary: HueBoundary,
    saturation: float,
    brightness: float,
    iscc_hint: Optional[CompoundHint] = None,
) -> float:
    """
    Does: Angular distance (degrees) within which a hue near `boundary` gets a
          compound name instead of its plain base.
    Returns: Threshold clamped to [4.8, 9.0].
    """
    threshold = 5.6

    # Disputed boundaries get wider zones
    if boundary.is_between(BaseColor.GREEN, BaseColor.BLUE) or boundary.is_between(
        BaseColor.YELLOW, BaseColor.GREEN
    ):
        threshold = 8.0
    elif boundary.is_between(BaseColor.BLUE, BaseColor.PURPLE) or boundary.is_between(
        BaseColor.RED, BaseColor.ORANGE
    ):
        threshold = 7.4
    elif boundary.is_between(BaseColor.ORANGE, BaseColor.YELLOW) or boundary.is_between(
        BaseColor.PURPLE, BaseColor.PINK
    ):
        threshold = 6.5

    if iscc_hint is not None:
        modifier, base = iscc_hint
        on_boundary = boundary.includes(modifier) and boundary.includes(base)
        threshold += 0.9 if on_boundary else -0.5

    if saturation <= 0.45:
        threshold += 0.6
    if saturation <= 0.32:
        threshold += 0.4
    if saturation >= 0.88 and 0.20 <= brightness <= 0.92:
        threshold -= 1.1
    if saturation >= 0.95:
        threshold -= 0.6

    return min(9.0, max(4.8, threshold))


def hue_compound(modifier: BaseColor, base: BaseColor) -> Optional[str]:
    return HUE_COMPOUNDS.get((modifier, base))


def apply_light_dark_prefix(
    name: str, base: BaseColor, saturation: float, brightness: float
) -> str:
    """
    Does: Prefix "Light " / "Dark " onto a plain chromatic base name when it is
          saturated enough (≥ 0.28); compounds and neutrals pass through.
    """
    if name != base.value or base in ACHROMATIC_BASES:
        return name
    if saturation < LIGHT_DARK_MIN_SATURATION:
        return name
    if brightness >= LIGHT_MIN_BRIGHTNESS:
        return f"Light {name}"
    if brightness <= DARK_MAX_BRIGHTNESS:
        return f"Dark {name}"
    return name


# ── Minimal name ─────────────────────────────────────────────────────────────
def minimal_name(
    hue: float,
    saturation: float,
    brightness: float,
    iscc_hint: Optional[CompoundHint] = None,
    css_base_hint: Optional[BaseColor] = None,
    *,
    debug: bool = False,
) -> str:
    """
    Does: Run the ordered gates: black → white → gray → chromatic base (+ CSS
          override) → grayish forms → brown → boundary compound (+ ISCC redirect)
          → light/dark prefix.
    Returns: The minimal display name, e.g. "Dark Red", "Reddish-orange",
             "Grayish-blue", "White".
    """
    dbg = debug and logger.isEnabledFor(logging.DEBUG)

    if brightness <= BLACK_MAX_BRIGHTNESS:
        return BaseColor.BLACK.value
    if brightness >= WHITE_MIN_BRIGHTNESS and saturation <= WHITE_MAX_SATURATION:
        return BaseColor.WHITE.value
    if saturation <= GRAY_MAX_SATURATION:
        return BaseColor.GRAY.value

    base = chromatic_base(hue, saturation, brightness)
    if css_base_hint is not None and should_adopt_css_base(
        base, css_base_hint, hue, saturation, brightness
    ):
        if dbg and css_base_hint != base:
            logger.debug("[MINIMAL] CSS hint %s overrides %s", css_base_hint.value, base.value)
        base = css_base_hint

    # Low saturation with a visible hue bias
    if saturation <= GRAYISH_MAX_SATURATION:
        if base in GRAYISH_ELIGIBLE_BASES:
            if brightness >= GRAYISH_WHITE_MIN_BRIGHTNESS:
                return BaseColor.WHITE.value
            return f"Grayish-{base.value.lower()}"
        return BaseColor.GRAY.value

    # Brown never compounds
    if base == BaseColor.BROWN:
        return apply_light_dark_prefix(base.value, base, saturation, brightness)

    boundary = nearest_boundary(base, hue, saturation, brightness)
    if boundary is None:
        return apply_light_dark_prefix(base.value, base, saturation, brightness)

    distance = circular_distance(hue, boundary.angle)
    threshold = compound_ambiguity_threshold(boundary, saturation, brightness, iscc_hint)
    if dbg:
        logger.debug(
            "[MINIMAL] base=%s boundary=%s/%s@%.1f dist=%.2f thr=%.2f",
            base.value, boundary.a.value, boundary.b.value, boundary.angle, distance, threshold,
        )
    if distance > threshold:
        return apply_light_dark_prefix(base.value, base, saturation, brightness)

    modifier = boundary.other(base)
    resolved = base
    if (
        iscc_hint is not None
        and boundary.includes(iscc_hint[0])
        and boundary.includes(iscc_hint[1])
        and hue_compound(*iscc_hint) is not None
    ):
        modifier, resolved = iscc_hint

    name = hue_compound(modifier, resolved) or resolved.value
    return apply_light_dark_prefix(name, resolved, saturation, brightness)
