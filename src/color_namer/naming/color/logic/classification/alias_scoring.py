"""
alias_scoring.py

Does:
    Pick at most one colloquial alias for a classified color. Rules are filtered
    by base compatibility, saturation/brightness windows and a hue-boundary gate,
    then scored; ambiguous results (top two within ALIAS_TIE_GAP) yield no alias.
Returns:
    nearest_alias() → alias name or None;
    append_alias_if_needed() → "<minimal> (<alias>)" or the minimal name unchanged.
"""

from __future__ import annotations

# ── Imports & Public API ──────────────────────────────────────────────────────
import logging
from typing import List, Optional, Sequence, Tuple

from color_namer.naming.color.constants import (
    ALIAS_TIE_GAP,
    CHROMATIC_BASES,
    BaseColor,
)
from color_namer.naming.color.logic.classification.alias_rules import (
    COLOR_ALIAS_RULES,
    AliasRule,
)
from color_namer.naming.color.logic.classification.hue_geometry import hue_boundaries
from color_namer.naming.color.utils.hue_math import circular_distance, normalize_hue

__all__ = [
    "centered_range_score",
    "required_alias_score",
    "alias_boundary_threshold",
    "boundary_distance_for_alias",
    "alias_boundary_gate",
    "score_alias_rule",
    "nearest_alias",
    "append_alias_if_needed",
]

logger = logging.getLogger(__name__)

# ── Constants ────────────────────────────────────────────────────────────────
_STRICT_ALIASES = frozenset({"silver", "slate", "steel blue", "graphite", "gunmetal", "charcoal"})
_VIVID_ALIASES = frozenset({"turquoise", "cyan", "aqua", "lime", "chartreuse", "olive"})
_MAX_REQUIRED_SCORE = 0.97

# Per-alias boundary gate radius (degrees); default 17
_BOUNDARY_THRESHOLDS: dict[str, float] = {
    "teal": 22.0,
    "turquoise": 15.0,
    "cyan": 15.0,
    "aqua": 15.0,
    "lime": 19.0,
    "chartreuse": 19.0,
    "olive": 19.0,
    "magenta": 17.0,
    "fuchsia": 17.0,
    "indigo": 17.0,
}
_DEFAULT_BOUNDARY_THRESHOLD = 17.0


# ── Scoring helpers ──────────────────────────────────────────────────────────
def centered_range_score(value: float, value_range: Tuple[float, float]) -> float:
    """1.0 at the middle of the range, falling by 0.70 per half-width, floored at 0."""
    lo, hi = value_range
    center = (lo + hi) / 2.0
    radius = max(0.0001, (hi - lo) / 2.0)
    return max(0.0, 1.0 - 0.70 * (abs(value - center) / radius))


def required_alias_score(rule: AliasRule) -> float:
    required = rule.minimum_score + 0.02
    if rule.name in _STRICT_ALIASES:
        required += 0.06
    elif rule.name in _VIVID_ALIASES:
        required += 0.02
    return min(required, _MAX_REQUIRED_SCORE)


def alias_boundary_threshold(alias: str, saturation: float, brightness: float) -> float:
    threshold = _BOUNDARY_THRESHOLDS.get(alias, _DEFAULT_BOUNDARY_THRESHOLD)
    if saturation <= 0.35:
        threshold += 1.5
    if saturation >= 0.85:
        threshold -= 1.0
    if brightness <= 0.22:
        threshold += 1.0
    return threshold


def boundary_distance_for_alias(
    base: BaseColor,
    allowed_bases: frozenset[BaseColor],
    hue: float,
    saturation: float,
    brightness: float,
) -> Optional[float]:
    """
    Does: Smallest hue distance to a boundary between `base` and another base the
          alias allows.
    Returns: Degrees, or None when no such boundary exists.
    """
    best: Optional[float] = None
    for boundary in hue_boundaries(saturation, brightness):
        if not boundary.includes(base):
            continue
        if boundary.other(base) not in allowed_bases:
            continue
        d = circular_distance(hue, boundary.angle)
        if best is None or d < best:
            best = d
    return best


def alias_boundary_gate(
    rule: AliasRule,
    effective_base: Optional[BaseColor],
    hue: float,
    saturation: float,
    brightness: float,
) -> bool:
    """
    Does: Multi-base hue aliases only clarify colors sitting near a boundary between
          their bases; other rules always pass.
    """
    if (
        not rule.is_hue_rule
        or len(rule.allowed_bases) <= 1
        or effective_base is None
        or effective_base not in CHROMATIC_BASES
    ):
        return True

    distance = boundary_distance_for_alias(
        effective_base, rule.allowed_bases, hue, saturation, brightness
    )
    if distance is None:
        return False
    return distance <= alias_boundary_threshold(rule.name, saturation, brightness)


def score_alias_rule(rule: AliasRule, hue: float, saturation: float, brightness: float) -> Optional[float]:
    """
    Does: Weighted fit of a color to one rule: hue rules 0.58·hue + 0.22·sat + 0.20·bri,
          neutral rules 0.55·sat + 0.45·bri.
    Returns: Score, or None when the hue lies outside the rule's radius.
    """
    sat_score = centered_range_score(saturation, rule.saturation_range)
    bri_score = centered_range_score(brightness, rule.brightness_range)

    if rule.is_hue_rule:
        distance = circular_distance(hue, rule.hue_center)
        if distance > rule.hue_radius:
            return None
        hue_score = 1.0 - distance / rule.hue_radius
        return 0.58 * hue_score + 0.22 * sat_score + 0.20 * bri_score
    return 0.55 * sat_score + 0.45 * bri_score


# ── Selection ────────────────────────────────────────────────────────────────
def nearest_alias(
    minimal_base: Optional[BaseColor],
    iscc_main_base: Optional[BaseColor],
    hue: float,
    saturation: float,
    brightness: float,
    *,
    rules: Optional[Sequence[AliasRule]] = None,
    debug: bool = False,
) -> Optional[str]:
    """
    Does: Filter and score alias rules, then return the clear winner.
    Returns: Alias name, or None when nothing qualifies or the top two scores
             differ by less than ALIAS_TIE_GAP (even for the same alias name).
    """
    if minimal_base is not None:
        effective_base: Optional[BaseColor] = minimal_base
    elif iscc_main_base in CHROMATIC_BASES:
        effective_base = iscc_main_base
    else:
        effective_base = None
    iscc_chromatic = iscc_main_base in CHROMATIC_BASES
    h = normalize_hue(hue)

    candidates: List[Tuple[AliasRule, float]] = []
    for rule in COLOR_ALIAS_RULES if rules is None else rules:
        if effective_base is not None and effective_base not in rule.allowed_bases:
            continue
        if iscc_chromatic and iscc_main_base not in rule.allowed_bases:
            continue
        s_lo, s_hi = rule.saturation_range
        b_lo, b_hi = rule.brightness_range
        if not (s_lo <= saturation <= s_hi and b_lo <= brightness <= b_hi):
            continue
        if not alias_boundary_gate(rule, effective_base, h, saturation, brightness):
            continue

        score = score_alias_rule(rule, h, saturation, brightness)
        if score is None or score < required_alias_score(rule):
            continue
        candidates.append((rule, score))

    if not candidates:
        return None

    candidates.sort(key=lambda c: c[1], reverse=True)
    if debug and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "[ALIAS] candidates: %s",
            ", ".join(f"{r.name}={s:.3f}" for r, s in candidates[:5]),
        )
    if len(candidates) > 1 and candidates[0][1] - candidates[1][1] < ALIAS_TIE_GAP:
        return None
    return candidates[0][0].name


def append_alias_if_needed(
    minimal_name: str,
    minimal_base: Optional[BaseColor],
    iscc_main_base: Optional[BaseColor],
    hue: float,
    saturation: float,
    brightness: float,
    *,
    debug: bool = False,
) -> str:
    """
    Does: Attach the alias as a parenthetical. A teal alias on a plain blue/green
          name also turns the name into the matching compound
          ("Blue" → "Greenish-blue (teal)").
    Returns: The decorated name, or minimal_name untouched when it is empty,
             already has a parenthetical, or no alias qualifies.
    """
    if not minimal_name or "(" in minimal_name:
        return minimal_name

    alias = nearest_alias(
        minimal_base, iscc_main_base, hue, saturation, brightness, debug=debug
    )
    if alias is None:
        return minimal_name

    if (
        alias == "teal"
        and minimal_base in (BaseColor.BLUE, BaseColor.GREEN)
        and "-" not in minimal_name
    ):
        forced = "Greenish-blue" if minimal_base == BaseColor.BLUE else "Bluish-green"
        return f"{forced} ({alias})"
    return f"{minimal_name} ({alias})"
