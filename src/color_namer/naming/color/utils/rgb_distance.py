"""
rgb_distance.py
===============

Does: Normalize hex strings, convert between hex and unit RGB, and match a
      color against a reference palette (exact hex first, then nearest by
      squared Euclidean distance in normalized RGB).
Used By: Palette store, web/extended naming in the name pipeline, CSS hints.
Returns: Normalized hex (str), unit RGB tuples, PaletteEntry / PaletteMatch.
"""

from __future__ import annotations

import logging
import math
import string
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

import webcolors

# Public surface
__all__ = [
    "UnitRGB",
    "PaletteEntry",
    "PaletteMatch",
    "normalized_hex",
    "hex_to_unit_rgb",
    "unit_rgb_to_hex",
    "validate_unit_rgb",
    "squared_distance",
    "find_exact_hex",
    "nearest_palette_match",
    "pick_closer",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
UnitRGB = Tuple[float, float, float]

_HEX_DIGITS = frozenset(string.hexdigits)


class PaletteEntry(NamedTuple):
    """One named reference color; hex is 6 uppercase digits, channels in [0, 1]."""

    name: str
    hex: str
    r: float
    g: float
    b: float

    @property
    def rgb(self) -> UnitRGB:
        return (self.r, self.g, self.b)


class PaletteMatch(NamedTuple):
    entry: PaletteEntry
    distance: float
    is_exact: bool


# =============================================================================
# 1) HEX <-> RGB
# =============================================================================

def normalized_hex(value: Optional[str]) -> Optional[str]:
    """
    Does: Strip surrounding whitespace and one leading '#', require exactly six
          hex digits.
    Returns: Uppercase digits ("0A0B0C") or None when the input is not a hex color.
    """
    if not isinstance(value, str):
        return None
    s = value.strip()
    if s.startswith("#"):
        s = s[1:]
    if len(s) != 6 or not all(ch in _HEX_DIGITS for ch in s):
        return None
    return s.upper()


def hex_to_unit_rgb(value: Optional[str]) -> Optional[UnitRGB]:
    """Does: Parse a hex color into channels in [0, 1] (None if unparseable)."""
    hx = normalized_hex(value)
    if hx is None:
        return None
    rgb = webcolors.hex_to_rgb(f"#{hx}")
    return (rgb.red / 255.0, rgb.green / 255.0, rgb.blue / 255.0)


def _to_byte(channel: float) -> int:
    # Round half up, then clamp
    return min(255, max(0, int(math.floor(channel * 255.0 + 0.5))))


def unit_rgb_to_hex(rgb: Sequence[float]) -> str:
    """Does: Format unit RGB as 6 uppercase hex digits without '#'."""
    r, g, b = (_to_byte(float(c)) for c in rgb[:3])
    return webcolors.rgb_to_hex((r, g, b)).lstrip("#").upper()


def validate_unit_rgb(rgb: Sequence[float]) -> UnitRGB:
    """
    Does: Check arity (3 channels, or 4 with a trailing alpha that is ignored)
          and that every color channel lies in [0, 1].
    Returns: The (r, g, b) triple as floats.
    Raises: ValueError on bad arity, non-numeric or out-of-range channels.
    """
    try:
        values = tuple(float(c) for c in rgb)
    except (TypeError, ValueError) as e:
        raise ValueError(f"RGB must be a sequence of numbers, got {rgb!r}") from e
    if len(values) not in (3, 4):
        raise ValueError(f"RGB needs 3 channels (optionally + alpha), got {len(values)}")
    r, g, b = values[:3]
    for c in (r, g, b):
        if math.isnan(c) or not 0.0 <= c <= 1.0:
            raise ValueError(f"RGB channel out of [0, 1]: {rgb!r}")
    return (r, g, b)


# =============================================================================
# 2) DISTANCE & LOOKUPS
# =============================================================================

def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Does: dr² + dg² + db² in normalized RGB (no sqrt; only ordering matters)."""
    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return dr * dr + dg * dg + db * db


def find_exact_hex(
    sample_hex: Optional[str], palette: Iterable[PaletteEntry]
) -> Optional[PaletteEntry]:
    """Does: Return the first palette entry whose hex equals sample_hex (normalized)."""
    hx = normalized_hex(sample_hex)
    if hx is None:
        return None
    for entry in palette:
        if entry.hex == hx:
            return entry
    return None


def nearest_palette_match(
    target: Sequence[float],
    palette: Sequence[PaletteEntry],
    sample_hex: Optional[str] = None,
) -> Optional[PaletteMatch]:
    """
    Does: Exact-hex short-circuit when sample_hex is given, otherwise a linear
          scan keeping the first entry on ties (strict '<').
    Returns: PaletteMatch, or None for an empty palette.
    """
    if sample_hex is not None:
        exact = find_exact_hex(sample_hex, palette)
        if exact is not None:
            return PaletteMatch(exact, 0.0, True)

    best: Optional[PaletteEntry] = None
    best_dist = math.inf
    for entry in palette:
        d = squared_distance(target, entry.rgb)
        if d < best_dist:
            best, best_dist = entry, d

    if best is None:
        return None
    return PaletteMatch(best, best_dist, False)


def pick_closer(
    first: Optional[PaletteMatch], second: Optional[PaletteMatch]
) -> Optional[PaletteMatch]:
    """Does: Smaller distance wins; equal distances keep `first`."""
    if first is None:
        return second
    if second is None:
        return first
    return first if first.distance <= second.distance else second
