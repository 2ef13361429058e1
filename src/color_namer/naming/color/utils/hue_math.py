"""
hue_math.py
===========

Does: HSV conversion with hue in degrees and circular hue arithmetic.
Used By: Hue geometry, alias scoring, name pipeline.
"""

from __future__ import annotations

import colorsys
from typing import Sequence, Tuple

__all__ = ["HSV", "rgb_to_hsv_degrees", "normalize_hue", "circular_distance"]

HSV = Tuple[float, float, float]


def rgb_to_hsv_degrees(rgb: Sequence[float]) -> HSV:
    """Does: (r, g, b) in [0, 1] → (hue in [0, 360), saturation, brightness)."""
    h, s, v = colorsys.rgb_to_hsv(float(rgb[0]), float(rgb[1]), float(rgb[2]))
    return (normalize_hue(h * 360.0), s, v)


def normalize_hue(hue: float) -> float:
    """Does: Wrap any angle into [0, 360)."""
    h = hue % 360.0
    return 0.0 if h == 360.0 else h


def circular_distance(a: float, b: float) -> float:
    """Does: Shortest angular distance between two hues (0..180)."""
    delta = abs(a - b) % 360.0
    return min(delta, 360.0 - delta)
