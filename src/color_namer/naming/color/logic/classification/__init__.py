"""
classification
==============

Does: Hue geometry (minimal names) and alias selection.
Exports: minimal_name, chromatic_base, hue_boundaries, nearest_alias,
         append_alias_if_needed, AliasRule, COLOR_ALIAS_RULES
"""

from __future__ import annotations

from .alias_rules import COLOR_ALIAS_RULES, AliasRule
from .alias_scoring import append_alias_if_needed, nearest_alias
from .hue_geometry import chromatic_base, hue_boundaries, minimal_name

__all__ = [
    "minimal_name",
    "chromatic_base",
    "hue_boundaries",
    "nearest_alias",
    "append_alias_if_needed",
    "AliasRule",
    "COLOR_ALIAS_RULES",
]
