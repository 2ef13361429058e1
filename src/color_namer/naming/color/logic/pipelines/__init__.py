"""
pipelines
=========

Does: High-level orchestration from a sampled color to its three labels.
Returns: Public API for RGB/hex → ColorNames.
Used By: Package root exports and the demo CLI.
"""

from __future__ import annotations

# Public API re-exports
from .name_pipeline import (
    ColorNames,
    names_for_hex,
    names_for_rgb,
    nearest_iscc_extended_match,
    web_display_name,
)

__all__ = [
    "ColorNames",
    "names_for_rgb",
    "names_for_hex",
    "web_display_name",
    "nearest_iscc_extended_match",
]

# Optional: consistent docstring style for tooling
__docformat__ = "google"
