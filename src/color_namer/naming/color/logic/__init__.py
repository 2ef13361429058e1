"""
logic
=====

Thin namespace for classification/ and pipelines/.
- Avoid eager imports: `import color_namer.naming.color.logic` loads no submodule
  until a name is requested (palette tables themselves load on first use).
- Provide TYPE_CHECKING stubs so IDEs/static analyzers see symbols.

Public API:
- classification: minimal_name, nearest_alias, append_alias_if_needed
- pipelines    : names_for_rgb, names_for_hex, ColorNames
"""

from __future__ import annotations
from typing import TYPE_CHECKING

# ---- Static typing / IDE stubs (do NOT run at runtime) ----------------------
if TYPE_CHECKING:
    # classification
    from .classification.hue_geometry import minimal_name
    from .classification.alias_scoring import append_alias_if_needed, nearest_alias
    # pipelines
    from .pipelines.name_pipeline import ColorNames, names_for_hex, names_for_rgb

_CLASSIFICATION = ("minimal_name", "nearest_alias", "append_alias_if_needed")
_PIPELINES = ("names_for_rgb", "names_for_hex", "ColorNames")


# ---- Lazy runtime exports (PEP 562) -----------------------------------------
def __getattr__(name: str):
    # classification (no dependency to pipelines)
    if name in _CLASSIFICATION:
        from .classification import hue_geometry, alias_scoring

        return {
            "minimal_name": hue_geometry.minimal_name,
            "nearest_alias": alias_scoring.nearest_alias,
            "append_alias_if_needed": alias_scoring.append_alias_if_needed,
        }[name]

    # pipelines (loaded on demand only)
    if name in _PIPELINES:
        from .pipelines import name_pipeline

        return getattr(name_pipeline, name)

    raise AttributeError(name)


__all__ = [
    # classification
    "minimal_name",
    "nearest_alias",
    "append_alias_if_needed",
    # pipelines
    "names_for_rgb",
    "names_for_hex",
    "ColorNames",
]

__docformat__ = "google"
