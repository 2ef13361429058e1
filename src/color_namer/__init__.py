"""
color_namer
===========

Does: Root package initializer for the color naming library.
Returns: The three-label naming entry points (`names_for_rgb`, `names_for_hex`)
         and their `ColorNames` result.
Used by: Applications and the `color-namer-demo` CLI.
"""

from color_namer.naming.color.logic.pipelines.name_pipeline import (
    ColorNames,
    names_for_hex,
    names_for_rgb,
)

__all__: list[str] = ["ColorNames", "names_for_rgb", "names_for_hex"]
__version__ = "0.1.0"
__docformat__ = "google"
