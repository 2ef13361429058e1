"""
palettes
========

Does: Build the three immutable reference palettes used for naming:
      - web (CSS named colors, from data/css_colors.json)
      - extended perceptual (ISCC-NBS, from data/iscc_nbs_colors.json)
      - supplementary named colors (matplotlib's XKCD survey table, lazy import)
Used By: Vocab (CSS base hints) and the name pipeline (detailed / ISCC labels).
Returns: Tuples of PaletteEntry, cached once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Callable, Iterable, Mapping

from color_namer.naming.color.utils.rgb_distance import (
    PaletteEntry,
    hex_to_unit_rgb,
    normalized_hex,
)
from color_namer.naming.general.token.normalize import (
    capitalize_words,
    format_camel_case,
)
from color_namer.naming.general.utils.load_config import load_config

__all__ = [
    "CSS_TABLE",
    "ISCC_TABLE",
    "XKCD_PREFIX",
    "build_palette",
    "get_css_palette",
    "get_iscc_palette",
    "get_supplementary_palette",
    "format_css_name",
    "format_iscc_name",
    "clear_palette_cache",
]

log = logging.getLogger(__name__)

CSS_TABLE = "css_colors"
ISCC_TABLE = "iscc_nbs_colors"
XKCD_PREFIX = "xkcd:"


# ── Row parsing ──────────────────────────────────────────────────────────────
def build_palette(
    rows: Iterable[Any],
    *,
    name_key: str = "name",
    hex_key: str = "hex",
    formatter: Callable[[str], str] | None = None,
    source: str = "palette",
) -> tuple[PaletteEntry, ...]:
    """
    Does: Turn raw {name, hex} rows into PaletteEntry tuples, keeping input order.
          Rows that are not objects, lack a name, or carry an unparseable hex are
          dropped with a warning.
    Returns: tuple[PaletteEntry, ...] (possibly empty).
    """
    entries: list[PaletteEntry] = []
    for row in rows:
        if not isinstance(row, Mapping):
            log.warning("[%s] dropping non-object row: %r", source, row)
            continue
        raw_name = row.get(name_key)
        hx = normalized_hex(row.get(hex_key))
        rgb = hex_to_unit_rgb(hx)
        if not isinstance(raw_name, str) or not raw_name.strip() or hx is None or rgb is None:
            log.warning("[%s] dropping malformed row: %r", source, row)
            continue
        name = formatter(raw_name) if formatter else raw_name.strip()
        entries.append(PaletteEntry(name, hx, *rgb))
    return tuple(entries)


def format_css_name(name: str) -> str:
    """Does: Display form of a CSS name ("AliceBlue" → "Alice Blue")."""
    return format_camel_case(name)


def format_iscc_name(name: str) -> str:
    """Does: Display form of an ISCC-NBS name ("Strong_Orange_Yellow" → "Strong Orange Yellow")."""
    return capitalize_words(name)


# ── Palettes (lazy, cached) ──────────────────────────────────────────────────
@lru_cache(maxsize=1)
def get_css_palette() -> tuple[PaletteEntry, ...]:
    """Web palette; names stay in CamelCase so CSS tokens can be recovered."""
    palette = build_palette(load_config(CSS_TABLE, mode="records"), source=CSS_TABLE)
    log.debug("Loaded %d CSS colors", len(palette))
    return palette


@lru_cache(maxsize=1)
def get_iscc_palette() -> tuple[PaletteEntry, ...]:
    palette = build_palette(
        load_config(ISCC_TABLE, mode="records"),
        formatter=format_iscc_name,
        source=ISCC_TABLE,
    )
    log.debug("Loaded %d ISCC-NBS colors", len(palette))
    return palette


@lru_cache(maxsize=1)
def get_supplementary_palette() -> tuple[PaletteEntry, ...]:
    """
    Does: Build the supplementary named palette from matplotlib.colors.XKCD_COLORS
          (lazy import; names lose the 'xkcd:' prefix and are capitalized per word).
    """
    from matplotlib.colors import XKCD_COLORS  # lazy import

    rows = (
        {"name": key[len(XKCD_PREFIX):] if key.startswith(XKCD_PREFIX) else key, "hex": hx}
        for key, hx in XKCD_COLORS.items()
    )
    palette = build_palette(rows, formatter=capitalize_words, source="xkcd")
    log.debug("Loaded %d supplementary colors", len(palette))
    return palette


def clear_palette_cache() -> None:
    """Drop cached palettes (tests / data dir overrides)."""
    get_css_palette.cache_clear()
    get_iscc_palette.cache_clear()
    get_supplementary_palette.cache_clear()
