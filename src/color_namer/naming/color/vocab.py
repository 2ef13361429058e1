"""
vocab
=====

Does: Map color words back to base colors: plain base words, ISCC-NBS adjective
      forms ("bluish", "purplish"), CSS CamelCase tokens, compound hints found in
      extended-palette names, and the base of an already-built minimal name.
Used By: Name pipeline (ISCC / CSS hints), alias scoring (effective base).
Returns: BaseColor members, (modifier, base) hint pairs, or None.
"""

from __future__ import annotations

from color_namer.naming.color.constants import BaseColor
from color_namer.naming.color.palettes import get_css_palette
from color_namer.naming.color.utils.rgb_distance import find_exact_hex
from color_namer.naming.general.token.normalize import (
    letter_tokens,
    normalize_token,
    split_camel_case,
)

__all__ = [
    "BASE_COLOR_WORDS",
    "ISCC_ADJECTIVE_WORDS",
    "CSS_BASE_TOKENS",
    "ISCC_COMPOUND_HINTS",
    "base_color_from_word",
    "iscc_main_base_color",
    "iscc_compound_hint",
    "css_name_tokens",
    "css_base_hint",
    "minimal_base_color",
]


# ── Word tables ──────────────────────────────────────────────────────────────
BASE_COLOR_WORDS: dict[str, BaseColor] = {
    "red": BaseColor.RED,
    "orange": BaseColor.ORANGE,
    "yellow": BaseColor.YELLOW,
    "green": BaseColor.GREEN,
    "blue": BaseColor.BLUE,
    "purple": BaseColor.PURPLE,
    "pink": BaseColor.PINK,
    "brown": BaseColor.BROWN,
    "gray": BaseColor.GRAY,
    "grey": BaseColor.GRAY,
    "black": BaseColor.BLACK,
    "white": BaseColor.WHITE,
}

ISCC_ADJECTIVE_WORDS: dict[str, BaseColor] = {
    "reddish": BaseColor.RED,
    "orangeish": BaseColor.ORANGE,
    "orangish": BaseColor.ORANGE,
    "yellowish": BaseColor.YELLOW,
    "greenish": BaseColor.GREEN,
    "bluish": BaseColor.BLUE,
    "purplish": BaseColor.PURPLE,
    "violetish": BaseColor.PURPLE,
    "pinkish": BaseColor.PINK,
    "brownish": BaseColor.BROWN,
    "grayish": BaseColor.GRAY,
    "greyish": BaseColor.GRAY,
    "blackish": BaseColor.BLACK,
    "whitish": BaseColor.WHITE,
}

# CSS names use a few extra words for purple/pink
CSS_BASE_TOKENS: dict[str, BaseColor] = {
    **BASE_COLOR_WORDS,
    "violet": BaseColor.PURPLE,
    "fuchsia": BaseColor.PINK,
    "magenta": BaseColor.PINK,
}

# Substring → (modifier, base); order matters, first hit wins
ISCC_COMPOUND_HINTS: tuple[tuple[tuple[str, ...], tuple[BaseColor, BaseColor]], ...] = (
    (("reddish orange",), (BaseColor.RED, BaseColor.ORANGE)),
    (("yellowish orange",), (BaseColor.YELLOW, BaseColor.ORANGE)),
    (("orange yellow",), (BaseColor.ORANGE, BaseColor.YELLOW)),
    (("greenish yellow",), (BaseColor.GREEN, BaseColor.YELLOW)),
    (("yellowish green", "yellow green"), (BaseColor.YELLOW, BaseColor.GREEN)),
    (("bluish green",), (BaseColor.BLUE, BaseColor.GREEN)),
    (("greenish blue",), (BaseColor.GREEN, BaseColor.BLUE)),
    (("purplish blue",), (BaseColor.PURPLE, BaseColor.BLUE)),
    (("bluish purple",), (BaseColor.BLUE, BaseColor.PURPLE)),
    (("pinkish purple",), (BaseColor.PINK, BaseColor.PURPLE)),
    (("purplish pink",), (BaseColor.PURPLE, BaseColor.PINK)),
    (("reddish pink",), (BaseColor.RED, BaseColor.PINK)),
)


# ── Plain words ──────────────────────────────────────────────────────────────
def base_color_from_word(word: str) -> BaseColor | None:
    """Does: Map one base word ("grey" included) to its BaseColor."""
    return BASE_COLOR_WORDS.get((word or "").strip().lower())


# ── Extended palette names ───────────────────────────────────────────────────
def iscc_main_base_color(name: str) -> BaseColor | None:
    """
    Does: Scan the letter tokens of an ISCC-NBS name left to right, reading
          adjective forms ("purplish") and nouns ("violet" → purple); the last
          recognized word wins.
    Returns: "Dark Grayish Purple" → PURPLE; "Brownish Pink" → PINK; None when
             no word is recognized.
    """
    found: BaseColor | None = None
    for word in letter_tokens((name or "").replace("-", " ")):
        adjective = ISCC_ADJECTIVE_WORDS.get(word)
        if adjective is not None:
            found = adjective
            continue
        noun = BaseColor.PURPLE if word == "violet" else base_color_from_word(word)
        if noun is not None:
            found = noun
    return found


def iscc_compound_hint(name: str) -> tuple[BaseColor, BaseColor] | None:
    """
    Does: Detect a hue compound ("Moderate Greenish Blue") inside an ISCC-NBS name.
    Returns: (modifier, base) for the first matching phrase, else None.
    """
    lowered = (name or "").lower()
    for phrases, pair in ISCC_COMPOUND_HINTS:
        if any(p in lowered for p in phrases):
            return pair
    return None


# ── CSS names ────────────────────────────────────────────────────────────────
def css_name_tokens(name: str) -> list[str]:
    """Does: Split a CSS CamelCase name ("DarkSlateGray" → ["dark", "slate", "gray"])."""
    return split_camel_case(name)


def css_base_hint(sample_hex: str) -> BaseColor | None:
    """
    Does: For a hex that exactly matches a web-palette entry, return the base
          implied by the last base-bearing token of its name ("MediumVioletRed" → RED).
    Returns: BaseColor or None when the hex is not an exact CSS color or its name
             has no base word ("Teal", "Coral").
    """
    exact = find_exact_hex(sample_hex, get_css_palette())
    if exact is None:
        return None

    last: BaseColor | None = None
    for token in css_name_tokens(exact.name):
        base = CSS_BASE_TOKENS.get(token)
        if base is not None:
            last = base
    return last


# ── Minimal names ────────────────────────────────────────────────────────────
def minimal_base_color(minimal_name: str) -> BaseColor | None:
    """
    Does: Recover the base of a minimal name: drop any parenthetical, keep the
          part after the last hyphen, then the last word
          ("Light Greenish-blue (teal)" → BLUE, "Grayish-red" → RED).
    """
    text = normalize_token(minimal_name, keep_hyphens=True)
    if not text:
        return None
    head = text.split("(", 1)[0].strip() or text
    tail = head.split("-")[-1].strip()
    words = tail.split()
    return base_color_from_word(words[-1] if words else tail)
