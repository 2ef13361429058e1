# naming/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for color-name normalization and splitting
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Deterministic token normalization (lowercasing, spacing, optional hyphen
      preservation), letter-only tokenization, CamelCase splitting and
      per-word capitalization for palette display names.
Returns: normalize_token(), letter_tokens(), split_camel_case(),
         format_camel_case(), capitalize_words().
Used by: Palette store (display names) and vocab (name → base color parsing).
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "normalize_token",
    "letter_tokens",
    "split_camel_case",
    "format_camel_case",
    "capitalize_words",
]

_LETTERS_RE = re.compile(r"[a-z]+")

# Common “fancy” Unicode punctuation we want to normalize early
_FANCY_HYPHENS = {"‐", "‑", "‒", "–", "—", "−"}
_FANCY_QUOTES = {"‘", "’", "‛", "′", "ʼ"}


# ──────────────────────────────────────────────────────────────
# 0) Light Unicode hygiene
# ──────────────────────────────────────────────────────────────


def _unicode_hygiene(s: str) -> str:
    """
    Does: NFKC fold, map fancy hyphens to ASCII '-', curly quotes to "'".
    Returns: Cleaned string ("" for non-strings).
    """
    if not isinstance(s, str):
        return ""
    s = unicodedata.normalize("NFKC", s)
    for ch in _FANCY_HYPHENS:
        s = s.replace(ch, "-")
    for ch in _FANCY_QUOTES:
        s = s.replace(ch, "'")
    return s


# ──────────────────────────────────────────────────────────────
# 1) TOKEN NORMALIZATION
# ──────────────────────────────────────────────────────────────


def normalize_token(token: str, keep_hyphens: bool = False) -> str:
    """
    Does: Normalize `token`:
          - Unicode hygiene
          - lowercase + trim
          - '_' → space; collapse internal whitespace
          - hyphens kept & tightened (keep_hyphens=True) OR converted to spaces
    Returns: Normalized token/phrase.
    """
    s = _unicode_hygiene(token).lower().strip().replace("_", " ")
    s = re.sub(r"\s+", " ", s)

    if keep_hyphens:
        return re.sub(r"\s*-\s*", "-", s)
    return re.sub(r"\s+", " ", s.replace("-", " ")).strip()


def letter_tokens(text: str) -> list[str]:
    """Lowercased runs of ASCII letters; everything else separates tokens."""
    return _LETTERS_RE.findall(_unicode_hygiene(text).lower())


# ──────────────────────────────────────────────────────────────
# 2) DISPLAY FORMS
# ──────────────────────────────────────────────────────────────


def split_camel_case(name: str) -> list[str]:
    """
    Does: Split a CamelCase identifier into lowercase words; uppercase letters
          and non-letters start a new word, non-letters are dropped.
    Returns: ["light", "goldenrod", "yellow"] for "LightGoldenrodYellow".
    """
    tokens: list[str] = []
    current = ""
    for ch in name or "":
        if ch.isupper() or not ch.isalpha():
            if current:
                tokens.append(current.lower())
            current = ch if ch.isalpha() else ""
            continue
        current += ch
    if current:
        tokens.append(current.lower())
    return tokens


def format_camel_case(name: str) -> str:
    """Insert a space before every uppercase letter but the first ("AliceBlue" → "Alice Blue")."""
    out: list[str] = []
    for ch in name or "":
        if ch.isupper() and out:
            out.append(" ")
        out.append(ch)
    return "".join(out)


def capitalize_words(text: str) -> str:
    """
    Does: Title-case each whitespace-separated word without touching characters
          after apostrophes ("robin's egg" → "Robin's Egg"); '_' counts as space.
    """
    words = _unicode_hygiene(text).replace("_", " ").split()
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)
