"""
token.
=====

Does: Provide name/token utilities for normalization, tokenization and display forms.
Exports: normalize_token, letter_tokens, split_camel_case, format_camel_case, capitalize_words
Used by: Palette store and color vocabulary parsing.
"""

from __future__ import annotations

from .normalize import (
    capitalize_words,
    format_camel_case,
    letter_tokens,
    normalize_token,
    split_camel_case,
)

__all__ = [
    "normalize_token",
    "letter_tokens",
    "split_camel_case",
    "format_camel_case",
    "capitalize_words",
]
