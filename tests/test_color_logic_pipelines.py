# tests/test_color_logic_pipelines.py
"""
End-to-end tests for the name pipeline (sampled color → three labels).

Uses the packaged CSS / ISCC-NBS tables and matplotlib's XKCD table; palette
substitution for the detailed-name rules goes through monkeypatch.
"""

from __future__ import annotations

import importlib

import pytest

np_ = importlib.import_module("color_namer.naming.color.logic.pipelines.name_pipeline")
rd = importlib.import_module("color_namer.naming.color.utils.rgb_distance")
voc = importlib.import_module("color_namer.naming.color.vocab")
B = importlib.import_module("color_namer.naming.color.constants").BaseColor


def _entry(name: str, hx: str):
    return rd.PaletteEntry(name, hx, *rd.hex_to_unit_rgb(hx))


# ──────────────────────────────────────────────────────────────────────────────
# Exact names & neutrals
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("hx, expected", [("F0F8FF", "Alice Blue"), ("FAEBD7", "Antique White"), ("#c71585", "Medium Violet Red")])
def test_exact_css_detailed_name(hx, expected):
    assert np_.names_for_hex(hx).detailed == expected


def test_pure_white_and_black():
    white = np_.names_for_hex("FFFFFF")
    black = np_.names_for_hex("000000")
    assert white == np_.ColorNames("White", "White", "White")
    assert black == np_.ColorNames("Black", "Black", "Black")


def test_mid_gray():
    names = np_.names_for_hex("808080")
    assert names.simplified == "Gray"
    assert names.detailed == "Gray"
    assert names.iscc_extended == "Medium Gray (closest)"


# ──────────────────────────────────────────────────────────────────────────────
# Hue classification properties
# ──────────────────────────────────────────────────────────────────────────────
def test_midnight_blue_stays_blue():
    names = np_.names_for_hex("071832")
    assert voc.minimal_base_color(names.simplified) == B.BLUE
    assert "green" not in names.simplified.lower()


@pytest.mark.parametrize("hx", ["990F02", "900603", "541E1B", "900D09", "A91A0D", "A91B0D", "9B1003", "9B1104"])
def test_deep_reds_are_red(hx):
    assert np_.names_for_hex(hx).simplified == "Red"


@pytest.mark.parametrize("hx", ["008080", "00555A", "004747", "66B2B2", "009999", "006D5B"])
def test_teal_family_gets_teal_alias(hx):
    assert np_.names_for_hex(hx).simplified == "Greenish-blue (teal)"


def test_close_alias_scores_append_no_alias():
    # turquoise and teal both qualify, less than ALIAS_TIE_GAP apart
    assert np_.names_for_hex("2DB4AB").simplified == "Greenish-blue"


def test_iscc_label_marks_non_exact_matches():
    names = np_.names_for_hex("071832")
    assert names.iscc_extended.endswith(" (closest)")

    iscc_first = np_.get_iscc_palette()[0]
    exact = np_.names_for_hex(iscc_first.hex)
    assert exact.iscc_extended == iscc_first.name


# ──────────────────────────────────────────────────────────────────────────────
# Entry points & inputs
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("hx", ["F0F8FF", "008080", "990F02", "071832", "808080"])
def test_idempotent_and_rgb_matches_hex(hx):
    rgb = rd.hex_to_unit_rgb(hx)
    first = np_.names_for_hex(hx)
    assert np_.names_for_hex(hx) == first
    assert np_.names_for_rgb(rgb) == first
    assert np_.names_for_rgb(rgb, sampled_hex=hx) == first


def test_alpha_is_ignored():
    assert np_.names_for_rgb((0.0, 0.0, 0.0, 0.5)) == np_.names_for_hex("000000")


def test_invalid_sampled_hex_falls_back_to_rgb():
    assert np_.names_for_rgb((1.0, 1.0, 1.0), sampled_hex="zz") == np_.names_for_hex("FFFFFF")


@pytest.mark.parametrize("bad", [(1.2, 0.0, 0.0), (0.0, 0.0), (-0.1, 0.5, 0.5)])
def test_names_for_rgb_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        np_.names_for_rgb(bad)


@pytest.mark.parametrize("bad", ["12345", "#GGGGGG", ""])
def test_names_for_hex_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        np_.names_for_hex(bad)


# ──────────────────────────────────────────────────────────────────────────────
# Detailed-name rules with substituted palettes
# ──────────────────────────────────────────────────────────────────────────────
def test_web_display_name_closest_css(monkeypatch):
    monkeypatch.setattr(np_, "get_supplementary_palette", lambda: ())
    assert np_.web_display_name("F0F8FE") == "Alice Blue (closest)"


def test_web_display_name_exact_supplementary(monkeypatch):
    monkeypatch.setattr(np_, "get_css_palette", lambda: (_entry("Black", "000000"),))
    monkeypatch.setattr(np_, "get_supplementary_palette", lambda: (_entry("Robin's Egg", "6DEDFD"),))
    assert np_.web_display_name("6DEDFD") == "Robin's Egg"


def test_web_display_name_css_wins_ties(monkeypatch):
    monkeypatch.setattr(np_, "get_css_palette", lambda: (_entry("DarkGray", "000000"),))
    monkeypatch.setattr(np_, "get_supplementary_palette", lambda: (_entry("Onyx", "000000"),))
    # same reference color in both palettes
    assert np_.web_display_name("808080") == "Dark Gray (closest)"


def test_web_display_name_supplementary_closer(monkeypatch):
    monkeypatch.setattr(np_, "get_css_palette", lambda: (_entry("Black", "000000"),))
    monkeypatch.setattr(np_, "get_supplementary_palette", lambda: (_entry("Ice", "F0F0F0"),))
    assert np_.web_display_name("FAFAFA") == "Ice (closest)"


def test_web_display_name_unknown_when_empty(monkeypatch):
    monkeypatch.setattr(np_, "get_css_palette", lambda: ())
    monkeypatch.setattr(np_, "get_supplementary_palette", lambda: ())
    assert np_.web_display_name("123456") == "Unknown"


@pytest.mark.parametrize(
    "v, expected",
    [(0.97, "White"), (0.05, "Black"), (0.8, "Light Gray"), (0.5, "Medium Gray"), (0.2, "Dark Gray")],
)
def test_iscc_neutral_tiers(v, expected):
    rgb = (v, v, v)
    assert np_.nearest_iscc_extended_match(rgb, rd.unit_rgb_to_hex(rgb), 0.0, v) == (expected, False)
