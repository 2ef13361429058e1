# tests/test_color_palettes.py
from __future__ import annotations

import importlib
import json
import logging

import matplotlib.colors
import pytest
import webcolors

pal = importlib.import_module("color_namer.naming.color.palettes")
LC = importlib.import_module("color_namer.naming.general.utils.load_config")


@pytest.fixture(autouse=True)
def _fresh_palettes(monkeypatch):
    for var in LC.DATA_DIR_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    LC.clear_config_cache()
    pal.clear_palette_cache()
    yield
    LC.clear_config_cache()
    pal.clear_palette_cache()


# ── Packaged tables ───────────────────────────────────────────────────────────
def test_css_palette_shape():
    css = pal.get_css_palette()
    assert len(css) == 141
    first = css[0]
    assert (first.name, first.hex) == ("AliceBlue", "F0F8FF")
    assert first.rgb == pytest.approx((240 / 255, 248 / 255, 1.0))
    assert all(len(e.hex) == 6 and e.hex == e.hex.upper() for e in css)


@pytest.mark.parametrize("name", ["AliceBlue", "Teal", "DarkSlateGray", "MediumVioletRed", "Navy"])
def test_css_palette_agrees_with_webcolors(name):
    css = {e.name: e.hex for e in pal.get_css_palette()}
    assert "#" + css[name].lower() == webcolors.name_to_hex(name.lower())


def test_iscc_palette_names_are_formatted():
    iscc = pal.get_iscc_palette()
    assert len(iscc) == 267
    assert (iscc[0].name, iscc[0].hex) == ("Vivid Pink", "FD7992")
    assert all("_" not in e.name for e in iscc)


def test_palettes_are_cached():
    assert pal.get_css_palette() is pal.get_css_palette()
    assert pal.get_iscc_palette() is pal.get_iscc_palette()


def test_supplementary_palette_from_xkcd(monkeypatch):
    fake = {"xkcd:robin's egg": "#6dedfd", "xkcd:cloudy blue": "#acc2d9", "xkcd:broken": "#zzzzzz"}
    monkeypatch.setattr(matplotlib.colors, "XKCD_COLORS", fake)
    pal.clear_palette_cache()

    supp = pal.get_supplementary_palette()
    assert [(e.name, e.hex) for e in supp] == [
        ("Robin's Egg", "6DEDFD"),
        ("Cloudy Blue", "ACC2D9"),
    ]


def test_supplementary_palette_real_table_is_large():
    supp = pal.get_supplementary_palette()
    assert len(supp) > 900
    assert all(not e.name.lower().startswith("xkcd:") for e in supp)


# ── Row parsing ───────────────────────────────────────────────────────────────
def test_build_palette_drops_malformed_rows(caplog):
    rows = [
        {"name": "Ok", "hex": "#00FF00"},
        {"name": "", "hex": "#000000"},
        {"name": "BadHex", "hex": "zzz"},
        {"hex": "#123456"},
        "not a row",
        {"name": "AlsoOk", "hex": "abcdef"},
    ]
    with caplog.at_level(logging.WARNING, logger=pal.__name__):
        out = pal.build_palette(rows, source="test")

    assert [(e.name, e.hex) for e in out] == [("Ok", "00FF00"), ("AlsoOk", "ABCDEF")]
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 4


def test_build_palette_applies_formatter():
    out = pal.build_palette([{"name": "Deep_Red", "hex": "#800000"}], formatter=pal.format_iscc_name)
    assert out[0].name == "Deep Red"


def test_css_palette_from_overridden_data_dir(tmp_path):
    (tmp_path / "css_colors.json").write_text(
        json.dumps([{"name": "Red", "hex": "#FF0000"}, {"name": "Broken", "hex": "#F00"}]),
        encoding="utf-8",
    )
    with LC.temp_data_dir(tmp_path):
        pal.clear_palette_cache()
        css = pal.get_css_palette()
    assert [(e.name, e.hex) for e in css] == [("Red", "FF0000")]


def test_generic_data_dir_env_does_not_hide_packaged_tables(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    pal.clear_palette_cache()
    assert len(pal.get_css_palette()) == 141
    names = importlib.import_module("color_namer").names_for_hex("008080")
    assert names.detailed == "Teal"


def test_table_with_non_object_rows_is_rejected(tmp_path):
    (tmp_path / "css_colors.json").write_text(
        json.dumps([{"name": "Red", "hex": "#FF0000"}, "Blue"]),
        encoding="utf-8",
    )
    with LC.temp_data_dir(tmp_path):
        pal.clear_palette_cache()
        with pytest.raises(LC.ConfigTypeError):
            pal.get_css_palette()


def test_format_css_name():
    assert pal.format_css_name("LightGoldenrodYellow") == "Light Goldenrod Yellow"
