# tests/test_color_logic_classification.py
"""
Tests for hue geometry (minimal names) and alias scoring.

All thresholds are exercised through the public helpers; alias-table isolation
uses monkeypatch on the scoring module's COLOR_ALIAS_RULES.
"""

from __future__ import annotations

import importlib

import pytest

hg = importlib.import_module("color_namer.naming.color.logic.classification.hue_geometry")
ar = importlib.import_module("color_namer.naming.color.logic.classification.alias_rules")
sc = importlib.import_module("color_namer.naming.color.logic.classification.alias_scoring")
C = importlib.import_module("color_namer.naming.color.constants")
B = C.BaseColor


# ──────────────────────────────────────────────────────────────────────────────
# Boundaries
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("s, v, expected", [(0.8, 0.5, 43.0), (0.5, 0.9, 35.0), (0.7, 0.5, 40.0), (0.7, 0.9, 40.0)])
def test_orange_yellow_boundary(s, v, expected):
    assert hg.orange_yellow_boundary(s, v) == expected


@pytest.mark.parametrize("s, v, expected", [(0.9, 0.3, 342.0), (0.6, 0.6, 332.0), (0.3, 0.9, 305.0), (0.5, 0.9, 318.0)])
def test_purple_pink_boundary(s, v, expected):
    assert hg.purple_pink_boundary(s, v) == expected


def test_hue_boundaries_order():
    bounds = hg.hue_boundaries(0.5, 0.5)
    assert [(b.a, b.b) for b in bounds] == [
        (B.RED, B.ORANGE),
        (B.ORANGE, B.YELLOW),
        (B.YELLOW, B.GREEN),
        (B.GREEN, B.BLUE),
        (B.BLUE, B.PURPLE),
        (B.PURPLE, B.PINK),
        (B.PINK, B.RED),
    ]
    assert [b.angle for b in bounds] == [18.0, 40.0, 78.0, 170.0, 250.0, 318.0, 347.5]


# ──────────────────────────────────────────────────────────────────────────────
# chromatic_base
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "h, s, v, expected",
    [
        (5.0, 0.5, 0.9, B.PINK),  # light warm red
        (358.0, 0.5, 0.6, B.PINK),  # desaturated near-red
        (30.0, 0.6, 0.4, B.BROWN),
        (30.0, 0.95, 0.6, B.ORANGE),  # vivid, escapes brown
        (0.0, 1.0, 1.0, B.RED),
        (349.0, 1.0, 1.0, B.RED),
        (20.0, 1.0, 1.0, B.ORANGE),
        (60.0, 1.0, 1.0, B.YELLOW),
        (120.0, 1.0, 1.0, B.GREEN),
        (200.0, 1.0, 1.0, B.BLUE),
        (280.0, 1.0, 1.0, B.PURPLE),
        (330.0, 1.0, 1.0, B.PINK),
    ],
)
def test_chromatic_base(h, s, v, expected):
    assert hg.chromatic_base(h, s, v) == expected


def test_chromatic_base_boundaries_are_half_open():
    assert hg.chromatic_base(17.999, 1.0, 1.0) == B.RED
    assert hg.chromatic_base(18.0, 1.0, 1.0) == B.ORANGE
    assert hg.chromatic_base(170.0, 1.0, 1.0) == B.BLUE
    assert hg.chromatic_base(250.0, 1.0, 1.0) == B.PURPLE


# ──────────────────────────────────────────────────────────────────────────────
# CSS adoption & ambiguity threshold
# ──────────────────────────────────────────────────────────────────────────────
def test_should_adopt_css_base():
    assert hg.should_adopt_css_base(B.RED, B.RED, 100.0, 0.5, 0.5) is True
    assert hg.should_adopt_css_base(B.BLUE, B.RED, 200.0, 0.5, 0.5) is False  # no shared boundary
    assert hg.should_adopt_css_base(B.ORANGE, B.RED, 25.0, 0.9, 0.5) is True  # 7° ≤ 10°
    assert hg.should_adopt_css_base(B.ORANGE, B.RED, 30.0, 0.9, 0.5) is False  # 12° > 10°
    assert hg.should_adopt_css_base(B.ORANGE, B.RED, 31.0, 0.3, 0.5) is True  # 13° ≤ 14°
    assert hg.should_adopt_css_base(B.ORANGE, B.RED, 31.0, 0.5, 0.5) is False  # 13° > 12°


def test_compound_ambiguity_threshold():
    red_orange = hg.hue_boundaries(0.6, 0.8)[0]
    pink_red = hg.hue_boundaries(0.6, 0.8)[6]
    green_blue = hg.hue_boundaries(0.3, 0.5)[3]

    assert hg.compound_ambiguity_threshold(red_orange, 0.6, 0.8) == pytest.approx(7.4)
    assert hg.compound_ambiguity_threshold(red_orange, 0.6, 0.8, (B.RED, B.ORANGE)) == pytest.approx(8.3)
    assert hg.compound_ambiguity_threshold(red_orange, 0.6, 0.8, (B.GREEN, B.BLUE)) == pytest.approx(6.9)
    assert hg.compound_ambiguity_threshold(green_blue, 0.3, 0.5) == pytest.approx(9.0)
    assert hg.compound_ambiguity_threshold(pink_red, 0.96, 0.5) == pytest.approx(4.8)


def test_hue_compound_and_prefix():
    assert hg.hue_compound(B.RED, B.ORANGE) == "Reddish-orange"
    assert hg.hue_compound(B.ORANGE, B.RED) is None
    assert len(hg.HUE_COMPOUNDS) == 11

    assert hg.apply_light_dark_prefix("Red", B.RED, 0.5, 0.9) == "Light Red"
    assert hg.apply_light_dark_prefix("Red", B.RED, 0.5, 0.1) == "Dark Red"
    assert hg.apply_light_dark_prefix("Red", B.RED, 0.2, 0.9) == "Red"
    assert hg.apply_light_dark_prefix("Reddish-orange", B.ORANGE, 0.5, 0.9) == "Reddish-orange"
    assert hg.apply_light_dark_prefix("Gray", B.GRAY, 0.5, 0.9) == "Gray"


# ──────────────────────────────────────────────────────────────────────────────
# minimal_name
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "h, s, v, expected",
    [
        (0.0, 0.0, 0.05, "Black"),
        (0.0, 0.05, 0.97, "White"),
        (0.0, 0.05, 0.5, "Gray"),
        (220.0, 0.2, 0.5, "Grayish-blue"),
        (220.0, 0.2, 0.9, "White"),
        (120.0, 0.6, 0.5, "Green"),
        (120.0, 0.6, 0.95, "Light Green"),
        (120.0, 0.6, 0.15, "Dark Green"),
        (30.0, 0.6, 0.4, "Brown"),
        (30.0, 0.6, 0.15, "Dark Brown"),
        (168.0, 0.6, 0.6, "Bluish-green"),
    ],
)
def test_minimal_name_gates(h, s, v, expected):
    assert hg.minimal_name(h, s, v) == expected


def test_minimal_name_at_fixed_boundary_is_compound():
    assert hg.minimal_name(18.0, 0.6, 0.8) == "Reddish-orange"


def test_minimal_name_iscc_hint_redirects_compound():
    assert hg.minimal_name(168.0, 0.6, 0.6, iscc_hint=(B.GREEN, B.BLUE)) == "Greenish-blue"
    # hint off the boundary is ignored for the redirect
    assert hg.minimal_name(168.0, 0.6, 0.6, iscc_hint=(B.RED, B.ORANGE)) == "Bluish-green"


def test_minimal_name_css_hint_overrides_base():
    assert hg.minimal_name(172.0, 0.6, 0.6) == "Greenish-blue"
    assert hg.minimal_name(172.0, 0.6, 0.6, css_base_hint=B.GREEN) == "Bluish-green"
    # non-adjacent hint is ignored
    assert hg.minimal_name(172.0, 0.6, 0.6, css_base_hint=B.RED) == "Greenish-blue"


# ──────────────────────────────────────────────────────────────────────────────
# Alias table & scoring
# ──────────────────────────────────────────────────────────────────────────────
def test_alias_table_keeps_all_variants():
    names = [r.name for r in ar.COLOR_ALIAS_RULES]
    assert len(names) == 69
    assert names.count("teal") == 5
    assert names.count("lime") == 5
    assert names.count("slate") == 2
    neutral = [r.name for r in ar.COLOR_ALIAS_RULES if not r.is_hue_rule]
    assert neutral == ["ivory", "linen", "silver", "graphite", "charcoal"]


def test_centered_range_score():
    assert sc.centered_range_score(0.5, (0.0, 1.0)) == pytest.approx(1.0)
    assert sc.centered_range_score(1.0, (0.0, 1.0)) == pytest.approx(0.3)
    assert sc.centered_range_score(0.5, (0.5, 0.5)) == pytest.approx(1.0)
    assert sc.centered_range_score(0.9, (0.5, 0.5)) == 0.0


def test_required_alias_score():
    teal = ar.hue_alias("teal", [B.BLUE, B.GREEN], 172, 18, (0.24, 1.0), (0.16, 0.84), 0.58)
    silver = ar.neutral_alias("silver", [B.GRAY], (0.0, 0.1), (0.6, 0.92), 0.58)
    lime = ar.hue_alias("lime", [B.YELLOW, B.GREEN], 120, 16, (0.45, 1.0), (0.55, 1.0), 0.67)
    capped = ar.hue_alias("slate", [B.GRAY], 210, 10, (0.0, 1.0), (0.0, 1.0), 0.95)

    assert sc.required_alias_score(teal) == pytest.approx(0.60)
    assert sc.required_alias_score(silver) == pytest.approx(0.66)
    assert sc.required_alias_score(lime) == pytest.approx(0.71)
    assert sc.required_alias_score(capped) == pytest.approx(0.97)


def test_alias_boundary_threshold():
    assert sc.alias_boundary_threshold("teal", 0.5, 0.5) == pytest.approx(22.0)
    assert sc.alias_boundary_threshold("cyan", 0.3, 0.2) == pytest.approx(17.5)
    assert sc.alias_boundary_threshold("mint", 0.9, 0.5) == pytest.approx(16.0)


def test_boundary_distance_and_gate():
    both = frozenset({B.BLUE, B.GREEN})
    assert sc.boundary_distance_for_alias(B.BLUE, both, 172.0, 0.5, 0.5) == pytest.approx(2.0)
    assert sc.boundary_distance_for_alias(B.RED, both, 172.0, 0.5, 0.5) is None

    teal = ar.hue_alias("teal", [B.BLUE, B.GREEN], 180, 22, (0.15, 1.0), (0.12, 0.95), 0.46)
    mint = ar.hue_alias("mint", [B.GREEN], 150, 16, (0.18, 0.65), (0.72, 1.0))
    ivory = ar.neutral_alias("ivory", [B.WHITE, B.YELLOW], (0.02, 0.18), (0.90, 1.0), 0.81)

    assert sc.alias_boundary_gate(teal, B.BLUE, 175.0, 0.5, 0.5) is True
    assert sc.alias_boundary_gate(teal, B.BLUE, 220.0, 0.5, 0.5) is False  # 50° from 170
    assert sc.alias_boundary_gate(teal, B.RED, 175.0, 0.5, 0.5) is False  # no qualifying boundary
    assert sc.alias_boundary_gate(teal, None, 220.0, 0.5, 0.5) is True
    assert sc.alias_boundary_gate(mint, B.GREEN, 150.0, 0.5, 0.9) is True
    assert sc.alias_boundary_gate(ivory, B.YELLOW, 60.0, 0.1, 0.95) is True


def test_nearest_alias_tie_returns_none():
    twin = ar.neutral_alias("graphite", [B.GRAY], (0.0, 0.2), (0.0, 1.0), 0.5)
    assert sc.nearest_alias(B.GRAY, None, 0.0, 0.1, 0.5, rules=[twin]) == "graphite"
    assert sc.nearest_alias(B.GRAY, None, 0.0, 0.1, 0.5, rules=[twin, twin]) is None


@pytest.mark.parametrize(
    "bri_range, expected",
    [
        ((0.20, 0.90), None),  # gap 0.045
        ((0.21, 0.91), "pewter"),  # gap 0.054
    ],
)
def test_nearest_alias_tie_gap_cutoff(bri_range, expected):
    best = ar.neutral_alias("pewter", [B.GRAY], (0.0, 0.2), (0.0, 1.0), 0.5)
    runner_up = ar.neutral_alias("smoke", [B.GRAY], (0.0, 0.2), bri_range, 0.5)
    gap = sc.score_alias_rule(best, 0.0, 0.1, 0.5) - sc.score_alias_rule(runner_up, 0.0, 0.1, 0.5)
    assert (gap < C.ALIAS_TIE_GAP) == (expected is None)
    assert sc.nearest_alias(B.GRAY, None, 0.0, 0.1, 0.5, rules=[runner_up, best]) == expected


def test_nearest_alias_filters_by_bases_and_ranges():
    rule = ar.neutral_alias("charcoal", [B.GRAY], (0.0, 0.2), (0.0, 0.5), 0.5)
    assert sc.nearest_alias(B.BLUE, None, 0.0, 0.1, 0.25, rules=[rule]) is None  # base
    assert sc.nearest_alias(B.GRAY, B.BLUE, 0.0, 0.1, 0.25, rules=[rule]) is None  # chromatic ISCC base
    assert sc.nearest_alias(B.GRAY, B.GRAY, 0.0, 0.1, 0.25, rules=[rule]) == "charcoal"
    assert sc.nearest_alias(B.GRAY, None, 0.0, 0.3, 0.25, rules=[rule]) is None  # saturation
    assert sc.nearest_alias(None, None, 0.0, 0.1, 0.25, rules=[rule]) == "charcoal"


def test_nearest_alias_hue_radius():
    rule = ar.hue_alias("mint", [B.GREEN], 150, 16, (0.0, 1.0), (0.0, 1.0), 0.5)
    assert sc.nearest_alias(B.GREEN, None, 150.0, 0.5, 0.5, rules=[rule]) == "mint"
    assert sc.nearest_alias(B.GREEN, None, 167.0, 0.5, 0.5, rules=[rule]) is None


@pytest.fixture
def only_teal(monkeypatch):
    teal = ar.hue_alias("teal", [B.BLUE, B.GREEN], 180, 22, (0.15, 1.0), (0.12, 0.95), 0.46)
    monkeypatch.setattr(sc, "COLOR_ALIAS_RULES", (teal,))


def test_append_alias_teal_forces_compound(only_teal):
    assert sc.append_alias_if_needed("Blue", B.BLUE, None, 180.0, 0.6, 0.5) == "Greenish-blue (teal)"
    assert sc.append_alias_if_needed("Green", B.GREEN, None, 180.0, 0.6, 0.5) == "Bluish-green (teal)"
    assert sc.append_alias_if_needed("Greenish-blue", B.BLUE, None, 180.0, 0.6, 0.5) == "Greenish-blue (teal)"


def test_append_alias_passthrough(only_teal):
    assert sc.append_alias_if_needed("", None, None, 180.0, 0.6, 0.5) == ""
    assert sc.append_alias_if_needed("Blue (x)", B.BLUE, None, 180.0, 0.6, 0.5) == "Blue (x)"
    assert sc.append_alias_if_needed("Red", B.RED, None, 0.0, 0.6, 0.5) == "Red"


# ──────────────────────────────────────────────────────────────────────────────
# Lazy logic namespace
# ──────────────────────────────────────────────────────────────────────────────
def test_logic_namespace_loads_submodules_on_demand(monkeypatch):
    import sys

    prefix = "color_namer.naming.color.logic"
    for mod in [m for m in sys.modules if m == prefix or m.startswith(prefix + ".")]:
        monkeypatch.delitem(sys.modules, mod)

    logic = importlib.import_module(prefix)
    assert f"{prefix}.pipelines.name_pipeline" not in sys.modules
    assert f"{prefix}.classification.hue_geometry" not in sys.modules

    assert callable(logic.minimal_name)
    assert f"{prefix}.classification.hue_geometry" in sys.modules
    assert f"{prefix}.pipelines.name_pipeline" not in sys.modules

    with pytest.raises(AttributeError):
        logic.not_a_name
