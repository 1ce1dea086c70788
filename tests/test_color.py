# tests/test_color.py

import math

import pytest

from palette_engine import color as c

# ──────────────────────────────────────────────────────────────────────────────
# Parsing
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#3b82f6", "#3b82f6"),
        ("#3B82F6", "#3b82f6"),
        ("3b82f6", "#3b82f6"),
        ("#fff", "#ffffff"),
        ("rgb(255, 0, 0)", "#ff0000"),
        ("hsl(0 0% 100%)", "#ffffff"),
        ("0 0% 0%", "#000000"),
        ("white", "#ffffff"),
    ],
)
def test_to_hex_accepts_css_forms(value, expected):
    assert c.to_hex(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "not-a-color", None, 42])
def test_unparseable_colors_raise(value):
    with pytest.raises(c.ColorParseError):
        c.to_hex(value)


def test_color_parse_error_is_a_value_error():
    assert issubclass(c.ColorParseError, ValueError)


def test_oklch_round_trip_keeps_hex():
    for hex_color in ("#3b82f6", "#10b981", "#808080", "#000000", "#ffffff"):
        l, ch, h = c.to_oklch(hex_color)
        assert c.oklch_to_hex(l, ch, h) == hex_color


def test_achromatic_colors_have_zero_chroma_and_hue():
    oklch = c.to_oklch("#808080")
    assert oklch.c == 0.0
    assert oklch.h == 0.0
    assert 0.59 < oklch.l < 0.61


def test_white_oklch_lightness_is_one():
    assert c.to_oklch("#ffffff").l == pytest.approx(1.0, abs=1e-4)


# ──────────────────────────────────────────────────────────────────────────────
# Luminance and contrast
# ──────────────────────────────────────────────────────────────────────────────


def test_relative_luminance_extremes():
    assert c.relative_luminance(0, 0, 0) == 0.0
    assert c.relative_luminance(255, 255, 255) == pytest.approx(1.0)


def test_contrast_white_black_is_21():
    assert c.contrast_between("#ffffff", "#000000") == pytest.approx(21.0)
    assert c.contrast_between("#000000", "#ffffff") == pytest.approx(21.0)


def test_best_text_for():
    assert c.best_text_for("#ffffff") == "#000000"
    assert c.best_text_for("#000000") == "#ffffff"
    assert c.best_text_for("#1e3a8a") == "#ffffff"


# ──────────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────────


def test_mix_colors_endpoints():
    assert c.mix_colors("#ff0000", "#0000ff", 0.0) == "#ff0000"
    assert c.mix_colors("#ff0000", "#0000ff", 1.0) == "#0000ff"


def test_tweak_lightness_moves_lightness():
    base = c.to_oklch("#3b82f6").l
    assert c.to_oklch(c.tweak_lightness("#3b82f6", 0.1)).l > base
    assert c.to_oklch(c.tweak_lightness("#3b82f6", -0.1)).l < base


def test_mix_hue_takes_the_short_arc():
    assert c.mix_hue(350, 10, 0.1, 0.1, 0.5) == pytest.approx(0.0)
    assert c.mix_hue(10, 350, 0.1, 0.1, 0.5) == pytest.approx(0.0)
    # achromatic endpoints borrow the other side's hue
    assert c.mix_hue(0, 200, 0.0, 0.1, 0.3) == 200
    assert c.mix_hue(120, 0, 0.1, 0.0, 0.3) == 120


def test_oklch_matches_reference_values():
    l, ch, h = c.to_oklch("#ff0000")
    assert l == pytest.approx(0.628, abs=1e-3)
    assert ch == pytest.approx(0.2577, abs=1e-3)
    assert h == pytest.approx(29.23, abs=0.1)


def test_opacity_to_hex():
    assert c.opacity_to_hex(1.0) == "ff"
    assert c.opacity_to_hex(0.0) == "00"
    assert c.opacity_to_hex(2.0) == "ff"


def test_format_oklch_has_four_decimals():
    text = c.format_oklch("#ffffff")
    assert text.startswith("oklch(")
    parts = text[len("oklch("):-1].split()
    assert len(parts) == 3
    assert all(len(p.split(".")[1]) == 4 for p in parts)


def test_hsl_components_bare_triplet():
    assert c.hsl_components("#000000") == "0 0% 0%"
    assert c.hsl_components("#ffffff") == "0 0% 100%"


def test_create_color_clamps_channels():
    col = c.create_color(300, -5, 128)
    assert col.rgb == (255, 0, 128)
    assert col.hex == "#ff0080"
    assert math.isfinite(col.luminance)


def test_hue_distance_wraps():
    assert c.hue_distance(350, 10) == 20
    assert c.hue_distance(10, 350) == 20
