# tests/test_terminal.py

import json

import pytest
import yaml

from palette_engine.providers import alacritty, gimp, kitty, terminal, windows_terminal

# ──────────────────────────────────────────────────────────────────────────────
# Shared ANSI mapping
# ──────────────────────────────────────────────────────────────────────────────


def test_ansi_colors_cover_twelve_slots(theme):
    colors = terminal.ansi_colors(theme["dark"])
    assert set(colors) == set(terminal.ANSI_SAMPLES)
    path = terminal.theme_path(theme["dark"])
    assert len(path) == 11
    assert colors["red"] == path[8]
    assert colors["green2"] == path[1]


def test_ansi_colors_fall_back_without_anchors():
    colors = terminal.ansi_colors({"ac_1": "bogus"})
    assert colors == {slot: fallback for slot, (_, fallback) in terminal.ANSI_SAMPLES.items()}


def test_opposite_mode_background(theme):
    dark = terminal.terminal_palette(theme, "dark")
    light = terminal.terminal_palette(theme, "light")
    assert dark["opposite_bg"] == theme["light"]["bg"]
    assert light["opposite_bg"] == theme["dark"]["bg"]


def test_slug_and_display_name():
    assert terminal.theme_slug("My Theme", "dark") == "my-theme-dark"
    assert terminal.display_name("paper", "light") == "Paper (Light)"
    assert terminal.hex_to_int_rgb("nope") == (128, 128, 128)


# ──────────────────────────────────────────────────────────────────────────────
# Kitty
# ──────────────────────────────────────────────────────────────────────────────


def test_kitty_dark_black_is_light_background(theme):
    colors = kitty.kitty_colors(theme, "dark")
    assert colors["color0"] == theme["light"]["bg"]
    assert colors["color15"] == theme["light"]["bg"]
    assert colors["color7"] == theme["dark"]["tx"]
    assert colors["cursor"] == theme["dark"]["ac_1"]
    assert all(f"color{i}" in colors for i in range(16))


def test_kitty_conf_lines(theme):
    conf = kitty.kitty_conf(theme, "Paper")
    lines = conf.splitlines()
    assert lines[0] == "# Theme: Paper (Dark)"
    assert f"background {theme['dark']['bg']}" in lines
    assert f"color0 {theme['light']['bg']}" in lines
    assert "# Black" in lines
    assert lines.index("color0 " + theme["light"]["bg"]) + 1 == next(
        i for i, line in enumerate(lines) if line.startswith("color8 ")
    )


# ──────────────────────────────────────────────────────────────────────────────
# Alacritty
# ──────────────────────────────────────────────────────────────────────────────


def test_alacritty_yaml_parses(theme):
    data = yaml.safe_load(alacritty.alacritty_yaml(theme, "dark"))
    colors = data["colors"]
    assert colors["primary"]["background"] == theme["dark"]["bg"]
    assert colors["normal"]["black"] == theme["light"]["bg"]
    assert colors["bright"]["black"] == theme["dark"]["tx_3"]
    assert colors["bright"]["white"] == theme["light"]["bg"]
    assert colors["dim"]["white"] == theme["dark"]["tx_2"]
    assert list(colors["normal"]) == [
        "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"
    ]


# ──────────────────────────────────────────────────────────────────────────────
# Windows Terminal
# ──────────────────────────────────────────────────────────────────────────────


def test_windows_terminal_schemes(theme):
    data = json.loads(windows_terminal.windows_terminal_json(theme, "Paper"))
    assert data["$schema"] == windows_terminal.SCHEMA_URL
    light, dark = data["schemes"]
    assert light["name"] == "Paper (Light)"
    assert dark["name"] == "Paper (Dark)"
    assert dark["black"] == theme["light"]["bg"]
    assert dark["brightWhite"] == theme["light"]["bg"]
    assert dark["white"] == theme["dark"]["bg_2"]
    assert "purple" in dark and "brightPurple" in dark
    assert "magenta" not in dark


# ──────────────────────────────────────────────────────────────────────────────
# GIMP
# ──────────────────────────────────────────────────────────────────────────────


def test_gimp_palette_header_and_rows(theme):
    text = gimp.gimp_palette(theme, "Paper")
    lines = text.splitlines()
    assert lines[:4] == ["GIMP Palette", "Name: Paper (Dark)", "Columns: 8", "#"]
    assert lines[4].endswith("  Background")
    assert lines[4].split()[:3] == ["16", "15", "15"]
    assert lines[-1].endswith("Path 11")
    assert text.endswith("\n")


@pytest.mark.parametrize("mode", ["light", "dark"])
def test_gimp_columns_are_aligned(theme, mode):
    lines = gimp.gimp_palette(theme, "Paper", mode=mode).splitlines()[4:]
    assert len({len(line.rsplit("  ", 1)[0]) for line in lines}) == 1
