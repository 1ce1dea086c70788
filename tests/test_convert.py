# tests/test_convert.py

import pytest

from palette_engine.convert import (
    RAYSO_KEYS,
    SHADCN_SCHEMA,
    canonical_to_rayso,
    canonical_to_shadcn,
    extract_accents,
    project_foreign,
    rayso_to_canonical,
    rayso_to_shadcn,
    shadcn_to_canonical,
    tweakcn_to_canonical,
    tweakcn_to_rayso,
)
from palette_engine.ramp import generate_ramp, pick
from palette_engine.theme import CANONICAL_KEYS, validate_theme

SHADCN_THEME = {
    "light": {
        "background": "oklch(1 0 0)",
        "foreground": "oklch(0.145 0 0)",
        "card": "#fafafa",
        "primary": "#2563eb",
        "secondary": "#f4f4f5",
        "accent": "#10b981",
        "destructive": "#dc2626",
        "border": "#e4e4e7",
        "input": "#d4d4d8",
        "muted-foreground": "#71717a",
        "chart-2": "#0ea5e9",
        "chart-3": "#f59e0b",
        "chart-4": "#8b5cf6",
    },
    "dark": {
        "background": "#09090b",
        "foreground": "#fafafa",
        "primary": "#60a5fa",
        "border": "#27272a",
    },
}

# ──────────────────────────────────────────────────────────────────────────────
# shadcn / tweakcn -> canonical
# ──────────────────────────────────────────────────────────────────────────────


def test_shadcn_to_canonical_is_a_valid_theme():
    theme = shadcn_to_canonical(SHADCN_THEME)
    validated = validate_theme(theme)
    for mode in ("light", "dark"):
        assert list(validated[mode]) == list(CANONICAL_KEYS)


def test_shadcn_fields_pass_through_as_hex():
    light = shadcn_to_canonical(SHADCN_THEME)["light"]
    assert light["bg"] == "#ffffff"
    assert light["bg_2"] == "#fafafa"
    assert light["ui"] == "#e4e4e7"
    assert light["ui_3"] == "#d4d4d8"
    assert light["tx_2"] == "#71717a"
    assert light["ac_2"] == "#8b5cf6"
    assert light["ac_3"] == "#f59e0b"


def test_shadcn_accents_come_from_ramps():
    light = shadcn_to_canonical(SHADCN_THEME)["light"]
    assert light["pr"] == pick(generate_ramp("#2563eb"), 600)
    assert light["sc"] == pick(generate_ramp("#f4f4f5"), 600)
    # chart-2 seeds the accent ramp, read at the ui_3 anchor
    assert light["ac_1"] == pick(generate_ramp("#0ea5e9"), 400)


def test_missing_fields_fall_back_to_ramps():
    dark = shadcn_to_canonical(SHADCN_THEME)["dark"]
    neutral = generate_ramp("#27272a")
    assert dark["bg_2"] == pick(neutral, 900)
    assert dark["ui_2"] == pick(neutral, 700)
    assert dark["tx_3"] == pick(neutral, 400)
    accent = generate_ramp("#60a5fa")
    assert dark["ac_2"] == pick(accent, 600)
    assert dark["ac_3"] == pick(accent, 300)


def test_empty_blocks_never_crash():
    theme = shadcn_to_canonical({})
    assert theme["light"]["bg"] == "#ffffff"
    assert theme["light"]["tx"] == "#000000"
    assert theme["dark"]["bg"] == "#000000"
    assert set(theme["dark"]) == set(CANONICAL_KEYS)


def test_unparseable_fields_are_skipped():
    light = project_foreign(
        {"background": "garbage", "border": "nope", "input": "#d4d4d8"}, SHADCN_SCHEMA, "light"
    )
    assert light["bg"] == "#ffffff"
    assert light["ui_3"] == "#d4d4d8"
    assert light["ui"] == pick(generate_ramp("#d4d4d8"), 200)


def test_rayso_unreadable_fields_fall_back():
    rayso = {"light": {"background": "#ffffff", "primary": "not-a-color"}, "dark": {}}
    canonical = rayso_to_canonical(rayso)
    assert canonical == {"light": {"bg": "#ffffff"}, "dark": {}}

    tokens = rayso_to_shadcn(rayso)
    assert tokens["light"]["background"] == "#ffffff"
    assert tokens["light"]["primary"].startswith("#")
    assert tokens["dark"]["background"].startswith("#")


def test_rayso_colors_are_normalized_to_hex():
    canonical = rayso_to_canonical({"light": {"text": "rgb(16, 15, 15)", "primary": "#205EA6"}})
    assert canonical["light"] == {"tx": "#100f0f", "pr": "#205ea6"}
    assert canonical["dark"] == {}


def test_tweakcn_secondary_comes_from_accent_ramp():
    light = tweakcn_to_canonical(SHADCN_THEME)["light"]
    assert light["sc"] == pick(generate_ramp("#0ea5e9"), 500)
    dark = tweakcn_to_canonical(SHADCN_THEME)["dark"]
    assert dark["sc"] == pick(generate_ramp("#60a5fa"), 400)


# ──────────────────────────────────────────────────────────────────────────────
# ray.so
# ──────────────────────────────────────────────────────────────────────────────


def test_rayso_key_renames_round_trip(theme):
    rayso = canonical_to_rayso(theme)
    assert rayso["light"]["background"] == theme["light"]["bg"]
    assert rayso["dark"]["accent_3"] == theme["dark"]["ac_3"]
    assert set(rayso["light"]) == set(RAYSO_KEYS.values())
    assert rayso_to_canonical(rayso) == {mode: theme[mode] for mode in ("light", "dark")}


def test_rayso_to_shadcn_matches_canonical_mapping(theme):
    rayso = canonical_to_rayso(theme)
    assert rayso_to_shadcn(rayso) == canonical_to_shadcn(theme)


def test_tweakcn_to_rayso_keeps_background_and_text():
    rayso = tweakcn_to_rayso(SHADCN_THEME)
    light = rayso["light"]
    assert light["background"] == "#ffffff"
    assert light["text"].startswith("#") and len(light["text"]) == 7
    assert light["interface"] == "#e4e4e7"
    assert light["primary"] == "#2563eb"
    assert light["secondary"] == "#f4f4f5"
    assert set(light) == set(RAYSO_KEYS.values())


def test_extract_accents_prefers_distinct_colors():
    block = {"primary": "#2563eb", "secondary": "#2563eb", "accent": "#10b981", "chart-1": "#f59e0b"}
    accents = extract_accents(block, "light", "#2563eb")
    assert accents["accent"] == "#10b981"
    assert accents["accent_2"] == "#f59e0b"


def test_extract_accents_generates_missing_ones():
    accents = extract_accents({}, "dark", "#3b82f6")
    assert accents["accent"] == "#3b82f6"
    assert accents["accent_2"] != "#3b82f6"
    assert accents["accent_3"] not in ("#3b82f6", accents["accent_2"])


@pytest.mark.parametrize("mode", ["light", "dark"])
def test_extract_accents_uses_destructive_for_third(mode):
    block = {"accent": "#10b981", "destructive": "#dc2626"}
    accents = extract_accents(block, mode, "#2563eb")
    assert accents["accent"] == "#10b981"
    assert accents["accent_2"] == "#dc2626"
    assert accents["accent_3"] == "#dc2626"
