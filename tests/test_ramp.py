# tests/test_ramp.py

import pytest

from palette_engine.color import ColorParseError, to_oklch
from palette_engine.ramp import (
    DEFAULT_SHIFT,
    NEUTRAL_ANCHORS,
    TAILWIND_STOPS,
    anchor_path_ramp,
    classify_contrast,
    derive_neutral_ramp,
    find_base_position,
    generate_ramp,
    pick,
    ramp_hexes,
    stop_labels,
    try_generate_ramp,
)

SEEDS = ["#3b82f6", "#10b981", "#808080", "#f59e0b", "#7c3aed"]

# ──────────────────────────────────────────────────────────────────────────────
# generate_ramp
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("stops", [9, 10, 11])
def test_ramp_has_requested_stops_and_monotonic_luminance(seed, stops):
    ramp = generate_ramp(seed, stops=stops)
    assert len(ramp) == stops
    for stop in ramp:
        assert stop.hex.startswith("#") and len(stop.hex) == 7
    luminances = [stop.luminance for stop in ramp]
    assert all(a >= b for a, b in zip(luminances, luminances[1:]))


def test_blue_seed_is_reproduced_at_its_stop():
    ramp = generate_ramp("#3b82f6")
    by_label = {stop.label: stop.hex for stop in ramp}
    assert by_label[500] == "#3b82f6"
    assert ramp[0].luminance > ramp[-1].luminance


@pytest.mark.parametrize("seed", SEEDS)
def test_seed_sits_at_nearest_target(seed):
    ramp = generate_ramp(seed)
    base = find_base_position(to_oklch(seed).l)
    assert ramp[base].hex == seed


def test_labels_follow_tailwind():
    assert [s.label for s in generate_ramp("#3b82f6")] == list(TAILWIND_STOPS)
    assert [s.label for s in generate_ramp("#3b82f6", stops=10)] == list(TAILWIND_STOPS[:10])
    assert [s.label for s in generate_ramp("#3b82f6", stops=9)] == list(TAILWIND_STOPS[:9])


def test_short_ramps_keep_seed_inside():
    ramp = generate_ramp("#111111", stops=3)
    assert len(ramp) == 3
    assert "#111111" in ramp_hexes(ramp)


def test_explicit_labels_anchor_on_their_own_targets():
    ramp = generate_ramp("#3b82f6", stops=[500, 600, 700, 800])
    assert [s.label for s in ramp] == [500, 600, 700, 800]
    assert ramp[0].hex == "#3b82f6"
    luminances = [stop.luminance for stop in ramp]
    assert all(a > b for a, b in zip(luminances, luminances[1:]))


def test_explicit_labels_match_full_ramp_anchor():
    full = {s.label: s.hex for s in generate_ramp("#3b82f6")}
    dark_half = generate_ramp("#3b82f6", stops=[800, 400, 500, 950])
    assert [s.label for s in dark_half] == [400, 500, 800, 950]
    assert {s.label: s.hex for s in dark_half}[500] == full[500]


def test_find_base_position_uses_label_targets():
    assert find_base_position(0.60, [500, 600, 700, 800]) == 0
    assert find_base_position(0.25, [50, 900]) == 1


def test_single_stop_ramp_is_the_seed():
    ramp = generate_ramp("#3b82f6", stops=1)
    assert ramp_hexes(ramp) == ["#3b82f6"]


@pytest.mark.parametrize("count", [0, 12, -1])
def test_unsupported_stop_counts_raise(count):
    with pytest.raises(ValueError):
        stop_labels(count)


def test_unparseable_seed_fails_whole_ramp():
    with pytest.raises(ColorParseError):
        generate_ramp("definitely not a color")


def test_try_generate_ramp_returns_empty_on_bad_seed():
    assert try_generate_ramp("nope") == []
    assert len(try_generate_ramp("#3b82f6")) == 11


def test_contrast_shift_changes_ramp_but_keeps_size():
    plain = ramp_hexes(generate_ramp("#3b82f6"))
    expanded = ramp_hexes(generate_ramp("#3b82f6", contrast_shift=0.8))
    compressed = ramp_hexes(generate_ramp("#3b82f6", contrast_shift=-0.8))
    assert len(expanded) == len(compressed) == 11
    assert expanded != plain
    assert compressed != plain
    # endpoints carry no warp strength
    assert expanded[0] == plain[0]
    assert compressed[-1] == plain[-1]


def test_zero_coefficients_disable_the_warp():
    flat = DEFAULT_SHIFT._replace(expand_scale=0.0)
    assert ramp_hexes(generate_ramp("#3b82f6", contrast_shift=0.5, coefficients=flat)) == ramp_hexes(
        generate_ramp("#3b82f6")
    )


# ──────────────────────────────────────────────────────────────────────────────
# Accessibility classification
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "white, black, level",
    [
        (7.0, 1.5, "AAA"),
        (2.0, 10.5, "AAA"),
        (6.99, 2.0, "AA"),
        (4.5, 1.0, "AA"),
        (4.49, 3.0, "A"),
        (2.99, 2.99, "Fail"),
    ],
)
def test_classify_contrast_levels(white, black, level):
    assert classify_contrast(white, black).level == level


def test_text_flags_use_aa_threshold():
    acc = classify_contrast(4.5, 4.49)
    assert acc.text_on_white is True
    assert acc.text_on_black is False


def test_every_stop_is_classified_consistently():
    for stop in generate_ramp("#7c3aed"):
        best = max(stop.contrast.white, stop.contrast.black)
        expected = "AAA" if best >= 7 else "AA" if best >= 4.5 else "A" if best >= 3 else "Fail"
        assert stop.accessibility.level == expected


# ──────────────────────────────────────────────────────────────────────────────
# Anchors and neutral ramp
# ──────────────────────────────────────────────────────────────────────────────


def test_pick_clamps_and_defaults():
    ramp = ["#a", "#b", "#c"]
    assert pick(ramp, 50) == "#a"
    assert pick(ramp, 950) == "#c"
    assert pick(ramp, 123) == "#a"
    with pytest.raises(ValueError):
        pick([], 50)


def test_anchor_tables_are_read_only():
    with pytest.raises(TypeError):
        NEUTRAL_ANCHORS["light"]["bg"] = 100


@pytest.mark.parametrize("mode", ["light", "dark"])
def test_neutral_ramp_follows_mode_direction(mode):
    tones = derive_neutral_ramp("#64748b", mode)
    assert list(tones) == ["bg", "bg_2", "ui", "ui_2", "ui_3", "tx_3", "tx_2", "tx"]
    lightness = [to_oklch(value).l for value in tones.values()]
    if mode == "light":
        assert all(a >= b for a, b in zip(lightness, lightness[1:]))
    else:
        assert all(a <= b for a, b in zip(lightness, lightness[1:]))


def test_neutral_ramp_rejects_unknown_mode():
    with pytest.raises(ValueError):
        derive_neutral_ramp("#64748b", "sepia")


# ──────────────────────────────────────────────────────────────────────────────
# Path ramp
# ──────────────────────────────────────────────────────────────────────────────


def test_path_ramp_runs_through_anchors():
    path = anchor_path_ramp(["#ff0000", "#0000ff"], points=5)
    assert len(path) == 5
    assert path[0] == "#ff0000"
    assert path[-1] == "#0000ff"


def test_path_ramp_skips_bad_anchors():
    assert anchor_path_ramp(["bogus", "#00ff00"], points=3) == ["#00ff00"] * 3
    assert anchor_path_ramp(["bogus"]) == []
