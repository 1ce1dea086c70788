from ..color import oklch_to_hex, to_oklch
from ..providers import shadcn
from ..ramp import MODES, NEUTRAL_ANCHORS, generate_ramp, pick
from .foreign import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    DEFAULT_PRIMARY,
    SHADCN_SCHEMA,
    TWEAKCN_SCHEMA,
    first_color,
    project_foreign,
    read_color,
)

# canonical key -> ray.so key
RAYSO_KEYS = {
    "bg": "background",
    "bg_2": "background_2",
    "ui": "interface",
    "ui_2": "interface_2",
    "ui_3": "interface_3",
    "tx_3": "text_3",
    "tx_2": "text_2",
    "tx": "text",
    "pr": "primary",
    "sc": "secondary",
    "ac_1": "accent",
    "ac_2": "accent_2",
    "ac_3": "accent_3",
}
CANONICAL_KEYS_BY_RAYSO = {rayso: canonical for canonical, rayso in RAYSO_KEYS.items()}

ACCENT_SOURCES = (
    "secondary",
    "accent",
    "destructive",
    "chart-1",
    "chart-2",
    "chart-3",
    "chart-4",
    "chart-5",
)

# Foreign fields kept on a ray.so block when present
RAYSO_PASSTHROUGH = {
    "background_2": ("card", "popover"),
    "interface": ("border",),
    "interface_3": ("input",),
    "text_2": ("muted-foreground",),
}

NEUTRAL_SEED_CHROMA = 0.3


def _both_modes(theme, convert):
    theme = theme or {}
    return {mode: convert(theme.get(mode) or {}, mode) for mode in MODES}


def shadcn_to_canonical(theme):
    """Rebuild a canonical theme from shadcn/ui light and dark token maps."""
    return _both_modes(theme, lambda block, mode: project_foreign(block, SHADCN_SCHEMA, mode))


def tweakcn_to_canonical(theme):
    """Rebuild a canonical theme from a tweakcn theme."""
    return _both_modes(theme, lambda block, mode: project_foreign(block, TWEAKCN_SCHEMA, mode))


def canonical_to_shadcn(theme, overrides=None):
    return shadcn.convert_theme(theme, overrides)


def _rayso_block_to_canonical(block, mode):
    canonical = {}
    for key, canonical_key in CANONICAL_KEYS_BY_RAYSO.items():
        color = read_color(block, key)
        if color:
            canonical[canonical_key] = color
    return canonical


def rayso_to_canonical(theme):
    """Rename ray.so keys to canonical keys.

    Unknown keys and unreadable colors are dropped, so the design mapper's
    fallbacks fill the gaps.
    """
    return _both_modes(theme, _rayso_block_to_canonical)


def canonical_to_rayso(theme):
    return {
        mode: {RAYSO_KEYS[key]: value for key, value in theme[mode].items() if key in RAYSO_KEYS}
        for mode in MODES
    }


def rayso_to_shadcn(theme, overrides=None):
    """Map a ray.so theme to design tokens through the canonical model."""
    return canonical_to_shadcn(rayso_to_canonical(theme), overrides)


def _neutral_seed(background, foreground):
    """A low-chroma seed halfway between background and foreground."""
    bg = to_oklch(background)
    fg = to_oklch(foreground)
    return oklch_to_hex(
        (bg.l + fg.l) / 2,
        min(bg.c, fg.c) * NEUTRAL_SEED_CHROMA,
        bg.h,
    )


def extract_accents(block, mode, primary):
    """Pick three accents that differ from the primary.

    Distinct colors are taken from the secondary, accent, destructive and
    chart fields in that order. Missing ones are generated from the first
    accent: a 60 degree hue turn for accent_2 and the complement for accent_3.
    """
    distinct = []
    for key in ACCENT_SOURCES:
        color = read_color(block, key)
        if color and color != primary:
            distinct.append(color)
    distinct = distinct[:3]

    accent = distinct[0] if distinct else read_color(block, "secondary") or primary
    base = to_oklch(accent)

    if len(distinct) > 1:
        accent_2 = distinct[1]
    elif mode == "light":
        accent_2 = oklch_to_hex(
            max(0.3, min(0.8, base.l + 0.1)), max(0.05, base.c * 1.1), (base.h + 60) % 360
        )
    else:
        accent_2 = oklch_to_hex(
            max(0.2, min(0.9, base.l - 0.1)), max(0.05, base.c * 1.1), (base.h + 60) % 360
        )

    if len(distinct) > 2:
        accent_3 = distinct[2]
    else:
        accent_3 = read_color(block, "destructive")
    if not accent_3:
        if mode == "light":
            lightness = max(0.25, min(0.75, base.l - 0.05))
        else:
            lightness = max(0.25, min(0.85, base.l + 0.05))
        accent_3 = oklch_to_hex(lightness, max(0.08, base.c * 1.2), (base.h + 180) % 360)

    return {"accent": accent, "accent_2": accent_2, "accent_3": accent_3}


def _tweakcn_block_to_rayso(block, mode):
    background = read_color(block, "background") or DEFAULT_BACKGROUND[mode]
    foreground = read_color(block, "foreground") or DEFAULT_FOREGROUND[mode]
    primary = read_color(block, "primary") or DEFAULT_PRIMARY[mode]

    neutral_ramp = generate_ramp(_neutral_seed(background, foreground))
    rayso = {
        RAYSO_KEYS[key]: pick(neutral_ramp, step)
        for key, step in NEUTRAL_ANCHORS[mode].items()
    }
    rayso["background"] = background
    rayso["text"] = foreground
    for key, fields in RAYSO_PASSTHROUGH.items():
        color = first_color(block, fields)
        if color:
            rayso[key] = color

    accents = extract_accents(block, mode, primary)
    rayso["primary"] = primary
    rayso.update(accents)
    rayso["secondary"] = read_color(block, "secondary") or accents["accent"]
    return rayso


def tweakcn_to_rayso(theme):
    """Map a tweakcn theme to a ray.so theme with a neutral scale and three accents."""
    return _both_modes(theme, _tweakcn_block_to_rayso)
