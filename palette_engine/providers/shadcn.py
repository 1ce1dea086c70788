import logging
import re

from ..color import (
    ColorParseError,
    best_text_for,
    format_oklch,
    hsl_components,
    tweak_lightness,
)
from ..overrides import normalize
from ..ramp import DESIGN_ANCHORS, MODES, generate_ramp, pick
from ..ramp.anchors import check_mode

logger = logging.getLogger(__name__)

DEFAULT_FONTS = {
    "font-sans": "Inter, ui-sans-serif, system-ui, sans-serif",
    "font-serif": 'Georgia, Cambria, "Times New Roman", serif',
    "font-mono": "JetBrains Mono, ui-monospace, SFMono-Regular, monospace",
}

DEFAULT_BASE = {"radius": "10px", "letter-spacing": "0em"}

DEFAULT_SHADOWS = {
    "shadow-color": "hsl(0 0% 0%)",
    "shadow-opacity": "0.1",
    "shadow-blur": "4px",
    "shadow-spread": "0px",
    "shadow-offset-x": "0px",
    "shadow-offset-y": "2px",
}

DEFAULT_BACKGROUND = {"light": "#ffffff", "dark": "#0b0b0f"}
NEUTRAL_FALLBACK = "#808080"
RAMP_FALLBACK = "#64748b"
DESTRUCTIVE_FALLBACK = "#ef4444"

RADIUS_RATIOS = {"sm": 0.75, "md": 1.0, "lg": 1.5, "xl": 2.0}
_RADIUS_RE = re.compile(r"^\s*(-?\d*\.?\d+)\s*([a-z%]*)\s*$")

# Normalized shadow field -> design token
SHADOW_FIELDS = {
    "color": "shadow-color",
    "opacity": "shadow-opacity",
    "blur": "shadow-blur",
    "spread": "shadow-spread",
    "offsetX": "shadow-offset-x",
    "offsetY": "shadow-offset-y",
}

COLOR_TOKENS = frozenset(
    [
        "background",
        "foreground",
        "background-foreground",
        "card",
        "card-foreground",
        "popover",
        "popover-foreground",
        "primary",
        "primary-foreground",
        "secondary",
        "secondary-foreground",
        "muted",
        "muted-foreground",
        "accent",
        "accent-foreground",
        "destructive",
        "destructive-foreground",
        "border",
        "input",
        "ring",
        "chart-1",
        "chart-2",
        "chart-3",
        "chart-4",
        "chart-5",
        "sidebar",
        "sidebar-foreground",
        "sidebar-primary",
        "sidebar-primary-foreground",
        "sidebar-accent",
        "sidebar-accent-foreground",
        "sidebar-border",
        "sidebar-ring",
        "shadow-color",
    ]
)

THEME_INLINE_BLOCK = """@theme inline {
  --color-background: var(--background);
  --color-foreground: var(--foreground);
  --color-card: var(--card);
  --color-card-foreground: var(--card-foreground);
  --color-popover: var(--popover);
  --color-popover-foreground: var(--popover-foreground);
  --color-primary: var(--primary);
  --color-primary-foreground: var(--primary-foreground);
  --color-secondary: var(--secondary);
  --color-secondary-foreground: var(--secondary-foreground);
  --color-muted: var(--muted);
  --color-muted-foreground: var(--muted-foreground);
  --color-accent: var(--accent);
  --color-accent-foreground: var(--accent-foreground);
  --color-destructive: var(--destructive);
  --color-destructive-foreground: var(--destructive-foreground);
  --color-border: var(--border);
  --color-input: var(--input);
  --color-ring: var(--ring);
  --color-chart-1: var(--chart-1);
  --color-chart-2: var(--chart-2);
  --color-chart-3: var(--chart-3);
  --color-chart-4: var(--chart-4);
  --color-chart-5: var(--chart-5);
  --color-sidebar: var(--sidebar);
  --color-sidebar-foreground: var(--sidebar-foreground);
  --color-sidebar-primary: var(--sidebar-primary);
  --color-sidebar-primary-foreground: var(--sidebar-primary-foreground);
  --color-sidebar-accent: var(--sidebar-accent);
  --color-sidebar-accent-foreground: var(--sidebar-accent-foreground);
  --color-sidebar-border: var(--sidebar-border);
  --color-sidebar-ring: var(--sidebar-ring);

  --font-sans: var(--font-sans);
  --font-mono: var(--font-mono);
  --font-serif: var(--font-serif);

  --radius-sm: calc(var(--radius) - 4px);
  --radius-md: calc(var(--radius) - 2px);
  --radius-lg: var(--radius);
  --radius-xl: calc(var(--radius) + 4px);

  --shadow-2xs: var(--shadow-2xs);
  --shadow-xs: var(--shadow-xs);
  --shadow-sm: var(--shadow-sm);
  --shadow: var(--shadow);
  --shadow-md: var(--shadow-md);
  --shadow-lg: var(--shadow-lg);
  --shadow-xl: var(--shadow-xl);
  --shadow-2xl: var(--shadow-2xl);
}"""


def _first(block, *keys, default=None):
    for key in keys:
        if block.get(key):
            return block[key]
    return default


def surface(background, mode, delta):
    """Step a surface off the background: lighter in light mode, darker in dark."""
    return tweak_lightness(background, delta if mode == "light" else -delta)


def expand_radius(radius):
    """Expand a radius override into sm/md/lg/xl sizes.

    A scalar like "0.5rem" is scaled by fixed ratios; a mapping is taken as
    given; a scalar without a readable number is used for every size.
    """
    if isinstance(radius, dict):
        return dict(radius)

    text = str(radius)
    match = _RADIUS_RE.match(text)
    if not match:
        return {size: text for size in RADIUS_RATIOS}

    value = float(match.group(1))
    unit = match.group(2)
    return {
        size: f"{round(value * ratio, 4):g}{unit}" for size, ratio in RADIUS_RATIOS.items()
    }


def _design_palette(block, mode):
    background = block.get("bg") or DEFAULT_BACKGROUND[mode]
    foreground = block.get("tx") or best_text_for(background)

    neutral_ramp = generate_ramp(
        _first(block, "ui", "ui_2", "ui_3", "bg", default=NEUTRAL_FALLBACK)
    )
    primary_ramp = generate_ramp(_first(block, "pr", default=RAMP_FALLBACK))
    accent_ramp = generate_ramp(
        _first(block, "sc", "ac_1", "ac_2", "pr", default=RAMP_FALLBACK)
    )
    destructive_ramp = generate_ramp(_first(block, "ac_3", default=DESTRUCTIVE_FALLBACK))

    anchors = DESIGN_ANCHORS[mode]
    light = mode == "light"

    primary = pick(primary_ramp, anchors["primary"])
    secondary = pick(accent_ramp, 500 if light else 400)
    accent = pick(accent_ramp, anchors["accent"])
    muted = pick(neutral_ramp, anchors["muted"])
    border = pick(neutral_ramp, anchors["border"])
    destructive = pick(destructive_ramp, 500 if light else 400)

    ring = tweak_lightness(primary, 0.1 if light else -0.1)
    card = surface(background, mode, 0.03)
    popover = surface(background, mode, 0.02)
    sidebar_accent = surface(background, mode, 0.04)

    return {
        "background": background,
        "foreground": foreground,
        "background-foreground": best_text_for(background),
        "card": card,
        "card-foreground": best_text_for(card),
        "popover": popover,
        "popover-foreground": best_text_for(popover),
        "primary": primary,
        "primary-foreground": best_text_for(primary),
        "secondary": secondary,
        "secondary-foreground": best_text_for(secondary),
        "muted": muted,
        "muted-foreground": pick(neutral_ramp, anchors["muted_fg"]),
        "accent": accent,
        "accent-foreground": best_text_for(accent),
        "destructive": destructive,
        "destructive-foreground": best_text_for(destructive),
        "border": border,
        "input": tweak_lightness(border, -0.1 if light else 0.1),
        "ring": ring,
        "chart-1": pick(primary_ramp, 500),
        "chart-2": pick(accent_ramp, 500),
        "chart-3": pick(primary_ramp, 300),
        "chart-4": pick(accent_ramp, 700),
        "chart-5": pick(primary_ramp, 700),
        "sidebar": background,
        "sidebar-foreground": best_text_for(background),
        "sidebar-primary": primary,
        "sidebar-primary-foreground": best_text_for(primary),
        "sidebar-accent": sidebar_accent,
        "sidebar-accent-foreground": best_text_for(sidebar_accent),
        "sidebar-border": border,
        "sidebar-ring": ring,
    }


def map_to_design_tokens(block, mode, overrides=None):
    """Map one canonical block onto the design-system token set.

    Args:
        block: Canonical block (missing keys fall back to defaults)
        mode: "light" or "dark"
        overrides: Design-system override in any accepted shape. Mode colors
            replace tokens verbatim; shadows, fonts, radius and letter spacing
            replace the static defaults.

    Returns:
        dict: token name -> value

    Raises:
        ColorParseError: If a seed color in the block cannot be parsed
    """
    check_mode(mode)
    tokens = _design_palette(block, mode)
    tokens.update(DEFAULT_BASE)
    tokens.update(DEFAULT_FONTS)
    tokens.update(DEFAULT_SHADOWS)

    override = normalize(overrides) if overrides else {}

    for key, value in (override.get(mode) or {}).items():
        if isinstance(value, str):
            tokens[key] = value
        elif isinstance(value, (int, float)):
            tokens[key] = str(value)

    shadow = (override.get("shadows") or {}).get(mode) or {}
    for field, token in SHADOW_FIELDS.items():
        if shadow.get(field) not in (None, ""):
            tokens[token] = str(shadow[field])

    for key, value in (override.get("fonts") or {}).items():
        if value:
            name = key if key.startswith("font-") else f"font-{key}"
            tokens[name] = value

    if override.get("radius"):
        sizes = expand_radius(override["radius"])
        for size, value in sizes.items():
            tokens[f"radius-{size}"] = value
        tokens["radius"] = sizes.get("md") or next(iter(sizes.values()))

    letter_spacing = override.get("letter_spacing") or override.get("letterSpacing")
    if letter_spacing:
        tokens["letter-spacing"] = letter_spacing

    return tokens


def _shadow_hsl(color):
    if color.startswith("hsl("):
        return color[4:].rstrip(")").replace(",", " ").strip()
    try:
        return hsl_components(color)
    except ColorParseError:
        logger.warning("Unreadable shadow color %r, using black", color)
        return "0 0% 0%"


def _px(value):
    try:
        return float(str(value).replace("px", "") or 0)
    except ValueError:
        return 0.0


def compute_shadow_vars(tokens):
    """Expand one shadow definition into the eight elevation tiers.

    Args:
        tokens: Mapping with the shadow-* tokens; missing ones use defaults

    Returns:
        dict: shadow-2xs ... shadow-2xl as CSS box-shadow values
    """
    color = str(tokens.get("shadow-color") or DEFAULT_SHADOWS["shadow-color"])
    opacity = float(tokens.get("shadow-opacity") or DEFAULT_SHADOWS["shadow-opacity"])
    offset_x = tokens.get("shadow-offset-x") or DEFAULT_SHADOWS["shadow-offset-x"]
    offset_y = tokens.get("shadow-offset-y") or DEFAULT_SHADOWS["shadow-offset-y"]
    blur = tokens.get("shadow-blur") or DEFAULT_SHADOWS["shadow-blur"]
    spread = tokens.get("shadow-spread") or DEFAULT_SHADOWS["shadow-spread"]

    hsl = _shadow_hsl(color)

    def with_opacity(multiplier):
        return f"hsl({hsl} / {opacity * multiplier:.2f})"

    def second_layer(layer_offset_y, layer_blur):
        layer_spread = f"{_px(spread) - 1:g}px"
        return f"{offset_x} {layer_offset_y} {layer_blur} {layer_spread} {with_opacity(1.0)}"

    base = f"{offset_x} {offset_y} {blur} {spread}"
    return {
        "shadow-2xs": f"{base} {with_opacity(0.5)}",
        "shadow-xs": f"{base} {with_opacity(0.5)}",
        "shadow-sm": f"{base} {with_opacity(1.0)}, {second_layer('1px', '2px')}",
        "shadow": f"{base} {with_opacity(1.0)}, {second_layer('1px', '2px')}",
        "shadow-md": f"{base} {with_opacity(1.0)}, {second_layer('2px', '4px')}",
        "shadow-lg": f"{base} {with_opacity(1.0)}, {second_layer('4px', '6px')}",
        "shadow-xl": f"{base} {with_opacity(1.0)}, {second_layer('8px', '10px')}",
        "shadow-2xl": f"{base} {with_opacity(2.5)}",
    }


def convert_theme(theme, overrides=None):
    """Map both modes of a canonical theme to design tokens."""
    return {mode: map_to_design_tokens(theme[mode], mode, overrides) for mode in MODES}


def _format_value(key, value):
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value)
    if key in COLOR_TOKENS and text.startswith(("#", "hsl", "rgb")):
        try:
            return format_oklch(text)
        except ColorParseError:
            return text
    return text


def _css_block(selector, tokens):
    lines = [f"{selector} {{"]
    for key, value in tokens.items():
        formatted = _format_value(key, value)
        if formatted is not None:
            lines.append(f"  --{key}: {formatted};")
    lines.append("}")
    return "\n".join(lines)


def design_tokens_css(theme, overrides=None):
    """Render :root and .dark custom-property blocks plus the alias block."""
    converted = convert_theme(theme, overrides)
    blocks = []
    for mode, selector in (("light", ":root"), ("dark", ".dark")):
        tokens = dict(converted[mode])
        tokens.update(compute_shadow_vars(tokens))
        blocks.append(_css_block(selector, tokens))
    blocks.append(THEME_INLINE_BLOCK)
    return "\n\n".join(blocks) + "\n"
