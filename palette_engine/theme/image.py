"""Derive a canonical theme from the dominant colors of an image."""

import logging
from collections import namedtuple

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from ..color import create_color, mix_colors, oklch_to_hex, to_oklch, tweak_lightness

logger = logging.getLogger(__name__)

Swatch = namedtuple("Swatch", ["color", "population"])

# (name, target lightness, min lightness, max lightness,
#  target saturation, min saturation, max saturation), HSL fractions
SWATCH_TARGETS = (
    ("vibrant", 0.50, 0.30, 0.70, 1.00, 0.35, 1.00),
    ("light_vibrant", 0.74, 0.55, 1.00, 1.00, 0.35, 1.00),
    ("dark_vibrant", 0.26, 0.00, 0.45, 1.00, 0.35, 1.00),
    ("muted", 0.50, 0.30, 0.70, 0.30, 0.00, 0.40),
    ("light_muted", 0.74, 0.55, 1.00, 0.30, 0.00, 0.40),
    ("dark_muted", 0.26, 0.00, 0.45, 0.30, 0.00, 0.40),
)

WEIGHT_SATURATION = 3.0
WEIGHT_LIGHTNESS = 6.0
WEIGHT_POPULATION = 1.0

CONTRAST_STEP = 0.04
CONTRAST_ITERATIONS = 20

# Hue buckets for theme names, upper bound exclusive
HUE_NAMES = (
    (30, "Crimson"),
    (60, "Amber"),
    (90, "Gold"),
    (150, "Emerald"),
    (210, "Cyan"),
    (270, "Sapphire"),
    (330, "Violet"),
    (360, "Ruby"),
)
MONOCHROME_CHROMA = 0.03


def extract_colors(image_path, n_colors=20):
    """Extract dominant colors using k-means clustering

    Returns:
        list: Swatch tuples sorted by population, largest first
    """
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)
    counts = np.bincount(kmeans.labels_, minlength=n_clusters)

    swatches = []
    for center, count in zip(kmeans.cluster_centers_, counts):
        r, g, b = int(center[0]), int(center[1]), int(center[2])
        swatches.append(Swatch(create_color(r, g, b), int(count)))

    return sorted(swatches, key=lambda s: s.population, reverse=True)


def classify_swatches(swatches):
    """Assign swatches to the vibrant/muted x dark/light roles.

    Each swatch fills at most one role; a role stays empty when no swatch
    falls inside its lightness and saturation window.
    """
    if not swatches:
        return {}

    max_population = max(s.population for s in swatches) or 1
    used = set()
    palette = {}

    for name, target_l, min_l, max_l, target_s, min_s, max_s in SWATCH_TARGETS:
        best = None
        best_score = None
        for swatch in swatches:
            if swatch.color.hex in used:
                continue
            _, s, l = swatch.color.hsl
            s, l = s / 100, l / 100
            if not (min_l <= l <= max_l and min_s <= s <= max_s):
                continue
            score = (
                (1 - abs(s - target_s)) * WEIGHT_SATURATION
                + (1 - abs(l - target_l)) * WEIGHT_LIGHTNESS
                + (swatch.population / max_population) * WEIGHT_POPULATION
            )
            if best_score is None or score > best_score:
                best, best_score = swatch, score

        if best is not None:
            used.add(best.color.hex)
            palette[name] = best
        else:
            logger.debug("No swatch fits the %s role", name)

    return palette


def ensure_contrast(fg, bg, min_ratio):
    """Walk fg's OKLCH lightness away from bg until the ratio is met.

    The ratio here is taken on OKLCH lightness, not WCAG luminance.
    """
    fg_l, fg_c, fg_h = to_oklch(fg)
    bg_l = to_oklch(bg).l

    for _ in range(CONTRAST_ITERATIONS):
        lighter = max(fg_l, bg_l)
        darker = min(fg_l, bg_l)
        if (lighter + 0.05) / (darker + 0.05) >= min_ratio:
            break
        if bg_l < 0.5:
            fg_l = min(1.0, fg_l + CONTRAST_STEP)
        else:
            fg_l = max(0.0, fg_l - CONTRAST_STEP)

    return oklch_to_hex(fg_l, fg_c, fg_h)


def _swatch_hex(palette, *names, default):
    for name in names:
        if name in palette:
            return palette[name].color.hex
    return default


def palette_to_theme(palette):
    """Map classified swatches onto a canonical light/dark theme.

    Args:
        palette: Output of classify_swatches

    Returns:
        dict: {"light": block, "dark": block}
    """
    darkest = _swatch_hex(palette, "dark_muted", "dark_vibrant", default="#0a0a0f")
    lightest = _swatch_hex(palette, "light_vibrant", "light_muted", default="#e0e0e0")
    primary = _swatch_hex(palette, "vibrant", default="#3b82f6")
    secondary = _swatch_hex(palette, "dark_vibrant", "muted", default="#6366f1")
    accent_1 = _swatch_hex(palette, "light_vibrant", default="#22d3ee")
    accent_2 = _swatch_hex(palette, "muted", default="#8b5cf6")
    accent_3 = _swatch_hex(palette, "light_muted", "dark_muted", default="#94a3b8")

    dark = {
        "bg": tweak_lightness(darkest, -0.05),
        "bg_2": tweak_lightness(darkest, -0.02),
        "ui": mix_colors(darkest, lightest, 0.08),
        "ui_2": mix_colors(darkest, lightest, 0.12),
        "ui_3": mix_colors(darkest, lightest, 0.16),
        "tx_3": ensure_contrast(tweak_lightness(lightest, -0.2), darkest, 2.5),
        "tx_2": ensure_contrast(tweak_lightness(lightest, -0.1), darkest, 3.5),
        "tx": ensure_contrast(tweak_lightness(lightest, 0.05), darkest, 4.5),
        "pr": ensure_contrast(primary, darkest, 3),
        "sc": ensure_contrast(secondary, darkest, 3),
        "ac_1": ensure_contrast(accent_1, darkest, 3),
        "ac_2": ensure_contrast(accent_2, darkest, 3),
        "ac_3": ensure_contrast(accent_3, darkest, 2.5),
    }

    light_bg = tweak_lightness(lightest, 0.1)
    light = {
        "bg": light_bg,
        "bg_2": tweak_lightness(light_bg, -0.03),
        "ui": mix_colors(light_bg, darkest, 0.06),
        "ui_2": mix_colors(light_bg, darkest, 0.1),
        "ui_3": mix_colors(light_bg, darkest, 0.14),
        "tx_3": ensure_contrast(tweak_lightness(darkest, 0.2), light_bg, 2.5),
        "tx_2": ensure_contrast(tweak_lightness(darkest, 0.1), light_bg, 3.5),
        "tx": ensure_contrast(tweak_lightness(darkest, -0.05), light_bg, 4.5),
        "pr": ensure_contrast(tweak_lightness(primary, -0.1), light_bg, 3),
        "sc": ensure_contrast(tweak_lightness(secondary, -0.1), light_bg, 3),
        "ac_1": ensure_contrast(tweak_lightness(accent_1, -0.15), light_bg, 3),
        "ac_2": ensure_contrast(tweak_lightness(accent_2, -0.1), light_bg, 3),
        "ac_3": ensure_contrast(tweak_lightness(accent_3, -0.05), light_bg, 2.5),
    }

    return {"light": light, "dark": dark}


def name_from_palette(palette):
    """Name a theme after the hue of its most vibrant color."""
    primary = _swatch_hex(palette, "vibrant", "muted", default="#808080")
    _, chroma, hue = to_oklch(primary)

    if chroma < MONOCHROME_CHROMA:
        return "Monochrome"
    for upper, name in HUE_NAMES:
        if hue < upper:
            return name
    return "Ruby"


def theme_from_image(image_path, n_colors=20):
    """Extract, classify and map an image's colors into a named theme.

    Returns:
        tuple: (theme dict with a "name" key, list of extracted Swatch tuples)
    """
    swatches = extract_colors(image_path, n_colors=n_colors)
    palette = classify_swatches(swatches)
    logger.info(
        "Classified %d of %d swatches from %s", len(palette), len(swatches), image_path
    )

    theme = palette_to_theme(palette)
    theme["name"] = name_from_palette(palette)
    return theme, swatches
