"""Shared ANSI-16 mapping for the terminal exporters.

Normal and bright hues are sampled from an OKLCH path through the theme's
accents. The black and bright-white slots take the opposite mode's background,
so a dark scheme's black is the light background and vice versa.
"""

import logging
import re

from ..color import ColorParseError, hex_to_rgb, to_hex
from ..ramp import anchor_path_ramp, opposite_mode

logger = logging.getLogger(__name__)

PATH_ANCHOR_KEYS = ("ac_1", "sc", "pr", "ui_3")

# slot -> (fraction of the path, fallback when the path is empty)
ANSI_SAMPLES = {
    "red": (0.8, "#dc2626"),
    "green": (0.3, "#16a34a"),
    "yellow": (0.6, "#ca8a04"),
    "blue": (0.4, "#2563eb"),
    "magenta": (0.7, "#9333ea"),
    "cyan": (0.2, "#0891b2"),
    "red2": (0.9, "#ef4444"),
    "green2": (0.1, "#22c55e"),
    "yellow2": (0.5, "#eab308"),
    "blue2": (0.2, "#3b82f6"),
    "magenta2": (0.8, "#a855f7"),
    "cyan2": (0.1, "#06b6d4"),
}

ANSI_NAMES = ("red", "green", "yellow", "blue", "magenta", "cyan")


def theme_path(block):
    """The OKLCH path ANSI colors are sampled from."""
    return anchor_path_ramp([block.get(key) for key in PATH_ANCHOR_KEYS if block.get(key)])


def ansi_colors(block):
    """Sample the twelve chromatic ANSI slots from a canonical block."""
    path = theme_path(block)
    colors = {}
    for slot, (fraction, fallback) in ANSI_SAMPLES.items():
        index = int(len(path) * fraction)
        colors[slot] = path[index] if index < len(path) else fallback
    return colors


def terminal_palette(theme, mode):
    """Everything a terminal exporter needs for one mode.

    Returns:
        dict: the canonical block as hex, the twelve ANSI slots and
        "opposite_bg", the background of the other mode
    """
    block = theme[mode]
    palette = {}
    for key, value in block.items():
        try:
            palette[key] = to_hex(value)
        except ColorParseError:
            logger.warning("Leaving unparseable %s.%s as is", mode, key)
            palette[key] = value
    palette.update(ansi_colors(block))
    palette["opposite_bg"] = to_hex(theme[opposite_mode(mode)]["bg"])
    return palette


def theme_slug(name, mode=None):
    slug = re.sub(r"[^a-z0-9]", "-", name.lower())
    return f"{slug}-{mode}" if mode else slug


def display_name(name, mode=None):
    display = name[:1].upper() + name[1:]
    return f"{display} ({mode.title()})" if mode else display


def hex_to_int_rgb(hex_color):
    """Convert a color to 0-255 integers, falling back to mid grey."""
    try:
        return hex_to_rgb(to_hex(hex_color))
    except ColorParseError:
        logger.warning("Invalid color: %s, using fallback", hex_color)
        return (128, 128, 128)
