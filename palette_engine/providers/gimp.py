from collections import namedtuple

from ..ramp import MODES
from .terminal import display_name, hex_to_int_rgb, terminal_palette, theme_path

PaletteEntry = namedtuple("PaletteEntry", ["red", "green", "blue", "name"])

ENTRY_NAMES = {
    "bg": "Background",
    "bg_2": "Background Secondary",
    "ui": "Interface",
    "ui_2": "Interface Hover",
    "ui_3": "Interface Active",
    "tx_3": "Text Faint",
    "tx_2": "Text Muted",
    "tx": "Text",
    "pr": "Primary",
    "sc": "Secondary",
    "ac_1": "Accent",
    "ac_2": "Accent 2",
    "ac_3": "Accent 3",
    "red": "Red",
    "red2": "Light Red",
    "green": "Green",
    "green2": "Light Green",
    "yellow": "Yellow",
    "yellow2": "Light Yellow",
    "blue": "Blue",
    "blue2": "Light Blue",
    "magenta": "Magenta",
    "magenta2": "Light Magenta",
    "cyan": "Cyan",
    "cyan2": "Light Cyan",
}


def gimp_entries(theme, mode):
    """Named swatches for one mode: semantic colors, ANSI slots, then the path."""
    p = terminal_palette(theme, mode)
    entries = [
        PaletteEntry(*hex_to_int_rgb(p[key]), name)
        for key, name in ENTRY_NAMES.items()
        if key in p
    ]
    for index, hex_color in enumerate(theme_path(theme[mode]), start=1):
        entries.append(PaletteEntry(*hex_to_int_rgb(hex_color), f"Path {index}"))
    return entries


def convert_theme(theme):
    return {mode: gimp_entries(theme, mode) for mode in MODES}


def gimp_palette(theme, name="Palette Engine", mode="dark"):
    """Render a GIMP .gpl palette with right-aligned RGB columns."""
    entries = gimp_entries(theme, mode)
    widths = [
        max(len(str(getattr(entry, channel))) for entry in entries)
        for channel in ("red", "green", "blue")
    ]

    lines = ["GIMP Palette", f"Name: {display_name(name, mode)}", "Columns: 8", "#"]
    for entry in entries:
        red = str(entry.red).rjust(widths[0])
        green = str(entry.green).rjust(widths[1])
        blue = str(entry.blue).rjust(widths[2])
        lines.append(f"{red} {green} {blue}  {entry.name}")
    return "\n".join(lines) + "\n"
