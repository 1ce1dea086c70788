import json

from ..ramp import MODES
from .terminal import display_name, terminal_palette

SCHEMA_URL = "https://aka.ms/terminal-profiles-schema"

# Windows Terminal calls magenta purple
WT_NAMES = {
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "purple",
    "cyan": "cyan",
}


def windows_terminal_scheme(theme, mode, name="Palette Engine"):
    p = terminal_palette(theme, mode)
    scheme = {
        "name": display_name(name, mode),
        "background": p["bg"],
        "foreground": p["tx"],
        "black": p["opposite_bg"],
        "white": p["bg_2"],
        "brightBlack": p["tx_3"],
        "brightWhite": p["opposite_bg"],
        "selectionBackground": p["ui_3"],
        "cursorColor": p["ac_1"],
    }
    for source, target in WT_NAMES.items():
        scheme[target] = p[f"{source}2"]
        scheme[f"bright{target.title()}"] = p[source]
    return scheme


def convert_theme(theme, name="Palette Engine"):
    return {mode: windows_terminal_scheme(theme, mode, name) for mode in MODES}


def windows_terminal_json(theme, name="Palette Engine"):
    """Render both schemes in a settings.json fragment."""
    converted = convert_theme(theme, name)
    data = {
        "$help": "https://aka.ms/terminal-documentation",
        "$schema": SCHEMA_URL,
        "schemes": [converted["light"], converted["dark"]],
    }
    return json.dumps(data, indent=2)
