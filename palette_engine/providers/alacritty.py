import yaml

from ..ramp import MODES
from .terminal import terminal_palette


def _ansi_section(p, black, white, bright=False):
    suffix = "" if bright else "2"
    section = {"black": black}
    for name in ("red", "green", "yellow", "blue", "magenta", "cyan"):
        section[name] = p[f"{name}{suffix}"]
    section["white"] = white
    return section


def alacritty_colors(theme, mode):
    """Build the Alacritty colors table for one mode."""
    p = terminal_palette(theme, mode)
    return {
        "colors": {
            "primary": {
                "background": p["bg"],
                "foreground": p["tx"],
                "dim_foreground": p["tx_2"],
                "bright_foreground": p["tx"],
            },
            "cursor": {"text": p["tx_2"], "cursor": p["ac_1"]},
            "normal": _ansi_section(p, p["opposite_bg"], p["tx"]),
            "bright": _ansi_section(p, p["tx_3"], p["opposite_bg"], bright=True),
            "dim": _ansi_section(p, p["opposite_bg"], p["tx_2"]),
        }
    }


def convert_theme(theme):
    return {mode: alacritty_colors(theme, mode) for mode in MODES}


def alacritty_yaml(theme, mode="dark"):
    """Render an Alacritty color scheme as YAML."""
    return yaml.safe_dump(alacritty_colors(theme, mode), sort_keys=False)
