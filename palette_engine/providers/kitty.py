from ..ramp import MODES
from .terminal import ANSI_NAMES, display_name, terminal_palette


def kitty_colors(theme, mode):
    """Map one mode onto Kitty's color settings."""
    p = terminal_palette(theme, mode)
    colors = {
        "foreground": p["tx"],
        "background": p["bg"],
        "selection_foreground": p["tx"],
        "selection_background": p["ui_3"],
        "cursor": p["ac_1"],
        "cursor_text_color": p["bg"],
        "active_border_color": p["pr"],
        "inactive_border_color": p["ui_2"],
        "active_tab_foreground": p["tx"],
        "active_tab_background": p["ui_3"],
        "inactive_tab_foreground": p["tx_2"],
        "inactive_tab_background": p["ui"],
        "color0": p["opposite_bg"],
        "color7": p["tx"],
        "color8": p["tx_2"],
        "color15": p["opposite_bg"],
    }
    # 1-6 take the second sample of each hue, 9-14 the first
    for offset, name in enumerate(ANSI_NAMES, start=1):
        colors[f"color{offset}"] = p[f"{name}2"]
        colors[f"color{offset + 8}"] = p[name]
    return colors


def convert_theme(theme):
    return {mode: kitty_colors(theme, mode) for mode in MODES}


CONF_SECTIONS = (
    ("Basic colors", ("foreground", "background", "selection_foreground", "selection_background")),
    ("Cursor colors", ("cursor", "cursor_text_color")),
    ("Window border colors", ("active_border_color", "inactive_border_color")),
    (
        "Tab bar colors",
        (
            "active_tab_foreground",
            "active_tab_background",
            "inactive_tab_foreground",
            "inactive_tab_background",
        ),
    ),
)

COLOR_PAIRS = (
    ("Black", 0),
    ("Red", 1),
    ("Green", 2),
    ("Yellow", 3),
    ("Blue", 4),
    ("Magenta", 5),
    ("Cyan", 6),
    ("White", 7),
)


def kitty_conf(theme, name="Palette Engine", mode="dark"):
    """Render a kitty.conf color theme as `key value` lines."""
    colors = kitty_colors(theme, mode)
    lines = [f"# Theme: {display_name(name, mode)}", ""]

    for title, keys in CONF_SECTIONS:
        lines.append(f"# {title}")
        lines.extend(f"{key} {colors[key]}" for key in keys)
        lines.append("")

    lines.append("# Colors for terminal applications (0-15)")
    for title, index in COLOR_PAIRS:
        lines.append(f"# {title}")
        lines.append(f"color{index} {colors[f'color{index}']}")
        lines.append(f"color{index + 8} {colors[f'color{index + 8}']}")
        lines.append("")

    return "\n".join(lines)
