import json

from ..color import mix_colors, opacity_to_hex, to_hex, tweak_lightness

ZED_SCHEMA = "https://zed.dev/schema/themes/v0.2.0.json"
TRANSPARENT = "#00000000"

# Surfaces that become translucent in a blur theme
BLUR_SURFACES = (
    "background",
    "editor.background",
    "editor.gutter.background",
    "panel.background",
    "tab_bar.background",
    "tab.inactive_background",
    "terminal.background",
)

# Status name -> (foreground key, tint key); tint is mixed into the background
STATUS_COLORS = {
    "conflict": ("ac_2", "ac_2"),
    "created": ("sc", "sc"),
    "deleted": ("ac_1", "ac_1"),
    "error": ("ac_1", "ac_1"),
    "hint": ("tx_2", "pr"),
    "info": ("pr", "pr"),
    "modified": ("ac_2", "ac_2"),
    "predictive": ("tx_2", "sc"),
    "renamed": ("pr", "pr"),
    "success": ("sc", "sc"),
    "warning": ("ac_2", "ac_2"),
}
# Statuses drawn on the plain background with the ui border
PLAIN_STATUSES = {"hidden": "tx_3", "ignored": "tx_3", "unreachable": "tx_2"}

# Syntax scope -> (canonical key, font_style, font_weight)
SYNTAX = {
    "attribute": ("pr", None, None),
    "boolean": ("ac_3", None, None),
    "comment": ("tx_3", None, None),
    "comment.doc": ("tx_2", None, None),
    "constant": ("ac_3", None, None),
    "constructor": ("pr", None, None),
    "embedded": ("sc", None, None),
    "emphasis": ("pr", None, None),
    "emphasis.strong": ("pr", None, 700),
    "enum": ("ac_2", None, None),
    "function": ("sc", None, None),
    "function.builtin": ("ac_1", None, None),
    "hint": ("tx_2", None, None),
    "keyword": ("ac_1", None, None),
    "label": ("pr", None, None),
    "link_text": ("sc", "italic", None),
    "link_uri": ("ac_3", None, None),
    "namespace": ("pr", None, None),
    "number": ("ac_3", None, None),
    "operator": ("tx", None, None),
    "predictive": ("tx_2", "italic", None),
    "preproc": ("tx", None, None),
    "primary": ("tx", None, None),
    "property": ("tx", None, None),
    "punctuation": ("tx_2", None, None),
    "punctuation.bracket": ("tx_2", None, None),
    "punctuation.delimiter": ("tx_2", None, None),
    "punctuation.list_marker": ("tx", None, None),
    "punctuation.markup": ("pr", None, None),
    "punctuation.special": ("tx_2", None, None),
    "selector": ("ac_3", None, None),
    "selector.pseudo": ("pr", None, None),
    "string": ("sc", None, None),
    "string.escape": ("tx_2", None, None),
    "string.regex": ("ac_2", None, None),
    "string.special": ("ac_3", None, None),
    "string.special.symbol": ("sc", None, None),
    "tag": ("ac_2", None, None),
    "text.literal": ("pr", None, None),
    "title": ("sc", None, 700),
    "type": ("ac_2", None, None),
    "variable": ("tx", None, None),
    "variable.special": ("pr", None, None),
    "variant": ("pr", None, None),
}

# ANSI color name -> canonical key
ANSI_KEYS = {
    "red": "ac_1",
    "green": "sc",
    "yellow": "ac_2",
    "blue": "pr",
    "magenta": "ac_3",
    "cyan": "sc",
}


def _terminal_colors(c, is_dark):
    bright = 0.3 if is_dark else -0.3
    colors = {
        "terminal.background": c["bg_2"],
        "terminal.foreground": c["tx"],
        "terminal.bright_foreground": c["tx"],
        "terminal.dim_foreground": c["bg_2"],
        "terminal.ansi.black": c["bg_2"],
        "terminal.ansi.bright_black": c["tx_3"],
        "terminal.ansi.dim_black": c["tx"],
    }
    for name, key in ANSI_KEYS.items():
        colors[f"terminal.ansi.{name}"] = c[key]
        colors[f"terminal.ansi.bright_{name}"] = tweak_lightness(c[key], bright)
        colors[f"terminal.ansi.dim_{name}"] = tweak_lightness(c[key], -bright)
    colors["terminal.ansi.white"] = c["tx"]
    colors["terminal.ansi.bright_white"] = "#ffffff"
    colors["terminal.ansi.dim_white"] = c["tx_2"]
    return colors


def _with_alpha(hex_color, opacity):
    """Overlay color: Zed composites the #rrggbbaa over whatever sits below."""
    return f"{hex_color}{opacity_to_hex(opacity)}"


def build_zed_style(block, is_dark, opacity=None):
    """Build the style dict for a Zed theme from a canonical block.

    Args:
        block: Canonical block
        is_dark: Whether this is a dark theme
        opacity: Optional opacity value (0.0-1.0) for a transparent blur theme.
                 If None, creates an opaque theme.
    """
    c = {key: to_hex(value) for key, value in block.items()}
    bg, fg, primary = c["bg"], c["tx"], c["pr"]
    raised = tweak_lightness(bg, 0.05 if is_dark else -0.03)
    focus = mix_colors(primary, bg, 0.3)

    style = {
        "border": c["ui"],
        "border.variant": c["ui_2"],
        "border.focused": focus,
        "border.selected": focus,
        "border.transparent": TRANSPARENT,
        "border.disabled": c["ui"],
        "elevated_surface.background": raised,
        "surface.background": raised,
        "background": bg,
        "element.background": raised,
        "element.hover": c["ui_2"],
        "element.active": c["ui_3"],
        "element.selected": c["ui_3"],
        "element.disabled": raised,
        "drop_target.background": _with_alpha(mix_colors(primary, bg, 0.2), 0.5),
        "ghost_element.background": TRANSPARENT,
        "ghost_element.hover": c["ui_2"],
        "ghost_element.active": c["ui_3"],
        "ghost_element.selected": c["ui_3"],
        "ghost_element.disabled": raised,
        "text": fg,
        "text.muted": c["tx_2"],
        "text.placeholder": c["tx_3"],
        "text.disabled": c["tx_3"],
        "text.accent": primary,
        "icon": fg,
        "icon.muted": c["tx_2"],
        "icon.disabled": c["tx_3"],
        "icon.placeholder": c["tx_2"],
        "icon.accent": primary,
        "status_bar.background": bg,
        "title_bar.background": bg,
        "title_bar.inactive_background": raised,
        "toolbar.background": c["bg_2"],
        "tab_bar.background": raised,
        "tab.inactive_background": raised,
        "tab.active_background": c["bg_2"],
        "search.match_background": _with_alpha(primary, 0.4),
        "panel.background": raised,
        "panel.focused_border": primary,
        "pane.focused_border": None,
        "scrollbar.thumb.background": _with_alpha(fg, 0.3),
        "scrollbar.thumb.hover_background": c["ui_2"],
        "scrollbar.thumb.border": c["ui_2"],
        "scrollbar.track.background": TRANSPARENT,
        "scrollbar.track.border": tweak_lightness(bg, 0.03 if is_dark else -0.02),
        "editor.foreground": fg,
        "editor.background": c["bg_2"],
        "editor.gutter.background": c["bg_2"],
        "editor.subheader.background": raised,
        "editor.active_line.background": _with_alpha(raised, 0.75),
        "editor.highlighted_line.background": raised,
        "editor.line_number": c["tx_3"],
        "editor.active_line_number": c["tx_2"],
        "editor.hover_line_number": c["tx_2"],
        "editor.invisible": c["tx_3"],
        "editor.wrap_guide": _with_alpha(fg, 0.05),
        "editor.active_wrap_guide": _with_alpha(fg, 0.1),
        "editor.document_highlight.read_background": _with_alpha(primary, 0.1),
        "editor.document_highlight.write_background": _with_alpha(fg, 0.4),
        "link_text.hover": primary,
        "version_control.added": c["sc"],
        "version_control.modified": c["ac_2"],
        "version_control.deleted": c["ac_1"],
    }
    style.update(_terminal_colors(c, is_dark))

    for name, (fg_key, tint_key) in STATUS_COLORS.items():
        style[name] = c[fg_key]
        style[f"{name}.background"] = mix_colors(c[tint_key], bg, 0.1)
        style[f"{name}.border"] = mix_colors(c[tint_key], bg, 0.3)
    for name, fg_key in PLAIN_STATUSES.items():
        style[name] = c[fg_key]
        style[f"{name}.background"] = bg
        style[f"{name}.border"] = c["ui"]

    if opacity is not None:
        alpha = opacity_to_hex(opacity)
        for key in BLUR_SURFACES:
            style[key] = f"{style[key]}{alpha}"

    accents = [c["ac_1"], primary, c["sc"], c["ac_2"], c["ac_3"], primary, c["sc"]]
    style["accents"] = accents
    style["players"] = [
        {"cursor": color, "background": color, "selection": _with_alpha(color, 0.24)}
        for color in accents
    ]
    style["syntax"] = {
        scope: {"color": c[key], "font_style": font_style, "font_weight": font_weight}
        for scope, (key, font_style, font_weight) in SYNTAX.items()
    }
    return style


def generate_zed_theme(block, theme_name, is_dark, opacity=None):
    """Generate a Zed theme JSON file with a single theme variant.

    Args:
        block: The canonical block for this variant
        theme_name: Base name for the theme
        is_dark: Whether this is a dark theme
        opacity: Optional opacity (0.0-1.0). If set, creates blur theme.

    Returns:
        JSON string of the theme data
    """
    name_suffix = " Blur" if opacity is not None else ""
    variant_name = "Dark" if is_dark else "Light"

    theme_data = {
        "$schema": ZED_SCHEMA,
        "name": f"{theme_name}{name_suffix}",
        "author": "Palette Engine",
        "themes": [
            {
                "name": f"{theme_name} {variant_name}{name_suffix}",
                "appearance": "dark" if is_dark else "light",
                "style": build_zed_style(block, is_dark=is_dark, opacity=opacity),
            },
        ],
    }
    return json.dumps(theme_data, indent=2)


def generate_zed_themes(theme, theme_name, dark_opacity=None, light_opacity=None, overrides=None):
    """Generate a Zed theme JSON file with both dark and light variants.

    Args:
        theme: Canonical theme with light and dark blocks
        theme_name: Base name for the theme
        dark_opacity: Optional opacity for dark theme (0.0-1.0). If set, creates blur theme.
        light_opacity: Optional opacity for light theme (0.0-1.0). If set, creates blur theme.
        overrides: Optional normalized override; its mode color maps replace
            style keys verbatim

    Returns:
        JSON string of the theme data
    """
    is_blur_theme = dark_opacity is not None or light_opacity is not None
    name_suffix = " Blur" if is_blur_theme else ""
    overrides = overrides or {}

    variants = []
    for mode, opacity in (("dark", dark_opacity), ("light", light_opacity)):
        style = build_zed_style(theme[mode], is_dark=mode == "dark", opacity=opacity)
        style.update(overrides.get(mode) or {})
        variants.append(
            {
                "name": f"{theme_name} {mode.title()}{name_suffix}",
                "appearance": mode,
                "style": style,
            }
        )

    theme_data = {
        "$schema": ZED_SCHEMA,
        "name": f"{theme_name}{name_suffix}",
        "author": "Palette Engine",
        "themes": variants,
    }
    return json.dumps(theme_data, indent=2)
