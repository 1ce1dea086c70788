import json

from ..color import opacity_to_hex
from ..ramp import MODES
from ..theme.model import CANONICAL_KEYS


def export_json(theme, filepath, source_file=None, theme_name=None, opacity=None):
    """Export a canonical theme as JSON with metadata.

    Metadata keys start with "_" so load_theme_from_json sets them aside.

    Args:
        theme: Canonical theme with light and dark blocks
        filepath: Output file path
        source_file: Source image/theme filename for metadata
        theme_name: Theme name for Zed theme references
        opacity: Optional blur opacity, a float or {mode: float}
    """
    data = {
        mode: {key: theme[mode][key] for key in CANONICAL_KEYS if key in theme[mode]}
        for mode in MODES
    }

    if theme.get("name"):
        data["name"] = theme["name"]

    if opacity is not None:
        if not isinstance(opacity, dict):
            opacity = {mode: opacity for mode in MODES}
        data["_blur_opacity"] = {
            mode: {"float": round(value, 2), "hex": opacity_to_hex(value)}
            for mode, value in opacity.items()
        }

    data["_note"] = (
        "13 canonical colors per mode: bg/bg_2/ui/ui_2/ui_3/tx_3/tx_2/tx "
        "neutrals with pr/sc/ac_1/ac_2/ac_3 accents"
    )

    if source_file:
        data["_source"] = source_file

    if theme_name:
        data["_zed_theme_dark"] = f"{theme_name} Dark"
        data["_zed_theme_light"] = f"{theme_name} Light"

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
