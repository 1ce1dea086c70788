from ..color import ColorParseError, to_hex
from ..ramp import derive_neutral_ramp, generate_ramp, pick
from ..ramp.anchors import MODES

NEUTRAL_KEYS = ("bg", "bg_2", "ui", "ui_2", "ui_3", "tx_3", "tx_2", "tx")
ACCENT_KEYS = ("pr", "sc", "ac_1", "ac_2", "ac_3")
CANONICAL_KEYS = NEUTRAL_KEYS + ACCENT_KEYS

# Ramp stop each accent seed is read from when building a theme from seeds
ACCENT_STEPS = {"light": 600, "dark": 400}


class ThemeValidationError(ValueError):
    """Raised when a canonical theme is missing modes, keys or valid colors."""


def validate_block(block, mode="light"):
    """Check a canonical block and normalize its colors to #rrggbb.

    Args:
        block: Mapping with the 13 canonical keys
        mode: Used only in error messages

    Returns:
        dict: A new block with only the canonical keys

    Raises:
        ThemeValidationError: On missing keys or unparseable values
    """
    if not isinstance(block, dict):
        raise ThemeValidationError(f"{mode} block must be an object")

    missing = [key for key in CANONICAL_KEYS if not block.get(key)]
    if missing:
        raise ThemeValidationError(f"{mode} block is missing: {', '.join(missing)}")

    normalized = {}
    for key in CANONICAL_KEYS:
        try:
            normalized[key] = to_hex(block[key])
        except ColorParseError as exc:
            raise ThemeValidationError(f"{mode}.{key}: {exc}") from exc
    return normalized


def validate_theme(theme):
    """Validate both modes of a canonical theme.

    Extra top-level keys (name, fonts, radius, shadows...) are carried over.
    """
    if not isinstance(theme, dict):
        raise ThemeValidationError("Theme must be an object")

    result = {key: value for key, value in theme.items() if key not in MODES}
    for mode in MODES:
        if mode not in theme:
            raise ThemeValidationError(f"Theme is missing the {mode} block")
        result[mode] = validate_block(theme[mode], mode)
    return result


def theme_from_seeds(neutral, primary, secondary=None, accents=()):
    """Build a full canonical theme from a neutral seed and accent seeds.

    Neutral tones come from one ramp per mode; each accent is read from its
    own ramp at 600 (light) or 400 (dark).
    """
    accents = list(accents) + [None] * 3
    seeds = {
        "pr": primary,
        "sc": secondary or primary,
        "ac_1": accents[0] or primary,
        "ac_2": accents[1] or secondary or primary,
        "ac_3": accents[2] or "#ef4444",
    }
    ramps = {key: generate_ramp(seed) for key, seed in seeds.items()}

    theme = {}
    for mode in MODES:
        block = derive_neutral_ramp(neutral, mode)
        for key in ACCENT_KEYS:
            block[key] = pick(ramps[key], ACCENT_STEPS[mode])
        theme[mode] = block
    return theme
