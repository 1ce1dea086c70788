from .image import (
    classify_swatches,
    extract_colors,
    name_from_palette,
    palette_to_theme,
    theme_from_image,
)
from .loader import load_theme_from_json
from .model import (
    ACCENT_KEYS,
    CANONICAL_KEYS,
    NEUTRAL_KEYS,
    ThemeValidationError,
    theme_from_seeds,
    validate_block,
    validate_theme,
)

__all__ = [
    "ACCENT_KEYS",
    "CANONICAL_KEYS",
    "NEUTRAL_KEYS",
    "ThemeValidationError",
    "classify_swatches",
    "extract_colors",
    "load_theme_from_json",
    "name_from_palette",
    "palette_to_theme",
    "theme_from_image",
    "theme_from_seeds",
    "validate_block",
    "validate_theme",
]
