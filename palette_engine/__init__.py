"""Perceptual color ramps and canonical themes, exported to design tokens,
editors and terminals."""

from .color import ColorParseError
from .overrides import InvalidProviderError
from .providers import PROVIDERS, ProviderOutput, export_provider
from .ramp import derive_neutral_ramp, generate_ramp
from .theme import ThemeValidationError, load_theme_from_json, validate_theme

__all__ = [
    "ColorParseError",
    "InvalidProviderError",
    "PROVIDERS",
    "ProviderOutput",
    "ThemeValidationError",
    "derive_neutral_ramp",
    "export_provider",
    "generate_ramp",
    "load_theme_from_json",
    "validate_theme",
]
