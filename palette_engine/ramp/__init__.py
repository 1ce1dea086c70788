from .anchors import DESIGN_ANCHORS, NEUTRAL_ANCHORS, MODES, opposite_mode, pick
from .generator import (
    DEFAULT_SHIFT,
    TAILWIND_STOPS,
    Accessibility,
    Contrast,
    RampStop,
    ShiftCoefficients,
    classify_contrast,
    find_base_position,
    target_lightness,
    generate_ramp,
    ramp_hexes,
    stop_labels,
    try_generate_ramp,
)
from .neutral import derive_neutral_ramp
from .path import anchor_path_ramp

__all__ = [
    "Accessibility",
    "Contrast",
    "DEFAULT_SHIFT",
    "DESIGN_ANCHORS",
    "MODES",
    "NEUTRAL_ANCHORS",
    "RampStop",
    "ShiftCoefficients",
    "TAILWIND_STOPS",
    "anchor_path_ramp",
    "classify_contrast",
    "derive_neutral_ramp",
    "find_base_position",
    "target_lightness",
    "generate_ramp",
    "opposite_mode",
    "pick",
    "ramp_hexes",
    "stop_labels",
    "try_generate_ramp",
]
