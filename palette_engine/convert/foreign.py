"""Project foreign theme blocks onto the canonical 13-color block.

Every foreign schema is described by a ForeignSchema: which fields seed the
neutral, accent and secondary ramps, and which fields are copied through when
present. Missing or unreadable fields fall back along the documented chain.
"""

import logging
from collections import namedtuple

from ..color import ColorParseError, to_hex
from ..ramp import NEUTRAL_ANCHORS, generate_ramp, pick
from ..ramp.anchors import check_mode

logger = logging.getLogger(__name__)

NEUTRAL_FALLBACK = "#808080"
RAMP_FALLBACK = "#64748b"

DEFAULT_BACKGROUND = {"light": "#ffffff", "dark": "#000000"}
DEFAULT_FOREGROUND = {"light": "#000000", "dark": "#ffffff"}
DEFAULT_PRIMARY = {"light": "#3b82f6", "dark": "#60a5fa"}

# Accent steps on a foreign ramp: (light, dark)
PRIMARY_STEPS = {"light": 600, "dark": 400}
AC_2_STEPS = {"light": 300, "dark": 600}
AC_3_STEPS = {"light": 700, "dark": 300}

ForeignSchema = namedtuple(
    "ForeignSchema",
    [
        "name",
        "neutral_keys",
        "accent_keys",
        "secondary_keys",
        "secondary_steps",
        "passthrough",
    ],
)

# canonical key -> foreign fields tried in order before the ramp
DESIGN_PASSTHROUGH = {
    "bg_2": ("card", "popover"),
    "ui": ("border",),
    "ui_3": ("input",),
    "tx_2": ("muted-foreground",),
    "ac_2": ("chart-4",),
    "ac_3": ("chart-3", "destructive"),
}

SHADCN_SCHEMA = ForeignSchema(
    name="shadcn",
    neutral_keys=("border", "input", "background"),
    accent_keys=("chart-2", "accent"),
    secondary_keys=("secondary",),
    secondary_steps={"light": 600, "dark": 400},
    passthrough=DESIGN_PASSTHROUGH,
)

# tweakcn has no secondary ramp of its own; secondary comes off the accent ramp
TWEAKCN_SCHEMA = ForeignSchema(
    name="tweakcn",
    neutral_keys=("border", "input", "background"),
    accent_keys=("chart-2", "accent", "secondary"),
    secondary_keys=(),
    secondary_steps={"light": 500, "dark": 400},
    passthrough=DESIGN_PASSTHROUGH,
)


def read_color(block, key):
    """Return block[key] as #rrggbb, or None when missing or unreadable."""
    value = block.get(key)
    if not value:
        return None
    try:
        return to_hex(value)
    except ColorParseError:
        logger.warning("Skipping unreadable %s: %r", key, value)
        return None


def first_color(block, keys, default=None):
    for key in keys:
        color = read_color(block, key)
        if color:
            return color
    return default


def project_foreign(block, schema, mode):
    """Map one foreign block onto a canonical block.

    Args:
        block: Foreign token map, e.g. a shadcn mode block
        schema: ForeignSchema describing the foreign fields
        mode: "light" or "dark"

    Returns:
        dict: canonical block with all 13 keys as #rrggbb
    """
    check_mode(mode)
    block = block or {}

    background = read_color(block, "background") or DEFAULT_BACKGROUND[mode]
    foreground = read_color(block, "foreground") or DEFAULT_FOREGROUND[mode]
    primary = read_color(block, "primary") or DEFAULT_PRIMARY[mode]

    neutral_ramp = generate_ramp(first_color(block, schema.neutral_keys, NEUTRAL_FALLBACK))
    primary_ramp = generate_ramp(read_color(block, "primary") or RAMP_FALLBACK)
    accent_ramp = generate_ramp(first_color(block, schema.accent_keys, primary))
    if schema.secondary_keys:
        secondary_ramp = generate_ramp(first_color(block, schema.secondary_keys, RAMP_FALLBACK))
    else:
        secondary_ramp = accent_ramp

    anchors = NEUTRAL_ANCHORS[mode]
    canonical = {key: pick(neutral_ramp, step) for key, step in anchors.items()}
    canonical["bg"] = background
    canonical["tx"] = foreground
    canonical.update(
        {
            "pr": pick(primary_ramp, PRIMARY_STEPS[mode]),
            "sc": pick(secondary_ramp, schema.secondary_steps[mode]),
            "ac_1": pick(accent_ramp, anchors["ui_3"]),
            "ac_2": pick(accent_ramp, AC_2_STEPS[mode]),
            "ac_3": pick(accent_ramp, AC_3_STEPS[mode]),
        }
    )

    for key, fields in schema.passthrough.items():
        color = first_color(block, fields)
        if color:
            canonical[key] = color
    return canonical
