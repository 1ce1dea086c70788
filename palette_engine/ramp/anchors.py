from types import MappingProxyType

from .generator import TAILWIND_STOPS

# Flexoki-style neutral anchors: light ascends from 50, dark mirrors from 950
NEUTRAL_ANCHORS = MappingProxyType(
    {
        "light": MappingProxyType(
            {
                "bg": 50,
                "bg_2": 100,
                "ui": 200,
                "ui_2": 300,
                "ui_3": 400,
                "tx_3": 600,
                "tx_2": 700,
                "tx": 900,
            }
        ),
        "dark": MappingProxyType(
            {
                "bg": 950,
                "bg_2": 900,
                "ui": 800,
                "ui_2": 700,
                "ui_3": 600,
                "tx_3": 400,
                "tx_2": 300,
                "tx": 100,
            }
        ),
    }
)

# Design-system token anchors
DESIGN_ANCHORS = MappingProxyType(
    {
        "light": MappingProxyType(
            {"primary": 600, "border": 200, "muted": 100, "muted_fg": 600, "accent": 300}
        ),
        "dark": MappingProxyType(
            {"primary": 400, "border": 800, "muted": 900, "muted_fg": 300, "accent": 700}
        ),
    }
)

MODES = ("light", "dark")


def opposite_mode(mode):
    return "dark" if mode == "light" else "light"


def check_mode(mode):
    if mode not in MODES:
        raise ValueError(f"Mode must be 'light' or 'dark', got {mode!r}")
    return mode


def pick(ramp, step):
    """Return the hex at a Tailwind step.

    Unknown steps fall back to the first stop and steps past the end of a
    short ramp clamp to its last stop, so lookups never raise.
    """
    if not ramp:
        raise ValueError("Cannot pick from an empty ramp")
    try:
        index = TAILWIND_STOPS.index(step)
    except ValueError:
        index = 0
    index = min(index, len(ramp) - 1)
    stop = ramp[index]
    return stop.hex if hasattr(stop, "hex") else stop
