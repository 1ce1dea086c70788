from .anchors import NEUTRAL_ANCHORS, check_mode, pick
from .generator import generate_ramp


def derive_neutral_ramp(seed, mode):
    """Derive the eight neutral tones of a canonical block from one seed.

    Args:
        seed: Any parseable color string
        mode: "light" or "dark"

    Returns:
        dict: bg, bg_2, ui, ui_2, ui_3, tx_3, tx_2 and tx as #rrggbb

    Raises:
        ColorParseError: If the seed cannot be parsed
    """
    anchors = NEUTRAL_ANCHORS[check_mode(mode)]
    ramp = generate_ramp(seed)
    return {token: pick(ramp, step) for token, step in anchors.items()}
