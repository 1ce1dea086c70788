import logging
import math

from ..color import ColorParseError, mix_hue, oklch_to_hex, to_oklch

logger = logging.getLogger(__name__)

PATH_POINTS = 11


def sinusoidal_position(t):
    return (1 - math.cos(math.pi * t)) / 2


def quadratic_position(t):
    return t * t


def linear_position(t):
    return t


def anchor_path_ramp(
    anchors,
    points=PATH_POINTS,
    lightness_position=sinusoidal_position,
    chroma_position=quadratic_position,
    hue_position=linear_position,
):
    """Sample evenly spaced colors along an OKLCH path through anchor colors.

    Each segment between consecutive anchors eases lightness, chroma and hue
    with its own position function, so the path bends instead of running in a
    straight line.

    Args:
        anchors: Color strings in path order. Unparseable ones are skipped.
        points: Number of samples over the whole path

    Returns:
        list: #rrggbb strings, empty when no anchor could be parsed
    """
    coords = []
    for anchor in anchors:
        try:
            coords.append(to_oklch(anchor))
        except ColorParseError:
            logger.warning("Skipping unparseable path anchor %r", anchor)

    if not coords:
        return []
    if len(coords) == 1:
        return [oklch_to_hex(*coords[0])] * points

    segments = len(coords) - 1
    samples = []
    for index in range(points):
        t = index / (points - 1) if points > 1 else 0.0
        scaled = t * segments
        segment = min(int(scaled), segments - 1)
        local = scaled - segment

        start, end = coords[segment], coords[segment + 1]
        l = start.l + (end.l - start.l) * lightness_position(local)
        c = start.c + (end.c - start.c) * chroma_position(local)
        h = mix_hue(start.h, end.h, start.c, end.c, hue_position(local))
        samples.append(oklch_to_hex(l, max(0.0, c), h))
    return samples
