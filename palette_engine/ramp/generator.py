import logging
import math
from collections import namedtuple

from ..color import (
    BLACK,
    WHITE,
    contrast_ratio,
    hex_to_rgb,
    oklch_to_hex,
    relative_luminance,
    to_oklch,
)

logger = logging.getLogger(__name__)

RampStop = namedtuple(
    "RampStop", ["label", "hex", "luminance", "contrast", "accessibility"]
)
Contrast = namedtuple("Contrast", ["white", "black"])
Accessibility = namedtuple(
    "Accessibility", ["level", "text_on_white", "text_on_black"]
)

# Tailwind stop labels, lightest first
TAILWIND_STOPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# OKLCH lightness each stop aims for, indexed like TAILWIND_STOPS
TARGET_LIGHTNESS = (
    0.985, 0.967, 0.922, 0.870, 0.708, 0.556, 0.439, 0.371, 0.269, 0.205, 0.145,
)

LIGHT_END_LIGHTNESS = 0.985
DARK_END_LIGHTNESS = 0.145
LIGHT_END_CHROMA_RATIO = 0.05
LIGHT_END_MIN_CHROMA = 0.002
DARK_END_CHROMA_RATIO = 0.6
DARK_END_MIN_CHROMA = 0.02
LIGHT_CHROMA_RATE = 0.8
DARK_CHROMA_RATE = 0.9

MIN_LIGHTNESS = 0.01
MAX_LIGHTNESS = 0.99

# WCAG thresholds
AAA_CONTRAST = 7.0
AA_CONTRAST = 4.5
A_CONTRAST = 3.0

_WHITE_LUMINANCE = relative_luminance(*hex_to_rgb(WHITE))
_BLACK_LUMINANCE = relative_luminance(*hex_to_rgb(BLACK))

ShiftCoefficients = namedtuple(
    "ShiftCoefficients",
    [
        "expand_scale",
        "expand_light_chroma",
        "expand_dark_lightness",
        "expand_dark_chroma",
        "compress_scale",
        "compress_light_chroma",
        "compress_dark_lightness",
        "compress_dark_chroma",
    ],
)

# Empirically tuned warp constants
DEFAULT_SHIFT = ShiftCoefficients(
    expand_scale=0.3,
    expand_light_chroma=0.4,
    expand_dark_lightness=0.7,
    expand_dark_chroma=0.3,
    compress_scale=0.25,
    compress_light_chroma=0.2,
    compress_dark_lightness=1.3,
    compress_dark_chroma=0.4,
)


def stop_labels(count):
    """Return the Tailwind labels for a ramp of `count` stops.

    11 stops run 50-950; shorter ramps drop 950 and then trim from the dark end.
    """
    if not 1 <= count <= len(TAILWIND_STOPS):
        raise ValueError(
            f"Stop count must be between 1 and {len(TAILWIND_STOPS)}, got {count}"
        )
    if count == len(TAILWIND_STOPS):
        return list(TAILWIND_STOPS)
    return list(TAILWIND_STOPS[:-1][:count])


def _resolve_labels(stops):
    if isinstance(stops, int):
        return stop_labels(stops)
    labels = list(stops)
    unknown = [label for label in labels if label not in TAILWIND_STOPS]
    if not labels or unknown:
        raise ValueError(f"Unsupported stop labels: {unknown or labels}")
    return sorted(labels, key=TAILWIND_STOPS.index)


def target_lightness(labels):
    return [TARGET_LIGHTNESS[TAILWIND_STOPS.index(label)] for label in labels]


def find_base_position(lightness, labels=TAILWIND_STOPS):
    """Index into `labels` of the stop whose target is nearest the seed.

    Each label is scanned against its own target lightness, so the index
    always fits the ramp. The first index wins ties.
    """
    targets = target_lightness(labels)
    best_index = 0
    best_distance = abs(lightness - targets[0])
    for index in range(1, len(targets)):
        distance = abs(lightness - targets[index])
        if distance < best_distance:
            best_index = index
            best_distance = distance
    return best_index


def classify_contrast(contrast_white, contrast_black):
    """Return the Accessibility tuple for a pair of contrast ratios."""
    best = max(contrast_white, contrast_black)
    if best >= AAA_CONTRAST:
        level = "AAA"
    elif best >= AA_CONTRAST:
        level = "AA"
    elif best >= A_CONTRAST:
        level = "A"
    else:
        level = "Fail"
    return Accessibility(
        level=level,
        text_on_white=contrast_white >= AA_CONTRAST,
        text_on_black=contrast_black >= AA_CONTRAST,
    )


def _clamp_point(l, c, h):
    return min(MAX_LIGHTNESS, max(MIN_LIGHTNESS, l)), max(0.0, c), h


def _make_stop(label, l, c, h):
    hex_color = oklch_to_hex(l, c, h)
    luminance = relative_luminance(*hex_to_rgb(hex_color))
    contrast = Contrast(
        white=contrast_ratio(luminance, _WHITE_LUMINANCE),
        black=contrast_ratio(luminance, _BLACK_LUMINANCE),
    )
    return RampStop(
        label=label,
        hex=hex_color,
        luminance=luminance,
        contrast=contrast,
        accessibility=classify_contrast(contrast.white, contrast.black),
    )


def _interpolate_points(seed, count, base):
    l0, c0, h0 = seed
    light_chroma = max(c0 * LIGHT_END_CHROMA_RATIO, LIGHT_END_MIN_CHROMA)
    dark_chroma = max(c0 * DARK_END_CHROMA_RATIO, DARK_END_MIN_CHROMA)

    points = []
    for i in range(count):
        if i == base:
            points.append((l0, c0, h0))
        elif i < base:
            factor = (base - i) / base
            l = l0 + (LIGHT_END_LIGHTNESS - l0) * factor
            c = c0 + (light_chroma - c0) * factor * LIGHT_CHROMA_RATE
            points.append(_clamp_point(l, c, h0))
        else:
            factor = (i - base) / (count - 1 - base)
            l = l0 + (DARK_END_LIGHTNESS - l0) * factor
            c = c0 + (dark_chroma - c0) * factor * DARK_CHROMA_RATE
            points.append(_clamp_point(l, c, h0))
    return points


def _warp_points(points, shift, coefficients):
    count = len(points)
    if count < 2:
        return points

    warped = []
    for i, (l, c, h) in enumerate(points):
        position = i / (count - 1)
        center_distance = abs(position - 0.5)
        strength = math.sin(position * math.pi)
        light_half = position < 0.5

        if shift > 0:
            amount = shift * center_distance * strength * coefficients.expand_scale
            if light_half:
                l += amount
                c *= 1 - amount * coefficients.expand_light_chroma
            else:
                l += amount * coefficients.expand_dark_lightness
                c *= 1 - amount * coefficients.expand_dark_chroma
        else:
            amount = abs(shift) * center_distance * strength * coefficients.compress_scale
            if light_half:
                l -= amount
                c *= 1 - amount * coefficients.compress_light_chroma
            else:
                l -= amount * coefficients.compress_dark_lightness
                c *= 1 + amount * coefficients.compress_dark_chroma

        warped.append(_clamp_point(l, c, h))
    return warped


def generate_ramp(seed, stops=11, contrast_shift=0.0, coefficients=DEFAULT_SHIFT):
    """Derive a Tailwind-style ramp from one seed color.

    The stop whose target lightness sits closest to the seed carries the seed
    itself; lighter stops fade toward near-white, darker ones toward a deep
    tone of the same hue.

    Args:
        seed: Any parseable color string
        stops: Number of stops (1-11) or an explicit sequence of labels
        contrast_shift: Positive spreads the ramp apart, negative pulls it
            toward mid lightness. 0 leaves it untouched.
        coefficients: ShiftCoefficients used by the warp

    Returns:
        list: RampStop tuples, lightest first

    Raises:
        ColorParseError: If the seed cannot be parsed
        ValueError: If the stop table is unsupported
    """
    labels = _resolve_labels(stops)
    oklch = to_oklch(seed)
    count = len(labels)

    base = find_base_position(oklch.l, labels)
    logger.debug("Seed %s anchored at stop %s (L=%.3f)", seed, labels[base], oklch.l)

    points = _interpolate_points(oklch, count, base)
    if contrast_shift:
        points = _warp_points(points, contrast_shift, coefficients)

    return [_make_stop(label, *point) for label, point in zip(labels, points)]


def try_generate_ramp(seed, stops=11, contrast_shift=0.0):
    """Like generate_ramp, but an unreadable seed yields an empty ramp."""
    try:
        return generate_ramp(seed, stops, contrast_shift)
    except ValueError as exc:
        logger.warning("Skipping ramp for %r: %s", seed, exc)
        return []


def ramp_hexes(ramp):
    return [stop.hex for stop in ramp]
