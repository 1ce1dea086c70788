import colorsys
import math
import re
from collections import namedtuple

from coloraide import Color as CSSColor

# Color carries every representation the exporters need, like the original
# image palette generator did, plus its OKLCH coordinates.
Color = namedtuple("Color", ["hex", "rgb", "hsl", "luminance", "oklch"])
Oklch = namedtuple("Oklch", ["l", "c", "h"])

WHITE = "#ffffff"
BLACK = "#000000"

# Chroma below this is treated as achromatic (hue pinned to 0)
ACHROMATIC_CHROMA = 1e-6

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
# Legacy shadcn variables store bare "H S% L%" triplets
_BARE_HSL_RE = re.compile(r"^\s*(-?[\d.]+)\s+([\d.]+)%\s+([\d.]+)%\s*$")


class ColorParseError(ValueError):
    """Raised when a string cannot be read as a color."""


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    hex_color = hex_color.lstrip("#")
    if len(hex_color) in (3, 4):
        hex_color = "".join(ch * 2 for ch in hex_color[:3])
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hsl(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (h * 360, s * 100, l * 100)


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def _channel_to_byte(value):
    value = min(1.0, max(0.0, float(value)))
    return int(math.floor(value * 255 + 0.5))


def parse_rgb(value):
    """Parse any CSS color string into unclamped sRGB floats.

    Args:
        value: Hex (3/4/6/8 digits, '#' optional), any CSS color function
            understood by coloraide, a named color, or a bare "H S% L%" triplet.

    Returns:
        tuple: (r, g, b) floats, nominally 0.0-1.0

    Raises:
        ColorParseError: If the string is not a color or yields a NaN channel
    """
    if not isinstance(value, str) or not value.strip():
        raise ColorParseError(f"Invalid color: {value!r}")

    text = value.strip()
    if _HEX_RE.match(text):
        text = text if text.startswith("#") else f"#{text}"
    else:
        bare = _BARE_HSL_RE.match(text)
        if bare:
            text = f"hsl({bare.group(1)} {bare.group(2)}% {bare.group(3)}%)"

    try:
        coords = CSSColor(text).convert("srgb").coords()
    except ValueError as exc:
        raise ColorParseError(f"Invalid color: {value!r}") from exc

    if not all(math.isfinite(c) for c in coords):
        raise ColorParseError(f"Color produced non-finite channels: {value!r}")
    return tuple(float(c) for c in coords)


def rgb_to_oklch(r, g, b):
    """Convert sRGB floats (0.0-1.0) to an Oklch tuple."""
    lightness, chroma, hue = CSSColor("srgb", [r, g, b]).convert("oklch").coords()

    # coloraide reports an undefined hue as NaN
    if chroma < ACHROMATIC_CHROMA or math.isnan(hue):
        return Oklch(float(lightness), 0.0, 0.0)
    return Oklch(float(lightness), float(chroma), float(hue) % 360)


def oklch_to_rgb(l, c, h):
    """Convert OKLCH to unclamped sRGB floats."""
    coords = CSSColor("oklch", [l, c, h or 0.0]).convert("srgb").coords()
    return tuple(float(v) for v in coords)


def oklch_to_hex(l, c, h):
    r, g, b = oklch_to_rgb(l, c, h)
    return rgb_to_hex(_channel_to_byte(r), _channel_to_byte(g), _channel_to_byte(b))


def to_oklch(value):
    """Parse a color string straight to OKLCH."""
    return rgb_to_oklch(*parse_rgb(value))


def to_hex(value):
    """Normalize any parseable color string to lowercase #rrggbb."""
    r, g, b = parse_rgb(value)
    return rgb_to_hex(_channel_to_byte(r), _channel_to_byte(g), _channel_to_byte(b))


def create_color(r, g, b):
    """Create a Color namedtuple with all representations"""
    r, g, b = max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b))
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        hsl=rgb_to_hsl(r, g, b),
        luminance=relative_luminance(r, g, b),
        oklch=rgb_to_oklch(r / 255, g / 255, b / 255),
    )


def luminance_of(value):
    return relative_luminance(*hex_to_rgb(to_hex(value)))


def contrast_between(a, b):
    return contrast_ratio(luminance_of(a), luminance_of(b))


def best_text_for(background):
    """Pick white or black, whichever reads better on the background.

    White wins ties.
    """
    if contrast_between(WHITE, background) >= contrast_between(BLACK, background):
        return WHITE
    return BLACK


def tweak_lightness(value, delta):
    """Shift a color's OKLCH lightness by delta, clamped to 0-1."""
    l, c, h = to_oklch(value)
    return oklch_to_hex(min(1.0, max(0.0, l + delta)), max(0.0, c), h)


def mix_hue(h1, h2, c1, c2, t):
    # Achromatic endpoints take the other side's hue
    if c1 == 0 and c2 != 0:
        return h2
    if c2 == 0:
        return h1
    delta = ((h2 - h1 + 180) % 360) - 180
    return (h1 + delta * t) % 360


def mix_colors(color1, color2, ratio=0.5):
    """Interpolate two colors in OKLCH along the shorter hue arc.

    Args:
        color1: Start color string
        color2: End color string
        ratio: 0.0 returns color1, 1.0 returns color2

    Returns:
        Mixed color as #rrggbb
    """
    l1, c1, h1 = to_oklch(color1)
    l2, c2, h2 = to_oklch(color2)
    return oklch_to_hex(
        l1 + (l2 - l1) * ratio,
        c1 + (c2 - c1) * ratio,
        mix_hue(h1, h2, c1, c2, ratio),
    )


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to a two-digit hex alpha suffix."""
    opacity = max(0.0, min(1.0, opacity))
    return f"{round(opacity * 255):02x}"


def hsl_components(value):
    """Return a bare "H S% L%" string for a color, as CSS shadow vars expect."""
    r, g, b = hex_to_rgb(to_hex(value))
    h, s, l = rgb_to_hsl(r, g, b)
    return f"{round(h, 1):g} {round(s, 1):g}% {round(l, 1):g}%"


def format_oklch(value):
    """Format a color as oklch(L C H) with 4 decimals."""
    l, c, h = to_oklch(value)
    return f"oklch({l:.4f} {c:.4f} {h:.4f})"


def hue_distance(h1, h2):
    d = abs(h1 - h2) % 360
    return min(d, 360 - d)
