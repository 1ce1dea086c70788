"""Normalize, merge and denormalize per-provider theme overrides.

Overrides are stored in several legacy shapes:

    (a) {"palettes": {"light": {..., "shadow": {...}}}, "fonts": ..., "radius": ...}
    (b) {"light": {"palettes": {"light": {...}}}}
    (c) {"light": {...}, "dark": {...}}

plus an old top-level "shadow" that applies to both modes. The normalized form
keeps the color maps per mode and lifts shadows into "shadows.{mode}" with
camelCase offsets:

    {"light": {...}, "dark": {...}, "shadows": {"light": {...}}, "fonts": ...}

Callers normalize on read and denormalize (back to shape (a)) on write.
"""

import logging

from .ramp.anchors import MODES

logger = logging.getLogger(__name__)

OVERRIDE_PROVIDERS = ("shadcn", "vscode", "shiki", "zed")

# Providers whose overrides are free-form editor maps, stored as given
PASSTHROUGH_PROVIDERS = ("vscode", "shiki")

PASSTHROUGH_KEYS = ("fonts", "radius", "letter_spacing", "letterSpacing")

_TO_CAMEL = {"offset_x": "offsetX", "offset_y": "offsetY"}
_TO_SNAKE = {camel: snake for snake, camel in _TO_CAMEL.items()}


class InvalidProviderError(ValueError):
    """Raised for an override addressed to a provider that takes none."""


def _rename(shadow, names):
    return {names.get(key, key): value for key, value in shadow.items()}


def _mode_palettes(raw):
    if isinstance(raw.get("palettes"), dict):
        return raw["palettes"]

    palettes = {}
    for mode in MODES:
        entry = raw.get(mode)
        if not isinstance(entry, dict):
            continue
        nested = entry.get("palettes")
        if isinstance(nested, dict):
            if isinstance(nested.get(mode), dict):
                palettes[mode] = nested[mode]
        else:
            palettes[mode] = entry
    return palettes


def normalize(raw):
    """Bring any stored override shape into the normalized form.

    Input that already carries shadows.light or shadows.dark is returned as is,
    so normalizing twice never drops shadow data. A mode whose map held nothing
    but a shadow gets no color map of its own.
    """
    if not isinstance(raw, dict):
        return {}

    shadows = raw.get("shadows")
    if isinstance(shadows, dict) and ("light" in shadows or "dark" in shadows):
        return raw

    result = {}
    lifted = {}
    for mode, colors in _mode_palettes(raw).items():
        if not isinstance(colors, dict):
            continue
        colors = dict(colors)
        shadow = colors.pop("shadow", None)
        if isinstance(shadow, dict):
            lifted[mode] = _rename(shadow, _TO_CAMEL)
            if colors:
                result[mode] = colors
        else:
            result[mode] = colors

    legacy = raw.get("shadow")
    if isinstance(legacy, dict):
        for mode in MODES:
            lifted.setdefault(mode, _rename(legacy, _TO_CAMEL))

    if lifted:
        result["shadows"] = {mode: lifted[mode] for mode in MODES if mode in lifted}

    for key in PASSTHROUGH_KEYS:
        if key in raw:
            result[key] = raw[key]
    return result


def denormalize(normalized):
    """Rebuild storage shape (a) from a normalized override."""
    if not normalized:
        return {}

    shadows = normalized.get("shadows") or {}
    palettes = {}
    for mode in MODES:
        colors = normalized.get(mode)
        shadow = shadows.get(mode)
        if colors is None and not shadow:
            continue
        entry = dict(colors or {})
        if shadow:
            entry["shadow"] = _rename(shadow, _TO_SNAKE)
        palettes[mode] = entry

    result = {}
    if palettes:
        result["palettes"] = palettes
    for key in PASSTHROUGH_KEYS:
        if key in normalized:
            result[key] = normalized[key]
    return result


def check_provider(provider):
    if provider not in OVERRIDE_PROVIDERS:
        raise InvalidProviderError(f"Invalid provider: {provider}")
    return provider


def validate_override(provider, override):
    """Validate an incoming override and return it in normalized form.

    Raises:
        InvalidProviderError: If the provider takes no overrides
        ValueError: If the override is not a mapping
    """
    check_provider(provider)
    if not isinstance(override, dict):
        raise ValueError("Override must be an object")
    if provider in PASSTHROUGH_PROVIDERS:
        return dict(override)
    return normalize(override)


def merge(base, partial):
    """Overwrite base field by field, per provider.

    Inputs are expected to be normalized already and are not normalized again.

    Raises:
        InvalidProviderError: If partial names an unknown provider
    """
    merged = dict(base or {})
    for provider, override in (partial or {}).items():
        check_provider(provider)
        if override:
            merged[provider] = {**(merged.get(provider) or {}), **override}
    return merged


def _raw_theme_extras(raw_theme):
    extras = {}
    for key in ("fonts", "radius", "letter_spacing"):
        if raw_theme.get(key):
            extras[key] = raw_theme[key]

    shadows = raw_theme.get("shadows")
    if isinstance(shadows, dict) and shadows:
        if "light" in shadows or "dark" in shadows:
            extras["shadows"] = shadows
        else:
            extras["shadow"] = shadows
    return extras


def _collect_source(collected, provider, data, source):
    if not data:
        return collected
    try:
        validated = validate_override(provider, data)
    except ValueError as exc:
        logger.warning("Ignoring %s override for %r: %s", source, provider, exc)
        return collected
    return merge(collected, {provider: validated})


def collect_overrides(record):
    """Gather every stored override of a theme record, normalized per provider.

    Sources are applied lowest precedence first: extras kept on the raw theme
    (fonts, radius, shadows), then the legacy "overrides" mapping, then the
    dedicated "<provider>_override" columns. Overrides that fail validation
    are logged and left out.
    """
    collected = {}

    raw_theme = record.get("raw_theme") or record.get("rawTheme") or {}
    if isinstance(raw_theme, dict):
        collected = _collect_source(
            collected, "shadcn", _raw_theme_extras(raw_theme), "raw theme"
        )

    legacy = record.get("overrides")
    if isinstance(legacy, dict):
        for provider, data in legacy.items():
            collected = _collect_source(collected, provider, data, "legacy")

    for provider in OVERRIDE_PROVIDERS:
        collected = _collect_source(
            collected, provider, record.get(f"{provider}_override"), "column"
        )
    return collected
