"""Provider registry: one entry per export format."""

from collections import namedtuple

from ..overrides import InvalidProviderError, normalize
from . import alacritty, gimp, kitty, shadcn, shiki, vscode, windows_terminal, zed
from .terminal import theme_slug

ProviderOutput = namedtuple("ProviderOutput", ["content", "filename", "mime_type"])

Provider = namedtuple("Provider", ["name", "extension", "mime_type", "render"])


def _render_shadcn(theme, name, overrides):
    return shadcn.design_tokens_css(theme, overrides)


def _render_vscode(theme, name, overrides):
    return vscode.vscode_theme_json(theme, name, overrides)


def _render_shiki(theme, name, overrides):
    return shiki.shiki_css(theme, overrides)


def _render_zed(theme, name, overrides):
    return zed.generate_zed_themes(theme, name, overrides=normalize(overrides) if overrides else None)


def _render_alacritty(theme, name, overrides):
    return alacritty.alacritty_yaml(theme)


def _render_kitty(theme, name, overrides):
    return kitty.kitty_conf(theme, name)


def _render_windows_terminal(theme, name, overrides):
    return windows_terminal.windows_terminal_json(theme, name)


def _render_gimp(theme, name, overrides):
    return gimp.gimp_palette(theme, name)


PROVIDERS = {
    "shadcn": Provider("shadcn/ui", "css", "text/css", _render_shadcn),
    "vscode": Provider("VS Code", "json", "application/json", _render_vscode),
    "shiki": Provider("Shiki", "css", "text/css", _render_shiki),
    "zed": Provider("Zed", "json", "application/json", _render_zed),
    "alacritty": Provider("Alacritty", "yml", "application/x-yaml", _render_alacritty),
    "kitty": Provider("Kitty", "conf", "text/plain", _render_kitty),
    "windows-terminal": Provider(
        "Windows Terminal", "json", "application/json", _render_windows_terminal
    ),
    "gimp": Provider("GIMP", "gpl", "text/plain", _render_gimp),
}


def export_provider(provider_id, theme, overrides=None, name="Palette Engine"):
    """Render a canonical theme for one provider.

    Args:
        provider_id: Key of PROVIDERS
        theme: Canonical theme with light and dark blocks
        overrides: Optional override for this provider
        name: Theme name used in file contents and the filename

    Returns:
        ProviderOutput

    Raises:
        InvalidProviderError: If provider_id is not registered
    """
    provider = PROVIDERS.get(provider_id)
    if provider is None:
        raise InvalidProviderError(f"Invalid provider: {provider_id}")

    content = provider.render(theme, name, overrides)
    filename = f"{theme_slug(name)}.{provider.extension}"
    return ProviderOutput(content, filename, provider.mime_type)


__all__ = ["PROVIDERS", "Provider", "ProviderOutput", "export_provider"]
