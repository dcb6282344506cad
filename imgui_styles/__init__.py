"""Preset Dear ImGui themes and a bundled default font.

Pick a theme and patch the context you own::

    from imgui_styles.theme import embrace_the_darkness
    embrace_the_darkness.context_patch(context)
"""

from .core.errors import ConfigMismatch, DuplicateThemeKey, MalformedFontData, ThemeError
from .core.patch import (
    FontRegistryTarget,
    RenderContext,
    StyleTarget,
    apply_full,
    apply_theme,
    build_default_styled,
    install_font,
)
from .core.roles import StyleMetric, StyleRole
from .core.style import Context, FontAtlas, FontSource, Style
from .fonts import DEFAULT_FONT, LATO_REGULAR, FontAsset
from .theme import DEFAULT_THEME_ID, THEMES, Theme, get_theme

__version__ = "0.2.0"

__all__ = [
    "ConfigMismatch",
    "Context",
    "DEFAULT_FONT",
    "DEFAULT_THEME_ID",
    "DuplicateThemeKey",
    "FontAsset",
    "FontAtlas",
    "FontRegistryTarget",
    "FontSource",
    "LATO_REGULAR",
    "MalformedFontData",
    "RenderContext",
    "Style",
    "StyleMetric",
    "StyleRole",
    "StyleTarget",
    "THEMES",
    "Theme",
    "ThemeError",
    "apply_full",
    "apply_theme",
    "build_default_styled",
    "get_theme",
    "install_font",
]
