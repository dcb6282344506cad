"""Built-in themes and the registry keyed by theme id."""

from .base import Theme, color_table, metric_table
from .dracula import DRACULA_THEME
from .embrace_the_darkness import EMBRACE_THE_DARKNESS_THEME

THEMES: dict[str, Theme] = {
    EMBRACE_THE_DARKNESS_THEME.id: EMBRACE_THE_DARKNESS_THEME,
    DRACULA_THEME.id: DRACULA_THEME,
}

DEFAULT_THEME_ID = EMBRACE_THE_DARKNESS_THEME.id


def get_theme(theme_id: str) -> Theme:
    theme = THEMES.get(theme_id)
    if theme is None:
        raise ValueError(f"Unknown theme id: {theme_id}")
    return theme


__all__ = [
    "Theme",
    "THEMES",
    "DEFAULT_THEME_ID",
    "DRACULA_THEME",
    "EMBRACE_THE_DARKNESS_THEME",
    "color_table",
    "get_theme",
    "metric_table",
]
