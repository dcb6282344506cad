"""Global theme manager for runtime theme switching."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..core.patch import RenderContext, apply_full
from ..fonts import DEFAULT_FONT, FontAsset
from ..logging import get_logger
from .base import Theme

logger = get_logger(__name__)


class ThemeManager(QObject):
    """Singleton manager that owns the active theme and the context it styles.

    ``default_theme_id`` is the theme ``current`` resolves to before any
    ``set_theme`` call; ``font_size`` overrides each theme's own font size.
    """

    theme_changed = pyqtSignal(object)
    _instance: Optional["ThemeManager"] = None

    def __init__(
        self,
        context: Optional[RenderContext] = None,
        font: FontAsset = DEFAULT_FONT,
        default_theme_id: Optional[str] = None,
        font_size: Optional[float] = None,
    ):
        super().__init__()
        from . import DEFAULT_THEME_ID, get_theme

        self._default = get_theme(default_theme_id or DEFAULT_THEME_ID)
        self._context = context
        self._font = font
        self._font_size = font_size
        self._current: Optional[Theme] = None

    @classmethod
    def instance(cls, context: Optional[RenderContext] = None) -> "ThemeManager":
        if cls._instance is None:
            cls._instance = cls(context)
        elif context is not None:
            cls._instance._context = context
        return cls._instance

    def attach(self, context: RenderContext) -> None:
        """Style ``context`` from now on, re-applying the current theme if one is set."""
        self._context = context
        if self._current is not None:
            self._apply(self._current)

    def set_theme(self, theme_id: str) -> None:
        from . import THEMES

        theme = THEMES.get(theme_id)
        if theme is None:
            raise ValueError(f"Unknown theme id: {theme_id}")

        self._apply(theme)
        self._current = theme
        self.theme_changed.emit(theme)

    def _apply(self, theme: Theme) -> None:
        if self._context is None:
            return
        size = self._font_size if self._font_size is not None else theme.font_size
        apply_full(theme, self._font, self._context, size)
        logger.debug(f"Theme '{theme.id}' applied with {self._font.name} at {size}px")

    @property
    def current(self) -> Theme:
        if self._current is None:
            self.set_theme(self._default.id)
        return self._current

    def available(self) -> list[Theme]:
        from . import THEMES

        return list(THEMES.values())
