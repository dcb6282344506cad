"""Font registry target backed by the Qt application font database."""

from __future__ import annotations

from typing import List, Optional

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QFont, QFontDatabase, QGuiApplication, QRawFont

from ..core.errors import MalformedFontData
from ..logging import get_logger
from .sfnt import validate_font_data

logger = get_logger(__name__)


class QtFontRegistry:
    """Install fonts as the Qt application's only application font.

    Every application font registered through ``QFontDatabase`` is removed
    before the new one is added, and the new family becomes the
    application's default font.
    """

    def __init__(self, app: Optional[QGuiApplication] = None):
        self._app = app
        self.font_ids: List[int] = []

    @property
    def app(self) -> QGuiApplication:
        app = self._app or QGuiApplication.instance()
        if app is None:
            raise RuntimeError("QtFontRegistry requires a running QGuiApplication")
        return app

    @property
    def families(self) -> List[str]:
        return [
            family
            for font_id in self.font_ids
            for family in QFontDatabase.applicationFontFamilies(font_id)
        ]

    def replace_fonts(self, data: bytes, size_pixels: float) -> None:
        app = self.app
        validate_font_data(data)
        font_data = QByteArray(bytes(data))
        # Let Qt parse the face before the current fonts are dropped
        if not QRawFont(font_data, float(size_pixels)).isValid():
            raise MalformedFontData("Qt could not parse the font data")

        QFontDatabase.removeAllApplicationFonts()
        self.font_ids.clear()

        font_id = QFontDatabase.addApplicationFontFromData(font_data)
        if font_id == -1:
            raise MalformedFontData("Qt could not load the font data")
        families = QFontDatabase.applicationFontFamilies(font_id)
        if not families:
            QFontDatabase.removeApplicationFont(font_id)
            raise MalformedFontData("Font data registered no font family")
        self.font_ids.append(font_id)

        font = QFont(families[0])
        font.setPixelSize(max(1, round(size_pixels)))
        app.setFont(font)
        logger.debug(f"Qt application font set to '{families[0]}' at {font.pixelSize()}px")
