"""Adapters for live pyimgui objects.

pyimgui is never imported here; the caller passes its ``imgui`` module so
the adapters work against whatever build (docking or not) is installed::

    import imgui
    from imgui_styles.backends.pyimgui import PyImGuiContext
    from imgui_styles.theme import dracula

    imgui.create_context()
    dracula.context_patch(PyImGuiContext(imgui))
    renderer.refresh_font_texture()
"""

from __future__ import annotations

import os
import tempfile
from typing import Optional, Tuple

from ..core.roles import Color, MetricValue, StyleMetric, StyleRole
from ..fonts.sfnt import validate_font_data
from ..logging import get_logger

logger = get_logger(__name__)

# pyimgui spells some style fields differently from the C++ names
METRIC_ALIASES = {
    StyleMetric.CURVE_TESSELLATION_TOL: ('curve_tessellation_tolerance',),
    StyleMetric.CIRCLE_TESSELLATION_MAX_ERROR: ('circle_segment_max_error',),
}


def color_constant_names(role: StyleRole) -> Tuple[str, ...]:
    """Candidate ``imgui.COLOR_*`` constant names for ``role``."""
    name = role.name
    spelled_out = name.replace('MENU_BAR', 'MENUBAR')
    spelled_out = '_'.join('BACKGROUND' if part == 'BG' else part for part in spelled_out.split('_'))
    candidates = [f'COLOR_{name}']
    if spelled_out != name:
        candidates.insert(0, f'COLOR_{spelled_out}')
    return tuple(candidates)


class PyImGuiStyle:
    """StyleTarget over a pyimgui ``GuiStyle``."""

    def __init__(self, style, constants):
        self._style = style
        self._constants = constants

    def _color_index(self, role: StyleRole) -> Optional[int]:
        for name in color_constant_names(role):
            index = getattr(self._constants, name, None)
            if index is not None:
                return index
        return None

    def _metric_attribute(self, metric: StyleMetric) -> Optional[str]:
        for name in (metric.field,) + METRIC_ALIASES.get(metric, ()):
            if hasattr(self._style, name):
                return name
        return None

    def has_color(self, role: StyleRole) -> bool:
        return self._color_index(role) is not None

    def set_color(self, role: StyleRole, rgba: Color) -> None:
        self._style.colors[self._color_index(role)] = tuple(rgba)

    def has_metric(self, metric: StyleMetric) -> bool:
        return self._metric_attribute(metric) is not None

    def set_metric(self, metric: StyleMetric, value: MetricValue) -> None:
        setattr(self._style, self._metric_attribute(metric), value)


class PyImGuiFontAtlas:
    """FontRegistryTarget over a pyimgui ``_FontAtlas``.

    pyimgui only loads TrueType fonts from files, so the bytes go through a
    temporary file that is removed once the atlas has read it.
    """

    def __init__(self, atlas):
        self._atlas = atlas

    def replace_fonts(self, data: bytes, size_pixels: float) -> None:
        validate_font_data(data)
        fd, path = tempfile.mkstemp(suffix='.ttf', prefix='imgui_styles_')
        try:
            with os.fdopen(fd, 'wb') as handle:
                handle.write(data)
            self._atlas.clear()
            self._atlas.add_font_from_file_ttf(path, size_pixels)
        finally:
            os.unlink(path)
        logger.debug(f"pyimgui font atlas reset to one font at {size_pixels}px")


class PyImGuiContext:
    """RenderContext over the current pyimgui context."""

    def __init__(self, imgui):
        self.style = PyImGuiStyle(imgui.get_style(), imgui)
        self.fonts = PyImGuiFontAtlas(imgui.get_io().fonts)
