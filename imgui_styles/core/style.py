"""Headless mirror of the Dear ImGui style, font atlas and context.

These objects stand in for the toolkit's own ``ImGuiStyle``, ``ImFontAtlas``
and ``ImGuiContext`` so themes can be applied, inspected and compared
without a live GUI. Colors are stored as ``float32`` exactly like the
toolkit stores them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from ..fonts.sfnt import validate_font_data
from .roles import Color, MetricValue, StyleMetric, StyleRole, coerce_color, coerce_metric

# ImGuiStyle::ImGuiStyle()
DEFAULT_METRICS: Dict[StyleMetric, MetricValue] = {
    StyleMetric.ALPHA: 1.0,
    StyleMetric.DISABLED_ALPHA: 0.60,
    StyleMetric.WINDOW_PADDING: (8.0, 8.0),
    StyleMetric.WINDOW_ROUNDING: 0.0,
    StyleMetric.WINDOW_BORDER_SIZE: 1.0,
    StyleMetric.WINDOW_MIN_SIZE: (32.0, 32.0),
    StyleMetric.WINDOW_TITLE_ALIGN: (0.0, 0.5),
    StyleMetric.CHILD_ROUNDING: 0.0,
    StyleMetric.CHILD_BORDER_SIZE: 1.0,
    StyleMetric.POPUP_ROUNDING: 0.0,
    StyleMetric.POPUP_BORDER_SIZE: 1.0,
    StyleMetric.FRAME_PADDING: (4.0, 3.0),
    StyleMetric.FRAME_ROUNDING: 0.0,
    StyleMetric.FRAME_BORDER_SIZE: 0.0,
    StyleMetric.ITEM_SPACING: (8.0, 4.0),
    StyleMetric.ITEM_INNER_SPACING: (4.0, 4.0),
    StyleMetric.CELL_PADDING: (4.0, 2.0),
    StyleMetric.TOUCH_EXTRA_PADDING: (0.0, 0.0),
    StyleMetric.INDENT_SPACING: 21.0,
    StyleMetric.COLUMNS_MIN_SPACING: 6.0,
    StyleMetric.SCROLLBAR_SIZE: 14.0,
    StyleMetric.SCROLLBAR_ROUNDING: 9.0,
    StyleMetric.GRAB_MIN_SIZE: 10.0,
    StyleMetric.GRAB_ROUNDING: 0.0,
    StyleMetric.LOG_SLIDER_DEADZONE: 4.0,
    StyleMetric.TAB_ROUNDING: 4.0,
    StyleMetric.TAB_BORDER_SIZE: 0.0,
    StyleMetric.TAB_MIN_WIDTH_FOR_CLOSE_BUTTON: 0.0,
    StyleMetric.BUTTON_TEXT_ALIGN: (0.5, 0.5),
    StyleMetric.SELECTABLE_TEXT_ALIGN: (0.0, 0.0),
    StyleMetric.DISPLAY_WINDOW_PADDING: (19.0, 19.0),
    StyleMetric.DISPLAY_SAFE_AREA_PADDING: (3.0, 3.0),
    StyleMetric.MOUSE_CURSOR_SCALE: 1.0,
    StyleMetric.CURVE_TESSELLATION_TOL: 1.25,
    StyleMetric.CIRCLE_TESSELLATION_MAX_ERROR: 0.30,
}

# ImGui::StyleColorsDark(), with the lerped tab colors precomputed
DEFAULT_COLORS: Dict[StyleRole, Color] = {
    StyleRole.TEXT: (1.00, 1.00, 1.00, 1.00),
    StyleRole.TEXT_DISABLED: (0.50, 0.50, 0.50, 1.00),
    StyleRole.WINDOW_BG: (0.06, 0.06, 0.06, 0.94),
    StyleRole.CHILD_BG: (0.00, 0.00, 0.00, 0.00),
    StyleRole.POPUP_BG: (0.08, 0.08, 0.08, 0.94),
    StyleRole.BORDER: (0.43, 0.43, 0.50, 0.50),
    StyleRole.BORDER_SHADOW: (0.00, 0.00, 0.00, 0.00),
    StyleRole.FRAME_BG: (0.16, 0.29, 0.48, 0.54),
    StyleRole.FRAME_BG_HOVERED: (0.26, 0.59, 0.98, 0.40),
    StyleRole.FRAME_BG_ACTIVE: (0.26, 0.59, 0.98, 0.67),
    StyleRole.TITLE_BG: (0.04, 0.04, 0.04, 1.00),
    StyleRole.TITLE_BG_ACTIVE: (0.16, 0.29, 0.48, 1.00),
    StyleRole.TITLE_BG_COLLAPSED: (0.00, 0.00, 0.00, 0.51),
    StyleRole.MENU_BAR_BG: (0.14, 0.14, 0.14, 1.00),
    StyleRole.SCROLLBAR_BG: (0.02, 0.02, 0.02, 0.53),
    StyleRole.SCROLLBAR_GRAB: (0.31, 0.31, 0.31, 1.00),
    StyleRole.SCROLLBAR_GRAB_HOVERED: (0.41, 0.41, 0.41, 1.00),
    StyleRole.SCROLLBAR_GRAB_ACTIVE: (0.51, 0.51, 0.51, 1.00),
    StyleRole.CHECK_MARK: (0.26, 0.59, 0.98, 1.00),
    StyleRole.SLIDER_GRAB: (0.24, 0.52, 0.88, 1.00),
    StyleRole.SLIDER_GRAB_ACTIVE: (0.26, 0.59, 0.98, 1.00),
    StyleRole.BUTTON: (0.26, 0.59, 0.98, 0.40),
    StyleRole.BUTTON_HOVERED: (0.26, 0.59, 0.98, 1.00),
    StyleRole.BUTTON_ACTIVE: (0.06, 0.53, 0.98, 1.00),
    StyleRole.HEADER: (0.26, 0.59, 0.98, 0.31),
    StyleRole.HEADER_HOVERED: (0.26, 0.59, 0.98, 0.80),
    StyleRole.HEADER_ACTIVE: (0.26, 0.59, 0.98, 1.00),
    StyleRole.SEPARATOR: (0.43, 0.43, 0.50, 0.50),
    StyleRole.SEPARATOR_HOVERED: (0.10, 0.40, 0.75, 0.78),
    StyleRole.SEPARATOR_ACTIVE: (0.10, 0.40, 0.75, 1.00),
    StyleRole.RESIZE_GRIP: (0.26, 0.59, 0.98, 0.20),
    StyleRole.RESIZE_GRIP_HOVERED: (0.26, 0.59, 0.98, 0.67),
    StyleRole.RESIZE_GRIP_ACTIVE: (0.26, 0.59, 0.98, 0.95),
    StyleRole.TAB: (0.18, 0.35, 0.58, 0.86),
    StyleRole.TAB_HOVERED: (0.26, 0.59, 0.98, 0.80),
    StyleRole.TAB_ACTIVE: (0.20, 0.41, 0.68, 1.00),
    StyleRole.TAB_UNFOCUSED: (0.07, 0.10, 0.15, 0.97),
    StyleRole.TAB_UNFOCUSED_ACTIVE: (0.14, 0.26, 0.42, 1.00),
    StyleRole.DOCKING_PREVIEW: (0.26, 0.59, 0.98, 0.70),
    StyleRole.DOCKING_EMPTY_BG: (0.20, 0.20, 0.20, 1.00),
    StyleRole.PLOT_LINES: (0.61, 0.61, 0.61, 1.00),
    StyleRole.PLOT_LINES_HOVERED: (1.00, 0.43, 0.35, 1.00),
    StyleRole.PLOT_HISTOGRAM: (0.90, 0.70, 0.00, 1.00),
    StyleRole.PLOT_HISTOGRAM_HOVERED: (1.00, 0.60, 0.00, 1.00),
    StyleRole.TABLE_HEADER_BG: (0.19, 0.19, 0.20, 1.00),
    StyleRole.TABLE_BORDER_STRONG: (0.31, 0.31, 0.35, 1.00),
    StyleRole.TABLE_BORDER_LIGHT: (0.23, 0.23, 0.25, 1.00),
    StyleRole.TABLE_ROW_BG: (0.00, 0.00, 0.00, 0.00),
    StyleRole.TABLE_ROW_BG_ALT: (1.00, 1.00, 1.00, 0.06),
    StyleRole.TEXT_SELECTED_BG: (0.26, 0.59, 0.98, 0.35),
    StyleRole.DRAG_DROP_TARGET: (1.00, 1.00, 0.00, 0.90),
    StyleRole.NAV_HIGHLIGHT: (0.26, 0.59, 0.98, 1.00),
    StyleRole.NAV_WINDOWING_HIGHLIGHT: (1.00, 1.00, 1.00, 0.70),
    StyleRole.NAV_WINDOWING_DIM_BG: (0.80, 0.80, 0.80, 0.20),
    StyleRole.MODAL_WINDOW_DIM_BG: (0.80, 0.80, 0.80, 0.35),
}


class Style:
    """Python-side ``ImGuiStyle``: a float32 color array plus metric fields."""

    def __init__(self, colors: Optional[np.ndarray] = None, **metrics):
        if colors is None:
            colors = np.zeros((len(StyleRole), 4), dtype=np.float32)
        self.colors = np.array(colors, dtype=np.float32)
        if self.colors.shape != (len(StyleRole), 4):
            raise ValueError(
                f"Style colors must have shape ({len(StyleRole)}, 4), got {self.colors.shape}"
            )
        for metric in StyleMetric:
            value = metrics.pop(metric.field, 0.0 if metric.arity == 1 else (0.0, 0.0))
            setattr(self, metric.field, coerce_metric(metric, value))
        if metrics:
            raise TypeError(f"Unknown style fields: {', '.join(sorted(metrics))}")
        self.anti_aliased_lines = False
        self.anti_aliased_lines_use_tex = False
        self.anti_aliased_fill = False

    @classmethod
    def zeroed(cls) -> 'Style':
        """Every color channel and metric set to zero."""
        return cls()

    @classmethod
    def default(cls) -> 'Style':
        """The toolkit's canonical default style (``ImGuiStyle()`` + dark colors)."""
        style = cls(**{metric.field: value for metric, value in DEFAULT_METRICS.items()})
        for role, color in DEFAULT_COLORS.items():
            style.colors[role] = color
        style.anti_aliased_lines = True
        style.anti_aliased_lines_use_tex = True
        style.anti_aliased_fill = True
        return style

    def copy(self) -> 'Style':
        clone = Style(self.colors, **self.metrics())
        clone.anti_aliased_lines = self.anti_aliased_lines
        clone.anti_aliased_lines_use_tex = self.anti_aliased_lines_use_tex
        clone.anti_aliased_fill = self.anti_aliased_fill
        return clone

    def color(self, role: StyleRole) -> Color:
        return tuple(float(c) for c in self.colors[role])  # type: ignore[return-value]

    def metric(self, metric: StyleMetric) -> MetricValue:
        return getattr(self, metric.field)

    def metrics(self) -> Dict[str, MetricValue]:
        return {metric.field: getattr(self, metric.field) for metric in StyleMetric}

    # StyleTarget interface

    def has_color(self, role: StyleRole) -> bool:
        return 0 <= int(role) < self.colors.shape[0]

    def set_color(self, role: StyleRole, rgba: Color) -> None:
        self.colors[role] = coerce_color(rgba)

    def has_metric(self, metric: StyleMetric) -> bool:
        return hasattr(self, metric.field)

    def set_metric(self, metric: StyleMetric, value: MetricValue) -> None:
        setattr(self, metric.field, coerce_metric(metric, value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return (
            self.colors.tobytes() == other.colors.tobytes()
            and self.metrics() == other.metrics()
            and self.anti_aliased_lines == other.anti_aliased_lines
            and self.anti_aliased_lines_use_tex == other.anti_aliased_lines_use_tex
            and self.anti_aliased_fill == other.anti_aliased_fill
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Style(window_bg={self.color(StyleRole.WINDOW_BG)}, window_rounding={self.window_rounding})"


@dataclass(frozen=True)
class FontSource:
    """One registered font: raw TrueType bytes at a pixel size."""

    data: bytes = field(repr=False)
    size_pixels: float


class FontAtlas:
    """Python-side ``ImFontAtlas``: ordered list of registered fonts.

    The first registered font is the default font, as in the toolkit.
    """

    def __init__(self, fonts: Optional[List[FontSource]] = None):
        self.fonts: List[FontSource] = list(fonts or [])

    def clear(self) -> None:
        self.fonts.clear()

    def add_font(self, data: bytes, size_pixels: float) -> FontSource:
        validate_font_data(data)
        source = FontSource(bytes(data), float(size_pixels))
        self.fonts.append(source)
        return source

    def replace_fonts(self, data: bytes, size_pixels: float) -> None:
        # Validate before clearing so a bad font leaves the atlas as it was
        validate_font_data(data)
        self.clear()
        self.add_font(data, size_pixels)

    @property
    def default_font(self) -> Optional[FontSource]:
        return self.fonts[0] if self.fonts else None

    def __len__(self) -> int:
        return len(self.fonts)


class Context:
    """Python-side ``ImGuiContext``: owns one style and one font atlas."""

    def __init__(self, style: Optional[Style] = None, fonts: Optional[FontAtlas] = None):
        self.style = style if style is not None else Style.default()
        self.fonts = fonts if fonts is not None else FontAtlas()
