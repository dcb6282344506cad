"""Style vocabulary of the Dear ImGui toolkit.

``StyleRole`` mirrors ``ImGuiCol_`` (docking branch ordering): the integer
value of each member is the slot index in the style's color array.
``StyleMetric`` lists the non-color fields of ``ImGuiStyle`` that themes
may override.
"""

from enum import Enum, IntEnum
from typing import Tuple, Union

Color = Tuple[float, float, float, float]
MetricValue = Union[float, Tuple[float, float]]


class StyleRole(IntEnum):
    TEXT = 0
    TEXT_DISABLED = 1
    WINDOW_BG = 2
    CHILD_BG = 3
    POPUP_BG = 4
    BORDER = 5
    BORDER_SHADOW = 6
    FRAME_BG = 7
    FRAME_BG_HOVERED = 8
    FRAME_BG_ACTIVE = 9
    TITLE_BG = 10
    TITLE_BG_ACTIVE = 11
    TITLE_BG_COLLAPSED = 12
    MENU_BAR_BG = 13
    SCROLLBAR_BG = 14
    SCROLLBAR_GRAB = 15
    SCROLLBAR_GRAB_HOVERED = 16
    SCROLLBAR_GRAB_ACTIVE = 17
    CHECK_MARK = 18
    SLIDER_GRAB = 19
    SLIDER_GRAB_ACTIVE = 20
    BUTTON = 21
    BUTTON_HOVERED = 22
    BUTTON_ACTIVE = 23
    HEADER = 24
    HEADER_HOVERED = 25
    HEADER_ACTIVE = 26
    SEPARATOR = 27
    SEPARATOR_HOVERED = 28
    SEPARATOR_ACTIVE = 29
    RESIZE_GRIP = 30
    RESIZE_GRIP_HOVERED = 31
    RESIZE_GRIP_ACTIVE = 32
    TAB = 33
    TAB_HOVERED = 34
    TAB_ACTIVE = 35
    TAB_UNFOCUSED = 36
    TAB_UNFOCUSED_ACTIVE = 37
    DOCKING_PREVIEW = 38
    DOCKING_EMPTY_BG = 39
    PLOT_LINES = 40
    PLOT_LINES_HOVERED = 41
    PLOT_HISTOGRAM = 42
    PLOT_HISTOGRAM_HOVERED = 43
    TABLE_HEADER_BG = 44
    TABLE_BORDER_STRONG = 45
    TABLE_BORDER_LIGHT = 46
    TABLE_ROW_BG = 47
    TABLE_ROW_BG_ALT = 48
    TEXT_SELECTED_BG = 49
    DRAG_DROP_TARGET = 50
    NAV_HIGHLIGHT = 51
    NAV_WINDOWING_HIGHLIGHT = 52
    NAV_WINDOWING_DIM_BG = 53
    MODAL_WINDOW_DIM_BG = 54


class StyleMetric(Enum):
    """Named non-color style field: value is ``(attribute name, arity)``."""

    ALPHA = ('alpha', 1)
    DISABLED_ALPHA = ('disabled_alpha', 1)
    WINDOW_PADDING = ('window_padding', 2)
    WINDOW_ROUNDING = ('window_rounding', 1)
    WINDOW_BORDER_SIZE = ('window_border_size', 1)
    WINDOW_MIN_SIZE = ('window_min_size', 2)
    WINDOW_TITLE_ALIGN = ('window_title_align', 2)
    CHILD_ROUNDING = ('child_rounding', 1)
    CHILD_BORDER_SIZE = ('child_border_size', 1)
    POPUP_ROUNDING = ('popup_rounding', 1)
    POPUP_BORDER_SIZE = ('popup_border_size', 1)
    FRAME_PADDING = ('frame_padding', 2)
    FRAME_ROUNDING = ('frame_rounding', 1)
    FRAME_BORDER_SIZE = ('frame_border_size', 1)
    ITEM_SPACING = ('item_spacing', 2)
    ITEM_INNER_SPACING = ('item_inner_spacing', 2)
    CELL_PADDING = ('cell_padding', 2)
    TOUCH_EXTRA_PADDING = ('touch_extra_padding', 2)
    INDENT_SPACING = ('indent_spacing', 1)
    COLUMNS_MIN_SPACING = ('columns_min_spacing', 1)
    SCROLLBAR_SIZE = ('scrollbar_size', 1)
    SCROLLBAR_ROUNDING = ('scrollbar_rounding', 1)
    GRAB_MIN_SIZE = ('grab_min_size', 1)
    GRAB_ROUNDING = ('grab_rounding', 1)
    LOG_SLIDER_DEADZONE = ('log_slider_deadzone', 1)
    TAB_ROUNDING = ('tab_rounding', 1)
    TAB_BORDER_SIZE = ('tab_border_size', 1)
    TAB_MIN_WIDTH_FOR_CLOSE_BUTTON = ('tab_min_width_for_close_button', 1)
    BUTTON_TEXT_ALIGN = ('button_text_align', 2)
    SELECTABLE_TEXT_ALIGN = ('selectable_text_align', 2)
    DISPLAY_WINDOW_PADDING = ('display_window_padding', 2)
    DISPLAY_SAFE_AREA_PADDING = ('display_safe_area_padding', 2)
    MOUSE_CURSOR_SCALE = ('mouse_cursor_scale', 1)
    CURVE_TESSELLATION_TOL = ('curve_tessellation_tol', 1)
    CIRCLE_TESSELLATION_MAX_ERROR = ('circle_tessellation_max_error', 1)

    @property
    def field(self) -> str:
        return self.value[0]

    @property
    def arity(self) -> int:
        return self.value[1]


def coerce_color(value) -> Color:
    """Return ``value`` as a 4-float tuple. Channels are not clamped."""
    message = f"Colors need exactly 4 channels (RGBA), got {value!r}"
    try:
        channels = tuple(float(c) for c in value)
    except TypeError as e:
        raise ValueError(message) from e
    if len(channels) != 4:
        raise ValueError(message)
    return channels  # type: ignore[return-value]


def coerce_metric(metric: StyleMetric, value) -> MetricValue:
    """Return ``value`` shaped for ``metric``: a float or a 2-float tuple."""
    if metric.arity == 1:
        if isinstance(value, (tuple, list)):
            raise ValueError(f"{metric.field} is a scalar, got {value!r}")
        return float(value)
    message = f"{metric.field} needs {metric.arity} components, got {value!r}"
    try:
        components = tuple(float(c) for c in value)
    except TypeError as e:
        raise ValueError(message) from e
    if len(components) != metric.arity:
        raise ValueError(message)
    return components  # type: ignore[return-value]
