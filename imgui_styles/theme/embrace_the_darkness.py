"""Neutral dark theme published by janekb04 in ocornut/imgui#707."""

from ..core.roles import StyleMetric, StyleRole
from .base import Theme, color_table, metric_table


COLORS = color_table([
    (StyleRole.TEXT, (1.00, 1.00, 1.00, 1.00)),
    (StyleRole.TEXT_DISABLED, (0.50, 0.50, 0.50, 1.00)),
    (StyleRole.WINDOW_BG, (0.10, 0.10, 0.10, 1.00)),
    (StyleRole.CHILD_BG, (0.00, 0.00, 0.00, 0.00)),
    (StyleRole.POPUP_BG, (0.19, 0.19, 0.19, 0.92)),
    (StyleRole.BORDER, (0.19, 0.19, 0.19, 0.29)),
    (StyleRole.BORDER_SHADOW, (0.00, 0.00, 0.00, 0.24)),
    (StyleRole.FRAME_BG, (0.05, 0.05, 0.05, 0.54)),
    (StyleRole.FRAME_BG_HOVERED, (0.19, 0.19, 0.19, 0.54)),
    (StyleRole.FRAME_BG_ACTIVE, (0.20, 0.22, 0.23, 1.00)),
    (StyleRole.TITLE_BG, (0.00, 0.00, 0.00, 1.00)),
    (StyleRole.TITLE_BG_ACTIVE, (0.06, 0.06, 0.06, 1.00)),
    (StyleRole.TITLE_BG_COLLAPSED, (0.00, 0.00, 0.00, 1.00)),
    (StyleRole.MENU_BAR_BG, (0.14, 0.14, 0.14, 1.00)),
    (StyleRole.SCROLLBAR_BG, (0.05, 0.05, 0.05, 0.54)),
    (StyleRole.SCROLLBAR_GRAB, (0.34, 0.34, 0.34, 0.54)),
    (StyleRole.SCROLLBAR_GRAB_HOVERED, (0.40, 0.40, 0.40, 0.54)),
    (StyleRole.SCROLLBAR_GRAB_ACTIVE, (0.56, 0.56, 0.56, 0.54)),
    (StyleRole.CHECK_MARK, (0.33, 0.67, 0.86, 1.00)),
    (StyleRole.SLIDER_GRAB, (0.34, 0.34, 0.34, 0.54)),
    (StyleRole.SLIDER_GRAB_ACTIVE, (0.56, 0.56, 0.56, 0.54)),
    (StyleRole.BUTTON, (0.05, 0.05, 0.05, 0.54)),
    (StyleRole.BUTTON_HOVERED, (0.19, 0.19, 0.19, 0.54)),
    (StyleRole.BUTTON_ACTIVE, (0.20, 0.22, 0.23, 1.00)),
    (StyleRole.HEADER, (0.00, 0.00, 0.00, 0.52)),
    (StyleRole.HEADER_HOVERED, (0.00, 0.00, 0.00, 0.36)),
    (StyleRole.HEADER_ACTIVE, (0.20, 0.22, 0.23, 0.33)),
    (StyleRole.SEPARATOR, (0.28, 0.28, 0.28, 0.29)),
    (StyleRole.SEPARATOR_HOVERED, (0.44, 0.44, 0.44, 0.29)),
    (StyleRole.SEPARATOR_ACTIVE, (0.40, 0.44, 0.47, 1.00)),
    (StyleRole.RESIZE_GRIP, (0.28, 0.28, 0.28, 0.29)),
    (StyleRole.RESIZE_GRIP_HOVERED, (0.44, 0.44, 0.44, 0.29)),
    (StyleRole.RESIZE_GRIP_ACTIVE, (0.40, 0.44, 0.47, 1.00)),
    (StyleRole.TAB, (0.00, 0.00, 0.00, 0.52)),
    (StyleRole.TAB_HOVERED, (0.14, 0.14, 0.14, 1.00)),
    (StyleRole.TAB_ACTIVE, (0.20, 0.20, 0.20, 0.36)),
    (StyleRole.TAB_UNFOCUSED, (0.00, 0.00, 0.00, 0.52)),
    (StyleRole.TAB_UNFOCUSED_ACTIVE, (0.14, 0.14, 0.14, 1.00)),
    (StyleRole.DOCKING_PREVIEW, (0.33, 0.67, 0.86, 1.00)),
    (StyleRole.DOCKING_EMPTY_BG, (1.00, 0.00, 0.00, 1.00)),
    (StyleRole.PLOT_LINES, (1.00, 0.00, 0.00, 1.00)),
    (StyleRole.PLOT_LINES_HOVERED, (1.00, 0.00, 0.00, 1.00)),
    (StyleRole.PLOT_HISTOGRAM, (1.00, 0.00, 0.00, 1.00)),
    (StyleRole.PLOT_HISTOGRAM_HOVERED, (1.00, 0.00, 0.00, 1.00)),
    (StyleRole.TABLE_HEADER_BG, (0.00, 0.00, 0.00, 0.52)),
    (StyleRole.TABLE_BORDER_STRONG, (0.00, 0.00, 0.00, 0.52)),
    (StyleRole.TABLE_BORDER_LIGHT, (0.28, 0.28, 0.28, 0.29)),
    (StyleRole.TABLE_ROW_BG, (0.00, 0.00, 0.00, 0.00)),
    (StyleRole.TABLE_ROW_BG_ALT, (1.00, 1.00, 1.00, 0.06)),
    (StyleRole.TEXT_SELECTED_BG, (0.20, 0.22, 0.23, 1.00)),
    (StyleRole.DRAG_DROP_TARGET, (0.33, 0.67, 0.86, 1.00)),
    (StyleRole.NAV_HIGHLIGHT, (1.00, 0.00, 0.00, 1.00)),
    (StyleRole.NAV_WINDOWING_HIGHLIGHT, (1.00, 0.00, 0.00, 0.70)),
    (StyleRole.NAV_WINDOWING_DIM_BG, (1.00, 0.00, 0.00, 0.20)),
    (StyleRole.MODAL_WINDOW_DIM_BG, (1.00, 0.00, 0.00, 0.35)),
])

# frame_rounding was published as 6.0 and then overridden to 3.0
METRICS = metric_table([
    (StyleMetric.WINDOW_PADDING, (8.00, 8.00)),
    (StyleMetric.FRAME_PADDING, (5.00, 2.00)),
    (StyleMetric.ITEM_SPACING, (6.00, 6.00)),
    (StyleMetric.ITEM_INNER_SPACING, (6.00, 6.00)),
    (StyleMetric.TOUCH_EXTRA_PADDING, (0.00, 0.00)),
    (StyleMetric.INDENT_SPACING, 25.0),
    (StyleMetric.SCROLLBAR_SIZE, 15.0),
    (StyleMetric.GRAB_MIN_SIZE, 10.0),
    (StyleMetric.WINDOW_BORDER_SIZE, 1.0),
    (StyleMetric.CHILD_BORDER_SIZE, 1.0),
    (StyleMetric.POPUP_BORDER_SIZE, 1.0),
    (StyleMetric.FRAME_BORDER_SIZE, 1.0),
    (StyleMetric.TAB_BORDER_SIZE, 1.0),
    (StyleMetric.WINDOW_ROUNDING, 7.0),
    (StyleMetric.CHILD_ROUNDING, 4.0),
    (StyleMetric.FRAME_ROUNDING, 3.0),
    (StyleMetric.POPUP_ROUNDING, 4.0),
    (StyleMetric.SCROLLBAR_ROUNDING, 9.0),
    (StyleMetric.GRAB_ROUNDING, 3.0),
    (StyleMetric.LOG_SLIDER_DEADZONE, 4.0),
    (StyleMetric.TAB_ROUNDING, 4.0),
])

EMBRACE_THE_DARKNESS_THEME = Theme(
    name='Embrace The Darkness',
    id='embrace_the_darkness',
    colors=COLORS,
    metrics=METRICS,
    font_size=16.0,
    source='https://github.com/ocornut/imgui/issues/707',
)

new_style = EMBRACE_THE_DARKNESS_THEME.new_style
style_patch = EMBRACE_THE_DARKNESS_THEME.style_patch
context_patch = EMBRACE_THE_DARKNESS_THEME.context_patch
