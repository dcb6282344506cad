"""Dracula-inspired dark theme with a purple accent, published by Trippasch
in ocornut/imgui#707."""

from ..core.roles import StyleMetric, StyleRole
from .base import Theme, color_table, metric_table


COLORS = color_table([
    (StyleRole.WINDOW_BG, (0.1, 0.1, 0.13, 1.0)),
    (StyleRole.MENU_BAR_BG, (0.16, 0.16, 0.21, 1.0)),

    # Border
    (StyleRole.BORDER, (0.44, 0.37, 0.61, 0.29)),
    (StyleRole.BORDER_SHADOW, (0.0, 0.0, 0.0, 0.24)),

    # Text
    (StyleRole.TEXT, (1.0, 1.0, 1.0, 1.0)),
    (StyleRole.TEXT_DISABLED, (0.5, 0.5, 0.5, 1.0)),

    # Headers
    (StyleRole.HEADER, (0.13, 0.13, 0.17, 1.0)),
    (StyleRole.HEADER_HOVERED, (0.19, 0.2, 0.25, 1.0)),
    (StyleRole.HEADER_ACTIVE, (0.16, 0.16, 0.21, 1.0)),

    # Buttons
    (StyleRole.BUTTON, (0.13, 0.13, 0.17, 1.0)),
    (StyleRole.BUTTON_HOVERED, (0.19, 0.2, 0.25, 1.0)),
    (StyleRole.BUTTON_ACTIVE, (0.16, 0.16, 0.21, 1.0)),
    (StyleRole.CHECK_MARK, (0.74, 0.58, 0.98, 1.0)),

    # Popups
    (StyleRole.POPUP_BG, (0.1, 0.1, 0.13, 0.92)),

    # Slider
    (StyleRole.SLIDER_GRAB, (0.44, 0.37, 0.61, 0.54)),
    (StyleRole.SLIDER_GRAB_ACTIVE, (0.74, 0.58, 0.98, 0.54)),

    # Frame BG
    (StyleRole.FRAME_BG, (0.13, 0.13, 0.17, 1.0)),
    (StyleRole.FRAME_BG_HOVERED, (0.19, 0.2, 0.25, 1.0)),
    (StyleRole.FRAME_BG_ACTIVE, (0.16, 0.16, 0.21, 1.0)),

    # Tabs
    (StyleRole.TAB, (0.16, 0.16, 0.21, 1.0)),
    (StyleRole.TAB_HOVERED, (0.24, 0.24, 0.32, 1.0)),
    (StyleRole.TAB_ACTIVE, (0.2, 0.22, 0.27, 1.0)),
    (StyleRole.TAB_UNFOCUSED, (0.16, 0.16, 0.21, 1.0)),
    (StyleRole.TAB_UNFOCUSED_ACTIVE, (0.16, 0.16, 0.21, 1.0)),

    # Title
    (StyleRole.TITLE_BG, (0.16, 0.16, 0.21, 1.0)),
    (StyleRole.TITLE_BG_ACTIVE, (0.16, 0.16, 0.21, 1.0)),
    (StyleRole.TITLE_BG_COLLAPSED, (0.16, 0.16, 0.21, 1.0)),

    # Scrollbar
    (StyleRole.SCROLLBAR_BG, (0.1, 0.1, 0.13, 1.0)),
    (StyleRole.SCROLLBAR_GRAB, (0.16, 0.16, 0.21, 1.0)),
    (StyleRole.SCROLLBAR_GRAB_HOVERED, (0.19, 0.2, 0.25, 1.0)),
    (StyleRole.SCROLLBAR_GRAB_ACTIVE, (0.24, 0.24, 0.32, 1.0)),

    # Separator
    (StyleRole.SEPARATOR, (0.44, 0.37, 0.61, 1.0)),
    (StyleRole.SEPARATOR_HOVERED, (0.74, 0.58, 0.98, 1.0)),
    (StyleRole.SEPARATOR_ACTIVE, (0.84, 0.58, 1.0, 1.0)),

    # Resize Grip
    (StyleRole.RESIZE_GRIP, (0.44, 0.37, 0.61, 0.29)),
    (StyleRole.RESIZE_GRIP_HOVERED, (0.74, 0.58, 0.98, 0.29)),
    (StyleRole.RESIZE_GRIP_ACTIVE, (0.84, 0.58, 1.0, 0.29)),

    # Docking
    (StyleRole.DOCKING_PREVIEW, (0.44, 0.37, 0.61, 1.0)),
])

METRICS = metric_table([
    (StyleMetric.TAB_ROUNDING, 4.0),
    (StyleMetric.SCROLLBAR_ROUNDING, 9.0),
    (StyleMetric.WINDOW_ROUNDING, 7.0),
    (StyleMetric.GRAB_ROUNDING, 3.0),
    (StyleMetric.FRAME_ROUNDING, 3.0),
    (StyleMetric.POPUP_ROUNDING, 4.0),
    (StyleMetric.CHILD_ROUNDING, 4.0),
])

DRACULA_THEME = Theme(
    name='Dracula',
    id='dracula',
    colors=COLORS,
    metrics=METRICS,
    font_size=16.0,
    source='https://github.com/ocornut/imgui/issues/707',
)

new_style = DRACULA_THEME.new_style
style_patch = DRACULA_THEME.style_patch
context_patch = DRACULA_THEME.context_patch
