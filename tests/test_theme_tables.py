"""Theme table construction and the built-in theme registry."""

import dataclasses

import pytest

from imgui_styles.core.errors import DuplicateThemeKey
from imgui_styles.core.roles import StyleMetric, StyleRole
from imgui_styles.theme import DEFAULT_THEME_ID, THEMES, get_theme
from imgui_styles.theme import dracula, embrace_the_darkness
from imgui_styles.theme.base import color_table, metric_table


class TestColorTable:
    def test_duplicate_role_rejected(self):
        with pytest.raises(DuplicateThemeKey) as excinfo:
            color_table([
                (StyleRole.TEXT, (1, 1, 1, 1)),
                (StyleRole.WINDOW_BG, (0, 0, 0, 1)),
                (StyleRole.TEXT, (0.5, 0.5, 0.5, 1)),
            ])
        assert excinfo.value.key is StyleRole.TEXT
        assert "TEXT" in str(excinfo.value)

    def test_wrong_channel_count_rejected(self):
        with pytest.raises(ValueError):
            color_table([(StyleRole.TEXT, (1.0, 1.0, 1.0))])

    def test_scalar_color_rejected(self):
        with pytest.raises(ValueError, match="exactly 4 channels"):
            color_table([(StyleRole.TEXT, 1.0)])

    def test_table_is_read_only(self):
        table = color_table([(StyleRole.TEXT, (1, 1, 1, 1))])
        with pytest.raises(TypeError):
            table[StyleRole.TEXT] = (0, 0, 0, 0)

    def test_values_stored_as_float_tuples(self):
        table = color_table([(StyleRole.TEXT, [1, 0, 0, 1])])
        assert table[StyleRole.TEXT] == (1.0, 0.0, 0.0, 1.0)
        assert all(isinstance(c, float) for c in table[StyleRole.TEXT])


class TestMetricTable:
    def test_duplicate_metric_rejected(self):
        """A table that sets frame_rounding twice is a build error."""
        with pytest.raises(DuplicateThemeKey):
            metric_table([
                (StyleMetric.FRAME_ROUNDING, 6.0),
                (StyleMetric.WINDOW_ROUNDING, 7.0),
                (StyleMetric.FRAME_ROUNDING, 3.0),
            ])

    def test_vector_metric_needs_two_components(self):
        with pytest.raises(ValueError, match="item_spacing needs 2 components"):
            metric_table([(StyleMetric.ITEM_SPACING, 6.0)])

    def test_scalar_metric_rejects_vector(self):
        with pytest.raises(ValueError):
            metric_table([(StyleMetric.WINDOW_ROUNDING, (7.0, 7.0))])


class TestBuiltinThemes:
    def test_registry_contents(self):
        assert set(THEMES) == {"embrace_the_darkness", "dracula"}
        assert DEFAULT_THEME_ID == "embrace_the_darkness"

    def test_get_theme(self):
        assert get_theme("dracula") is dracula.DRACULA_THEME

    def test_get_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown theme id"):
            get_theme("solarized")

    def test_dark_theme_covers_every_role(self):
        assert set(embrace_the_darkness.COLORS) == set(StyleRole)
        assert len(embrace_the_darkness.METRICS) == 21

    def test_dracula_is_partial(self):
        assert len(dracula.COLORS) == 38
        assert StyleRole.PLOT_LINES not in dracula.COLORS
        assert set(dracula.METRICS) == {
            StyleMetric.TAB_ROUNDING,
            StyleMetric.SCROLLBAR_ROUNDING,
            StyleMetric.WINDOW_ROUNDING,
            StyleMetric.GRAB_ROUNDING,
            StyleMetric.FRAME_ROUNDING,
            StyleMetric.POPUP_ROUNDING,
            StyleMetric.CHILD_ROUNDING,
        }

    def test_dark_frame_rounding_keeps_effective_value(self):
        assert embrace_the_darkness.METRICS[StyleMetric.FRAME_ROUNDING] == 3.0

    def test_dracula_accent(self):
        assert dracula.COLORS[StyleRole.CHECK_MARK] == (0.74, 0.58, 0.98, 1.0)
        assert dracula.COLORS[StyleRole.SEPARATOR_ACTIVE] == (0.84, 0.58, 1.0, 1.0)

    def test_module_level_helpers_bound_to_theme(self):
        assert dracula.new_style() == dracula.DRACULA_THEME.new_style()
        assert embrace_the_darkness.style_patch.__self__ is embrace_the_darkness.EMBRACE_THE_DARKNESS_THEME

    def test_themes_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            dracula.DRACULA_THEME.font_size = 20.0
