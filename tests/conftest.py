"""Shared test fixtures for the imgui-styles test suite.

Provides the session QApplication, sentinel-filled styles and
pre-populated font atlases.
"""

import os
import sys

import numpy as np
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from imgui_styles.core.roles import StyleMetric, StyleRole
from imgui_styles.core.style import FontAtlas, Style
from imgui_styles.fonts import LATO_REGULAR

SENTINEL = 0.123


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication, shared by all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture
def sentinel_style():
    """A style whose every color channel and metric component is SENTINEL."""
    colors = np.full((len(StyleRole), 4), SENTINEL, dtype=np.float32)
    metrics = {
        metric.field: SENTINEL if metric.arity == 1 else (SENTINEL, SENTINEL)
        for metric in StyleMetric
    }
    return Style(colors, **metrics)


@pytest.fixture
def crowded_atlas():
    """A font atlas that already holds two fonts."""
    atlas = FontAtlas()
    atlas.add_font(LATO_REGULAR.data, 13.0)
    atlas.add_font(LATO_REGULAR.data, 24.0)
    return atlas

