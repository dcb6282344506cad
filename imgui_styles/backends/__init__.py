"""Adapters that let themes patch objects owned by real toolkits."""

from .pyimgui import PyImGuiContext, PyImGuiFontAtlas, PyImGuiStyle

__all__ = ['PyImGuiContext', 'PyImGuiFontAtlas', 'PyImGuiStyle']
