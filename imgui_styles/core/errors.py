"""Exceptions raised while building or applying themes and fonts."""

from __future__ import annotations

from typing import Iterable


class ThemeError(Exception):
    """Base class for every error raised by imgui-styles."""


class ConfigMismatch(ThemeError):
    """The target style does not know a role or metric the theme defines.

    Only reachable when the theme tables and the target come from
    mismatched toolkit versions (e.g. docking colors on a non-docking build).
    """

    def __init__(self, theme_id: str, missing_roles: Iterable = (), missing_metrics: Iterable = ()):
        self.theme_id = theme_id
        self.missing_roles = tuple(missing_roles)
        self.missing_metrics = tuple(missing_metrics)
        parts = []
        if self.missing_roles:
            parts.append("colors " + ", ".join(r.name for r in self.missing_roles))
        if self.missing_metrics:
            parts.append("metrics " + ", ".join(m.field for m in self.missing_metrics))
        super().__init__(
            f"Theme '{theme_id}' does not match target style: unknown {'; '.join(parts)}"
        )


class MalformedFontData(ThemeError):
    """Font bytes could not be parsed as a TrueType/OpenType font."""


class DuplicateThemeKey(ThemeError):
    """A theme table assigns the same role or metric more than once."""

    def __init__(self, key):
        self.key = key
        label = getattr(key, "name", key)
        super().__init__(f"Duplicate theme table entry: {label}")
