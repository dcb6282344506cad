"""Base theme types."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Tuple

from ..core.errors import DuplicateThemeKey
from ..core.patch import RenderContext, StyleTarget, apply_full, apply_theme, build_default_styled
from ..core.roles import Color, MetricValue, StyleMetric, StyleRole, coerce_color, coerce_metric
from ..core.style import Style
from ..fonts import DEFAULT_FONT, FontAsset


def color_table(entries: Iterable[Tuple[StyleRole, Color]]) -> Mapping[StyleRole, Color]:
    """Build a read-only color table. A repeated role raises DuplicateThemeKey."""
    table = {}
    for role, rgba in entries:
        role = StyleRole(role)
        if role in table:
            raise DuplicateThemeKey(role)
        table[role] = coerce_color(rgba)
    return MappingProxyType(table)


def metric_table(entries: Iterable[Tuple[StyleMetric, MetricValue]]) -> Mapping[StyleMetric, MetricValue]:
    """Build a read-only metric table. A repeated metric raises DuplicateThemeKey."""
    table = {}
    for metric, value in entries:
        if metric in table:
            raise DuplicateThemeKey(metric)
        table[metric] = coerce_metric(metric, value)
    return MappingProxyType(table)


@dataclass(frozen=True)
class Theme:
    """Named, partial set of color and metric overrides for a style."""

    name: str
    id: str
    colors: Mapping[StyleRole, Color]
    metrics: Mapping[StyleMetric, MetricValue]
    font_size: float = 16.0
    source: str = ""

    def new_style(self, default_factory: Callable[[], StyleTarget] = Style.default) -> StyleTarget:
        """Fresh default style with this theme applied."""
        return build_default_styled(self, default_factory)

    def style_patch(self, style: StyleTarget) -> None:
        """Patch an existing style in place."""
        apply_theme(self, style)

    def context_patch(
        self,
        context: RenderContext,
        font: FontAsset = DEFAULT_FONT,
        size_in_pixels: Optional[float] = None,
    ) -> None:
        """Patch the context's style and replace its fonts with ``font``."""
        apply_full(self, font, context, size_in_pixels)
