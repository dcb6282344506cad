"""Apply themes and fonts to toolkit-owned style, font and context objects.

Every operation here mutates the caller's object in place and returns
nothing. Access must be serialized by the caller; nothing here locks.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Optional, Protocol

from ..logging import get_logger
from .errors import ConfigMismatch
from .roles import Color, MetricValue, StyleMetric, StyleRole
from .style import Style

if TYPE_CHECKING:
    from ..fonts import FontAsset
    from ..theme.base import Theme

logger = get_logger(__name__)


class StyleTarget(Protocol):
    """Anything whose colors and metrics a theme can overwrite."""

    def has_color(self, role: StyleRole) -> bool: ...

    def set_color(self, role: StyleRole, rgba: Color) -> None: ...

    def has_metric(self, metric: StyleMetric) -> bool: ...

    def set_metric(self, metric: StyleMetric, value: MetricValue) -> None: ...


class FontRegistryTarget(Protocol):
    """Anything that can drop its fonts and take a single new default font."""

    def replace_fonts(self, data: bytes, size_pixels: float) -> None: ...


class RenderContext(Protocol):
    style: StyleTarget
    fonts: FontRegistryTarget


def apply_theme(theme: "Theme", target: StyleTarget) -> None:
    """Overwrite every color and metric ``theme`` defines on ``target``.

    Roles and metrics the theme does not mention keep their current value.
    The target is probed for every key first; if any is unknown,
    ConfigMismatch is raised and nothing is written.
    """
    missing_roles = [role for role in theme.colors if not target.has_color(role)]
    missing_metrics = [metric for metric in theme.metrics if not target.has_metric(metric)]
    if missing_roles or missing_metrics:
        raise ConfigMismatch(theme.id, missing_roles, missing_metrics)

    for role, rgba in theme.colors.items():
        target.set_color(role, rgba)
    for metric, value in theme.metrics.items():
        target.set_metric(metric, value)

    logger.debug(
        f"Applied theme '{theme.id}': {len(theme.colors)} colors, {len(theme.metrics)} metrics"
    )


def build_default_styled(
    theme: "Theme",
    default_factory: Callable[[], StyleTarget] = Style.default,
) -> StyleTarget:
    """Build a fresh style from the toolkit's default constructor, then theme it."""
    style = default_factory()
    apply_theme(theme, style)
    return style


def install_font(asset: "FontAsset", size_in_pixels: float, registry: FontRegistryTarget) -> None:
    """Make ``asset`` the sole font of ``registry`` at ``size_in_pixels``.

    Destructive by policy: every font registered before the call is
    discarded, not merged. Callers that pre-register their own fonts must
    re-add them afterwards.

    Raises:
        ValueError: if ``size_in_pixels`` is not a finite positive number.
        MalformedFontData: if the registry cannot parse the font bytes.
    """
    size = float(size_in_pixels)
    if not math.isfinite(size) or size <= 0:
        raise ValueError(f"Font size must be a positive number of pixels, got {size_in_pixels!r}")

    registry.replace_fonts(asset.data, size)
    logger.debug(f"Installed font '{asset.name}' at {size}px")


def apply_full(
    theme: "Theme",
    font: "FontAsset",
    context: RenderContext,
    size_in_pixels: Optional[float] = None,
) -> None:
    """Patch the style and the font registry owned by ``context``.

    The font size defaults to the theme's ``font_size``. The style is
    patched first; a font failure propagates after the style was written.
    """
    apply_theme(theme, context.style)
    install_font(font, theme.font_size if size_in_pixels is None else size_in_pixels, context.fonts)
