"""Fonts bundled with imgui-styles."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class FontAsset:
    """Raw TrueType bytes plus the pixel size they are installed at by default."""

    name: str
    data: bytes = field(repr=False)
    default_size: float = 16.0

    @classmethod
    def from_file(cls, path, name: Optional[str] = None, default_size: float = 16.0) -> "FontAsset":
        path = Path(path)
        return cls(name=name or path.stem, data=path.read_bytes(), default_size=default_size)

    def install(self, registry, size_in_pixels: Optional[float] = None) -> None:
        """Make this font the only font of ``registry``. See ``install_font``."""
        # Import here to avoid circular imports
        from ..core.patch import install_font

        install_font(self, self.default_size if size_in_pixels is None else size_in_pixels, registry)


# The Lato Regular face (SIL Open Font License 1.1).
LATO_REGULAR = FontAsset.from_file(DATA_DIR / "Lato-Regular.ttf", name="Lato-Regular")

DEFAULT_FONT = LATO_REGULAR

__all__ = ["FontAsset", "LATO_REGULAR", "DEFAULT_FONT", "DATA_DIR"]
