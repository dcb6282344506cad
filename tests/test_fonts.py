"""Font asset, sfnt validation, font installation and the combined context patch."""

import struct

import numpy as np
import pytest

from imgui_styles.core.errors import ConfigMismatch, MalformedFontData
from imgui_styles.core.patch import apply_full, install_font
from imgui_styles.core.roles import StyleRole
from imgui_styles.core.style import Context, FontAtlas, FontSource, Style
from imgui_styles.fonts import DEFAULT_FONT, LATO_REGULAR, FontAsset
from imgui_styles.fonts.sfnt import REQUIRED_TABLES, read_table_directory, validate_font_data
from imgui_styles.theme.dracula import DRACULA_THEME
from imgui_styles.theme.embrace_the_darkness import EMBRACE_THE_DARKNESS_THEME


def _font(tables, version=0x00010000):
    """Build an sfnt blob from ``{tag: table bytes}``."""
    tags = sorted(tables)
    header = struct.pack(">IHHHH", version, len(tags), 0, 0, 0)
    offset = 12 + 16 * len(tags)
    records, body = b"", b""
    for tag in tags:
        blob = tables[tag]
        records += struct.pack(">4sIII", tag.encode("latin-1"), 0, offset + len(body), len(blob))
        body += blob
    return header + records + body


def _head(magic=0x5F0F3CF5, units_per_em=1000, loc_format=0):
    return struct.pack(
        ">HHIIIHHqqhhhhHHhhh",
        1, 0, 0x00010000, 0, magic, 0, units_per_em, 0, 0,
        0, 0, 1000, 1000, 0, 8, 2, loc_format, 0,
    )


def _tables(num_glyphs=1, num_hmetrics=1, **overrides):
    """Tables of a one-glyph TrueType font; ``None`` in ``overrides`` drops a table."""
    tables = {
        "cmap": struct.pack(">HHHHI", 0, 1, 3, 1, 12),
        "glyf": b"",
        "head": _head(),
        "hhea": struct.pack(">I10h4hhH", 0x00010000, *([0] * 14), 0, num_hmetrics),
        "hmtx": struct.pack(">Hh", 500, 0) * num_hmetrics,
        "loca": struct.pack(">H", 0) * (num_glyphs + 1),
        "maxp": struct.pack(">IH", 0x00005000, num_glyphs),
    }
    for tag, blob in overrides.items():
        if blob is None:
            tables.pop(tag)
        else:
            tables[tag] = blob
    return tables


class TestBundledFont:
    def test_default_font_is_lato(self):
        assert DEFAULT_FONT is LATO_REGULAR
        assert LATO_REGULAR.name == "Lato-Regular"
        assert LATO_REGULAR.default_size == 16.0

    def test_bundled_bytes_are_a_truetype_font(self):
        assert LATO_REGULAR.data[:4] == b"\x00\x01\x00\x00"
        tables = read_table_directory(LATO_REGULAR.data)
        for tag in REQUIRED_TABLES + ("glyf", "name"):
            assert tag in tables

    def test_from_file(self, tmp_path):
        path = tmp_path / "Custom.ttf"
        path.write_bytes(LATO_REGULAR.data)
        asset = FontAsset.from_file(path, default_size=18.0)
        assert asset.name == "Custom"
        assert asset.data == LATO_REGULAR.data
        assert asset.default_size == 18.0


class TestSfntValidation:
    def test_minimal_font_accepted(self):
        data = _font(_tables())
        tables = validate_font_data(data)
        assert set(tables) == set(REQUIRED_TABLES) | {"glyf", "loca"}
        assert read_table_directory(data) == tables

    def test_opentype_cff_accepted(self):
        tables = _tables(glyf=None, loca=None)
        tables["CFF "] = b"\x01\x00\x04\x02"
        validate_font_data(_font(tables, version=0x4F54544F))

    def test_cff_font_without_cff_table_rejected(self):
        with pytest.raises(MalformedFontData, match="CFF"):
            validate_font_data(_font(_tables(glyf=None, loca=None), version=0x4F54544F))

    @pytest.mark.parametrize("data, message", [
        (b"", "too short"),
        (b"\x00\x01\x00\x00\x00", "too short"),
        (b"PK\x03\x04" + b"\0" * 20, "Unknown sfnt version"),
        (b"ttcf" + b"\0" * 20, "collections"),
    ])
    def test_garbage_rejected(self, data, message):
        with pytest.raises(MalformedFontData, match=message):
            validate_font_data(data)

    def test_zero_tables_rejected(self):
        with pytest.raises(MalformedFontData, match="no tables"):
            validate_font_data(_font({}))

    def test_truncated_directory_rejected(self):
        data = _font(_tables())[:40]
        with pytest.raises(MalformedFontData, match="past end"):
            validate_font_data(data)

    def test_truncated_table_rejected(self):
        data = _font(_tables())[:-3]
        with pytest.raises(MalformedFontData, match="'maxp' extends past end"):
            validate_font_data(data)

    def test_missing_required_table_rejected(self):
        with pytest.raises(MalformedFontData, match="hmtx"):
            validate_font_data(_font(_tables(hmtx=None)))

    def test_placeholder_tables_rejected(self):
        """A directory naming every required table over 4-byte dummies is not a font."""
        tables = {tag: b"\0" * 4 for tag in REQUIRED_TABLES}
        with pytest.raises(MalformedFontData, match="'head' table too short"):
            validate_font_data(_font(tables))

    @pytest.mark.parametrize("overrides, message", [
        ({"head": _head(magic=0)}, "magic"),
        ({"head": _head(units_per_em=0)}, "unitsPerEm"),
        ({"head": _head(loc_format=3)}, "indexToLocFormat"),
        ({"maxp": struct.pack(">IH", 0x00005000, 0)}, "no glyphs"),
        ({"cmap": struct.pack(">HH", 0, 0)}, "no encoding records"),
        ({"cmap": struct.pack(">HH", 0, 2)}, "run past"),
        ({"glyf": None}, "glyf"),
        ({"loca": b"\0\0"}, "'loca' table too short"),
    ])
    def test_bad_table_headers_rejected(self, overrides, message):
        with pytest.raises(MalformedFontData, match=message):
            validate_font_data(_font(_tables(**overrides)))

    def test_hmtx_must_cover_every_glyph(self):
        tables = _tables(num_glyphs=3, num_hmetrics=1)
        with pytest.raises(MalformedFontData, match="'hmtx' table too short"):
            validate_font_data(_font(tables))
        tables["hmtx"] += b"\0" * 4
        validate_font_data(_font(tables))

    def test_hhea_metric_count_bounded_by_glyphs(self):
        with pytest.raises(MalformedFontData, match="metrics for 1 glyphs"):
            validate_font_data(_font(_tables(num_glyphs=1, num_hmetrics=2)))

    def test_non_bytes_rejected(self):
        with pytest.raises(MalformedFontData):
            validate_font_data("not bytes")

    def test_truncated_bundled_font_rejected(self):
        with pytest.raises(MalformedFontData):
            validate_font_data(LATO_REGULAR.data[: len(LATO_REGULAR.data) // 2])

    def test_bundled_font_passes_table_checks(self):
        tables = validate_font_data(LATO_REGULAR.data)
        assert "loca" in tables

    def test_structurally_broken_font_keeps_atlas(self, crowded_atlas):
        with pytest.raises(MalformedFontData):
            crowded_atlas.replace_fonts(_font(_tables(head=_head(magic=0))), 16.0)
        assert len(crowded_atlas) == 2

class TestInstallFont:
    def test_replaces_every_existing_font(self, crowded_atlas):
        assert len(crowded_atlas) == 2
        install_font(LATO_REGULAR, 16.0, crowded_atlas)
        assert crowded_atlas.fonts == [FontSource(LATO_REGULAR.data, 16.0)]
        assert crowded_atlas.default_font.size_pixels == 16.0

    def test_empty_atlas(self):
        atlas = FontAtlas()
        install_font(LATO_REGULAR, 21.5, atlas)
        assert len(atlas) == 1
        assert atlas.default_font.size_pixels == 21.5

    @pytest.mark.parametrize("size", [0, -4.0, float("nan"), float("inf")])
    def test_invalid_size_rejected(self, crowded_atlas, size):
        with pytest.raises(ValueError):
            install_font(LATO_REGULAR, size, crowded_atlas)
        assert len(crowded_atlas) == 2

    def test_malformed_font_keeps_previous_fonts(self, crowded_atlas):
        broken = FontAsset(name="broken", data=b"definitely not a font")
        with pytest.raises(MalformedFontData):
            install_font(broken, 16.0, crowded_atlas)
        assert len(crowded_atlas) == 2

    def test_asset_install_uses_default_size(self, crowded_atlas):
        LATO_REGULAR.install(crowded_atlas)
        assert crowded_atlas.fonts == [FontSource(LATO_REGULAR.data, 16.0)]

    def test_registry_protocol_is_duck_typed(self):
        class Recorder:
            def __init__(self):
                self.calls = []

            def replace_fonts(self, data, size_pixels):
                self.calls.append((len(data), size_pixels))

        recorder = Recorder()
        install_font(LATO_REGULAR, 14, recorder)
        assert recorder.calls == [(len(LATO_REGULAR.data), 14.0)]


class TestApplyFull:
    def test_end_to_end_from_zeroed_style(self, crowded_atlas):
        """Zeroed style + two fonts -> dark theme colors, rounding and one 16px font."""
        context = Context(style=Style.zeroed(), fonts=crowded_atlas)
        apply_full(EMBRACE_THE_DARKNESS_THEME, DEFAULT_FONT, context)

        style = context.style
        np.testing.assert_array_equal(style.colors[StyleRole.TEXT], np.float32([1, 1, 1, 1]))
        np.testing.assert_array_equal(
            style.colors[StyleRole.WINDOW_BG], np.float32([0.10, 0.10, 0.10, 1.00])
        )
        assert style.window_rounding == 7.0
        assert len(context.fonts) == 1
        assert context.fonts.default_font.size_pixels == 16.0
        assert context.fonts.default_font.data == DEFAULT_FONT.data

    def test_context_patch_uses_bundled_font(self):
        context = Context()
        DRACULA_THEME.context_patch(context)
        assert context.style.color(StyleRole.TEXT) == (1.0, 1.0, 1.0, 1.0)
        assert context.fonts.fonts == [FontSource(DEFAULT_FONT.data, 16.0)]

    def test_explicit_size_overrides_theme_size(self):
        context = Context()
        apply_full(DRACULA_THEME, DEFAULT_FONT, context, size_in_pixels=20.0)
        assert context.fonts.default_font.size_pixels == 20.0

    def test_style_mismatch_leaves_fonts_alone(self, crowded_atlas):
        class NoDocking(Style):
            def has_color(self, role):
                return role is not StyleRole.DOCKING_PREVIEW

        context = Context(style=NoDocking.default(), fonts=crowded_atlas)
        with pytest.raises(ConfigMismatch):
            apply_full(DRACULA_THEME, DEFAULT_FONT, context)
        assert len(context.fonts) == 2
