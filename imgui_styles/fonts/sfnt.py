"""Minimal sfnt (TrueType/OpenType) table directory reader.

Checks what a rasterizer reads before it can open a face: the offset
table, the table directory, the tables every outline font must carry and
the headers of ``head``, ``hhea``, ``hmtx``, ``maxp``, ``cmap`` and the
outline tables.
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np

from ..core.errors import MalformedFontData

OFFSET_TABLE = np.dtype([
    ('version', '>u4'),
    ('num_tables', '>u2'),
    ('search_range', '>u2'),
    ('entry_selector', '>u2'),
    ('range_shift', '>u2'),
])

TABLE_RECORD = np.dtype([
    ('tag', 'S4'),
    ('checksum', '>u4'),
    ('offset', '>u4'),
    ('length', '>u4'),
])

SFNT_VERSIONS = {
    0x00010000: 'TrueType',
    0x4F54544F: 'OpenType/CFF',  # 'OTTO'
    0x74727565: 'TrueType (Apple)',  # 'true'
}

REQUIRED_TABLES = ('cmap', 'head', 'hhea', 'hmtx', 'maxp')

HEAD_MAGIC = 0x5F0F3CF5

HEAD_TABLE = np.dtype([
    ('major_version', '>u2'),
    ('minor_version', '>u2'),
    ('font_revision', '>u4'),
    ('checksum_adjustment', '>u4'),
    ('magic_number', '>u4'),
    ('flags', '>u2'),
    ('units_per_em', '>u2'),
    ('created', '>i8'),
    ('modified', '>i8'),
    ('bbox', '>i2', (4,)),
    ('mac_style', '>u2'),
    ('lowest_rec_ppem', '>u2'),
    ('font_direction_hint', '>i2'),
    ('index_to_loc_format', '>i2'),
    ('glyph_data_format', '>i2'),
])

HHEA_TABLE = np.dtype([
    ('version', '>u4'),
    ('metrics', '>i2', (10,)),
    ('reserved', '>i2', (4,)),
    ('metric_data_format', '>i2'),
    ('number_of_hmetrics', '>u2'),
])

MAXP_TABLE = np.dtype([
    ('version', '>u4'),
    ('num_glyphs', '>u2'),
])

CMAP_HEADER = np.dtype([
    ('version', '>u2'),
    ('num_tables', '>u2'),
])

CMAP_RECORD_SIZE = 8


def read_table_directory(data: bytes) -> Dict[str, Tuple[int, int]]:
    """Parse the table directory of ``data``.

    Returns:
        Mapping of table tag to ``(offset, length)``.

    Raises:
        MalformedFontData: if the bytes are not a single well-formed sfnt font.
    """
    size = len(data)
    if size < OFFSET_TABLE.itemsize:
        raise MalformedFontData(f"Font data too short ({size} bytes)")

    header = np.frombuffer(data, dtype=OFFSET_TABLE, count=1)[0]
    version = int(header['version'])
    if version not in SFNT_VERSIONS:
        if data[:4] == b'ttcf':
            raise MalformedFontData("Font collections (.ttc) are not supported, pass a single face")
        raise MalformedFontData(f"Unknown sfnt version 0x{version:08x}")

    num_tables = int(header['num_tables'])
    if num_tables == 0:
        raise MalformedFontData("Font declares no tables")

    directory_end = OFFSET_TABLE.itemsize + num_tables * TABLE_RECORD.itemsize
    if directory_end > size:
        raise MalformedFontData(
            f"Table directory ({num_tables} entries) runs past end of data"
        )

    records = np.frombuffer(
        data, dtype=TABLE_RECORD, count=num_tables, offset=OFFSET_TABLE.itemsize
    )
    tables: Dict[str, Tuple[int, int]] = {}
    for record in records:
        tag = bytes(record['tag']).decode('latin-1').ljust(4)
        offset = int(record['offset'])
        length = int(record['length'])
        if offset + length > size:
            raise MalformedFontData(f"Table '{tag}' extends past end of data")
        tables[tag] = (offset, length)

    missing = [tag for tag in REQUIRED_TABLES if tag not in tables]
    if missing:
        raise MalformedFontData(f"Font is missing required tables: {', '.join(missing)}")
    return tables


def _table(data: bytes, tables: Dict[str, Tuple[int, int]], tag: str, dtype: np.dtype):
    offset, length = tables[tag]
    if length < dtype.itemsize:
        raise MalformedFontData(
            f"'{tag}' table too short ({length} bytes, need {dtype.itemsize})"
        )
    return np.frombuffer(data, dtype=dtype, count=1, offset=offset)[0]


def check_tables(data: bytes, tables: Dict[str, Tuple[int, int]]) -> None:
    """Check the headers of the tables a rasterizer reads to open a face.

    Raises:
        MalformedFontData: on a bad ``head`` magic, empty glyph set,
            inconsistent horizontal metrics, an empty ``cmap`` or missing
            outline tables.
    """
    head = _table(data, tables, 'head', HEAD_TABLE)
    if int(head['magic_number']) != HEAD_MAGIC:
        raise MalformedFontData(f"Bad 'head' magic number 0x{int(head['magic_number']):08x}")
    units_per_em = int(head['units_per_em'])
    if not 16 <= units_per_em <= 16384:
        raise MalformedFontData(f"'head' unitsPerEm out of range: {units_per_em}")

    num_glyphs = int(_table(data, tables, 'maxp', MAXP_TABLE)['num_glyphs'])
    if num_glyphs == 0:
        raise MalformedFontData("Font has no glyphs")

    num_hmetrics = int(_table(data, tables, 'hhea', HHEA_TABLE)['number_of_hmetrics'])
    if not 1 <= num_hmetrics <= num_glyphs:
        raise MalformedFontData(
            f"'hhea' declares {num_hmetrics} metrics for {num_glyphs} glyphs"
        )
    hmtx_needed = 4 * num_hmetrics + 2 * (num_glyphs - num_hmetrics)
    if tables['hmtx'][1] < hmtx_needed:
        raise MalformedFontData(f"'hmtx' table too short (need {hmtx_needed} bytes)")

    cmap_length = tables['cmap'][1]
    cmap = _table(data, tables, 'cmap', CMAP_HEADER)
    num_encodings = int(cmap['num_tables'])
    if num_encodings == 0:
        raise MalformedFontData("'cmap' has no encoding records")
    if cmap_length < CMAP_HEADER.itemsize + num_encodings * CMAP_RECORD_SIZE:
        raise MalformedFontData("'cmap' encoding records run past the table")

    if data[:4] == b'OTTO':
        if 'CFF ' not in tables and 'CFF2' not in tables:
            raise MalformedFontData("OpenType/CFF font has no 'CFF ' or 'CFF2' table")
        return

    missing = [tag for tag in ('glyf', 'loca') if tag not in tables]
    if missing:
        raise MalformedFontData(f"TrueType font is missing outline tables: {', '.join(missing)}")
    loc_format = int(head['index_to_loc_format'])
    if loc_format not in (0, 1):
        raise MalformedFontData(f"'head' indexToLocFormat must be 0 or 1, got {loc_format}")
    loca_needed = (num_glyphs + 1) * (2 if loc_format == 0 else 4)
    if tables['loca'][1] < loca_needed:
        raise MalformedFontData(f"'loca' table too short (need {loca_needed} bytes)")


def validate_font_data(data: bytes) -> Dict[str, Tuple[int, int]]:
    """Raise MalformedFontData unless ``data`` is a loadable single-face font.

    Returns the table directory on success.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise MalformedFontData(f"Font data must be bytes, got {type(data).__name__}")
    data = bytes(data)
    tables = read_table_directory(data)
    check_tables(data, tables)
    return tables
