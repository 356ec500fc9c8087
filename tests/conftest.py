"""Synthetic PSF1/PSF2 font images for the test suite."""

import struct

import pytest

PSF1_MAGIC = b"\x36\x04"
PSF2_MAGIC = b"\x72\xb5\x4a\x86"


def build_psf1(height=8, glyphs=None, mode=0, table=None, count=None):
    """
    Build a PSF1 image.

    glyphs: {index: bytes of length height}
    table: list (one per glyph) of lists of 16-bit units, without separators
    count: glyphs actually written (defaults to what mode declares)
    """
    if table is not None:
        mode |= 0x02
    declared = 512 if mode & 0x01 else 256
    count = declared if count is None else count

    data = bytearray(PSF1_MAGIC + bytes((mode, height)))
    glyphs = glyphs or {}
    for i in range(count):
        data += glyphs.get(i, bytes(height))

    if table is not None:
        for units in table:
            for u in units:
                data += struct.pack("<H", u)
            data += struct.pack("<H", 0xFFFF)
    return bytes(data)


def build_psf2(width=8, height=16, count=256, glyphs=None, table=None,
               header_size=32, version=0, charsize=None, declared_count=None):
    """
    Build a PSF2 image.

    glyphs: {index: bytes of length height * ceil(width / 8)}
    table: list (one per glyph) of bytes, without the 0xFF separator
    """
    bpr = (width + 7) // 8
    size = height * bpr
    flags = 0x01 if table is not None else 0
    header = PSF2_MAGIC + struct.pack(
        "<7I", version, header_size, flags,
        count if declared_count is None else declared_count,
        size if charsize is None else charsize, height, width)
    data = bytearray(header)
    data += bytes(header_size - len(header))

    glyphs = glyphs or {}
    for i in range(count):
        data += glyphs.get(i, bytes(size))

    if table is not None:
        for entry in table:
            data += entry + b"\xff"
    return bytes(data)


def rows_to_bytes(rows, width=8):
    """Turn ['X..', '.X.'] style rows into packed MSB-first glyph bytes."""
    bpr = (width + 7) // 8
    out = bytearray()
    for row in rows:
        value = 0
        for x, ch in enumerate(row.ljust(bpr * 8, ".")):
            if ch == "X":
                value |= 1 << (bpr * 8 - 1 - x)
        out += value.to_bytes(bpr, "big")
    return bytes(out)


@pytest.fixture
def make_psf1():
    return build_psf1


@pytest.fixture
def make_psf2():
    return build_psf2


@pytest.fixture
def glyph_bytes():
    return rows_to_bytes


@pytest.fixture
def psf1_font_a():
    """256 glyphs, 8x8, 'A' has a single pixel at row 0, col 0."""
    return build_psf1(height=8, glyphs={0x41: b"\x80" + bytes(7)})
