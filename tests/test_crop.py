import pytest

from psf2gfx.font import PSFFont
from psf2gfx.glyph import CroppedGlyph, GlyphCropper, crop_glyph


def _font(make_psf2, glyph_bytes, rows_by_glyph, width=8, height=8):
    glyphs = {i: glyph_bytes(rows + ["."] * (height - len(rows)), width=width)
              for i, rows in enumerate(rows_by_glyph)}
    return PSFFont(make_psf2(width=width, height=height,
                             count=len(rows_by_glyph), glyphs=glyphs))


def _expand(glyph, width, height):
    grid = [[False] * width for _ in range(height)]
    for y in range(glyph.height):
        for x in range(glyph.width):
            grid[glyph.y_offset + y][glyph.x_offset + x] = glyph.pixel(x, y)
    return grid


def test_blank_glyph(make_psf2, glyph_bytes):
    font = _font(make_psf2, glyph_bytes, [[]])
    g = crop_glyph(font.glyph(0), bitmap_offset=7)
    assert g.fields() == (7, 0, 0, 8, 0, 0)
    assert g.bitmap == b""
    assert g.is_blank


def test_single_pixel(make_psf2, glyph_bytes):
    font = _font(make_psf2, glyph_bytes, [["X"]])
    g = crop_glyph(font.glyph(0))
    assert g.fields() == (0, 1, 1, 8, 0, 0)
    assert g.bitmap == b"\x80"


def test_offsets(make_psf2, glyph_bytes):
    rows = ["........", "........", "...X....", "....X...", "...XX..."]
    font = _font(make_psf2, glyph_bytes, [rows])
    g = crop_glyph(font.glyph(0))
    assert (g.width, g.height, g.x_offset, g.y_offset, g.x_advance) == (2, 3, 3, 2, 8)
    # X. .X XX -> 10 01 11 -> 1001 11|00
    assert g.bitmap == b"\x9c"


def test_partial_byte_is_left_aligned(make_psf2, glyph_bytes):
    rows = ["XXX", "X.X", "XXX"]
    font = _font(make_psf2, glyph_bytes, [rows])
    g = crop_glyph(font.glyph(0))
    # 111 101 111 -> 11110111 1.......
    assert g.bitmap == b"\xf7\x80"


def test_full_byte_boundary(make_psf2, glyph_bytes):
    rows = ["XXXXXXXX", "X......X"]
    font = _font(make_psf2, glyph_bytes, [rows])
    g = crop_glyph(font.glyph(0))
    assert (g.width, g.height) == (8, 2)
    assert g.bitmap == b"\xff\x81"


def test_wide_glyph_spanning_bytes(make_psf2, glyph_bytes):
    rows = ["......X.........X", ".........X......."]
    font = _font(make_psf2, glyph_bytes, [rows], width=17, height=4)
    g = crop_glyph(font.glyph(0))
    assert (g.width, g.height, g.x_offset, g.y_offset) == (11, 2, 6, 0)
    assert g.x_advance == 17
    assert len(g.bitmap) == (11 * 2 + 7) // 8


def test_padding_bits_not_counted(make_psf2):
    # width 6, padding bits set everywhere, one real pixel at column 5
    data = bytes([0x07, 0x03, 0x03, 0x03])
    font = PSFFont(make_psf2(width=6, height=4, count=1, glyphs={0: data}))
    g = crop_glyph(font.glyph(0))
    assert g.fields() == (0, 1, 1, 6, 5, 0)
    assert g.bitmap == b"\x80"


def test_padding_only_glyph_is_blank(make_psf2):
    font = PSFFont(make_psf2(width=6, height=2, count=1, glyphs={0: b"\x03\x01"}))
    assert crop_glyph(font.glyph(0)).is_blank


@pytest.mark.parametrize("rows", [
    ["X.......", "........", ".......X"],
    ["..XX....", ".X..X...", "X....X..", "XXXXXX..", "X....X.."],
    ["........", "...X....", "........", "...X...."],
    ["XXXXXXXX"] * 8,
])
def test_crop_reproduces_raster(make_psf2, glyph_bytes, rows):
    font = _font(make_psf2, glyph_bytes, [rows])
    view = font.glyph(0)
    g = crop_glyph(view)
    grid = _expand(g, 8, 8)
    for y in range(8):
        for x in range(8):
            inside = (g.x_offset <= x < g.x_offset + g.width
                      and g.y_offset <= y < g.y_offset + g.height)
            if inside:
                assert grid[y][x] == view.pixel(x, y)
            else:
                assert not view.pixel(x, y)
    assert len(g.bitmap) == (g.width * g.height + 7) // 8


def test_cropper_running_offset(make_psf2, glyph_bytes):
    font = _font(make_psf2, glyph_bytes, [["XXX", "X.X", "XXX"], [], ["X"], ["XX"]])
    cropper = GlyphCropper()
    glyphs = [cropper.crop(font.glyph(i)) for i in range(4)]
    assert [g.bitmap_offset for g in glyphs] == [0, 2, 2, 3]
    assert cropper.bitmap_offset == 4


def test_cropper_blank(make_psf2, glyph_bytes):
    font = _font(make_psf2, glyph_bytes, [["X"]])
    cropper = GlyphCropper()
    cropper.crop(font.glyph(0))
    assert cropper.blank(8).fields() == (1, 0, 0, 8, 0, 0)
    assert cropper.bitmap_offset == 1


def test_cropped_glyph_equality():
    a = CroppedGlyph(0, 1, 1, 8, 0, 0, b"\x80")
    assert a == CroppedGlyph(0, 1, 1, 8, 0, 0, b"\x80")
    assert a != CroppedGlyph(0, 1, 1, 8, 0, 1, b"\x80")
