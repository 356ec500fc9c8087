"""
GlyphCropper - Bounding-Box Crop and Repack
===========================================
Reduces a fixed-size glyph raster to the smallest rectangle holding all
of its foreground pixels and repacks that rectangle as a tight bitstream.

Output bitstream:
    width × height bits, row-major over the cropped rectangle,
    MSB first, no row padding. The last byte is zero-filled.
    Blank glyphs produce no bytes at all.
"""

from .raster import GlyphRasterView


class CroppedGlyph:
    """
    Cropped glyph record, in Adafruit GFXglyph terms.

    Attributes:
        bitmap_offset: Offset of this glyph in the packed bitmap stream
        width: Cropped width in pixels (0 if blank)
        height: Cropped height in pixels (0 if blank)
        x_advance: Cursor advance, always the source glyph width
        x_offset: Left edge of the box in the source raster
        y_offset: Top edge of the box in the source raster
        bitmap: Packed bits, ceil(width * height / 8) bytes
    """

    def __init__(self, bitmap_offset: int, width: int, height: int,
                 x_advance: int, x_offset: int = 0, y_offset: int = 0,
                 bitmap: bytes = b""):
        self.bitmap_offset = bitmap_offset
        self.width = width
        self.height = height
        self.x_advance = x_advance
        self.x_offset = x_offset
        self.y_offset = y_offset
        self.bitmap = bitmap

    @property
    def is_blank(self) -> bool:
        return self.width == 0 or self.height == 0

    def pixel(self, x: int, y: int) -> bool:
        """Pixel at column x, row y of the cropped rectangle."""
        bit = y * self.width + x
        return bool(self.bitmap[bit >> 3] & (0x80 >> (bit & 7)))

    def fields(self) -> tuple:
        """(bitmapOffset, width, height, xAdvance, xOffset, yOffset)."""
        return (self.bitmap_offset, self.width, self.height,
                self.x_advance, self.x_offset, self.y_offset)

    def __eq__(self, other):
        if not isinstance(other, CroppedGlyph):
            return NotImplemented
        return self.fields() == other.fields() and self.bitmap == other.bitmap

    def __repr__(self):
        return ("CroppedGlyph(bitmap_offset={}, width={}, height={}, x_advance={}, "
                "x_offset={}, y_offset={}, bitmap={!r})").format(
                    *self.fields(), bytes(self.bitmap))


def _bounding_box(view: GlyphRasterView):
    """
    Find the foreground bounding box of a glyph.

    Returns:
        (start_col, start_row, end_col, end_row), inclusive, or None if blank
    """
    start_row = end_row = None
    col_mask = bytearray(view.bytes_per_row)

    for y, row in enumerate(view.rows()):
        if any(row):
            if start_row is None:
                start_row = y
            end_row = y
        for i, b in enumerate(row):
            col_mask[i] |= b

    if start_row is None:
        return None

    start_col = end_col = None
    for x in range(view.width):
        if col_mask[x >> 3] & (0x80 >> (x & 7)):
            if start_col is None:
                start_col = x
            end_col = x

    return start_col, start_row, end_col, end_row


def _pack(view: GlyphRasterView, x0: int, y0: int, x1: int, y1: int) -> bytes:
    """Repack the inclusive rectangle (x0, y0)-(x1, y1) MSB first."""
    out = bytearray()
    acc = 0
    nbits = 0

    for y in range(y0, y1 + 1):
        row = view.row(y)
        for x in range(x0, x1 + 1):
            acc <<= 1
            if row[x >> 3] & (0x80 >> (x & 7)):
                acc |= 1
            nbits += 1
            if nbits == 8:
                out.append(acc)
                acc = 0
                nbits = 0

    # Flush the final partial byte, left-aligned
    if nbits:
        out.append(acc << (8 - nbits))

    return bytes(out)


def crop_glyph(view: GlyphRasterView, bitmap_offset: int = 0) -> CroppedGlyph:
    """
    Crop one glyph to its bounding box.

    Args:
        view: Source glyph raster
        bitmap_offset: Offset to record for this glyph's bytes

    Returns:
        CroppedGlyph; blank glyphs get zero size and offsets
    """
    box = _bounding_box(view)
    if box is None:
        return CroppedGlyph(bitmap_offset, 0, 0, view.width)

    x0, y0, x1, y1 = box
    return CroppedGlyph(
        bitmap_offset,
        width=x1 - x0 + 1,
        height=y1 - y0 + 1,
        x_advance=view.width,
        x_offset=x0,
        y_offset=y0,
        bitmap=_pack(view, x0, y0, x1, y1),
    )


class GlyphCropper:
    """
    Crops glyphs in sequence, tracking the running bitmap offset.

    Each cropped glyph's bitmap_offset is the number of bytes emitted by
    all glyphs cropped before it.

    Attributes:
        bitmap_offset: Bytes emitted so far
    """

    def __init__(self, start_offset: int = 0):
        self.bitmap_offset = start_offset

    def crop(self, view: GlyphRasterView) -> CroppedGlyph:
        glyph = crop_glyph(view, self.bitmap_offset)
        self.bitmap_offset += len(glyph.bitmap)
        return glyph

    def blank(self, x_advance: int) -> CroppedGlyph:
        """Record an empty glyph (e.g. unmapped code point)."""
        return CroppedGlyph(self.bitmap_offset, 0, 0, x_advance)
