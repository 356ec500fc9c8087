"""
GlyphRasterView - Read-Only Glyph Bitmap Accessor
=================================================
Window onto one glyph's fixed-size bitmap inside the font image.

Layout:
    height rows × bytes_per_row bytes, row-major.
    Each byte is MSB first: bit 7 is the leftmost pixel, 1 = foreground.
    Padding bits past the glyph width are ignored.
"""

from ..errors import GlyphIndexOutOfRange

# =============================================================================
# Bit Lookup
# =============================================================================

_BIT_MASKS = tuple(1 << (7 - i) for i in range(8))


class GlyphRasterView:
    """
    Read-only view of glyph `index` within a font image.

    Args:
        data: Whole font image
        metadata: FontMetadata describing the image
        index: Glyph index, must be below metadata.glyph_count

    Raises:
        GlyphIndexOutOfRange: If index is outside [0, glyph_count)
    """

    def __init__(self, data: bytes, metadata, index: int):
        if not 0 <= index < metadata.glyph_count:
            raise GlyphIndexOutOfRange(
                f"Glyph index {index} out of range (font has {metadata.glyph_count})")

        self.index = index
        self.width = metadata.width
        self.height = metadata.height
        self.bytes_per_row = metadata.bytes_per_row
        self.offset = metadata.glyph_data_offset + index * metadata.char_size
        self._data = data
        self._size = metadata.char_size
        # Keeps only the real pixels of the last byte in each row
        pad = self.bytes_per_row * 8 - self.width
        self._pad_mask = (0xFF << pad) & 0xFF

    @property
    def data(self) -> bytes:
        """Raw bitmap bytes (char_size bytes)."""
        return self._data[self.offset:self.offset + self._size]

    def row(self, y: int) -> bytes:
        """Bytes of row y, padding bits past the glyph width cleared."""
        start = self.offset + y * self.bytes_per_row
        row = self._data[start:start + self.bytes_per_row]
        if self._pad_mask != 0xFF and row:
            row = row[:-1] + bytes((row[-1] & self._pad_mask,))
        return row

    def rows(self):
        """Iterate over all rows, top to bottom."""
        for y in range(self.height):
            yield self.row(y)

    def pixel(self, x: int, y: int) -> bool:
        """True if the pixel at column x, row y is foreground."""
        idx = self.offset + y * self.bytes_per_row + (x >> 3)
        return bool(self._data[idx] & _BIT_MASKS[x & 7])

    def is_blank(self) -> bool:
        return not any(any(r) for r in self.rows())

    def __repr__(self):
        return f"GlyphRasterView(index={self.index}, {self.width}x{self.height})"
