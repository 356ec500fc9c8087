"""
PSF to GFX Conversion
=====================
Crops every glyph of a code point range and collects the results into a
GFXFont, ready to be rendered by the emitter or the previewer.

Glyph lookup:
    By default the code point is used directly as the glyph index (the
    usual layout of console fonts). With use_unicode=True the font's
    Unicode table is consulted first; code points without a mapping fall
    back to the direct index, or to an empty glyph if that is out of range.
"""

from typing import Iterator, List, Optional, Tuple

from .errors import GFXRangeError, GlyphIndexOutOfRange, GlyphTooWide
from .font.psf import PSFFont
from .font.unicode import GLYPH_NOT_FOUND
from .glyph.crop import CroppedGlyph, GlyphCropper

# =============================================================================
# Defaults
# =============================================================================

FIRST_CHAR = 0x20              # Space
LAST_CHAR = 0x7E               # Tilde
DEFAULT_MAX_WIDTH_BYTES = 4    # Glyphs up to 32 pixels wide

# GFXglyph / GFXfont field limits
MAX_BITMAP_OFFSET = 0xFFFF    # uint16_t bitmapOffset
MAX_UINT8 = 0xFF              # width, height, xAdvance, yAdvance
INT8_RANGE = (-128, 127)      # xOffset, yOffset


class GFXFont:
    """
    Converted font, in Adafruit GFXfont terms.

    Attributes:
        bitmaps: Concatenated packed glyph bitmaps
        glyphs: CroppedGlyph per code point, first..last
        first: First code point
        last: Last code point
        y_advance: Line height (source glyph height)
    """

    def __init__(self, first: int, last: int, y_advance: int):
        self.bitmaps = bytearray()
        self.glyphs: List[CroppedGlyph] = []
        self.first = first
        self.last = last
        self.y_advance = y_advance

    def add(self, glyph: CroppedGlyph):
        self.glyphs.append(glyph)
        self.bitmaps.extend(glyph.bitmap)

    def items(self) -> Iterator[Tuple[int, CroppedGlyph]]:
        """Iterate (code_point, glyph) pairs."""
        return zip(range(self.first, self.last + 1), self.glyphs)

    def glyph(self, code_point: int) -> CroppedGlyph:
        return self.glyphs[code_point - self.first]

    def __len__(self) -> int:
        return len(self.glyphs)


def resolve_glyph_index(font: PSFFont, code_point: int, use_unicode: bool = False) -> Optional[int]:
    """
    Map a code point to a glyph index.

    Returns:
        Glyph index, or None when use_unicode is set and neither the
        table nor the direct index yields a glyph
    """
    if use_unicode and font.unicode.present:
        index = font.glyph_index(chr(code_point))
        if index != GLYPH_NOT_FOUND and index < font.glyph_count:
            return index
        if code_point < font.glyph_count:
            return code_point
        return None
    return code_point


def convert_font(font: PSFFont, first: int = FIRST_CHAR, last: int = LAST_CHAR,
                 use_unicode: bool = False,
                 max_width_bytes: int = DEFAULT_MAX_WIDTH_BYTES) -> GFXFont:
    """
    Crop the glyphs for code points first..last.

    All validation happens before the first glyph is cropped.

    Args:
        font: Parsed PSF font
        first: First code point (inclusive)
        last: Last code point (inclusive)
        use_unicode: Resolve code points through the Unicode table
        max_width_bytes: Widest accepted glyph row, in bytes

    Returns:
        GFXFont with one CroppedGlyph per code point

    Raises:
        GlyphTooWide: Glyph rows wider than max_width_bytes
        GlyphIndexOutOfRange: Range is empty/negative or needs a glyph
            past the end of the font
        GFXRangeError: A converted value does not fit its GFX field
    """
    meta = font.metadata
    if meta.bytes_per_row > max_width_bytes:
        raise GlyphTooWide(
            f"PSF width is too large ({meta.width} px, max {max_width_bytes * 8})")

    if first < 0 or last < first or last > 0x10FFFF:
        raise GlyphIndexOutOfRange(f"Invalid character range {first}..{last}")

    indices = [resolve_glyph_index(font, cp, use_unicode)
               for cp in range(first, last + 1)]
    for cp, index in zip(range(first, last + 1), indices):
        if index is not None and index >= meta.glyph_count:
            raise GlyphIndexOutOfRange(
                f"Character {cp} needs glyph {index}, font has {meta.glyph_count}")

    result = GFXFont(first, last, meta.height)
    cropper = GlyphCropper()
    for index in indices:
        if index is None:
            result.add(cropper.blank(meta.width))
        else:
            result.add(cropper.crop(font.glyph(index)))

    check_gfx_limits(result)
    return result


def check_gfx_limits(font: GFXFont):
    """
    Verify that every value fits the C field it is emitted into.

    Raises:
        GFXRangeError: First offending value, with its code point
    """
    if font.y_advance > MAX_UINT8:
        raise GFXRangeError(f"Line height {font.y_advance} exceeds yAdvance limit {MAX_UINT8}")

    lo, hi = INT8_RANGE
    for cp, g in font.items():
        if g.bitmap_offset > MAX_BITMAP_OFFSET:
            raise GFXRangeError(
                f"Character {cp}: bitmap offset {g.bitmap_offset} exceeds {MAX_BITMAP_OFFSET}")
        for field, value in (("width", g.width), ("height", g.height),
                             ("xAdvance", g.x_advance)):
            if value > MAX_UINT8:
                raise GFXRangeError(f"Character {cp}: {field} {value} exceeds {MAX_UINT8}")
        for field, value in (("xOffset", g.x_offset), ("yOffset", g.y_offset)):
            if not lo <= value <= hi:
                raise GFXRangeError(f"Character {cp}: {field} {value} outside {lo}..{hi}")
