"""
PSF Font Format Parser
======================
Detects PSF1 / PSF2 images and decodes their header into FontMetadata.

Format Layout:
    [Header: 4 bytes (PSF1) or headersize bytes (PSF2)]
    [Glyph bitmaps: count × charsize bytes]
    [Unicode table: optional, variable]

PSF1 Header (4 bytes):
    - Magic: 0x36 0x04
    - Mode: 1 byte (bit 0=512 glyphs, bit 1=has table, bit 2=has sequences)
    - Charsize: 1 byte (= glyph height, glyphs are 8 pixels wide)

PSF2 Header (32 bytes, little-endian uint32 fields):
    - Magic: 0x72 0xb5 0x4a 0x86
    - Version, headersize, flags, length, charsize, height, width

Header fields are decoded one by one at fixed offsets with explicit
endianness. Glyph bounds are validated against the real buffer length
before any glyph is handed out.
"""

import struct

from ..errors import (
    IncompleteGlyphData,
    IncompleteGlyphHeader,
    IncompleteHeader,
    UnrecognizedFormat,
)
from ..glyph.raster import GlyphRasterView
from .constants import (
    PSF1,
    PSF1_HEADER_SIZE,
    PSF1_MAGIC,
    PSF1_MODE512,
    PSF1_MODEHASTAB,
    PSF1_WIDTH,
    PSF2,
    PSF2_HAS_UNICODE_TABLE,
    PSF2_HEADER_FORMAT,
    PSF2_HEADER_SIZE,
    PSF2_MAGIC,
)
from .source import DEFAULT_MAX_FONT_SIZE, SourceBuffer
from .unicode import UnicodeTableIndex


class FontMetadata:
    """
    Geometry and layout of a parsed PSF image. Not modified after parsing.

    Attributes:
        format: PSF1 or PSF2
        glyph_count: Number of glyphs in the font
        height: Glyph height in pixels
        width: Glyph width in pixels
        bytes_per_row: Bytes per glyph row, ceil(width / 8)
        char_size: Bytes per glyph, height × bytes_per_row
        glyph_data_offset: Offset of the first glyph bitmap
        unicode_table_offset: Offset of the Unicode table, 0 if absent
    """

    def __init__(self, format: int, glyph_count: int, height: int, width: int,
                 glyph_data_offset: int, unicode_table_offset: int = 0):
        self.format = format
        self.glyph_count = glyph_count
        self.height = height
        self.width = width
        self.bytes_per_row = (width + 7) // 8
        self.char_size = height * self.bytes_per_row
        self.glyph_data_offset = glyph_data_offset
        self.unicode_table_offset = unicode_table_offset

    @property
    def has_unicode_table(self) -> bool:
        return self.unicode_table_offset != 0

    def __repr__(self):
        return (f"FontMetadata(format=PSF{self.format}, glyph_count={self.glyph_count}, "
                f"width={self.width}, height={self.height}, "
                f"glyph_data_offset={self.glyph_data_offset}, "
                f"unicode_table_offset={self.unicode_table_offset})")


def parse_header(source) -> FontMetadata:
    """
    Detect the PSF variant and decode its header.

    Args:
        source: SourceBuffer or bytes-like font image

    Returns:
        FontMetadata for the image

    Raises:
        IncompleteHeader: Buffer shorter than the PSF1 header
        IncompleteGlyphHeader: PSF2 magic with a truncated header
        UnrecognizedFormat: No magic matched
        IncompleteGlyphData: Glyph table runs past the end of the buffer
    """
    data = source.data if isinstance(source, SourceBuffer) else bytes(source)

    if len(data) < PSF1_HEADER_SIZE:
        raise IncompleteHeader()

    if data[:2] == PSF1_MAGIC:
        mode = data[2]
        glyph_count = 512 if mode & PSF1_MODE512 else 256
        height = data[3]
        width = PSF1_WIDTH
        glyph_data_offset = PSF1_HEADER_SIZE
        has_table = bool(mode & PSF1_MODEHASTAB)
        fmt = PSF1
    elif data[:4] == PSF2_MAGIC:
        if len(data) < PSF2_HEADER_SIZE:
            raise IncompleteGlyphHeader()
        # charsize (field 4) is recomputed from height and width
        (_version, header_size, flags, glyph_count,
         _charsize, height, width) = struct.unpack_from(PSF2_HEADER_FORMAT, data, 4)
        glyph_data_offset = header_size
        has_table = bool(flags & PSF2_HAS_UNICODE_TABLE)
        fmt = PSF2
    else:
        raise UnrecognizedFormat()

    glyph_data_size = glyph_count * height * ((width + 7) // 8)
    glyph_data_end = glyph_data_offset + glyph_data_size
    if glyph_data_end > len(data):
        raise IncompleteGlyphData()

    return FontMetadata(
        fmt, glyph_count, height, width, glyph_data_offset,
        glyph_data_end if has_table else 0,
    )


class PSFFont:
    """
    Parsed PSF font.

    Keeps the whole font image in memory; glyphs and Unicode lookups are
    views into it.

    Attributes:
        source: SourceBuffer the font was parsed from
        metadata: FontMetadata of the image
        unicode: UnicodeTableIndex over the optional mapping table
    """

    def __init__(self, source):
        if not isinstance(source, SourceBuffer):
            source = SourceBuffer(source, max(len(source), DEFAULT_MAX_FONT_SIZE))
        self.source = source
        self.metadata = parse_header(source)
        self.unicode = UnicodeTableIndex(source.data, self.metadata)

    @classmethod
    def read(cls, stream, max_size: int = DEFAULT_MAX_FONT_SIZE) -> "PSFFont":
        return cls(SourceBuffer.read(stream, max_size))

    @classmethod
    def from_path(cls, path, max_size: int = DEFAULT_MAX_FONT_SIZE) -> "PSFFont":
        return cls(SourceBuffer.from_path(path, max_size))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def format(self) -> int: return self.metadata.format

    @property
    def glyph_count(self) -> int: return self.metadata.glyph_count

    @property
    def width(self) -> int: return self.metadata.width

    @property
    def height(self) -> int: return self.metadata.height

    # =========================================================================
    # Glyph Access
    # =========================================================================

    def glyph(self, index: int) -> GlyphRasterView:
        """
        Get a read-only view of one glyph's bitmap.

        Raises:
            GlyphIndexOutOfRange: If index is not in [0, glyph_count)
        """
        return GlyphRasterView(self.source.data, self.metadata, index)

    def glyph_index(self, char: str) -> int:
        """
        Resolve a character to a glyph index through the Unicode table.

        Returns:
            Glyph index, or GLYPH_NOT_FOUND
        """
        if self.format == PSF1:
            return self.unicode.glyph_for_code_point(ord(char))
        return self.unicode.glyph_for_utf8(char.encode("utf-8", errors="surrogatepass"))
