"""
psf2gfx - PC Screen Font to Adafruit GFX Converter
==================================================
Converts PSF1/PSF2 console fonts into Adafruit GFX font sources, with
every glyph cropped to its bounding box and packed 1 bit per pixel.

Architecture
------------
The library is organized into layers:

    convert_font        Range driver (code points -> cropped glyphs)
       │
       ├── PSFFont           Parsed font image
       │      │
       │      ├── SourceBuffer       Bounded in-memory file contents
       │      ├── FontMetadata       Header geometry (parse_header)
       │      └── UnicodeTableIndex  Mapping table lookups
       │
       ├── GlyphRasterView   One glyph's fixed-size bitmap
       │
       └── GlyphCropper      Bounding box + repack

    GFXEmitter          C source output
    preview             ASCII art / PNG contact sheet

Quick Start
-----------
    from psf2gfx import PSFFont, convert_font, render_gfx_font

    font = PSFFont.from_path("ter-116n.psf")
    gfx = convert_font(font)
    print(render_gfx_font(gfx, "Terminus8x16"))

Module Structure
----------------
    psf2gfx/
    ├── cli.py              Command line interface
    ├── convert.py          Range driver, GFXFont
    ├── errors.py           Exception hierarchy
    ├── font/
    │   ├── source.py       Bounded file reader
    │   ├── psf.py          Header parser, PSFFont
    │   ├── unicode.py      Unicode table lookups
    │   └── constants.py    Format constants
    ├── glyph/
    │   ├── raster.py       Glyph bitmap view
    │   └── crop.py         Bounding-box cropper
    └── gfx/
        ├── emitter.py      GFX C source writer
        └── preview.py      Glyph previews
"""

from .errors import (
    PSFError,
    IncompleteHeader,
    IncompleteGlyphHeader,
    UnrecognizedFormat,
    FontTooLarge,
    IncompleteGlyphData,
    GlyphTooWide,
    TruncatedUnicodeTable,
    GlyphIndexOutOfRange,
    GFXRangeError,
)

# Font layer
from .font import (
    SourceBuffer,
    FontMetadata,
    PSFFont,
    UnicodeTableIndex,
    parse_header,
    GLYPH_NOT_FOUND,
    DEFAULT_MAX_FONT_SIZE,
    PSF1,
    PSF2,
)

# Glyph layer
from .glyph import GlyphRasterView, CroppedGlyph, GlyphCropper, crop_glyph

# Conversion and output
from .convert import GFXFont, convert_font, FIRST_CHAR, LAST_CHAR, DEFAULT_MAX_WIDTH_BYTES
from .gfx import GFXEmitter, render_gfx_font

__all__ = [
    # Errors
    "PSFError",
    "IncompleteHeader",
    "IncompleteGlyphHeader",
    "UnrecognizedFormat",
    "FontTooLarge",
    "IncompleteGlyphData",
    "GlyphTooWide",
    "TruncatedUnicodeTable",
    "GlyphIndexOutOfRange",
    "GFXRangeError",
    # Font
    "SourceBuffer",
    "FontMetadata",
    "PSFFont",
    "UnicodeTableIndex",
    "parse_header",
    "GLYPH_NOT_FOUND",
    "DEFAULT_MAX_FONT_SIZE",
    "PSF1",
    "PSF2",
    # Glyph
    "GlyphRasterView",
    "CroppedGlyph",
    "GlyphCropper",
    "crop_glyph",
    # Conversion
    "GFXFont",
    "convert_font",
    "FIRST_CHAR",
    "LAST_CHAR",
    "DEFAULT_MAX_WIDTH_BYTES",
    # Output
    "GFXEmitter",
    "render_gfx_font",
]

__version__ = "1.0.0"
