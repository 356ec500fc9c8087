"""
Font subsystem - PSF image loading and parsing.

Modules:
    source: Bounded in-memory font image
    psf: PSF1/PSF2 header parser and font object
    unicode: Unicode mapping table lookups
    constants: Format magic numbers and flag bits
"""
from .source import SourceBuffer, DEFAULT_MAX_FONT_SIZE
from .psf import FontMetadata, PSFFont, parse_header
from .unicode import UnicodeTableIndex, GLYPH_NOT_FOUND, utf8_char_length
from .constants import PSF1, PSF2

__all__ = [
    "SourceBuffer",
    "DEFAULT_MAX_FONT_SIZE",
    "FontMetadata",
    "PSFFont",
    "parse_header",
    "UnicodeTableIndex",
    "GLYPH_NOT_FOUND",
    "utf8_char_length",
    "PSF1",
    "PSF2",
]
