"""
PSF Conversion Errors
=====================
Every failure while loading or converting a font is fatal for the run.

All format errors derive from PSFError, itself a ValueError, so callers
that only care about "bad font file" can catch ValueError. The message
of each error is the short diagnostic printed by the CLI.
"""


class PSFError(ValueError):
    """Base class for PSF parsing and conversion failures."""

    message = "Invalid PSF font"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class IncompleteHeader(PSFError):
    """Buffer is shorter than the smallest (PSF1) header."""
    message = "Incomplete header"


class IncompleteGlyphHeader(IncompleteHeader):
    """PSF2 magic matched but the 32-byte header is truncated."""
    message = "Incomplete psf2 header"


class UnrecognizedFormat(PSFError):
    message = "Unrecognized magic"


class FontTooLarge(PSFError):
    message = "PSF data is too large"


class IncompleteGlyphData(PSFError):
    """Declared glyph table extends past the end of the buffer."""
    message = "Incomplete glyph data"


class GlyphTooWide(PSFError):
    message = "PSF width is too large"


class TruncatedUnicodeTable(PSFError):
    message = "Incomplete unicode table"


class GlyphIndexOutOfRange(PSFError, IndexError):
    """Glyph index is not below the font's glyph count."""
    message = "Glyph index out of range"


class GFXRangeError(PSFError):
    """Converted metrics do not fit the fixed-width GFXglyph/GFXfont fields."""
    message = "Glyph metrics do not fit GFX font fields"
