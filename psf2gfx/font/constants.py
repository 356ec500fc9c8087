"""
PC Screen Font Constants
========================
Magic numbers, header sizes and flag bits for the PSF1 and PSF2 formats.

Reference: https://www.win.tue.nl/~aeb/linux/kbd/font-formats-1.html
"""

# =============================================================================
# Format Variants
# =============================================================================

PSF1 = 1
PSF2 = 2

# =============================================================================
# PSF1
# =============================================================================

PSF1_MAGIC = b"\x36\x04"
PSF1_HEADER_SIZE = 4          # magic[2], mode, charsize

PSF1_MODE512 = 0x01           # 512 glyphs instead of 256
PSF1_MODEHASTAB = 0x02        # Unicode table follows the glyphs
PSF1_MODEHASSEQ = 0x04        # Unicode table may contain sequences

PSF1_WIDTH = 8                # PSF1 glyphs are always one byte wide

PSF1_SEPARATOR = 0xFFFF       # Ends the entries of one glyph
PSF1_STARTSEQ = 0xFFFE        # Starts a multi-codepoint sequence

# =============================================================================
# PSF2
# =============================================================================

PSF2_MAGIC = b"\x72\xb5\x4a\x86"
PSF2_HEADER_SIZE = 32         # magic[4] + 7 little-endian uint32 fields
PSF2_HEADER_FORMAT = "<7I"    # version, headersize, flags, length, charsize, height, width

PSF2_HAS_UNICODE_TABLE = 0x01
PSF2_MAXVERSION = 0

PSF2_SEPARATOR = 0xFF
PSF2_STARTSEQ = 0xFE
