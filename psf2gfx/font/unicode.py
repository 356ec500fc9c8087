"""
Unicode Table Index
===================
Lookups over the optional Unicode mapping table that follows the glyphs.

Table grammar (per glyph, in glyph order):
    entries: code* (STARTSEQ code code*)* SEPARATOR

PSF1 codes are little-endian 16-bit units (SEPARATOR 0xFFFF, STARTSEQ
0xFFFE). PSF2 codes are UTF-8 byte sequences (SEPARATOR 0xFF, STARTSEQ
0xFE), which can never occur as bytes of valid UTF-8.

Nothing is precomputed: every query is a linear scan from the start of
the table. Fonts are small and conversion is one-shot.
"""

from typing import List

from ..errors import GlyphIndexOutOfRange, TruncatedUnicodeTable
from .constants import (
    PSF1,
    PSF1_SEPARATOR,
    PSF1_STARTSEQ,
    PSF2_SEPARATOR,
    PSF2_STARTSEQ,
)

GLYPH_NOT_FOUND = 0xFFFF  # Returned by lookups that find no glyph


def utf8_char_length(lead: int) -> int:
    """
    Byte length of a UTF-8 sequence from its lead byte.

    Returns:
        1-4, or 0 if the byte cannot start a sequence
    """
    if lead & 0x80 == 0:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def _u16(data: bytes, offset: int) -> int:
    return data[offset] | (data[offset + 1] << 8)


class UnicodeTableIndex:
    """
    Read-only view of a font's Unicode mapping table.

    Args:
        data: Whole font image
        metadata: FontMetadata parsed from the same image
    """

    def __init__(self, data: bytes, metadata):
        self._data = data
        self._meta = metadata

    @property
    def present(self) -> bool:
        return self._meta.unicode_table_offset != 0

    def offset_for_glyph(self, glyph_index: int) -> int:
        """
        Find where a glyph's entries start in the table.

        Skips glyph_index separator-terminated runs from the table start.

        Args:
            glyph_index: Glyph whose entries are wanted

        Returns:
            Byte offset into the font image, or 0 if there is no table

        Raises:
            GlyphIndexOutOfRange: glyph_index not below the glyph count
            TruncatedUnicodeTable: Buffer ends before a needed separator
        """
        if not 0 <= glyph_index < self._meta.glyph_count:
            raise GlyphIndexOutOfRange()
        if not self.present:
            return 0

        data = self._data
        end = len(data)
        offset = self._meta.unicode_table_offset

        if self._meta.format == PSF1:
            for _ in range(glyph_index):
                x = 0
                while x != PSF1_SEPARATOR:
                    if offset + 2 > end:
                        raise TruncatedUnicodeTable()
                    x = _u16(data, offset)
                    offset += 2
        else:
            for _ in range(glyph_index):
                x = 0
                while x != PSF2_SEPARATOR:
                    if offset >= end:
                        raise TruncatedUnicodeTable()
                    x = data[offset]
                    offset += 1

        return offset

    def glyph_for_code_point(self, code_point: int) -> int:
        """
        Find the glyph mapped to a code point (PSF1 only).

        Single 16-bit entries are compared against code_point; each separator
        moves on to the next glyph. Sequences and the two reserved marker
        values never match.

        Returns:
            Glyph index, or GLYPH_NOT_FOUND
        """
        if self._meta.format != PSF1 or not self.present:
            return GLYPH_NOT_FOUND
        if code_point in (PSF1_SEPARATOR, PSF1_STARTSEQ):
            return GLYPH_NOT_FOUND

        data = self._data
        offset = self._meta.unicode_table_offset
        glyph = 0

        while offset + 2 <= len(data):
            x = _u16(data, offset)
            if x == PSF1_STARTSEQ:
                # Sequences close the entry list; skip to the separator
                offset += 2
                while offset + 2 <= len(data) and _u16(data, offset) != PSF1_SEPARATOR:
                    offset += 2
                continue
            if x == code_point:
                return glyph
            if x == PSF1_SEPARATOR:
                glyph += 1
            offset += 2

        return GLYPH_NOT_FOUND

    def glyph_for_utf8(self, seq: bytes) -> int:
        """
        Find the glyph mapped to one UTF-8 encoded character (PSF2 only).

        Only the first character of seq is looked up.

        Returns:
            Glyph index, or GLYPH_NOT_FOUND
        """
        if self._meta.format == PSF1 or not self.present or not seq:
            return GLYPH_NOT_FOUND

        n = utf8_char_length(seq[0])
        if n == 0 or len(seq) < n:
            return GLYPH_NOT_FOUND
        needle = bytes(seq[:n])

        data = self._data
        offset = self._meta.unicode_table_offset
        glyph = 0

        while offset + n <= len(data):
            b = data[offset]
            if b == PSF2_SEPARATOR:
                glyph += 1
                offset += 1
            elif b == PSF2_STARTSEQ:
                # Sequences close the entry list; skip to the separator
                sep = data.find(PSF2_SEPARATOR, offset)
                offset = len(data) if sep < 0 else sep
            elif data[offset:offset + n] == needle:
                return glyph
            else:
                step = utf8_char_length(b)
                if step == 0:
                    return GLYPH_NOT_FOUND
                offset += step

        return GLYPH_NOT_FOUND

    def mappings_for_glyph(self, glyph_index: int) -> List[str]:
        """
        Decode the entries of one glyph.

        Single code points become one-character strings; a sequence after
        a start-sequence marker becomes one multi-character string.

        Returns:
            List of mapped strings (empty if there is no table)

        Raises:
            GlyphIndexOutOfRange: glyph_index not below the glyph count
            TruncatedUnicodeTable: Buffer ends before the glyph's separator
        """
        offset = self.offset_for_glyph(glyph_index)
        if not offset:
            return []

        if self._meta.format == PSF1:
            units = self._psf1_units(offset)
            return _group(units, PSF1_STARTSEQ, chr)
        units = self._psf2_units(offset)
        return _group(units, PSF2_STARTSEQ,
                      lambda u: u.decode("utf-8", errors="replace"))

    # =========================================================================
    # Internal: Entry Scanning
    # =========================================================================

    def _psf1_units(self, offset: int) -> list:
        data = self._data
        units = []
        while True:
            if offset + 2 > len(data):
                raise TruncatedUnicodeTable()
            x = _u16(data, offset)
            offset += 2
            if x == PSF1_SEPARATOR:
                return units
            units.append(x)

    def _psf2_units(self, offset: int) -> list:
        data = self._data
        units = []
        while True:
            if offset >= len(data):
                raise TruncatedUnicodeTable()
            b = data[offset]
            if b == PSF2_SEPARATOR:
                return units
            if b == PSF2_STARTSEQ:
                units.append(b)
                offset += 1
                continue
            n = utf8_char_length(b) or 1
            if offset + n > len(data):
                raise TruncatedUnicodeTable()
            units.append(data[offset:offset + n])
            offset += n


def _group(units: list, startseq: int, decode) -> List[str]:
    """Split raw units into single entries and start-sequence runs."""
    out = []
    seq = None
    for u in units:
        if u == startseq:
            if seq:
                out.append("".join(seq))
            seq = []
        elif seq is None:
            out.append(decode(u))
        else:
            seq.append(decode(u))
    if seq:
        out.append("".join(seq))
    return out
