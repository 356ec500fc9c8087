import pytest

from psf2gfx.errors import GlyphIndexOutOfRange, TruncatedUnicodeTable
from psf2gfx.font import GLYPH_NOT_FOUND, PSFFont, utf8_char_length


def _psf1_table_font(make_psf1, table, mode=0):
    # 256 glyphs; glyphs past the table have no entries
    full = table + [[] for _ in range(256 - len(table))]
    return PSFFont(make_psf1(height=2, table=full, mode=mode))


# =============================================================================
# utf8_char_length
# =============================================================================

@pytest.mark.parametrize("lead,length", [
    (0x41, 1), (0x7F, 1),
    (0xC3, 2), (0xDF, 2),
    (0xE2, 3), (0xEF, 3),
    (0xF0, 4), (0xF4, 4),
    (0x80, 0), (0xBF, 0), (0xF8, 0), (0xFE, 0), (0xFF, 0),
])
def test_utf8_char_length(lead, length):
    assert utf8_char_length(lead) == length


# =============================================================================
# PSF1
# =============================================================================

def test_psf1_code_point_lookup(make_psf1):
    font = _psf1_table_font(make_psf1, [[0x0041], [0x0042]])
    assert font.unicode.glyph_for_code_point(0x0041) == 0
    assert font.unicode.glyph_for_code_point(0x0042) == 1
    assert font.unicode.glyph_for_code_point(0x5A) == GLYPH_NOT_FOUND


def test_psf1_several_code_points_per_glyph(make_psf1):
    font = _psf1_table_font(make_psf1, [[], [0x00C5, 0x212B], [0x0020]])
    assert font.unicode.glyph_for_code_point(0x212B) == 1
    assert font.unicode.glyph_for_code_point(0x00C5) == 1
    assert font.unicode.glyph_for_code_point(0x0020) == 2


def test_psf1_lookup_ignores_sequence_members(make_psf1):
    # Glyph 0 only has the sequence A + combining ring; glyph 1 is plain A
    font = _psf1_table_font(make_psf1, [[0xFFFE, 0x41, 0x30A], [0x41]])
    assert font.unicode.glyph_for_code_point(0x41) == 1
    assert font.unicode.glyph_for_code_point(0x30A) == GLYPH_NOT_FOUND


@pytest.mark.parametrize("code_point", [0xFFFF, 0xFFFE])
def test_psf1_marker_values_never_match(make_psf1, code_point):
    font = _psf1_table_font(make_psf1, [[0xFFFE, 0x41, 0x30A], [0x41]])
    assert font.unicode.glyph_for_code_point(code_point) == GLYPH_NOT_FOUND


def test_psf1_lookup_without_table(make_psf1):
    font = PSFFont(make_psf1(height=2))
    assert font.unicode.glyph_for_code_point(0x41) == GLYPH_NOT_FOUND
    assert font.unicode.offset_for_glyph(3) == 0
    assert font.unicode.mappings_for_glyph(3) == []


def test_psf1_rejects_utf8_lookup(make_psf1):
    font = _psf1_table_font(make_psf1, [[0x41]])
    assert font.unicode.glyph_for_utf8(b"A") == GLYPH_NOT_FOUND


def test_psf1_offset_for_glyph(make_psf1):
    font = _psf1_table_font(make_psf1, [[0x41], [0x42, 0x43], [0x44]])
    base = font.metadata.unicode_table_offset
    assert font.unicode.offset_for_glyph(0) == base
    assert font.unicode.offset_for_glyph(1) == base + 4
    assert font.unicode.offset_for_glyph(2) == base + 4 + 6


def test_psf1_offset_truncated(make_psf1):
    data = make_psf1(height=2, table=[[0x41], [0x42]])
    font = PSFFont(data)
    with pytest.raises(TruncatedUnicodeTable):
        font.unicode.offset_for_glyph(5)


def test_psf1_offset_out_of_range(make_psf1):
    font = _psf1_table_font(make_psf1, [[0x41]])
    with pytest.raises(GlyphIndexOutOfRange):
        font.unicode.offset_for_glyph(256)


def test_psf1_mappings_with_sequence(make_psf1):
    # U+00C5 alone, then the sequence A + combining ring above
    font = _psf1_table_font(make_psf1, [[0x00C5, 0xFFFE, 0x0041, 0x030A]], mode=0x04)
    assert font.unicode.mappings_for_glyph(0) == ["\u00c5", "A\u030a"]


def test_psf1_glyph_index_helper(make_psf1):
    font = _psf1_table_font(make_psf1, [[], [0x263A]])
    assert font.glyph_index("☺") == 1


# =============================================================================
# PSF2
# =============================================================================

def _psf2_table_font(make_psf2, table):
    return PSFFont(make_psf2(width=8, height=2, count=len(table), table=table))


def test_psf2_utf8_lookup(make_psf2):
    font = _psf2_table_font(make_psf2, [b"A", "é".encode(), "€".encode() + b"B", "😀".encode()])
    assert font.unicode.glyph_for_utf8(b"A") == 0
    assert font.unicode.glyph_for_utf8("é".encode()) == 1
    assert font.unicode.glyph_for_utf8("€".encode()) == 2
    assert font.unicode.glyph_for_utf8(b"B") == 2
    assert font.unicode.glyph_for_utf8("😀".encode()) == 3
    assert font.unicode.glyph_for_utf8(b"Z") == GLYPH_NOT_FOUND


def test_psf2_lookup_uses_first_character_only(make_psf2):
    font = _psf2_table_font(make_psf2, [b"A", b"B"])
    assert font.unicode.glyph_for_utf8(b"BA") == 1


def test_psf2_malformed_input(make_psf2):
    font = _psf2_table_font(make_psf2, [b"A"])
    assert font.unicode.glyph_for_utf8(b"\x80") == GLYPH_NOT_FOUND
    assert font.unicode.glyph_for_utf8(b"\xc3") == GLYPH_NOT_FOUND
    assert font.unicode.glyph_for_utf8(b"") == GLYPH_NOT_FOUND


def test_psf2_lookup_skips_sequences(make_psf2):
    font = _psf2_table_font(make_psf2, [b"\xfeA\xcc\x8a", b"C"])
    assert font.unicode.glyph_for_utf8(b"C") == 1


def test_psf2_lookup_ignores_sequence_members(make_psf2):
    font = _psf2_table_font(make_psf2, [b"\xfeA\xcc\x8a", b"A"])
    assert font.unicode.glyph_for_utf8(b"A") == 1
    assert font.unicode.glyph_for_utf8(b"\xcc\x8a") == GLYPH_NOT_FOUND


def test_psf2_rejects_code_point_lookup(make_psf2):
    font = _psf2_table_font(make_psf2, [b"A"])
    assert font.unicode.glyph_for_code_point(0x41) == GLYPH_NOT_FOUND


def test_psf2_lookup_without_table(make_psf2):
    font = PSFFont(make_psf2(count=4))
    assert font.unicode.glyph_for_utf8(b"A") == GLYPH_NOT_FOUND


def test_psf2_offset_for_glyph(make_psf2):
    font = _psf2_table_font(make_psf2, [b"A", "é".encode(), b"C"])
    base = font.metadata.unicode_table_offset
    assert font.unicode.offset_for_glyph(0) == base
    assert font.unicode.offset_for_glyph(1) == base + 2
    assert font.unicode.offset_for_glyph(2) == base + 2 + 3


def test_psf2_offset_truncated(make_psf2):
    data = make_psf2(width=8, height=2, count=3, table=[b"A"])
    font = PSFFont(data)
    with pytest.raises(TruncatedUnicodeTable):
        font.unicode.offset_for_glyph(2)


def test_psf2_mappings(make_psf2):
    font = _psf2_table_font(make_psf2, ["\u00c5x".encode() + b"\xfeA\xcc\x8a", b""])
    assert font.unicode.mappings_for_glyph(0) == ["\u00c5", "x", "A\u030a"]
    assert font.unicode.mappings_for_glyph(1) == []


def test_psf2_mappings_truncated(make_psf2):
    data = make_psf2(width=8, height=2, count=1, table=[b"A"])[:-1]
    font = PSFFont(data)
    with pytest.raises(TruncatedUnicodeTable):
        font.unicode.mappings_for_glyph(0)


def test_psf2_glyph_index_helper(make_psf2):
    font = _psf2_table_font(make_psf2, [b"", "€".encode()])
    assert font.glyph_index("€") == 1
