"""
Glyph Preview
=============
Human-readable views of glyphs, for checking a conversion by eye.

- format_glyph(): ASCII art of a source glyph raster (X = set, . = clear)
- format_cropped(): same for a cropped glyph, placed in its full cell
- render_preview_image(): Pillow contact sheet of a whole GFXFont
"""

from math import ceil

from PIL import Image, ImageDraw

from ..convert import GFXFont
from ..glyph.crop import CroppedGlyph
from ..glyph.raster import GlyphRasterView

_ON = "X"
_OFF = "."

_BG = 1   # White background in mode "1"
_FG = 0


def format_glyph(view: GlyphRasterView) -> str:
    """One line per row, one character per pixel."""
    lines = []
    for y in range(view.height):
        lines.append("".join(_ON if view.pixel(x, y) else _OFF
                             for x in range(view.width)))
    return "\n".join(lines)


def format_cropped(glyph: CroppedGlyph, cell_width: int, cell_height: int) -> str:
    """Expand a cropped glyph back into a cell_width × cell_height grid."""
    grid = [[_OFF] * cell_width for _ in range(cell_height)]
    for y in range(glyph.height):
        for x in range(glyph.width):
            if glyph.pixel(x, y):
                grid[glyph.y_offset + y][glyph.x_offset + x] = _ON
    return "\n".join("".join(row) for row in grid)


def render_preview_image(font: GFXFont, scale: int = 4, columns: int = 16) -> Image.Image:
    """
    Draw every glyph of a converted font into a grid of cells.

    Cells are xAdvance × yAdvance pixels; each glyph is drawn at its
    x/y offsets inside its cell, so the sheet shows the font exactly as
    a GFX renderer would place it.

    Args:
        font: Converted font
        scale: Size of one font pixel in image pixels
        columns: Glyph cells per sheet row

    Returns:
        1-bit PIL Image, black glyphs on white
    """
    if scale < 1:
        raise ValueError("scale must be >= 1")

    cell_w = max((g.x_advance for g in font.glyphs), default=0)
    cell_h = font.y_advance
    count = len(font)
    cols = max(1, min(columns, count))
    rows = max(1, ceil(count / cols))

    img = Image.new("1", (max(1, cols * cell_w * scale), max(1, rows * cell_h * scale)), _BG)
    draw = ImageDraw.Draw(img)

    for i, glyph in enumerate(font.glyphs):
        ox = (i % cols) * cell_w
        oy = (i // cols) * cell_h
        for y in range(glyph.height):
            for x in range(glyph.width):
                if not glyph.pixel(x, y):
                    continue
                px = (ox + glyph.x_offset + x) * scale
                py = (oy + glyph.y_offset + y) * scale
                draw.rectangle((px, py, px + scale - 1, py + scale - 1), fill=_FG)

    return img
