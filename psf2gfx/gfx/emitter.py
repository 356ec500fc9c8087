"""
GFX Font Emitter
================
Renders a GFXFont as C source for the Adafruit GFX library.

Output Layout:
    const uint8_t <name>Bitmaps[] PROGMEM = { ... };   packed glyph bits
    const GFXglyph <name>Glyphs[] PROGMEM = { ... };   one entry per glyph
    const GFXfont <name> PROGMEM = { ... };            font descriptor

Each bitmap line and glyph entry is annotated with the character it
stands for. Glyph entries are
    { bitmapOffset, width, height, xAdvance, xOffset, yOffset }
with the two offsets signed.
"""

import re
from typing import TextIO

from ..convert import GFXFont

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_c_identifier(name: str) -> bool:
    return bool(_IDENTIFIER.match(name))


def char_label(code_point: int) -> str:
    """Comment label for a code point: 'A' for printable ASCII, else U+XXXX."""
    if 0x20 <= code_point <= 0x7E:
        return f"'{chr(code_point)}'"
    return f"U+{code_point:04X}"


class GFXEmitter:
    """
    C source writer for one GFX font.

    Args:
        name: Identifier for the font; arrays get Bitmaps/Glyphs suffixes

    Raises:
        ValueError: If name is not a valid C identifier
    """

    def __init__(self, name: str):
        if not is_c_identifier(name):
            raise ValueError(f"Invalid GFX font name: {name!r}")
        self.name = name

    def render(self, font: GFXFont) -> str:
        """Render the complete source text."""
        return "\n".join((
            self.render_bitmaps(font),
            self.render_glyphs(font),
            self.render_font(font),
        ))

    def write(self, font: GFXFont, out: TextIO):
        out.write(self.render(font))

    # =========================================================================
    # Sections
    # =========================================================================

    def render_bitmaps(self, font: GFXFont) -> str:
        lines = [f"const uint8_t {self.name}Bitmaps[] PROGMEM = {{"]
        for cp, glyph in font.items():
            data = "".join(f" 0x{b:02x}," for b in glyph.bitmap)
            lines.append(f"    /* {char_label(cp)} */{data}")
        lines.append("};")
        return "\n".join(lines) + "\n"

    def render_glyphs(self, font: GFXFont) -> str:
        lines = [f"const GFXglyph {self.name}Glyphs[] PROGMEM = {{"]
        for cp, g in font.items():
            lines.append(
                f"    /* {char_label(cp)} */ {{ {g.bitmap_offset}, {g.width}, {g.height}, "
                f"{g.x_advance}, {g.x_offset:d}, {g.y_offset:d} }},")
        lines.append("};")
        return "\n".join(lines) + "\n"

    def render_font(self, font: GFXFont) -> str:
        return (
            f"const GFXfont {self.name} PROGMEM = {{\n"
            f"    (uint8_t *){self.name}Bitmaps, (GFXglyph *){self.name}Glyphs, "
            f"{font.first}, {font.last}, {font.y_advance}\n"
            "};\n"
        )


def render_gfx_font(font: GFXFont, name: str) -> str:
    """Shortcut for GFXEmitter(name).render(font)."""
    return GFXEmitter(name).render(font)
