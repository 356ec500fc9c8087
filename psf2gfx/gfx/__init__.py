"""
GFX output subsystem.

Modules:
    emitter: Adafruit GFX C source writer
    preview: ASCII art and PNG previews
"""
from .emitter import GFXEmitter, render_gfx_font
from .preview import format_glyph, format_cropped, render_preview_image

__all__ = [
    "GFXEmitter",
    "render_gfx_font",
    "format_glyph",
    "format_cropped",
    "render_preview_image",
]
