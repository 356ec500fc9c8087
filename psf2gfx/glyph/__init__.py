"""
Glyph subsystem - raster access and bounding-box cropping.

Modules:
    raster: Read-only view of one glyph bitmap
    crop: Bounding-box crop and MSB-first repack
"""
from .raster import GlyphRasterView
from .crop import CroppedGlyph, GlyphCropper, crop_glyph

__all__ = ["GlyphRasterView", "CroppedGlyph", "GlyphCropper", "crop_glyph"]
