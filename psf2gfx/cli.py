"""
PSF to GFX Font Converter
=========================
Command line front end: reads a PSF1/PSF2 font and writes an Adafruit
GFX font source file.

Usage:
    # Convert a console font, write to a header file
    psf2gfxfont -f ter-116n.psf -g Terminus8x16 -o Terminus8x16.h

    # Read from stdin, write to stdout
    gzip -dc default8x16.psf.gz | psf2gfxfont -f - -g Default8x16 -o -

    # Look glyphs up through the font's Unicode table
    psf2gfxfont -f lat2-16.psf -g Lat2 -o lat2.h --unicode

    # Check a few glyphs, and the whole result as an image
    psf2gfxfont -f font.psf -g Font -o font.h --preview "Ag@" --preview-image font.png

All diagnostics go to stderr; stdout may carry the generated source.
Exit status is 0 on success and 1 on any error.
"""

import argparse
import sys

from .convert import (
    DEFAULT_MAX_WIDTH_BYTES,
    FIRST_CHAR,
    LAST_CHAR,
    convert_font,
    resolve_glyph_index,
)
from .errors import PSFError
from .font.psf import PSFFont
from .font.source import DEFAULT_MAX_FONT_SIZE
from .gfx.emitter import GFXEmitter, is_c_identifier
from .gfx.preview import format_glyph, render_preview_image

_STDIO = "-"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _int(text: str) -> int:
    """Decimal or 0x-prefixed integer."""
    return int(text, 0)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="psf2gfxfont",
        description="Convert PSF1/PSF2 console fonts to Adafruit GFX fonts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  psf2gfxfont -f ter-116n.psf -g Terminus8x16 -o Terminus8x16.h
  psf2gfxfont -f - -g Default8x16 -o - < default8x16.psf
  psf2gfxfont -f lat2-16.psf -g Lat2 -o lat2.h --unicode --preview "Aé"
        """
    )

    parser.add_argument('-f', dest='input', metavar='psfFileName',
                        help="input file, '-' for stdin")
    parser.add_argument('-g', dest='name', metavar='gfxFontName',
                        help='name of GFXfont structure')
    parser.add_argument('-o', dest='output', metavar='gfxFileName',
                        help="output file, '-' for stdout")

    parser.add_argument('--first', type=_int, default=FIRST_CHAR,
                        help=f'first code point (default: {FIRST_CHAR:#x})')
    parser.add_argument('--last', type=_int, default=LAST_CHAR,
                        help=f'last code point (default: {LAST_CHAR:#x})')
    parser.add_argument('--unicode', action='store_true',
                        help="resolve code points through the font's Unicode table")

    parser.add_argument('--max-size', type=_int, default=DEFAULT_MAX_FONT_SIZE,
                        help=f'largest accepted font file in bytes (default: {DEFAULT_MAX_FONT_SIZE})')
    parser.add_argument('--max-width-bytes', type=_int, default=DEFAULT_MAX_WIDTH_BYTES,
                        help=f'widest accepted glyph row in bytes (default: {DEFAULT_MAX_WIDTH_BYTES})')

    parser.add_argument('--preview', type=str,
                        help='print source glyphs of these characters to stderr')
    parser.add_argument('--preview-image', metavar='PNG',
                        help='render the converted glyphs to a PNG contact sheet')
    parser.add_argument('--scale', type=_int, default=4,
                        help='pixel size for --preview-image (default: 4)')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print font details to stderr')

    return parser


def _err(message: str):
    print(message, file=sys.stderr)


def load_font(path: str, max_size: int) -> PSFFont:
    if path == _STDIO:
        return PSFFont.read(sys.stdin.buffer, max_size)
    return PSFFont.from_path(path, max_size)


def preview_glyphs(font: PSFFont, text: str, use_unicode: bool):
    """Print ASCII art of the source glyphs for each character of text."""
    _err(f"\nPreview ({font.width}x{font.height}):")
    _err("-" * 40)
    for char in text:
        cp = ord(char)
        index = resolve_glyph_index(font, cp, use_unicode)
        if index is None or index >= font.glyph_count:
            _err(f"'{char}' (U+{cp:04X}): NOT FOUND")
            continue
        _err(f"'{char}' (U+{cp:04X}) glyph {index}:")
        for line in format_glyph(font.glyph(index)).splitlines():
            _err(f"  {line}")
        _err("")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    for value, what in ((args.input, "Input file"),
                        (args.name, "GFX font name"),
                        (args.output, "Output file")):
        if value is None:
            _err(f"Error: {what} not specified")
            parser.print_usage(sys.stderr)
            return 1

    if not is_c_identifier(args.name):
        _err(f"Error: GFX font name must be a C identifier: {args.name!r}")
        return 1

    # ==========================================================================
    # Load and convert
    # ==========================================================================

    try:
        font = load_font(args.input, args.max_size)
    except OSError as e:
        _err(f"Error: Failed to open input file: {e}")
        return 1
    except PSFError as e:
        _err(f"Error: {e}")
        return 1

    if args.verbose:
        meta = font.metadata
        table = "unicode table" if meta.has_unicode_table else "no unicode table"
        _err(f"Loaded PSF{meta.format} font: {meta.glyph_count} glyphs, "
             f"{meta.width}x{meta.height}, {table}")

    try:
        gfx = convert_font(font, args.first, args.last,
                           use_unicode=args.unicode,
                           max_width_bytes=args.max_width_bytes)
        if args.preview:
            preview_glyphs(font, args.preview, args.unicode)
    except PSFError as e:
        _err(f"Error: {e}")
        return 1

    source = GFXEmitter(args.name).render(gfx)

    if args.verbose:
        _err(f"Converted {len(gfx)} glyphs ({gfx.first}..{gfx.last}), "
             f"{len(gfx.bitmaps)} bitmap bytes")

    # ==========================================================================
    # Write output
    # ==========================================================================

    try:
        if args.preview_image:
            render_preview_image(gfx, scale=args.scale).save(args.preview_image)
            if args.verbose:
                _err(f"Created: {args.preview_image}")

        if args.output == _STDIO:
            sys.stdout.write(source)
            sys.stdout.flush()
        else:
            with open(args.output, 'w', encoding='ascii') as f:
                f.write(source)
            if args.verbose:
                _err(f"Created: {args.output}")
    except OSError as e:
        _err(f"Error: Failed to write output: {e}")
        return 1
    except ValueError as e:
        _err(f"Error: {e}")
        return 1

    return 0

