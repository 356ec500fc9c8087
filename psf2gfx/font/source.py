"""
SourceBuffer - Bounded In-Memory Font Image
============================================
Holds the raw bytes of a font file, read in full before any parsing.

The read is bounded: data is pulled until EOF into a growable buffer and
the whole load fails with FontTooLarge as soon as the configured ceiling
is exceeded. Works for regular files and pipes (stdin) alike.
"""

from pathlib import Path
from typing import BinaryIO, Union

from ..errors import FontTooLarge

# =============================================================================
# Limits
# =============================================================================

DEFAULT_MAX_FONT_SIZE = 32768  # Largest accepted font file, in bytes

_READ_CHUNK = 4096


class SourceBuffer:
    """
    Read-only font image.

    Attributes:
        data: Raw file contents
        max_size: Ceiling the image was loaded with
    """

    def __init__(self, data: bytes, max_size: int = DEFAULT_MAX_FONT_SIZE):
        if len(data) > max_size:
            raise FontTooLarge()
        self.data = bytes(data)
        self.max_size = max_size

    @classmethod
    def read(cls, stream: BinaryIO, max_size: int = DEFAULT_MAX_FONT_SIZE) -> "SourceBuffer":
        """
        Read a binary stream until EOF.

        Args:
            stream: Binary file object (file, pipe, BytesIO)
            max_size: Maximum number of bytes accepted

        Returns:
            SourceBuffer holding everything the stream produced

        Raises:
            FontTooLarge: If the stream yields more than max_size bytes
        """
        buf = bytearray()
        while True:
            # Never ask for more than one byte past the ceiling
            want = min(_READ_CHUNK, max_size + 1 - len(buf))
            chunk = stream.read(want)
            if not chunk:
                break
            buf.extend(chunk)
            if len(buf) > max_size:
                raise FontTooLarge()
        return cls(bytes(buf), max_size)

    @classmethod
    def from_path(cls, path: Union[str, Path],
                  max_size: int = DEFAULT_MAX_FONT_SIZE) -> "SourceBuffer":
        """Open and read a font file from disk."""
        with open(path, "rb") as f:
            return cls.read(f, max_size)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, key):
        return self.data[key]
