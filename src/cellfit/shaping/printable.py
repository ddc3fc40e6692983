"""
Text vs binary classification and layout-safe line filtering.

Both checks look at bytes one at a time, reading each byte as the Latin-1
code point of the same value. This is a heuristic over a bounded sample,
not a decoder.
"""

import logging
import unicodedata
from os import PathLike

from ..config.constants import SAMPLE_SIZE_BYTES

LOGGER = logging.getLogger(__name__)

# Characters the classifier accepts as whitespace
_WHITESPACE = frozenset("\t\n\v\f\r \x85\xa0")

# Unicode general category majors counted as visible glyphs
_GLYPH_MAJORS = frozenset("LMNPS")


def _is_printable_byte(byte: int) -> bool:
    ch = chr(byte)
    if ch in _WHITESPACE:
        return True
    return unicodedata.category(ch)[0] in _GLYPH_MAJORS


def _is_graphic_byte(byte: int) -> bool:
    category = unicodedata.category(chr(byte))
    return category[0] in _GLYPH_MAJORS or category == "Zs"


_PRINTABLE_BYTES = frozenset(b for b in range(256) if _is_printable_byte(b))
_LAYOUT_SAFE_BYTES = frozenset(
    b for b in range(256) if _is_graphic_byte(b) or b in (0x09, 0x0A)
)


def is_printable_sample(buffer: bytes, sample_size: int = SAMPLE_SIZE_BYTES) -> bool:
    """
    Decide whether a byte buffer looks like human-readable text.

    Only the first ``sample_size`` bytes are inspected. A zero-length
    buffer is vacuously printable.

    Args:
        buffer: Raw bytes, usually the head of a file
        sample_size: Maximum number of bytes to inspect

    Returns:
        False if any sampled byte is neither printable nor whitespace
    """
    return all(byte in _PRINTABLE_BYTES for byte in buffer[:sample_size])


def is_text_file(path: str | PathLike, sample_size: int = SAMPLE_SIZE_BYTES) -> bool:
    """
    Check whether a file is text by sampling its first bytes.

    Args:
        path: File to sample
        sample_size: Number of bytes to read (one read, no retries)

    Returns:
        Verdict of ``is_printable_sample`` on the sample

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(path, "rb") as f:
        sample = f.read(sample_size)
    verdict = is_printable_sample(sample, sample_size)
    LOGGER.debug("Sampled %d bytes from %s: text=%s", len(sample), path, verdict)
    return verdict


def sanitize_line(line: str | bytes) -> str | bytes:
    """
    Drop bytes that would break a text layout.

    Keeps graphic bytes, tabs and newlines. Vertical tabs, form feeds,
    carriage returns and other control bytes are removed. The filter runs
    over UTF-8 bytes rather than characters, so a stray non-graphic byte is
    never merged into a neighbouring multi-byte sequence.

    Args:
        line: Text, or raw bytes from a file

    Returns:
        Filtered value of the same type as ``line``
    """
    if isinstance(line, str):
        raw = line.encode("utf-8", "surrogateescape")
        return bytes(b for b in raw if b in _LAYOUT_SAFE_BYTES).decode(
            "utf-8", "surrogateescape"
        )
    return bytes(b for b in line if b in _LAYOUT_SAFE_BYTES)
