"""
Terminal cell-width measurement.

Splits text into atomic units (complete ANSI escape sequences and single
scalar values) and measures how many terminal columns each unit occupies.
Every truncator slices on unit boundaries, so an escape sequence or a scalar
value is never cut in half.
"""

import re
import unicodedata
from functools import lru_cache
from typing import NamedTuple

from rich.cells import cell_len

ESC = "\x1b"

ANSI_ESCAPE_RE = re.compile(
    r"""
      \x1b\[[0-?]*[ -/]*[@-~]              # CSI: ESC [ params intermediates final
    | \x1b\][^\x07\x1b]*(?:\x07|\x1b\\)    # OSC: ESC ] payload, BEL or ST
    | \x1b[ -/]+[0-~]                      # nF: ESC intermediates final
    | \x1b[0-Z\\^-~]                       # Fp, Fe, Fs: ESC plus one byte
    """,
    re.VERBOSE,
)


class Unit(NamedTuple):
    """One atomic slice of text."""

    text: str
    width: int
    is_escape: bool


@lru_cache(maxsize=4096)
def char_width(ch: str) -> int:
    """
    Return the cell width of a single scalar value.

    Wide East Asian characters and emoji are 2, combining marks and
    zero-width formatting characters are 0. A stray ESC or a lone
    surrogate (an undecodable byte smuggled through ``surrogateescape``)
    counts as 1 so malformed input never collapses to nothing.

    Args:
        ch: A single character

    Returns:
        Width in terminal cells (0, 1 or 2)
    """
    if ch == ESC:
        return 1
    category = unicodedata.category(ch)
    if category == "Cs":
        return 1
    if category == "Cc":
        return 0
    return cell_len(ch)


def split_units(text: str) -> list[Unit]:
    """
    Split text into escape-sequence and scalar units.

    Args:
        text: Text that may contain ANSI escape sequences

    Returns:
        Units in order; joining their text reproduces the input
    """
    units = []
    pos = 0
    length = len(text)
    while pos < length:
        if text[pos] == ESC:
            match = ANSI_ESCAPE_RE.match(text, pos)
            if match:
                units.append(Unit(match.group(0), 0, True))
                pos = match.end()
                continue
        ch = text[pos]
        units.append(Unit(ch, char_width(ch), False))
        pos += 1
    return units


def cell_width(text: str) -> int:
    """
    Compute the rendered terminal width of text.

    ANSI escape sequences contribute nothing; everything else is measured
    with ``char_width``.

    Args:
        text: Text to measure

    Returns:
        Non-negative width in cells
    """
    return sum(unit.width for unit in split_units(text))


def scalar_count(text: str) -> int:
    """Count the visible scalar values in text, ignoring escape sequences."""
    return sum(1 for unit in split_units(text) if not unit.is_escape)


def strip_ansi(text: str) -> str:
    """Remove every recognized ANSI escape sequence from text."""
    return ANSI_ESCAPE_RE.sub("", text)
