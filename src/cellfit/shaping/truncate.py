"""
Width-budgeted truncation.

Three policies share the same unit slicing:
- ``truncate_end``: keep the head, append the marker (list cells, names)
- ``truncate_start``: keep the tail, overlay the marker on its head (paths)
- ``truncate_middle``: keep head and tail, marker in between (identifiers)

Escape sequences are zero width, so the ones that fall inside a dropped span
are kept. Styles opened or reset there still apply to what remains.

When the budget is too small to hold the marker, every policy returns the
marker itself clipped to the budget.
"""

from ..config.constants import DEFAULT_TRUNCATION_MARKER
from .width import ESC, Unit, cell_width, scalar_count, split_units


def _clip_units(units: list[Unit], max_width: int) -> list[str]:
    """Keep the leading units that fit ``max_width`` plus every later escape."""
    pieces = []
    used = 0
    cut = False
    for unit in units:
        if unit.is_escape:
            pieces.append(unit.text)
            continue
        if cut:
            continue
        if used + unit.width > max_width:
            cut = True
            continue
        pieces.append(unit.text)
        used += unit.width
    return pieces


def _seal(text: str) -> str:
    """Drop a trailing bare ESC so it cannot fuse with the marker into a sequence."""
    units = split_units(text)
    if units and not units[-1].is_escape and units[-1].text == ESC:
        return text[: -len(ESC)]
    return text


def clip_cells(text: str, max_width: int) -> str:
    """
    Hard clamp text to a cell width without adding a marker.

    Args:
        text: Text that may contain ANSI escape sequences
        max_width: Maximum width in cells (negative is treated as 0)

    Returns:
        Widest leading run of text fitting ``max_width``, with escape
        sequences after the cut point preserved
    """
    if cell_width(text) <= max_width:
        return text
    return "".join(_clip_units(split_units(text), max(max_width, 0)))


def truncate_end(
    text: str, budget: int, marker: str = DEFAULT_TRUNCATION_MARKER
) -> str:
    """
    Shorten text from the right to fit a cell budget.

    Args:
        text: Text to shorten
        budget: Maximum width of the result in cells
        marker: Appended when anything was cut; its width counts

    Returns:
        ``text`` unchanged if it fits, else its widest fitting prefix
        followed by ``marker``
    """
    if cell_width(text) <= budget:
        return text

    marker_width = cell_width(marker)
    if budget < marker_width:
        return clip_cells(marker, budget)

    units = split_units(text)
    return _seal("".join(_clip_units(units, budget - marker_width))) + marker


def truncate_start(
    text: str, budget: int, marker: str = DEFAULT_TRUNCATION_MARKER
) -> str:
    """
    Shorten text from the left to fit a cell budget.

    Leftmost units are dropped until the rest fits, then the first
    ``len(marker)`` visible scalars of the rest are replaced by the marker.
    More scalars are replaced when the covered ones are narrower than the
    marker.

    Args:
        text: Text to shorten, typically an absolute path
        budget: Maximum width of the result in cells
        marker: Overlaid on the head of what remains

    Returns:
        ``text`` unchanged if it fits, else the marker followed by the
        surviving tail
    """
    if cell_width(text) <= budget:
        return text

    marker_width = cell_width(marker)
    if budget < marker_width:
        return clip_cells(marker, budget)

    units = split_units(text)
    width = sum(unit.width for unit in units)
    lead = []

    pos = 0
    while width > budget:
        unit = units[pos]
        if unit.is_escape:
            lead.append(unit.text)
        width -= unit.width
        pos += 1

    marker_len = scalar_count(marker)
    replaced = 0
    while pos < len(units):
        unit = units[pos]
        covered = replaced >= marker_len and width + marker_width <= budget
        if covered and (unit.is_escape or unit.width):
            break
        # Zero-width marks trailing the last covered scalar go with it
        if unit.is_escape:
            lead.append(unit.text)
        elif not covered:
            width -= unit.width
            replaced += 1
        pos += 1

    rest = "".join(unit.text for unit in units[pos:])
    return _seal("".join(lead)) + marker + rest


def _head(units: list[Unit], count: int) -> int:
    """Return the index just past the first ``count`` visible units."""
    seen = 0
    for index, unit in enumerate(units):
        if unit.is_escape:
            continue
        if seen == count:
            return index
        seen += 1
    return len(units)


def _tail(units: list[Unit], count: int) -> int:
    """Return the index of the first of the last ``count`` visible units."""
    seen = 0
    for index in range(len(units) - 1, -1, -1):
        if units[index].is_escape:
            continue
        seen += 1
        if seen == count:
            return index
    return 0


def truncate_middle(
    text: str, budget: int, marker: str = DEFAULT_TRUNCATION_MARKER
) -> str:
    """
    Shorten text by cutting out its center.

    Budgets by visible scalar count, not cell width, since it is meant for
    identifiers that are already narrow.

    Args:
        text: Text to shorten
        budget: Maximum number of visible scalars in the result
        marker: Inserted where the center was removed

    Returns:
        ``text`` unchanged if it fits, else ``head + marker + tail`` with
        equally long head and tail
    """
    units = split_units(text)
    if sum(1 for unit in units if not unit.is_escape) <= budget:
        return text

    half = max((budget - cell_width(marker)) // 2, 0)
    if half == 0:
        marker_units = split_units(marker)
        keep = _head(marker_units, max(budget, 0))
        return "".join(unit.text for unit in marker_units[:keep])

    head_end = _head(units, half)
    tail_start = _tail(units, half)
    head = "".join(unit.text for unit in units[:head_end])
    dropped_escapes = "".join(
        unit.text for unit in units[head_end:tail_start] if unit.is_escape
    )
    tail = "".join(unit.text for unit in units[tail_start:])
    return _seal(head + dropped_escapes) + marker + tail
