"""Per-line width clamping for multi-line text blocks."""

from ..config.constants import DEFAULT_TAB_WIDTH
from .truncate import clip_cells


def clamp_lines(text: str, max_width: int, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """
    Clamp every line of a text block to a cell width, keeping ANSI styling.

    Tabs are expanded to ``tab_width`` spaces first. Lines are hard clamped
    with no truncation marker, and trailing newlines are dropped from the
    result, which makes the operation idempotent.

    Args:
        text: Multi-line text, possibly with ANSI escape sequences
        max_width: Maximum width of each line in cells
        tab_width: Spaces substituted for each literal tab

    Returns:
        Clamped text joined with newlines
    """
    tab = " " * tab_width
    lines = [clip_cells(line.replace("\t", tab), max_width) for line in text.split("\n")]
    return "\n".join(lines).rstrip("\n")
