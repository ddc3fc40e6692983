"""
Path handling utilities for the preview UI.

Provides segment-aware path truncation measured in terminal cells.
"""

from pathlib import PurePosixPath

from ..config.constants import DEFAULT_TRUNCATION_MARKER
from ..shaping import cell_width, truncate_end


def truncate_path_intelligently(
    path_str: str,
    max_width: int,
    marker: str = DEFAULT_TRUNCATION_MARKER,
    reserved: int = 0,
) -> str:
    """
    Truncate a file path to fit within a given cell width.

    Strategy:
    1. If path fits, return as-is
    2. Drop whole folders from the left (/a/b/c/f -> .../b/c/f -> .../c/f)
    3. Show only the filename
    4. Cut the filename itself, keeping its start

    Args:
        path_str: The full path string
        max_width: Maximum width in cells
        marker: Truncation marker
        reserved: Cells already taken on the same row (icon, padding)

    Returns:
        Truncated path string
    """
    effective_width = max_width - reserved

    if cell_width(path_str) <= effective_width:
        return path_str

    parts = PurePosixPath(path_str).parts
    if len(parts) <= 1:
        return truncate_end(path_str, effective_width, marker)

    for i in range(1, len(parts) - 1):
        candidate = f"{marker}/" + "/".join(parts[i:])
        if cell_width(candidate) <= effective_width:
            return candidate

    filename = parts[-1]
    if cell_width(filename) <= effective_width:
        return filename

    return truncate_end(filename, effective_width, marker)
