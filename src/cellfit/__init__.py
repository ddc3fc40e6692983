"""cellfit - terminal-safe text shaping"""

__version__ = "0.1.0"

from .config.settings import SettingsManager, ShapeSettings
from .shaping import (
    cell_width,
    clamp_lines,
    clip_cells,
    format_size,
    is_printable_sample,
    is_text_file,
    sanitize_line,
    truncate_end,
    truncate_middle,
    truncate_start,
)

__all__ = [
    "cell_width",
    "clip_cells",
    "truncate_end",
    "truncate_start",
    "truncate_middle",
    "clamp_lines",
    "is_printable_sample",
    "is_text_file",
    "sanitize_line",
    "format_size",
    "SettingsManager",
    "ShapeSettings",
]
