"""Terminal-safe text shaping: width measurement, truncation, classification."""

from .printable import is_printable_sample, is_text_file, sanitize_line
from .reflow import clamp_lines
from .size import format_size
from .truncate import clip_cells, truncate_end, truncate_middle, truncate_start
from .width import cell_width, scalar_count, split_units, strip_ansi

__all__ = [
    "cell_width",
    "scalar_count",
    "split_units",
    "strip_ansi",
    "clip_cells",
    "truncate_end",
    "truncate_start",
    "truncate_middle",
    "clamp_lines",
    "is_printable_sample",
    "is_text_file",
    "sanitize_line",
    "format_size",
]
