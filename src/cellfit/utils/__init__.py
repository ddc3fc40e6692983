"""Utility modules for file names and path display."""

from .files import file_name_without_extension, is_extension_extractable
from .paths import truncate_path_intelligently

__all__ = [
    "file_name_without_extension",
    "is_extension_extractable",
    "truncate_path_intelligently",
]
