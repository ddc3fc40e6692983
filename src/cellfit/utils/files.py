"""
File name helpers for list and preview views.
"""

from ..config.constants import EXTRACTABLE_EXTENSIONS


def file_name_without_extension(file_name: str) -> str:
    """
    Strip every extension from a file name.

    A leading dot marks a hidden file, not an extension, so ``.bashrc``
    is returned as-is and ``.config.json`` becomes ``.config``.

    Args:
        file_name: Base name of a file

    Returns:
        Name with all trailing ``.suffix`` parts removed
    """
    while True:
        pos = file_name.rfind(".")
        if pos <= 0:
            return file_name
        file_name = file_name[:pos]


def is_extension_extractable(ext: str) -> bool:
    """Check if an extension (with leading dot) is a supported archive format."""
    return ext.lower() in EXTRACTABLE_EXTENSIONS
