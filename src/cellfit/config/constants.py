"""
Configuration constants for the text shaping engine.

This module centralizes all hardcoded values to make the engine
easier to maintain and configure.
"""

# Printable classification
SAMPLE_SIZE_BYTES = 1024  # Bytes sampled from a file to decide text vs binary
MAX_PREVIEW_BYTES = 64 * 1024  # Upper bound on bytes read for one preview

# Paragraph clamping
DEFAULT_TAB_WIDTH = 4  # Spaces per literal tab

# Truncation
DEFAULT_TRUNCATION_MARKER = "..."

# Default cell budgets for the preview UI
DEFAULT_NAME_WIDTH = 40
DEFAULT_PREVIEW_WIDTH = 80
MIN_PANEL_WIDTH = 10

# Size humanizer unit tables (index = power of the base)
SIZE_UNITS_DECIMAL = ["B", "kB", "MB", "GB", "TB", "PB", "EB"]
SIZE_UNITS_BINARY = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]
SIZE_BASE_DECIMAL = 1000
SIZE_BASE_BINARY = 1024
ZERO_SIZE_LABEL = "0B"

# Archive formats the host file manager can extract
EXTRACTABLE_EXTENSIONS = frozenset(
    {
        ".zip",
        ".bz",
        ".gz",
        ".iso",
        ".rar",
        ".7z",
        ".tar",
        ".tar.gz",
        ".tar.bz2",
    }
)

# Preview pane messages
BINARY_PREVIEW_NOTICE = "--- Binary file, preview unavailable ---"
EMPTY_DIRECTORY_NOTICE = "--- Empty directory ---"

# History limits
MAX_RECENT_PATHS = 10
