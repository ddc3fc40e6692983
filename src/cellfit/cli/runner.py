"""CLI runner for one-shot shaping operations."""

import argparse
import logging
from pathlib import Path

from ..config.constants import BINARY_PREVIEW_NOTICE, MAX_PREVIEW_BYTES
from ..config.settings import ShapeSettings, SettingsManager
from ..shaping import (
    clamp_lines,
    format_size,
    is_text_file,
    sanitize_line,
    truncate_end,
    truncate_middle,
    truncate_start,
)
from .parser import apply_cli_settings

LOGGER = logging.getLogger(__name__)

TRUNCATORS = {
    "end": truncate_end,
    "start": truncate_start,
    "middle": truncate_middle,
}


def render_file_preview(path: str | Path, settings: ShapeSettings) -> str:
    """
    Render a file for a fixed-width preview pane.

    At most ``MAX_PREVIEW_BYTES`` are read, so huge files stay cheap.

    Args:
        path: File to preview
        settings: Preview width, tab width and sample size

    Returns:
        Clamped text, or the binary notice for non-text files

    Raises:
        OSError: If the file cannot be read
    """
    if not is_text_file(path, settings.sample_size):
        return BINARY_PREVIEW_NOTICE

    with open(path, "rb") as f:
        raw = f.read(MAX_PREVIEW_BYTES + 1)

    # Cut an oversized read back to its last complete line
    if len(raw) > MAX_PREVIEW_BYTES:
        raw = raw[:MAX_PREVIEW_BYTES]
        cut = raw.rfind(b"\n")
        if cut > 0:
            raw = raw[:cut]
        LOGGER.debug("Preview of %s limited to %d bytes", path, len(raw))

    text = sanitize_line(raw).decode("utf-8", errors="replace")
    return clamp_lines(text, settings.preview_width, settings.tab_width)


def run_cli_command(args: argparse.Namespace) -> int:
    """Run a single shaping operation in CLI mode."""
    try:
        settings_manager = SettingsManager()
        settings = settings_manager.load()
        settings = apply_cli_settings(args, settings)

        if args.save:
            settings_manager.save(settings)
            LOGGER.debug("Saved settings to %s", settings_manager.config_file)

        if args.size is not None:
            print(format_size(args.size, settings.file_size_use_si))
            return 0

        if args.target is None:
            print("Error: No target given.")
            return 1

        if args.truncate:
            truncate = TRUNCATORS[args.truncate]
            print(
                truncate(args.target, settings.name_width, settings.truncation_marker)
            )
            return 0

        if args.check:
            is_text = is_text_file(args.target, settings.sample_size)
            print("text" if is_text else "binary")
            return 0

        if args.clamp:
            print(render_file_preview(args.target, settings))
            return 0

        print("Error: No operation selected.")
        return 1

    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1
