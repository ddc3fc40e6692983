"""Command-line argument parser for cellfit."""

import argparse

from ..config.settings import ShapeSettings

TRUNCATE_MODES = ["end", "start", "middle"]


def create_cli_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="cellfit - terminal-safe text shaping",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fit a long name into 20 cells
  cellfit --truncate end "a very long file name.txt" --width 20

  # Keep the tail of a path
  cellfit --truncate start /home/user/projects/report.pdf -w 24

  # Preview a file clamped to 60 columns
  cellfit --clamp notes.txt --width 60

  # Is it text or binary?
  cellfit --check image.png

  # Human-readable size with SI units
  cellfit --size 1536000 --si

  # Browse a directory (default)
  cellfit ~/Downloads
        """,
    )

    parser.add_argument(
        "target",
        nargs="?",
        help="Text to truncate, file to clamp/check, or directory to browse",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log debug messages to stderr"
    )

    # Operations (none selected launches the preview UI)
    op_group = parser.add_argument_group("operations")
    ops = op_group.add_mutually_exclusive_group()
    ops.add_argument(
        "--truncate",
        choices=TRUNCATE_MODES,
        metavar="MODE",
        help="Truncate TARGET text: end, start or middle",
    )
    ops.add_argument(
        "--clamp", action="store_true", help="Print TARGET file clamped per line"
    )
    ops.add_argument(
        "--check", action="store_true", help="Report whether TARGET file is text"
    )
    ops.add_argument(
        "--size", type=int, metavar="BYTES", help="Format a byte count"
    )

    # Shaping parameters
    shape_group = parser.add_argument_group("shaping settings")
    shape_group.add_argument(
        "--width", "-w", type=int, help="Cell budget (default: from settings)"
    )
    shape_group.add_argument(
        "--marker", help='Truncation marker (default: "...")'
    )
    shape_group.add_argument(
        "--tab-width", type=int, help="Spaces per tab when clamping (default: 4)"
    )
    shape_group.add_argument(
        "--sample-size",
        type=int,
        help="Bytes sampled to detect text files (default: 1024)",
    )

    # Size units
    units_group = parser.add_argument_group("size units")
    units = units_group.add_mutually_exclusive_group()
    units.add_argument(
        "--si", action="store_true", help="Decimal units (kB, MB, ...)"
    )
    units.add_argument(
        "--binary", action="store_true", help="Binary units (KiB, MiB, ...)"
    )

    # Persistence
    parser.add_argument(
        "--save",
        action="store_true",
        help="Persist the given shaping settings as new defaults",
    )

    return parser


def has_operation(args: argparse.Namespace) -> bool:
    """Check whether the arguments select a one-shot CLI operation."""
    return bool(args.truncate or args.clamp or args.check or args.size is not None)


def apply_cli_settings(args: argparse.Namespace, settings: ShapeSettings) -> ShapeSettings:
    """Apply CLI arguments to settings object."""
    if args.marker is not None:
        settings.truncation_marker = args.marker
    if args.tab_width is not None:
        settings.tab_width = args.tab_width
    if args.sample_size is not None:
        settings.sample_size = args.sample_size

    if args.si:
        settings.file_size_use_si = True
    elif args.binary:
        settings.file_size_use_si = False

    if args.width is not None:
        if args.clamp:
            settings.preview_width = args.width
        else:
            settings.name_width = args.width

    return settings
