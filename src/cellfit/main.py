"""
cellfit - terminal-safe text shaping
"""

import logging
import sys

from .cli import create_cli_parser, has_operation, run_cli_command


def main():
    """Main entry point."""
    parser = create_cli_parser()
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if has_operation(args):
        # CLI mode - one-shot shaping operation
        return run_cli_command(args)

    # GUI mode - imported here so CLI runs never load textual
    from .preview import run_gui

    run_gui(args.target or ".")
    return 0


if __name__ == "__main__":
    sys.exit(main())
