"""Command-line interface for taggie.

This package provides the 'taggie' command-line tool with subcommands:
    edit: Edit titles and artists of a directory in a text editor
    list: Show the tags of the audio files in a directory
    dump: Print the editable document to stdout

Modules:
    commands/: Command implementations (edit, list, dump)
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config
from .utils import ExitCode, setup_logging
from .commands import cmd_edit, cmd_list, cmd_dump

__all__ = [
    "main",
    "cmd_edit",
    "cmd_list",
    "cmd_dump",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (defaults to the config file, silent otherwise)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration file (default: ~/.taggie/config.toml)",
    )

    parser = argparse.ArgumentParser(
        prog="taggie",
        usage="taggie <command> [options]",
        description=(
            "taggie - Bulk-edit audio file titles and artists in your text editor\n\n"
            "Remove all lines in the editor to abort an update."
        ),
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # edit
    # ──────────────────────────────
    edit_parser = subparsers.add_parser(
        "edit",
        help="Edit titles and artists in a text editor",
        usage="taggie edit [directory] [options]",
        description=(
            "Open the titles and artists of the audio files in a directory in "
            "your editor and write the changes back"
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    edit_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory with audio files (default: current directory)",
    )
    edit_parser.add_argument(
        "-e",
        "--editor",
        help="Editor command (default: config, then $VISUAL, $EDITOR, vi)",
    )
    edit_parser.set_defaults(func=cmd_edit)

    # ──────────────────────────────
    # list
    # ──────────────────────────────
    list_parser = subparsers.add_parser(
        "list",
        help="Show the tags of the audio files in a directory",
        usage="taggie list [directory] [options]",
        description="Show title, artist and album of each audio file in editing order",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    list_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory with audio files (default: current directory)",
    )
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    list_parser.add_argument(
        "--show-skipped",
        action="store_true",
        help="Also show directory entries that are not editable audio files",
    )
    list_parser.set_defaults(func=cmd_list)

    # ──────────────────────────────
    # dump
    # ──────────────────────────────
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print the editable document to stdout",
        usage="taggie dump [directory]",
        description="Print the document the editor would receive, without editing",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    dump_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory with audio files (default: current directory)",
    )
    dump_parser.set_defaults(func=cmd_dump)

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(ExitCode.GENERAL_ERROR)

    # Logging setup
    log_level = args.log_level or Config(args.config).get_log_level()
    try:
        setup_logging(log_level)
    except ValueError as e:
        parser.error(str(e))

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("Operation cancelled by user")
        sys.exit(ExitCode.INTERRUPTED)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=log_level == "debug")
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
