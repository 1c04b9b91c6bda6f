"""Dump command - Print the editable document without editing it."""

import argparse
import logging
import sys

from ...content import collection_to_editable_content
from ...scanner import from_directory
from ..utils import ExitCode, resolve_directory


def cmd_dump(args: argparse.Namespace) -> None:
    """Write the editable document of a directory to stdout.

    The output is exactly what the editor would be given, so it can be piped
    into other tools.

    Args:
        args: Parsed command-line arguments
    """
    try:
        directory = resolve_directory(args.directory)
        audio_files = from_directory(directory)
    except OSError as e:
        logging.error("Cannot scan directory %s: %s", args.directory, e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(ExitCode.INVALID_INPUT)

    sys.stdout.write(collection_to_editable_content(audio_files))
    sys.stdout.flush()
