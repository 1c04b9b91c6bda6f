"""Edit command - Bulk-edit titles and artists in a text editor."""

import argparse
import logging
import sys

from rich.console import Console

from ...config import Config
from ...content import collection_to_editable_content, update_tags_from_edited_content
from ...editor import edit_content, resolve_editor
from ...errors import EditorError, UpdateAborted, UpdateError
from ...scanner import from_directory
from ..utils import ExitCode, resolve_directory


def cmd_edit(args: argparse.Namespace) -> None:
    """Run one editing session over a directory.

    Scans the directory, opens the editable document in the editor and
    writes the edited titles and artists back to the files.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success, nothing to edit, or update aborted by the user
        10: Invalid input (directory doesn't exist or can't be listed)
        20: The editor failed
        30: The edited document could not be applied
    """
    console = Console()
    config = Config(args.config)

    try:
        directory = resolve_directory(args.directory)
        audio_files = from_directory(directory)
    except OSError as e:
        logging.error("Cannot scan directory %s: %s", args.directory, e)
        console.print(f"Error: {e}", style="red", markup=False)
        sys.exit(ExitCode.INVALID_INPUT)

    if not audio_files:
        console.print(f"No audio files found in {directory}", style="yellow", markup=False)
        return

    logging.info("Editing %d audio files in %s", len(audio_files), directory)
    content = collection_to_editable_content(audio_files)

    editor = resolve_editor(args.editor, config)
    try:
        edited = edit_content(editor, content)
    except EditorError as e:
        console.print(f"Editing the file failed: {e}", style="red", markup=False)
        sys.exit(ExitCode.EDITOR_FAILED)

    try:
        update_tags_from_edited_content(audio_files, edited)
    except UpdateAborted as e:
        console.print(str(e), markup=False)
        return
    except UpdateError as e:
        logging.debug("Update failed", exc_info=True)
        console.print(str(e), style="red", markup=False, soft_wrap=True)
        sys.exit(ExitCode.UPDATE_FAILED)

    config.set_last_music_dir(str(directory))
    config.save()

    console.print(
        f"Updated {len(audio_files)} {'file' if len(audio_files) == 1 else 'files'}",
        style="green",
        markup=False,
    )
