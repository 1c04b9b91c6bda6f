"""Run the user's text editor on a temporary copy of some content."""

import logging
import os
from typing import Optional

import click

from .config import Config
from .errors import EditorError

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vi"


def resolve_editor(editor: Optional[str] = None, config: Optional[Config] = None) -> str:
    """Pick the editor command.

    Precedence: explicit editor argument, config ``editor.command``,
    ``$VISUAL``, ``$EDITOR``, then vi.
    """
    if editor:
        return editor
    if config is not None and config.get_editor():
        return config.get_editor()
    return os.environ.get("VISUAL") or os.environ.get("EDITOR") or DEFAULT_EDITOR


def edit_content(editor: str, content: str) -> str:
    """Let the user edit content and return the result.

    click writes the content to a temporary ``.tsv`` file, runs the editor
    command line on it through the shell (so ``code --wait`` works), waits
    for it and removes the file after reading it back. Windows line endings
    in the result are normalized to ``\\n``.

    Args:
        editor: Editor command line; the temporary path is appended to it
        content: Text to edit

    Returns:
        The file content after the editor exited, even when it was not saved

    Raises:
        EditorError: If the editor cannot be started or exits with a
            non-zero status, or the temporary file cannot be used
    """
    logger.debug("Running editor: %s", editor)
    try:
        edited = click.edit(content, editor=editor, extension=".tsv", require_save=False)
    except click.ClickException as e:
        raise EditorError(e.format_message()) from e
    except (OSError, UnicodeDecodeError) as e:
        raise EditorError(str(e)) from e
    return edited
