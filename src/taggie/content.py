"""Editable content: the text document handed to the user's editor.

The document is a fixed header line followed by one ``title<TAB>artist`` line
per audio file, in collection order. Line order is the only link between a
data line and its file; no identifiers are written into the document.
Titles or artists containing a tab or a newline cannot be represented.
"""

import logging
from typing import List, Sequence

from .audio_file import AudioFile
from .errors import LineCountMismatch, UpdateAborted

logger = logging.getLogger(__name__)

HEADER = "Title\tArtist\t(Remove all lines to abort the update)"


def collection_to_editable_content(audio_files: Sequence[AudioFile]) -> str:
    """Serialize the collection into the editable document.

    Args:
        audio_files: Audio files in collection order

    Returns:
        The header line followed by one data line per file
    """
    lines_with_tags = "".join(
        audio_file.to_editable_content_line() for audio_file in audio_files
    )
    return f"{HEADER}\n{lines_with_tags}"


def content_lines(content: str) -> List[str]:
    """Split content into lines.

    Lines end at ``\\n`` (an optional preceding ``\\r`` is dropped) and a
    trailing newline does not start an extra empty line. Other characters
    that str.splitlines() treats as breaks stay inside their line.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def update_tags_from_edited_content(
    audio_files: Sequence[AudioFile], content: str
) -> None:
    """Apply the edited document to the audio files.

    Data line i (header excluded) updates audio file i, in order. Nothing is
    written unless the document is non-blank and holds exactly one data line
    per file. Processing stops at the first invalid line or failed write;
    files updated before that point stay updated.

    Args:
        audio_files: The collection the document was generated from
        content: The document as returned by the editor

    Raises:
        UpdateAborted: If the document is empty or whitespace only
        LineCountMismatch: If the number of data lines differs from the
            number of files
        InvalidLine: If a data line is not ``title<TAB>artist``
        WriteFailed: If a file cannot be saved
    """
    if not content.strip():
        raise UpdateAborted()

    # Skip the header line
    data_lines = content_lines(content)[1:]

    if len(audio_files) != len(data_lines):
        raise LineCountMismatch(len(audio_files), len(data_lines))

    for audio_file, line in zip(audio_files, data_lines):
        audio_file.update_tag_from_line(line)

    logger.info("Updated tags of %d files", len(audio_files))
