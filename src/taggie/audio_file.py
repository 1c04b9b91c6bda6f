"""A single audio file bound to its tag record."""

import logging
from pathlib import Path
from typing import Union

from .errors import (
    CodecError,
    InvalidLine,
    NotAFileError,
    UnsupportedFormatError,
    WriteFailed,
)
from .tagging.tag import TagRecord, variant_for

logger = logging.getLogger(__name__)


class AudioFile:
    """An audio file path and the tag record read from it.

    The record is owned by this object for the whole editing session; nothing
    else reads or writes the tag of the same path meanwhile.
    """

    def __init__(self, path: Union[str, Path], tag: TagRecord):
        self.path = Path(path)
        self.tag = tag

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "AudioFile":
        """Open the file at path and read its tag.

        Args:
            path: Path to a candidate audio file

        Returns:
            AudioFile owning the parsed tag record

        Raises:
            NotAFileError: If path is not a regular file
            UnsupportedFormatError: If no format claims the extension or the
                matching codec cannot parse the file
        """
        path = Path(path)
        if not path.is_file():
            raise NotAFileError(path)

        variant = variant_for(path)
        if variant is None:
            raise UnsupportedFormatError(path)

        try:
            tag = variant.read_from_path(path)
        except CodecError as e:
            raise UnsupportedFormatError(path) from e

        return cls(path, tag)

    def to_editable_content_line(self) -> str:
        """Render the ``title<TAB>artist`` line, newline included."""
        return "{}\t{}\n".format(self.tag.title() or "", self.tag.artist() or "")

    def update_tag_from_line(self, line: str) -> None:
        """Apply one data line to the tag and write it through to disk.

        Raises:
            InvalidLine: If the line does not hold exactly two tab-separated fields
            WriteFailed: If the updated tag cannot be saved
        """
        fields = line.split("\t")
        if len(fields) != 2:
            raise InvalidLine(line)

        title, artist = fields
        self.tag.set_title(title)
        self.tag.set_artist(artist)

        try:
            self.tag.write_to(self.path)
        except CodecError as e:
            logger.error("Failed to save %s: %s", self.path, e)
            raise WriteFailed(self.path) from e

        logger.info("Updated %s", self.path)

    def __repr__(self):
        return f"AudioFile({str(self.path)!r}, {self.tag!r})"
