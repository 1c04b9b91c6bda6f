"""Exception hierarchy for taggie.

Discovery errors are recovered per file by the scanner. Update errors stop the
update pass at the first failure; files written before that point stay
written.
"""

from pathlib import Path
from typing import Union


class TaggieError(Exception):
    """Base class for every error raised by taggie."""


class CodecError(TaggieError):
    """A tag could not be parsed from, or serialized to, an audio file."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


class DiscoveryError(TaggieError):
    """A directory entry could not be turned into an audio file."""

    reason = "not an audio file"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"{self.path}: {self.reason}")


class NotAFileError(DiscoveryError):
    reason = "not a regular file"


class UnsupportedFormatError(DiscoveryError):
    reason = "unsupported or unreadable audio file"


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------


def pluralize(count: int, singular: str, plural: str) -> str:
    """Return ``"<count> <noun>"`` with the noun matching the count."""
    return f"{count} {singular if count == 1 else plural}"


class UpdateError(TaggieError):
    """The edited content could not be applied to the audio files."""


class UpdateAborted(UpdateError):
    """The user removed every line of the document to cancel the update."""

    def __init__(self):
        super().__init__("Update aborted")


class LineCountMismatch(UpdateError):
    def __init__(self, number_of_files: int, number_of_lines: int):
        self.number_of_files = number_of_files
        self.number_of_lines = number_of_lines
        super().__init__(
            "Found {}, so expected {}, but found only {}".format(
                pluralize(number_of_files, "file", "files"),
                pluralize(number_of_files, "line", "lines"),
                pluralize(number_of_lines, "line", "lines"),
            )
        )


class InvalidLine(UpdateError):
    def __init__(self, line: str):
        self.line = line
        super().__init__(
            "Expected the line to have format\n\n"
            "\t`title<TAB>artist`\n\n"
            "but found this instead:\n\n"
            "\t" + line.replace("\t", "<TAB>")
        )


class WriteFailed(UpdateError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Failed to save updated tags to file '{self.path}'")


# ---------------------------------------------------------------------------
# Editor
# ---------------------------------------------------------------------------


class EditorError(TaggieError):
    """The external editor could not be run or did not exit cleanly."""
