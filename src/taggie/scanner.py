"""Directory scanning for taggie.

Every entry of the scanned directory is offered to AudioFile.from_path().
Entries that are not audio files (directories, unsupported extensions,
unreadable tags) are skipped without failing the scan; the skipped entries
are still reported together with the reason so callers can show them.
"""

import logging
import os
from pathlib import Path
from typing import List, NamedTuple, Union

from .audio_file import AudioFile
from .errors import DiscoveryError

logger = logging.getLogger(__name__)


class SkippedEntry(NamedTuple):
    path: Path
    reason: str


class ScanResult:
    """Audio files kept by a scan, in directory-listing order, plus skipped entries."""

    def __init__(self, kept: List[AudioFile], skipped: List[SkippedEntry]):
        self.kept = kept
        self.skipped = skipped

    def __iter__(self):
        # Allows ``kept, skipped = scan_directory(...)``
        return iter((self.kept, self.skipped))

    def __repr__(self):
        return f"ScanResult(kept={len(self.kept)}, skipped={len(self.skipped)})"


def scan_directory(directory: Union[str, Path]) -> ScanResult:
    """List directory once and build an AudioFile for each usable entry.

    The order of the kept files follows the directory listing (platform
    defined, not necessarily alphabetical) and is fixed for the session.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        ScanResult with the kept audio files and the skipped entries

    Raises:
        OSError: If the directory itself cannot be listed
    """
    directory = Path(directory)
    kept: List[AudioFile] = []
    skipped: List[SkippedEntry] = []

    for entry in directory.iterdir():
        try:
            kept.append(AudioFile.from_path(entry))
        except DiscoveryError as e:
            logger.debug("Skipping %s: %s", entry, e.reason)
            skipped.append(SkippedEntry(entry, e.reason))

    logger.info(
        "Scanned %s: %d audio files, %d skipped", directory, len(kept), len(skipped)
    )
    return ScanResult(kept, skipped)


def from_directory(directory: Union[str, Path]) -> List[AudioFile]:
    """Return the audio files of directory, silently dropping everything else."""
    return scan_directory(directory).kept


def from_current_dir() -> List[AudioFile]:
    """Return the audio files of the current working directory."""
    return from_directory(os.getcwd())
