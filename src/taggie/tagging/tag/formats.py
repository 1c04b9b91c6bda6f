"""Audio format variants and reading functions."""

import logging
from pathlib import Path
from typing import Dict, Optional, Type, Union

from mutagen.mp3 import MP3
from mutagen.mp4 import MP4

from ...errors import CodecError
from .core import TagRecord

logger = logging.getLogger(__name__)


class ID3Record(TagRecord):
    """ID3v2 tag of an MPEG audio file."""

    format_name = "ID3"
    extensions = (".mp3",)

    @classmethod
    def read_from_path(cls, path: Union[str, Path]) -> "ID3Record":
        try:
            audio = MP3(str(path))
        except Exception as e:
            raise CodecError(path, f"failed to read MPEG audio: {e}") from e
        if audio.tags is None:
            # Untagged MP3: start from an empty tag, it is created on write
            audio.add_tags()
        return cls(audio.tags, container=audio)


class MP4Record(TagRecord):
    """iTunes-style metadata atoms of an MPEG-4 audio file."""

    format_name = "MP4"
    extensions = (".m4a", ".m4b", ".m4p", ".m4v")

    @classmethod
    def read_from_path(cls, path: Union[str, Path]) -> "MP4Record":
        try:
            audio = MP4(str(path))
        except Exception as e:
            raise CodecError(path, f"failed to read MP4 tag: {e}") from e
        if audio.tags is None:
            audio.add_tags()
        return cls(audio.tags, container=audio)


VARIANTS = (ID3Record, MP4Record)

FORMAT_MAPPING: Dict[str, Type[TagRecord]] = {
    extension: variant for variant in VARIANTS for extension in variant.extensions
}

SUPPORTED_EXTENSIONS = set(FORMAT_MAPPING.keys())


def variant_for(filename: Union[str, Path]) -> Optional[Type[TagRecord]]:
    """Return the variant claiming the file's extension (case-insensitive)."""
    return FORMAT_MAPPING.get(Path(filename).suffix.lower())


def read(filename: Union[str, Path]) -> Optional[TagRecord]:
    """
    Read audio file tags and return a TagRecord.

    Args:
        filename: Path to the audio file

    Returns:
        TagRecord if a variant claims the extension and parses the file,
        None otherwise
    """
    variant = variant_for(filename)
    if variant is None:
        return None

    try:
        return variant.read_from_path(filename)
    except CodecError as e:
        logger.debug("Cannot read tags: %s", e)
        return None
