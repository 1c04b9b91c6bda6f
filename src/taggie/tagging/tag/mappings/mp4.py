"""MP4/M4A specific tag field mappings."""

from ..formats import MP4Record


def setup_mp4_mappings():
    """Register MP4 atom field mappings."""
    for name, atom in {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album": "\xa9alb",
    }.items():
        MP4Record.RegisterBasicKey(name, atom)
