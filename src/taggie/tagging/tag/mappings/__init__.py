"""Tag field mappings for the supported audio formats."""

from .id3 import setup_id3_mappings
from .mp4 import setup_mp4_mappings


def setup_all_mappings():
    """Initialize all tag field mappings."""
    setup_id3_mappings()
    setup_mp4_mappings()


__all__ = [
    'setup_id3_mappings',
    'setup_mp4_mappings',
    'setup_all_mappings',
]
