"""
Tag subpackage - Audio file tag reading and writing.

This package provides a unified interface for reading and writing the title,
artist and album of audio files across the supported formats (MP3, MP4).
"""

from .core import TagRecord
from .formats import (
    read,
    variant_for,
    ID3Record,
    MP4Record,
    SUPPORTED_EXTENSIONS,
    FORMAT_MAPPING,
)
from .mappings import setup_all_mappings

# Initialize all tag field mappings
setup_all_mappings()

__all__ = [
    'TagRecord',
    'ID3Record',
    'MP4Record',
    'read',
    'variant_for',
    'SUPPORTED_EXTENSIONS',
    'FORMAT_MAPPING',
]
