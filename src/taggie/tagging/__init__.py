"""Audio file tagging sub-package.

This package provides functionality for reading and writing audio file
metadata across the supported formats.

Sub-packages:
    tag/: Tag reading and writing
        - core.py: Core TagRecord class
        - formats.py: Format variants (ID3, MP4) and read function
        - utils.py: Conversion utilities
        - mappings/: Field mappings for each format

Main exports:
    read: Read audio file tags
    TagRecord: Tag manipulation class
"""

__all__ = ["tag", "read", "TagRecord", "ID3Record", "MP4Record", "SUPPORTED_EXTENSIONS"]

from .tag import read, TagRecord, ID3Record, MP4Record, SUPPORTED_EXTENSIONS
