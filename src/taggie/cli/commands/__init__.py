"""CLI command implementations.

Each module in this package implements a specific taggie subcommand:
    edit.py: Edit titles and artists of a directory in a text editor
    list_tags.py: Show the tags of a directory
    dump.py: Print the editable document
"""

from .edit import cmd_edit
from .list_tags import cmd_list
from .dump import cmd_dump

__all__ = [
    "cmd_edit",
    "cmd_list",
    "cmd_dump",
]
