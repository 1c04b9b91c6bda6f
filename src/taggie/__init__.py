"""taggie.

Bulk-edit the title and artist tags of the audio files in a directory using
your favourite text editor.

Main modules:
    cli: Command-line interface (taggie command)
    tagging: Audio file tag reading and writing

Core modules:
    audio_file: One audio file and its tag record
    scanner: Directory scanning
    content: Editable document serialization and reconciliation
    editor: External editor invocation
    config: Configuration management
    errors: Exception hierarchy
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("taggie")
except (PackageNotFoundError, ImportError):
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
            __version__ = pyproject_data["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

__all__ = [
    # Sub-packages
    "cli",
    "tagging",
    # Core modules
    "audio_file",
    "config",
    "content",
    "editor",
    "errors",
    "scanner",
]
