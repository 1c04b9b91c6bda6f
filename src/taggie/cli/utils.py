"""Utility functions for CLI operations."""

import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import NoReturn

from pydantic import BaseModel


class ExitCode(IntEnum):
    """Process exit codes of the taggie command."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_INPUT = 10
    EDITOR_FAILED = 20
    UPDATE_FAILED = 30
    INTERRUPTED = 130


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger().setLevel(numeric_level)


def json_output(response: BaseModel, exit_code: ExitCode = ExitCode.SUCCESS) -> NoReturn:
    """Print a response model as JSON and exit with exit_code."""
    print(response.model_dump_json(exclude_none=True, indent=2))
    sys.exit(exit_code)


def resolve_directory(directory: str) -> Path:
    """Return the absolute directory path, or raise NotADirectoryError."""
    path = Path(directory).resolve()
    if not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")
    return path
