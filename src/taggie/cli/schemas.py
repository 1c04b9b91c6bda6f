"""Pydantic schemas for JSON output.

All --json output from CLI commands uses these models so the structure stays
consistent and validated. None values are excluded from the output.

Commands using Pydantic validation:
- list: ListSuccessResponse | ErrorResponse
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "scan_failed"],
    )
    message: str = Field(description="Human-readable error description")


class TrackEntry(BaseModel):
    """Tags of one audio file, absent fields omitted."""

    path: str = Field(description="Path to the audio file")
    format: str = Field(description="Tag format (ID3 or MP4)")
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None


class SkippedFile(BaseModel):
    path: str = Field(description="Path of the skipped directory entry")
    reason: str = Field(description="Why the entry is not an editable audio file")


class ListSuccessResponse(BaseModel):
    """Response for a successful directory listing.

    Attributes:
        status: Always "success"
        directory: Scanned directory
        files: Audio files in editing order
        skipped: Skipped entries, only with --show-skipped
    """

    status: Literal["success"] = "success"
    directory: str = Field(description="Scanned directory")
    count: int = Field(ge=0, description="Number of audio files")
    files: List[TrackEntry] = Field(description="Audio files in editing order")
    skipped: Optional[List[SkippedFile]] = Field(
        default=None, description="Skipped directory entries"
    )
