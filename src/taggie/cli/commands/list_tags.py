"""List command - Show the tags of the audio files in a directory."""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...scanner import scan_directory
from ..schemas import ErrorResponse, ListSuccessResponse, SkippedFile, TrackEntry
from ..utils import ExitCode, json_output, resolve_directory


def cmd_list(args: argparse.Namespace) -> None:
    """Display the tags of every audio file in editing order.

    Args:
        args: Parsed command-line arguments
    """
    use_json = getattr(args, "json", False)

    # In JSON mode, suppress INFO/DEBUG logs to keep output clean for parsing
    if use_json and logging.getLogger().level < logging.WARNING:
        logging.getLogger().setLevel(logging.WARNING)

    console = Console(quiet=use_json)

    try:
        directory = resolve_directory(args.directory)
        kept, skipped = scan_directory(directory)
    except OSError as e:
        if use_json:
            json_output(
                ErrorResponse(error="invalid_input", message=str(e)),
                ExitCode.INVALID_INPUT,
            )
        console.print(f"Error: {e}", style="red", markup=False)
        sys.exit(ExitCode.INVALID_INPUT)

    entries = [
        TrackEntry(
            path=str(audio_file.path),
            format=audio_file.tag.format_name,
            title=audio_file.tag.title(),
            artist=audio_file.tag.artist(),
            album=audio_file.tag.album(),
        )
        for audio_file in kept
    ]

    if use_json:
        json_output(
            ListSuccessResponse(
                directory=str(directory),
                count=len(entries),
                files=entries,
                skipped=(
                    [SkippedFile(path=str(s.path), reason=s.reason) for s in skipped]
                    if args.show_skipped
                    else None
                ),
            )
        )

    table = Table(title=Text(f"Audio files in {directory}"))
    table.add_column("#", style="cyan", justify="right")
    table.add_column("File", style="magenta")
    table.add_column("Format", style="dim")
    table.add_column("Title", style="green")
    table.add_column("Artist", style="yellow")
    table.add_column("Album")

    for i, (audio_file, entry) in enumerate(zip(kept, entries), 1):
        table.add_row(
            str(i),
            Text(audio_file.path.name),
            entry.format,
            Text(entry.title or ""),
            Text(entry.artist or ""),
            Text(entry.album or ""),
        )

    console.print(table)
    console.print(f"[cyan]{len(entries)} audio files[/cyan]")

    if args.show_skipped and skipped:
        skipped_table = Table(title="Skipped entries")
        skipped_table.add_column("Entry", style="magenta")
        skipped_table.add_column("Reason", style="red")
        for s in skipped:
            skipped_table.add_row(Text(s.path.name), s.reason)
        console.print(skipped_table)
