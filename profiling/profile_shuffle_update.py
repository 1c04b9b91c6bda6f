#!/usr/bin/env python3
"""Profile a full tag update by shuffling the titles/artists of a directory.

Usage:
    python profiling/profile_shuffle_update.py [/path/to/music/dir]

WARNING: this rewrites the tags of every audio file in the directory (the
title/artist pairs are shuffled between files). Run it on a scratch copy.
"""

import cProfile
import pstats
import random
import sys
import time
from io import StringIO
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from taggie.content import collection_to_editable_content, update_tags_from_edited_content
from taggie.scanner import from_current_dir, from_directory


def shuffled_content(content: str) -> str:
    """Return content with its data lines shuffled and the header kept first."""
    header, *tags = content.splitlines()
    random.shuffle(tags)
    return "\n".join([header] + tags)


def profile_shuffle_update(music_dir=None):
    """Shuffle and rewrite the tags of every audio file in music_dir."""
    audio_files = from_directory(music_dir) if music_dir else from_current_dir()
    content = shuffled_content(collection_to_editable_content(audio_files))

    profiler = cProfile.Profile()
    start = time.perf_counter()
    profiler.enable()
    try:
        update_tags_from_edited_content(audio_files, content)
    finally:
        profiler.disable()
    elapsed_ms = (time.perf_counter() - start) * 1000

    print(f"Updated {len(audio_files)} tags in {elapsed_ms:.0f} ms")

    s = StringIO()
    stats = pstats.Stats(profiler, stream=s)
    print("\n=== Top 20 functions by cumulative time ===")
    stats.sort_stats('cumulative')
    stats.print_stats(20)
    print(s.getvalue())


if __name__ == '__main__':
    music_dir = sys.argv[1] if len(sys.argv) > 1 else None
    if music_dir and not Path(music_dir).is_dir():
        print(f"Error: Not a directory: {music_dir}")
        sys.exit(1)

    profile_shuffle_update(music_dir)
