"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from mutagen.id3 import ID3, TALB, TIT2, TPE1
from mutagen.mp4 import MP4, MP4Tags

from taggie.audio_file import AudioFile
from taggie.tagging.tag import MP4Record

# One MPEG-1 Layer III frame (128 kbit/s, 44.1 kHz) of silence. mutagen needs
# several consecutive frames before it accepts a file as MPEG audio.
MPEG_FRAME = b"\xff\xfb\x90\x00" + b"\x00" * 413
MPEG_AUDIO = MPEG_FRAME * 8

# Smallest MPEG-4 file mutagen opens: ftyp, an empty moov and a little mdat
M4A_SKELETON = (
    b"\x00\x00\x00\x18ftypM4A \x00\x00\x02\x00isomM4A "
    b"\x00\x00\x00\x08moov"
    b"\x00\x00\x00\x10mdat" + b"\x00" * 8
)

MP4_ATOMS = {"title": "\xa9nam", "artist": "\xa9ART", "album": "\xa9alb"}


class RecordingContainer:
    """Stands in for a mutagen file object: records saves, optionally fails them."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.saved = []

    def save(self, path):
        if self.fail:
            raise OSError(30, "Read-only file system", path)
        self.saved.append(path)


def as_list(value):
    return value if isinstance(value, list) else [value]


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Keep ~/.taggie out of the real home directory."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def make_mp3():
    """Return a function creating an MP3 file with the given ID3 fields.

    A field may be a list to store several values in one frame.
    """

    def _make_mp3(path: Path, title=None, artist=None, album=None, tagged=True) -> Path:
        path.write_bytes(MPEG_AUDIO)
        if not tagged:
            return path
        tags = ID3()
        if title is not None:
            tags.add(TIT2(encoding=3, text=as_list(title)))
        if artist is not None:
            tags.add(TPE1(encoding=3, text=as_list(artist)))
        if album is not None:
            tags.add(TALB(encoding=3, text=as_list(album)))
        tags.save(str(path))
        return path

    return _make_mp3


@pytest.fixture
def make_m4a():
    """Return a function creating a real M4A file with the given atoms."""

    def _make_m4a(path: Path, title=None, artist=None, album=None, tagged=True) -> Path:
        path.write_bytes(M4A_SKELETON)
        if not tagged:
            return path
        audio = MP4(str(path))
        audio.add_tags()
        for name, value in (("title", title), ("artist", artist), ("album", album)):
            if value is not None:
                audio.tags[MP4_ATOMS[name]] = as_list(value)
        audio.save()
        return path

    return _make_m4a


@pytest.fixture
def make_mp4_file():
    """Return a function creating an in-memory MP4 audio file handle.

    The returned AudioFile's tag is a real MP4Record whose saves are recorded
    by a RecordingContainer (available as audio_file.tag.container).
    """

    def _make_mp4_file(path: Path, title=None, artist=None, album=None, fail=False) -> AudioFile:
        tags = MP4Tags()
        for name, value in (("title", title), ("artist", artist), ("album", album)):
            if value is not None:
                tags[MP4_ATOMS[name]] = [value]
        return AudioFile(path, MP4Record(tags, container=RecordingContainer(fail=fail)))

    return _make_mp4_file


def read_id3_fields(path: Path) -> dict:
    """Return the title/artist/album frames of an MP3 file as plain strings."""
    tags = ID3(str(path))
    return {
        frame: (tags[frame].text[0] if frame in tags else None)
        for frame in ("TIT2", "TPE1", "TALB")
    }


def read_mp4_fields(path: Path) -> dict:
    """Return the title/artist/album atoms of an M4A file as value lists."""
    tags = MP4(str(path)).tags or {}
    return {name: tags.get(atom) for name, atom in MP4_ATOMS.items()}


@pytest.fixture
def id3_fields():
    return read_id3_fields


@pytest.fixture
def mp4_fields():
    return read_mp4_fields


@pytest.fixture
def sample_collection(tmp_path, make_mp3, make_m4a):
    """The three-file collection a.mp3, b.m4a, c.mp3 in that order."""
    a = AudioFile.from_path(make_mp3(tmp_path / "a.mp3", title="Old", artist="X"))
    b = AudioFile.from_path(make_m4a(tmp_path / "b.m4a", artist="Y"))
    c = AudioFile.from_path(make_mp3(tmp_path / "c.mp3", title="Z"))
    return [a, b, c]
