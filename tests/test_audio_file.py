"""Tests for AudioFile construction and single-line updates."""

import os

import pytest

from taggie.audio_file import AudioFile
from taggie.errors import (
    CodecError,
    DiscoveryError,
    InvalidLine,
    NotAFileError,
    UnsupportedFormatError,
    WriteFailed,
)
from taggie.tagging.tag import ID3Record, MP4Record


class TestFromPath:
    """Test AudioFile.from_path discovery rules."""

    def test_mp3(self, tmp_path, make_mp3):
        path = make_mp3(tmp_path / "a.mp3", title="T")
        audio_file = AudioFile.from_path(path)

        assert audio_file.path == path
        assert isinstance(audio_file.tag, ID3Record)
        assert audio_file.tag.title() == "T"

    def test_m4a(self, tmp_path, make_m4a):
        audio_file = AudioFile.from_path(make_m4a(tmp_path / "b.m4a", artist="Y"))

        assert isinstance(audio_file.tag, MP4Record)
        assert audio_file.to_editable_content_line() == "\tY\n"

    def test_text_named_mp3_is_unsupported(self, tmp_path):
        path = tmp_path / "notes.mp3"
        path.write_text("not audio")
        with pytest.raises(UnsupportedFormatError):
            AudioFile.from_path(path)

    def test_accepts_string_path(self, tmp_path, make_mp3):
        path = make_mp3(tmp_path / "a.mp3")
        assert AudioFile.from_path(str(path)).path == path

    def test_directory_is_not_a_file(self, tmp_path):
        folder = tmp_path / "album.mp3"
        folder.mkdir()
        with pytest.raises(NotAFileError):
            AudioFile.from_path(folder)

    def test_missing_path_is_not_a_file(self, tmp_path):
        with pytest.raises(NotAFileError):
            AudioFile.from_path(tmp_path / "missing.mp3")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_dangling_symlink_is_not_a_file(self, tmp_path):
        link = tmp_path / "link.mp3"
        link.symlink_to(tmp_path / "nowhere.mp3")
        with pytest.raises(NotAFileError):
            AudioFile.from_path(link)

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("not audio")
        with pytest.raises(UnsupportedFormatError):
            AudioFile.from_path(path)

    def test_unparsable_file(self, tmp_path):
        path = tmp_path / "broken.m4a"
        path.write_bytes(b"\x00" * 64)
        with pytest.raises(UnsupportedFormatError) as exc_info:
            AudioFile.from_path(path)

        assert isinstance(exc_info.value.__cause__, CodecError)

    def test_discovery_errors_share_a_base(self):
        assert issubclass(NotAFileError, DiscoveryError)
        assert issubclass(UnsupportedFormatError, DiscoveryError)


class TestEditableContentLine:
    def test_title_and_artist(self, tmp_path, make_mp3):
        audio_file = AudioFile.from_path(make_mp3(tmp_path / "a.mp3", title="Old", artist="X"))
        assert audio_file.to_editable_content_line() == "Old\tX\n"

    def test_absent_fields_render_empty(self, tmp_path, make_mp3):
        audio_file = AudioFile.from_path(make_mp3(tmp_path / "a.mp3", tagged=False))
        assert audio_file.to_editable_content_line() == "\t\n"

    def test_album_is_not_rendered(self, tmp_path, make_mp4_file):
        audio_file = make_mp4_file(tmp_path / "b.m4a", title="T", artist="A", album="B")
        assert audio_file.to_editable_content_line() == "T\tA\n"


class TestUpdateTagFromLine:
    def test_updates_and_writes(self, tmp_path, make_mp3, id3_fields):
        path = make_mp3(tmp_path / "a.mp3", title="Old", artist="X", album="Keep")
        AudioFile.from_path(path).update_tag_from_line("New\tY")

        assert id3_fields(path) == {"TIT2": "New", "TPE1": "Y", "TALB": "Keep"}

    def test_fields_are_taken_verbatim(self, make_mp4_file, tmp_path):
        audio_file = make_mp4_file(tmp_path / "b.m4a")
        audio_file.update_tag_from_line("  spaced  \t[brackets]")

        assert audio_file.tag.title() == "  spaced  "
        assert audio_file.tag.artist() == "[brackets]"

    @pytest.mark.parametrize("line", ["", "no tab at all", "one\ttwo\tthree", "\t\t"])
    def test_invalid_line(self, tmp_path, make_mp4_file, line):
        audio_file = make_mp4_file(tmp_path / "b.m4a", title="T")
        with pytest.raises(InvalidLine) as exc_info:
            audio_file.update_tag_from_line(line)

        assert exc_info.value.line == line
        assert audio_file.tag.title() == "T"
        assert audio_file.tag.container.saved == []

    def test_write_failure(self, tmp_path, make_mp4_file):
        audio_file = make_mp4_file(tmp_path / "b.m4a", fail=True)
        with pytest.raises(WriteFailed) as exc_info:
            audio_file.update_tag_from_line("T\tA")

        assert exc_info.value.path == tmp_path / "b.m4a"
        assert isinstance(exc_info.value.__cause__, CodecError)
