"""ID3/MP3 specific tag field mappings."""

import mutagen.id3

from ..formats import ID3Record


def setup_id3_mappings():
    """Register ID3/MP3 specific field mappings."""

    def RegisterTextFrameKey(name, frameid):
        """
        Register a key stored in a text frame. Frames are written as UTF-8
        (encoding=3) and replace every existing frame with the same id.
        """
        frame_class = mutagen.id3.Frames[frameid]

        def getter(id3):
            return list(id3[frameid].text)

        def setter(id3, value):
            id3.setall(frameid, [frame_class(encoding=3, text=[value])])

        def deleter(id3):
            id3.delall(frameid)

        ID3Record.RegisterKey(name, getter, setter, deleter)

    for name, frameid in {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
    }.items():
        RegisterTextFrameKey(name, frameid)
