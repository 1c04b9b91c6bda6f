"""Core TagRecord class for handling audio file metadata."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from mutagen import MutagenError

from ...errors import CodecError
from .utils import conv_string

logger = logging.getLogger(__name__)


class TagRecord:
    """
    Encapsulates a mutagen tag container so that title, artist and album
    look the same across formats.
    The container itself can be accessed through self.tags.

    Each subclass is one supported tag encoding. The mapping from field name
    to format-specific key is registered per subclass with RegisterKey() and
    RegisterBasicKey() (see mappings/).

    Available fields:
        title
        artist
        album
    """

    field_map: Dict[type, Dict[str, Dict[str, Callable]]] = {}

    format_name = "unknown"

    # Lower-cased extensions (with the dot) this variant claims.
    extensions: tuple = ()

    def __init__(self, tags: Any, container: Any = None):
        """
        Args:
            tags: The mutagen tag mapping holding the fields
            container: Object whose save(path) serializes the tags. Defaults to
                the tag mapping itself.
        """
        self.tags = tags
        self.container = tags if container is None else container

    @property
    def tag_mapping(self) -> Dict[str, Dict[str, Callable]]:
        return self.field_map.get(type(self), {})

    def get(self, name: str) -> Optional[str]:
        """Return the field value, or None when it is absent from the tag."""
        try:
            value = self.tag_mapping[name]["getter"](self.tags)
        except KeyError:
            return None
        return conv_string(value)

    def set(self, name: str, value: str) -> None:
        """Set the field in memory. An empty value removes the field.

        A value equal to the current rendering of the field leaves it as is,
        so multi-value fields survive an unedited round trip.
        """
        if value == self.get(name):
            return
        if value:
            self.tag_mapping[name]["setter"](self.tags, value)
        else:
            try:
                self.tag_mapping[name]["deleter"](self.tags)
            except KeyError:
                pass

    def title(self) -> Optional[str]:
        return self.get("title")

    def artist(self) -> Optional[str]:
        return self.get("artist")

    def album(self) -> Optional[str]:
        return self.get("album")

    def set_title(self, title: str) -> None:
        self.set("title", title)

    def set_artist(self, artist: str) -> None:
        self.set("artist", artist)

    def set_album(self, album: str) -> None:
        self.set("album", album)

    @classmethod
    def read_from_path(cls, path: Union[str, Path]) -> "TagRecord":
        """Parse the tag of the file at path.

        Raises:
            CodecError: If the file cannot be parsed by this variant
        """
        raise NotImplementedError

    def write_to(self, path: Union[str, Path]) -> None:
        """Serialize the in-memory fields back into the file at path.

        Raises:
            CodecError: If mutagen or the OS refuses the write
        """
        try:
            self.container.save(str(path))
        except (MutagenError, OSError) as e:
            raise CodecError(path, f"failed to write tag: {e}") from e
        logger.debug("Wrote %s tag to %s", type(self).__name__, path)

    @classmethod
    def RegisterKey(
        cls,
        name: str,
        getter: Callable,
        setter: Callable,
        deleter: Callable,
    ):
        """Register the accessors for field <name> on this variant.

        getter(tags) must raise KeyError when the field is absent.
        """
        if cls not in cls.field_map:
            cls.field_map[cls] = {}

        cls.field_map[cls][name] = {
            "getter": getter,
            "setter": setter,
            "deleter": deleter,
        }

    @classmethod
    def RegisterBasicKey(cls, name: str, key: str):
        """Register field <name> stored as a plain list of strings under <key>."""

        def getter(tags):
            return tags[key]

        getter.__name__ = "field_getter(" + key + ")"

        def setter(tags, value):
            tags[key] = [value]

        setter.__name__ = "field_setter(" + key + ")"

        def deleter(tags):
            del tags[key]

        deleter.__name__ = "field_deleter(" + key + ")"

        cls.RegisterKey(name, getter, setter, deleter)

    def __repr__(self):
        return "{}(title={!r}, artist={!r}, album={!r})".format(
            type(self).__name__, self.title(), self.artist(), self.album()
        )
