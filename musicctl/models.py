"""
Data models for now-playing information and CLI commands.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from .constants import META_ALBUM, META_ARTIST, META_ART_URL, META_TITLE


class Command(Enum):
    """Commands understood by the CLI."""
    LIST = "list"
    PLAY = "play"
    STOP = "stop"
    NEXT = "next"
    PREV = "prev"
    INFO = "info"
    VINFO = "vinfo"
    MUTE = "mute"

    @classmethod
    def default(cls) -> "Command":
        return cls.INFO

    @classmethod
    def names(cls):
        return [c.value for c in cls]


def value_to_string(value: Any) -> str:
    """Flatten a metadata value to text. Lists yield their first element."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return value_to_string(value[0]) if value else ""
    return str(value)


def get_json_string(obj: Any, key: str) -> str:
    """Return obj[key] if obj is a mapping holding a string there, else ''."""
    if not isinstance(obj, Mapping):
        return ""
    value = obj.get(key)
    return value if isinstance(value, str) else ""


@dataclass
class MusicInfo:
    """
    What a player reports as currently playing.

    Attributes:
        artist: Artist name (first artist for multi-artist tracks)
        title: Track title
        album: Album name, or station name for radio players
        cover: Cover art URL, empty when unknown
    """
    artist: str = ""
    title: str = ""
    album: str = ""
    cover: str = ""

    @classmethod
    def from_metadata(cls, metadata: Dict[str, Any]) -> "MusicInfo":
        """Build from an MPRIS metadata map (xesam:* / mpris:* keys)."""
        return cls(
            artist=value_to_string(metadata.get(META_ARTIST)),
            title=value_to_string(metadata.get(META_TITLE)),
            album=value_to_string(metadata.get(META_ALBUM)),
            cover=value_to_string(metadata.get(META_ART_URL)),
        )

    def __str__(self) -> str:
        text = ""
        if self.album:
            text += f"'{self.album}' "
        if self.title:
            text += f"{self.title} by "
        return text + self.artist
