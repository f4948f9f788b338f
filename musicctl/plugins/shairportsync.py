"""Shairport Sync (AirPlay receiver) via its RemoteControl interface."""

from typing import Any, Dict, Optional

from ..constants import META_ARTIST, MPRIS_PREFIX
from ..models import MusicInfo
from .base import MusicCtl


class ShairportSyncPlayer(MusicCtl):

    def _metadata(self) -> Dict[str, Any]:
        return dict(self.proxy.get_property("Metadata") or {})

    def play(self):
        self.proxy.call("PlayPause")

    def stop(self):
        self.proxy.call("Stop")

    def next(self):
        self.proxy.call("Next")

    def prev(self):
        self.proxy.call("Previous")

    def mute(self):
        self.proxy.call("ToggleMute")

    def name(self) -> str:
        return self.proxy.destination[len(MPRIS_PREFIX):]

    def info(self) -> Optional[MusicInfo]:
        metadata = self._metadata()
        if not metadata:
            return None
        return MusicInfo.from_metadata(metadata)

    def can_play(self) -> bool:
        return bool(self.proxy.get_property("Available")) and META_ARTIST in self._metadata()
