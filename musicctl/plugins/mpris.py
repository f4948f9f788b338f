"""Generic MPRIS2 player (org.mpris.MediaPlayer2.*)."""

import logging
from typing import Any, Dict, Optional

from ..constants import META_ARTIST, MPRIS_PREFIX
from ..models import MusicInfo
from .base import MusicCtl

logger = logging.getLogger(__name__)


class MprisPlayer(MusicCtl):

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
        # MPRIS has no mute; toggle Volume between silent and full
        volume = self.proxy.get_property("Volume")
        target = 0.0 if volume and volume > 0 else 1.0
        logger.debug(f"{self.proxy.destination}: volume {volume} -> {target}")
        self.proxy.set_property("Volume", "d", target)

    def name(self) -> str:
        return f"{self.proxy.destination[len(MPRIS_PREFIX):]} (MPRIS)"

    def info(self) -> Optional[MusicInfo]:
        metadata = self._metadata()
        if not metadata:
            return None
        return MusicInfo.from_metadata(metadata)

    def can_play(self) -> bool:
        return bool(self.proxy.get_property("CanPlay")) and META_ARTIST in self._metadata()
