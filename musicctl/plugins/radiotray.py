"""RadioTray-NG internet radio player."""

import json
import logging
from typing import Any, Optional

from ..errors import PlayerStateError
from ..models import MusicInfo, get_json_string
from .base import MusicCtl

logger = logging.getLogger(__name__)


class RadioTrayPlayer(MusicCtl):
    """
    RadioTray-NG exposes lower-case methods and reports its state as a
    JSON document (`get_player_state`), which is `null` when idle.
    """

    def _state(self) -> Any:
        (raw,) = self.proxy.call("get_player_state")
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise PlayerStateError(f"RadioTrayNG returned invalid player state: {e}") from e

    def play(self):
        self.proxy.call("play")

    def stop(self):
        self.proxy.call("stop")

    def next(self):
        self.proxy.call("next_station")

    def prev(self):
        self.proxy.call("previous_station")

    def mute(self):
        self.proxy.call("mute")

    def name(self) -> str:
        return "RadioTrayNG"

    def info(self) -> Optional[MusicInfo]:
        state = self._state()
        if state is None:
            return None
        return MusicInfo(
            artist=get_json_string(state, "artist"),
            title=get_json_string(state, "title"),
            album=get_json_string(state, "station"),
            cover="",
        )

    def can_play(self) -> bool:
        url = get_json_string(self._state(), "url")
        logger.debug(f"RadioTrayNG url={url!r}")
        return bool(url)
