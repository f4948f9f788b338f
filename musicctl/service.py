"""Runs CLI commands against the discovered players."""

import concurrent.futures
import logging
from typing import List, Optional

from .constants import APP_NAME, DEFAULT_NOTIFY_TIMEOUT_MS
from .errors import MusicCtlError
from .models import Command
from .plugins import MusicCtl, first_active

logger = logging.getLogger(__name__)

MAX_QUERY_WORKERS = 8

# Commands that are forwarded as-is to the active player
_CONTROL_METHODS = {
    Command.PLAY: "play",
    Command.STOP: "stop",
    Command.NEXT: "next",
    Command.PREV: "prev",
    Command.MUTE: "mute",
}


class PlayerService:
    """Dispatches a Command to the right player(s) and returns the lines to print."""

    def __init__(self, players: List[MusicCtl], notifier=None,
                 notify_timeout_ms: int = DEFAULT_NOTIFY_TIMEOUT_MS):
        self.players = players
        self.notifier = notifier
        self.notify_timeout_ms = notify_timeout_ms

    def active(self, instance: Optional[str] = None) -> MusicCtl:
        return first_active(self.players, instance)

    def execute(self, command: Command, instance: Optional[str] = None, debug: bool = False) -> List[str]:
        if command is Command.LIST:
            return self.describe_all(debug=debug)
        if command is Command.INFO:
            line = self.info(instance)
            return [line] if line else []
        if command is Command.VINFO:
            notification_id = self.notify(instance)
            return [] if notification_id is None else [f"Created Notification: {notification_id}"]

        player = self.active(instance)
        logger.debug(f"{command.value} -> {player!r}")
        getattr(player, _CONTROL_METHODS[command])()
        return []

    def _describe(self, player: MusicCtl, debug: bool) -> Optional[str]:
        try:
            name = player.name()
        except MusicCtlError as e:
            logger.debug(f"{player!r}: name failed: {e}")
            name = ""
        try:
            info = player.info()
        except MusicCtlError as e:
            if debug:
                return f"{name}: {e!r}"
            logger.debug(f"{player!r}: info failed: {e}")
            return None
        if debug:
            return f"{name}: {info!r}"
        if info is None:
            return None
        return f"{name}: {info}"

    def describe_all(self, debug: bool = False) -> List[str]:
        """One line per player with something to show; queried concurrently, reported in bus order."""
        if not self.players:
            return []
        workers = min(MAX_QUERY_WORKERS, len(self.players))
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            lines = list(executor.map(lambda p: self._describe(p, debug), self.players))
        return [line for line in lines if line is not None]

    def info(self, instance: Optional[str] = None) -> Optional[str]:
        player = self.active(instance)
        info = player.info()
        if info is None:
            return None
        return f"{player.name()}: {info}"

    def notify(self, instance: Optional[str] = None) -> Optional[int]:
        """Pop up a desktop notification with the active player's track. Returns its id."""
        player = self.active(instance)
        try:
            info = player.info()
        except MusicCtlError as e:
            logger.debug(f"{player!r}: info failed: {e}")
            info = None
        if info is None:
            return None
        if self.notifier is None:
            raise MusicCtlError("Notifications are not available")
        return self.notifier.notify(
            APP_NAME,
            0,
            info.cover,
            str(info),
            player.name(),
            [],
            {},
            self.notify_timeout_ms,
        )
