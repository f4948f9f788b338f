"""Discovers player backends on the session bus and picks the active one."""

import logging
from typing import List, Optional

from ..constants import (
    DEFAULT_DBUS_TIMEOUT_MS,
    MPRIS_PATH,
    MPRIS_PLAYER_INTERFACE,
    MPRIS_PREFIX,
    RADIOTRAY_NG,
    RADIOTRAY_NG_PATH,
    SHAIRPORT_SYNC,
    SHAIRPORT_SYNC_INTERFACE,
    SHAIRPORT_SYNC_PATH,
)
from ..dbus import DBusProxy, list_names
from ..errors import NoActivePlayerError
from .base import MusicCtl
from .mpris import MprisPlayer
from .radiotray import RadioTrayPlayer
from .shairportsync import ShairportSyncPlayer

logger = logging.getLogger(__name__)


def get_all(connection, timeout_ms: int = DEFAULT_DBUS_TIMEOUT_MS, proxy_factory=DBusProxy) -> List[MusicCtl]:
    """
    Return every player currently on the bus, in bus order.
    MPRIS players come first, RadioTray-NG (if running) is appended last.
    """
    names = list_names(connection, timeout_ms=timeout_ms, proxy_factory=proxy_factory)
    players: List[MusicCtl] = []

    for name in names:
        if name == SHAIRPORT_SYNC:
            proxy = proxy_factory(connection, name, SHAIRPORT_SYNC_PATH, SHAIRPORT_SYNC_INTERFACE, timeout_ms)
            players.append(ShairportSyncPlayer(proxy))
        elif name.startswith(MPRIS_PREFIX):
            proxy = proxy_factory(connection, name, MPRIS_PATH, MPRIS_PLAYER_INTERFACE, timeout_ms)
            players.append(MprisPlayer(proxy))

    if RADIOTRAY_NG in names:
        proxy = proxy_factory(connection, RADIOTRAY_NG, RADIOTRAY_NG_PATH, RADIOTRAY_NG, timeout_ms)
        players.append(RadioTrayPlayer(proxy))

    logger.debug(f"get_all: found {players}")
    return players


def first_active(players: List[MusicCtl], instance: Optional[str] = None) -> MusicCtl:
    """First player that can play, restricted to display name `instance` if given."""
    for player in players:
        if player.can_play():
            if instance is None or player.name() == instance:
                return player
    raise NoActivePlayerError()
