"""
Session bus client built on Gio (PyGObject).

All bus traffic goes through DBusProxy so player plugins only ever deal
with plain Python values: replies are unpacked from GLib.Variant and
GLib.Error is turned into DBusError here.
"""

import logging
from typing import Any, List, Optional, Tuple

from .constants import DBUS_PATH, DBUS_PROPERTIES, DBUS_SERVICE, DEFAULT_DBUS_TIMEOUT_MS
from .errors import DBusError

logger = logging.getLogger(__name__)


def _gio():
    """Import Gio/GLib lazily; PyGObject is usually the distro package (python3-gi)."""
    import gi
    gi.require_version("Gio", "2.0")
    from gi.repository import Gio, GLib
    return Gio, GLib


def session_bus():
    """Return a connection to the user's session bus."""
    try:
        Gio, GLib = _gio()
    except (ImportError, ValueError) as e:
        raise DBusError(f"PyGObject (gi) is required to talk to the session bus: {e}") from e
    try:
        return Gio.bus_get_sync(Gio.BusType.SESSION, None)
    except GLib.Error as e:
        raise DBusError(f"Cannot connect to session bus: {e.message}") from e


class DBusProxy:
    """A remote object: bus name + object path + interface."""

    def __init__(self, connection, bus_name: str, object_path: str, interface: str,
                 timeout_ms: int = DEFAULT_DBUS_TIMEOUT_MS):
        self.connection = connection
        self.bus_name = bus_name
        self.object_path = object_path
        self.interface = interface
        self.timeout_ms = timeout_ms

    @property
    def destination(self) -> str:
        return self.bus_name

    def __repr__(self) -> str:
        return f"DBusProxy({self.bus_name}, {self.object_path}, {self.interface})"

    def _call(self, interface: str, method: str, signature: Optional[str], args: Tuple) -> Tuple:
        Gio, GLib = _gio()
        params = GLib.Variant(signature, args) if signature else None
        logger.debug(f"call {self.bus_name} {interface}.{method}{args if args else '()'}")
        try:
            reply = self.connection.call_sync(
                self.bus_name,
                self.object_path,
                interface,
                method,
                params,
                None,
                Gio.DBusCallFlags.NONE,
                self.timeout_ms,
                None,
            )
        except GLib.Error as e:
            raise DBusError(f"{self.bus_name}: {interface}.{method} failed: {e.message}") from e
        if reply is None:
            return ()
        return reply.unpack()

    def call(self, method: str, signature: Optional[str] = None, *args) -> Tuple:
        """Call a method on this interface. `signature` is the tuple type of args, e.g. '(ss)'."""
        return self._call(self.interface, method, signature, args)

    def get_property(self, name: str) -> Any:
        (value,) = self._call(DBUS_PROPERTIES, "Get", "(ss)", (self.interface, name))
        return value

    def set_property(self, name: str, signature: str, value: Any) -> None:
        _, GLib = _gio()
        self._call(DBUS_PROPERTIES, "Set", "(ssv)",
                   (self.interface, name, GLib.Variant(signature, value)))


def list_names(connection, timeout_ms: int = DEFAULT_DBUS_TIMEOUT_MS, proxy_factory=DBusProxy) -> List[str]:
    """Names currently owned on the bus (org.freedesktop.DBus.ListNames)."""
    proxy = proxy_factory(connection, DBUS_SERVICE, DBUS_PATH, DBUS_SERVICE, timeout_ms)
    (names,) = proxy.call("ListNames")
    return list(names)
