"""
Shared fixtures: a fake D-Bus proxy so tests never touch a real session bus.
"""

import pytest


class FakeProxy:
    """Stands in for musicctl.dbus.DBusProxy. Records calls, serves canned replies."""

    def __init__(self, destination="org.mpris.MediaPlayer2.test", properties=None, replies=None,
                 object_path="/", interface=""):
        self.destination = destination
        self.object_path = object_path
        self.interface = interface
        self.properties = dict(properties or {})
        self.replies = dict(replies or {})
        self.calls = []
        self.set_calls = []

    def call(self, method, signature=None, *args):
        self.calls.append((method, signature, args))
        reply = self.replies.get(method, ())
        if isinstance(reply, Exception):
            raise reply
        return reply

    def get_property(self, name):
        value = self.properties[name]
        if isinstance(value, Exception):
            raise value
        return value

    def set_property(self, name, signature, value):
        self.set_calls.append((name, signature, value))
        self.properties[name] = value

    @property
    def methods(self):
        return [c[0] for c in self.calls]


class FakeBus:
    """A proxy factory: hands out FakeProxy objects per bus name."""

    def __init__(self, names, properties=None, replies=None):
        self.names = list(names)
        self.properties = properties or {}
        self.replies = replies or {}
        self.proxies = {}

    def __call__(self, connection, bus_name, object_path, interface, timeout_ms=None):
        if bus_name == "org.freedesktop.DBus":
            replies = {"ListNames": (self.names,)}
        else:
            replies = self.replies.get(bus_name, {})
        proxy = FakeProxy(bus_name, self.properties.get(bus_name), replies, object_path, interface)
        proxy.timeout_ms = timeout_ms
        self.proxies[bus_name] = proxy
        return proxy


@pytest.fixture
def fake_proxy():
    return FakeProxy


@pytest.fixture
def fake_bus():
    return FakeBus
