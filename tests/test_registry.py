import pytest

from musicctl.errors import DBusError, NoActivePlayerError
from musicctl.plugins import MprisPlayer, RadioTrayPlayer, ShairportSyncPlayer, first_active, get_all


def test_get_all_discovers_players_in_bus_order(fake_bus):
    bus = fake_bus([
        ":1.42",
        "org.freedesktop.Notifications",
        "com.github.radiotray_ng",
        "org.mpris.MediaPlayer2.spotify",
        "org.mpris.MediaPlayer2.ShairportSync",
        "org.mpris.MediaPlayer2.vlc",
    ])
    players = get_all(object(), timeout_ms=1234, proxy_factory=bus)

    assert [type(p) for p in players] == [MprisPlayer, ShairportSyncPlayer, MprisPlayer, RadioTrayPlayer]
    assert [p.name() for p in players] == ["spotify (MPRIS)", "ShairportSync", "vlc (MPRIS)", "RadioTrayNG"]


def test_get_all_uses_backend_object_paths(fake_bus):
    bus = fake_bus(["org.mpris.MediaPlayer2.ShairportSync", "org.mpris.MediaPlayer2.mpv", "com.github.radiotray_ng"])
    get_all(object(), timeout_ms=1234, proxy_factory=bus)

    mpv = bus.proxies["org.mpris.MediaPlayer2.mpv"]
    assert (mpv.object_path, mpv.interface) == ("/org/mpris/MediaPlayer2", "org.mpris.MediaPlayer2.Player")
    shairport = bus.proxies["org.mpris.MediaPlayer2.ShairportSync"]
    assert (shairport.object_path, shairport.interface) == (
        "/org/gnome/ShairportSync", "org.gnome.ShairportSync.RemoteControl")
    radio = bus.proxies["com.github.radiotray_ng"]
    assert (radio.object_path, radio.interface) == ("/com/github/radiotray_ng", "com.github.radiotray_ng")
    assert all(p.timeout_ms == 1234 for p in bus.proxies.values())


def test_get_all_empty_bus(fake_bus):
    assert get_all(object(), proxy_factory=fake_bus([":1.1"])) == []


class StubPlayer:
    def __init__(self, name, active):
        self._name = name
        self._active = active

    def name(self):
        return self._name

    def can_play(self):
        return self._active


def test_first_active_picks_first_playable():
    players = [StubPlayer("a", False), StubPlayer("b", True), StubPlayer("c", True)]
    assert first_active(players).name() == "b"


def test_first_active_by_instance():
    players = [StubPlayer("a", True), StubPlayer("b", False), StubPlayer("c", True)]
    assert first_active(players, "c").name() == "c"


def test_first_active_instance_must_be_playable():
    players = [StubPlayer("a", True), StubPlayer("b", False)]
    with pytest.raises(NoActivePlayerError, match="No active players available"):
        first_active(players, "b")


def test_first_active_none():
    with pytest.raises(NoActivePlayerError):
        first_active([])


class FailingPlayer(StubPlayer):
    def __init__(self, name, active, fail_on):
        super().__init__(name, active)
        self.fail_on = fail_on

    def name(self):
        if self.fail_on == "name":
            raise DBusError("name lookup timed out")
        return super().name()

    def can_play(self):
        if self.fail_on == "can_play":
            raise DBusError("CanPlay lookup timed out")
        return super().can_play()


@pytest.mark.parametrize("fail_on", ["can_play", "name"])
def test_first_active_propagates_player_errors(fail_on):
    players = [FailingPlayer("broken", True, fail_on), StubPlayer("ok", True)]
    with pytest.raises(DBusError):
        first_active(players, "ok")
