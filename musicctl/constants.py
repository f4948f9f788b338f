"""
Shared constants used across musicctl.
"""

APP_NAME = "musicctl"

# Configuration paths
DEFAULT_CONFIG_DIR = "~/.config/musicctl"
ENV_FILENAME = ".env"
DEFAULT_ENV_PATH = DEFAULT_CONFIG_DIR + "/" + ENV_FILENAME

# Environment keys
ENV_CONFIG_PATH = "MUSICCTL_CONFIG"
ENV_INSTANCE = "MUSICCTL_INSTANCE"
ENV_DBUS_TIMEOUT = "MUSICCTL_DBUS_TIMEOUT_MS"
ENV_NOTIFY_TIMEOUT = "MUSICCTL_NOTIFY_TIMEOUT"
ENV_LOG_LEVEL = "MUSICCTL_LOG_LEVEL"

# D-Bus settings
DEFAULT_DBUS_TIMEOUT_MS = 5000
DEFAULT_NOTIFY_TIMEOUT_MS = 0  # 0 = never expire
DEFAULT_LOG_LEVEL = "WARNING"

# Well-known bus names
DBUS_SERVICE = "org.freedesktop.DBus"
DBUS_PATH = "/org/freedesktop/DBus"
DBUS_PROPERTIES = "org.freedesktop.DBus.Properties"

NOTIFICATIONS_SERVICE = "org.freedesktop.Notifications"
NOTIFICATIONS_PATH = "/org/freedesktop/Notifications"

MPRIS_PREFIX = "org.mpris.MediaPlayer2."
MPRIS_PATH = "/org/mpris/MediaPlayer2"
MPRIS_PLAYER_INTERFACE = "org.mpris.MediaPlayer2.Player"

RADIOTRAY_NG = "com.github.radiotray_ng"
RADIOTRAY_NG_PATH = "/com/github/radiotray_ng"

SHAIRPORT_SYNC = "org.mpris.MediaPlayer2.ShairportSync"
SHAIRPORT_SYNC_PATH = "/org/gnome/ShairportSync"
SHAIRPORT_SYNC_INTERFACE = "org.gnome.ShairportSync.RemoteControl"

# Metadata keys (xesam / mpris)
META_ARTIST = "xesam:artist"
META_TITLE = "xesam:title"
META_ALBUM = "xesam:album"
META_ART_URL = "mpris:artUrl"
