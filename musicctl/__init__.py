"""
musicctl

Looks for a running music player on the D-Bus session bus and issues the
appropriate command to it (play/pause, stop, next, previous, mute, now
playing info and desktop notifications).

Package Structure:
- cli.py: Click entry point
- service.py: command dispatch across discovered players
- plugins/: player backends (MPRIS, RadioTray-NG, Shairport Sync)
- dbus.py: Gio session bus client
- notifications.py: freedesktop notification client

License: MIT
"""

__version__ = "0.3.0"
