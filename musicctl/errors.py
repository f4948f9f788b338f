"""
Exception hierarchy for musicctl.

Everything raised on purpose derives from MusicCtlError so the CLI can
report it as a single-line error and exit non-zero.
"""


class MusicCtlError(Exception):
    """Base exception for all musicctl errors."""
    pass


class DBusError(MusicCtlError):
    """A session bus connection or method call failed."""
    pass


class PlayerStateError(MusicCtlError):
    """A player reported state that could not be decoded."""
    pass


class NoActivePlayerError(MusicCtlError):
    """No discovered player is currently able to play."""

    def __init__(self, message: str = "No active players available"):
        super().__init__(message)


class ConfigError(MusicCtlError):
    """A configuration value is invalid."""
    pass
