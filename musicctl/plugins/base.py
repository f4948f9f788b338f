"""Abstract player interface shared by all backends."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import MusicInfo


class MusicCtl(ABC):
    """A controllable music player found on the session bus."""

    def __init__(self, proxy):
        self.proxy = proxy

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.proxy.destination})"

    @abstractmethod
    def play(self) -> None:
        """Toggle play/pause."""
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

    @abstractmethod
    def next(self) -> None:
        pass

    @abstractmethod
    def prev(self) -> None:
        pass

    @abstractmethod
    def mute(self) -> None:
        """Toggle mute."""
        pass

    @abstractmethod
    def name(self) -> str:
        """Display name; this is what --instance matches against."""
        pass

    @abstractmethod
    def info(self) -> Optional[MusicInfo]:
        """What is playing now, or None when the player has nothing loaded."""
        pass

    @abstractmethod
    def can_play(self) -> bool:
        """Whether this player is active enough to be picked for commands."""
        pass
