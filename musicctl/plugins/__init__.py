from .base import MusicCtl
from .mpris import MprisPlayer
from .radiotray import RadioTrayPlayer
from .shairportsync import ShairportSyncPlayer
from .registry import get_all, first_active

__all__ = [
    "MusicCtl",
    "MprisPlayer",
    "RadioTrayPlayer",
    "ShairportSyncPlayer",
    "get_all",
    "first_active",
]
