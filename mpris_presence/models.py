# mpris_presence/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .text import format_time


class PlaybackStatus(str, Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str) -> "PlaybackStatus":
        for status in cls:
            if status.value == value:
                return status
        return cls.UNKNOWN


@dataclass(frozen=True)
class Snapshot:
    service_id: str
    status: PlaybackStatus = PlaybackStatus.UNKNOWN
    position_seconds: int = 0
    title: Optional[str] = None
    album: Optional[str] = None
    artists: Tuple[str, ...] = ()
    url: Optional[str] = None
    art_url: Optional[str] = None

    @property
    def playing(self) -> bool:
        return self.status is PlaybackStatus.PLAYING

    @property
    def position(self) -> str:
        return format_time(self.position_seconds)


@dataclass(frozen=True)
class Config:
    keyword_whitelist: Tuple[str, ...] = ()
    use_whitelist: bool = False
    play_no_url: bool = True
    artist_keyword_blacklist: Tuple[str, ...] = ()
    use_artist_blacklist: bool = False
    embolden_titles: bool = False


@dataclass
class RememberedPosition:
    """Last position seen while playing; shown in the paused state line."""
    value: str = "0"
