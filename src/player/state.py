# player/state.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto


class PlaybackStatus(Enum):
    IDLE = auto()
    LOADED = auto()
    PLAYING = auto()
    STOPPED = auto()


@dataclass(frozen=True)
class PlaybackState:
    index: int = -1                       # -1 = nothing selected
    status: PlaybackStatus = PlaybackStatus.IDLE

    def has_selection(self, count: int) -> bool:
        return 0 <= self.index < count


def with_status(state: PlaybackState, status: PlaybackStatus) -> PlaybackState:
    return replace(state, status=status)


def with_index(state: PlaybackState, index: int) -> PlaybackState:
    return replace(state, index=index)


def advance(state: PlaybackState, count: int) -> PlaybackState:
    """Next index, wrapping. From -1 this lands on 0."""
    if count <= 0:
        return state
    return replace(state, index=(state.index + 1) % count)
