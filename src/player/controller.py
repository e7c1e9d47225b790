# src/player/controller.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from PySide6.QtCore import QObject, Signal, QTimer

from core.errors import InvalidIndexError, PlaybackError
from library.catalog import MediaCatalog
from player.state import PlaybackState, PlaybackStatus, advance, with_index, with_status

if TYPE_CHECKING:
    from player.player import AudioEngine

logger = logging.getLogger(__name__)

REFRESH_INTERVAL_MS = 100


class PlaybackController(QObject):
    """
    Transport for the jukebox: play / stop / rewind / next / select.

    Owns the current PlaybackState and the single live AudioEngine.
    Failures are raised as JukeboxError subclasses; the caller decides
    how to tell the user.
    """
    stateChanged = Signal(object)    # PlaybackState
    indexChanged = Signal(int)       # current track index (-1 = none)
    trackChanged = Signal(object)    # TrackInfo | None
    playbackFailed = Signal(str)     # asynchronous engine errors

    def __init__(
        self,
        catalog: MediaCatalog,
        engine_factory: Optional[Callable[[str], AudioEngine]] = None,
        refresh_timer=None,
        parent=None,
    ):
        super().__init__(parent)
        self._catalog = catalog
        if engine_factory is None:
            from player.player import AudioEngine as engine_factory
        self._engine_factory = engine_factory
        self._engine: Optional[AudioEngine] = None
        self._state = PlaybackState()

        if refresh_timer is None:
            refresh_timer = QTimer(self)
            refresh_timer.setInterval(REFRESH_INTERVAL_MS)
        self.refresh_timer = refresh_timer

    # ----------------------------
    # Read-only views
    # ----------------------------

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def catalog(self) -> MediaCatalog:
        return self._catalog

    @property
    def engine(self) -> Optional[AudioEngine]:
        return self._engine

    # ----------------------------
    # Transport
    # ----------------------------

    def play(self) -> None:
        count = len(self._catalog)
        if not self._state.has_selection(count):
            raise InvalidIndexError(self._state.index, count)

        # the previous stream must be gone before the next one opens
        self._release_engine()

        path = self._catalog.audio_tracks[self._state.index]
        try:
            engine = self._engine_factory(path)
        except PlaybackError:
            logger.warning("Could not open track %d: %s", self._state.index, path)
            self.refresh_timer.stop()
            self._set_state(with_status(self._state, PlaybackStatus.STOPPED))
            self.trackChanged.emit(None)
            raise

        self._engine = engine
        engine.ended.connect(self._on_engine_ended)
        engine.failed.connect(self._on_engine_failed)
        self._set_state(with_status(self._state, PlaybackStatus.LOADED))

        engine.start()
        self._set_state(with_status(self._state, PlaybackStatus.PLAYING))
        self.refresh_timer.start()
        self.trackChanged.emit(engine.info)
        logger.info("Playing track %d: %s", self._state.index, path)

    def stop(self) -> None:
        if self._engine is None or self._state.status != PlaybackStatus.PLAYING:
            return
        self._engine.halt()
        self.refresh_timer.stop()
        self._set_state(with_status(self._state, PlaybackStatus.STOPPED))

    def rewind(self) -> None:
        if self._engine is None:
            return
        self._engine.rewind()
        self._set_state(with_status(self._state, PlaybackStatus.PLAYING))
        self.refresh_timer.start()

    def next_track(self) -> None:
        self._set_index(advance(self._state, len(self._catalog)).index)
        self.play()

    def select(self, track_name: str | None) -> bool:
        """
        Play the track whose display name is `track_name`.
        Returns False (and changes nothing) when no track matches.
        """
        index = self._catalog.index_of(track_name)
        if index is None:
            return False
        self._set_index(index)
        self.play()
        return True

    def set_catalog(self, catalog: MediaCatalog) -> None:
        self._release_engine()
        self.refresh_timer.stop()
        self._catalog = catalog
        self._set_state(PlaybackState())
        self.indexChanged.emit(self._state.index)
        self.trackChanged.emit(None)

    def shutdown(self) -> None:
        self.refresh_timer.stop()
        self._release_engine()

    # ----------------------------
    # Engine notifications
    # ----------------------------

    def _on_engine_ended(self, engine) -> None:
        # only the timer and status change here; ownership stays with play/stop
        if engine is not self._engine:
            return
        self.refresh_timer.stop()
        if self._state.status == PlaybackStatus.PLAYING:
            self._set_state(with_status(self._state, PlaybackStatus.STOPPED))

    def _on_engine_failed(self, engine, message: str) -> None:
        if engine is not self._engine:
            return
        self.refresh_timer.stop()
        self._set_state(with_status(self._state, PlaybackStatus.STOPPED))
        self.playbackFailed.emit(message)

    # ----------------------------
    # Helpers
    # ----------------------------

    def _release_engine(self) -> None:
        engine, self._engine = self._engine, None
        if engine is not None:
            engine.release()

    def _set_index(self, index: int) -> None:
        if index == self._state.index:
            return
        self._state = with_index(self._state, index)
        self.indexChanged.emit(index)

    def _set_state(self, state: PlaybackState) -> None:
        if state == self._state:
            return
        self._state = state
        self.stateChanged.emit(state)
