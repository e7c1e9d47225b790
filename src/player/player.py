# src/player/player.py
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal, QUrl
from PySide6.QtMultimedia import QMediaPlayer, QAudioOutput

from library.track_info import TrackInfo, probe_track

logger = logging.getLogger(__name__)


class AudioEngine(QObject):
    """
    One open audio stream. The controller creates one per track and
    releases it before opening the next, so at most one is ever live.
    """
    ended = Signal(object)          # emits self at end of stream
    failed = Signal(object, str)    # emits self, message

    def __init__(self, path: str, parent=None):
        super().__init__(parent)

        # raises PlaybackError before any Qt multimedia object exists
        self.info: TrackInfo = probe_track(path)
        self.path = path
        self._released = False
        self._failed = False

        self.audio = QAudioOutput(self)
        self.media = QMediaPlayer(self)
        self.media.setAudioOutput(self.audio)

        self.media.mediaStatusChanged.connect(self._on_media_status)
        self.media.errorOccurred.connect(self._on_error)

        self.media.setSource(QUrl.fromLocalFile(path))
        logger.info("Opened %s (%.1fs)", path, self.info.duration_s)

    # ----------------------------
    # Qt handlers
    # ----------------------------

    def _on_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if self._released:
            return
        if status == QMediaPlayer.MediaStatus.EndOfMedia:
            self.ended.emit(self)
        elif status == QMediaPlayer.MediaStatus.InvalidMedia:
            self._fail(f"Error playing audio: cannot decode {self.info.file_name}")

    def _on_error(self, error: QMediaPlayer.Error, message: str) -> None:
        if self._released or error == QMediaPlayer.Error.NoError:
            return
        logger.warning("Playback error on %s: %s", self.path, message)
        self._fail(f"Error playing audio: {message or error.name}")

    def _fail(self, message: str) -> None:
        # Qt reports one bad file as both InvalidMedia and errorOccurred
        if self._failed:
            return
        self._failed = True
        self.failed.emit(self, message)

    # ----------------------------
    # Public API
    # ----------------------------

    def start(self) -> None:
        self.media.play()

    def halt(self) -> None:
        # pause keeps the position, so rewind/play semantics stay simple
        self.media.pause()

    def rewind(self) -> None:
        self.media.setPosition(0)
        self.media.play()

    def is_active(self) -> bool:
        if self._released:
            return False
        return self.media.playbackState() == QMediaPlayer.PlaybackState.PlayingState

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self.media.stop()
        self.media.setSource(QUrl())
        self.deleteLater()
        logger.info("Released %s", self.path)
