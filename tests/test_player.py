"""Tests for AudioEngine -- the handlers Qt calls and the release guard."""
import pytest

pytest.importorskip("PySide6.QtMultimedia")

from PySide6.QtMultimedia import QMediaPlayer

from conftest import write_wav
from core.errors import PlaybackError
from player.player import AudioEngine


@pytest.fixture
def engine(tmp_path):
    e = AudioEngine(write_wav(tmp_path / "song.wav"))
    e.ended_with = []
    e.failures = []
    e.ended.connect(e.ended_with.append)
    e.failed.connect(lambda eng, msg: e.failures.append((eng, msg)))
    return e


def test_missing_file_raises_before_opening(tmp_path):
    with pytest.raises(PlaybackError):
        AudioEngine(str(tmp_path / "gone.wav"))


def test_reads_track_info(engine):
    assert engine.info.file_name == "song.wav"
    assert engine.info.duration_s == pytest.approx(0.1)


class TestNotifications:
    def test_end_of_media_emits_ended_with_self(self, engine):
        engine._on_media_status(QMediaPlayer.MediaStatus.EndOfMedia)
        assert engine.ended_with == [engine]

    def test_other_statuses_are_quiet(self, engine):
        engine._on_media_status(QMediaPlayer.MediaStatus.LoadedMedia)
        engine._on_media_status(QMediaPlayer.MediaStatus.BufferedMedia)
        assert engine.ended_with == []
        assert engine.failures == []

    def test_invalid_media_then_error_fails_once(self, engine):
        engine._on_media_status(QMediaPlayer.MediaStatus.InvalidMedia)
        engine._on_error(QMediaPlayer.Error.FormatError, "Unsupported format")

        assert len(engine.failures) == 1
        failed_engine, message = engine.failures[0]
        assert failed_engine is engine
        assert "song.wav" in message

    def test_repeated_errors_fail_once(self, engine):
        engine._on_error(QMediaPlayer.Error.ResourceError, "Device gone")
        engine._on_error(QMediaPlayer.Error.ResourceError, "Device gone")
        engine._on_media_status(QMediaPlayer.MediaStatus.InvalidMedia)

        assert engine.failures == [(engine, "Error playing audio: Device gone")]

    def test_no_error_is_ignored(self, engine):
        engine._on_error(QMediaPlayer.Error.NoError, "")
        assert engine.failures == []


class TestRelease:
    def test_release_twice_is_safe(self, engine):
        engine.release()
        engine.release()
        assert not engine.is_active()

    def test_not_active_before_start(self, engine):
        assert not engine.is_active()

    def test_notifications_after_release_are_dropped(self, engine):
        engine.release()

        engine._on_media_status(QMediaPlayer.MediaStatus.EndOfMedia)
        engine._on_media_status(QMediaPlayer.MediaStatus.InvalidMedia)
        engine._on_error(QMediaPlayer.Error.FormatError, "late")

        assert engine.ended_with == []
        assert engine.failures == []
