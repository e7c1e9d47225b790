import json

import pytest

from core.config import ConfigStore, DEFAULT_MEDIA_FOLDER
from core.errors import CatalogError
from core.state import AppState, Notify
from library.catalog import MediaCatalog, scan_media_folder
from player.controller import PlaybackController
from player.state import PlaybackState, PlaybackStatus, advance, with_index, with_status


class TestPlaybackState:
    def test_advance_from_unselected(self):
        assert advance(PlaybackState(), 4).index == 0

    def test_advance_wraps(self):
        assert advance(PlaybackState(index=3), 4).index == 0

    def test_advance_keeps_status(self):
        s = PlaybackState(index=1, status=PlaybackStatus.PLAYING)
        assert advance(s, 4) == PlaybackState(index=2, status=PlaybackStatus.PLAYING)

    def test_advance_empty_catalog_is_identity(self):
        s = PlaybackState()
        assert advance(s, 0) is s

    def test_transitions_do_not_mutate(self):
        s = PlaybackState()
        with_index(s, 2)
        with_status(s, PlaybackStatus.STOPPED)
        assert s == PlaybackState()

    def test_has_selection(self):
        assert not PlaybackState().has_selection(3)
        assert PlaybackState(index=2).has_selection(3)
        assert not PlaybackState(index=3).has_selection(3)


class TestAppState:
    def _app_state(self, tmp_path, engines, timer, tracks=("/m/a.wav",)):
        state = AppState(ConfigStore(str(tmp_path / "cfg.json")))
        state.catalog = MediaCatalog(audio_tracks=tracks)
        state.controller = PlaybackController(state.catalog, engine_factory=engines, refresh_timer=timer)
        return state

    def test_load_config_queues_warning_on_bad_file(self, tmp_path):
        (tmp_path / "cfg.json").write_text("garbage", encoding="utf-8")
        state = AppState(ConfigStore(str(tmp_path / "cfg.json")))

        state.load_config()

        assert state.config.media_folder == DEFAULT_MEDIA_FOLDER
        assert len(state.queued_notifications) == 1
        assert state.queued_notifications[0].notify_type == "warn"

    def test_load_config_missing_file_is_quiet(self, tmp_path):
        state = AppState(ConfigStore(str(tmp_path / "cfg.json")))
        state.load_config()
        assert state.queued_notifications == []

    def test_change_media_folder(self, tmp_path, media_dir, engines, timer):
        state = self._app_state(tmp_path, engines, timer)
        notes: list[Notify] = []
        state.notification.connect(notes.append)
        state.controller.next_track()

        assert state.change_media_folder(str(media_dir)) is True

        assert state.config.media_folder == str(media_dir)
        assert len(state.controller.catalog) == 3
        assert state.controller.state == PlaybackState()
        assert engines.live == 0
        saved = json.loads((tmp_path / "cfg.json").read_text(encoding="utf-8"))
        assert saved["media_folder"] == str(media_dir)
        assert notes[-1].notify_type == "success"

    def test_change_media_folder_failure_keeps_catalog(self, tmp_path, engines, timer):
        state = self._app_state(tmp_path, engines, timer)
        notes: list[Notify] = []
        state.notification.connect(notes.append)
        before = state.catalog

        assert state.change_media_folder(str(tmp_path / "missing")) is False

        assert state.catalog is before
        assert state.controller.catalog is before
        assert state.config.media_folder == DEFAULT_MEDIA_FOLDER
        assert notes[-1].notify_type == "error"
        assert not (tmp_path / "cfg.json").exists()

    def test_save_config_failure_notifies(self, tmp_path):
        state = AppState(ConfigStore(str(tmp_path)))
        notes: list[Notify] = []
        state.notification.connect(notes.append)

        assert state.save_config() is False
        assert notes[-1].notify_type == "error"

    def test_fatal_message_keeps_config_warning(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "cfg.json").write_text("garbage", encoding="utf-8")
        state = AppState(ConfigStore(str(tmp_path / "cfg.json")))
        state.load_config()

        with pytest.raises(CatalogError) as exc:
            scan_media_folder(state.config.media_folder)
        text = state.fatal_message(exc.value)

        assert text.startswith("Media directory not found")
        assert "Error loading config. Using defaults." in text

    def test_fatal_message_without_warnings(self, tmp_path):
        state = AppState(ConfigStore(str(tmp_path / "cfg.json")))
        assert state.fatal_message(CatalogError("boom")) == "boom"
