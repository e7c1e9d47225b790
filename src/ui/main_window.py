from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout
from PySide6.QtGui import QShortcut, QKeySequence
import logging

from core.errors import JukeboxError
from library.covers import resolve_cover
from ui.player_bar import PlayerBar
from ui.widgets.cover_label import CoverLabel
from ui.widgets.visualizer import VisualizerWidget
from ui.widgets.toast import ToastManager
from ui.dialogs.choose_jam_dialog import ask_track_name
from ui.dialogs.media_folder_dialog import ask_media_folder

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, app_state):
        super().__init__()
        self.setWindowTitle("Enhanced Jukebox")
        self.resize(600, 400)
        self.app_state = app_state
        self.controller = app_state.controller

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)
        self.layout.setContentsMargins(0, 0, 0, 0)
        self.layout.setSpacing(0)

        # --- Cover (top) ---
        self.cover = CoverLabel()
        self.layout.addWidget(self.cover)

        # --- Visualizer (centre) ---
        self.visualizer = VisualizerWidget()
        self.layout.addWidget(self.visualizer, 1)
        self.controller.refresh_timer.timeout.connect(self.visualizer.update)

        # --- Controls (bottom) ---
        self.player_bar = PlayerBar(self)
        self.layout.addWidget(self.player_bar)

        self.player_bar.playClicked.connect(self.on_play)
        self.player_bar.stopClicked.connect(self.controller.stop)
        self.player_bar.rewindClicked.connect(self.controller.rewind)
        self.player_bar.nextClicked.connect(self.on_next)
        self.player_bar.chooseClicked.connect(self.on_choose_jam)
        self.player_bar.folderClicked.connect(self.on_change_folder)

        # --- Controller signals ---
        self.controller.indexChanged.connect(self._update_cover)
        self.controller.trackChanged.connect(self.player_bar.on_track_changed)
        self.controller.stateChanged.connect(self.player_bar.on_state_changed)
        self.controller.playbackFailed.connect(lambda msg: self.app_state.notify(msg, "error"))

        # --- Shortcuts ---
        QShortcut(QKeySequence("Space"), self, activated=self._toggle_play_stop)
        QShortcut(QKeySequence("Ctrl+Right"), self, activated=self.on_next)
        QShortcut(QKeySequence("Ctrl+R"), self, activated=self.controller.rewind)

        self.toasts = ToastManager(self)
        self.app_state.notification.connect(self._on_notify)

        self.player_bar.on_state_changed(self.controller.state)
        self._update_cover(self.controller.state.index)
        self.show_queued_notifications()

    # ------------------ transport ------------------
    def _run(self, action):
        try:
            action()
        except JukeboxError as e:
            logger.info("%s failed: %s", getattr(action, "__name__", action), e)
            self.app_state.notify(str(e), "error")

    def on_play(self):
        self._run(self.controller.play)

    def on_next(self):
        self._run(self.controller.next_track)

    def on_choose_jam(self):
        catalog = self.controller.catalog
        name = ask_track_name(self, catalog.display_names(), self.controller.state.index)
        if name is None:
            return
        self._run(lambda: self.controller.select(name))

    def _toggle_play_stop(self):
        if self.controller.engine is not None and self.controller.engine.is_active():
            self.controller.stop()
        else:
            self.on_play()

    # ------------------ media folder ------------------
    def on_change_folder(self):
        folder = ask_media_folder(self, self.app_state.config.media_folder)
        if folder is None:
            return
        self.app_state.change_media_folder(folder)

    # ------------------ cover ------------------
    def _update_cover(self, index: int):
        catalog = self.controller.catalog
        track_path = catalog.audio_tracks[index] if 0 <= index < len(catalog) else None
        self.cover.show_cover(resolve_cover(
            index,
            catalog.cover_images,
            self.app_state.config.media_folder,
            track_path=track_path,
        ))

    # ------------------ notifications ------------------
    def _on_notify(self, n):
        # n is core.state.Notify
        msg = getattr(n, "message", "") or ""
        if not msg:
            return
        kind = getattr(n, "notify_type", "info") or "info"
        timeout = 6000 if kind == "error" else 4000
        self.toasts.show_toast(msg, notify_type=kind, timeout_ms=timeout)

    def show_queued_notifications(self):
        for n in self.app_state.queued_notifications:
            self._on_notify(n)
        self.app_state.queued_notifications.clear()

    # ------------------ lifecycle ------------------
    def closeEvent(self, event):
        self.controller.shutdown()
        self.app_state.save_config()
        super().closeEvent(event)
