# ui/player_bar.py
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton

from player.state import PlaybackState, PlaybackStatus


class PlayerBar(QWidget):
    """Bottom control row: the transport buttons and a now-playing line."""
    playClicked = Signal()
    stopClicked = Signal()
    rewindClicked = Signal()
    nextClicked = Signal()
    chooseClicked = Signal()
    folderClicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 6, 8, 6)
        root.setSpacing(4)

        self.lbl_title = QLabel("Nothing playing")
        self.lbl_title.setObjectName("NowPlaying")
        self.lbl_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_title.setTextInteractionFlags(Qt.TextSelectableByMouse)
        root.addWidget(self.lbl_title)

        buttons = QHBoxLayout()
        buttons.setSpacing(8)
        buttons.addStretch(1)

        self.btn_play = self._button("Play", self.playClicked, buttons)
        self.btn_stop = self._button("Stop", self.stopClicked, buttons)
        self.btn_rewind = self._button("Rewind", self.rewindClicked, buttons)
        self.btn_next = self._button("Next Track", self.nextClicked, buttons)
        self.btn_choose = self._button("Choose a Jam!", self.chooseClicked, buttons)
        self.btn_folder = self._button("Media Folder…", self.folderClicked, buttons)
        self.btn_folder.setObjectName("BtnFolder")

        buttons.addStretch(1)
        root.addLayout(buttons)

        self.setObjectName("PlayerBar")
        self._apply_styles()

    def _button(self, text: str, signal, layout) -> QPushButton:
        btn = QPushButton(text)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.clicked.connect(signal.emit)
        layout.addWidget(btn)
        return btn

    # --- controller updates ---
    def on_track_changed(self, info):
        if info:
            self.lbl_title.setText(info.display())
        else:
            self.lbl_title.setText("Nothing playing")

    def on_state_changed(self, state: PlaybackState):
        playing = state.status == PlaybackStatus.PLAYING
        self.btn_stop.setEnabled(playing)
        self.btn_rewind.setEnabled(state.status in (PlaybackStatus.PLAYING, PlaybackStatus.STOPPED))

    def _apply_styles(self):
        self.setStyleSheet("""
        QWidget#PlayerBar {
            background-color: rgb(50, 50, 50);
        }

        QPushButton {
            border: 1px solid #5a5a5a;
            background: #3a3a3a;
            color: #e5e5e5;
            padding: 6px 10px;
            border-radius: 8px;
        }
        QPushButton:hover {
            border-color: #9a9a9a;
            background: #444444;
        }
        QPushButton:pressed {
            background: #2c2c2c;
        }
        QPushButton:disabled {
            color: #7a7a7a;
        }
        QPushButton#BtnFolder {
            background: transparent;
        }

        QLabel#NowPlaying {
            color: #d0d0d0;
            font-size: 12px;
        }
        """)
