# ui/widgets/cover_label.py
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel

logger = logging.getLogger(__name__)

COVER_SIZE = QSize(300, 300)


class CoverLabel(QLabel):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("Cover")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFixedHeight(COVER_SIZE.height())
        self._path: str | None = None

    @property
    def cover_path(self) -> str | None:
        return self._path

    def show_cover(self, path: str | None) -> None:
        self._path = path
        if not path:
            self.clear()
            return

        pm = QPixmap(path)
        if pm.isNull():
            logger.warning("Cannot load cover image %s", path)
            self.clear()
            return

        self.setPixmap(pm.scaled(
            COVER_SIZE,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        ))
