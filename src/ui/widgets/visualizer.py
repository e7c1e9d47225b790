# ui/widgets/visualizer.py
from __future__ import annotations

import random

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QWidget, QSizePolicy

SHAPES_PER_FRAME = 5
MAX_SHAPE_SIZE = 100


class VisualizerWidget(QWidget):
    """Decorative: a handful of random coloured circles per repaint."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("Visualizer")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(60)
        self.setStyleSheet("QWidget#Visualizer { background-color: rgb(30, 30, 30); }")

    def paintEvent(self, event):
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)

        w = max(1, self.width())
        h = max(1, self.height())
        for _ in range(SHAPES_PER_FRAME):
            painter.setBrush(QColor(random.randint(0, 0xFFFFFF)))
            size = random.randint(0, MAX_SHAPE_SIZE)
            painter.drawEllipse(random.randrange(w), random.randrange(h), size, size)

        painter.end()
