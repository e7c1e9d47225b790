from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import Qt, QEvent, QTimer, QEasingCurve, QPropertyAnimation
from PySide6.QtWidgets import (
    QWidget,
    QFrame,
    QLabel,
    QHBoxLayout,
    QToolButton,
    QGraphicsOpacityEffect,
)

FADE_MS = 180


@dataclass(frozen=True)
class ToastData:
    message: str
    notify_type: str = "info"  # "info" | "success" | "warning" | "error"
    timeout_ms: int = 4000


_PALETTE = {
    "success": ("#1c3b26", "#3fae5a"),
    "warning": ("#3b3018", "#e0a526"),
    "error": ("#3b1c1c", "#e05252"),
    "info": ("#262626", "#8a8a8a"),
}


def _normalize_kind(kind: str | None) -> str:
    kind = (kind or "info").lower()
    if kind == "warn":
        kind = "warning"
    return kind if kind in _PALETTE else "info"


class ToastWidget(QFrame):
    def __init__(self, data: ToastData, manager: "ToastManager"):
        super().__init__(manager)
        self.data = data
        self._manager = manager

        bg, border = _PALETTE[_normalize_kind(data.notify_type)]
        self.setObjectName("Toast")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"""
        QFrame#Toast {{ background: {bg}; border: 1px solid {border}; border-radius: 10px; }}
        QLabel {{ color: #f0f0f0; font-size: 12px; }}
        QToolButton {{ border: none; background: transparent; color: #f0f0f0; }}
        """)

        root = QHBoxLayout(self)
        root.setContentsMargins(12, 8, 8, 8)

        self.lbl = QLabel(data.message)
        self.lbl.setWordWrap(True)

        self.btn_close = QToolButton()
        self.btn_close.setText("✕")
        self.btn_close.clicked.connect(lambda: self._manager.dismiss(self))

        root.addWidget(self.lbl, 1)
        root.addWidget(self.btn_close, 0, Qt.AlignmentFlag.AlignTop)

        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(0.0)
        self.setGraphicsEffect(self._opacity)
        self._anim: Optional[QPropertyAnimation] = None

    def _fade(self, start: float, end: float, on_done=None):
        self._anim = QPropertyAnimation(self._opacity, b"opacity", self)
        self._anim.setDuration(FADE_MS)
        self._anim.setStartValue(start)
        self._anim.setEndValue(end)
        self._anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        if on_done is not None:
            self._anim.finished.connect(on_done)
        self._anim.start()

    def fade_in(self):
        self.show()
        self._fade(0.0, 1.0)

    def fade_out(self, on_done):
        self._fade(self._opacity.opacity(), 0.0, on_done)


class ToastManager(QWidget):
    """
    Transparent overlay that stacks toasts in the top-right corner of `host`.
    """
    def __init__(self, host: QWidget, max_visible: int = 4):
        super().__init__(host)
        self.host = host
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, False)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground, True)

        self._toasts: list[ToastWidget] = []
        self._margin = 12
        self._spacing = 8
        self._max_visible = max_visible
        self.hide()

        host.installEventFilter(self)

    def eventFilter(self, obj, event):
        if obj is self.host and event.type() == QEvent.Type.Resize:
            self._layout()
        return super().eventFilter(obj, event)

    def show_toast(self, message: str, notify_type: str = "info", timeout_ms: int = 4000):
        toast = ToastWidget(ToastData(message, notify_type, timeout_ms), self)
        self._toasts.insert(0, toast)

        while len(self._toasts) > self._max_visible:
            old = self._toasts.pop()
            old.hide()
            old.deleteLater()

        self._layout()
        toast.fade_in()
        QTimer.singleShot(max(500, int(timeout_ms)), lambda: self.dismiss(toast))

    def dismiss(self, toast: ToastWidget):
        if toast not in self._toasts:
            return
        self._toasts.remove(toast)

        def _remove():
            toast.hide()
            toast.deleteLater()
            self._layout()

        toast.fade_out(_remove)

    def _layout(self):
        if not self._toasts:
            self.hide()
            return

        width = min(360, max(220, self.host.width() // 2))
        y = 0
        for t in self._toasts:
            t.setFixedWidth(width)
            t.adjustSize()
            t.move(0, y)
            y += t.height() + self._spacing

        # overlay only covers the stack so clicks elsewhere reach the window
        self.setGeometry(self.host.width() - width - self._margin, self._margin, width, y)
        self.show()
        self.raise_()
