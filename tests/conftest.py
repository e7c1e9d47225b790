import os
import wave

import pytest
from PySide6.QtCore import QCoreApplication, QObject, Signal

from core.errors import PlaybackError
from library.track_info import TrackInfo


# widget tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    # widget tests need a QApplication; everything else only needs signals
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError:
        return QCoreApplication.instance() or QCoreApplication([])
    return QApplication.instance() or QApplication([])


def write_wav(path, frames: int = 800, rate: int = 8000):
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(rate)
        w.writeframes(b"\x00\x00" * frames)
    return str(path)


@pytest.fixture
def media_dir(tmp_path):
    """Three tracks, two covers, plus some noise."""
    d = tmp_path / "media"
    d.mkdir()
    for name in ("b_song.wav", "a_song.WAV", "c_song.wav"):
        write_wav(d / name)
    (d / "a_song.jpg").write_bytes(b"jpg")
    (d / "b_song.JPG").write_bytes(b"jpg")
    (d / "notes.txt").write_text("not media")
    (d / "sub.wav").mkdir()
    return d


class FakeTimer(QObject):
    timeout = Signal()

    def __init__(self):
        super().__init__()
        self.running = False
        self.starts = 0

    def start(self):
        self.running = True
        self.starts += 1

    def stop(self):
        self.running = False


class FakeEngine(QObject):
    ended = Signal(object)
    failed = Signal(object, str)

    def __init__(self, path, registry):
        super().__init__()
        if "broken" in os.path.basename(path):
            raise PlaybackError(f"Error playing audio: cannot decode {path}")
        name = os.path.basename(path)
        self.info = TrackInfo(path=path, file_name=name, title=name, duration_s=61.0)
        self.path = path
        self.active = False
        self.released = False
        self.rewound = False
        self._registry = registry
        registry.live += 1
        registry.max_live = max(registry.max_live, registry.live)
        registry.created.append(self)

    def start(self):
        # the previous engine must already be released at this point
        assert self._registry.live == 1
        self.active = True

    def halt(self):
        self.active = False

    def rewind(self):
        self.rewound = True
        self.active = True

    def is_active(self):
        return self.active and not self.released

    def release(self):
        if self.released:
            return
        self.released = True
        self.active = False
        self._registry.live -= 1


class EngineRegistry:
    def __init__(self):
        self.live = 0
        self.max_live = 0
        self.created: list[FakeEngine] = []

    def __call__(self, path):
        return FakeEngine(path, self)


@pytest.fixture
def engines():
    return EngineRegistry()


@pytest.fixture
def timer():
    return FakeTimer()
