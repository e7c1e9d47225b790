# library/track_info.py
from __future__ import annotations

import os
import logging
from dataclasses import dataclass

from mutagen import MutagenError
from mutagen.wave import WAVE

from core.errors import PlaybackError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackInfo:
    path: str
    file_name: str
    title: str
    duration_s: float

    def display(self) -> str:
        s = max(0, int(round(self.duration_s)))
        return f"{self.title} — {s // 60}:{s % 60:02d}"


def _first(tags, key: str) -> str | None:
    if tags is None:
        return None
    v = tags.get(key)
    if v is None:
        return None
    text = getattr(v, "text", v)
    if isinstance(text, (list, tuple)):
        text = text[0] if text else None
    s = str(text).strip() if text is not None else ""
    return s or None


def probe_track(path: str) -> TrackInfo:
    """
    Parse the WAV header of `path`.
    Raises PlaybackError if the file is missing or not a decodable WAV.
    """
    if not os.path.isfile(path):
        raise PlaybackError(f"Audio file not found: {path}")

    try:
        audio = WAVE(path)
    except (MutagenError, OSError, KeyError, ValueError) as e:
        logger.warning("Cannot decode %s: %s", path, e)
        raise PlaybackError(f"Error playing audio: cannot decode {os.path.basename(path)} ({e})") from e

    file_name = os.path.basename(path)
    # WAV files may carry an ID3 chunk with a title (TIT2)
    title = _first(audio.tags, "TIT2") or file_name

    duration = 0.0
    if getattr(audio, "info", None) and getattr(audio.info, "length", None):
        duration = float(audio.info.length)

    return TrackInfo(path=path, file_name=file_name, title=title, duration_s=duration)
