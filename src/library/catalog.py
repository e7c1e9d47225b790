# library/catalog.py
from __future__ import annotations

import os
import logging
from dataclasses import dataclass

from core.errors import MissingDirectoryError, NoAudioFilesError

logger = logging.getLogger(__name__)

AUDIO_EXTS = {".wav"}
COVER_EXTS = {".jpg"}


@dataclass(frozen=True)
class MediaCatalog:
    audio_tracks: tuple[str, ...]
    cover_images: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.audio_tracks)

    def display_names(self) -> list[str]:
        return [os.path.basename(p) for p in self.audio_tracks]

    def index_of(self, name: str | None) -> int | None:
        """
        Map a display name back to a track index.
        Exact file name wins; otherwise the first path ending with `name`.
        """
        if not name:
            return None
        for i, p in enumerate(self.audio_tracks):
            if os.path.basename(p) == name:
                return i
        for i, p in enumerate(self.audio_tracks):
            if p.endswith(name):
                return i
        return None


def _list_by_ext(directory: str, exts: set[str]) -> list[str]:
    paths: list[str] = []
    for fn in os.listdir(directory):
        full = os.path.join(directory, fn)
        if not os.path.isfile(full):
            continue
        if os.path.splitext(fn)[1].lower() in exts:
            paths.append(full)
    return sorted(paths)


def scan_media_folder(directory: str) -> MediaCatalog:
    if not directory or not os.path.isdir(directory):
        raise MissingDirectoryError(directory)

    root = os.path.abspath(directory)

    audio = _list_by_ext(root, AUDIO_EXTS)
    if not audio:
        raise NoAudioFilesError(directory)

    covers = _list_by_ext(root, COVER_EXTS)

    logger.info("Scanned %s: %d tracks, %d covers", root, len(audio), len(covers))
    return MediaCatalog(audio_tracks=tuple(audio), cover_images=tuple(covers))
