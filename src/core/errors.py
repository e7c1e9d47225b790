# core/errors.py
from __future__ import annotations


class JukeboxError(Exception):
    """Base class for every error the jukebox reports to the user."""


class ConfigError(JukeboxError):
    pass


class CatalogError(JukeboxError):
    pass


class MissingDirectoryError(CatalogError):
    def __init__(self, directory: str):
        super().__init__(f"Media directory not found: {directory}")
        self.directory = directory


class NoAudioFilesError(CatalogError):
    def __init__(self, directory: str):
        super().__init__(f"No .wav files found in the media directory: {directory}")
        self.directory = directory


class PlaybackError(JukeboxError):
    pass


class InvalidIndexError(PlaybackError):
    def __init__(self, index: int, count: int):
        if index < 0:
            msg = "No track selected. Press Next Track or Choose a Jam! first."
        else:
            msg = f"Track index {index} is out of range (0..{count - 1})"
        super().__init__(msg)
        self.index = index
        self.count = count
