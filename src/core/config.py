# core/config.py
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass

from core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "jukebox_config.json"
CONFIG_VERSION = 1
DEFAULT_MEDIA_FOLDER = "Songs and cover images"


@dataclass
class JukeboxConfig:
    media_folder: str = DEFAULT_MEDIA_FOLDER

    def set_media_folder(self, media_folder: str) -> None:
        self.media_folder = media_folder

    def to_dict(self) -> dict:
        return {"version": CONFIG_VERSION, "media_folder": self.media_folder}

    @classmethod
    def from_dict(cls, data) -> "JukeboxConfig":
        if not isinstance(data, dict):
            raise ConfigError("Config file does not contain a JSON object")

        version = data.get("version")
        if version != CONFIG_VERSION:
            raise ConfigError(f"Unsupported config version: {version!r}")

        media_folder = data.get("media_folder")
        if not isinstance(media_folder, str) or not media_folder:
            raise ConfigError("Config file has no media_folder")

        return cls(media_folder=media_folder)


class ConfigStore:
    """
    Reads and writes the jukebox config file.

    The file is a small JSON object:

        {"version": 1, "media_folder": "Songs and cover images"}

    Relative paths resolve against the current working directory.
    """

    def __init__(self, path: str = CONFIG_FILE):
        self.path = path

    def load(self) -> tuple[JukeboxConfig, ConfigError | None]:
        """
        Returns (config, error). A missing file is not an error; anything
        unreadable yields the default config together with the error so the
        caller can tell the user.
        """
        if not os.path.exists(self.path):
            logger.info("No config at %s, using defaults", self.path)
            return JukeboxConfig(), None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            config = JukeboxConfig.from_dict(data)
        except (OSError, ValueError) as e:
            logger.warning("Failed to load config from %s: %s", self.path, e)
            return JukeboxConfig(), ConfigError(f"Error loading config. Using defaults. ({e})")
        except ConfigError as e:
            logger.warning("Invalid config in %s: %s", self.path, e)
            return JukeboxConfig(), ConfigError(f"Error loading config. Using defaults. ({e})")

        logger.info("Loaded config from %s: media_folder=%s", self.path, config.media_folder)
        return config, None

    def save(self, config: JukeboxConfig) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2)
                f.write("\n")
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to save config to %s: %s", self.path, e)
            raise ConfigError(f"Error saving config: {e}") from e

        logger.info("Saved config to %s", self.path)
