from __future__ import annotations
import logging
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

from core.config import ConfigStore, JukeboxConfig
from core.errors import CatalogError, ConfigError
from library.catalog import scan_media_folder

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warn/error

class AppState(QObject):
    notification = Signal(object)   # emits Notify

    def __init__(self, config_store: ConfigStore | None = None):
        super().__init__()
        self.config_store = config_store or ConfigStore()
        self.config = JukeboxConfig()
        self.catalog = None
        self.controller = None
        self.queued_notifications: list[Notify] = []

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))

    def load_config(self) -> None:
        self.config, error = self.config_store.load()
        if error is not None:
            # no window yet; MainWindow drains the queue once it is shown
            self.queued_notifications.append(Notify(message=str(error), notify_type="warn"))

    def fatal_message(self, error: Exception) -> str:
        """
        Text for the startup error dialog. Warnings queued for the window
        are appended, since that window will never open.
        """
        lines = [str(error)]
        for n in self.queued_notifications:
            logger.warning("Queued at startup: %s", n.message)
            lines.append(n.message)
        return "\n\n".join(lines)

    def save_config(self) -> bool:
        try:
            self.config_store.save(self.config)
        except ConfigError as e:
            self.notify(str(e), "error")
            return False
        return True

    def change_media_folder(self, folder: str) -> bool:
        """Rescan from `folder`; keep the current catalog if the scan fails."""
        try:
            catalog = scan_media_folder(folder)
        except CatalogError as e:
            self.notify(str(e), "error")
            return False

        self.config.set_media_folder(folder)
        self.catalog = catalog
        if self.controller is not None:
            self.controller.set_catalog(catalog)

        self.save_config()
        self.notify(f"Loaded {len(catalog)} track(s) from {folder}", "success")
        return True
