import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.errors import CatalogError
from core.state import AppState
from library.catalog import scan_media_folder
from player.controller import PlaybackController
from ui.main_window import MainWindow

logger = logging.getLogger("jukebox")

def init_app_state(app_state: AppState) -> AppState:
    """
    Load config and scan the media folder.
    Raises CatalogError when the folder is missing or holds no .wav files.
    """
    app_state.load_config()

    app_state.catalog = scan_media_folder(app_state.config.media_folder)
    app_state.controller = PlaybackController(app_state.catalog)
    return app_state

def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    qt_app = QApplication(sys.argv)

    app_state = AppState()
    try:
        init_app_state(app_state)
    except CatalogError as e:
        logger.error("Startup failed: %s", e)
        QMessageBox.critical(None, "Enhanced Jukebox", app_state.fatal_message(e))
        return 1

    main_window = MainWindow(app_state)
    main_window.show()

    return qt_app.exec()

if __name__ == "__main__":
    raise SystemExit(main())
