from PySide6.QtWidgets import QFileDialog


def ask_media_folder(parent, current: str | None = None) -> str | None:
    """Directory picker seeded with the current media folder. None on cancel."""
    path = QFileDialog.getExistingDirectory(
        parent, "Select Media Folder", current or ""
    )
    return path or None
