from PySide6.QtWidgets import QInputDialog


def ask_track_name(parent, names: list[str], current: int = -1) -> str | None:
    """
    Show the track list and return the chosen display name,
    or None if the user cancelled.
    """
    if not names:
        return None
    start = current if 0 <= current < len(names) else 0
    name, ok = QInputDialog.getItem(
        parent, "Song Selector", "Choose a Jam!", names, start, False
    )
    if not ok or not name:
        return None
    return name
