# library/covers.py
from __future__ import annotations

import os
from typing import Optional, Sequence

DEFAULT_COVER = "default.jpg"


def _stem(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0].lower()


def resolve_cover(
    index: int,
    cover_images: Sequence[str],
    media_folder: str,
    track_path: Optional[str] = None,
) -> Optional[str]:
    """
    Pick the cover to show for the track at `index`.

    Order:
      - a cover sharing the track's file stem (only when track_path is given)
      - cover_images[index] (covers pair with tracks by sorted position)
      - <media_folder>/default.jpg if it exists
      - None
    """
    if track_path:
        want = _stem(track_path)
        for cover in cover_images:
            if _stem(cover) == want:
                return cover

    if 0 <= index < len(cover_images):
        return cover_images[index]

    default = os.path.join(media_folder, DEFAULT_COVER)
    if os.path.isfile(default):
        return os.path.abspath(default)

    return None
