from __future__ import annotations
from pathlib import Path
from re import sub as _re_sub


def snapshot_path(playlist_id: str | int, base_path: Path) -> Path:
    safe = _re_sub(r"[^\w\-]+", "_", str(playlist_id)).strip("_")
    if not safe:
        safe = "playlist"
    return base_path / f"playlist_{safe}_tracks.json"
