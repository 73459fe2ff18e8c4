import os
from pathlib import Path
from typing import List

from core.config import VIDEO_EXTENSIONS
from schemas.video import Catalog, VideoEntry


def video_extension(path: Path) -> str:
    """Lowercased suffix without the dot, "" when there is none."""
    return path.suffix[1:].lower()


def build_catalog(video_dir: Path) -> Catalog:
    """
    Scan video_dir (not recursively) and alias every video file by its rank
    in path order: the first one becomes "1.<ext>", the next "2.<ext>", ...

    A directory that can't be read gives an empty catalog.
    """
    found: List[Path] = []
    try:
        with os.scandir(video_dir) as it:
            for entry in it:
                try:
                    if not entry.is_file():
                        continue
                except OSError:
                    continue
                path = Path(entry.path)
                if video_extension(path) in VIDEO_EXTENSIONS:
                    found.append(path)
    except OSError as e:
        print(f"[WARN] Could not scan video directory {video_dir}: {e}")
        return Catalog()

    found.sort()
    return Catalog(
        entries=tuple(
            VideoEntry(path=path, alias=f"{rank}.{video_extension(path)}")
            for rank, path in enumerate(found, start=1)
        )
    )
