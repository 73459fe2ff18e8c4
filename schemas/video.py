from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict


class VideoEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    alias: str  # "<rank>.<ext>", rank starts at 1

    @property
    def filename(self) -> str:
        return self.path.name


class Catalog(BaseModel):
    """Ordered, read-only snapshot of the videos found in one directory."""

    model_config = ConfigDict(frozen=True)

    entries: Tuple[VideoEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    def find(self, name: str) -> Optional[VideoEntry]:
        # first entry matching by alias or filename wins
        for entry in self.entries:
            if name == entry.alias or name == entry.filename:
                return entry
        return None
