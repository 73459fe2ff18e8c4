from pathlib import Path
from typing import AsyncIterator, Tuple

import aiofiles
import aiofiles.os
from aiofiles.threadpool.binary import AsyncBufferedReader
from fastapi import HTTPException

from core.config import CHUNK_SIZE, MIME_TYPES
from services.catalog import video_extension


def guess_mime(path: str, fallback: str = "application/octet-stream") -> str:
    return MIME_TYPES.get(video_extension(Path(path)), fallback)


def ensure_within(root: Path, path: Path) -> None:
    """
    Refuse paths whose real location is outside root, e.g. a symlink in the
    video directory pointing somewhere else.
    """
    root_res = root.resolve()
    target_res = path.resolve()
    if not target_res.is_relative_to(root_res):
        raise HTTPException(status_code=403, detail="Forbidden")


def parse_range(range_header: str, file_size: int) -> Tuple[int, int]:
    """
    Parse a header like: Range: bytes=start-end
    Return (start, end) inclusive. An end past the file is clamped.
    """
    try:
        units, _, rng = range_header.partition("=")
        if units.strip().lower() != "bytes" or not rng:
            raise ValueError
        start_str, _, end_str = rng.strip().partition("-")

        if start_str == "" and end_str == "":
            raise ValueError

        if start_str == "":
            # suffix range: last N bytes
            length = int(end_str)
            if length <= 0:
                raise ValueError
            start = max(file_size - length, 0)
            end = file_size - 1
        else:
            start = int(start_str)
            end = min(int(end_str), file_size - 1) if end_str else file_size - 1

        if start < 0 or end < start or start >= file_size:
            raise ValueError

        return start, end
    except ValueError:
        raise HTTPException(
            status_code=416,
            detail="Range Not Satisfiable",
            headers={"Content-Range": f"bytes */{file_size}"},
        )


async def video_size(path: Path) -> int:
    """A catalogued file may have been removed or made unreadable since startup."""
    try:
        stat = await aiofiles.os.stat(path)
    except OSError:
        raise HTTPException(status_code=404, detail="Video Not Found")
    return stat.st_size


async def open_video(path: Path) -> AsyncBufferedReader:
    try:
        return await aiofiles.open(path, "rb")
    except OSError:
        raise HTTPException(status_code=404, detail="Video Not Found")


async def file_iterator(f: AsyncBufferedReader, start: int, end: int) -> AsyncIterator[bytes]:
    read_bytes = 0
    to_read = end - start + 1
    try:
        await f.seek(start)
        while read_bytes < to_read:
            chunk_size = min(CHUNK_SIZE, to_read - read_bytes)
            data = await f.read(chunk_size)
            if not data:
                break
            read_bytes += len(data)
            yield data
    finally:
        await f.close()
