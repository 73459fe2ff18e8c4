from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Request
from fastapi.responses import HTMLResponse, StreamingResponse

from core.config import CACHE_CONTROL, ServerConfig
from schemas.video import Catalog
from services.pages import render_index
from services.video_service import (
    guess_mime,
    ensure_within,
    parse_range,
    video_size,
    open_video,
    file_iterator,
)


router = APIRouter(tags=["videos"])


@router.get("/", response_class=HTMLResponse)
def list_videos(request: Request):
    config: ServerConfig = request.app.state.config
    catalog: Catalog = request.app.state.catalog
    return HTMLResponse(render_index(catalog, config.base_url))


@router.get("/{name}")
async def stream_video(
    name: str,
    request: Request,
    range: Optional[str] = Header(None),
):
    config: ServerConfig = request.app.state.config
    catalog: Catalog = request.app.state.catalog

    entry = catalog.find(name)
    if entry is None:
        raise HTTPException(status_code=404, detail="Not Found")

    if config.confine_to_video_dir:
        ensure_within(config.video_dir, entry.path)

    file_size = await video_size(entry.path)
    content_type = guess_mime(entry.filename)

    if range is None:
        f = await open_video(entry.path)
        headers = {
            "Accept-Ranges": "bytes",
            "Cache-Control": CACHE_CONTROL,
            "Content-Length": str(file_size),
            "Content-Type": content_type,
        }
        return StreamingResponse(
            file_iterator(f, 0, file_size - 1),
            headers=headers,
            media_type=content_type,
        )

    start, end = parse_range(range, file_size)
    f = await open_video(entry.path)
    content_length = end - start + 1
    headers = {
        "Content-Range": f"bytes {start}-{end}/{file_size}",
        "Accept-Ranges": "bytes",
        "Cache-Control": CACHE_CONTROL,
        "Content-Length": str(content_length),
        "Content-Type": content_type,
    }
    return StreamingResponse(
        file_iterator(f, start, end),
        status_code=206,
        headers=headers,
        media_type=content_type,
    )
