import argparse
from pathlib import Path
from typing import List, Optional

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.errors import http_exception_handler
from api.routes.videos import router as videos_router
from core.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_VIDEO_DIR,
    ServerConfig,
    load_config,
)
from services.catalog import build_catalog


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """App factory, also usable as `uvicorn --factory main:create_app`."""
    if config is None:
        config = load_config()

    # Built once; files added later are not listed until restart.
    catalog = build_catalog(config.video_dir)
    print(f"[INFO] Found {len(catalog)} video(s) in {config.video_dir}")

    app = FastAPI(
        title="Video Server",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.config = config
    app.state.catalog = catalog

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(videos_router)

    return app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="A simple video streaming server")
    parser.add_argument("-p", "--port", type=int, default=DEFAULT_PORT,
                        help=f"Port to listen on (default: {DEFAULT_PORT})")
    parser.add_argument("--host", default=DEFAULT_HOST,
                        help=f"Host address to bind to (default: {DEFAULT_HOST})")
    parser.add_argument("-v", "--video-dir", type=Path, default=DEFAULT_VIDEO_DIR,
                        help="Directory containing video files (default: current directory)")
    parser.add_argument("--limit-concurrency", type=int, default=None,
                        help="Maximum concurrent connections before answering 503")
    parser.add_argument("--timeout-keep-alive", type=int, default=5,
                        help="Seconds to keep idle connections open (default: 5)")
    parser.add_argument("--follow-external-symlinks", action="store_true",
                        help="Serve symlinked videos that point outside the video directory")
    parser.add_argument("--log-level", default="info",
                        choices=["critical", "error", "warning", "info", "debug", "trace"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = load_config(
        host=args.host,
        port=args.port,
        video_dir=args.video_dir,
        limit_concurrency=args.limit_concurrency,
        confine_to_video_dir=not args.follow_external_symlinks,
    )

    print(f"Starting video server on {config.host}:{config.port}")
    print(f"Video directory: {config.video_dir}")
    print(f"Server URL: {config.base_url}")

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        limit_concurrency=config.limit_concurrency,
        timeout_keep_alive=args.timeout_keep_alive,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
