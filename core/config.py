import socket
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 6969
DEFAULT_VIDEO_DIR = Path(".")

CHUNK_SIZE = 1024 * 1024  # 1 MiB for streaming
CACHE_CONTROL = "public, max-age=3600"

MIME_TYPES = {
    "mp4": "video/mp4",
    "avi": "video/x-msvideo",
    "mkv": "video/x-matroska",
    "mov": "video/quicktime",
    "wmv": "video/x-ms-wmv",
    "flv": "video/x-flv",
    "webm": "video/webm",
    "m4v": "video/x-m4v",
}
VIDEO_EXTENSIONS = frozenset(MIME_TYPES)

# Any routable address works, the UDP "connect" never sends a packet.
PROBE_ADDRESS = ("8.8.8.8", 80)


class ServerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    video_dir: Path = DEFAULT_VIDEO_DIR
    base_url: str
    limit_concurrency: Optional[int] = Field(default=None, gt=0)
    confine_to_video_dir: bool = True


def detect_local_ip() -> str:
    """
    Find the address of the interface that would route to the outside world.
    Falls back to "localhost" when there is no usable network.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect(PROBE_ADDRESS)
            return s.getsockname()[0]
    except OSError as e:
        print(f"[WARN] Could not detect local IP: {e}")
        return "localhost"


def load_config(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    video_dir: Path = DEFAULT_VIDEO_DIR,
    limit_concurrency: Optional[int] = None,
    confine_to_video_dir: bool = True,
    base_url: Optional[str] = None,
) -> ServerConfig:
    if base_url is None:
        base_url = f"http://{detect_local_ip()}:{port}"
    return ServerConfig(
        host=host,
        port=port,
        video_dir=Path(video_dir),
        base_url=base_url.rstrip("/"),
        limit_concurrency=limit_concurrency,
        confine_to_video_dir=confine_to_video_dir,
    )
