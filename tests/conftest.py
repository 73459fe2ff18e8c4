from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from core.config import ServerConfig
from main import create_app


@pytest.fixture
def base_url() -> str:
    return "http://192.168.1.20:6969"


@pytest.fixture
def video_dir(tmp_path: Path) -> Path:
    root = tmp_path / "videos"
    root.mkdir()
    (root / "b.mp4").write_bytes(b"b-video-bytes")
    (root / "a.mkv").write_bytes(b"a-video-bytes")
    return root


@pytest.fixture
def make_client(base_url: str):
    def _make(video_dir: Path, **overrides) -> TestClient:
        config = ServerConfig(video_dir=video_dir, base_url=base_url, **overrides)
        return TestClient(create_app(config))

    return _make


@pytest.fixture
def client(make_client, video_dir: Path) -> TestClient:
    return make_client(video_dir)
