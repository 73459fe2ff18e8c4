from pathlib import Path

import pytest
from fastapi import HTTPException

from services.video_service import ensure_within, guess_mime, parse_range


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.mp4", "video/mp4"),
        ("a.avi", "video/x-msvideo"),
        ("a.mkv", "video/x-matroska"),
        ("a.mov", "video/quicktime"),
        ("a.wmv", "video/x-ms-wmv"),
        ("a.flv", "video/x-flv"),
        ("a.webm", "video/webm"),
        ("a.m4v", "video/x-m4v"),
        ("SHOUTY.MKV", "video/x-matroska"),
        ("notes.txt", "application/octet-stream"),
        ("README", "application/octet-stream"),
    ],
)
def test_guess_mime(name, expected):
    assert guess_mime(name) == expected


def test_guess_mime_custom_fallback():
    assert guess_mime("x.bin", "video/mp4") == "video/mp4"


@pytest.mark.parametrize(
    "header, expected",
    [
        ("bytes=0-99", (0, 99)),
        ("bytes=10-", (10, 999)),
        ("bytes=-100", (900, 999)),
        ("bytes=-5000", (0, 999)),
        ("bytes=990-5000", (990, 999)),
    ],
)
def test_parse_range(header, expected):
    assert parse_range(header, 1000) == expected


@pytest.mark.parametrize(
    "header",
    ["bytes=", "bytes=-", "items=0-1", "bytes=5-1", "bytes=1000-", "bytes=-0", "bytes=a-b", "bytes=0-1,4-5"],
)
def test_parse_range_rejects(header):
    with pytest.raises(HTTPException) as exc_info:
        parse_range(header, 1000)

    assert exc_info.value.status_code == 416
    assert exc_info.value.headers == {"Content-Range": "bytes */1000"}


def test_ensure_within_accepts_files_in_root(tmp_path: Path):
    (tmp_path / "a.mp4").write_bytes(b"x")

    ensure_within(tmp_path, tmp_path / "a.mp4")


def test_ensure_within_rejects_escaping_paths(tmp_path: Path):
    root = tmp_path / "videos"
    root.mkdir()

    with pytest.raises(HTTPException) as exc_info:
        ensure_within(root, root / ".." / "secret.mp4")

    assert exc_info.value.status_code == 403
