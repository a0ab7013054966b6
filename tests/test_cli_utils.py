from __future__ import annotations
from pathlib import Path

import pytest

from playlist_addtime.errors import UsageError
from playlist_addtime.utils.cli import extract_playlist_id, looks_like_http_url
from playlist_addtime.utils.path_utils import snapshot_path


def test_extract_playlist_id_plain():
    assert extract_playlist_id(" 3778678 ") == "3778678"


def test_extract_playlist_id_from_share_urls():
    assert extract_playlist_id("https://music.163.com/#/playlist?id=3778678") == "3778678"
    assert extract_playlist_id("https://music.163.com/playlist?id=123&userid=9") == "123"


def test_extract_playlist_id_rejects_empty_and_idless_urls():
    with pytest.raises(UsageError):
        extract_playlist_id(None)
    with pytest.raises(UsageError):
        extract_playlist_id("https://music.163.com/#/discover")


def test_looks_like_http_url():
    assert looks_like_http_url("http://localhost:3000")
    assert not looks_like_http_url("localhost:3000")


def test_snapshot_path_sanitizes_id(tmp_path: Path):
    assert snapshot_path("3778678", tmp_path) == tmp_path / "playlist_3778678_tracks.json"
    assert snapshot_path("../x", tmp_path).name == "playlist_x_tracks.json"
