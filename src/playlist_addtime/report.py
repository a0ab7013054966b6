from __future__ import annotations
from json import dump
from pathlib import Path
from typing import Any, Sequence
from .correlate import format_time
from .models import EnrichedTrack, PlaylistRef
from .utils.logging import setup_logging

logger = setup_logging(__name__)

RULE = "=" * 80


def print_playlist_header(playlist: PlaylistRef) -> None:
    print(f"歌单名称: {playlist.name}")
    print(f"歌单作者: {playlist.author}")
    print(f"歌曲数量: {playlist.track_count}")
    print(f"创建时间: {format_time(playlist.create_time)}")
    print(f"更新时间: {format_time(playlist.update_time)}")
    print("\n" + RULE + "\n")


def print_tracks(tracks: Sequence[EnrichedTrack]) -> None:
    print("\n" + RULE)
    print("歌曲列表（按添加时间从新到旧排序）：")
    print(RULE + "\n")
    for index, track in enumerate(tracks, start=1):
        print(f"{index}. {track.name}")
        print(f"   歌手: {track.artists}")
        print(f"   专辑: {track.album}")
        print(f"   添加时间: {track.add_time_formatted}")
        print("")


def build_snapshot(
    playlist: PlaylistRef, tracks: Sequence[EnrichedTrack]
) -> dict[str, Any]:
    # trackCount is the declared count; tracks may be fewer when songs are unavailable
    return {
        "playlistInfo": {
            "id": playlist.id,
            "name": playlist.name,
            "author": playlist.creator_name,
            "trackCount": playlist.track_count,
            "createTime": format_time(playlist.create_time),
            "updateTime": format_time(playlist.update_time),
        },
        "tracks": [track.to_dict() for track in tracks],
    }


def write_snapshot(path: Path, snapshot: dict[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        dump(snapshot, f, ensure_ascii=False, indent=2)
    logger.info(f"Wrote {len(snapshot['tracks'])} tracks to {path}")
