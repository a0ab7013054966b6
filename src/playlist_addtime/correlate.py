from __future__ import annotations
from datetime import datetime
from typing import Iterable
from .models import UNKNOWN, EnrichedTrack, SongMeta, TrackIdEntry
from .utils.logging import setup_logging

logger = setup_logging(__name__)


def format_time(timestamp: int | None) -> str:
    # Local time, zh-CN layout: 2023/11/14 22:13:20
    if timestamp is None:
        return UNKNOWN
    try:
        moment = datetime.fromtimestamp(timestamp / 1000)
    except (OverflowError, OSError, ValueError):
        logger.warning(f"Timestamp {timestamp} out of range, shown as unknown.")
        return UNKNOWN
    return moment.strftime("%Y/%m/%d %H:%M:%S")


def build_add_time_index(entries: Iterable[TrackIdEntry]) -> dict[int, int]:
    index: dict[int, int] = {}
    for entry in entries:
        if entry.song_id in index:
            logger.warning(f"Song id {entry.song_id} listed twice in playlist, keeping first.")
            continue
        index[entry.song_id] = entry.add_timestamp
    return index


def enrich(song: SongMeta, add_time: int) -> EnrichedTrack:
    return EnrichedTrack(
        id=song.id,
        name=song.name,
        artists=song.artists,
        album=song.album,
        add_time_raw=add_time,
        add_time_formatted=format_time(add_time) if add_time else UNKNOWN,
    )


def correlate(
    entries: Iterable[TrackIdEntry], songs: Iterable[SongMeta]
) -> list[EnrichedTrack]:
    """Join songs with their add time and order them newest first.

    Songs without an entry get an add time of 0 and sort last. The sort is
    stable, so tracks added at the same instant keep their input order.
    """
    index = build_add_time_index(entries)
    tracks = [enrich(song, index.get(song.id, 0)) for song in songs]
    return sorted(tracks, key=lambda t: t.add_time_raw, reverse=True)
