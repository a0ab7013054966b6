from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Tuple

UNKNOWN = "未知"


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


@dataclass(slots=True, frozen=True)
class PlaylistRef:
    id: int
    name: str
    track_count: int
    creator_name: str | None = None
    create_time: int | None = None
    update_time: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PlaylistRef:
        creator = data.get("creator") or {}
        nickname = creator.get("nickname") if isinstance(creator, dict) else None
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            track_count=int(data.get("trackCount") or 0),
            creator_name=nickname or None,
            create_time=_optional_int(data.get("createTime")),
            update_time=_optional_int(data.get("updateTime")),
        )

    @property
    def author(self) -> str:
        return self.creator_name or UNKNOWN


@dataclass(slots=True, frozen=True)
class TrackIdEntry:
    song_id: int
    add_timestamp: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> TrackIdEntry:
        return cls(song_id=int(data["id"]), add_timestamp=int(data.get("at") or 0))


@dataclass(slots=True, frozen=True)
class SongMeta:
    id: int
    name: str
    artist_names: Tuple[str, ...] = field(default_factory=tuple)
    album_name: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> SongMeta:
        artists = data.get("ar") or []
        album = data.get("al") or {}
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            artist_names=tuple(
                a["name"] for a in artists if isinstance(a, dict) and a.get("name")
            ),
            album_name=(album.get("name") if isinstance(album, dict) else None) or None,
        )

    @property
    def artists(self) -> str:
        return ", ".join(self.artist_names) or UNKNOWN

    @property
    def album(self) -> str:
        return self.album_name or UNKNOWN


@dataclass(slots=True, frozen=True)
class EnrichedTrack:
    id: int
    name: str
    artists: str
    album: str
    add_time_raw: int
    add_time_formatted: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "artists": self.artists,
            "album": self.album,
            "addTime": self.add_time_raw,
            "addTimeFormatted": self.add_time_formatted,
        }
