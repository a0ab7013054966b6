from __future__ import annotations
from json import dumps
from typing import Any, Sequence
import requests
from .config import DEFAULT_API_BASE
from .errors import ApiError
from .models import PlaylistRef, SongMeta, TrackIdEntry
from .utils.logging import setup_logging

logger = setup_logging(__name__)

SUCCESS_CODE = 200


def _upstream_message(response: requests.Response | None) -> str | None:
    if response is None:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return data.get("message") or data.get("msg") or None


class PlaylistApiClient:
    """Thin client for the playlist and song detail endpoints of a local
    NetEase Cloud Music compatible API server."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self) -> PlaylistApiClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            message = _upstream_message(e.response)
            raise ApiError(f"{e}: {message}" if message else str(e)) from e
        except requests.RequestException as e:
            raise ApiError(str(e)) from e

        # requests' JSONDecodeError is both a RequestException and a ValueError
        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(f"malformed response: {e}") from e

        if not isinstance(data, dict):
            raise ApiError("malformed response: expected a JSON object")
        if data.get("code") != SUCCESS_CODE:
            message = data.get("message") or data.get("msg") or "unknown error"
            logger.warning(f"{path} returned code {data.get('code')}: {message}")
            raise ApiError(f"API returned error: {message}")
        return data

    def get_playlist_detail(
        self, playlist_id: str | int
    ) -> tuple[PlaylistRef, list[TrackIdEntry]]:
        try:
            data = self._get("/playlist/detail", {"id": playlist_id})
            playlist = data.get("playlist")
            if not isinstance(playlist, dict):
                raise ApiError("malformed response: missing playlist")
            ref = PlaylistRef.from_api(playlist)
            entries = [
                TrackIdEntry.from_api(item) for item in playlist.get("trackIds") or []
            ]
        except ApiError as e:
            raise ApiError(f"failed to fetch playlist detail: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(
                f"failed to fetch playlist detail: malformed response: {e!r}"
            ) from e
        logger.info(
            f"Fetched playlist {ref.id} '{ref.name}' with {len(entries)} track ids "
            f"(declared {ref.track_count})."
        )
        return ref, entries

    def get_song_details(self, song_ids: Sequence[int]) -> list[SongMeta]:
        params = {
            "ids": ",".join(str(i) for i in song_ids),
            "c": dumps([{"id": i} for i in song_ids]),
        }
        try:
            data = self._get("/song/detail", params)
            return [SongMeta.from_api(song) for song in data.get("songs") or []]
        except ApiError as e:
            raise ApiError(f"failed to resolve song details: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(
                f"failed to resolve song details: malformed response: {e!r}"
            ) from e
