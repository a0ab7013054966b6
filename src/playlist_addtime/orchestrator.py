from __future__ import annotations
from pathlib import Path
from .api import PlaylistApiClient
from .config import Config
from .correlate import correlate
from .models import EnrichedTrack
from .report import build_snapshot, print_playlist_header, print_tracks, write_snapshot
from .resolver import BATCH_SIZE, resolve_songs
from .utils.logging import setup_logging
from .utils.path_utils import snapshot_path

logger = setup_logging(__name__)


class Orchestrator:
    def __init__(
        self,
        playlist_id: str,
        dest: Path,
        api_base: str,
        config: Config | None = None,
    ):
        self.playlist_id = playlist_id
        self.dest = dest
        self.api_base = api_base
        self.config = config or Config()
        self._set_default_attributes()

    def _set_default_attributes(self) -> None:
        self.timeout: float | None = self.config.data.get("timeout")
        self.batch_size: int = BATCH_SIZE
        self.verbose: bool = True

    def _get_client(self) -> PlaylistApiClient:
        return PlaylistApiClient(self.api_base, timeout=self.timeout)

    def run(self) -> Path | None:
        """Fetch, resolve, sort and report one playlist.

        Returns the snapshot path, or None when the playlist has no tracks.
        """
        print(f"正在获取歌单 {self.playlist_id} 的信息...\n")
        logger.info(f"Processing playlist {self.playlist_id} via {self.api_base}")

        with self._get_client() as client:
            playlist, entries = client.get_playlist_detail(self.playlist_id)
            print_playlist_header(playlist)

            if not entries:
                logger.info(f"Playlist {self.playlist_id} has no tracks. Nothing written.")
                print("歌单中没有歌曲")
                return None

            songs = resolve_songs(
                client,
                [entry.song_id for entry in entries],
                batch_size=self.batch_size,
                verbose=self.verbose,
            )

        tracks: list[EnrichedTrack] = correlate(entries, songs)
        print_tracks(tracks)

        path = snapshot_path(self.playlist_id, self.dest)
        self.dest.mkdir(parents=True, exist_ok=True)
        write_snapshot(path, build_snapshot(playlist, tracks))
        print(f"\n结果已保存到文件: {path}")
        return path
