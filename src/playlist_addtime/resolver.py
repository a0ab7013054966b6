from __future__ import annotations
from typing import Iterator, Protocol, Sequence, TypeVar
from tqdm import tqdm
from .models import SongMeta
from .utils.logging import setup_logging

logger = setup_logging(__name__)

BATCH_SIZE = 100

T = TypeVar("T")


class SongDetailSource(Protocol):
    def get_song_details(self, song_ids: Sequence[int]) -> list[SongMeta]: ...


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    if size <= 0:
        raise ValueError("batch size must be a positive integer")
    for start in range(0, len(items), size):
        yield items[start : start + size]


def resolve_songs(
    client: SongDetailSource,
    song_ids: Sequence[int],
    batch_size: int = BATCH_SIZE,
    verbose: bool = True,
) -> list[SongMeta]:
    """Resolve song metadata one batch at a time.

    Songs the upstream cannot resolve are left out of the result. If the
    upstream repeats a song id, only its first occurrence is kept.
    """
    total = len(song_ids)
    songs: list[SongMeta] = []
    seen: set[int] = set()
    done = 0

    pbar = None
    if verbose:
        pbar = tqdm(total=total, desc="Resolving", unit="track", leave=False)
    try:
        for batch in chunked(song_ids, batch_size):
            for song in client.get_song_details(batch):
                if song.id in seen:
                    logger.warning(f"Duplicate song id {song.id} from upstream, ignored.")
                    continue
                seen.add(song.id)
                songs.append(song)

            done += len(batch)
            if pbar:
                pbar.update(len(batch))
            tqdm.write(f"已获取 {done}/{total} 首歌曲...")
    finally:
        if pbar:
            pbar.close()

    logger.info(f"Resolved {len(songs)} of {total} songs.")
    return songs
