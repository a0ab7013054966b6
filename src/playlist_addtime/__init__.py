__version__ = "0.1.0"

from .config import Config
from .api import PlaylistApiClient
from .errors import ApiError, ConfigError, PlaylistAddTimeError, UsageError
from .models import EnrichedTrack, PlaylistRef, SongMeta, TrackIdEntry
from .correlate import correlate
from .resolver import resolve_songs
from .orchestrator import Orchestrator


__all__ = [
    "Config",
    "PlaylistApiClient",
    "ApiError",
    "ConfigError",
    "PlaylistAddTimeError",
    "UsageError",
    "EnrichedTrack",
    "PlaylistRef",
    "SongMeta",
    "TrackIdEntry",
    "correlate",
    "resolve_songs",
    "Orchestrator",
]
