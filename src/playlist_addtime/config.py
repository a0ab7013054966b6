from __future__ import annotations
from pathlib import Path
from json import JSONDecodeError, load, dump
from .errors import ConfigError

DEFAULT_API_BASE = "http://localhost:3000"
API_BASE_ENV = "PLAYLIST_ADDTIME_API_BASE"


class Config:
    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = config_dir or Path.home() / ".config" / "playlist-addtime"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / "config.json"
        self.default_config = {
            "api_base": DEFAULT_API_BASE,
            "output_dir": ".",  # Snapshot directory, relative to the working directory
            "timeout": None,  # Seconds; null keeps the requests default
        }
        self.data = self.load()

    def load(self) -> dict:
        if self.config_file.exists():
            with open(self.config_file, "r", encoding="utf-8") as f:
                try:
                    data = load(f)
                except JSONDecodeError as e:
                    raise ConfigError(f"invalid config file {self.config_file}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"invalid config file {self.config_file}: expected a JSON object")
            return {**self.default_config, **data}
        else:
            self.save(self.default_config)
            return dict(self.default_config)

    def save(self, data: dict) -> None:
        with open(self.config_file, "w", encoding="utf-8") as f:
            dump(data, f, indent=4)
