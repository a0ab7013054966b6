from __future__ import annotations
from argparse import (
    ArgumentParser,
    ArgumentDefaultsHelpFormatter,
    RawTextHelpFormatter,
)
from os import getenv
from pathlib import Path
import sys
from typing import Sequence
from . import __version__
from .config import API_BASE_ENV, DEFAULT_API_BASE, Config
from .errors import PlaylistAddTimeError, UsageError
from .orchestrator import Orchestrator
from .utils.logging import setup_logging
from .utils.cli import extract_playlist_id, looks_like_http_url

logger = setup_logging(__name__)

USAGE_HINT = (
    "用法: playlist-addtime <歌单ID>\n"
    "示例: playlist-addtime 3778678\n"
    "\n"
    "提示: 可以从网易云音乐网页版URL中获取歌单ID\n"
    "      例如: https://music.163.com/#/playlist?id=3778678"
)


class HelpFormatter(ArgumentDefaultsHelpFormatter, RawTextHelpFormatter):
    pass


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="playlist-addtime",
        description=(
            "List the tracks of a playlist sorted by the time they were added.\n\n"
            "Examples:\n"
            "  playlist-addtime 3778678\n"
            "  playlist-addtime 'https://music.163.com/#/playlist?id=3778678'\n"
            "  playlist-addtime --api-base http://127.0.0.1:4000 -o out 3778678\n"
        ),
        formatter_class=HelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"playlist-addtime {__version__}",
        help="Show version and exit.",
    )
    parser.add_argument(
        "playlist_id",
        nargs="?",
        help="Playlist id or share URL.",
    )
    parser.add_argument(
        "--api-base",
        help="Base URL of the music API server. Defaults to the configured api_base.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Directory for the JSON snapshot. Defaults to the configured output_dir.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide the progress bar. Progress lines are still printed.",
    )
    return parser


def get_settings(args, config: Config) -> tuple[str, Path]:
    api_base = (
        args.api_base
        or getenv(API_BASE_ENV)
        or config.data.get("api_base")
        or DEFAULT_API_BASE
    )
    dest = args.output_dir or Path(config.data.get("output_dir") or ".")
    return api_base, dest


def main(argv: Sequence[str] | None = None) -> None:
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        playlist_id = extract_playlist_id(args.playlist_id)
    except UsageError as e:
        logger.error(f"Usage error: {e}")
        print(USAGE_HINT)
        raise SystemExit(1)

    try:
        config = Config()
        api_base, dest = get_settings(args, config)
        if not looks_like_http_url(api_base):
            raise UsageError(f"invalid API base URL: {api_base}")

        orchestrator = Orchestrator(playlist_id, dest=dest, api_base=api_base, config=config)
        orchestrator.verbose = not args.quiet
        orchestrator.run()
    except KeyboardInterrupt:
        print("\nCancelled by user.")
        logger.info(f"Processing of playlist {playlist_id} cancelled by user.")
        raise SystemExit(1)
    except (PlaylistAddTimeError, OSError) as e:
        logger.error(f"Failed processing playlist {playlist_id}: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
