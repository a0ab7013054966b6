from __future__ import annotations
from urllib.parse import parse_qs, urlsplit
from ..errors import UsageError


def extract_playlist_id(value: str | None) -> str:
    """Accept a bare id or a share URL like https://music.163.com/#/playlist?id=3778678."""
    value = (value or "").strip()
    if not value:
        raise UsageError("missing playlist id")
    if "://" not in value:
        return value

    parts = urlsplit(value)
    # The web player keeps the query inside the fragment: /#/playlist?id=...
    for query in (parts.query, urlsplit(parts.fragment).query):
        ids = parse_qs(query).get("id")
        if ids and ids[0].strip():
            return ids[0].strip()
    raise UsageError(f"no playlist id found in URL: {value}")


def looks_like_http_url(url: str) -> bool:
    return url.startswith(("http://", "https://"))
