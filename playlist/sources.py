"""Reading raw playlist text from disk or over HTTP."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from config import settings

logger = logging.getLogger(__name__)


class PlaylistSourceError(RuntimeError):
    pass


def is_remote_source(source: str) -> bool:
    return str(source or "").strip().lower().startswith(("http://", "https://"))


def read_playlist_source(source: str, *, timeout: float | None = None) -> str:
    """Return the raw text behind ``source`` (a local path or http(s) URL).

    Line endings are left untouched.
    """
    if is_remote_source(source):
        return _fetch_remote(source.strip(), timeout=timeout)
    return _read_local(Path(source))


def _fetch_remote(url: str, *, timeout: float | None) -> str:
    headers = {"User-Agent": settings.HTTP_USER_AGENT}
    effective_timeout = timeout if timeout is not None else settings.http_timeout_seconds()
    try:
        response = requests.get(url, headers=headers, timeout=effective_timeout)
    except requests.RequestException as exc:
        raise PlaylistSourceError(f"Failed to fetch playlist: {exc}") from exc
    if response.status_code != 200:
        raise PlaylistSourceError(f"Playlist unavailable ({response.status_code}): {url}")
    logger.debug("Fetched playlist %s (%d bytes)", url, len(response.content))
    return response.content.decode("utf-8-sig", errors="replace")


def _read_local(path: Path) -> str:
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise PlaylistSourceError(f"Playlist file not found: {path}") from exc
    except OSError as exc:
        raise PlaylistSourceError(f"Failed to read playlist {path}: {exc}") from exc
    return data.decode("utf-8-sig", errors="replace")
