from __future__ import annotations

from urllib.parse import urlparse

from config import settings

from .base import BaseImporter
from .pls_importer import PLSImporter, PlsPlaylist


def detect_format(filename: str, payload: str | bytes = b"") -> BaseImporter:
    lower_name = str(filename or "").strip().lower()
    if lower_name.startswith(("http://", "https://")):
        lower_name = urlparse(lower_name).path

    if lower_name.endswith(".pls"):
        return PLSImporter()

    if isinstance(payload, str):
        sniff = payload.lstrip("\ufeff")[:200]
    else:
        sniff = bytes(payload).lstrip(b"\xef\xbb\xbf")[:200].decode("utf-8", errors="ignore")
    if sniff.startswith(settings.PLS_HEADER):
        return PLSImporter()

    raise ValueError(f"unsupported playlist format: {filename}")


def import_playlist(payload: str | bytes, filename: str) -> PlsPlaylist:
    importer = detect_format(filename, payload)
    return importer.parse(payload)
