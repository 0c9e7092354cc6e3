from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pls_importer import PlsPlaylist


class BaseImporter(ABC):
    SOURCE_FORMAT = ""

    @abstractmethod
    def parse(self, payload: str | bytes) -> PlsPlaylist:
        """Parse raw playlist text (or undecoded bytes) into a playlist document."""
        raise NotImplementedError


def decode_payload(payload: str | bytes) -> str:
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode("utf-8-sig", errors="replace")
    if payload.startswith("\ufeff"):
        return payload[1:]
    return payload
