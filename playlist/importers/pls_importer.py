"""PLS playlist parsing.

A PLS document is an INI-like text file::

    [playlist]
    File1=http://example.com/stream.mp3
    Title1=Example Radio
    Length1=-1
    NumberOfEntries=1
    Version=2

``File``/``Length``/``Title`` lines carry a numeric suffix tying them to one
track; the lines of a track do not need to be adjacent. See
https://en.wikipedia.org/wiki/PLS_(file_format) for the format.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from config import settings

from .base import BaseImporter, decode_payload

logger = logging.getLogger(__name__)

PLAYLIST_TYPE = "pls"

# Matches any pls-like file name or URI.
PLS_MATCHER = re.compile(PLAYLIST_TYPE + "$")

_TRACK_PROPERTY_RE = re.compile(r"^(File|Length|Title)\d+")
_DIGIT_RE = re.compile(r"\d")

_TRACK_FIELDS = {
    "File": "file",
    "Length": "length",
    "Title": "title",
}

_NUMBER_OF_ENTRIES_PREFIXES = ("NumberOfEntries", "Numberofentries")
_VERSION_PREFIX = "Version"


@dataclass
class PlsTrack:
    file: str = ""
    length: int | str = settings.DEFAULT_TRACK_LENGTH
    title: str = ""

    def to_dict(self) -> dict:
        return {"file": self.file, "length": self.length, "title": self.title}


@dataclass
class PlsPlaylist:
    number_of_entries: int | str = settings.DEFAULT_NUMBER_OF_ENTRIES
    playlist_type: str = PLAYLIST_TYPE
    tracks: list[PlsTrack] = field(default_factory=list)
    version: int | str = settings.DEFAULT_PLS_VERSION

    def to_dict(self) -> dict:
        return {
            "numberOfEntries": self.number_of_entries,
            "playlistType": self.playlist_type,
            "tracks": [track.to_dict() for track in self.tracks],
            "version": self.version,
        }


def parse_pls(raw_pls: str = "") -> PlsPlaylist:
    """Parse a PLS document into a :class:`PlsPlaylist`.

    Values are kept as the raw text after ``=``; nothing is coerced. A
    document that does not start with the ``[playlist]`` header is logged
    and yields an empty playlist instead of raising.
    """
    pls = PlsPlaylist()

    if not raw_pls.startswith(settings.PLS_HEADER):
        logger.error("Invalid pls file. Received: %r", raw_pls)
        return pls

    # Only "\n" separates lines; a trailing "\r" stays part of the value.
    # The first line is the header.
    lines = raw_pls.split("\n")[1:]

    # index suffix -> position in pls.tracks
    created_tracks: dict[str, int] = {}

    for line in lines:
        if _TRACK_PROPERTY_RE.match(line):
            _apply_track_property(pls, created_tracks, line)
        elif line.startswith(_NUMBER_OF_ENTRIES_PREFIXES):
            pls.number_of_entries = _metadata_value(line)
        elif line.startswith(_VERSION_PREFIX):
            pls.version = _metadata_value(line)

    return pls


def _apply_track_property(pls: PlsPlaylist, created_tracks: dict[str, int], line: str) -> None:
    # str.find gives -1 without "=": key loses its last character, value is the whole line.
    separator = line.find("=")
    key = line[:separator]
    value = line[separator + 1:]

    digit = _DIGIT_RE.search(key)
    if digit is None:
        return
    property_name = _TRACK_FIELDS.get(key[: digit.start()])
    if property_name is None:
        return
    index_suffix = key[digit.start():]

    position = created_tracks.get(index_suffix)
    if position is not None:
        setattr(pls.tracks[position], property_name, value)
        return

    track = PlsTrack()
    setattr(track, property_name, value)
    pls.tracks.append(track)
    created_tracks[index_suffix] = len(pls.tracks) - 1


def _metadata_value(line: str) -> str:
    parts = line.split("=")
    if len(parts) < 2:
        return ""
    return parts[1]


class PLSImporter(BaseImporter):
    SOURCE_FORMAT = PLAYLIST_TYPE

    def parse(self, payload: str | bytes) -> PlsPlaylist:
        return parse_pls(decode_payload(payload))
