"""PLS playlist parsing and loading."""

from .importers.dispatcher import detect_format, import_playlist
from .importers.pls_importer import PLAYLIST_TYPE, PLS_MATCHER, PLSImporter, PlsPlaylist, PlsTrack, parse_pls

__all__ = [
    "PLAYLIST_TYPE",
    "PLS_MATCHER",
    "PLSImporter",
    "PlsPlaylist",
    "PlsTrack",
    "detect_format",
    "import_playlist",
    "parse_pls",
]
