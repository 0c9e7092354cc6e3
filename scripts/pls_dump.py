#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging

from config import settings
from playlist.importers.dispatcher import import_playlist
from playlist.sources import PlaylistSourceError, read_playlist_source


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse a PLS playlist and print it as JSON.")
    parser.add_argument("source", help="Path or http(s) URL of the playlist.")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact output).")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds for URL sources.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        raw = read_playlist_source(args.source, timeout=args.timeout)
        playlist = import_playlist(raw, args.source)
    except (PlaylistSourceError, ValueError) as exc:
        logging.error("Unable to load playlist %s: %s", args.source, exc)
        return 1

    indent = args.indent if args.indent > 0 else None
    print(json.dumps(playlist.to_dict(), indent=indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
