"""Load the song catalog from one or more JSON sources."""

import json
import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from gigbuilder.models import Song

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog source cannot be read."""


def read_source(path: str | Path) -> list[dict]:
    """Read one JSON source; it must hold a list of song objects."""
    source = Path(path).expanduser()
    if not source.is_file():
        raise CatalogError(f"Failed to load {source.name} (file not found)")

    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogError(f"Failed to load {source.name} ({e})") from e

    if not isinstance(data, list):
        raise CatalogError(f"Failed to load {source.name} (expected a list of songs)")
    return data


def merge_sources(collections: Iterable[Iterable[dict | Song]]) -> list[Song]:
    """Concatenate song collections, dropping records without an id.

    The first record seen for an id wins.
    """
    seen: set[str] = set()
    catalog: list[Song] = []
    for collection in collections:
        for record in collection:
            if isinstance(record, Song):
                song = record
            else:
                if not isinstance(record, dict):
                    logger.warning(f"Skipping non-object catalog entry: {record!r}")
                    continue
                try:
                    song = Song.model_validate(record)
                except ValidationError as e:
                    logger.warning(f"Skipping invalid song {record.get('id')!r}: {e.error_count()} error(s)")
                    continue

            song_id = song.key_id
            if not song_id or song_id in seen:
                continue
            seen.add(song_id)
            catalog.append(song)
    return catalog


def load_catalog(paths: Iterable[str | Path]) -> list[Song]:
    """Read every source in order and merge them into one catalog."""
    sources = [read_source(p) for p in paths]
    catalog = merge_sources(sources)
    logger.info(f"Loaded {len(catalog)} songs from {len(sources)} source(s)")
    return catalog
