"""Catalog filtering, sorting and lookup helpers."""

from typing import Iterable

from gigbuilder.models import WILDCARD, FilterCriteria, SortMode, Song

# Sort mode → (numeric field, descending)
SORT_FIELDS: dict[SortMode, tuple[str, bool]] = {
    SortMode.POPULARITY_DESC: ("popularity", True),
    SortMode.POPULARITY_ASC: ("popularity", False),
    SortMode.ENERGY_ASC: ("energy", False),
    SortMode.ENERGY_DESC: ("energy", True),
}


def matches(song: Song, criteria: FilterCriteria) -> bool:
    """True when a song passes the text, era, artist and tag predicates."""
    q = criteria.query.lower()
    if q and q not in song.title.lower() and q not in song.artist.lower():
        return False
    if criteria.era != WILDCARD and song.era != criteria.era:
        return False
    if criteria.artist != WILDCARD and song.artist != criteria.artist:
        return False
    if criteria.tag != WILDCARD and criteria.tag not in song.tags:
        return False
    return True


def sort_songs(songs: Iterable[Song], mode: SortMode) -> list[Song]:
    """Stable sort on the field named by `mode`; DEFAULT keeps the input order."""
    songs = list(songs)
    if mode not in SORT_FIELDS:
        return songs
    field, descending = SORT_FIELDS[mode]
    return sorted(songs, key=lambda s: getattr(s, field) or 0, reverse=descending)


def filter_catalog(catalog: Iterable[Song], criteria: FilterCriteria | None = None) -> list[Song]:
    """Songs matching every criterion, in the requested order.

    With an empty query and all wildcards the whole catalog comes back in
    catalog order. Hiding results until a filter is set is left to callers.
    """
    criteria = criteria or FilterCriteria()
    matched = [s for s in catalog if matches(s, criteria)]
    return sort_songs(matched, criteria.sort_mode)


def _distinct_sorted(values: Iterable[str]) -> list[str]:
    return sorted({v for v in values if v}, key=lambda v: (v.casefold(), v))


def list_artists(catalog: Iterable[Song]) -> list[str]:
    return _distinct_sorted(s.artist for s in catalog)


def list_eras(catalog: Iterable[Song]) -> list[str]:
    return _distinct_sorted(s.era for s in catalog)


def list_tags(catalog: Iterable[Song]) -> list[str]:
    return _distinct_sorted(t for s in catalog for t in s.tags)


def find_song(catalog: Iterable[Song], song_id: str | int) -> Song | None:
    wanted = str(song_id).strip()
    for song in catalog:
        if song.key_id == wanted:
            return song
    return None


def resolve_ids(catalog: Iterable[Song], song_ids: Iterable[str | int]) -> list[Song]:
    """Map ids back to catalog songs in order, silently dropping unknown ids."""
    index = {s.key_id: s for s in catalog}
    resolved = []
    for song_id in song_ids:
        song = index.get(str(song_id).strip())
        if song is not None:
            resolved.append(song)
    return resolved
