"""Session state: the loaded catalog, the working set and the transposition offset."""

import logging
from typing import Iterable

from gigbuilder.catalog.filters import filter_catalog, find_song, resolve_ids
from gigbuilder.chords.transpose import adjust_offset
from gigbuilder.models import FilterCriteria, Song
from gigbuilder.planning.builder import DEFAULT_ARC, SET_SIZE, EnergyPick, build_smart_set

logger = logging.getLogger(__name__)


class GigSession:
    """Single-owner state for one planning session.

    Operations here read and then write `working_set`; callers on more than one
    thread must serialize access themselves.
    """

    def __init__(self, catalog: Iterable[Song] | None = None, set_size: int = SET_SIZE):
        self.catalog: list[Song] = list(catalog or [])
        self.working_set: list[Song] = []
        self.offset = 0
        self.set_size = set_size

    # --- working set ---

    def add(self, song_id: str | int) -> bool:
        song = find_song(self.catalog, song_id)
        if song is None:
            logger.debug(f"Song {song_id!r} not in catalog")
            return False
        if any(s.key_id == song.key_id for s in self.working_set):
            return False
        self.working_set.append(song)
        return True

    def remove(self, index: int) -> Song | None:
        if not 0 <= index < len(self.working_set):
            return None
        return self.working_set.pop(index)

    def clear(self) -> None:
        self.working_set = []

    def build(
        self,
        criteria: FilterCriteria | None = None,
        arc: Iterable[EnergyPick] = DEFAULT_ARC,
    ) -> list[Song]:
        """Replace the working set with a smart set drawn from the filtered catalog."""
        pool = filter_catalog(self.catalog, criteria)
        self.working_set = build_smart_set(pool, arc=arc, size=self.set_size)
        logger.debug(f"Built set of {len(self.working_set)} from pool of {len(pool)}")
        return self.working_set

    def load_ids(self, song_ids: Iterable[str | int]) -> list[Song]:
        self.working_set = resolve_ids(self.catalog, song_ids)
        return self.working_set

    def song_ids(self) -> list[str]:
        return [s.key_id for s in self.working_set]

    def replace_catalog(self, catalog: Iterable[Song]) -> None:
        """Swap in a reloaded catalog and re-resolve the working set against it."""
        ids = self.song_ids()
        self.catalog = list(catalog)
        self.load_ids(ids)

    # --- transposition ---

    def transpose_up(self) -> int:
        self.offset = adjust_offset(self.offset, 1)
        return self.offset

    def transpose_down(self) -> int:
        self.offset = adjust_offset(self.offset, -1)
        return self.offset

    def reset_transpose(self) -> None:
        self.offset = 0
