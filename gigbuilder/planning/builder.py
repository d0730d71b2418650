"""Smart set building: shape a setlist around an energy arc.

A 90-minute gig is treated as roughly 15 songs. The pool is ranked by
popularity, then filled bucket by bucket following the arc below: a moderate
open, a high-energy middle, a late peak and a short tail. Whatever the arc
cannot fill is topped up with the most popular songs left in the pool.
"""

import logging
from typing import Iterable, NamedTuple

from gigbuilder.models import Song

logger = logging.getLogger(__name__)

SET_SIZE = 15


class EnergyPick(NamedTuple):
    energy: int
    count: int


# Pick order for the default 90-minute arc (4 + 5 + 4 + 1 + 1 = 15)
DEFAULT_ARC: tuple[EnergyPick, ...] = (
    EnergyPick(3, 4),
    EnergyPick(4, 5),
    EnergyPick(5, 4),
    EnergyPick(4, 1),
    EnergyPick(5, 1),
)


def rank_by_popularity(pool: Iterable[Song]) -> list[Song]:
    """Most popular first; ties keep pool order."""
    return sorted(pool, key=lambda s: s.popularity or 0, reverse=True)


def _pick(ranked: list[Song], energy: int, count: int, chosen: list[Song], taken: set[str]) -> int:
    picked = 0
    for song in ranked:
        if picked >= count:
            break
        if (song.energy or 0) != energy or song.key_id in taken:
            continue
        chosen.append(song)
        taken.add(song.key_id)
        picked += 1
    return picked


def build_smart_set(
    pool: Iterable[Song],
    arc: Iterable[EnergyPick] = DEFAULT_ARC,
    size: int = SET_SIZE,
) -> list[Song]:
    """Assemble an ordered set of at most `size` songs from an already-filtered pool.

    Each arc step takes up to `count` of the most popular unused songs at exactly
    that energy; a short bucket just yields fewer songs. The fallback pass then
    appends the most popular unused songs of any energy until the set is full
    or the pool runs out. No song id appears twice.
    """
    ranked = rank_by_popularity(pool)
    chosen: list[Song] = []
    taken: set[str] = set()

    for step in arc:
        picked = _pick(ranked, step.energy, step.count, chosen, taken)
        if picked < step.count:
            logger.debug(f"Energy {step.energy}: wanted {step.count}, found {picked}")

    arc_count = len(chosen)
    for song in ranked:
        if len(chosen) >= size:
            break
        if song.key_id in taken:
            continue
        chosen.append(song)
        taken.add(song.key_id)

    if len(chosen) > arc_count:
        logger.debug(f"Fallback filled {len(chosen) - arc_count} slot(s)")

    return chosen[:size]
