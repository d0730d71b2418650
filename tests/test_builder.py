"""Tests for the smart set builder."""

from gigbuilder.models import Song
from gigbuilder.planning.builder import DEFAULT_ARC, EnergyPick, build_smart_set, rank_by_popularity


def make_song(song_id, energy: int, popularity: float = 50.0) -> Song:
    return Song(id=song_id, title=f"Song {song_id}", artist="Artist", energy=energy, popularity=popularity)


def make_pool(energies: dict[int, int]) -> list[Song]:
    pool = []
    for energy, count in energies.items():
        for _ in range(count):
            n = len(pool) + 1
            pool.append(make_song(f"s{n}", energy, popularity=(n * 37) % 100))
    return pool


def test_default_arc_adds_up_to_fifteen():
    assert sum(step.count for step in DEFAULT_ARC) == 15


def test_empty_pool():
    assert build_smart_set([]) == []


def test_exact_pool_of_fifteen_is_used_whole():
    pool = make_pool({3: 4, 4: 5, 5: 6})
    result = build_smart_set(pool)
    assert len(result) == 15
    assert {s.key_id for s in result} == {s.key_id for s in pool}


def test_never_duplicates_or_exceeds_size():
    pool = make_pool({1: 10, 3: 10, 4: 10, 5: 10})
    pool += pool[:5]  # duplicate records
    result = build_smart_set(pool)
    assert len(result) == 15
    assert len({s.key_id for s in result}) == 15


def test_arc_order_with_ample_supply():
    pool = make_pool({3: 8, 4: 8, 5: 8, 2: 8})
    result = build_smart_set(pool)
    energies = [s.energy for s in result]
    assert energies == [3] * 4 + [4] * 5 + [5] * 4 + [4] + [5]


def test_each_bucket_takes_most_popular_first():
    pool = [
        make_song("a", 3, 10),
        make_song("b", 3, 90),
        make_song("c", 3, 50),
        make_song("d", 3, 70),
        make_song("e", 3, 30),
    ]
    result = build_smart_set(pool)
    assert [s.id for s in result[:4]] == ["b", "d", "c", "e"]
    assert result[4].id == "a"


def test_short_buckets_are_backfilled_by_popularity():
    pool = [make_song("low1", 1, 99), make_song("low2", 2, 98), make_song("mid", 3, 10)]
    pool += [make_song(f"x{i}", 2, 50 - i) for i in range(20)]
    result = build_smart_set(pool)
    assert result[0].id == "mid"
    assert [s.id for s in result[1:4]] == ["low1", "low2", "x0"]
    assert len(result) == 15


def test_small_pool_returns_everything():
    pool = make_pool({1: 2, 5: 3})
    result = build_smart_set(pool)
    assert len(result) == 5
    assert [s.energy for s in result[:3]] == [5, 5, 5]


def test_popularity_ties_keep_pool_order():
    pool = [make_song(i, 4, 50) for i in range(6)]
    assert [s.id for s in rank_by_popularity(pool)] == [0, 1, 2, 3, 4, 5]
    assert [s.id for s in build_smart_set(pool)] == [0, 1, 2, 3, 4, 5]


def test_custom_arc_and_size():
    pool = make_pool({3: 5, 5: 5})
    arc = [EnergyPick(5, 2), EnergyPick(3, 1)]
    result = build_smart_set(pool, arc=arc, size=4)
    assert [s.energy for s in result[:3]] == [5, 5, 3]
    assert len(result) == 4


def test_pool_is_not_mutated():
    pool = make_pool({3: 3, 4: 3})
    before = list(pool)
    build_smart_set(pool)
    assert pool == before
