import json

import pytest

from gigbuilder.config import get_settings

SONGS = [
    {"id": "s1", "title": "Wonderwall", "artist": "Oasis", "era": "90s", "key": "F#m", "capo": 2,
     "energy": 3, "popularity": 95, "tags": ["britpop"], "chords": {"verse": ["Em7", "G", "Dsus4", "A7sus4"]}},
    {"id": "s2", "title": "Mr. Brightside", "artist": "The Killers", "era": "00s", "key": "Db", "capo": 0,
     "energy": 5, "popularity": 98, "tags": ["indie"], "chords": {"chorus": ["Db", "Gb", "Bbm", "Ab"]}},
    {"id": "s3", "title": "Valerie", "artist": "Amy Winehouse", "era": "00s", "key": "Eb", "capo": 0,
     "energy": 4, "popularity": 90, "tags": ["soul"], "chordLink": "https://example.com/valerie"},
    {"id": 4, "title": "Hey Jude", "artist": "The Beatles", "era": "60s", "key": "F", "capo": 0,
     "energy": 3, "popularity": 80, "tags": ["classic"], "chords": {"intro": ["F", "C/E"]}},
]


@pytest.fixture
def settings_env(tmp_path, monkeypatch):
    """Point settings at a temporary catalog and database."""
    (tmp_path / "songs.json").write_text(json.dumps(SONGS[:3]), encoding="utf-8")
    (tmp_path / "extra.json").write_text(json.dumps(SONGS[2:]), encoding="utf-8")
    monkeypatch.setenv("CATALOG_DIR", str(tmp_path))
    monkeypatch.setenv("CATALOG_FILES", "songs.json, extra.json")
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "data" / "test.sqlite"))
    monkeypatch.delenv("SET_SIZE", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
