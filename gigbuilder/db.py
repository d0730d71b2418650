"""SQLite storage for named saved sets."""

import sqlite3
from pathlib import Path

from gigbuilder.config import get_settings
from gigbuilder.models import SavedSet

SCHEMA = """
CREATE TABLE IF NOT EXISTS saved_sets (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT UNIQUE NOT NULL
);

CREATE TABLE IF NOT EXISTS saved_set_songs (
    set_id INTEGER NOT NULL,
    position INTEGER NOT NULL,
    song_id TEXT NOT NULL,
    PRIMARY KEY (set_id, position),
    FOREIGN KEY (set_id) REFERENCES saved_sets(id) ON DELETE CASCADE
);
"""


def _get_db_path() -> Path:
    settings = get_settings()
    return settings.db_path()


def _ensure_db() -> sqlite3.Connection:
    db_path = _get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.executescript(SCHEMA)
    return conn


def get_connection() -> sqlite3.Connection:
    return _ensure_db()


def save_set(name: str, song_ids: list[str]) -> SavedSet:
    """Create or overwrite a saved set, storing ids in performance order."""
    conn = get_connection()
    try:
        conn.execute("INSERT OR IGNORE INTO saved_sets (name) VALUES (?)", (name,))
        set_id = conn.execute("SELECT id FROM saved_sets WHERE name = ?", (name,)).fetchone()["id"]
        conn.execute("DELETE FROM saved_set_songs WHERE set_id = ?", (set_id,))
        conn.executemany(
            "INSERT INTO saved_set_songs (set_id, position, song_id) VALUES (?, ?, ?)",
            [(set_id, position, str(song_id)) for position, song_id in enumerate(song_ids, start=1)],
        )
        conn.commit()
        return SavedSet(id=set_id, name=name, song_ids=[str(s) for s in song_ids])
    finally:
        conn.close()


def get_saved_set(name: str) -> SavedSet | None:
    conn = get_connection()
    try:
        row = conn.execute("SELECT * FROM saved_sets WHERE name = ?", (name,)).fetchone()
        if row is None:
            return None
        songs = conn.execute(
            "SELECT song_id FROM saved_set_songs WHERE set_id = ? ORDER BY position", (row["id"],)
        ).fetchall()
        return SavedSet(id=row["id"], name=row["name"], song_ids=[r["song_id"] for r in songs])
    finally:
        conn.close()


def list_saved_sets() -> list[str]:
    conn = get_connection()
    try:
        rows = conn.execute("SELECT name FROM saved_sets").fetchall()
        return sorted((r["name"] for r in rows), key=lambda n: (n.casefold(), n))
    finally:
        conn.close()


def delete_saved_set(name: str) -> bool:
    conn = get_connection()
    try:
        row = conn.execute("SELECT id FROM saved_sets WHERE name = ?", (name,)).fetchone()
        if row is None:
            return False
        conn.execute("DELETE FROM saved_set_songs WHERE set_id = ?", (row["id"],))
        conn.execute("DELETE FROM saved_sets WHERE id = ?", (row["id"],))
        conn.commit()
        return True
    finally:
        conn.close()
