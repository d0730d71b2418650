"""Service helpers that connect CLI actions to the gig-builder core."""

from __future__ import annotations

from gigbuilder.catalog.filters import resolve_ids
from gigbuilder.catalog.loader import load_catalog
from gigbuilder.config import get_settings
from gigbuilder.db import delete_saved_set, get_saved_set, list_saved_sets, save_set
from gigbuilder.models import SavedSet, Song
from gigbuilder.session import GigSession


def load_library() -> list[Song]:
    """Load the catalog from the configured sources."""
    settings = get_settings()
    return load_catalog(settings.catalog_paths())


def open_session(catalog: list[Song] | None = None) -> GigSession:
    settings = get_settings()
    if catalog is None:
        catalog = load_library()
    return GigSession(catalog, set_size=settings.set_size)


def save_working_set(session: GigSession, name: str) -> SavedSet:
    """Persist the session's working set under `name`, overwriting any previous set."""
    name = (name or "").strip()
    if not name:
        raise ValueError("Give your set a name first.")
    if not session.working_set:
        raise ValueError("Your current set is empty.")
    return save_set(name, session.song_ids())


def load_saved_set(session: GigSession, name: str) -> list[Song]:
    """Replace the working set with a saved one; ids missing from the catalog are dropped."""
    saved = get_saved_set(name)
    if saved is None:
        raise ValueError(f"Set not found: {name}")
    return session.load_ids(saved.song_ids)


def get_set_songs(catalog: list[Song], name: str) -> tuple[list[Song], int]:
    """Resolve a saved set against the catalog; returns (songs, number of dropped ids)."""
    saved = get_saved_set(name)
    if saved is None:
        raise ValueError(f"Set not found: {name}")
    songs = resolve_ids(catalog, saved.song_ids)
    return songs, len(saved.song_ids) - len(songs)


def delete_set(name: str) -> None:
    if not delete_saved_set(name):
        raise ValueError(f"Set not found: {name}")


def list_sets() -> list[str]:
    return list_saved_sets()
