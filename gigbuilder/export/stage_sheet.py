"""Large-print stage sheet export."""

from pathlib import Path

from gigbuilder.catalog.filters import resolve_ids
from gigbuilder.chords.chart import render_chart
from gigbuilder.db import get_saved_set
from gigbuilder.models import Song


def format_stage_sheet(set_name: str, songs: list[Song], offset: int = 0) -> str:
    """Teleprompter text for a set: one block per song, chords transposed by `offset`."""
    lines = [set_name.upper(), "=" * max(len(set_name), 8)]
    if offset:
        lines.append(f"Transpose: {offset:+d}")
    lines.append("")

    for i, song in enumerate(songs, 1):
        lines.append(f"{i}. {song.display_name}")
        lines.append(f"Key {song.key or '-'} | Capo {song.capo if song.capo != '' else '-'}")
        lines.append("")
        lines.append(render_chart(song, offset))
        lines.append("")
        lines.append("-" * 40)
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def export_stage_sheet(
    set_name: str,
    catalog: list[Song],
    offset: int = 0,
    output_path: str | None = None,
) -> str | None:
    """Write a saved set as a stage sheet.

    Returns the output file path on success, None when the set is missing or empty.
    """
    saved = get_saved_set(set_name)
    if saved is None:
        return None

    songs = resolve_ids(catalog, saved.song_ids)
    if not songs:
        return None

    if not output_path:
        safe_name = set_name.replace(" ", "_").replace("/", "-")
        output_path = f"{safe_name}.txt"

    output_file = Path(output_path).expanduser()
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(format_stage_sheet(set_name, songs, offset), encoding="utf-8")
    return str(output_file)
