"""Plain-text chord chart rendering."""

from gigbuilder.chords.transpose import transpose
from gigbuilder.models import SECTION_ORDER, Song

NO_CHORDS = "No chords found for this song."


def section_label(section: str) -> str:
    return "PRE-CHORUS" if section == "preChorus" else section.upper()


def chart_sections(song: Song, offset: int = 0) -> list[tuple[str, list[str]]]:
    """(label, transposed chords) pairs in performance order, empty sections skipped."""
    sections = []
    for name in SECTION_ORDER:
        chords = song.chords.get(name)
        if not chords:
            continue
        sections.append((section_label(name), [transpose(c, offset) for c in chords]))
    return sections


def render_chart(song: Song, offset: int = 0) -> str:
    """Render a song's chord chart, transposed by `offset`.

    Songs with a chord link are not charted inline; the link is returned instead.
    """
    if song.chord_link:
        return f"Chords: {song.chord_link}"

    sections = chart_sections(song, offset)
    if not sections:
        return NO_CHORDS

    return "\n\n".join(f"{label}\n{' - '.join(chords)}" for label, chords in sections)
