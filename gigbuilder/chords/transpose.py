"""Chord symbol transposition by semitone offsets."""

import re

# Note name (sharp, flat and theoretical spellings) → pitch class
NOTE_TO_PITCH: dict[str, int] = {
    "C": 0,   "B#": 0,  "C#": 1,  "Db": 1,
    "D": 2,   "D#": 3,  "Eb": 3,  "E": 4,
    "Fb": 4,  "E#": 5,  "F": 5,   "F#": 6,
    "Gb": 6,  "G": 7,   "G#": 8,  "Ab": 8,
    "A": 9,   "A#": 10, "Bb": 10, "B": 11,
    "Cb": 11,
}

# Pitch class → canonical output spelling (always sharps)
PITCH_TO_NOTE = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

MAX_OFFSET = 11

_NOTE_RE = re.compile(r"^([A-G][#b]?)(.*)$", re.DOTALL)


def transpose_note(note: str, offset: int) -> str:
    """Move a bare note name by `offset` semitones, e.g. ('Bb', -1) → 'A'."""
    pitch = NOTE_TO_PITCH[note]
    return PITCH_TO_NOTE[(pitch + offset) % 12]


def _transpose_part(part: str, offset: int) -> str | None:
    match = _NOTE_RE.match(part)
    if match is None:
        return None
    root, quality = match.groups()
    return transpose_note(root, offset) + quality


def transpose(chord: str, offset: int) -> str:
    """Transpose a chord symbol like 'F#m7' or 'G/B' by `offset` semitones.

    The quality suffix is copied verbatim. A slash bass note is transposed with
    the same rules, or left as written when it does not parse. Symbols that do
    not start with a note name ('N.C.', '%') come back unchanged, as does any
    symbol when the offset is a whole number of octaves.
    """
    if offset % 12 == 0:
        return chord

    main, slash, bass = chord.partition("/")
    transposed = _transpose_part(main, offset)
    if transposed is None:
        return chord
    if not slash:
        return transposed

    transposed_bass = _transpose_part(bass, offset)
    return f"{transposed}/{transposed_bass if transposed_bass is not None else bass}"


def transpose_chords(chords: dict[str, list[str]], offset: int) -> dict[str, list[str]]:
    """Return a copy of a section → chords mapping with every chord transposed."""
    return {section: [transpose(c, offset) for c in seq] for section, seq in chords.items()}


def adjust_offset(current: int, step: int) -> int:
    """Apply a single ±1 step to a transposition offset, folding back into [-11, 11]."""
    value = current + step
    if value > MAX_OFFSET:
        value -= 12
    elif value < -MAX_OFFSET:
        value += 12
    return value


def normalize_offset(value: int) -> int:
    """Fold any integer offset into [-11, 11], keeping its sign."""
    if value >= 0:
        return value % 12
    return -((-value) % 12)
