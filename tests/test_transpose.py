"""Tests for chord transposition."""

import pytest

from gigbuilder.chords.transpose import (
    adjust_offset,
    normalize_offset,
    transpose,
    transpose_chords,
    transpose_note,
)

SYMBOLS = ["C", "F#m7", "G/B", "Cadd9", "A#sus4", "D/F#", "Emaj7#11", "G#dim/D"]


def test_known_transpositions():
    assert transpose("F#m7", 1) == "Gm7"
    assert transpose("Bb", -1) == "A"
    assert transpose("G/B", 2) == "A/C#"
    assert transpose("Cadd9", 12) == "Cadd9"


def test_zero_and_octaves_are_identity():
    for chord in SYMBOLS + ["Bb", "Ebm7/Db"]:
        assert transpose(chord, 0) == chord
        assert transpose(chord, 12) == chord
        assert transpose(chord, -24) == chord


@pytest.mark.parametrize("a, b", [(1, 2), (5, 7), (-3, 11), (13, -27), (100, -1)])
def test_composition_matches_single_shift(a, b):
    for chord in SYMBOLS:
        assert transpose(transpose(chord, a), b) == transpose(chord, a + b)


def test_flat_input_composes_up_to_spelling():
    assert transpose("Bb", 12) == "Bb"
    assert transpose(transpose("Bb", 5), 7) == "A#"
    assert transpose("Ebm7/Ab", 12) == "Ebm7/Ab"
    assert transpose(transpose("Ebm7/Ab", 1), -1) == "D#m7/G#"


def test_output_is_sharp_spelled():
    assert transpose("Db", 2) == "D#"
    assert transpose("Eb7", 0) == "Eb7"
    assert transpose("Eb7", 1) == "E7"
    assert transpose("Ab", 1) == "A"


def test_theoretical_spellings():
    assert transpose_note("B#", 1) == "C#"
    assert transpose_note("E#", 0) == "F"
    assert transpose_note("Cb", 1) == "C"
    assert transpose_note("Fb", 1) == "F"


def test_negative_offsets_wrap():
    assert transpose("C", -1) == "B"
    assert transpose("C", -13) == "B"
    assert transpose("A", 3) == "C"


def test_unparseable_symbols_pass_through():
    assert transpose("N.C.", 5) == "N.C."
    assert transpose("", 3) == ""
    assert transpose("x", 3) == "x"
    assert transpose("cm", 3) == "cm"


def test_unparseable_bass_kept_verbatim():
    assert transpose("C/x", 2) == "D/x"
    assert transpose("G/", 2) == "A/"


def test_quality_suffix_untouched():
    assert transpose("Bbmaj7b5", 2) == "Cmaj7b5"
    assert transpose("Asus2/E", -2) == "Gsus2/D"


def test_transpose_chords_maps_every_section():
    chords = {"verse": ["G", "D/F#"], "chorus": ["Em", "C"]}
    assert transpose_chords(chords, 2) == {"verse": ["A", "E/G#"], "chorus": ["F#m", "D"]}
    assert chords["verse"] == ["G", "D/F#"]


def test_adjust_offset_folds_once():
    assert adjust_offset(0, 1) == 1
    assert adjust_offset(0, -1) == -1
    assert adjust_offset(11, 1) == 0
    assert adjust_offset(-11, -1) == 0


def test_adjust_offset_stays_in_range():
    offset = 0
    for _ in range(40):
        offset = adjust_offset(offset, 1)
        assert -11 <= offset <= 11
    for _ in range(80):
        offset = adjust_offset(offset, -1)
        assert -11 <= offset <= 11


def test_normalize_offset():
    assert normalize_offset(0) == 0
    assert normalize_offset(14) == 2
    assert normalize_offset(-14) == -2
    assert normalize_offset(-12) == 0
    assert normalize_offset(11) == 11
