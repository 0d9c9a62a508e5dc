import pytest

from chords_to_midi.exceptions import InputError
from chords_to_midi.music_transformations import (
    get_demo_chords,
    get_key_name,
    load_progression,
    parse_chord_symbol,
    parse_progression,
)


def test_demo_chords():
    chords = get_demo_chords()
    assert [c.root for c in chords] == [60, 67, 65]
    assert all(c.intervals == (0, 4, 7) for c in chords)


@pytest.mark.parametrize(
    "symbol, root, intervals",
    [
        ("C", 60, (0, 4, 7)),
        ("Am", 69, (0, 3, 7)),
        ("G7", 67, (0, 4, 7, 10)),
        ("Bb", 70, (0, 4, 7)),
        ("C/E", 60, (0, 4, 7)),
    ],
)
def test_parse_chord_symbol(symbol, root, intervals):
    chord = parse_chord_symbol(symbol)
    assert chord.root == root
    assert chord.intervals == intervals


def test_parse_chord_symbol_octave():
    assert parse_chord_symbol("F#m", octave=3).root == 54


@pytest.mark.parametrize("symbol", ["H", "7", ""])
def test_parse_chord_symbol_invalid(symbol):
    with pytest.raises(InputError):
        parse_chord_symbol(symbol)


def test_parse_chord_symbol_root_out_of_range():
    with pytest.raises(InputError):
        parse_chord_symbol("C", octave=10)


def test_parse_progression_skips_comments_and_blanks():
    text = "# intro\nC | Am\n\nF, G\n"
    chords = parse_progression(text)
    assert [c.root for c in chords] == [60, 69, 65, 67]


def test_load_progression(tmp_path):
    path = tmp_path / "song.txt"
    path.write_text("C G F\n", encoding="utf-8")
    assert load_progression(path) == get_demo_chords()


def test_load_progression_missing_file(tmp_path):
    with pytest.raises(InputError):
        load_progression(tmp_path / "missing.txt")


def test_get_key_name():
    key = get_key_name(60)
    assert key.startswith("C4")
