"""
Musical helpers for building chord progressions.

This module turns lead-sheet chord symbols into Chord models using music21's
harmony parser, provides the default demo progression and converts MIDI
note numbers to pitch names for logging and display.
"""

import logging
import re
from pathlib import Path

import music21
from music21 import harmony
from music21.exceptions21 import Music21Exception

from chords_to_midi.exceptions import InputError
from chords_to_midi.models import Chord

logger = logging.getLogger(__name__)

# Root letter, optional accidental, then the quality/extension/bass suffix
CHORD_SYMBOL_RE = re.compile(r"^([A-Ga-g])([#b]?)(.*)$")
SLASH_BASS_RE = re.compile(r"/([A-Ga-g])b")
PROGRESSION_SEPARATORS_RE = re.compile(r"[\s|,]+")


def get_demo_chords() -> list[Chord]:
    """Return the default I-V-IV progression in C major.

    Returns:
        C major (60), G major (67) and F major (65) triads.
    """
    return [
        Chord(root=60, intervals=(0, 4, 7)),
        Chord(root=67, intervals=(0, 4, 7)),
        Chord(root=65, intervals=(0, 4, 7)),
    ]


def _to_music21_figure(symbol: str) -> str:
    """Rewrite flats as music21 spells them ('Bb' -> 'B-')."""
    match = CHORD_SYMBOL_RE.match(symbol)
    if match is None:
        raise InputError(f"Invalid chord symbol {symbol!r}: expected a root A-G")
    letter, accidental, rest = match.groups()
    accidental = "-" if accidental == "b" else accidental
    rest = SLASH_BASS_RE.sub(lambda m: f"/{m.group(1).upper()}-", rest)
    return f"{letter.upper()}{accidental}{rest}"


def parse_chord_symbol(symbol: str, octave: int = 4) -> Chord:
    """Parse a lead-sheet chord symbol into a Chord.

    The root is placed in the requested octave (C4 = 60). Intervals are
    pitch-class offsets from the root, root first and the remaining chord
    tones ascending, so slash chords keep their root as ``intervals[0]``.

    Args:
        symbol: Chord symbol such as "C", "Am", "G7", "Bb", "F#m7" or "C/E".
        octave: Octave of the root note (default 4).

    Returns:
        The parsed Chord.

    Raises:
        InputError: If the symbol cannot be parsed or places the root
            outside the MIDI range.
    """
    figure = _to_music21_figure(symbol.strip())
    try:
        chord_symbol = harmony.ChordSymbol(figure)
        root_pc = chord_symbol.root().pitchClass
        pitch_classes = {p.pitchClass for p in chord_symbol.pitches}
    except (Music21Exception, ValueError, KeyError, IndexError, AttributeError) as e:
        raise InputError(f"Invalid chord symbol {symbol!r}: {e}") from e

    if not pitch_classes:
        raise InputError(f"Chord symbol {symbol!r} has no pitches")

    root = 12 * (octave + 1) + root_pc
    if not 0 <= root <= 127:
        raise InputError(f"Root of {symbol!r} in octave {octave} is outside 0-127")

    others = sorted({(pc - root_pc) % 12 for pc in pitch_classes} - {0})
    logger.debug(f"Parsed {symbol!r} as root={root}, intervals={[0, *others]}")
    return Chord(root=root, intervals=(0, *others))


def parse_progression(text: str, octave: int = 4) -> list[Chord]:
    """Parse a chord progression from text.

    Symbols are separated by whitespace, commas or bar lines ('|'). Blank
    lines and lines starting with '#' are ignored.

    Args:
        text: Progression text, e.g. "C | Am | F | G".
        octave: Octave of each chord root (default 4).

    Returns:
        Chords in the order they appear.

    Raises:
        InputError: If any symbol is invalid.
    """
    chords = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        for token in PROGRESSION_SEPARATORS_RE.split(stripped):
            if token:
                chords.append(parse_chord_symbol(token, octave))
    return chords


def load_progression(path: str | Path, octave: int = 4) -> list[Chord]:
    """Read and parse a chord progression file.

    Args:
        path: Path to a UTF-8 text file in the :func:`parse_progression` format.
        octave: Octave of each chord root (default 4).

    Returns:
        Chords in file order.

    Raises:
        InputError: If the file cannot be read or contains an invalid symbol.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read progression file {path}: {e}") from e
    return parse_progression(text, octave)


def get_key_name(midi_note: int) -> str:
    """Convert a MIDI note number to a key name (e.g., "C4").

    Args:
        midi_note: MIDI note number (0–127).

    Returns:
        The pitch name with octave (e.g., "C4", "G#3").
    """
    p = music21.pitch.Pitch()
    p.midi = midi_note
    return p.nameWithOctave
