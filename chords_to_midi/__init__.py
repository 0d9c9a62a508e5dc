"""Chord-progression-to-MIDI conversion library.

This package strums a chord progression into a single Standard MIDI File
track. Absolute note times are computed from each chord's measure and a
fixed strum pattern, then converted into ordered, non-negative delta times.
An out-of-order timeline is treated as a fatal error rather than clamped.

The processing pipeline consists of:
1. Chord input (Chord models, or lead-sheet symbols parsed with music21)
2. Strum timeline generation with checked delta computation
3. MIDI serialization and file export through mido

Example:
    Basic usage through the pipeline API:

    >>> from chords_to_midi.pipeline import export_midi
    >>> from chords_to_midi.music_transformations import parse_progression
    >>>
    >>> chords = parse_progression("C | G | F")
    >>> result = export_midi(chords, "output.mid")
"""
