"""Constructors for delta-timed Note-On and Note-Off track events."""

from chords_to_midi.models import EventKind, TrackEvent


def make_note_on(delta: int, channel: int, note: int, velocity: int) -> TrackEvent:
    """Create a Note-On event.

    Args:
        delta: Ticks since the previous event in the track.
        channel: MIDI channel (0-15).
        note: MIDI note number (0-127).
        velocity: Note-On velocity (0-127).

    Returns:
        An immutable TrackEvent of kind ``NOTE_ON``.

    Raises:
        pydantic.ValidationError: If any value is outside its MIDI range.
    """
    return TrackEvent(
        delta=delta,
        channel=channel,
        kind=EventKind.NOTE_ON,
        note=note,
        velocity=velocity,
    )


def make_note_off(delta: int, channel: int, note: int, velocity: int) -> TrackEvent:
    """Create a Note-Off event. Arguments as for :func:`make_note_on`."""
    return TrackEvent(
        delta=delta,
        channel=channel,
        kind=EventKind.NOTE_OFF,
        note=note,
        velocity=velocity,
    )
