"""Strum timeline generation.

This module turns a chord progression into the ordered, delta-timed event
stream of a single MIDI track. Every chord is strummed with a fixed pattern
of short notes; each note's absolute Note-On and Note-Off ticks are computed
from the chord position and converted to deltas against the previously
emitted event.

Deltas are checked rather than clamped: if an event would land before the
one emitted just before it, generation stops with a TimelineOrderError.
"""

import logging
from collections.abc import Sequence

from chords_to_midi.events import make_note_off, make_note_on
from chords_to_midi.exceptions import InputError, TimelineOrderError
from chords_to_midi.models import (
    DEFAULT_NOTE_DURATION,
    DEFAULT_STRUM_PATTERN,
    NOTE_OFF_VELOCITY,
    Chord,
    TrackEvent,
)
from chords_to_midi.music_transformations import get_key_name

logger = logging.getLogger(__name__)


def checked_delta(current: int, previous: int, context: str) -> int:
    """Return ``current - previous``, refusing to go negative.

    Args:
        current: Absolute tick of the event being emitted.
        previous: Absolute tick of the previously emitted event.
        context: Label identifying the computation in diagnostics.

    Returns:
        The non-negative tick distance between the two events.

    Raises:
        TimelineOrderError: If ``previous`` is later than ``current``.
    """
    if previous > current:
        logger.error(
            f"Timeline underflow in {context}: current={current}, previous={previous}"
        )
        raise TimelineOrderError(context, current, previous)
    return current - previous


def generate_chord_track_events(
    chords: Sequence[Chord],
    start_tick: int,
    ticks_per_measure: int,
    channel: int,
    base_velocity: int,
    strum_pattern: Sequence[int] = DEFAULT_STRUM_PATTERN,
    note_duration: int = DEFAULT_NOTE_DURATION,
    note_off_velocity: int = NOTE_OFF_VELOCITY,
) -> list[TrackEvent]:
    """Generate strummed Note-On/Note-Off events for a chord progression.

    Each chord occupies one measure starting at ``start_tick``. Within the
    measure the chord is strummed once per offset in ``strum_pattern``; each
    strum is a single note (``chord.root + chord.intervals[0]``) lasting
    ``note_duration`` ticks. The measure cursor always advances by
    ``ticks_per_measure``, so a measure shorter than the strum span makes
    the next chord start in the past and raises TimelineOrderError.

    Args:
        chords: Chords in playing order.
        start_tick: Absolute tick of the first chord; deltas are relative to it.
        ticks_per_measure: Ticks between consecutive chord starts.
        channel: MIDI channel for every event (0-15).
        base_velocity: Note-On velocity (0-127).
        strum_pattern: Strum offsets in ticks from the chord start.
        note_duration: Length of each strummed note in ticks.
        note_off_velocity: Note-Off velocity (0-127).

    Returns:
        ``2 * len(strum_pattern) * len(chords)`` events, alternating Note-On
        and Note-Off, with non-negative deltas.

    Raises:
        InputError: If ``start_tick`` is negative or ``ticks_per_measure``
            is not positive.
        TimelineOrderError: If any event would precede the one before it.
        pydantic.ValidationError: If a pitch, velocity or channel is out of
            its MIDI range.
    """
    if start_tick < 0:
        raise InputError(f"start_tick must be non-negative, got {start_tick}")
    if ticks_per_measure <= 0:
        raise InputError(f"ticks_per_measure must be positive, got {ticks_per_measure}")

    events: list[TrackEvent] = []

    abs_time = start_tick
    last_abs_time = start_tick

    logger.debug(
        f"generate_chord_track_events: start_tick={start_tick}, "
        f"ticks_per_measure={ticks_per_measure}, base_velocity={base_velocity}, "
        f"channel={channel}, chords={len(chords)}"
    )

    for chord_idx, chord in enumerate(chords):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"chord {chord_idx}: root={chord.root} ({get_key_name(chord.root)}), "
                f"intervals={list(chord.intervals)}, abs_time={abs_time}, "
                f"last_abs_time={last_abs_time}"
            )

        # Only the first interval is sounded; see Chord.strum_note.
        midi_note = chord.strum_note

        for offset in strum_pattern:
            note_on_abs = abs_time + offset
            note_off_abs = note_on_abs + note_duration

            logger.debug(
                f"  offset={offset}, note_on_abs={note_on_abs}, "
                f"note_off_abs={note_off_abs}, last_abs_time={last_abs_time}"
            )

            delta_on = checked_delta(note_on_abs, last_abs_time, "chord note_on delta")
            events.append(make_note_on(delta_on, channel, midi_note, base_velocity))
            last_abs_time = note_on_abs

            delta_off = checked_delta(
                note_off_abs, last_abs_time, "chord note_off delta"
            )
            events.append(
                make_note_off(delta_off, channel, midi_note, note_off_velocity)
            )
            last_abs_time = note_off_abs

        # Next chord starts one measure later, wherever the strum ended
        abs_time += ticks_per_measure

    return events


def absolute_ticks(events: Sequence[TrackEvent], start_tick: int = 0) -> list[int]:
    """Recover the absolute tick of every event from its delta.

    Args:
        events: Ordered delta-timed events.
        start_tick: Tick the first delta is measured from.

    Returns:
        A list with the absolute tick of each event, in order.
    """
    ticks = []
    now = start_tick
    for event in events:
        now += event.delta
        ticks.append(now)
    return ticks
