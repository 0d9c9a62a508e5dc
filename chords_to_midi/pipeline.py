"""
Pipeline processing functions for chord-to-MIDI conversion.

The pipeline runs in two stages: the strum timeline is generated from the
chords, then the events are serialized into a Standard MIDI File. A timeline
ordering violation aborts the run before anything is serialized or written.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from chords_to_midi.midi_utils import save_midi_file, write_midi_file
from chords_to_midi.models import (
    Chord,
    MidiResult,
    ProcessingParameters,
    TimelineParams,
    TimelineResult,
)
from chords_to_midi.timeline import absolute_ticks, generate_chord_track_events

logger = logging.getLogger(__name__)


def build_timeline(chords: Sequence[Chord], params: TimelineParams) -> TimelineResult:
    """Generate the strum timeline for a chord progression.

    Args:
        chords: Chords in playing order.
        params: Timeline generation parameters.

    Returns:
        TimelineResult with the ordered events and their tick range.

    Raises:
        TimelineOrderError: If the parameters produce an out-of-order timeline.
    """
    events = generate_chord_track_events(
        chords,
        params.start_tick,
        params.ticks_per_measure,
        params.channel,
        params.base_velocity,
        strum_pattern=params.strum_pattern,
        note_duration=params.note_duration,
        note_off_velocity=params.note_off_velocity,
    )
    ticks = absolute_ticks(events, params.start_tick)
    end_tick = ticks[-1] if ticks else params.start_tick
    return TimelineResult(
        events=events, start_tick=params.start_tick, end_tick=end_tick
    )


def generate_midi(
    chords: Sequence[Chord], params: ProcessingParameters | None = None
) -> MidiResult:
    """Generate MIDI data from a chord progression.

    Args:
        chords: Chords in playing order.
        params: Processing parameters; defaults are used when None.

    Returns:
        MidiResult with the events and serialized MIDI data. Empty when no
        chords are given.

    Raises:
        TimelineOrderError: If the timeline is out of order. Nothing is
            serialized in that case.
    """
    params = params or ProcessingParameters()

    if not chords:
        logger.warning("No chords provided for MIDI generation")
        return MidiResult()

    if params.timeline.ticks_per_measure < params.timeline.strum_span:
        logger.warning(
            f"ticks_per_measure={params.timeline.ticks_per_measure} is shorter than "
            f"the strum span of {params.timeline.strum_span} ticks"
        )

    timeline = build_timeline(chords, params.timeline)
    logger.info(
        f"Generated {len(timeline.events)} events for {len(chords)} chords "
        f"(ticks {timeline.start_tick}-{timeline.end_tick})"
    )

    midi_bytes = write_midi_file(
        timeline.events,
        ticks_per_beat=params.midi.ticks_per_beat,
        midi_type=params.midi.midi_type,
        track_name=params.midi.track_name,
    )
    return MidiResult(events=timeline.events, midi_bytes=midi_bytes)


def export_midi(
    chords: Sequence[Chord],
    path: str | Path,
    params: ProcessingParameters | None = None,
) -> MidiResult:
    """Generate MIDI data from a chord progression and save it to a file.

    Args:
        chords: Chords in playing order.
        path: Destination .mid path.
        params: Processing parameters; defaults are used when None.

    Returns:
        MidiResult with ``midi_file_path`` set when a file was written.

    Raises:
        TimelineOrderError: If the timeline is out of order. No file is
            written in that case.
    """
    result = generate_midi(chords, params)
    if result.midi_bytes is None:
        return result

    file_path = save_midi_file(result.midi_bytes, path)
    return result.model_copy(update={"midi_file_path": str(file_path)})
