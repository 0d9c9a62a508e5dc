"""MIDI file serialization utilities.

This module packages delta-timed track events into a Standard MIDI File
using mido. mido owns the binary container format (header and track chunks,
variable-length delta encoding); the functions here only map events to mido
messages, close the track and move bytes to and from disk.
"""

import io
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chords_to_midi.models import EventKind, TrackEvent

logger = logging.getLogger(__name__)


def event_to_message(event: TrackEvent) -> Message:
    """Convert a track event to the equivalent mido channel message.

    Args:
        event: Track event to convert.

    Returns:
        A ``note_on`` or ``note_off`` Message whose ``time`` is the event delta.
    """
    return Message(
        event.kind.value,
        channel=event.channel,
        note=event.note,
        velocity=event.velocity,
        time=event.delta,
    )


def build_track(
    events: Sequence[TrackEvent], track_name: str | None = None
) -> MidiTrack:
    """Build a MIDI track from ordered events and close it.

    Args:
        events: Ordered delta-timed events.
        track_name: Optional name written as a ``track_name`` meta event.

    Returns:
        A MidiTrack holding the events followed by an ``end_of_track`` marker.
    """
    track = MidiTrack()
    if track_name:
        track.append(MetaMessage("track_name", name=track_name, time=0))
    track.extend(event_to_message(event) for event in events)
    track.append(MetaMessage("end_of_track", time=0))
    return track


def write_midi_file(
    events: Sequence[TrackEvent],
    ticks_per_beat: int = 480,
    midi_type: int = 1,
    track_name: str | None = None,
) -> bytes:
    """Generate a single-track MIDI file from ordered track events.

    Args:
        events: Ordered delta-timed events.
        ticks_per_beat: MIDI ticks per quarter note (default 480).
        midi_type: SMF format type (default 1).
        track_name: Optional track name.

    Returns:
        MIDI file data as bytes, suitable for writing to a .mid file
        or loading in a MIDI player.
    """
    midi_file = MidiFile(type=midi_type, ticks_per_beat=ticks_per_beat)
    midi_file.tracks.append(build_track(events, track_name))

    # Serialize to bytes
    buffer = io.BytesIO()
    midi_file.save(file=buffer)
    logger.info(
        f"Serialized {len(events)} events ({buffer.tell()} bytes, "
        f"{ticks_per_beat} ticks per beat)"
    )
    return buffer.getvalue()


def save_midi_file(midi_bytes: bytes, path: str | Path) -> Path:
    """Write MIDI data to disk, replacing any existing file atomically.

    Args:
        midi_bytes: Serialized MIDI file data.
        path: Destination path; parent directories are created.

    Returns:
        The destination path.

    Raises:
        OSError: If the file cannot be written. No temporary file is left.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Write atomically to prevent partial reads
    temp_path = file_path.with_name(file_path.name + ".tmp")
    try:
        with open(temp_path, "wb") as f:
            f.write(midi_bytes)
        os.replace(temp_path, file_path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise

    logger.info(f"Wrote {len(midi_bytes)} bytes to {file_path}")
    return file_path


def read_track_events(midi_bytes: bytes) -> list[TrackEvent]:
    """Parse the note events of the first track of a MIDI file.

    Delta times are recomputed across skipped meta messages, so the result
    lines up with the events originally passed to :func:`write_midi_file`.

    Args:
        midi_bytes: Serialized MIDI file data.

    Returns:
        Note-On and Note-Off events of the first track, in order.
    """
    midi_file = MidiFile(file=io.BytesIO(midi_bytes))
    if not midi_file.tracks:
        return []

    events = []
    pending = 0
    for msg in midi_file.tracks[0]:
        pending += msg.time
        if msg.type not in (EventKind.NOTE_ON.value, EventKind.NOTE_OFF.value):
            continue
        events.append(
            TrackEvent(
                delta=pending,
                channel=msg.channel,
                kind=EventKind(msg.type),
                note=msg.note,
                velocity=msg.velocity,
            )
        )
        pending = 0
    return events
