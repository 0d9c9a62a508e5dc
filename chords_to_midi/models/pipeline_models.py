"""Models for representing pipeline processing stages.

Each model holds the output of one step of the conversion, so the timeline
can be inspected and tested independently of serialization.
"""

from pydantic import BaseModel, Field

from chords_to_midi.models.core_models import TrackEvent


class TimelineResult(BaseModel):
    """Result of the strum timeline stage.

    Attributes:
        events: Ordered, delta-timed Note-On/Note-Off events.
        start_tick: Absolute tick the deltas are relative to.
        end_tick: Absolute tick of the last event, or ``start_tick`` if empty.
    """

    events: list[TrackEvent] = Field(
        default_factory=list, description="Ordered delta-timed events"
    )
    start_tick: int = Field(0, ge=0, description="Tick the deltas are relative to")
    end_tick: int = Field(0, ge=0, description="Absolute tick of the last event")


class MidiResult(BaseModel):
    """MIDI generation results.

    Attributes:
        events: Track events that were serialized.
        midi_bytes: Serialized MIDI file data, or None if nothing was generated.
        midi_file_path: Path the file was saved to, empty if not saved.
    """

    events: list[TrackEvent] = Field(
        default_factory=list, description="Serialized track events"
    )
    midi_bytes: bytes | None = Field(None, description="Serialized MIDI file data")
    midi_file_path: str = Field("", description="Path of the saved MIDI file")
