"""Core domain models for chord-to-MIDI conversion."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

MidiByte = Annotated[int, Field(ge=0, le=127)]

# Largest delta a variable-length quantity can hold (28 bits)
MAX_DELTA = 0x0FFFFFFF


class Chord(BaseModel):
    """A chord as a root pitch plus ordered interval offsets.

    The timeline builder only ever sounds ``root + intervals[0]``; the
    remaining intervals are carried along so callers keep the full voicing.

    Attributes:
        root: Root MIDI pitch (0-127, where 60 is middle C).
        intervals: Non-empty ordered offsets in semitones from the root.
    """

    model_config = ConfigDict(frozen=True)

    root: int = Field(..., ge=0, le=127, description="Root MIDI pitch (0-127)")
    intervals: tuple[MidiByte, ...] = Field(
        ..., min_length=1, description="Semitone offsets from the root"
    )

    @property
    def strum_note(self) -> int:
        """The pitch sounded by each strum of this chord."""
        return self.root + self.intervals[0]


class EventKind(str, Enum):
    """Channel message type of a track event, named as mido names them."""

    NOTE_ON = "note_on"
    NOTE_OFF = "note_off"


class TrackEvent(BaseModel):
    """A single delta-timed channel event in a MIDI track.

    ``delta`` is the tick distance from the previous event in the track,
    so a sequence of these only makes sense in order.

    Attributes:
        delta: Ticks since the previous event (0 to MAX_DELTA).
        channel: MIDI channel (0-15).
        kind: Note-On or Note-Off.
        note: MIDI note number (0-127).
        velocity: Note velocity (0-127).
    """

    model_config = ConfigDict(frozen=True)

    delta: int = Field(
        ..., ge=0, le=MAX_DELTA, description="Ticks since the previous event"
    )
    channel: int = Field(..., ge=0, le=15, description="MIDI channel (0-15)")
    kind: EventKind = Field(..., description="Note-On or Note-Off")
    note: int = Field(..., ge=0, le=127, description="MIDI note number (0-127)")
    velocity: int = Field(..., ge=0, le=127, description="Note velocity (0-127)")
