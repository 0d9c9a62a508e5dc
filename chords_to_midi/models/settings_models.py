"""Parameter models for pipeline configuration.

This module defines Pydantic models that encapsulate every configurable
parameter of the chord-to-MIDI conversion. The timeline parameters feed the
strum generator, the MIDI parameters feed serialization, and
``ProcessingParameters`` bundles both for the pipeline and the CLI.
"""

from typing import Annotated

from pydantic import BaseModel, Field

# Tick offsets of each strum relative to the start of its chord.
DEFAULT_STRUM_PATTERN: tuple[int, ...] = (0, 120, 240, 360)
DEFAULT_NOTE_DURATION = 40
NOTE_OFF_VELOCITY = 64


class TimelineParams(BaseModel):
    """Configuration parameters for strum timeline generation.

    Controls where the progression starts, how far apart consecutive chords
    are, and how each chord is strummed. ``ticks_per_measure`` must cover the
    strum span (last offset plus note duration); a shorter measure makes the
    next chord start before the previous one ends, which the timeline
    builder rejects.

    Attributes:
        start_tick: Absolute tick of the first chord (default 0).
        ticks_per_measure: Ticks between consecutive chord starts (default 1920).
        channel: MIDI channel for every event (0-15, default 0).
        base_velocity: Note-On velocity (0-127, default 64).
        strum_pattern: Strum offsets in ticks from the chord start.
        note_duration: Length of each strummed note in ticks (default 40).
        note_off_velocity: Note-Off velocity (0-127, default 64).
    """

    start_tick: int = Field(0, ge=0, description="Absolute tick of the first chord")
    ticks_per_measure: int = Field(
        1920, ge=1, description="Ticks between consecutive chord starts"
    )
    channel: int = Field(0, ge=0, le=15, description="MIDI channel")
    base_velocity: int = Field(64, ge=0, le=127, description="Note-On velocity")
    strum_pattern: tuple[Annotated[int, Field(ge=0)], ...] = Field(
        DEFAULT_STRUM_PATTERN,
        min_length=1,
        description="Strum offsets in ticks from the chord start",
    )
    note_duration: int = Field(
        DEFAULT_NOTE_DURATION, ge=0, description="Strummed note length in ticks"
    )
    note_off_velocity: int = Field(
        NOTE_OFF_VELOCITY, ge=0, le=127, description="Note-Off velocity"
    )

    @property
    def strum_span(self) -> int:
        """Ticks from the chord start to the end of its last strummed note."""
        return max(self.strum_pattern) + self.note_duration


class MidiParams(BaseModel):
    """Configuration parameters for Standard MIDI File serialization.

    Attributes:
        ticks_per_beat: Metrical resolution in ticks per quarter note (default 480).
        midi_type: SMF format 0, 1 or 2 (default 1).
        track_name: Optional track name meta event written at the track start.
    """

    ticks_per_beat: int = Field(480, ge=1, description="Ticks per quarter note")
    midi_type: int = Field(1, ge=0, le=2, description="SMF format type")
    track_name: str | None = Field(None, description="Optional track name")


class ProcessingParameters(BaseModel):
    """Complete configuration for the chord-to-MIDI pipeline.

    Attributes:
        timeline: Parameters for strum timeline generation.
        midi: Parameters for MIDI file serialization.
    """

    timeline: TimelineParams = Field(
        default_factory=TimelineParams, description="Timeline parameters"
    )
    midi: MidiParams = Field(
        default_factory=MidiParams, description="MIDI serialization parameters"
    )
