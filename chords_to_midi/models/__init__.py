"""Domain models for the chords-to-midi package.

This module provides a centralized location for all data models used
throughout the conversion:

- Core domain models (Chord, TrackEvent, EventKind)
- Pipeline stage results (TimelineResult, MidiResult)
- Configuration parameters for each stage

All models are built using Pydantic, so out-of-range pitches, velocities
and channels are rejected when a value is constructed.
"""

# Re-export core models
from chords_to_midi.models.core_models import Chord, EventKind, TrackEvent

# Re-export pipeline models
from chords_to_midi.models.pipeline_models import MidiResult, TimelineResult

# Re-export setting models
from chords_to_midi.models.settings_models import (
    DEFAULT_NOTE_DURATION,
    DEFAULT_STRUM_PATTERN,
    NOTE_OFF_VELOCITY,
    MidiParams,
    ProcessingParameters,
    TimelineParams,
)
