import pytest
from chords_to_midi.models import Chord, EventKind, TrackEvent


@pytest.fixture
def valid_chord():
    return Chord(root=60, intervals=(0, 4, 7))


@pytest.fixture
def valid_event():
    return TrackEvent(delta=0, channel=0, kind=EventKind.NOTE_ON, note=60, velocity=64)
