import pytest

from chords_to_midi.models import Chord, TimelineParams
from chords_to_midi.music_transformations import get_demo_chords
from chords_to_midi.timeline import generate_chord_track_events


@pytest.fixture
def c_major():
    return Chord(root=60, intervals=(0, 4, 7))


@pytest.fixture
def demo_chords():
    # C, G, F major triads
    return get_demo_chords()


@pytest.fixture
def timeline_params():
    # One 4/4 bar at 480 ticks per beat
    return TimelineParams(ticks_per_measure=1920)


@pytest.fixture
def strum_events(demo_chords, timeline_params):
    return generate_chord_track_events(
        demo_chords,
        timeline_params.start_tick,
        timeline_params.ticks_per_measure,
        timeline_params.channel,
        timeline_params.base_velocity,
    )
