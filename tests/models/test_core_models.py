import pytest
from pydantic import ValidationError
from chords_to_midi.models import Chord, EventKind, TrackEvent


def test_chord_strum_note_uses_first_interval(valid_chord):
    assert valid_chord.strum_note == 60
    assert Chord(root=60, intervals=(4, 7)).strum_note == 64


def test_chord_accepts_list_intervals():
    chord = Chord(root=67, intervals=[0, 4, 7])
    assert chord.intervals == (0, 4, 7)


def test_chord_is_frozen(valid_chord):
    with pytest.raises(ValidationError):
        valid_chord.root = 62


@pytest.mark.parametrize(
    "kwargs",
    [
        {"root": -1, "intervals": (0,)},
        {"root": 128, "intervals": (0,)},
        {"root": 60, "intervals": ()},
        {"root": 60, "intervals": (0, -4)},
        {"root": 60, "intervals": (128,)},
    ],
)
def test_chord_validation_raises(kwargs):
    with pytest.raises(ValidationError):
        Chord(**kwargs)


def test_track_event_valid(valid_event):
    assert valid_event.kind is EventKind.NOTE_ON
    assert valid_event.kind.value == "note_on"
    assert valid_event.delta == 0


def test_track_event_kind_from_string():
    event = TrackEvent(delta=5, channel=1, kind="note_off", note=60, velocity=64)
    assert event.kind is EventKind.NOTE_OFF


@pytest.mark.parametrize(
    "field, value",
    [
        ("delta", -1),
        ("delta", 0x10000000),
        ("channel", -1),
        ("channel", 16),
        ("note", 128),
        ("note", -1),
        ("velocity", 128),
        ("kind", "control_change"),
    ],
)
def test_track_event_validation_raises(field, value):
    kwargs = {"delta": 0, "channel": 0, "kind": "note_on", "note": 60, "velocity": 64}
    kwargs[field] = value
    with pytest.raises(ValidationError):
        TrackEvent(**kwargs)


def test_track_event_is_frozen(valid_event):
    with pytest.raises(ValidationError):
        valid_event.delta = 10


def test_track_event_accepts_largest_delta():
    event = TrackEvent(
        delta=0x0FFFFFFF, channel=0, kind="note_on", note=60, velocity=64
    )
    assert event.delta == 0x0FFFFFFF
