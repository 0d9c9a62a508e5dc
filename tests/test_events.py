import pytest
from pydantic import ValidationError

from chords_to_midi.events import make_note_off, make_note_on
from chords_to_midi.models import EventKind


def test_make_note_on():
    event = make_note_on(10, 3, 60, 100)
    assert event.kind is EventKind.NOTE_ON
    assert (event.delta, event.channel, event.note, event.velocity) == (10, 3, 60, 100)


def test_make_note_off():
    event = make_note_off(40, 0, 67, 64)
    assert event.kind is EventKind.NOTE_OFF
    assert (event.delta, event.channel, event.note, event.velocity) == (40, 0, 67, 64)


def test_constructors_are_pure():
    assert make_note_on(0, 0, 60, 64) == make_note_on(0, 0, 60, 64)


@pytest.mark.parametrize("factory", [make_note_on, make_note_off])
@pytest.mark.parametrize(
    "args",
    [
        (-1, 0, 60, 64),
        (0, 16, 60, 64),
        (0, 0, 128, 64),
        (0, 0, 60, 128),
    ],
)
def test_out_of_range_values_raise(factory, args):
    with pytest.raises(ValidationError):
        factory(*args)
