import pytest

from chords_to_midi.midi_utils import (
    build_track,
    event_to_message,
    read_track_events,
    save_midi_file,
    write_midi_file,
)
from chords_to_midi.events import make_note_off, make_note_on


def test_event_to_message():
    msg = event_to_message(make_note_on(80, 2, 60, 100))
    assert msg.type == "note_on"
    assert (msg.time, msg.channel, msg.note, msg.velocity) == (80, 2, 60, 100)
    assert event_to_message(make_note_off(40, 2, 60, 64)).type == "note_off"


def test_build_track_ends_with_end_of_track(strum_events):
    track = build_track(strum_events)
    assert len(track) == len(strum_events) + 1
    assert track[-1].type == "end_of_track"
    assert track[-1].time == 0


def test_build_track_with_name():
    track = build_track([], track_name="Strums")
    assert track[0].type == "track_name"
    assert track[0].name == "Strums"


def test_write_midi_file_empty():
    data = write_midi_file([], ticks_per_beat=480)
    assert isinstance(data, (bytes, bytearray))
    # Should at least contain 'MThd'
    assert data.startswith(b"MThd")
    assert b"MTrk" in data


def test_written_events_read_back(strum_events):
    data = write_midi_file(strum_events, track_name="Chords")
    assert read_track_events(data) == strum_events


def test_save_midi_file(tmp_path):
    target = tmp_path / "nested" / "out.mid"
    data = write_midi_file([make_note_on(0, 0, 60, 64), make_note_off(40, 0, 60, 64)])
    path = save_midi_file(data, target)
    assert path == target
    assert target.read_bytes() == data
    assert not (tmp_path / "nested" / "out.mid.tmp").exists()


def test_save_midi_file_failure_removes_temp_file(tmp_path):
    target = tmp_path / "outdir"
    target.mkdir()
    with pytest.raises(OSError):
        save_midi_file(write_midi_file([]), target)
    assert not (tmp_path / "outdir.tmp").exists()
    assert target.is_dir()
