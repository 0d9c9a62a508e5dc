"""Exceptions raised by the chords-to-midi package."""


class ChordsToMidiError(Exception):
    """Base exception for chord-to-MIDI conversion errors."""

    pass


class InputError(ChordsToMidiError):
    """Exception raised when caller-supplied input is invalid."""

    pass


class TimelineOrderError(ChordsToMidiError):
    """Exception raised when an event would be placed before its predecessor.

    Delta times cannot be negative, so this signals a timing configuration
    that produces an impossible timeline, typically a measure shorter than
    the strum span. There is no sensible value to recover with.

    Attributes:
        context: Label of the delta computation that failed.
        current: Absolute tick of the event being emitted.
        previous: Absolute tick of the previously emitted event.
    """

    def __init__(self, context: str, current: int, previous: int):
        self.context = context
        self.current = current
        self.previous = previous
        super().__init__(
            f"Timeline ordering violation in {context}: "
            f"event at tick {current} precedes previous event at tick {previous}"
        )
