"""Command-line interface for strumming a chord progression into a MIDI file.

Usage:
    python -m chords_to_midi --output output.mid
    python -m chords_to_midi --chords "C | Am | F | G" --output song.mid
    python -m chords_to_midi --input progression.txt --ticks-per-measure 960

Without --input or --chords the C-G-F demo progression is used.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from chords_to_midi.exceptions import InputError, TimelineOrderError
from chords_to_midi.models import MidiParams, ProcessingParameters, TimelineParams
from chords_to_midi.music_transformations import (
    get_demo_chords,
    load_progression,
    parse_progression,
)
from chords_to_midi.pipeline import export_midi

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command-line interface.

    Returns:
        An ArgumentParser whose flags map onto ProcessingParameters.
    """
    parser = argparse.ArgumentParser(
        prog="chords-to-midi",
        description="Strum a chord progression into a single-track MIDI file.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", help="Path to a chord progression text file.")
    source.add_argument("--chords", help='Chord symbols, e.g. "C | Am | F | G".')
    parser.add_argument(
        "--output",
        default="output.mid",
        help="Output .mid path (default: output.mid).",
    )

    parser.add_argument(
        "--start-tick",
        type=int,
        default=0,
        help="Tick of the first chord (default: 0).",
    )
    parser.add_argument(
        "--ticks-per-measure",
        type=int,
        default=1920,
        help="Ticks between chord starts (default: 1920, one 4/4 bar at 480 TPQ).",
    )
    parser.add_argument(
        "--channel",
        type=int,
        default=0,
        help="MIDI channel 0..15 (default: 0).",
    )
    parser.add_argument(
        "--velocity",
        type=int,
        default=64,
        help="Note-On velocity 0..127 (default: 64).",
    )
    parser.add_argument(
        "--octave",
        type=int,
        default=4,
        help="Octave of chord roots (C4=60) (default: 4).",
    )
    parser.add_argument(
        "--ticks-per-beat",
        type=int,
        default=480,
        help="MIDI ticks per quarter note (default: 480).",
    )
    parser.add_argument("--track-name", default=None, help="Optional track name.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log the timeline trace."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface.

    Args:
        argv: Command-line arguments; ``sys.argv[1:]`` when None.

    Returns:
        Process exit status: 0 when the file was written, 1 on a timeline
        ordering violation, 2 on invalid input or an unwritable output path.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # music21 is chatty at DEBUG
    logging.getLogger("music21").setLevel(logging.WARNING)

    try:
        params = ProcessingParameters(
            timeline=TimelineParams(
                start_tick=args.start_tick,
                ticks_per_measure=args.ticks_per_measure,
                channel=args.channel,
                base_velocity=args.velocity,
            ),
            midi=MidiParams(
                ticks_per_beat=args.ticks_per_beat, track_name=args.track_name
            ),
        )
        if args.input:
            chords = load_progression(args.input, args.octave)
        elif args.chords:
            chords = parse_progression(args.chords, args.octave)
        else:
            chords = get_demo_chords()
    except (InputError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        result = export_midi(chords, args.output, params)
    except TimelineOrderError as e:
        logger.error(f"Aborting, no MIDI file written: {e}")
        return 1
    except ValidationError as e:
        # Pitch or delta pushed out of its MIDI range
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
        return 2

    if not result.midi_file_path:
        print("Error: no chords to write.", file=sys.stderr)
        return 2

    print(f"{result.midi_file_path} created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
