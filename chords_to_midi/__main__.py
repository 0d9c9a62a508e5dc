import sys

from chords_to_midi.cli import main

sys.exit(main())
