"""
Core pitch primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- NoteName: The 12 chromatic pitch classes (0-11)
- SpelledNote: A letter + accidental spelling of a pitch class
- Pitch: An absolute pitch, stored as semitones from A4 = 440 Hz
- Interval: Signed distance between pitches in semitones (or cents)
- ArgumentError / ParseError: The two ways construction can fail
"""

from chuk_mcp_pitch.core.errors import ArgumentError, ParseError, PitchError
from chuk_mcp_pitch.core.interval import (
    NAMED_INTERVALS,
    Interval,
    apply,
    between,
    from_cents,
    invert,
    to_cents,
)
from chuk_mcp_pitch.core.note import (
    Accidental,
    NoteName,
    SpelledNote,
    class_index_of,
    name_of,
    parse,
    to_note_name,
)
from chuk_mcp_pitch.core.pitch import (
    FREQUENCIES,
    Pitch,
    from_frequency,
    from_note,
    from_semitones_from_a4,
    standard_pitches,
)

__all__ = [
    # Errors
    "PitchError",
    "ArgumentError",
    "ParseError",
    # Note naming
    "NoteName",
    "Accidental",
    "SpelledNote",
    "name_of",
    "class_index_of",
    "parse",
    "to_note_name",
    # Pitch
    "Pitch",
    "FREQUENCIES",
    "from_frequency",
    "from_note",
    "from_semitones_from_a4",
    "standard_pitches",
    # Interval
    "Interval",
    "NAMED_INTERVALS",
    "between",
    "apply",
    "invert",
    "to_cents",
    "from_cents",
]
