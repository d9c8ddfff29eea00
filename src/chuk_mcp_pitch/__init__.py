"""
chuk-mcp-pitch - exact musical pitch for 12-tone equal temperament, A4 = 440 Hz.

Construct a Pitch from a frequency, a note name plus octave, or a semitone
offset; convert losslessly between them; measure and apply Intervals in
semitones or cents.

    >>> from chuk_mcp_pitch import Pitch, Interval
    >>> a4 = Pitch.from_frequency(440.0)
    >>> str(a4), a4.octave()
    ('A4', 4)
    >>> (a4 + Interval.OCTAVE).frequency()
    880.0
"""

from chuk_mcp_pitch.core import (
    FREQUENCIES,
    NAMED_INTERVALS,
    Accidental,
    ArgumentError,
    Interval,
    NoteName,
    ParseError,
    Pitch,
    PitchError,
    SpelledNote,
    apply,
    between,
    class_index_of,
    from_cents,
    from_frequency,
    from_note,
    from_semitones_from_a4,
    invert,
    name_of,
    parse,
    standard_pitches,
    to_cents,
    to_note_name,
)

__version__ = "0.1.0"

__all__ = [
    "PitchError",
    "ArgumentError",
    "ParseError",
    "NoteName",
    "Accidental",
    "SpelledNote",
    "name_of",
    "class_index_of",
    "parse",
    "to_note_name",
    "Pitch",
    "FREQUENCIES",
    "from_frequency",
    "from_note",
    "from_semitones_from_a4",
    "standard_pitches",
    "Interval",
    "NAMED_INTERVALS",
    "between",
    "apply",
    "invert",
    "to_cents",
    "from_cents",
]
