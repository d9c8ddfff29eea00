"""
Constants for the pitch system.

No magic numbers - the tuning reference and display precision live here.
The tuning is fixed: 12-tone equal temperament with A4 = 440 Hz.
"""

import math
import sys
from typing import Final

# Tuning reference
REFERENCE_FREQUENCY: Final[float] = 440.0  # A4 in Hz
REFERENCE_CLASS_INDEX: Final[int] = 9  # A in a C-based octave
REFERENCE_OCTAVE: Final[int] = 4
REFERENCE_MIDI: Final[int] = 69  # MIDI note number of A4

SEMITONES_PER_OCTAVE: Final[int] = 12
CENTS_PER_SEMITONE: Final[int] = 100

# Offsets and intervals are compared on a grid of this many steps per
# semitone. Two values that round to the same step are equal, which absorbs
# float error from log2/exp2 round trips through frequency.
STEPS_PER_SEMITONE: Final[int] = 1_000_000_000
SEMITONE_EPSILON: Final[float] = 1 / STEPS_PER_SEMITONE

# Offsets whose frequency is representable as a positive float: from the
# smallest subnormal up to the largest finite float.
MIN_SEMITONE_OFFSET: Final[float] = SEMITONES_PER_OCTAVE * (
    math.log2(math.ulp(0.0)) - math.log2(REFERENCE_FREQUENCY)
)
MAX_SEMITONE_OFFSET: Final[float] = SEMITONES_PER_OCTAVE * (
    math.log2(sys.float_info.max) - math.log2(REFERENCE_FREQUENCY)
)

# Widest interval: from the lowest pitch to the highest.
MAX_INTERVAL_SEMITONES: Final[float] = MAX_SEMITONE_OFFSET - MIN_SEMITONE_OFFSET

# Display precision
FREQUENCY_DECIMALS: Final[int] = 2
CENTS_DECIMALS: Final[int] = 1
SEMITONE_DECIMALS: Final[int] = 2

# Unicode accidental and notation marks
SHARP_SIGN: Final[str] = "♯"
FLAT_SIGN: Final[str] = "♭"
NATURAL_SIGN: Final[str] = "♮"
CENTS_SIGN: Final[str] = "¢"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_CLASS_INDEX = "Pitch class index must be an integer 0-11, got {value!r}."
    INVALID_FREQUENCY = "Frequency must be a positive finite number of Hz, got {value!r}."
    INVALID_OFFSET = "Semitone offset must be a finite number, got {value!r}."
    OFFSET_OUT_OF_RANGE = (
        "Semitone offset {value!r} is outside {low} to {high} semitones from A4, "
        "where the frequency is no longer a positive finite float."
    )
    INVALID_OCTAVE = "Octave must be an integer, got {value!r}."
    INVALID_MIDI = "MIDI note number must be a finite number, got {value!r}."
    INVALID_SEMITONES = "Interval semitones must be a finite number, got {value!r}."
    INTERVAL_OUT_OF_RANGE = "Interval of {value!r} semitones is wider than any two pitches, +/-{limit}."
    INVALID_CENTS = "Interval cents must be a finite number, got {value!r}."
    INVALID_NOTE_NAME = "Unknown note name: {text!r}. Expected a letter A-G with optional #, b, ♯ or ♭."
    INVALID_PITCH = "Unknown pitch: {text!r}. Expected scientific pitch notation like 'A4' or 'C#-1'."
    AMBIGUOUS_LABEL = "Enharmonic label {text!r} names two different pitch classes."
    INVALID_NOTE_ARGUMENT = "Expected a NoteName, SpelledNote or note name string, got {value!r}."
