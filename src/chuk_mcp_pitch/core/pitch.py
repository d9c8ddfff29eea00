"""
Pitch model - an absolute pitch in 12-tone equal temperament, A4 = 440 Hz.

A Pitch stores exactly one number: its signed semitone offset from A4.
Frequency, note name and octave are views computed from that offset, so
no two representations can drift apart.

    frequency = 440 * 2 ** (offset / 12)
    note name = (round(offset) + 9) mod 12      (C = 0, A = 9)
    octave    = 4 + floor((round(offset) + 9) / 12)

Octaves follow scientific pitch notation: C4 up to B4 is the octave that
contains A4. Rounding is half-up, so offset 0.5 names A#4, not A4.

Offsets live on a grid of SEMITONE_EPSILON steps for comparison, naming
and display. Any offset whose frequency is a positive finite float is
accepted, from about -12993 to +12182 semitones.
"""

from __future__ import annotations

import math
import re
import sys
from functools import total_ordering
from numbers import Integral, Real

from chuk_mcp_pitch.constants import (
    CENTS_PER_SEMITONE,
    CENTS_SIGN,
    FREQUENCY_DECIMALS,
    MAX_SEMITONE_OFFSET,
    MIN_SEMITONE_OFFSET,
    REFERENCE_CLASS_INDEX,
    REFERENCE_FREQUENCY,
    REFERENCE_MIDI,
    REFERENCE_OCTAVE,
    SEMITONE_EPSILON,
    SEMITONES_PER_OCTAVE,
    STEPS_PER_SEMITONE,
    ErrorMessages,
)
from chuk_mcp_pitch.core.errors import ArgumentError, ParseError
from chuk_mcp_pitch.core.interval import Interval
from chuk_mcp_pitch.core.note import (
    NOTE_NAME_PATTERN,
    Accidental,
    NoteLike,
    NoteName,
    SpelledNote,
    name_of,
    to_note_name,
)

# Rounded frequencies of C0..B8, for display tables and sanity checks.
# See https://pages.mtu.edu/~suits/notefreqs.html
FREQUENCIES: tuple[float, ...] = (
    16.35, 17.32, 18.35, 19.45, 20.60, 21.83, 23.12, 24.50, 25.96, 27.50, 29.14, 30.87,
    32.70, 34.65, 36.71, 38.89, 41.20, 43.65, 46.25, 49.00, 51.91, 55.00, 58.27, 61.74,
    65.41, 69.30, 73.42, 77.78, 82.41, 87.31, 92.50, 98.00, 103.83, 110.00, 116.54, 123.47,
    130.81, 138.59, 146.83, 155.56, 164.81, 174.61, 185.00, 196.00, 207.65, 220.00, 233.08,
    246.94, 261.63, 277.18, 293.66, 311.13, 329.63, 349.23, 369.99, 392.00, 415.30, 440.00,
    466.16, 493.88, 523.25, 554.37, 587.33, 622.25, 659.25, 698.46, 739.99, 783.99, 830.61,
    880.00, 932.33, 987.77, 1046.50, 1108.73, 1174.66, 1244.51, 1318.51, 1396.91, 1479.98,
    1567.98, 1661.22, 1760.00, 1864.66, 1975.53, 2093.00, 2217.46, 2349.32, 2489.02,
    2637.02, 2793.83, 2959.96, 3135.96, 3322.44, 3520.00, 3729.31, 3951.07, 4186.01,
    4434.92, 4698.63, 4978.03, 5274.04, 5587.65, 5919.91, 6271.93, 6644.88, 7040.00,
    7458.62, 7902.13,
)  # fmt: skip

_SUBSCRIPTS = str.maketrans("₀₁₂₃₄₅₆₇₈₉₋", "0123456789-")

_PITCH_RE = re.compile(
    rf"""
    ^
    {NOTE_NAME_PATTERN}
    (?P<octave>-?\d+)
    (?:\s*(?P<cents>[+-]\d+(?:\.\d*)?)\s*(?:{CENTS_SIGN}|c|cents?)?)?
    $
    """,
    re.VERBOSE,
)


# Grid steps in one cent, and the decimals that print one step in cents
_STEPS_PER_CENT = STEPS_PER_SEMITONE // CENTS_PER_SEMITONE
_CENT_DIGITS = len(str(_STEPS_PER_CENT)) - 1
_HALF_SEMITONE_STEPS = STEPS_PER_SEMITONE // 2


def _check_offset(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise ArgumentError(ErrorMessages.INVALID_OFFSET.format(value=value))
    offset = float(value)
    # One grid step of slack at each end still gives a positive finite frequency
    low = MIN_SEMITONE_OFFSET - SEMITONE_EPSILON
    high = MAX_SEMITONE_OFFSET + SEMITONE_EPSILON
    if not low <= offset <= high:
        raise ArgumentError(
            ErrorMessages.OFFSET_OUT_OF_RANGE.format(
                value=value, low=MIN_SEMITONE_OFFSET, high=MAX_SEMITONE_OFFSET
            )
        )
    return offset


def _note_offset(name: NoteLike, octave: int) -> int:
    """Whole-semitone offset from A4 of a note name in an octave."""
    if isinstance(octave, bool) or not isinstance(octave, Integral):
        raise ArgumentError(ErrorMessages.INVALID_OCTAVE.format(value=octave))

    if isinstance(name, str) and "/" not in name:
        name = SpelledNote.parse(name)

    if isinstance(name, SpelledNote):
        from_c = name.semitones_from_c
    else:
        from_c = to_note_name(name).value

    return (from_c - REFERENCE_CLASS_INDEX) + SEMITONES_PER_OCTAVE * (
        int(octave) - REFERENCE_OCTAVE
    )


@total_ordering
class Pitch:
    """
    One exact pitch, stored as semitones from A4.

    The offset may be fractional (detuned or microtonal pitches).
    Pitches are totally ordered by offset, hence by frequency. Two pitches
    whose offsets round to the same SEMITONE_EPSILON step are equal, and
    equal pitches hash alike.

    Immutable and hashable.
    """

    __slots__ = ("_offset",)
    _offset: float

    def __init__(self, semitones_from_a4: float) -> None:
        """
        Create a pitch from its semitone offset from A4.

        Raises:
            ArgumentError: If the offset is not a finite number, or is outside
                MIN_SEMITONE_OFFSET..MAX_SEMITONE_OFFSET
        """
        object.__setattr__(self, "_offset", _check_offset(semitones_from_a4))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_semitones_from_a4(cls, offset: float) -> Pitch:
        """Create a pitch from its semitone offset from A4."""
        return cls(offset)

    @classmethod
    def from_frequency(cls, hz: float) -> Pitch:
        """
        Create a pitch from a frequency in Hz.

        Args:
            hz: Positive, finite frequency

        Returns:
            Pitch with offset 12 * log2(hz / 440)

        Raises:
            ArgumentError: If hz is not a positive finite number
        """
        if isinstance(hz, bool) or not isinstance(hz, Real) or not math.isfinite(hz) or hz <= 0:
            raise ArgumentError(ErrorMessages.INVALID_FREQUENCY.format(value=hz))
        # Split off the binary exponent so subnormal hz does not underflow in hz / 440
        mantissa, exponent = math.frexp(hz)
        octaves = math.log2(mantissa / REFERENCE_FREQUENCY) + exponent
        return cls(SEMITONES_PER_OCTAVE * octaves)

    @classmethod
    def from_note(cls, name: NoteLike, octave: int) -> Pitch:
        """
        Create a pitch from a note name and an octave number.

        A NoteName is placed by its pitch class. A SpelledNote (or a
        spelling string like 'B#') is placed by its letter, so B#4 is the
        same pitch as C5 and Cb4 the same as B3, as in scientific pitch
        notation.

        Args:
            name: NoteName, SpelledNote, or note name text
            octave: Octave number (C4 = middle C)

        Raises:
            ArgumentError: If octave is not an integer
            ParseError: If name is text that is not a note name
        """
        return cls(_note_offset(name, octave))

    @classmethod
    def from_midi(cls, number: float) -> Pitch:
        """
        Create a pitch from a MIDI note number (A4 = 69, middle C = 60).

        Fractional numbers are allowed and give detuned pitches.
        """
        if isinstance(number, bool) or not isinstance(number, Real) or not math.isfinite(number):
            raise ArgumentError(ErrorMessages.INVALID_MIDI.format(value=number))
        return cls(float(number) - REFERENCE_MIDI)

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse scientific pitch notation with an optional cents suffix.

        For example:
        * 'A4' is A above middle C.
        * 'C#5' and 'C♯5' are C sharp in the 5th octave.
        * 'Db-1' is D flat in octave -1.
        * 'A4+12.5¢' (or 'A4+12.5c') is A4 raised by 12.5 cents.

        Subscript octave digits ('A₄') are accepted too.

        Raises:
            ParseError: If the text is not a pitch
            ArgumentError: If the pitch is outside the float frequency range
        """
        if not isinstance(text, str):
            raise ParseError(ErrorMessages.INVALID_PITCH.format(text=text))

        match = _PITCH_RE.match(text.strip().translate(_SUBSCRIPTS))
        if match is None:
            raise ParseError(ErrorMessages.INVALID_PITCH.format(text=text))

        spelled = SpelledNote(match["letter"], Accidental.from_text(match["accidental"]))
        offset = _note_offset(spelled, int(match["octave"]))
        if match["cents"]:
            return cls(offset + Interval.from_cents(float(match["cents"])).semitones)
        return cls(offset)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def semitones_from_a4(self) -> float:
        """Exact, unrounded semitone offset from A4."""
        return self._offset

    def frequency(self) -> float:
        """Frequency in Hz. Always positive and finite."""
        # Scale within one octave, then shift the binary exponent, so no
        # intermediate value overflows or underflows.
        octaves, remainder = divmod(self._offset, SEMITONES_PER_OCTAVE)
        within_octave = REFERENCE_FREQUENCY * 2.0 ** (remainder / SEMITONES_PER_OCTAVE)
        try:
            return math.ldexp(within_octave, int(octaves))
        except OverflowError:
            return sys.float_info.max

    def note_name(self) -> NoteName:
        """Pitch class of the nearest semitone."""
        return name_of((self._nearest() + REFERENCE_CLASS_INDEX) % SEMITONES_PER_OCTAVE)

    def class_index(self) -> int:
        """Pitch class index (0-11) of the nearest semitone."""
        return self.note_name().value

    def octave(self) -> int:
        """Scientific octave number of the nearest semitone."""
        return REFERENCE_OCTAVE + (self._nearest() + REFERENCE_CLASS_INDEX) // SEMITONES_PER_OCTAVE

    def midi(self) -> float:
        """MIDI note number, fractional for detuned pitches."""
        return self._offset + REFERENCE_MIDI

    def nearest(self) -> Pitch:
        """
        This pitch snapped to the nearest equal-tempered semitone.

        Raises:
            ArgumentError: Within half a semitone of MAX_SEMITONE_OFFSET, where
                the nearest semitone has no finite frequency
        """
        return Pitch(self._nearest())

    def cents_deviation(self) -> float:
        """Signed cents from the nearest semitone, in [-50, 50)."""
        return self._split()[1] / _STEPS_PER_CENT

    def spell(self, prefer_flats: bool = False, ascii: bool = False) -> str:
        """Note name plus octave of the nearest semitone, e.g. 'C♯4'."""
        return f"{self.note_name().spell(prefer_flats=prefer_flats, ascii=ascii)}{self.octave()}"

    def format_frequency(self) -> str:
        """Frequency with fixed precision, e.g. '440.00 Hz'."""
        return f"{self.frequency():.{FREQUENCY_DECIMALS}f} Hz"

    def _steps(self) -> int:
        return round(self._offset * STEPS_PER_SEMITONE)

    def _split(self) -> tuple[int, int]:
        """Nearest semitone (half-up) and the grid steps left over."""
        nearest, rest = divmod(self._steps() + _HALF_SEMITONE_STEPS, STEPS_PER_SEMITONE)
        return nearest, rest - _HALF_SEMITONE_STEPS

    def _nearest(self) -> int:
        return self._split()[0]

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Interval) -> Pitch:
        """Shift up by an interval."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Pitch(self._offset + other.semitones)

    def __sub__(self, other: Pitch | Interval) -> Pitch | Interval:
        """pitch - interval is a pitch; pitch - pitch is the interval between them."""
        if isinstance(other, Interval):
            return Pitch(self._offset - other.semitones)
        if isinstance(other, Pitch):
            return Interval(self._offset - other._offset)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._steps() == other._steps()

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._steps() < other._steps()

    def __hash__(self) -> int:
        return hash(self._steps())

    def __repr__(self) -> str:
        return f"Pitch({self._offset!r})"

    def __str__(self) -> str:
        """
        Scientific pitch notation, with a cents suffix when detuned.

        The cents are printed to the last grid step, trailing zeros
        dropped, so the text parses back to an equal pitch.
        """
        deviation = self._split()[1]
        if deviation == 0:
            return self.spell()
        sign = "+" if deviation > 0 else "-"
        whole, fraction = divmod(abs(deviation), _STEPS_PER_CENT)
        digits = f"{fraction:0{_CENT_DIGITS}d}".rstrip("0")
        cents = f"{whole}.{digits}" if digits else f"{whole}"
        return f"{self.spell()}{sign}{cents}{CENTS_SIGN}"


def from_frequency(hz: float) -> Pitch:
    """Create a pitch from a frequency in Hz."""
    return Pitch.from_frequency(hz)


def from_note(name: NoteLike, octave: int) -> Pitch:
    """Create a pitch from a note name and octave."""
    return Pitch.from_note(name, octave)


def from_semitones_from_a4(offset: float) -> Pitch:
    """Create a pitch from its semitone offset from A4."""
    return Pitch.from_semitones_from_a4(offset)


# Exact pitches matching FREQUENCIES, C0..B8
_STANDARD_PITCHES: tuple[Pitch, ...] = tuple(
    Pitch.from_note(name_of(index % SEMITONES_PER_OCTAVE), index // SEMITONES_PER_OCTAVE)
    for index in range(len(FREQUENCIES))
)


def standard_pitches() -> tuple[Pitch, ...]:
    """All equal-tempered pitches from C0 to B8, ascending."""
    return _STANDARD_PITCHES
