"""
Interval algebra - the directed distance between two pitches.

An Interval is a signed, real number of semitones. Cents are exactly
semitones x 100. Fractional intervals are allowed, so detuned and
microtonal distances are measured without rounding.

Free functions (between, apply, invert, to_cents, from_cents) mirror the
methods for callers that prefer a functional style.
"""

from __future__ import annotations

import math
from functools import total_ordering
from numbers import Real
from typing import TYPE_CHECKING, ClassVar

from chuk_mcp_pitch.constants import (
    CENTS_DECIMALS,
    CENTS_PER_SEMITONE,
    CENTS_SIGN,
    MAX_INTERVAL_SEMITONES,
    SEMITONE_DECIMALS,
    SEMITONE_EPSILON,
    SEMITONES_PER_OCTAVE,
    STEPS_PER_SEMITONE,
    ErrorMessages,
)
from chuk_mcp_pitch.core.errors import ArgumentError

if TYPE_CHECKING:
    from chuk_mcp_pitch.core.pitch import Pitch

_SHORT_NAMES: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
}

_CONSTANT_NAMES: tuple[str, ...] = (
    "UNISON",
    "MINOR_SECOND",
    "MAJOR_SECOND",
    "MINOR_THIRD",
    "MAJOR_THIRD",
    "PERFECT_FOURTH",
    "TRITONE",
    "PERFECT_FIFTH",
    "MINOR_SIXTH",
    "MAJOR_SIXTH",
    "MINOR_SEVENTH",
    "MAJOR_SEVENTH",
    "OCTAVE",
)


def _finite(value: object, message: str) -> float:
    """Return value as a float, or raise ArgumentError if it is not a finite real."""
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise ArgumentError(message.format(value=value))
    return float(value)


def _bounded(value: object) -> float:
    semitones = _finite(value, ErrorMessages.INVALID_SEMITONES)
    if abs(semitones) > MAX_INTERVAL_SEMITONES + SEMITONE_EPSILON:
        raise ArgumentError(
            ErrorMessages.INTERVAL_OUT_OF_RANGE.format(value=value, limit=MAX_INTERVAL_SEMITONES)
        )
    return semitones


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Signed: positive intervals ascend, negative intervals descend.
    Two intervals are equal when they round to the same SEMITONE_EPSILON
    step, so equality, ordering and hashing all agree.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: float

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, semitones: float) -> None:
        """
        Create an interval with the given number of semitones.

        Raises:
            ArgumentError: If semitones is NaN, infinite or not a number, or
                wider than MAX_INTERVAL_SEMITONES
        """
        object.__setattr__(self, "_semitones", _bounded(semitones))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_semitones(cls, semitones: float) -> Interval:
        """Create an interval from a semitone count."""
        return cls(semitones)

    @classmethod
    def from_cents(cls, cents: float) -> Interval:
        """
        Create an interval from cents (100 cents = 1 semitone).

        Raises:
            ArgumentError: If cents is NaN, infinite or not a number
        """
        return cls(_finite(cents, ErrorMessages.INVALID_CENTS) / CENTS_PER_SEMITONE)

    @classmethod
    def between_frequencies(cls, frequency_0: float, frequency_1: float) -> Interval:
        """
        Create the interval from one frequency to another.

        Positive when frequency_0 < frequency_1, negative when
        frequency_0 > frequency_1.

        Raises:
            ArgumentError: If either frequency is not a positive finite number
        """
        f0 = _finite(frequency_0, ErrorMessages.INVALID_FREQUENCY)
        f1 = _finite(frequency_1, ErrorMessages.INVALID_FREQUENCY)
        for value in (f0, f1):
            if value <= 0:
                raise ArgumentError(ErrorMessages.INVALID_FREQUENCY.format(value=value))
        # Compare mantissas and exponents apart so f1 / f0 cannot overflow
        m0, e0 = math.frexp(f0)
        m1, e1 = math.frexp(f1)
        return cls(SEMITONES_PER_OCTAVE * (math.log2(m1 / m0) + (e1 - e0)))

    @classmethod
    def between(cls, a: Pitch, b: Pitch) -> Interval:
        """Get the interval from pitch a to pitch b."""
        return cls(b.semitones_from_a4() - a.semitones_from_a4())

    @property
    def semitones(self) -> float:
        """Number of semitones in this interval (signed, may be fractional)."""
        return self._semitones

    @property
    def cents(self) -> float:
        """Size of this interval in cents (semitones x 100)."""
        return self._semitones * CENTS_PER_SEMITONE

    @property
    def ratio(self) -> float:
        """
        Frequency ratio spanned by this interval (2.0 for an octave).

        inf or 0.0 when the ratio is outside the float range, which only
        happens for intervals of more than about 1000 octaves.
        """
        try:
            return float(2.0 ** (self._semitones / SEMITONES_PER_OCTAVE))
        except OverflowError:
            return math.inf

    @property
    def is_integral(self) -> bool:
        """True when this interval is a whole number of semitones."""
        return self._steps() % STEPS_PER_SEMITONE == 0

    def invert(self) -> Interval:
        """Reverse the direction (P5 up -> P5 down)."""
        return Interval(-self._semitones)

    def complement(self) -> Interval:
        """
        Complement the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval(SEMITONES_PER_OCTAVE - (self._semitones % SEMITONES_PER_OCTAVE))

    def apply(self, pitch: Pitch) -> Pitch:
        """Shift a pitch by this interval."""
        return pitch + self

    def format_cents(self) -> str:
        """Render in cents with fixed precision, e.g. '+702.0¢'."""
        return f"{self.cents:+.{CENTS_DECIMALS}f}{CENTS_SIGN}"

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __abs__(self) -> Interval:
        """Size of the interval regardless of direction."""
        return Interval(abs(self._semitones))

    def __mul__(self, n: float) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if isinstance(n, bool) or not isinstance(n, Real):
            return NotImplemented
        return Interval(self._semitones * n)

    def __rmul__(self, n: float) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._steps() == other._steps()

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._steps() < other._steps()

    def __hash__(self) -> int:
        return hash(self._steps())

    def _steps(self) -> int:
        return round(self._semitones * STEPS_PER_SEMITONE)

    def __repr__(self) -> str:
        # Try to find a named constant
        for name in _CONSTANT_NAMES:
            named = getattr(Interval, name, None)
            if isinstance(named, Interval) and named == self:
                return f"Interval.{name}"
        return f"Interval({self._semitones!r})"

    def __str__(self) -> str:
        """Human-readable interval name."""
        if not self.is_integral:
            return f"{self._semitones:+.{SEMITONE_DECIMALS}f}st"

        semitones = round(self._semitones)
        if semitones < 0:
            return f"-{Interval(-semitones)}"
        mod = semitones % SEMITONES_PER_OCTAVE
        octaves = semitones // SEMITONES_PER_OCTAVE
        base = _SHORT_NAMES[mod]
        if octaves == 0:
            return base
        elif octaves == 1 and mod == 0:
            return "P8"
        else:
            return f"{base}+{octaves}oct" if octaves > 0 else f"{base}{octaves}oct"


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE

# Module-level mirrors of the named constants
UNISON = Interval.UNISON
MINOR_SECOND = Interval.MINOR_SECOND
MAJOR_SECOND = Interval.MAJOR_SECOND
MINOR_THIRD = Interval.MINOR_THIRD
MAJOR_THIRD = Interval.MAJOR_THIRD
PERFECT_FOURTH = Interval.PERFECT_FOURTH
TRITONE = Interval.TRITONE
PERFECT_FIFTH = Interval.PERFECT_FIFTH
MINOR_SIXTH = Interval.MINOR_SIXTH
MAJOR_SIXTH = Interval.MAJOR_SIXTH
MINOR_SEVENTH = Interval.MINOR_SEVENTH
MAJOR_SEVENTH = Interval.MAJOR_SEVENTH
OCTAVE = Interval.OCTAVE

NAMED_INTERVALS: dict[str, Interval] = {name: getattr(Interval, name) for name in _CONSTANT_NAMES}


def between(a: Pitch, b: Pitch) -> Interval:
    """Get the signed interval from a to b (b - a in semitones)."""
    return Interval.between(a, b)


def apply(pitch: Pitch, interval: Interval) -> Pitch:
    """Shift a pitch by an interval. No clamping to any range."""
    return pitch + interval


def invert(interval: Interval) -> Interval:
    """Negate an interval."""
    return interval.invert()


def to_cents(interval: Interval) -> float:
    """Get the size of an interval in cents."""
    return interval.cents


def from_cents(cents: float) -> Interval:
    """Create an interval from cents."""
    return Interval.from_cents(cents)
