"""
Tests for the pitch model.

Tests cover:
- The three constructors and their failure modes
- Derived views (frequency, note name, octave, MIDI, cents deviation)
- The rounding policy at note boundaries
- Scientific pitch notation parsing and display
- Equality, ordering and hashing
- The standard C0..B8 frequency table
"""

import math
import sys

import pytest

from chuk_mcp_pitch import (
    FREQUENCIES,
    ArgumentError,
    Interval,
    NoteName,
    ParseError,
    Pitch,
    SpelledNote,
    from_frequency,
    from_note,
    from_semitones_from_a4,
    standard_pitches,
)
from chuk_mcp_pitch.constants import (
    MAX_SEMITONE_OFFSET,
    MIN_SEMITONE_OFFSET,
    SEMITONE_EPSILON,
)


class TestReferencePoint:
    """Tests anchored on A4 = 440 Hz."""

    def test_a4_frequency(self, a4: Pitch) -> None:
        """A4 is exactly 440 Hz."""
        assert a4.frequency() == 440.0
        assert a4.semitones_from_a4() == 0.0

    def test_from_frequency_440(self) -> None:
        """440 Hz is A4."""
        pitch = from_frequency(440.0)
        assert pitch.note_name() == NoteName.A
        assert str(pitch.note_name()) == "A"
        assert pitch.octave() == 4

    def test_middle_c(self, middle_c: Pitch) -> None:
        """C4 is nine semitones below A4."""
        assert from_note("C", 4).semitones_from_a4() == -9
        assert middle_c.frequency() == pytest.approx(261.6256, abs=1e-4)
        assert middle_c.midi() == 60


class TestConstructors:
    """Tests for the pitch constructors."""

    def test_from_semitones_identity(self) -> None:
        """The offset is stored unchanged."""
        assert from_semitones_from_a4(-21.5).semitones_from_a4() == -21.5
        assert Pitch.from_semitones_from_a4(3).semitones_from_a4() == 3.0

    def test_from_frequency_offset(self) -> None:
        """Offset is 12 * log2(hz / 440)."""
        assert from_frequency(880.0).semitones_from_a4() == 12.0
        assert from_frequency(220.0).semitones_from_a4() == -12.0
        assert from_frequency(660.0).semitones_from_a4() == pytest.approx(
            12 * math.log2(1.5)
        )

    def test_from_note_offset(self) -> None:
        """Offset is (class - 9) + 12 * (octave - 4)."""
        assert from_note(NoteName.A, 5).semitones_from_a4() == 12
        assert from_note(NoteName.C, 0).semitones_from_a4() == -57
        assert from_note(NoteName.B, -1).semitones_from_a4() == -58
        assert from_note(NoteName.Ds, 7).semitones_from_a4() == 30

    def test_from_note_accepts_text_and_spelling(self) -> None:
        """Note names may be text, SpelledNote or NoteName."""
        expected = from_note(NoteName.Cs, 4)
        assert from_note("C#", 4) == expected
        assert from_note("Db", 4) == expected
        assert from_note("C♯/D♭", 4) == expected
        assert from_note(SpelledNote.parse("Db"), 4) == expected

    def test_from_note_spelling_crosses_octave(self) -> None:
        """B#4 is C5 and Cb4 is B3, as in scientific pitch notation."""
        assert from_note("B#", 4) == from_note(NoteName.C, 5)
        assert from_note("Cb", 4) == from_note(NoteName.B, 3)

    def test_from_midi(self) -> None:
        """MIDI 69 is A4, 60 is middle C."""
        assert Pitch.from_midi(69) == Pitch(0)
        assert Pitch.from_midi(60) == from_note("C", 4)
        assert Pitch.from_midi(60.5).semitones_from_a4() == -8.5

    @pytest.mark.parametrize("bad", [0, 0.0, -1, -440.0, math.nan, math.inf, -math.inf])
    def test_from_frequency_invalid(self, bad: float) -> None:
        """Non-positive and non-finite frequencies fail."""
        with pytest.raises(ArgumentError):
            from_frequency(bad)

    @pytest.mark.parametrize("bad", ["440", None, True])
    def test_from_frequency_not_a_number(self, bad) -> None:
        """Non-numbers fail with ArgumentError."""
        with pytest.raises(ArgumentError):
            from_frequency(bad)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "0", None])
    def test_from_semitones_invalid(self, bad) -> None:
        """Non-finite offsets fail."""
        with pytest.raises(ArgumentError):
            from_semitones_from_a4(bad)

    def test_offset_range(self) -> None:
        """Offsets reach as far as frequency stays a positive finite float."""
        assert MIN_SEMITONE_OFFSET == pytest.approx(-12993.38, abs=0.01)
        assert MAX_SEMITONE_OFFSET == pytest.approx(12182.62, abs=0.01)
        assert Pitch(MIN_SEMITONE_OFFSET).frequency() > 0
        assert math.isfinite(Pitch(MAX_SEMITONE_OFFSET).frequency())
        with pytest.raises(ArgumentError):
            Pitch(MAX_SEMITONE_OFFSET + 1)
        with pytest.raises(ArgumentError):
            Pitch(MIN_SEMITONE_OFFSET - 1)

    @pytest.mark.parametrize("hz", [1e-300, 1e-310, 1e300, 1e306])
    def test_extreme_frequencies(self, hz: float) -> None:
        """Very low and very high frequencies are valid pitches."""
        pitch = from_frequency(hz)
        assert pitch.frequency() == pytest.approx(hz, rel=1e-9)

    def test_float_range_ends(self) -> None:
        """The smallest and largest floats are valid frequencies."""
        lowest = from_frequency(math.ulp(0.0))
        highest = from_frequency(sys.float_info.max)
        assert lowest.frequency() == math.ulp(0.0)
        assert highest.frequency() == pytest.approx(sys.float_info.max, rel=1e-9)
        assert lowest.semitones_from_a4() == pytest.approx(MIN_SEMITONE_OFFSET)
        assert highest.semitones_from_a4() == pytest.approx(MAX_SEMITONE_OFFSET)

    @pytest.mark.parametrize("bad", [4.5, "4", None, True])
    def test_from_note_invalid_octave(self, bad) -> None:
        """Octave must be an integer."""
        with pytest.raises(ArgumentError):
            from_note(NoteName.C, bad)

    def test_from_note_invalid_name(self) -> None:
        """Unknown note text fails with ParseError."""
        with pytest.raises(ParseError):
            from_note("H", 4)

    def test_from_note_rejects_int_name(self) -> None:
        """A bare integer is not a note name."""
        with pytest.raises(ArgumentError):
            from_note(9, 4)  # type: ignore[arg-type]

    def test_from_midi_invalid(self) -> None:
        """Non-finite MIDI numbers fail."""
        with pytest.raises(ArgumentError):
            Pitch.from_midi(math.nan)


class TestDerivedViews:
    """Tests for accessors derived from the offset."""

    def test_octave_boundaries(self) -> None:
        """Octaves change between B and C."""
        assert from_note(NoteName.B, 3).octave() == 3
        assert from_note(NoteName.C, 4).octave() == 4
        assert from_note(NoteName.B, 4).octave() == 4
        assert from_note(NoteName.C, 5).octave() == 5
        assert Pitch(-10).octave() == 3
        assert Pitch(-9).octave() == 4
        assert Pitch(2).octave() == 4
        assert Pitch(3).octave() == 5

    def test_negative_octaves(self) -> None:
        """Octave numbers go below zero."""
        assert Pitch.from_midi(0).octave() == -1
        assert Pitch.from_midi(0).note_name() == NoteName.C
        assert Pitch.from_midi(-1).octave() == -2
        assert Pitch.from_midi(-1).note_name() == NoteName.B

    @pytest.mark.parametrize(
        "offset,name",
        [
            (0.4, NoteName.A),
            (0.49, NoteName.A),
            (0.5, NoteName.As),
            (0.6, NoteName.As),
            (-0.4, NoteName.A),
            (-0.5, NoteName.A),
            (-0.6, NoteName.Gs),
        ],
    )
    def test_rounding_before_naming(self, offset: float, name: NoteName) -> None:
        """Fractional offsets report the nearest note, .5 rounding up."""
        assert Pitch(offset).note_name() == name

    def test_octave_uses_rounded_offset(self) -> None:
        """A pitch just below C5 rounds up into octave 5."""
        assert Pitch(2.6).note_name() == NoteName.C
        assert Pitch(2.6).octave() == 5
        assert Pitch(2.4).octave() == 4

    def test_semitones_unrounded(self) -> None:
        """semitones_from_a4 is exact."""
        assert Pitch(0.4).semitones_from_a4() == 0.4

    def test_class_index(self) -> None:
        """class_index is the C-based index of the nearest note."""
        assert Pitch(0).class_index() == 9
        assert Pitch(-9).class_index() == 0

    def test_cents_deviation(self) -> None:
        """Cents from the nearest semitone, in [-50, 50)."""
        assert Pitch(0.125).cents_deviation() == pytest.approx(12.5)
        assert Pitch(0.4).cents_deviation() == pytest.approx(40.0)
        assert Pitch(0.6).cents_deviation() == pytest.approx(-40.0)
        assert Pitch(0.5).cents_deviation() == pytest.approx(-50.0)
        assert Pitch(3).cents_deviation() == 0.0

    def test_nearest(self) -> None:
        """nearest snaps to the equal-tempered grid."""
        assert Pitch(0.4).nearest() == Pitch(0)
        assert Pitch(-8.7).nearest() == Pitch(-9)

    def test_frequency_positive(self, sample_pitches: list[Pitch]) -> None:
        """Every pitch has a positive frequency."""
        for pitch in sample_pitches:
            assert pitch.frequency() > 0

    def test_format_frequency(self, middle_c: Pitch) -> None:
        """Frequencies render with two decimals."""
        assert middle_c.format_frequency() == "261.63 Hz"
        assert Pitch(0).format_frequency() == "440.00 Hz"


class TestRoundTrips:
    """Round trips between representations."""

    @pytest.mark.parametrize("hz", [8.1758, 16.35, 27.5, 261.63, 440.0, 1000.0, 4186.01, 19999.9])
    def test_frequency_round_trip(self, hz: float) -> None:
        """from_frequency(hz).frequency() is hz."""
        assert from_frequency(hz).frequency() == pytest.approx(hz, rel=1e-12)

    def test_note_octave_round_trip(self) -> None:
        """from_note(n, o) reports n and o back."""
        for name in NoteName:
            for octave in range(-2, 11):
                pitch = from_note(name, octave)
                assert pitch.note_name() == name
                assert pitch.octave() == octave

    def test_frequency_to_pitch_equality(self, middle_c: Pitch) -> None:
        """A pitch survives a trip through its own frequency."""
        assert from_frequency(middle_c.frequency()) == middle_c


class TestNotation:
    """Tests for str() and Pitch.parse."""

    def test_str(self) -> None:
        """Display is scientific pitch notation with sharps."""
        assert str(Pitch(0)) == "A4"
        assert str(from_note("Db", 5)) == "C♯5"
        assert str(Pitch.from_midi(0)) == "C-1"

    def test_str_detuned(self) -> None:
        """Detuned pitches carry a cents suffix."""
        assert str(Pitch(0.125)) == "A4+12.5¢"
        assert str(Pitch(-0.25)) == "A4-25¢"

    def test_spell(self) -> None:
        """spell gives the nearest note and octave."""
        assert from_note("Bb", 3).spell() == "A♯3"
        assert from_note("Bb", 3).spell(prefer_flats=True) == "B♭3"
        assert from_note("Bb", 3).spell(prefer_flats=True, ascii=True) == "Bb3"

    @pytest.mark.parametrize(
        "text,offset",
        [
            ("A4", 0),
            ("a4", 0),
            ("C4", -9),
            ("C#5", 4),
            ("C♯5", 4),
            ("Db5", 4),
            ("bb4", 1),
            ("C-1", -69),
            ("B#4", 3),
            ("Cb4", -10),
            ("A₄", 0),
            ("A4+12.5¢", 0.125),
            ("A4+12.5c", 0.125),
            ("A4 -50 cents", -0.5),
            (" E2 ", -29),
        ],
    )
    def test_parse(self, text: str, offset: float) -> None:
        """Scientific pitch notation parses to the right offset."""
        assert Pitch.parse(text).semitones_from_a4() == pytest.approx(offset)

    @pytest.mark.parametrize("bad", ["H4", "A", "4", "A4+", "A4+x", "C#b4", "", None])
    def test_parse_invalid(self, bad) -> None:
        """Malformed notation fails with ParseError."""
        with pytest.raises(ParseError):
            Pitch.parse(bad)

    def test_display_round_trips(self, sample_pitches: list[Pitch]) -> None:
        """str() output parses back to an equal pitch."""
        for pitch in [*standard_pitches(), *sample_pitches]:
            assert Pitch.parse(str(pitch)) == pitch

    @pytest.mark.parametrize("hz", [445.0, 432.0, 261.0, 1.0, 12345.678, 1e-300, 1e306])
    def test_detuned_display_round_trips(self, hz: float) -> None:
        """Arbitrary frequencies survive str() and parse."""
        pitch = from_frequency(hz)
        assert Pitch.parse(str(pitch)) == pitch

    def test_display_keeps_full_cents(self) -> None:
        """The cents suffix is not cut to one decimal."""
        pitch = from_frequency(445.0)
        text = str(pitch)
        assert text.startswith("A4+19.56")
        assert float(text[len("A4") : -1]) == pytest.approx(pitch.cents_deviation(), abs=1e-7)
        assert str(Pitch(0.123456789)) == "A4+12.3456789¢"

    def test_display_below_half_semitone(self) -> None:
        """A deviation just under +50 cents keeps its note name."""
        pitch = Pitch(0.4996)
        assert str(pitch) == "A4+49.96¢"
        assert Pitch.parse(str(pitch)).note_name() == NoteName.A
        assert Pitch.parse(str(pitch)) == pitch

    def test_display_at_range_ends(self) -> None:
        """The lowest and highest pitches round-trip through str()."""
        for pitch in (Pitch(MIN_SEMITONE_OFFSET), Pitch(MAX_SEMITONE_OFFSET)):
            assert Pitch.parse(str(pitch)) == pitch

    def test_repr(self) -> None:
        """repr shows the offset."""
        assert repr(Pitch(-9)) == "Pitch(-9.0)"


class TestComparison:
    """Tests for equality, ordering and hashing."""

    def test_equality_within_epsilon(self) -> None:
        """Offsets closer than the epsilon compare equal."""
        assert Pitch(1.0) == Pitch(1.0 + SEMITONE_EPSILON / 10)
        assert Pitch(1.0) != Pitch(1.0 + SEMITONE_EPSILON * 10)

    def test_ordering(self) -> None:
        """Pitches order by offset."""
        low, mid, high = Pitch(-12), Pitch(0), Pitch(0.01)
        assert low < mid < high
        assert high > low
        assert mid <= mid
        assert sorted([high, low, mid]) == [low, mid, high]

    def test_equal_pitches_not_less(self) -> None:
        """Near-identical pitches are neither less nor greater."""
        a = Pitch(1.0)
        b = Pitch(1.0 + SEMITONE_EPSILON / 10)
        assert not a < b
        assert not b < a
        assert a <= b and b <= a

    def test_not_equal_to_other_types(self) -> None:
        """Pitches never equal non-pitches."""
        assert Pitch(0) != 0
        assert Pitch(0) != "A4"

    def test_hashable(self, a4: Pitch) -> None:
        """Pitches work in sets and as dict keys."""
        pitches = {a4, Pitch(0), from_frequency(440.0), Pitch(12)}
        assert len(pitches) == 2

    @pytest.mark.parametrize("centre", [5e-7, -5e-7, 0.5, 3.0000005, 7e-6])
    def test_equal_pitches_hash_alike(self, centre: float) -> None:
        """Equal pitches land in one set slot, even across a rounding boundary."""
        a = Pitch(centre - 1e-12)
        b = Pitch(centre + 1e-12)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_equality_is_transitive(self) -> None:
        """Pitches a step apart chain without making the ends equal."""
        a, b, c = Pitch(1.0), Pitch(1.0 + 0.6e-9), Pitch(1.0 + 1.2e-9)
        assert not (a == b and b == c and a != c)

    def test_immutable(self, a4: Pitch) -> None:
        """Pitches cannot be modified."""
        with pytest.raises(AttributeError):
            a4._offset = 3.0  # type: ignore[misc]
        with pytest.raises(AttributeError):
            a4.offset = 3.0  # type: ignore[attr-defined]


class TestOperators:
    """Tests for pitch/interval operators."""

    def test_add_interval(self, a4: Pitch) -> None:
        """pitch + interval shifts up."""
        assert a4 + Interval.PERFECT_FIFTH == Pitch.parse("E5")

    def test_subtract_interval(self, a4: Pitch) -> None:
        """pitch - interval shifts down."""
        assert a4 - Interval.OCTAVE == Pitch.parse("A3")

    def test_subtract_pitch(self, a4: Pitch, middle_c: Pitch) -> None:
        """pitch - pitch is the interval between them."""
        assert a4 - middle_c == Interval.MAJOR_SIXTH

    def test_unsupported_operands(self, a4: Pitch) -> None:
        """Adding numbers is not supported."""
        with pytest.raises(TypeError):
            a4 + 1  # type: ignore[operator]


class TestStandardPitches:
    """Tests for the C0..B8 reference table."""

    def test_table_size(self) -> None:
        """Nine octaves of twelve pitches."""
        assert len(FREQUENCIES) == 108
        assert len(standard_pitches()) == 108

    def test_matches_reference_frequencies(self) -> None:
        """Computed frequencies agree with the published table."""
        for pitch, expected in zip(standard_pitches(), FREQUENCIES):
            assert pitch.frequency() == pytest.approx(expected, abs=0.01)

    def test_endpoints(self) -> None:
        """The table runs from C0 to B8."""
        pitches = standard_pitches()
        assert str(pitches[0]) == "C0"
        assert str(pitches[-1]) == "B8"
        assert str(pitches[57]) == "A4"

    def test_ascending(self) -> None:
        """The table is in ascending order."""
        pitches = standard_pitches()
        assert all(a < b for a, b in zip(pitches, pitches[1:]))
