"""
Note naming - NoteName, Accidental and SpelledNote.

NoteName is the 12 chromatic pitch classes (octave-independent), indexed
from C = 0 to B = 11. Enharmonic equivalents share one value, so C# and Db
are the same NoteName. Display prefers sharps.

SpelledNote keeps a particular spelling (letter + accidental) for callers
that care whether a note was written C# or Db. It always resolves to a
NoteName.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from numbers import Integral
from typing import TYPE_CHECKING, Union

from chuk_mcp_pitch.constants import (
    FLAT_SIGN,
    SEMITONES_PER_OCTAVE,
    SHARP_SIGN,
    ErrorMessages,
)
from chuk_mcp_pitch.core.errors import ArgumentError, ParseError

if TYPE_CHECKING:
    from chuk_mcp_pitch.core.interval import Interval

# Display name tables (module level to avoid IntEnum member issues)
_SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C" + SHARP_SIGN,
    "D",
    "D" + SHARP_SIGN,
    "E",
    "F",
    "F" + SHARP_SIGN,
    "G",
    "G" + SHARP_SIGN,
    "A",
    "A" + SHARP_SIGN,
    "B",
)
_FLAT_NAMES: tuple[str, ...] = (
    "C",
    "D" + FLAT_SIGN,
    "D",
    "E" + FLAT_SIGN,
    "E",
    "F",
    "G" + FLAT_SIGN,
    "G",
    "A" + FLAT_SIGN,
    "A",
    "B" + FLAT_SIGN,
    "B",
)

# Natural letters and their class index
LETTER_INDEX: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}
_LETTERS = "CDEFGAB"

# Letter, then an optional run of one kind of accidental.
NOTE_NAME_PATTERN = r"(?P<letter>[A-Ga-g])(?P<accidental>\#{1,2}|b{1,2}|♯{1,2}|♭{1,2}|𝄪|𝄫)?"
_NOTE_NAME_RE = re.compile(rf"^{NOTE_NAME_PATTERN}$")


class Accidental(Enum):
    """Accidental applied to a natural letter, valued in semitones."""

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def offset(self) -> int:
        """Semitone shift from the natural letter."""
        return int(self.value)

    @property
    def symbol(self) -> str:
        """Unicode display form (empty for natural)."""
        return _ACCIDENTAL_SYMBOLS[self]

    @property
    def ascii_symbol(self) -> str:
        """ASCII display form (empty for natural)."""
        return _ACCIDENTAL_ASCII[self]

    @classmethod
    def from_text(cls, text: str | None) -> Accidental:
        """Parse an accidental marker: '', '#', 'b', '♯', '♭', '##', 'bb', '𝄪', '𝄫'."""
        if not text:
            return cls.NATURAL
        try:
            return _ACCIDENTAL_BY_TEXT[text]
        except KeyError:
            raise ParseError(ErrorMessages.INVALID_NOTE_NAME.format(text=text)) from None


_ACCIDENTAL_SYMBOLS: dict[Accidental, str] = {
    Accidental.DOUBLE_FLAT: "𝄫",
    Accidental.FLAT: FLAT_SIGN,
    Accidental.NATURAL: "",
    Accidental.SHARP: SHARP_SIGN,
    Accidental.DOUBLE_SHARP: "𝄪",
}
_ACCIDENTAL_ASCII: dict[Accidental, str] = {
    Accidental.DOUBLE_FLAT: "bb",
    Accidental.FLAT: "b",
    Accidental.NATURAL: "",
    Accidental.SHARP: "#",
    Accidental.DOUBLE_SHARP: "##",
}
_ACCIDENTAL_BY_TEXT: dict[str, Accidental] = {
    "#": Accidental.SHARP,
    SHARP_SIGN: Accidental.SHARP,
    "##": Accidental.DOUBLE_SHARP,
    SHARP_SIGN * 2: Accidental.DOUBLE_SHARP,
    "𝄪": Accidental.DOUBLE_SHARP,
    "b": Accidental.FLAT,
    FLAT_SIGN: Accidental.FLAT,
    "bb": Accidental.DOUBLE_FLAT,
    FLAT_SIGN * 2: Accidental.DOUBLE_FLAT,
    "𝄫": Accidental.DOUBLE_FLAT,
}


class NoteName(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both NoteName.C.
    Enharmonic equivalents share the same value (C# == Db == 1), so
    equality is by index, never by spelling.

    | Index | Note  |
    |-------|-------|
    | 0     | C     |
    | 1     | C♯/D♭ |
    | 2     | D     |
    | 3     | D♯/E♭ |
    | 4     | E     |
    | 5     | F     |
    | 6     | F♯/G♭ |
    | 7     | G     |
    | 8     | G♯/A♭ |
    | 9     | A     |
    | 10    | A♯/B♭ |
    | 11    | B     |
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @property
    def label(self) -> str:
        """Full enharmonic label, e.g. 'C♯/D♭' or 'C'."""
        sharp = _SHARP_NAMES[self.value]
        flat = _FLAT_NAMES[self.value]
        return sharp if sharp == flat else f"{sharp}/{flat}"

    @property
    def is_natural(self) -> bool:
        """True for the seven white-key pitch classes."""
        return _SHARP_NAMES[self.value] in LETTER_INDEX

    def spell(self, prefer_flats: bool = False, ascii: bool = False) -> str:
        """Get human-readable name. Sharps by default, Unicode marks by default."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        name = names[self.value]
        if ascii:
            name = name.replace(SHARP_SIGN, "#").replace(FLAT_SIGN, "b")
        return name

    def transpose(self, semitones: int) -> NoteName:
        """Transpose by a number of semitones (positive or negative)."""
        return NoteName((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def interval_to(self, other: NoteName) -> Interval:
        """Get the interval from this pitch class up to another (0-11 semitones)."""
        from chuk_mcp_pitch.core.interval import Interval

        return Interval((other.value - self.value) % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, text: str) -> NoteName:
        """Parse a note name like 'C', 'c#', 'Db', 'F♯' or 'C♯/D♭'."""
        return parse(text)

    def __str__(self) -> str:
        return self.spell()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


@dataclass(frozen=True)
class SpelledNote:
    """
    A note name with its written spelling kept.

    C# and Db are different SpelledNotes that resolve to the same NoteName.

    Examples:
        SpelledNote("C", Accidental.SHARP) = C♯
        SpelledNote("B", Accidental.FLAT) = B♭
    """

    letter: str
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        letter = self.letter.upper() if isinstance(self.letter, str) else self.letter
        if letter not in LETTER_INDEX:
            raise ArgumentError(ErrorMessages.INVALID_NOTE_NAME.format(text=self.letter))
        object.__setattr__(self, "letter", letter)

    @property
    def note_name(self) -> NoteName:
        """The pitch class this spelling denotes."""
        return NoteName(self.semitones_from_c % SEMITONES_PER_OCTAVE)

    @property
    def semitones_from_c(self) -> int:
        """
        Semitones above the C of the letter's own octave.

        Not wrapped: B♯ is 12 and C♭ is -1, which is what moves them into
        the neighbouring octave in scientific pitch notation.
        """
        return LETTER_INDEX[self.letter] + self.accidental.offset

    def enharmonic(self) -> SpelledNote:
        """
        Get the same pitch class spelled from the neighbouring letter.

        Sharps respell from the letter above (C♯ -> D♭), flats from the
        letter below (D♭ -> C♯). Naturals are returned unchanged.
        """
        if self.accidental is Accidental.NATURAL:
            return self

        step = 1 if self.accidental.offset > 0 else -1
        letter = _LETTERS[(_LETTERS.index(self.letter) + step) % len(_LETTERS)]
        shift = (self.note_name.value - LETTER_INDEX[letter] + 6) % SEMITONES_PER_OCTAVE - 6
        return SpelledNote(letter, Accidental(shift))

    def __str__(self) -> str:
        return f"{self.letter}{self.accidental.symbol}"

    def __repr__(self) -> str:
        if self.accidental is Accidental.NATURAL:
            return f"SpelledNote({self.letter!r})"
        return f"SpelledNote({self.letter!r}, Accidental.{self.accidental.name})"

    @classmethod
    def parse(cls, text: str) -> SpelledNote:
        """Parse a single spelling like 'C', 'c#', 'Db', 'B♭' or 'F##'."""
        if not isinstance(text, str):
            raise ParseError(ErrorMessages.INVALID_NOTE_NAME.format(text=text))
        match = _NOTE_NAME_RE.match(text.strip())
        if match is None:
            raise ParseError(ErrorMessages.INVALID_NOTE_NAME.format(text=text))
        return cls(match["letter"], Accidental.from_text(match["accidental"]))

    @classmethod
    def from_note_name(cls, name: NoteName, prefer_flats: bool = False) -> SpelledNote:
        """Spell a pitch class with the canonical (or flat) spelling."""
        return cls.parse(name.spell(prefer_flats=prefer_flats))


NoteLike = Union[NoteName, SpelledNote, str]


def name_of(class_index: int) -> NoteName:
    """
    Get the NoteName for a pitch class index.

    Args:
        class_index: Integer 0-11 (C = 0, A = 9)

    Returns:
        The matching NoteName

    Raises:
        ArgumentError: If the index is not an integer in 0-11
    """
    if (
        isinstance(class_index, bool)
        or not isinstance(class_index, Integral)
        or not 0 <= class_index < SEMITONES_PER_OCTAVE
    ):
        raise ArgumentError(ErrorMessages.INVALID_CLASS_INDEX.format(value=class_index))
    return NoteName(int(class_index))


def class_index_of(name: NoteName) -> int:
    """Get the pitch class index (0-11) of a NoteName."""
    return int(NoteName(name))


def parse(text: str) -> NoteName:
    """
    Parse a note name, ignoring octave.

    Accepts a bare letter ('A'), a letter with ASCII accidentals ('C#',
    'Db', 'F##'), a letter with Unicode accidentals ('C♯', 'D♭') and the
    full enharmonic label ('C♯/D♭'). The letter is case-insensitive.

    Args:
        text: The note name text

    Returns:
        The parsed NoteName

    Raises:
        ParseError: If the text is not a note name
    """
    if not isinstance(text, str):
        raise ParseError(ErrorMessages.INVALID_NOTE_NAME.format(text=text))

    if "/" in text:
        names = {SpelledNote.parse(part).note_name for part in text.split("/")}
        if len(names) != 1:
            raise ParseError(ErrorMessages.AMBIGUOUS_LABEL.format(text=text))
        return names.pop()

    return SpelledNote.parse(text).note_name


def to_note_name(value: NoteLike) -> NoteName:
    """Coerce a NoteName, SpelledNote or note name string to a NoteName."""
    if isinstance(value, NoteName):
        return value
    if isinstance(value, SpelledNote):
        return value.note_name
    if isinstance(value, str):
        return parse(value)
    raise ArgumentError(ErrorMessages.INVALID_NOTE_ARGUMENT.format(value=value))
