"""
Pitch models - structured results for callers outside the core.

The core types are plain immutable values. These pydantic models are the
serialisable snapshot of them that the MCP tools hand back as JSON.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from chuk_mcp_pitch.constants import CENTS_DECIMALS
from chuk_mcp_pitch.core import Interval, NoteName, Pitch


class NoteNameInfo(BaseModel):
    """A pitch class with its spellings."""

    name: str = Field(..., description="Canonical (sharp) spelling, e.g. 'C♯'")
    label: str = Field(..., description="Full enharmonic label, e.g. 'C♯/D♭'")
    flat_spelling: str = Field(..., description="Flat spelling, e.g. 'D♭'")
    class_index: int = Field(..., ge=0, le=11, description="Pitch class index, C = 0")
    is_natural: bool = Field(..., description="True for white-key pitch classes")

    model_config = {"frozen": True}

    @classmethod
    def from_note_name(cls, name: NoteName) -> NoteNameInfo:
        return cls(
            name=name.spell(),
            label=name.label,
            flat_spelling=name.spell(prefer_flats=True),
            class_index=name.value,
            is_natural=name.is_natural,
        )


class PitchInfo(BaseModel):
    """
    Every view of one pitch.

    cents_deviation is rounded for display; semitones_from_a4 is exact and
    is what a caller should feed back into the core. frequency is exact too,
    since rounding would turn very low pitches into 0 Hz.
    """

    notation: str = Field(..., description="Scientific pitch notation, e.g. 'A4' or 'A4+12.5¢'")
    note_name: str = Field(..., description="Nearest note name (sharp spelling)")
    label: str = Field(..., description="Enharmonic label of the nearest note")
    octave: int = Field(..., description="Scientific octave number (C4 = middle C)")
    semitones_from_a4: float = Field(..., description="Exact semitone offset from A4")
    frequency: float = Field(..., gt=0, description="Frequency in Hz")
    midi: float = Field(..., description="MIDI note number, fractional when detuned")
    cents_deviation: float = Field(..., description="Cents from the nearest semitone (rounded)")

    model_config = {"frozen": True}

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> PitchInfo:
        name = pitch.note_name()
        return cls(
            notation=str(pitch),
            note_name=name.spell(),
            label=name.label,
            octave=pitch.octave(),
            semitones_from_a4=pitch.semitones_from_a4(),
            frequency=pitch.frequency(),
            midi=pitch.midi(),
            cents_deviation=round(pitch.cents_deviation(), CENTS_DECIMALS),
        )


class IntervalInfo(BaseModel):
    """An interval in semitones, cents and as a frequency ratio."""

    name: str = Field(..., description="Short name (P5, m3, P8+1oct) or signed semitones")
    semitones: float = Field(..., description="Signed semitones")
    cents: float = Field(..., description="Signed cents (semitones x 100)")
    ratio: float | None = Field(
        ..., gt=0, description="Frequency ratio, or None when it is outside the float range"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalInfo:
        ratio = interval.ratio
        return cls(
            name=str(interval),
            semitones=interval.semitones,
            cents=interval.cents,
            ratio=ratio if 0 < ratio < math.inf else None,
        )
