"""
Pydantic models for the pitch system.

This module provides:
- PitchInfo: Every view of one pitch
- IntervalInfo: An interval in semitones, cents and ratio
- NoteNameInfo: A pitch class with its spellings
"""

from chuk_mcp_pitch.models.pitch import IntervalInfo, NoteNameInfo, PitchInfo

__all__ = [
    "IntervalInfo",
    "NoteNameInfo",
    "PitchInfo",
]
