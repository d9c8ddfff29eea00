"""
Pitch tools - MCP tools for constructing and describing pitches.

Tools take raw numbers or text, build a Pitch through the core, and
return every view of it as JSON.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.core import Interval, Pitch, to_note_name
from chuk_mcp_pitch.models import NoteNameInfo, PitchInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_pitch_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_from_frequency(frequency: float) -> str:
        """
        Identify the pitch at a frequency.

        Reports the nearest note, its octave, and how far the frequency
        is from that note in cents.

        Args:
            frequency: Frequency in Hz (must be positive)

        Returns:
            JSON string with the pitch

        Example:
            pitch_from_frequency(frequency=261.63)
        """
        try:
            pitch = Pitch.from_frequency(frequency)
            return json.dumps(
                {"status": "success", "pitch": PitchInfo.from_pitch(pitch).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to build pitch from frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_from_frequency"] = pitch_from_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_from_note(note: str, octave: int) -> str:
        """
        Build a pitch from a note name and octave.

        Args:
            note: Note name like 'C', 'F#', 'Bb' or 'C♯'
            octave: Octave number (C4 = middle C, A4 = 440 Hz)

        Returns:
            JSON string with the pitch

        Example:
            pitch_from_note(note="A", octave=4)
        """
        try:
            pitch = Pitch.from_note(note, octave)
            return json.dumps(
                {"status": "success", "pitch": PitchInfo.from_pitch(pitch).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to build pitch from note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_from_note"] = pitch_from_note

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_parse(notation: str) -> str:
        """
        Parse scientific pitch notation.

        Accepts an optional cents suffix for detuned pitches.

        Args:
            notation: Pitch like 'A4', 'C#5', 'Db-1' or 'A4+12.5c'

        Returns:
            JSON string with the pitch

        Example:
            pitch_parse(notation="C#5")
        """
        try:
            pitch = Pitch.parse(notation)
            return json.dumps(
                {"status": "success", "pitch": PitchInfo.from_pitch(pitch).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to parse pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_parse"] = pitch_parse

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_transpose(
        notation: str,
        semitones: float | None = None,
        cents: float | None = None,
    ) -> str:
        """
        Shift a pitch up or down by an interval.

        Give the interval in semitones or in cents (not both).
        Negative values transpose down.

        Args:
            notation: Starting pitch like 'A4'
            semitones: Interval in semitones
            cents: Interval in cents

        Returns:
            JSON string with the original and transposed pitches

        Example:
            pitch_transpose(notation="A4", semitones=7)
        """
        try:
            if (semitones is None) == (cents is None):
                return json.dumps(
                    {"status": "error", "message": "Give exactly one of semitones or cents."}
                )

            interval = Interval(semitones) if semitones is not None else Interval.from_cents(cents)
            start = Pitch.parse(notation)
            result = start + interval

            return json.dumps(
                {
                    "status": "success",
                    "from": PitchInfo.from_pitch(start).model_dump(),
                    "to": PitchInfo.from_pitch(result).model_dump(),
                    "interval": str(interval),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_transpose"] = pitch_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_describe_note_name(note: str) -> str:
        """
        Describe a pitch class (a note name without octave).

        Args:
            note: Note name like 'Db', 'C#' or 'C♯/D♭'

        Returns:
            JSON string with the canonical spelling, label and class index

        Example:
            pitch_describe_note_name(note="Db")
        """
        try:
            name = to_note_name(note)
            return json.dumps(
                {"status": "success", "note_name": NoteNameInfo.from_note_name(name).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to describe note name")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_describe_note_name"] = pitch_describe_note_name

    return tools
