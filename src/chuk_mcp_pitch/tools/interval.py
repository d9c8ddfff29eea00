"""
Interval tools - MCP tools for measuring and listing intervals.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.core import NAMED_INTERVALS, Interval, Pitch, between
from chuk_mcp_pitch.models import IntervalInfo, PitchInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _resolve_pitch(value: str | float) -> Pitch:
    """Numbers are frequencies in Hz, text is pitch notation."""
    if isinstance(value, str):
        return Pitch.parse(value)
    return Pitch.from_frequency(value)


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def interval_between(start: str | float, end: str | float) -> str:
        """
        Measure the interval from one pitch to another.

        Each pitch may be notation ('A4') or a frequency in Hz (440.0).
        The result is positive when end is higher than start.

        Args:
            start: First pitch
            end: Second pitch

        Returns:
            JSON string with the interval and both pitches

        Example:
            interval_between(start="A4", end="E5")
        """
        try:
            a = _resolve_pitch(start)
            b = _resolve_pitch(end)
            interval = between(a, b)

            return json.dumps(
                {
                    "status": "success",
                    "interval": IntervalInfo.from_interval(interval).model_dump(),
                    "start": PitchInfo.from_pitch(a).model_dump(),
                    "end": PitchInfo.from_pitch(b).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_between"] = interval_between

    @mcp.tool  # type: ignore[arg-type]
    async def interval_from_cents(cents: float) -> str:
        """
        Convert cents to an interval.

        Args:
            cents: Interval size in cents (100 cents = 1 semitone)

        Returns:
            JSON string with the interval

        Example:
            interval_from_cents(cents=700)
        """
        try:
            interval = Interval.from_cents(cents)
            return json.dumps(
                {"status": "success", "interval": IntervalInfo.from_interval(interval).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to convert cents")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_from_cents"] = interval_from_cents

    @mcp.tool  # type: ignore[arg-type]
    async def interval_list_named() -> str:
        """
        List the named intervals from unison to octave.

        Returns:
            JSON string with each interval's name, short name and size

        Example:
            interval_list_named()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "intervals": [
                        {
                            "long_name": name.lower().replace("_", " "),
                            **IntervalInfo.from_interval(interval).model_dump(),
                        }
                        for name, interval in NAMED_INTERVALS.items()
                    ],
                    "count": len(NAMED_INTERVALS),
                }
            )
        except Exception as e:
            logger.exception("Failed to list intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_list_named"] = interval_list_named

    return tools
