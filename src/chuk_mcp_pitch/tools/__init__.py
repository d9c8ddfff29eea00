"""
MCP tool implementations.

Tools are organized by domain:
- pitch - Pitch construction and description
- interval - Interval measurement and named intervals
"""

from chuk_mcp_pitch.tools.interval import register_interval_tools
from chuk_mcp_pitch.tools.pitch import register_pitch_tools

__all__ = [
    "register_interval_tools",
    "register_pitch_tools",
]
