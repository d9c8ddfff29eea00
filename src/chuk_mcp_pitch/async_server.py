#!/usr/bin/env python3
"""
Async Pitch MCP Server using chuk-mcp-server

This server exposes the pitch core as MCP tools, so an assistant can
turn raw frequencies and note names into structured pitch data.

The server provides tools for:
- Identifying the pitch at a frequency
- Building pitches from note names, octaves and scientific pitch notation
- Transposing pitches by semitones or cents
- Measuring intervals between pitches
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pitch.constants import REFERENCE_FREQUENCY
from chuk_mcp_pitch.tools import register_interval_tools, register_pitch_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-pitch")

# Register all tools
pitch_tools = register_pitch_tools(mcp)
interval_tools = register_interval_tools(mcp)

# Export tool functions for direct access
pitch_from_frequency = pitch_tools["pitch_from_frequency"]
pitch_from_note = pitch_tools["pitch_from_note"]
pitch_parse = pitch_tools["pitch_parse"]
pitch_transpose = pitch_tools["pitch_transpose"]
pitch_describe_note_name = pitch_tools["pitch_describe_note_name"]

interval_between = interval_tools["interval_between"]
interval_from_cents = interval_tools["interval_from_cents"]
interval_list_named = interval_tools["interval_list_named"]

logger.info("CHUK Pitch MCP Server initialized")
logger.info(f"  Tuning: 12-TET, A4 = {REFERENCE_FREQUENCY} Hz")
logger.info(f"  Tools: {len(pitch_tools) + len(interval_tools)}")
