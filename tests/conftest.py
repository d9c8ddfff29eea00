"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_pitch import NoteName, Pitch


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """A fresh mock MCP server."""
    return MockMCPServer("test")


@pytest.fixture
def a4() -> Pitch:
    """Concert A, 440 Hz."""
    return Pitch.from_note(NoteName.A, 4)


@pytest.fixture
def middle_c() -> Pitch:
    """Middle C (C4)."""
    return Pitch.from_note(NoteName.C, 4)


@pytest.fixture
def sample_pitches() -> list[Pitch]:
    """Pitches across the range, including detuned and microtonal ones."""
    offsets = [-57.0, -21.5, -9.0, -0.6, -0.5, 0.0, 0.125, 0.4, 0.5, 3.0, 12.0, 27.33, 50.0]
    return [Pitch(offset) for offset in offsets]
