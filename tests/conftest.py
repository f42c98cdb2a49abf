"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_theory_quiz.game.scorekeeper import Scorekeeper


class FakeClock:
    """A manually advanced clock for timing tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


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
def clock() -> FakeClock:
    """A fake clock starting at zero."""
    return FakeClock()


@pytest.fixture
def scorekeeper(clock: FakeClock) -> Scorekeeper:
    """A scorekeeper timed by the fake clock."""
    return Scorekeeper(clock=clock)


@pytest.fixture
def mcp() -> MockMCPServer:
    """A mock MCP server."""
    return MockMCPServer("test")
