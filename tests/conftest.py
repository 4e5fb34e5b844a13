"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

LIBRARY_PATH = Path(__file__).parent.parent / "src" / "chuk_mcp_theory" / "vocabulary" / "library"


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
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in vocabulary library."""
    return LIBRARY_PATH


@pytest.fixture
def mcp() -> MockMCPServer:
    """Mock MCP server."""
    return MockMCPServer("test")
