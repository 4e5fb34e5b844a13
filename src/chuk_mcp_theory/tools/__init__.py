"""
MCP tool implementations.

Tools are organized by domain:
- notes - Single notes: description, intervals, distance, octave
- harmony - Chords, scales and vocabulary
"""

from chuk_mcp_theory.tools.harmony import register_harmony_tools
from chuk_mcp_theory.tools.notes import register_note_tools

__all__ = [
    "register_harmony_tools",
    "register_note_tools",
]
