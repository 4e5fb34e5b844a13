#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server provides MCP tools over a pitch / music-theory engine:
note names and pitch indices, intervals, scales and chords.

The server provides tools for:
- Describing notes (name, pitch index, octave, frequency)
- Moving notes by intervals and measuring distances
- Building chords by quality or by name, with inversions and figured bass
- Building scales, scale degrees and diatonic chords
- Listing the built-in and project vocabulary
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.constants import REFERENCE_FREQUENCY
from chuk_mcp_theory.tools import register_harmony_tools, register_note_tools
from chuk_mcp_theory.vocabulary import VocabularyLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

# Paths - use standard project structure, overridable from the environment
BASE_PATH = Path.cwd()
VOCABULARY_DIR = Path(os.getenv("CHUK_THEORY_VOCABULARY_DIR", str(BASE_PATH / "vocabulary")))
VOCABULARY_LIBRARY_PATH = Path(__file__).parent / "vocabulary" / "library"

# Frequency of A4 used in tool results
REFERENCE = float(os.getenv("CHUK_THEORY_REFERENCE_HZ", str(REFERENCE_FREQUENCY)))

vocabulary_loader = VocabularyLoader(
    library_path=VOCABULARY_LIBRARY_PATH,
    project_path=VOCABULARY_DIR,
)

# Register all tools
note_tools = register_note_tools(mcp, REFERENCE)
harmony_tools = register_harmony_tools(mcp, vocabulary_loader, REFERENCE)

# Export tool functions for direct access
theory_describe_note = note_tools["theory_describe_note"]
theory_transpose = note_tools["theory_transpose"]
theory_distance = note_tools["theory_distance"]
theory_set_octave = note_tools["theory_set_octave"]

theory_build_chord = harmony_tools["theory_build_chord"]
theory_chord_from_name = harmony_tools["theory_chord_from_name"]
theory_build_scale = harmony_tools["theory_build_scale"]
theory_scale_degree = harmony_tools["theory_scale_degree"]
theory_diatonic_chord = harmony_tools["theory_diatonic_chord"]
theory_list_vocabulary = harmony_tools["theory_list_vocabulary"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Vocabulary library: {VOCABULARY_LIBRARY_PATH}")
logger.info(f"  Project vocabulary: {VOCABULARY_DIR}")
logger.info(f"  Reference pitch: A4 = {REFERENCE} Hz")
